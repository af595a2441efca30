"""Quiz Statistics Engine - Agregacao do historico de tentativas."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from ..exceptions import DataIntegrityError
from ..models.answers import Answer, MultipleAnswer
from ..models.schemas import (
    Attempt,
    AttemptRecord,
    GradedResponse,
    MistakeReview,
    Quiz,
    QuizSummary,
)
from .grading_engine import round_half_up

UNANSWERED = "Não respondida"
ANSWER_SEPARATOR = "; "


def _mean(percentages: list[float]) -> float:
    total = sum(Decimal(str(p)) for p in percentages)
    return round_half_up(total / len(percentages))


def _format_option(key: str, options: Mapping[str, str]) -> str:
    if key not in options:
        raise DataIntegrityError(
            f"Alternativa '{key}' não existe nas opções da questão",
            details={"key": key, "options": list(options)},
        )
    return f"{key.upper()}. {options[key]}"


def format_answer(answer: Answer | None, options: Mapping[str, str]) -> str:
    """Formata uma resposta para exibicao.

    Args:
        answer: Resposta (ou gabarito) a formatar
        options: Alternativas da questao (chave -> texto)

    Returns:
        "A. texto" para single; "A. texto; C. texto" para multiple, na ordem
        armazenada; placeholder se vazia

    Raises:
        DataIntegrityError: Se alguma chave nao existir em options
    """
    if answer is None or answer.is_empty:
        return UNANSWERED
    if isinstance(answer, MultipleAnswer):
        return ANSWER_SEPARATOR.join(_format_option(key, options) for key in answer.keys)
    return _format_option(answer.key, options)


def format_attempt_line(attempt: Attempt) -> str:
    """Linha do historico: data, acertos/total e percentual."""
    return (
        f"{attempt.date.strftime('%d.%m.%Y %H:%M:%S')}  "
        f"{attempt.score}/{attempt.total} ({attempt.percentage}%)"
    )


class StatisticsEngine:
    """Motor de estatisticas por quiz.

    Calcula quantidade de tentativas, media e melhor percentual a partir
    do historico completo, preservando a ordem de insercao.

    Example:
        >>> stats = StatisticsEngine(pass_threshold=70.0)
        >>> summary = stats.summarize(quiz, repository.attempts)
        >>> summary.best_percentage
        100.0
    """

    def __init__(self, pass_threshold: float = 70.0):
        self.pass_threshold = pass_threshold

    def summarize(self, quiz: Quiz, attempts: Iterable[Attempt]) -> QuizSummary | None:
        """Resume as tentativas de um quiz.

        Returns:
            QuizSummary, ou None se o quiz nao tiver tentativas
        """
        matching = [a for a in attempts if a.test_id == quiz.id]
        if not matching:
            return None

        percentages = [a.percentage for a in matching]
        return QuizSummary(
            quiz_id=quiz.id,
            quiz_title=quiz.title,
            attempt_count=len(matching),
            average_percentage=_mean(percentages),
            best_percentage=max(percentages),
            history=[
                AttemptRecord(
                    date=a.date,
                    score=a.score,
                    total=a.total,
                    percentage=a.percentage,
                    passed=a.is_passing(self.pass_threshold),
                )
                for a in matching
            ],
        )

    def summarize_all(
        self, quizzes: Iterable[Quiz], attempts: Iterable[Attempt]
    ) -> list[QuizSummary]:
        """Resume todos os quizzes com ao menos uma tentativa, na ordem dos quizzes."""
        attempts = list(attempts)
        summaries = (self.summarize(quiz, attempts) for quiz in quizzes)
        return [s for s in summaries if s is not None]

    def average_percentage(self, quiz_id: int, attempts: Iterable[Attempt]) -> float | None:
        """Media de um quiz para listagem (None se nunca respondido)."""
        percentages = [a.percentage for a in attempts if a.test_id == quiz_id]
        if not percentages:
            return None
        return _mean(percentages)

    def review_mistakes(
        self, quiz: Quiz, responses: Iterable[GradedResponse]
    ) -> list[MistakeReview]:
        """Lista as questoes erradas com resposta dada e gabarito formatados."""
        reviews = []
        for response in responses:
            if response.is_correct:
                continue
            question = quiz.get_question(response.question_id)
            if question is None:
                raise DataIntegrityError(
                    f"Questão {response.question_id} não pertence ao quiz {quiz.id}",
                    details={"quiz_id": quiz.id, "question_id": response.question_id},
                )
            reviews.append(
                MistakeReview(
                    question_id=question.id,
                    question_text=question.text,
                    user_answer=format_answer(response.user_answer, question.options),
                    correct_answer=format_answer(question.answer_key, question.options),
                )
            )
        return reviews
