"""Quiz Grading Engine - Correcao de respostas e pontuacao."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ..models.answers import Answer, MultipleAnswer, SingleAnswer
from ..models.schemas import GradedResponse, Question, Quiz


def check_answer(user_answer: Answer | None, correct_answer: Answer) -> bool:
    """Compara resposta do usuario com o gabarito.

    Multipla escolha: mesmo tamanho e toda chave do usuario presente no
    gabarito. Escolha unica: igualdade exata da chave.

    Args:
        user_answer: Resposta registrada (None se nao respondida)
        correct_answer: Gabarito da questao

    Returns:
        True se correta
    """
    if user_answer is None:
        return False

    if isinstance(correct_answer, MultipleAnswer):
        if not isinstance(user_answer, MultipleAnswer):
            return False
        if len(user_answer.keys) != len(correct_answer.keys):
            return False
        return all(key in correct_answer.keys for key in user_answer.keys)

    if not isinstance(user_answer, SingleAnswer):
        return False
    return user_answer.key == correct_answer.key


def round_half_up(value: Decimal) -> float:
    """Arredonda para uma casa decimal com meios para cima (0.25 -> 0.3)."""
    return float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compute_percentage(score: int, total: int) -> float:
    """Percentual arredondado para uma casa decimal (0.0 se total == 0)."""
    if total <= 0:
        return 0.0
    return round_half_up(Decimal(score * 100) / Decimal(total))


def grade_question(question: Question, user_answer: Answer | None) -> GradedResponse:
    """Corrige uma questao."""
    return GradedResponse(
        question_id=question.id,
        user_answer=user_answer,
        is_correct=check_answer(user_answer, question.answer_key),
    )


@dataclass
class GradingOutcome:
    """Correcao completa de um quiz."""

    responses: list[GradedResponse]
    score: int
    total: int
    percentage: float


class GradingEngine:
    """Motor de correcao de quizzes.

    Corrige cada questao na ordem de exibicao. Questoes sem resposta
    contam como erradas; nao ha credito parcial.

    Example:
        >>> engine = GradingEngine()
        >>> outcome = engine.grade(quiz, {1: SingleAnswer(key="a")})
        >>> outcome.percentage
        50.0
    """

    def grade(self, quiz: Quiz, answers: dict[int | str, Answer]) -> GradingOutcome:
        """Corrige todas as questoes do quiz.

        Args:
            quiz: Quiz respondido
            answers: Respostas registradas (question_id -> Answer)

        Returns:
            GradingOutcome com respostas corrigidas, score, total e percentual
        """
        responses = [grade_question(q, answers.get(q.id)) for q in quiz.questions]
        score = sum(1 for r in responses if r.is_correct)
        total = len(quiz.questions)

        return GradingOutcome(
            responses=responses,
            score=score,
            total=total,
            percentage=compute_percentage(score, total),
        )
