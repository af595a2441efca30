"""Quiz Session - Controle do ciclo de vida de uma tentativa."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from ..exceptions import (
    InvalidAnswerError,
    QuestionNotFoundError,
    QuizNotFoundError,
    SessionStateError,
)
from ..models.answers import Answer, MultipleAnswer, SingleAnswer, make_answer
from ..models.enums import SessionStatus
from ..models.schemas import Attempt, Quiz, SubmissionResult
from ..models.state import SessionState
from .grading_engine import GradingEngine

if TYPE_CHECKING:
    from ..storage.repository import QuizRepository

logger = logging.getLogger(__name__)


def toggle_key(current: list[str] | tuple[str, ...] | None, key: str) -> list[str]:
    """Alterna uma chave no conjunto selecionado (remove se presente, senao adiciona)."""
    keys = list(current or [])
    if key in keys:
        return [k for k in keys if k != key]
    return keys + [key]


class QuizSession:
    """Sessao de uma tentativa: idle -> in_progress -> submitted.

    Mantem uma copia de trabalho do quiz escolhido e das respostas. Iniciar
    uma nova tentativa descarta a anterior; apenas uma tentativa por vez.

    Example:
        >>> session = QuizSession(repository)
        >>> session.start(quiz)
        >>> session.record_answer(1, "a")
        >>> session.record_answer(2, ["a", "c"])
        >>> session.is_complete()
        True
        >>> result = session.submit()
    """

    def __init__(self, repository: QuizRepository, grading: GradingEngine | None = None):
        self.repository = repository
        self.grading = grading or GradingEngine()
        self.state = SessionState()

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def quiz(self) -> Quiz | None:
        return self.state.quiz

    @property
    def result(self) -> SubmissionResult | None:
        return self.state.result

    @property
    def answers(self) -> dict[int | str, Answer]:
        return dict(self.state.answers)

    @property
    def answered_count(self) -> int:
        return sum(1 for qid in self.state.answers if self.state.is_answered(qid))

    def start(self, quiz: Quiz) -> None:
        """Inicia tentativa para o quiz, limpando respostas e resultado anteriores."""
        if self.state.status == SessionStatus.IN_PROGRESS:
            logger.debug(f"Tentativa do quiz {self.state.quiz.id} descartada")
        self.state.begin(quiz)
        logger.info(f"Tentativa iniciada: quiz {quiz.id}")

    def reset(self) -> None:
        """Descarta a sessao e volta para idle."""
        self.state.clear()

    def _require_in_progress(self, operation: str) -> Quiz:
        if self.state.status != SessionStatus.IN_PROGRESS or self.state.quiz is None:
            raise SessionStateError(
                f"Operação '{operation}' exige uma tentativa em andamento",
                details={"status": self.state.status.value},
            )
        return self.state.quiz

    def record_answer(self, question_id: int | str, value: str | list[str] | Answer) -> None:
        """Registra (ou substitui) a resposta de uma questao.

        Para questoes multiple, `value` e o conjunto completo ja alternado
        pelo chamador (ver `toggle_key`).

        Raises:
            SessionStateError: Se nao houver tentativa em andamento
            QuestionNotFoundError: Se a questao nao pertence ao quiz
            InvalidAnswerError: Se o formato ou as chaves forem invalidos
        """
        quiz = self._require_in_progress("record_answer")
        question = quiz.get_question(question_id)
        if question is None:
            raise QuestionNotFoundError(
                f"Questão {question_id} não encontrada no quiz",
                details={"quiz_id": quiz.id, "question_id": question_id},
            )

        if isinstance(value, (SingleAnswer, MultipleAnswer)):
            expected = MultipleAnswer if question.is_multiple else SingleAnswer
            if not isinstance(value, expected):
                raise InvalidAnswerError(
                    f"Tipo de resposta incompatível com a questão {question.id}",
                    details={"question_type": question.type.value, "kind": value.kind},
                )
            answer = value
        else:
            try:
                answer = make_answer(question.type, value)
            except TypeError as e:
                raise InvalidAnswerError(
                    str(e),
                    details={"question_id": question.id, "question_type": question.type.value},
                ) from e

        keys = answer.keys if isinstance(answer, MultipleAnswer) else (answer.key,)
        unknown = [key for key in keys if key not in question.options]
        if unknown:
            raise InvalidAnswerError(
                f"Alternativas inexistentes na questão {question.id}: {unknown}",
                details={"question_id": question.id, "unknown_keys": unknown},
            )

        self.state.answers[question.id] = answer

    def is_complete(self) -> bool:
        """True se todas as questoes possuem resposta nao vazia."""
        if self.state.status != SessionStatus.IN_PROGRESS or self.state.quiz is None:
            return False
        return all(self.state.is_answered(q.id) for q in self.state.quiz.questions)

    def submit(self) -> SubmissionResult:
        """Corrige a tentativa, registra o Attempt no repositorio e encerra.

        Submissao parcial e permitida: questoes sem resposta contam como erradas.

        Raises:
            SessionStateError: Se nao houver tentativa em andamento
            QuizNotFoundError: Se o quiz foi removido durante a tentativa
        """
        quiz = self._require_in_progress("submit")
        if self.repository.get_quiz(quiz.id) is None:
            self.state.clear()
            logger.warning(f"Submissão descartada: quiz {quiz.id} removido durante a tentativa")
            raise QuizNotFoundError(f"Quiz {quiz.id} não encontrado", details={"quiz_id": quiz.id})

        outcome = self.grading.grade(quiz, self.state.answers)

        attempt = Attempt(
            test_id=quiz.id,
            test_title=quiz.title,
            date=datetime.now(timezone.utc),
            score=outcome.score,
            total=outcome.total,
            percentage=outcome.percentage,
        )
        self.repository.add_attempt(attempt)

        result = SubmissionResult(attempt=attempt, responses=outcome.responses)
        self.state.result = result
        self.state.status = SessionStatus.SUBMITTED

        logger.info(
            f"Tentativa submetida: quiz {quiz.id} - "
            f"{outcome.score}/{outcome.total} ({outcome.percentage}%)"
        )
        return result
