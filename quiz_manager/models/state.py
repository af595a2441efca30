"""Session State - Estado de uma tentativa em andamento."""

from dataclasses import dataclass, field
from typing import Any

from .answers import Answer
from .enums import SessionStatus
from .schemas import Quiz, SubmissionResult


@dataclass
class SessionState:
    """Copia de trabalho de uma tentativa.

    Attributes:
        status: Fase do ciclo de vida (idle, in_progress, submitted)
        quiz: Quiz selecionado (None quando idle)
        answers: Respostas registradas (question_id -> Answer)
        result: Resultado da ultima submissao
    """

    status: SessionStatus = SessionStatus.IDLE
    quiz: Quiz | None = None
    answers: dict[int | str, Answer] = field(default_factory=dict)
    result: SubmissionResult | None = None

    def begin(self, quiz: Quiz) -> None:
        """Inicia nova tentativa descartando a anterior."""
        self.quiz = quiz
        self.answers = {}
        self.result = None
        self.status = SessionStatus.IN_PROGRESS

    def clear(self) -> None:
        """Volta ao estado idle."""
        self.quiz = None
        self.answers = {}
        self.result = None
        self.status = SessionStatus.IDLE

    def is_answered(self, question_id: int | str) -> bool:
        answer = self.answers.get(question_id)
        return answer is not None and not answer.is_empty

    def to_dict(self) -> dict[str, Any]:
        """Converte para dicionario (para inspecao/debug)."""
        return {
            "status": self.status.value,
            "quiz_id": self.quiz.id if self.quiz else None,
            "answers": {str(k): v.to_raw() for k, v in self.answers.items()},
            "submitted": self.result is not None,
        }
