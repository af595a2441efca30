"""Quiz Enums - Tipos de questao e estados de sessao."""

from enum import Enum


class QuestionType(str, Enum):
    """Tipos de questao suportados."""

    SINGLE = "single"  # Uma alternativa correta
    MULTIPLE = "multiple"  # Conjunto de alternativas corretas


class SessionStatus(str, Enum):
    """Ciclo de vida de uma tentativa."""

    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"
