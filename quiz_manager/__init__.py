"""Quiz Manager - Quizzes, sessoes de resposta, correcao e estatisticas.

Arquitetura:
- models/: Enums, Schemas Pydantic, Answer (single | multiple), SessionState
- engine/: GradingEngine, QuizSession, StatisticsEngine, import/export
- storage/: Provedores KV e QuizRepository
- router.py: FastAPI endpoints
"""

from .config import QuizConfig, get_config
from .engine import (
    GradingEngine,
    QuizSession,
    StatisticsEngine,
    check_answer,
    export_quiz,
    format_answer,
    import_quiz,
    parse_quiz_json,
)
from .exceptions import QuizError
from .models import Attempt, MultipleAnswer, Question, QuestionType, Quiz, SingleAnswer
from .storage import FileKVStore, MemoryKVStore, QuizRepository

__version__ = "0.1.0"

__all__ = [
    # Config
    "QuizConfig",
    "get_config",
    # Models
    "Quiz",
    "Question",
    "QuestionType",
    "Attempt",
    "SingleAnswer",
    "MultipleAnswer",
    # Engines
    "GradingEngine",
    "QuizSession",
    "StatisticsEngine",
    "check_answer",
    "format_answer",
    "import_quiz",
    "parse_quiz_json",
    "export_quiz",
    # Storage
    "QuizRepository",
    "MemoryKVStore",
    "FileKVStore",
    # Errors
    "QuizError",
]
