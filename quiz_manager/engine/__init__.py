"""Quiz Engines - Logica de negocios."""

from .grading_engine import GradingEngine, check_answer, compute_percentage
from .quiz_io import export_filename, export_quiz, import_quiz, parse_quiz_json
from .session import QuizSession, toggle_key
from .stats_engine import StatisticsEngine, format_answer

__all__ = [
    "GradingEngine",
    "QuizSession",
    "StatisticsEngine",
    "check_answer",
    "compute_percentage",
    "format_answer",
    "toggle_key",
    "import_quiz",
    "parse_quiz_json",
    "export_quiz",
    "export_filename",
]
