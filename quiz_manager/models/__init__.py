"""Quiz Models - Enums, Schemas, Answers e State."""

from .answers import Answer, MultipleAnswer, SingleAnswer, make_answer
from .enums import QuestionType, SessionStatus
from .schemas import (
    Attempt,
    AttemptRecord,
    GradedResponse,
    ImportQuizRequest,
    MistakeReview,
    Question,
    Quiz,
    QuizListItem,
    QuizSummary,
    RecordAnswerRequest,
    SessionStatusResponse,
    SubmissionResult,
    SubmitResponse,
)
from .state import SessionState

__all__ = [
    # Enums
    "QuestionType",
    "SessionStatus",
    # Answers
    "Answer",
    "SingleAnswer",
    "MultipleAnswer",
    "make_answer",
    # Schemas
    "Question",
    "Quiz",
    "Attempt",
    "GradedResponse",
    "SubmissionResult",
    "AttemptRecord",
    "QuizSummary",
    "MistakeReview",
    "ImportQuizRequest",
    "QuizListItem",
    "RecordAnswerRequest",
    "SessionStatusResponse",
    "SubmitResponse",
    # State
    "SessionState",
]
