"""Quiz Router - Endpoints FastAPI."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

import app_state

from .engine.quiz_io import example_quiz_document, export_filename, export_quiz, parse_quiz_json
from .engine.session import QuizSession
from .engine.stats_engine import StatisticsEngine
from .exceptions import (
    DataIntegrityError,
    ImportFormatError,
    InvalidAnswerError,
    QuestionNotFoundError,
    QuizError,
    QuizNotFoundError,
    QuizParseError,
    SessionStateError,
)
from .models.schemas import (
    ImportQuizRequest,
    Quiz,
    QuizListItem,
    QuizSummary,
    RecordAnswerRequest,
    SessionStatusResponse,
    SubmitResponse,
)
from .storage.repository import QuizRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz", tags=["Quiz"])

_STATUS_CODES: dict[type[QuizError], int] = {
    ImportFormatError: 400,
    QuizParseError: 400,
    InvalidAnswerError: 400,
    QuizNotFoundError: 404,
    QuestionNotFoundError: 404,
    SessionStateError: 409,
    DataIntegrityError: 500,
}


def _http_error(error: QuizError) -> HTTPException:
    """Converte erro de dominio em HTTPException."""
    status_code = _STATUS_CODES.get(type(error), 400)
    return HTTPException(status_code=status_code, detail=error.to_dict())


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


def get_repository() -> QuizRepository:
    """Dependency para obter o repositorio global."""
    return app_state.get_repository()


def get_session() -> QuizSession:
    """Dependency para obter a sessao global."""
    return app_state.get_session()


def get_stats() -> StatisticsEngine:
    """Dependency para obter o motor de estatisticas."""
    return app_state.get_stats()


def _get_quiz_or_404(repository: QuizRepository, quiz_id: int) -> Quiz:
    quiz = repository.get_quiz(quiz_id)
    if quiz is None:
        raise _http_error(QuizNotFoundError(f"Quiz {quiz_id} não encontrado", {"quiz_id": quiz_id}))
    return quiz


# =============================================================================
# QUIZ COLLECTION ENDPOINTS
# =============================================================================


@router.get("/tests", response_model=list[QuizListItem])
def list_quizzes(
    repository: QuizRepository = Depends(get_repository),
    stats: StatisticsEngine = Depends(get_stats),
):
    """Lista quizzes com contagem de questoes e media das tentativas."""
    attempts = repository.attempts
    return [
        QuizListItem(
            id=quiz.id,
            title=quiz.title,
            description=quiz.description,
            question_count=len(quiz.questions),
            created_at=quiz.created_at,
            average_percentage=stats.average_percentage(quiz.id, attempts),
        )
        for quiz in repository.quizzes
    ]


@router.get("/tests/example")
def get_example_document():
    """Retorna documento de exemplo para importacao."""
    return example_quiz_document()


@router.post("/tests/import", response_model=Quiz, response_model_by_alias=True, status_code=201)
def import_quiz_endpoint(
    request: ImportQuizRequest,
    repository: QuizRepository = Depends(get_repository),
):
    """Importa quiz a partir de texto JSON.

    - JSON malformado: 400 com a mensagem do parser
    - Sem title/questions ou questoes invalidas: 400 com detalhes
    - Nenhum estado e alterado em caso de erro
    """
    try:
        quiz = parse_quiz_json(request.json_text)
    except (QuizParseError, ImportFormatError) as e:
        logger.warning(f"Importação rejeitada: {e.message}")
        raise _http_error(e) from e

    repository.add_quiz(quiz)
    return quiz


@router.get("/tests/{quiz_id}/export")
def export_quiz_endpoint(
    quiz_id: int,
    repository: QuizRepository = Depends(get_repository),
):
    """Exporta quiz como arquivo JSON (test_<id>.json)."""
    quiz = _get_quiz_or_404(repository, quiz_id)
    return Response(
        content=export_quiz(quiz),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(quiz)}"'},
    )


@router.delete("/tests/{quiz_id}")
def delete_quiz(
    quiz_id: int,
    repository: QuizRepository = Depends(get_repository),
):
    """Remove quiz e todas as tentativas dele."""
    try:
        removed = repository.remove_quiz(quiz_id)
    except QuizNotFoundError as e:
        raise _http_error(e) from e

    return {"quiz_id": quiz_id, "deleted": True, "attempts_removed": removed}


# =============================================================================
# SESSION ENDPOINTS
# =============================================================================


def _session_status(session: QuizSession) -> SessionStatusResponse:
    quiz = session.quiz
    return SessionStatusResponse(
        status=session.status,
        quiz_id=quiz.id if quiz else None,
        quiz_title=quiz.title if quiz else None,
        answered_count=session.answered_count,
        total_questions=len(quiz.questions) if quiz else 0,
        complete=session.is_complete(),
    )


@router.post("/session/start/{quiz_id}", response_model=SessionStatusResponse)
def start_session(
    quiz_id: int,
    repository: QuizRepository = Depends(get_repository),
    session: QuizSession = Depends(get_session),
):
    """Inicia tentativa, descartando qualquer tentativa anterior."""
    quiz = _get_quiz_or_404(repository, quiz_id)
    session.start(quiz)
    return _session_status(session)


@router.get("/session", response_model=SessionStatusResponse)
def get_session_status(session: QuizSession = Depends(get_session)):
    """Retorna estado da sessao (respondidas X de N, pronta para enviar)."""
    return _session_status(session)


@router.post("/session/answer", response_model=SessionStatusResponse)
def record_answer(
    request: RecordAnswerRequest,
    session: QuizSession = Depends(get_session),
):
    """Registra resposta. Para multiple, envie o conjunto completo selecionado."""
    try:
        session.record_answer(request.question_id, request.value)
    except (SessionStateError, QuestionNotFoundError, InvalidAnswerError) as e:
        raise _http_error(e) from e

    return _session_status(session)


@router.post("/session/submit", response_model=SubmitResponse, response_model_by_alias=True)
def submit_session(
    session: QuizSession = Depends(get_session),
    stats: StatisticsEngine = Depends(get_stats),
):
    """Corrige a tentativa, registra no historico e retorna a revisao dos erros."""
    try:
        result = session.submit()
        mistakes = stats.review_mistakes(session.quiz, result.responses)
    except (SessionStateError, QuizNotFoundError, DataIntegrityError) as e:
        raise _http_error(e) from e

    return SubmitResponse(
        attempt=result.attempt,
        responses=result.responses,
        mistakes=mistakes,
        passed=result.attempt.is_passing(stats.pass_threshold),
    )


# =============================================================================
# STATISTICS ENDPOINTS
# =============================================================================


@router.get("/stats", response_model=list[QuizSummary])
def get_all_stats(
    repository: QuizRepository = Depends(get_repository),
    stats: StatisticsEngine = Depends(get_stats),
):
    """Estatisticas de todos os quizzes com ao menos uma tentativa."""
    return stats.summarize_all(repository.quizzes, repository.attempts)


@router.get("/stats/{quiz_id}", response_model=QuizSummary | None)
def get_quiz_stats(
    quiz_id: int,
    repository: QuizRepository = Depends(get_repository),
    stats: StatisticsEngine = Depends(get_stats),
):
    """Estatisticas de um quiz (null se nunca respondido)."""
    quiz = _get_quiz_or_404(repository, quiz_id)
    return stats.summarize(quiz, repository.attempts)
