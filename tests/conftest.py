# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Centraliza quizzes de exemplo, repositórios em memória e clientes HTTP
# =============================================================================

import copy
from datetime import datetime, timezone
from typing import Any

import pytest


# =============================================================================
# FIXTURES DE DOCUMENTOS
# =============================================================================


@pytest.fixture
def quiz_document() -> dict[str, Any]:
    """Documento de importação com uma questão single e uma multiple."""
    return {
        "title": "Geografia básica",
        "description": "Capitais e continentes",
        "questions": [
            {
                "id": 1,
                "text": "Qual é a capital da França?",
                "type": "single",
                "options": {"a": "Paris", "b": "Lyon", "c": "Marselha"},
                "answer": "a",
            },
            {
                "id": 2,
                "text": "Quais países ficam na América do Sul?",
                "type": "multiple",
                "options": {"a": "Brasil", "b": "Portugal", "c": "Chile", "d": "Egito"},
                "answer": ["a", "c"],
            },
        ],
    }


@pytest.fixture
def four_question_document() -> dict[str, Any]:
    """Documento com 4 questões single (gabarito sempre 'a')."""
    return {
        "title": "Quatro questões",
        "questions": [
            {
                "id": i,
                "text": f"Questão {i}",
                "type": "single",
                "options": {"a": "Certa", "b": "Errada"},
                "answer": "a",
            }
            for i in range(1, 5)
        ],
    }


# =============================================================================
# FIXTURES DE MODELOS
# =============================================================================


@pytest.fixture
def sample_quiz(quiz_document):
    """Quiz importado a partir do documento de exemplo."""
    from quiz_manager.engine.quiz_io import import_quiz

    return import_quiz(copy.deepcopy(quiz_document))


@pytest.fixture
def four_question_quiz(four_question_document):
    """Quiz com 4 questões single."""
    from quiz_manager.engine.quiz_io import import_quiz

    return import_quiz(copy.deepcopy(four_question_document))


@pytest.fixture
def make_attempt():
    """Factory de Attempt com valores padrão."""

    def _make_attempt(test_id: int, percentage: float, score: int = 0, total: int = 10, **kw):
        from quiz_manager.models.schemas import Attempt

        return Attempt(
            test_id=test_id,
            test_title=kw.get("test_title", f"Quiz {test_id}"),
            date=kw.get("date", datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)),
            score=score,
            total=total,
            percentage=percentage,
        )

    return _make_attempt


# =============================================================================
# FIXTURES DE STORAGE
# =============================================================================


@pytest.fixture
def memory_store():
    """KV store em memória vazio."""
    from quiz_manager.storage.kv_store import MemoryKVStore

    return MemoryKVStore()


@pytest.fixture
def repository(memory_store):
    """Repositório carregado sobre store em memória."""
    from quiz_manager.storage.repository import QuizRepository

    repo = QuizRepository(memory_store)
    repo.load()
    return repo


@pytest.fixture
def session(repository, sample_quiz):
    """Sessão com o quiz de exemplo já cadastrado no repositório."""
    from quiz_manager.engine.session import QuizSession

    repository.add_quiz(sample_quiz)
    return QuizSession(repository)


# =============================================================================
# FIXTURES DO FASTAPI
# =============================================================================


@pytest.fixture
def app_state_memory():
    """Inicializa app_state com store em memória e limpa ao final."""
    import app_state
    from quiz_manager.config import QuizConfig, StorageBackend
    from quiz_manager.storage.kv_store import MemoryKVStore

    store = MemoryKVStore()
    app_state.init_state(QuizConfig(storage_backend=StorageBackend.MEMORY), store=store)
    yield store
    app_state.cleanup()


@pytest.fixture
def client(app_state_memory):
    """Cliente de teste FastAPI."""
    from fastapi.testclient import TestClient
    from server import app

    return TestClient(app)


@pytest.fixture
def async_client(app_state_memory):
    """Cliente assíncrono para testes async."""
    from httpx import ASGITransport, AsyncClient
    from server import app

    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


# =============================================================================
# FIXTURES DE LOGGING
# =============================================================================


@pytest.fixture
def capture_logs(caplog):
    """Captura logs para verificação em testes."""
    import logging

    caplog.set_level(logging.DEBUG)
    return caplog
