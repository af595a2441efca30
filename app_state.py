"""Core module - shared state and helper functions."""

from __future__ import annotations

import logging
from typing import Optional

from quiz_manager.config import QuizConfig, StorageBackend, get_config
from quiz_manager.engine.session import QuizSession
from quiz_manager.engine.stats_engine import StatisticsEngine
from quiz_manager.storage.kv_store import FileKVStore, KeyValueStore, MemoryKVStore
from quiz_manager.storage.repository import QuizRepository

logger = logging.getLogger(__name__)

# Global instances (uma sessao por processo)
repository: Optional[QuizRepository] = None
session: Optional[QuizSession] = None
stats: Optional[StatisticsEngine] = None


# =============================================================================
# INITIALIZATION
# =============================================================================


def _build_store(config: QuizConfig) -> KeyValueStore:
    if config.storage_backend == StorageBackend.MEMORY:
        return MemoryKVStore()
    return FileKVStore(config.storage_dir)


def init_state(config: Optional[QuizConfig] = None, store: Optional[KeyValueStore] = None) -> None:
    """Carrega repositorio e cria sessao/estatisticas.

    Args:
        config: Configuracao (padrao: get_config())
        store: Provedor KV explicito (sobrepoe o backend configurado)
    """
    global repository, session, stats

    config = config or get_config()
    repository = QuizRepository(
        store or _build_store(config),
        tests_key=config.tests_key,
        stats_key=config.stats_key,
    )
    repository.load()
    session = QuizSession(repository)
    stats = StatisticsEngine(pass_threshold=config.pass_threshold)

    logger.info(
        f"Estado inicializado ({config.storage_backend.value}): "
        f"{len(repository.quizzes)} quizzes, {len(repository.attempts)} tentativas"
    )


def get_repository() -> QuizRepository:
    """Retorna repositorio global (inicializa sob demanda)."""
    if repository is None:
        init_state()
    return repository


def get_session() -> QuizSession:
    """Retorna sessao global (inicializa sob demanda)."""
    if session is None:
        init_state()
    return session


def get_stats() -> StatisticsEngine:
    """Retorna motor de estatisticas global (inicializa sob demanda)."""
    if stats is None:
        init_state()
    return stats


def cleanup() -> None:
    """Descarta instancias globais."""
    global repository, session, stats
    repository = None
    session = None
    stats = None
