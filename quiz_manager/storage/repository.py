"""Quiz Repository - Colecoes de quizzes e tentativas com persistencia."""

from __future__ import annotations

import json
import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import PersistenceCorruptionError, QuizNotFoundError
from ..models.schemas import Attempt, Quiz
from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class QuizRepository:
    """Dono exclusivo das colecoes de quizzes e tentativas.

    Persiste cada colecao como um array JSON em uma chave propria do
    provedor. Toda mutacao salva antes de retornar.

    Estrutura de chaves:
        - {tests_key} -> lista de Quiz
        - {stats_key} -> lista de Attempt (ordem de insercao)

    Example:
        >>> repo = QuizRepository(MemoryKVStore())
        >>> repo.load()
        >>> repo.add_quiz(quiz)
        >>> repo.remove_quiz(quiz.id)
    """

    def __init__(
        self,
        store: KeyValueStore,
        tests_key: str = "quizTests",
        stats_key: str = "quizStats",
    ):
        self.store = store
        self.tests_key = tests_key
        self.stats_key = stats_key
        self._quizzes: list[Quiz] = []
        self._attempts: list[Attempt] = []

    @property
    def quizzes(self) -> tuple[Quiz, ...]:
        return tuple(self._quizzes)

    @property
    def attempts(self) -> tuple[Attempt, ...]:
        return tuple(self._attempts)

    # -------------------------------------------------------------------------
    # Persistencia
    # -------------------------------------------------------------------------

    def _decode(self, key: str, model: type[ModelT]) -> list[ModelT]:
        """Decodifica um documento, ignorando registros invalidos.

        Raises:
            PersistenceCorruptionError: Se o documento nao for um array JSON legivel
        """
        try:
            raw = self.store.get(key)
            if raw is None:
                return []
            records = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PersistenceCorruptionError(
                f"Documento '{key}' corrompido",
                details={"key": key, "error": str(e)[:200]},
            ) from e

        if not isinstance(records, list):
            raise PersistenceCorruptionError(
                f"Documento '{key}' corrompido",
                details={"key": key, "error": f"esperado array, recebido {type(records).__name__}"},
            )

        items = []
        for index, record in enumerate(records):
            try:
                items.append(model.model_validate(record))
            except ValidationError as e:
                logger.warning(
                    f"Registro {index} de '{key}' inválido, ignorado ({e.error_count()} erro(s))"
                )
        return items

    def _load_collection(self, key: str, model: type[ModelT]) -> list[ModelT]:
        try:
            return self._decode(key, model)
        except PersistenceCorruptionError as e:
            logger.warning(f"{e.message}; usando coleção vazia ({e.details['error']})")
            return []

    def load(self) -> tuple[list[Quiz], list[Attempt]]:
        """Carrega as duas colecoes do provedor.

        Documento corrompido em qualquer chave vira colecao vazia; registros
        invalidos dentro de um documento legivel sao descartados individualmente.

        Returns:
            Tuple de (quizzes, attempts)
        """
        self._quizzes = self._load_collection(self.tests_key, Quiz)
        self._attempts = self._load_collection(self.stats_key, Attempt)
        logger.debug(
            f"Repositório carregado: {len(self._quizzes)} quizzes, "
            f"{len(self._attempts)} tentativas"
        )
        return list(self._quizzes), list(self._attempts)

    def _dump(self, items: list[BaseModel]) -> str:
        return json.dumps(
            [item.model_dump(mode="json", by_alias=True) for item in items],
            ensure_ascii=False,
        )

    def save(self) -> None:
        """Persiste as duas colecoes."""
        self.store.set(self.tests_key, self._dump(self._quizzes))
        self.store.set(self.stats_key, self._dump(self._attempts))

    # -------------------------------------------------------------------------
    # Mutacoes
    # -------------------------------------------------------------------------

    def add_quiz(self, quiz: Quiz) -> None:
        """Adiciona quiz e persiste."""
        self._quizzes.append(quiz)
        self.save()
        logger.info(f"Quiz adicionado: {quiz.id} - {quiz.title}")

    def remove_quiz(self, quiz_id: int) -> int:
        """Remove quiz e todas as tentativas dele.

        Returns:
            Numero de tentativas removidas em cascata

        Raises:
            QuizNotFoundError: Se o quiz nao existir
        """
        if self.get_quiz(quiz_id) is None:
            raise QuizNotFoundError(f"Quiz {quiz_id} não encontrado", details={"quiz_id": quiz_id})

        before = len(self._attempts)
        self._quizzes = [q for q in self._quizzes if q.id != quiz_id]
        self._attempts = [a for a in self._attempts if a.test_id != quiz_id]
        removed = before - len(self._attempts)
        self.save()

        logger.info(f"Quiz deletado: {quiz_id} ({removed} tentativas removidas)")
        return removed

    def add_attempt(self, attempt: Attempt) -> None:
        """Registra tentativa e persiste."""
        self._attempts.append(attempt)
        self.save()

    # -------------------------------------------------------------------------
    # Consultas
    # -------------------------------------------------------------------------

    def get_quiz(self, quiz_id: int) -> Quiz | None:
        for quiz in self._quizzes:
            if quiz.id == quiz_id:
                return quiz
        return None

    def attempts_for(self, quiz_id: int) -> list[Attempt]:
        return [a for a in self._attempts if a.test_id == quiz_id]
