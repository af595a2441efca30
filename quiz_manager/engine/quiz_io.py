"""Quiz Import/Export - Validacao de documentos e serializacao."""

from __future__ import annotations

import json
import logging
import threading
import time
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from ..exceptions import ImportFormatError, QuizParseError
from ..models.schemas import Quiz

logger = logging.getLogger(__name__)


class QuizIdGenerator:
    """Gera IDs de quiz a partir do tempo em ms, sempre crescentes."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            now_ms = int(time.time() * 1000)
            self._last = max(now_ms, self._last + 1)
            return self._last


_id_generator = QuizIdGenerator()


def import_quiz(document: Any, id_generator: QuizIdGenerator | None = None) -> Quiz:
    """Cria um Quiz a partir de um documento externo.

    Exige `title` nao vazio e `questions` como lista; em seguida valida
    cada questao (tipo, formato do answer, chaves existentes em options,
    IDs unicos, ao menos uma questao).

    Args:
        document: Documento JSON ja decodificado
        id_generator: Gerador de IDs (padrao: global do modulo)

    Returns:
        Quiz com id e createdAt novos

    Raises:
        ImportFormatError: Se o documento nao tiver formato valido
    """
    if not isinstance(document, dict):
        raise ImportFormatError(
            "Formato inválido! O documento deve ser um objeto JSON",
            details={"received": type(document).__name__},
        )

    title = document.get("title")
    questions = document.get("questions")
    if not title or not isinstance(title, str) or not isinstance(questions, list):
        raise ImportFormatError(
            "Formato inválido! Campos obrigatórios: title, questions",
            details={"has_title": bool(title), "questions_is_list": isinstance(questions, list)},
        )

    description = document.get("description") or ""
    generator = id_generator or _id_generator

    try:
        quiz = Quiz(
            id=generator.next_id(),
            title=title,
            description=description,
            questions=questions,
            created_at=datetime.now(timezone.utc),
        )
    except ValidationError as e:
        errors = [
            {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
            for err in e.errors()
        ]
        logger.warning(f"Importação rejeitada para '{title}': {len(errors)} erro(s)")
        raise ImportFormatError(
            "Formato inválido nas questões do quiz",
            details={"errors": errors},
        ) from e

    logger.info(f"Quiz importado: {quiz.id} ({len(quiz.questions)} questões)")
    return quiz


def parse_quiz_json(text: str, id_generator: QuizIdGenerator | None = None) -> Quiz:
    """Decodifica texto JSON e importa o quiz.

    Raises:
        QuizParseError: Se o texto nao for JSON valido
        ImportFormatError: Se o documento nao tiver formato valido
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise QuizParseError(
            f"Erro ao interpretar JSON: {e.msg}",
            details={"line": e.lineno, "column": e.colno},
        ) from e

    return import_quiz(document, id_generator=id_generator)


def export_quiz(quiz: Quiz) -> str:
    """Serializa o quiz como JSON indentado (formato de exportacao)."""
    return json.dumps(quiz.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)


def export_filename(quiz: Quiz) -> str:
    """Nome de arquivo sugerido para exportacao."""
    return f"test_{quiz.id}.json"


def example_quiz_document() -> dict[str, Any]:
    """Documento de exemplo com uma questao de cada tipo."""
    return {
        "title": "Título do quiz",
        "description": "Descrição do quiz (opcional)",
        "questions": [
            {
                "id": 1,
                "text": "Questão com uma resposta?",
                "type": "single",
                "options": {"a": "Alternativa A", "b": "Alternativa B", "c": "Alternativa C"},
                "answer": "a",
            },
            {
                "id": 2,
                "text": "Questão com várias respostas?",
                "type": "multiple",
                "options": {
                    "a": "Alternativa A",
                    "b": "Alternativa B",
                    "c": "Alternativa C",
                    "d": "Alternativa D",
                },
                "answer": ["a", "c"],
            },
        ],
    }
