"""Quiz Exceptions - Hierarquia de erros do dominio."""

from typing import Any


class QuizError(Exception):
    """Erro base do quiz manager.

    Attributes:
        message: Mensagem legivel para o usuario
        details: Contexto estruturado (campo, id, erro original)
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Converte para dicionario (resposta HTTP)."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class ImportFormatError(QuizError):
    """Documento de importacao sem title/questions validos."""


class QuizParseError(QuizError):
    """Texto JSON de importacao malformado."""


class PersistenceCorruptionError(QuizError):
    """Documento persistido nao pode ser lido."""


class DataIntegrityError(QuizError):
    """Resposta referencia uma alternativa inexistente."""


class SessionStateError(QuizError):
    """Operacao invalida para o estado atual da sessao."""


class QuestionNotFoundError(QuizError):
    """Questao nao pertence ao quiz ativo."""


class InvalidAnswerError(QuizError):
    """Resposta com formato ou alternativa invalida."""


class QuizNotFoundError(QuizError):
    """Quiz nao existe no repositorio."""
