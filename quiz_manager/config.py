# =============================================================================
# CONFIGURACAO - Quiz Manager
# =============================================================================

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class StorageBackend(str, Enum):
    """Backends de persistencia disponiveis."""

    FILE = "file"
    MEMORY = "memory"


@dataclass
class QuizConfig:
    """Configuracao centralizada do quiz manager.

    Attributes:
        storage_backend: Onde os documentos JSON sao guardados
        storage_dir: Diretorio do backend de arquivos
        tests_key: Chave da colecao de quizzes
        stats_key: Chave do historico de tentativas
        pass_threshold: Percentual minimo para considerar aprovado
        log_level: Nivel de log do servidor
    """

    storage_backend: StorageBackend = StorageBackend.FILE
    storage_dir: Path = Path.cwd() / ".quiz_data"
    tests_key: str = "quizTests"
    stats_key: str = "quizStats"
    pass_threshold: float = 70.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "QuizConfig":
        """Cria configuracao a partir de variaveis de ambiente."""
        return cls(
            storage_backend=StorageBackend(
                os.getenv("QUIZ_STORAGE_BACKEND", StorageBackend.FILE.value).lower()
            ),
            storage_dir=Path(os.getenv("QUIZ_STORAGE_DIR", str(Path.cwd() / ".quiz_data"))),
            tests_key=os.getenv("QUIZ_TESTS_KEY", "quizTests"),
            stats_key=os.getenv("QUIZ_STATS_KEY", "quizStats"),
            pass_threshold=float(os.getenv("QUIZ_PASS_THRESHOLD", "70.0")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


_config: QuizConfig | None = None


def get_config() -> QuizConfig:
    """Retorna configuracao global (carregada uma vez do ambiente)."""
    global _config
    if _config is None:
        _config = QuizConfig.from_env()
    return _config


def reset_config() -> None:
    """Descarta configuracao em cache (usado nos testes)."""
    global _config
    _config = None
