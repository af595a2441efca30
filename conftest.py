# =============================================================================
# CONFTEST - Pytest Fixtures Globais
# =============================================================================
# Ambiente isolado: nada e gravado fora do diretorio temporario do teste
# =============================================================================

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Adicionar root ao path
sys.path.insert(0, str(Path(__file__).parent))


# =============================================================================
# FIXTURES DE AMBIENTE
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_env(tmp_path: Path):
    """Configura variáveis de ambiente para testes."""
    from quiz_manager.config import reset_config

    env_vars = {
        "QUIZ_STORAGE_BACKEND": "memory",
        "QUIZ_STORAGE_DIR": str(tmp_path / "quiz_data"),
        "LOG_LEVEL": "ERROR",  # Reduzir logs em testes
    }
    with patch.dict(os.environ, env_vars):
        reset_config()
        yield
    reset_config()


@pytest.fixture
def temp_storage_dir(tmp_path: Path) -> Path:
    """Retorna diretório temporário para o FileKVStore."""
    return tmp_path / "kv"
