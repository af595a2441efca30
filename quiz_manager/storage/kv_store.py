"""KV Store - Provedores de persistencia chave -> documento JSON."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Contrato do provedor: get/set de strings opacas por chave."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryKVStore:
    """Store em memoria (testes e servidores efemeros)."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class FileKVStore:
    """Store em arquivos: um `<chave>.json` por chave dentro de `base_dir`.

    Escrita via arquivo temporario + rename, sem escrita parcial visivel.
    """

    _KEY_PATTERN = re.compile(r"^[A-Za-z0-9_\-.]+$")

    def __init__(self, base_dir: Path | str):
        self.base_dir = Path(base_dir)

    def _path(self, key: str) -> Path:
        if not self._KEY_PATTERN.match(key) or ".." in key:
            raise ValueError(f"Chave inválida para o store: {key!r}")
        return self.base_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)
        logger.debug(f"Documento salvo: {path}")
