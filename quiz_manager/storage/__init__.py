"""Quiz Storage - Provedores KV e repositorio."""

from .kv_store import FileKVStore, KeyValueStore, MemoryKVStore
from .repository import QuizRepository

__all__ = ["KeyValueStore", "MemoryKVStore", "FileKVStore", "QuizRepository"]
