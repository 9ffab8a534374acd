"""Storage wiring - one JSON document store per data directory."""

from __future__ import annotations

from dataclasses import dataclass

from learning_patterns.core.config import Settings, get_settings
from learning_patterns.persistence.json_store import JsonFileStore

_storage: StorageContext | None = None


@dataclass(frozen=True)
class StorageContext:
    profiles: JsonFileStore
    cognitive: JsonFileStore
    questions: JsonFileStore

    @classmethod
    def from_settings(cls, settings: Settings) -> StorageContext:
        storage = settings.storage
        return cls(
            profiles=JsonFileStore(storage.profiles_path),
            cognitive=JsonFileStore(storage.cognitive_path),
            questions=JsonFileStore(storage.questions_path),
        )

    def all_stores(self) -> dict[str, JsonFileStore]:
        return {
            "profiles": self.profiles,
            "cognitive": self.cognitive,
            "questions": self.questions,
        }


def get_storage() -> StorageContext:
    """Process-wide storage context, built lazily from settings."""
    global _storage
    if _storage is None:
        _storage = StorageContext.from_settings(get_settings())
    return _storage


def reset_storage() -> None:
    """Drop the cached context so the next call re-reads settings."""
    global _storage
    _storage = None
