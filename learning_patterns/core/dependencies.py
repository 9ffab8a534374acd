"""Dependency injection type aliases."""

from typing import Annotated

from fastapi import Depends

from learning_patterns.core.storage import StorageContext, get_storage

Storage = Annotated[StorageContext, Depends(get_storage)]

__all__ = [
    "Storage",
]
