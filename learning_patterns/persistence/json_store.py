"""Flat-file JSON document store.

Each document lives in its own ``<name>.json`` file under a root directory.
Blocking file I/O runs in a worker thread; writes land in a temporary file
that is atomically renamed into place.
"""

from __future__ import annotations

import asyncio
import json
import os
import re
import tempfile
import time
import weakref
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any
from uuid import UUID

import structlog

from learning_patterns.core.errors import StorageError, ValidationError
from learning_patterns.core.metrics import (
    pattern_storage_failures_total,
    pattern_storage_latency_seconds,
)

logger = structlog.get_logger(__name__)

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,128}$")


def validate_identifier(value: str, field: str = "id") -> str:
    """Reject identifiers that are unsafe to embed in a file name."""
    if not isinstance(value, str) or not IDENTIFIER_PATTERN.fullmatch(value):
        raise ValidationError(
            f"Invalid {field}",
            details={"field": field, "constraint": IDENTIFIER_PATTERN.pattern},
        )
    return value


def _json_default(value: Any) -> Any:
    """Serialize dataclasses and datetime/UUID values for JSON documents."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonFileStore:
    """Named JSON documents in a single directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = weakref.WeakValueDictionary()

    def path_for(self, name: str) -> Path:
        return self.root / f"{name}.json"

    def lock(self, name: str) -> asyncio.Lock:
        """Per-document lock serialising read-modify-write cycles in this process.

        Entries disappear once no caller holds a reference to the lock.
        """
        existing = self._locks.get(name)
        if existing is None:
            existing = asyncio.Lock()
            self._locks[name] = existing
        return existing

    async def read(self, name: str) -> Any | None:
        """Load a document, None when it does not exist."""
        return await self._run("read", self.path_for(name), self._read_sync, name)

    async def write(self, name: str, document: Any) -> None:
        await self._run("write", self.path_for(name), self._write_sync, name, document)

    async def delete(self, name: str) -> None:
        await self._run("delete", self.path_for(name), self._delete_sync, name)

    async def list_names(self, prefix: str) -> list[str]:
        """Names of documents starting with prefix, sorted."""
        return await self._run("list", self.root, self._list_sync, prefix)

    async def is_writable(self) -> bool:
        """Whether the root directory can be created and written to."""
        try:
            return await asyncio.to_thread(self._probe_sync)
        except OSError as exc:
            logger.warning("Storage directory not writable", path=str(self.root), error=str(exc))
            return False

    async def _run(self, operation: str, path: Path, func: Any, *args: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return await asyncio.to_thread(func, *args)
        except (OSError, json.JSONDecodeError) as exc:
            pattern_storage_failures_total.labels(operation=operation).inc()
            logger.error(
                "Storage operation failed",
                operation=operation,
                path=str(path),
                error=str(exc),
            )
            raise StorageError(f"Storage {operation} failed", path=str(path)) from exc
        finally:
            elapsed = time.perf_counter() - start_time
            pattern_storage_latency_seconds.labels(operation=operation).observe(elapsed)

    def _read_sync(self, name: str) -> Any | None:
        path = self.path_for(name)
        if not path.is_file():
            return None
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)

    def _write_sync(self, name: str, document: Any) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(document, indent=2, default=_json_default)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path_for(name))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _delete_sync(self, name: str) -> None:
        self.path_for(name).unlink(missing_ok=True)

    def _list_sync(self, prefix: str) -> list[str]:
        if not self.root.is_dir():
            return []
        return sorted(
            path.stem
            for path in self.root.iterdir()
            if path.suffix == ".json" and path.stem.startswith(prefix)
        )

    def _probe_sync(self) -> bool:
        self.root.mkdir(parents=True, exist_ok=True)
        return os.access(self.root, os.W_OK)
