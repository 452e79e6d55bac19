"""Whole-file JSON list persistence.

Every store in this service is a single JSON array on disk that is read in
full and rewritten in full on each mutation. File I/O runs in a worker
thread so the event loop is never blocked.

Example:
    class SubscriptionRepository(JsonListRepository[Subscription]):
        async def list_all(self) -> list[Subscription]:
            return await self._load()
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from vocab_service.core.exceptions import PersistenceError

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class JsonListFile:
    """A JSON array stored in a single file, replaced atomically on write."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    async def initialize(self) -> None:
        """Create the file holding an empty list if it does not exist yet."""

        def _init() -> bool:
            if self.path.exists():
                return False
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write_sync([])
            return True

        try:
            created = await asyncio.to_thread(_init)
        except OSError as exc:
            logger.exception("Failed to initialize data file", extra={"path": str(self.path)})
            raise PersistenceError(f"Cannot initialize {self.path.name}", path=str(self.path)) from exc
        if created:
            logger.info("Created empty data file", extra={"path": str(self.path)})

    async def read(self) -> list[dict[str, Any]]:
        """Read and decode the whole list.

        Raises:
            PersistenceError: The file is unreadable or does not hold a JSON array.
        """
        try:
            data = await asyncio.to_thread(self._read_sync)
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self.path.name}", path=str(self.path)) from exc
        if not isinstance(data, list):
            raise PersistenceError(
                f"{self.path.name} does not contain a JSON array", path=str(self.path)
            )
        return data

    async def write(self, records: list[dict[str, Any]]) -> None:
        """Overwrite the whole list.

        Raises:
            PersistenceError: The file could not be written.
        """
        try:
            await asyncio.to_thread(self._write_sync, records)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Cannot write {self.path.name}", path=str(self.path)) from exc

    def _read_sync(self) -> Any:
        if not self.path.exists():
            return []
        return json.loads(self.path.read_text(encoding="utf-8"))

    def _write_sync(self, records: list[dict[str, Any]]) -> None:
        # Write a sibling temp file then rename so readers never see a partial file
        tmp_path = self.path.with_name(f".{self.path.name}.{os.getpid()}.tmp")
        tmp_path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp_path, self.path)


class JsonListRepository(Generic[T]):
    """Base repository over a JsonListFile holding records of one model type.

    Keeps the last successfully read or written snapshot in memory. A failed
    read degrades to that snapshot; a failed write raises PersistenceError and
    leaves the snapshot untouched. Read-modify-write cycles inside one process
    are serialized with an asyncio.Lock; across processes the file is still
    last-writer-wins.
    """

    def __init__(self, model: type[T], path: Path) -> None:
        self.model = model
        self.file = JsonListFile(path)
        self._adapter = TypeAdapter(list[model])
        self._snapshot: list[T] = []
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self.file.path

    async def initialize(self) -> None:
        """Create the backing file if needed and warm the in-memory snapshot."""
        await self.file.initialize()
        await self._load()

    async def _load(self) -> list[T]:
        try:
            raw = await self.file.read()
            records = self._adapter.validate_python(raw)
        except (PersistenceError, PydanticValidationError):
            logger.exception(
                "Failed to read %s, serving last known state",
                self.model.__name__,
                extra={"path": str(self.path), "cached_records": len(self._snapshot)},
            )
            return list(self._snapshot)
        self._snapshot = list(records)
        return list(records)

    async def _save(self, records: list[T]) -> None:
        payload = [record.model_dump(mode="json", by_alias=True) for record in records]
        try:
            await self.file.write(payload)
        except PersistenceError:
            logger.exception(
                "Failed to write %s",
                self.model.__name__,
                extra={"path": str(self.path), "records": len(records)},
            )
            raise
        self._snapshot = list(records)
