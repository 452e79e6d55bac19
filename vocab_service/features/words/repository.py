"""Word store: dictionary entries persisted as a JSON list."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from vocab_service.features.words.schemas import DictionaryEntry
from vocab_service.infra.persistence import JsonListRepository

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class WordRepository(JsonListRepository[DictionaryEntry]):
    """Ordered collection of dictionary entries, unique by case-insensitive word."""

    def __init__(self, path: Path) -> None:
        super().__init__(DictionaryEntry, path)

    async def list_all(self) -> list[DictionaryEntry]:
        """Return all entries in insertion order."""
        return await self._load()

    async def upsert(self, word: str, meaning: str) -> list[DictionaryEntry]:
        """Add a word, or replace the meaning of an existing one.

        Words are matched case-insensitively after trimming. An existing entry
        keeps its id, spelling and ``createdAt``.

        Returns:
            The full dictionary after the change.

        Raises:
            PersistenceError: The store could not be written.
        """
        word = word.strip()
        meaning = meaning.strip()
        key = word.casefold()

        now = datetime.now(UTC)

        async with self._lock:
            entries = await self._load()
            for index, entry in enumerate(entries):
                if entry.word.casefold() == key:
                    entries[index] = entry.model_copy(
                        update={"meaning": meaning, "updated_at": now}
                    )
                    action = "updated"
                    break
            else:
                entries.append(
                    DictionaryEntry(word=word, meaning=meaning, created_at=now, updated_at=now)
                )
                action = "added"
            await self._save(entries)

        logger.info("Word %s", action, extra={"word": word, "entries": len(entries)})
        return entries

    async def delete(self, entry_id: str) -> list[DictionaryEntry]:
        """Remove the entry with the given id; unknown ids leave the store unchanged.

        Returns:
            The full dictionary after the change.
        """
        async with self._lock:
            entries = await self._load()
            kept = [entry for entry in entries if entry.id != entry_id]
            if len(kept) == len(entries):
                logger.debug("Word id not found", extra={"entry_id": entry_id})
                return kept
            await self._save(kept)

        logger.info("Word deleted", extra={"entry_id": entry_id, "entries": len(kept)})
        return kept

    async def search(self, query: str) -> list[DictionaryEntry]:
        """Return entries whose word or meaning contains ``query`` (case-insensitive)."""
        needle = query.casefold()
        if not needle:
            return []
        return [
            entry
            for entry in await self._load()
            if needle in entry.word.casefold() or needle in entry.meaning.casefold()
        ]


_word_repository: WordRepository | None = None


def get_word_repository() -> WordRepository:
    """Get WordRepository singleton instance bound to the configured file."""
    global _word_repository
    if _word_repository is None:
        from vocab_service.core.settings import get_storage_settings

        _word_repository = WordRepository(get_storage_settings().dictionary_path)
    return _word_repository


def reset_word_repository() -> None:
    """Drop the singleton so the next call rebinds to current settings."""
    global _word_repository
    _word_repository = None
