"""Unit tests for JSON list persistence."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest
from pydantic import BaseModel

from vocab_service.core.exceptions import PersistenceError
from vocab_service.infra.persistence import JsonListFile, JsonListRepository


class Note(BaseModel):
    text: str


class NoteRepository(JsonListRepository[Note]):
    async def list_all(self) -> list[Note]:
        return await self._load()

    async def replace(self, notes: list[Note]) -> None:
        await self._save(notes)


@pytest.mark.unit
class TestJsonListFile:
    """Test suite for JsonListFile."""

    @pytest.mark.asyncio
    async def test_initialize_creates_parent_and_empty_list(self, tmp_path):
        path = tmp_path / "nested" / "notes.json"

        await JsonListFile(path).initialize()

        assert json.loads(path.read_text(encoding="utf-8")) == []

    @pytest.mark.asyncio
    async def test_initialize_keeps_existing_file(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text('[{"text": "keep"}]', encoding="utf-8")

        await JsonListFile(path).initialize()

        assert json.loads(path.read_text(encoding="utf-8")) == [{"text": "keep"}]

    @pytest.mark.asyncio
    async def test_missing_file_reads_as_empty(self, tmp_path):
        assert await JsonListFile(tmp_path / "absent.json").read() == []

    @pytest.mark.asyncio
    async def test_write_replaces_whole_file(self, tmp_path):
        file = JsonListFile(tmp_path / "notes.json")
        await file.write([{"text": "a"}, {"text": "b"}])
        await file.write([{"text": "c"}])

        assert await file.read() == [{"text": "c"}]
        assert [p.name for p in tmp_path.iterdir()] == ["notes.json"]

    @pytest.mark.asyncio
    async def test_write_keeps_unicode(self, tmp_path):
        file = JsonListFile(tmp_path / "notes.json")

        await file.write([{"text": "Schadenfreude 📚"}])

        assert "📚" in file.path.read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_non_list_content_raises(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text('{"text": "not a list"}', encoding="utf-8")

        with pytest.raises(PersistenceError, match="does not contain a JSON array"):
            await JsonListFile(path).read()

    @pytest.mark.asyncio
    async def test_corrupt_content_raises(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(PersistenceError):
            await JsonListFile(path).read()


@pytest.mark.unit
class TestJsonListRepository:
    """Test suite for the snapshot behaviour of JsonListRepository."""

    @pytest.mark.asyncio
    async def test_corrupt_file_serves_last_snapshot(self, tmp_path):
        repo = NoteRepository(Note, tmp_path / "notes.json")
        await repo.initialize()
        await repo.replace([Note(text="a")])

        repo.path.write_text("not json", encoding="utf-8")

        assert await repo.list_all() == [Note(text="a")]

    @pytest.mark.asyncio
    async def test_invalid_records_serve_last_snapshot(self, tmp_path):
        repo = NoteRepository(Note, tmp_path / "notes.json")
        await repo.initialize()
        await repo.replace([Note(text="a")])

        repo.path.write_text('[{"other": 1}]', encoding="utf-8")

        assert await repo.list_all() == [Note(text="a")]

    @pytest.mark.asyncio
    async def test_failed_write_raises_and_keeps_snapshot(self, tmp_path):
        repo = NoteRepository(Note, tmp_path / "notes.json")
        await repo.initialize()
        await repo.replace([Note(text="a")])

        with patch.object(repo.file, "write", AsyncMock(side_effect=PersistenceError("read-only"))):
            with pytest.raises(PersistenceError):
                await repo.replace([Note(text="b")])
            repo.path.write_text("garbage", encoding="utf-8")
            assert await repo.list_all() == [Note(text="a")]
