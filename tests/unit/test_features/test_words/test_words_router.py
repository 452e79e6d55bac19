"""HTTP tests for the dictionary router."""

from __future__ import annotations

import pytest

BASE = "/api/words"


async def _add(client, word: str, meaning: str) -> dict:
    response = await client.post(BASE, json={"word": word, "meaning": meaning})
    assert response.status_code == 200
    return response.json()


@pytest.mark.unit
class TestWordsRouter:
    """Test suite for the /words endpoints."""

    @pytest.mark.asyncio
    async def test_list_empty(self, client):
        response = await client.get(BASE)

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_add_returns_full_dictionary(self, client):
        body = await _add(client, "  ephemeral ", "short-lived")

        assert body["success"] is True
        [entry] = body["dictionary"]
        assert entry["word"] == "ephemeral"
        assert entry["meaning"] == "short-lived"
        assert {"id", "createdAt", "updatedAt"} <= entry.keys()

    @pytest.mark.asyncio
    async def test_add_existing_word_updates_meaning(self, client):
        first = await _add(client, "Ephemeral", "short-lived")
        second = await _add(client, "ephemeral", "lasting a very short time")

        [before] = first["dictionary"]
        [after] = second["dictionary"]
        assert after["id"] == before["id"]
        assert after["word"] == "Ephemeral"
        assert after["meaning"] == "lasting a very short time"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [{}, {"word": "ephemeral"}, {"meaning": "short-lived"}, {"word": " ", "meaning": "x"}],
    )
    async def test_missing_fields_are_400(self, client, word_repo, body):
        response = await client.post(BASE, json=body)

        assert response.status_code == 400
        assert response.json()["type"] == "missing-word"
        assert await word_repo.list_all() == []

    @pytest.mark.asyncio
    async def test_non_object_body_is_422(self, client):
        response = await client.post(BASE, json=["ephemeral"])

        assert response.status_code == 422
        assert response.json()["type"] == "validation-error"

    @pytest.mark.asyncio
    async def test_search(self, client):
        await _add(client, "ephemeral", "short-lived")
        await _add(client, "laconic", "using very few words")

        response = await client.get(f"{BASE}/search", params={"query": "WORD"})

        assert [e["word"] for e in response.json()] == ["laconic"]

    @pytest.mark.asyncio
    async def test_search_without_query_is_empty(self, client):
        await _add(client, "ephemeral", "short-lived")

        response = await client.get(f"{BASE}/search")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_delete(self, client):
        body = await _add(client, "ephemeral", "short-lived")
        await _add(client, "laconic", "using very few words")
        entry_id = body["dictionary"][0]["id"]

        response = await client.delete(f"{BASE}/{entry_id}")

        assert response.status_code == 200
        assert [e["word"] for e in response.json()["dictionary"]] == ["laconic"]

    @pytest.mark.asyncio
    async def test_delete_unknown_id_is_noop(self, client):
        await _add(client, "ephemeral", "short-lived")

        response = await client.delete(f"{BASE}/does-not-exist")

        assert response.status_code == 200
        assert len(response.json()["dictionary"]) == 1
