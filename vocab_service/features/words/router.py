"""API router for the dictionary."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from vocab_service.core.exceptions import BadRequestException
from vocab_service.features.words.repository import WordRepository, get_word_repository
from vocab_service.features.words.schemas import (
    DictionaryEntry,
    DictionaryResponse,
    WordCreate,
)

router = APIRouter(prefix="/words", tags=["words"])

logger = logging.getLogger(__name__)

WordRepositoryDep = Annotated[WordRepository, Depends(get_word_repository)]


@router.get(
    "",
    response_model=list[DictionaryEntry],
    summary="List dictionary",
    description="Return every dictionary entry in insertion order.",
)
async def list_words(repo: WordRepositoryDep) -> list[DictionaryEntry]:
    return await repo.list_all()


@router.post(
    "",
    response_model=DictionaryResponse,
    summary="Add or update a word",
    description="Insert a word, or replace the meaning of an existing word (case-insensitive).",
)
async def add_word(payload: WordCreate, repo: WordRepositoryDep) -> DictionaryResponse:
    """Upsert a dictionary entry.

    Raises:
        BadRequestException: If word or meaning is missing or blank.
    """
    word = (payload.word or "").strip()
    meaning = (payload.meaning or "").strip()
    if not word or not meaning:
        raise BadRequestException(
            detail="Word and meaning are required",
            type="missing-word",
        )

    entries = await repo.upsert(word, meaning)
    return DictionaryResponse(success=True, dictionary=entries)


@router.get(
    "/search",
    response_model=list[DictionaryEntry],
    summary="Search dictionary",
    description="Case-insensitive substring match on word or meaning. An empty query returns no entries.",
)
async def search_words(repo: WordRepositoryDep, query: str = "") -> list[DictionaryEntry]:
    return await repo.search(query)


@router.delete(
    "/{entry_id}",
    response_model=DictionaryResponse,
    summary="Delete a word",
)
async def delete_word(entry_id: str, repo: WordRepositoryDep) -> DictionaryResponse:
    entries = await repo.delete(entry_id)
    return DictionaryResponse(success=True, dictionary=entries)
