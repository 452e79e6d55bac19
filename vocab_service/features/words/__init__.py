"""Dictionary entries: the word store and random selection for broadcasts."""

from vocab_service.features.words.repository import WordRepository, get_word_repository
from vocab_service.features.words.schemas import DictionaryEntry
from vocab_service.features.words.selection import pick_random_entry

__all__ = [
    "DictionaryEntry",
    "WordRepository",
    "get_word_repository",
    "pick_random_entry",
]
