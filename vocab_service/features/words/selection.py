"""Random word selection for the daily broadcast."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def pick_random_entry(entries: Sequence[T], rng: random.Random | None = None) -> T | None:
    """Pick one entry uniformly at random.

    Args:
        entries: Candidates to choose from.
        rng: Random source, injectable for deterministic tests.

    Returns:
        The chosen entry, or None when ``entries`` is empty.
    """
    if not entries:
        return None
    return (rng or random).choice(entries)
