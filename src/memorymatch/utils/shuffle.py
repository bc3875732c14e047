from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from typing import TypeVar

from memorymatch.errors import InvalidInputError

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items`` (Fisher-Yates).

    The caller's sequence is never mutated. Strings, mappings and other
    non-sequences are rejected with ``InvalidInputError``.
    """
    if isinstance(items, (str, bytes, bytearray, Mapping)) or not isinstance(items, Sequence):
        raise InvalidInputError(f"expected a sequence, got {type(items).__name__}")
    result = list(items)
    if not result:
        return result
    rand = rng or random
    for i in range(len(result) - 1, 0, -1):
        j = rand.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
