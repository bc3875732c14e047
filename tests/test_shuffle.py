import random
from collections import Counter

import pytest

from memorymatch.errors import InvalidInputError
from memorymatch.utils.shuffle import shuffle


def test_shuffle_returns_permutation_of_input():
    items = ["A", "B", "C", "A", "D", "B"]
    result = shuffle(items, random.Random(7))
    assert len(result) == len(items)
    assert Counter(result) == Counter(items)


def test_shuffle_does_not_mutate_input():
    items = [1, 2, 3, 4, 5, 6, 7, 8]
    snapshot = list(items)
    result = shuffle(items, random.Random(3))
    assert items == snapshot
    assert result is not items


def test_shuffle_empty_input_returns_empty_list():
    assert shuffle([]) == []
    assert shuffle(()) == []


def test_shuffle_accepts_tuples():
    result = shuffle(("x", "y", "z"), random.Random(1))
    assert sorted(result) == ["x", "y", "z"]


def test_shuffle_is_deterministic_for_seeded_rng():
    items = list(range(20))
    assert shuffle(items, random.Random(42)) == shuffle(items, random.Random(42))


def test_shuffle_reaches_more_than_one_ordering():
    items = list(range(6))
    rng = random.Random(0)
    orderings = {tuple(shuffle(items, rng)) for _ in range(50)}
    assert len(orderings) > 1


@pytest.mark.parametrize("bad", [5, None, "abc", {1, 2}, {"a": 1}, (x for x in range(3))])
def test_shuffle_rejects_non_sequences(bad):
    with pytest.raises(InvalidInputError):
        shuffle(bad)
