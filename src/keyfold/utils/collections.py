"""Collection utility functions."""

from typing import Hashable, Iterable, TypeVar

from keyfold.engine import aggregate

_K = TypeVar("_K", bound=Hashable)
_V = TypeVar("_V")


def group_pairs(pairs: Iterable[tuple[_K, _V]]) -> dict[_K, list[_V]]:
    """Group (key, value) pairs into a dict of lists by key.

    Values keep their relative order within each key.

    Args:
        pairs: An iterable of (key, value) tuples.

    Returns:
        A dict mapping each unique key to a list of its associated values.

    Example:
        >>> group_pairs([("a", 1), ("b", 2), ("a", 3)]) == {"a": [1, 3], "b": [2]}
        True
    """

    def append(key: _K, bucket: list[_V] | None, value: _V) -> list[_V]:
        if bucket is None:
            return [value]
        bucket.append(value)
        return bucket

    return aggregate(pairs, append)
