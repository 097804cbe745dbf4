"""Single-pass keyed aggregation.

This module holds the one routine every grouping operation is built on.
``aggregate`` drains an iterable of ``(key, item)`` pairs exactly once and
threads a per-key accumulator through a caller-supplied operation.

For each pair the current accumulator for the key is popped from the working
dict, handed to the operation together with the item, and the result is
stored back. The dict therefore never holds two accumulators for one key, and
the operation always sees the latest one.

Example::

    aggregate(
        [("a", 1), ("b", 2), ("a", 3)],
        lambda key, acc, item: item if acc is None else acc + item,
    )
    # {"a": 4, "b": 2}
"""

from logging import getLogger
from typing import Any, Callable, Hashable, Iterable, TypeVar, cast

logger = getLogger(__name__)

_K = TypeVar("_K", bound=Hashable)
_T = TypeVar("_T")
_R = TypeVar("_R")

#: Sentinel for "no accumulator yet" when None is a valid accumulator value
UNSET = cast(Any, object())

#: Callable folding one item into the (possibly missing) accumulator for its key
AggregateOperation = Callable[[_K, _R | None, _T], _R]


def aggregate(
    pairs: Iterable[tuple[_K, _T]],
    operation: Callable[[_K, Any, _T], _R],
    *,
    missing: Any = None,
) -> dict[_K, _R]:
    """Fold every item into the accumulator of its key, in a single pass.

    Args:
        pairs: ``(key, item)`` pairs, consumed exactly once and in order.
        operation: Called exactly once per pair as
            ``operation(key, accumulator, item)`` and returns the new
            accumulator for ``key``.
        missing: Passed as ``accumulator`` for the first item of every key.
            First occurrence is decided by key membership, so an accumulator
            equal to ``missing`` is still treated as present.

    Returns:
        A new dict mapping every key seen to its final accumulator. Empty when
        ``pairs`` is empty.

    Any exception raised while iterating ``pairs`` or by ``operation``
    propagates unchanged; no partial result is returned.
    """
    accumulators: dict[_K, _R] = {}
    consumed = 0

    for key, item in pairs:
        accumulator = accumulators.pop(key, UNSET)
        accumulators[key] = operation(key, missing if accumulator is UNSET else accumulator, item)
        consumed += 1

    logger.debug("Aggregated %d items into %d keys", consumed, len(accumulators))
    return accumulators
