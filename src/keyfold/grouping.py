"""Grouping surfaces and the operations derived from ``aggregate``.

Every operation here is a thin wrapper: it supplies a combining function to
``keyfold.engine.aggregate`` and lets the engine do the single pass. The
wrappers differ only in how they seed a key the first time it is seen:

    - ``fold_with_key``: seed from ``initial_value_selector(key, item)``
    - ``fold_with``: seed from ``initial_value_provider()``
    - ``fold``: seed from a deep copy of ``initial_value``
    - ``reduce_with_key`` / ``reduce``: the first item itself, converted to
      the accumulator type, becomes the seed and is never passed to
      ``operation``
    - ``each_count``: ``fold`` starting from 0

Two surfaces expose the same operations:

    - ``Grouping`` keeps its source as a list and makes a fresh pass per
      operation, so it can be queried any number of times.
    - ``LazyGrouping`` is a ``KeyTaggingSequence`` and drains itself; the
      first operation consumes it.

Example::

    words = ["one", "two", "three", "four", "five"]
    grouping_by(words, lambda w: w[0]).each_count()
    # {"o": 1, "t": 2, "f": 2}
"""

from abc import ABC, abstractmethod
from collections.abc import Collection
from copy import deepcopy
from typing import (
    Any,
    Callable,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Literal,
    TypeVar,
    overload,
)

from keyfold.conversion import FirstItemConverter
from keyfold.engine import UNSET, AggregateOperation, aggregate
from keyfold.formatting import format_groups
from keyfold.tagging import KeyTaggingSequence
from keyfold.utils.collections import group_pairs

_K = TypeVar("_K", bound=Hashable)
_T = TypeVar("_T")
_R = TypeVar("_R")


class GroupingOperations(ABC, Generic[_K, _T]):
    """Keyed aggregation over a source of ``(key, item)`` pairs.

    Subclasses only decide where the pairs come from; the operations are
    shared. Every operation calls its combining function exactly once per
    item, in source order within each key, and returns a new dict.
    """

    @abstractmethod
    def _pairs(self) -> Iterable[tuple[_K, _T]]:
        """Return the ``(key, item)`` pairs for one aggregation pass."""
        ...

    def _aggregate_from_unset(self, operation: Callable[[_K, Any, _T], _R]) -> dict[_K, _R]:
        return aggregate(self._pairs(), operation, missing=UNSET)

    def aggregate(
        self, operation: AggregateOperation[_K, _R, _T], *, missing: Any = None
    ) -> dict[_K, _R]:
        """Fold items into per-key accumulators with a single combining function.

        Args:
            operation: Called as ``operation(key, accumulator, item)``.
                ``accumulator`` is ``missing`` for the first item of each key,
                and the return value becomes the key's accumulator.
            missing: Value standing in for "no accumulator yet". Defaults to
                None; pass a sentinel of your own when None is a legitimate
                accumulator, so that a None result is not mistaken for a new
                key.

        Returns:
            A dict mapping each key to its final accumulator.

        Example::

            grouping_by(range(3, 10), lambda i: i % 3).aggregate(
                lambda key, acc, item: f"{key}:{item}" if acc is None else f"{acc}-{item}"
            )
            # {0: "0:3-6-9", 1: "1:4-7", 2: "2:5-8"}
        """
        return aggregate(self._pairs(), operation, missing=missing)

    def fold_with_key(
        self,
        initial_value_selector: Callable[[_K, _T], _R],
        operation: Callable[[_K, _R, _T], _R],
    ) -> dict[_K, _R]:
        """Fold each key's items, seeding from the key and its first item.

        ``initial_value_selector`` runs once per key, on the first item; that
        item is then folded into the seed with ``operation`` like every other.
        """

        def step(key: _K, accumulator: Any, item: _T) -> _R:
            if accumulator is UNSET:
                accumulator = initial_value_selector(key, item)
            return operation(key, accumulator, item)

        return self._aggregate_from_unset(step)

    def fold_with(
        self,
        initial_value_provider: Callable[[], _R],
        operation: Callable[[_K, _R, _T], _R],
    ) -> dict[_K, _R]:
        """Fold each key's items, seeding with a fresh ``initial_value_provider()``.

        The provider runs once per distinct key, not once per item.
        """
        return self.fold_with_key(lambda key, item: initial_value_provider(), operation)

    def fold(self, initial_value: _R, operation: Callable[[_R, _T], _R]) -> dict[_K, _R]:
        """Fold each key's items starting from a copy of ``initial_value``.

        Every key gets its own deep copy, so a mutable seed such as a list is
        never shared between keys. That costs one ``deepcopy`` per distinct
        key, even for immutable seeds; use ``fold_with`` with a provider to
        build seeds some cheaper way.
        """
        return self.fold_with_key(
            lambda key, item: deepcopy(initial_value),
            lambda key, accumulator, item: operation(accumulator, item),
        )

    def reduce_with_key(
        self,
        operation: Callable[[_K, _R, _T], _R],
        *,
        into: Callable[[_T], _R] | Any = None,
    ) -> dict[_K, _R]:
        """Reduce each key's items, using the first one as the accumulator.

        The first item of a key is not passed to ``operation``: it is
        converted to the accumulator type and becomes the accumulator.
        Later items are combined with ``operation(key, accumulator, item)``.

        Args:
            operation: Combining function for the second and later items.
            into: How first items become accumulators. None uses them
                unchanged, a type form (``int``, ``tuple[int, str]``, a
                pydantic model...) validates them with pydantic, and any
                other callable is applied to them.

        Returns:
            A dict mapping each key to its reduced value.

        Raises:
            UnsupportedTargetError: If ``into`` is a type pydantic cannot
                validate into. Raised before the source is read.
            ConversionError: If a first item fails validation into ``into``.
        """
        seed = FirstItemConverter(into)

        def step(key: _K, accumulator: Any, item: _T) -> _R:
            if accumulator is UNSET:
                return seed(item)
            return operation(key, accumulator, item)

        return self._aggregate_from_unset(step)

    def reduce(
        self,
        operation: Callable[[_R, _T], _R],
        *,
        into: Callable[[_T], _R] | Any = None,
    ) -> dict[_K, _R]:
        """Like ``reduce_with_key`` for operations that don't need the key."""
        return self.reduce_with_key(
            lambda key, accumulator, item: operation(accumulator, item),
            into=into,
        )

    def each_count(self) -> dict[_K, int]:
        """Count the items under each key."""
        return self.fold(0, lambda accumulator, _: accumulator + 1)


class Grouping(GroupingOperations[_K, _T]):
    """Grouping over a materialized collection.

    The source is copied into a list up front, and every operation makes its
    own pass over it, so results are repeatable.

    Attributes:
        _raw: The grouped items, in source order.
        _key_selector: Function deriving a key from an item.
    """

    def __init__(self, source: Iterable[_T], key_selector: Callable[[_T], _K]) -> None:
        self._raw = list(source)
        self._key_selector = key_selector

    def source_iterator(self) -> Iterator[_T]:
        return iter(self._raw)

    def key_of(self, element: _T) -> _K:
        return self._key_selector(element)

    def _pairs(self) -> KeyTaggingSequence[_K, _T]:
        return KeyTaggingSequence(self.source_iterator(), self.key_of)

    def __str__(self) -> str:
        return format_groups(group_pairs(self._pairs()))


class LazyGrouping(KeyTaggingSequence[_K, _T], GroupingOperations[_K, _T]):
    """Grouping over any iterable, consumed on demand.

    Iterating yields ``(key, item)`` pairs one source item at a time. Any
    aggregation operation drains whatever is left, so the grouping is spent
    afterwards and further operations return empty dicts.
    """

    def _pairs(self) -> KeyTaggingSequence[_K, _T]:
        return self


@overload
def grouping_by(
    source: Iterable[_T], key_selector: Callable[[_T], _K], *, lazy: Literal[True]
) -> LazyGrouping[_K, _T]: ...


@overload
def grouping_by(
    source: Iterable[_T], key_selector: Callable[[_T], _K], *, lazy: Literal[False]
) -> Grouping[_K, _T]: ...


@overload
def grouping_by(
    source: Iterable[_T], key_selector: Callable[[_T], _K], *, lazy: None = None
) -> GroupingOperations[_K, _T]: ...


def grouping_by(
    source: Iterable[_T], key_selector: Callable[[_T], _K], *, lazy: bool | None = None
) -> GroupingOperations[_K, _T]:
    """Attach a key selector to a source, ready for aggregation.

    Args:
        source: Items to group.
        key_selector: Function deriving a hashable key from each item.
        lazy: True for a ``LazyGrouping`` that consumes ``source`` on demand,
            False for a ``Grouping`` that materializes it. By default sized
            collections are grouped eagerly and other iterables lazily.

    Returns:
        A ``Grouping`` or ``LazyGrouping`` over ``source``.
    """
    if lazy is None:
        lazy = not isinstance(source, Collection)
    if lazy:
        return LazyGrouping(source, key_selector)
    return Grouping(source, key_selector)
