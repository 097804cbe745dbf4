"""Lazy pairing of items with their derived keys."""

from typing import Callable, Generic, Iterable, Iterator, TypeVar

_K = TypeVar("_K")
_T = TypeVar("_T")


class KeyTaggingSequence(Iterator[tuple[_K, _T]], Generic[_K, _T]):
    """Iterator yielding ``(key_selector(item), item)`` for each source item.

    Every call to ``__next__`` pulls exactly one item from the source and
    calls the key selector exactly once on it. Nothing is buffered, so the
    sequence is single-use and only as finite as its source.

    Attributes:
        _source: Iterator over the wrapped source.
        _key_selector: Function deriving a key from an item.
    """

    def __init__(self, source: Iterable[_T], key_selector: Callable[[_T], _K]) -> None:
        self._source = iter(source)
        self._key_selector = key_selector

    def __iter__(self) -> "KeyTaggingSequence[_K, _T]":
        return self

    def __next__(self) -> tuple[_K, _T]:
        item = next(self._source)
        return self._key_selector(item), item
