from typing import Any, Callable, Iterator

import pytest


class CallRecorder:
    """Wraps a function and records the arguments of every call."""

    def __init__(self, fn: Callable[..., Any]) -> None:
        self._fn = fn
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self._fn(*args)


class PullCounter:
    """Iterator over a list that counts how many items were pulled."""

    def __init__(self, items: list[Any]) -> None:
        self._items = iter(items)
        self.pulled = 0

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        item = next(self._items)
        self.pulled += 1
        return item


@pytest.fixture
def record() -> Callable[[Callable[..., Any]], CallRecorder]:
    return CallRecorder


@pytest.fixture
def pull_counter() -> Callable[[list[Any]], PullCounter]:
    return PullCounter


@pytest.fixture
def number_words() -> list[str]:
    return "one two three four five six seven eight nine ten".split(" ")


@pytest.fixture
def animals() -> list[str]:
    return ["raccoon", "reindeer", "cow", "camel", "giraffe", "goat"]


@pytest.fixture
def fruits() -> list[str]:
    return ["cherry", "blueberry", "citrus", "apple", "apricot", "banana", "coconut"]


def first_char(s: str) -> str:
    return s[0]


@pytest.fixture
def by_first_char() -> Callable[[str], str]:
    return first_char
