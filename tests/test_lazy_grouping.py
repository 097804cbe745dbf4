"""Lazy groupings over iterators, consumed by the first aggregation."""

import pytest

from keyfold.grouping import Grouping, LazyGrouping, grouping_by


def test_iterates_key_item_pairs() -> None:
    values = grouping_by(iter(range(10)), lambda i: i % 3)

    assert isinstance(values, LazyGrouping)
    assert next(values) == (0, 0)
    assert next(values) == (1, 1)
    assert next(values) == (2, 2)
    assert next(values) == (0, 3)
    assert list(values) == [(1, 4), (2, 5), (0, 6), (1, 7), (2, 8), (0, 9)]


def test_aggregate() -> None:
    values = grouping_by(iter(range(3, 10)), lambda i: i % 3)
    aggregated = values.aggregate(
        lambda key, acc, item: f"{key}:{item}" if acc is None else f"{acc}-{item}"
    )
    assert aggregated == {0: "0:3-6-9", 1: "1:4-7", 2: "2:5-8"}


def test_fold_with_key(fruits, by_first_char) -> None:
    def keep_even_lengths(key, acc, item):
        if len(item) % 2 == 0:
            acc.append(item)
        return acc

    even_fruits = LazyGrouping(iter(fruits), by_first_char).fold_with_key(
        lambda key, item: [], keep_even_lengths
    )

    assert even_fruits == {"a": [], "b": ["banana"], "c": ["cherry", "citrus"]}


def test_pulling_a_prefix_leaves_the_rest_of_the_source_untouched(pull_counter) -> None:
    source = pull_counter(list(range(100)))
    grouping = LazyGrouping(source, lambda i: i % 2)

    assert [next(grouping) for _ in range(3)] == [(0, 0), (1, 1), (0, 2)]
    assert source.pulled == 3


def test_aggregation_consumes_only_the_remaining_items(pull_counter) -> None:
    source = pull_counter(["a1", "b1", "a2", "b2", "a3"])
    grouping = LazyGrouping(source, lambda s: s[0])

    assert next(grouping) == ("a", "a1")
    assert grouping.each_count() == {"b": 2, "a": 2}
    assert source.pulled == 5


def test_lazy_grouping_is_spent_after_one_operation(number_words, by_first_char) -> None:
    grouping = grouping_by(iter(number_words), by_first_char)

    assert grouping.each_count() == {"o": 1, "t": 3, "f": 2, "s": 2, "e": 1, "n": 1}
    assert grouping.each_count() == {}
    assert next(grouping, None) is None


def test_aggregates_a_bounded_prefix_of_an_infinite_source() -> None:
    def naturals():
        n = 0
        while True:
            yield n
            n += 1

    def first(n):
        for value in naturals():
            if value >= n:
                return
            yield value

    assert grouping_by(first(10), lambda v: v % 3).each_count() == {0: 4, 1: 3, 2: 3}


@pytest.mark.parametrize(
    "operation",
    [
        lambda g: g.aggregate(lambda key, acc, item: (acc or "") + item),
        lambda g: g.fold_with_key(lambda key, item: key, lambda key, acc, item: acc + item),
        lambda g: g.fold_with(str, lambda key, acc, item: acc + item),
        lambda g: g.fold("", lambda acc, item: acc + item),
        lambda g: g.reduce_with_key(lambda key, acc, item: acc + item),
        lambda g: g.reduce(lambda acc, item: acc + item),
        lambda g: g.each_count(),
    ],
    ids=[
        "aggregate",
        "fold_with_key",
        "fold_with",
        "fold",
        "reduce_with_key",
        "reduce",
        "each_count",
    ],
)
def test_lazy_and_eager_surfaces_agree(number_words, by_first_char, operation) -> None:
    eager = Grouping(number_words, by_first_char)
    lazy = LazyGrouping(iter(number_words), by_first_char)

    assert operation(lazy) == operation(eager)


def test_source_errors_propagate() -> None:
    def words():
        yield "alpha"
        yield "beta"
        raise OSError("stream closed")

    grouping = grouping_by(words(), lambda w: w[0])

    with pytest.raises(OSError, match="stream closed"):
        grouping.each_count()
