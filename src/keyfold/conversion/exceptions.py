"""Errors raised while seeding ``reduce`` accumulators.

Aggregation itself never raises on its own account: anything raised by a
source, key selector or combining function reaches the caller untouched.
These are only raised when ``reduce``/``reduce_with_key`` are asked to turn
first items ``into`` a specific accumulator type.
"""

from typing import Any


class ConversionError(Exception):
    """A first item could not be turned into the accumulator type.

    Attributes:
        source: The first item that failed to convert.
        target_type: The accumulator type it was converted into.
    """

    def __init__(self, message: str, *, source: Any, target_type: Any) -> None:
        self.source = source
        self.target_type = target_type
        super().__init__(message)


class UnsupportedTargetError(ConversionError):
    """The accumulator type is not something pydantic can validate into."""

    def __init__(self, target_type: Any) -> None:
        super().__init__(
            f"Cannot seed accumulators of type {target_type!r}: no validation schema",
            source=None,
            target_type=target_type,
        )
