"""Turning the first item of each key into a ``reduce`` accumulator.

``into`` is either a type form pydantic can validate into (``int``,
``set[int]``, ``tuple[int, str]``, a ``BaseModel``, ``Decimal | None``...)
or a plain function applied to the item. Type forms go through
``pydantic.TypeAdapter`` in its default lax mode, so ``"1"`` seeds an ``int``
accumulator and a list seeds a ``set``; every element of a parameterised
container is validated against its own parameter.
"""

from logging import getLogger
from typing import Any, get_origin

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from keyfold.conversion.exceptions import ConversionError, UnsupportedTargetError

logger = getLogger(__name__)


def _is_type_form(into: Any) -> bool:
    return isinstance(into, type) or get_origin(into) is not None or not callable(into)


def _type_adapter(target_tp: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(target_tp)
    except (PydanticSchemaGenerationError, TypeError) as exc:
        raise UnsupportedTargetError(target_tp) from exc


class FirstItemConverter:
    """Seeds ``reduce`` accumulators from the first item of each key.

    The adapter is built once, when the converter is created, so an
    unsupported ``into`` fails before any item is pulled from the source.

    Attributes:
        _into: Accumulator type or conversion function, None for identity.
        _adapter: TypeAdapter for ``_into`` when it is a type form.
    """

    def __init__(self, into: Any = None) -> None:
        self._into = into
        self._adapter = _type_adapter(into) if into is not None and _is_type_form(into) else None
        if into is not None:
            logger.debug(
                "Seeding accumulators into %r %s",
                into,
                "with pydantic" if self._adapter is not None else "with a function",
            )

    def __call__(self, item: Any) -> Any:
        if self._into is None:
            return item
        if self._adapter is None:
            return self._into(item)

        try:
            return self._adapter.validate_python(item)
        except ValidationError as exc:
            raise ConversionError(
                f"Cannot convert {type(item).__name__} to {self._into!r}: "
                f"{exc.error_count()} validation error(s)",
                source=item,
                target_type=self._into,
            ) from exc
