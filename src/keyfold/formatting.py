"""Display helpers for grouped data.

The rendering is meant for debugging and logs, not as a stable format: keys
appear in the mapping's iteration order.
"""

from typing import Any, Iterable, Mapping


def format_groups(groups: Mapping[Any, Iterable[Any]]) -> str:
    """Render grouped items as ``{key=[item, item], key=[item]}``.

    Args:
        groups: Mapping of each key to the items grouped under it.

    Returns:
        The rendered string, ``{}`` for an empty mapping.

    Example:
        >>> format_groups({"o": ["one"], "t": ["two", "three"]})
        '{o=[one], t=[two, three]}'
    """
    rendered = (
        f"{key}=[{', '.join(str(item) for item in items)}]" for key, items in groups.items()
    )
    return "{" + ", ".join(rendered) + "}"
