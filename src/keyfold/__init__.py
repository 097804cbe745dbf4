from keyfold.engine import aggregate
from keyfold.tagging import KeyTaggingSequence
from keyfold.grouping import Grouping, GroupingOperations, LazyGrouping, grouping_by
from keyfold.formatting import format_groups
from keyfold.conversion.exceptions import ConversionError, UnsupportedTargetError
from keyfold._version import __version__

__all__ = [
    "aggregate",
    "KeyTaggingSequence",
    "Grouping",
    "GroupingOperations",
    "LazyGrouping",
    "grouping_by",
    "format_groups",
    "ConversionError",
    "UnsupportedTargetError",
    "__version__",
]
