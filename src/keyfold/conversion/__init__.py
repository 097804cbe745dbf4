from keyfold.conversion.exceptions import ConversionError, UnsupportedTargetError
from keyfold.conversion.typeadapter import FirstItemConverter

__all__ = ["ConversionError", "FirstItemConverter", "UnsupportedTargetError"]
