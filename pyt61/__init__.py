from .reports import InvalidEncoding, OutOfMemory
from .transcode import (
    is_t61_valid,
    t61_to_str,
    t61_to_utf8,
    str_to_t61,
    utf8_to_t61,
    unrepresentable_chars
)
from .version import __version__

# Importing t61_encoding is not pure: it registers the "t61" codec
from . import t61_encoding  # pylint: disable=unused-import


__all__ = [
    "InvalidEncoding",
    "OutOfMemory",
    "is_t61_valid",
    "t61_to_str",
    "t61_to_utf8",
    "str_to_t61",
    "utf8_to_t61",
    "unrepresentable_chars",
    "__version__"
]
