"""
Permissive JSON parsing into immutable, navigable value trees.

A document is parsed into a tree of JsonValue nodes rooted at a JsonObject,
queried through typed accessors, and optionally pretty-printed back to text.
The parser accepts `#` comments, C-style hexadecimal and octal integers and
lax comma placement; objects keep duplicate keys in document order.
"""

from ._errors import CONTEXT_WIDTH
from ._errors import AccessTypeError
from ._errors import ErrorKind
from ._errors import InternalError
from ._errors import JsonValueError
from ._errors import NotFoundError
from ._errors import NullAccessError
from ._errors import ParseError
from ._errors import Position
from ._parser import load
from ._parser import parse
from ._parser import parse_array
from ._parser import parse_number
from ._parser import parse_object
from ._parser import parse_string
from ._parser import parse_value
from ._parser import read
from ._parser import skip_whitespace
from ._printer import PrintConfig
from ._printer import dump
from ._printer import pretty_print
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._values import JsonArray
from ._values import JsonBool
from ._values import JsonFloat
from ._values import JsonInteger
from ._values import JsonNull
from ._values import JsonObject
from ._values import JsonString
from ._values import JsonValue
from ._values import ValueType

__version__ = "0.1.0"

__all__ = [
    "CONTEXT_WIDTH",
    "AccessTypeError",
    "ErrorKind",
    "HotPathStats",
    "InternalError",
    "JsonArray",
    "JsonBool",
    "JsonFloat",
    "JsonInteger",
    "JsonNull",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "JsonValueError",
    "NotFoundError",
    "NullAccessError",
    "ParseError",
    "Position",
    "PrintConfig",
    "ValueType",
    "clear_hot_path_stats",
    "dump",
    "get_hot_path_stats",
    "load",
    "parse",
    "parse_array",
    "parse_number",
    "parse_object",
    "parse_string",
    "parse_value",
    "pretty_print",
    "read",
    "skip_whitespace",
]
