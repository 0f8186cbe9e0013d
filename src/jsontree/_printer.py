"""
Pretty-printer rendering JsonValue trees back to text.

Objects print in document order, so duplicate keys are reproduced exactly as
parsed. String payloads print verbatim between quotes unless escape_strings
is requested.
"""

from dataclasses import dataclass
from typing import IO
from typing import Any

from ._errors import InternalError
from ._profile import ProfileContext
from ._values import JsonArray
from ._values import JsonBool
from ._values import JsonFloat
from ._values import JsonInteger
from ._values import JsonNull
from ._values import JsonObject
from ._values import JsonString
from ._values import JsonValue

DEFAULT_INDENT_UNIT = "    "

# Significant digits needed to round-trip a double, printed as d.ddd...e+XX
FLOAT_PRECISION = 16

_STRING_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


@dataclass(frozen=True)
class PrintConfig:
    """
    Configures pretty-printing with immutable settings.

    indent_unit is added once per nesting level. escape_strings re-escapes
    keys and string payloads so that the output is strict JSON; by default
    payloads are written exactly as stored.
    """

    indent_unit: str = DEFAULT_INDENT_UNIT
    escape_strings: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.indent_unit, str):
            raise TypeError("indent_unit must be a string")
        if not isinstance(self.escape_strings, bool):
            raise TypeError("escape_strings must be a boolean")


def _encode_string(s: str, config: PrintConfig) -> str:
    """Quotes a key or payload, escaping it only when configured to."""
    if not config.escape_strings:
        return f'"{s}"'

    control_limit = 0x20
    result = ['"']
    for char in s:
        if char in _STRING_ESCAPES:
            result.append(_STRING_ESCAPES[char])
        elif ord(char) < control_limit:
            result.append(f"\\u{ord(char):04x}")
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


def _format_float(value: float) -> str:
    return f"{value:.{FLOAT_PRECISION}e}"


def _print_value(
    value: JsonValue, indent: str, config: PrintConfig, out: list[str]
) -> None:
    """Appends the rendering of value to out, nested lines at indent+unit."""
    inner_indent = indent + config.indent_unit

    if isinstance(value, JsonObject):
        out.append("{")
        for i, (key, member) in enumerate(value.pairs):
            if i:
                out.append(",")
            out.append(f"\n{inner_indent}{_encode_string(key, config)} : ")
            _print_value(member, inner_indent, config, out)
        out.append(f"\n{indent}}}")
    elif isinstance(value, JsonArray):
        out.append("[")
        for i, item in enumerate(value.items):
            if i:
                out.append(",")
            out.append(f"\n{inner_indent}")
            _print_value(item, inner_indent, config, out)
        out.append(f"\n{indent}]")
    elif isinstance(value, JsonString):
        out.append(_encode_string(value.value, config))
    elif isinstance(value, JsonInteger):
        out.append(str(value.value))
    elif isinstance(value, JsonFloat):
        out.append(_format_float(value.value))
    elif isinstance(value, JsonBool):
        out.append("true" if value.value else "false")
    elif isinstance(value, JsonNull):
        out.append("null")
    else:
        raise InternalError(
            f"unknown value type in pretty_print: {type(value).__name__}"
        )


def pretty_print(value: JsonValue, indent: str = "", **kwargs: Any) -> str:
    """
    Renders a value tree as indented, newline-delimited text.

    indent is the prefix of the lines closing the outermost container;
    keyword arguments build a PrintConfig.
    """
    config = PrintConfig(**kwargs)
    with ProfileContext("pretty_print") as prof:
        out: list[str] = []
        _print_value(value, indent, config, out)
        text = "".join(out)
        prof.chars = len(text)
    return text


def dump(value: JsonValue, fp: IO[str], **kwargs: Any) -> None:
    """Writes the pretty-printed value to a file-like object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(pretty_print(value, **kwargs))


__all__ = [
    "DEFAULT_INDENT_UNIT",
    "FLOAT_PRECISION",
    "PrintConfig",
    "dump",
    "pretty_print",
]
