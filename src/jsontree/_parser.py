"""
Permissive recursive-descent parser producing JsonValue trees.

Every grammar rule is a plain function taking the document and a cursor and
returning the parsed result together with the cursor just past it, so each
rule can be exercised on its own.

Accepted beyond strict JSON:
- `#` comments running to the end of the line, wherever whitespace may occur
- C-style integer literals: `0x1A` hexadecimal, `017` octal, leading `+`
- floats starting with `.` and hexadecimal floats such as `0x1.8p1`
- any number of commas between array elements, and a trailing comma in objects
- `true`/`false`/`null` matched as prefixes of the following text
"""

import logging
import math
import os
import re
from pathlib import Path
from typing import IO
from typing import Final

from ._errors import ParseError
from ._errors import Position
from ._profile import ProfileContext
from ._values import JsonArray
from ._values import JsonBool
from ._values import JsonFloat
from ._values import JsonInteger
from ._values import JsonNull
from ._values import JsonObject
from ._values import JsonString
from ._values import JsonValue
from ._values import Pair

logger = logging.getLogger(__name__)

WHITESPACE: Final = " \t\n\r"
COMMENT_START: Final = "#"

# Integers at either bound are indistinguishable from a clamped overflow
INT64_MAX: Final = 2**63 - 1
INT64_MIN: Final = -(2**63)

HIGH_SURROGATES: Final = range(0xD800, 0xDC00)
LOW_SURROGATES: Final = range(0xDC00, 0xE000)

ESCAPES: Final = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

LITERALS: Final = (
    ("true", JsonBool(True)),
    ("false", JsonBool(False)),
    ("null", JsonNull()),
)

# Same acceptance as C strtol() with base 0
_INTEGER_RE: Final = re.compile(
    r"(?P<sign>[+-]?)(?:"
    r"0[xX](?P<hex>[0-9a-fA-F]+)"
    r"|(?P<octal>0[0-7]*)"
    r"|(?P<decimal>[1-9][0-9]*))"
)

# Same acceptance as C strtod() for finite decimal and hexadecimal input
_FLOAT_RE: Final = re.compile(
    r"[+-]?(?:"
    r"(?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    r"(?:[pP][+-]?[0-9]+)?)"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)

_STRING_CHUNK_RE: Final = re.compile(r'[^"\\]+')
_HEX4_RE: Final = re.compile(r"[0-9a-fA-F]{4}")


def skip_whitespace(text: str, pos: Position) -> Position:
    """Skips whitespace and `#` line comments, returning the next position."""
    length = len(text)
    while True:
        while pos < length and text[pos] in WHITESPACE:
            pos += 1

        if pos < length and text[pos] == COMMENT_START:
            newline = text.find("\n", pos)
            pos = length if newline == -1 else newline
        else:
            return pos


def _scan_utf16(text: str, pos: Position) -> tuple[int, Position] | None:
    """
    Reads a `\\uXXXX` escape starting at pos without raising.

    Returns the UTF-16 code unit and the position after the escape, or None
    when pos does not hold a complete escape.
    """
    if not text.startswith("\\u", pos):
        return None

    digits = _HEX4_RE.match(text, pos + 2)
    if digits is None:
        return None
    return int(digits.group(), 16), digits.end()


def _parse_escape(
    text: str, pos: Position, anchor: Position
) -> tuple[str, Position]:
    """Decodes the escape sequence whose backslash is at pos."""
    if pos + 1 >= len(text):
        raise ParseError(
            "Unexpected end of input while reading string escape", text, anchor
        )

    marker = text[pos + 1]
    if marker in ESCAPES:
        return ESCAPES[marker], pos + 2
    if marker != "u":
        raise ParseError("Unsupported escape character", text, pos)

    scanned = _scan_utf16(text, pos)
    if scanned is None:
        raise ParseError("\\u not followed by four hex digits", text, pos)
    code_point, pos = scanned

    if code_point in HIGH_SURROGATES:
        # Pair with a following low surrogate if there is one; otherwise the
        # high surrogate stands alone and the cursor stays where it is.
        low = _scan_utf16(text, pos)
        if low is not None and low[0] in LOW_SURROGATES:
            code_point = (
                ((code_point - 0xD800) << 10) + (low[0] - 0xDC00) + 0x10000
            )
            pos = low[1]

    return chr(code_point), pos


def parse_string(text: str, pos: Position) -> tuple[str, Position]:
    """
    Parses a string literal, skipping any whitespace before it.

    Characters other than `\\` are copied verbatim, including raw control
    characters. Returns the decoded payload and the position after the
    closing quote.
    """
    with ProfileContext("parse_string") as prof:
        pos = skip_whitespace(text, pos)
        start = pos
        if not text.startswith('"', pos):
            raise ParseError("No opening quote when reading string", text, pos)
        pos += 1

        length = len(text)
        chunks: list[str] = []
        while True:
            chunk = _STRING_CHUNK_RE.match(text, pos)
            if chunk is not None:
                chunks.append(chunk.group())
                pos = chunk.end()

            if pos >= length:
                raise ParseError(
                    "Unexpected end of input while reading string", text, start
                )
            if text[pos] == '"':
                break

            char, pos = _parse_escape(text, pos, start)
            chunks.append(char)

        pos += 1
        prof.chars = pos - start
        return "".join(chunks), pos


def _integer_value(match: re.Match[str]) -> int:
    """Converts a strtol-style integer match to its signed value."""
    if match["hex"] is not None:
        value = int(match["hex"], 16)
    elif match["octal"] is not None:
        value = int(match["octal"], 8)
    else:
        value = int(match["decimal"])
    return -value if match["sign"] == "-" else value


def _parse_float(text: str, pos: Position) -> tuple[JsonFloat, Position]:
    """Parses a floating point literal starting at pos."""
    match = _FLOAT_RE.match(text, pos)
    if match is None:
        raise ParseError("Unexpected character in float value", text, pos)

    literal = match.group()
    try:
        if match["hex"] is not None:
            value = float.fromhex(literal)
        else:
            value = float(literal)
    except OverflowError as e:
        raise ParseError("Float out of range", text, pos) from e

    if math.isinf(value):
        raise ParseError("Float out of range", text, pos)
    return JsonFloat(value), match.end()


def parse_number(
    text: str, pos: Position
) -> tuple[JsonInteger | JsonFloat, Position]:
    """
    Parses a numeric literal at pos.

    The literal is first scanned as an integer. When the integer scan stops
    at `E`, `e` or `.`, the whole literal is scanned again from pos as a
    float, so `1.5` and `1e3` are floats while `1` and `0x1A` are integers.
    """
    with ProfileContext("parse_number") as prof:
        match = _INTEGER_RE.match(text, pos)
        if match is None:
            if not text.startswith(".", pos):
                raise ParseError(
                    "Unexpected character in integer value", text, pos
                )
            end = pos
            integer = None
        else:
            end = match.end()
            try:
                integer = _integer_value(match)
            except ValueError as e:
                # Decimal strings past the interpreter's digit limit
                raise ParseError("Integer out of range", text, pos) from e
            if integer >= INT64_MAX or integer <= INT64_MIN:
                raise ParseError("Integer out of range", text, pos)

        number: JsonInteger | JsonFloat
        if text.startswith(("E", "e", "."), end) or integer is None:
            number, end = _parse_float(text, pos)
        else:
            number = JsonInteger(integer)

        prof.chars = end - pos
        return number, end


def parse_value(text: str, pos: Position) -> tuple[JsonValue, Position]:
    """Parses any value after skipping whitespace, dispatching on lookahead."""
    pos = skip_whitespace(text, pos)
    if pos >= len(text):
        raise ParseError(
            "Unexpected end of input while looking for value", text, pos
        )

    char = text[pos]
    if char == '"':
        string, pos = parse_string(text, pos)
        return JsonString(string), pos
    elif char == "{":
        return parse_object(text, pos)
    elif char == "[":
        return parse_array(text, pos)

    for literal, value in LITERALS:
        if text.startswith(literal, pos):
            return value, pos + len(literal)

    return parse_number(text, pos)


def parse_object(text: str, pos: Position) -> tuple[JsonObject, Position]:
    """
    Parses an object whose opening brace is at pos.

    Keys may repeat: every pair is kept in document order and lookup on the
    resulting JsonObject sees the last value for a key.
    """
    with ProfileContext("parse_object") as prof:
        start = pos
        if not text.startswith("{", pos):
            raise ParseError(
                "Object does not start with curly brace", text, pos
            )
        pos += 1

        length = len(text)
        pairs: list[Pair] = []
        while True:
            pos = skip_whitespace(text, pos)
            if pos >= length:
                raise ParseError(
                    "Unexpected end of input while reading object", text, start
                )
            if text[pos] == "}":
                break

            key_start = pos
            key, pos = parse_string(text, pos)

            pos = skip_whitespace(text, pos)
            if not text.startswith(":", pos):
                raise ParseError(
                    "Missing : between name and value while reading object",
                    text,
                    key_start,
                )

            value, pos = parse_value(text, pos + 1)
            pairs.append((key, value))

            # Either another pair follows or the loop finds the closing brace
            pos = skip_whitespace(text, pos)
            if text.startswith(",", pos):
                pos += 1
            elif not text.startswith("}", pos):
                raise ParseError(
                    "Unexpected character after name/value pair while "
                    "reading object",
                    text,
                    key_start,
                )

        pos += 1
        prof.chars = pos - start
        return JsonObject(tuple(pairs)), pos


def parse_array(text: str, pos: Position) -> tuple[JsonArray, Position]:
    """
    Parses an array whose opening bracket is at pos.

    Commas are skipped without checking their placement, so `[1,,2,]`
    yields two elements.
    """
    with ProfileContext("parse_array") as prof:
        start = pos
        if not text.startswith("[", pos):
            raise ParseError("Array does not start with bracket", text, pos)
        pos += 1

        length = len(text)
        items: list[JsonValue] = []
        while True:
            pos = skip_whitespace(text, pos)
            if pos >= length:
                raise ParseError(
                    "Unexpected end of input while reading array", text, start
                )

            char = text[pos]
            if char == "]":
                break
            elif char == ",":
                pos += 1
            else:
                value, pos = parse_value(text, pos)
                items.append(value)

        pos += 1
        prof.chars = pos - start
        return JsonArray(tuple(items)), pos


def parse(text: str) -> JsonObject:
    """
    Parses a complete document whose top-level value must be an object.

    Nothing but whitespace and comments may follow the closing brace.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON document must be str, not {type(text).__name__}"
        )

    logger.debug("Parsing JSON document of %d characters", len(text))

    pos = skip_whitespace(text, 0)
    if not text.startswith("{", pos):
        raise ParseError(
            "Top level value does not start with curly brace", text, pos
        )

    root, end = parse_object(text, pos)

    pos = skip_whitespace(text, end)
    if pos != len(text):
        raise ParseError(
            "Unexpected text after end of top level object", text, end
        )

    return root


def read(filename: str | os.PathLike[str]) -> JsonObject:
    """
    Reads a whole UTF-8 file and parses it.

    Failing to read or decode the file is reported as a ParseError whose
    context is the filename.
    """
    name = os.fspath(filename)
    logger.debug("Reading JSON document from %s", name)

    try:
        raw = Path(name).read_bytes()
    except OSError as e:
        raise ParseError(
            f"Couldn't read file ({e.strerror or type(e).__name__})",
            context=name,
        ) from e

    try:
        # Lone surrogates read back the same way as_bytes() writes them
        text = raw.decode("utf-8", "surrogatepass")
    except UnicodeDecodeError as e:
        raise ParseError("Couldn't decode file as UTF-8", context=name) from e

    try:
        return parse(text)
    except ParseError as e:
        e.add_note(f"while reading {name}")
        raise


def load(fp: IO[str]) -> JsonObject:
    """Parses a document from a file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read())


__all__ = [
    "COMMENT_START",
    "ESCAPES",
    "INT64_MAX",
    "INT64_MIN",
    "LITERALS",
    "WHITESPACE",
    "load",
    "parse",
    "parse_array",
    "parse_number",
    "parse_object",
    "parse_string",
    "parse_value",
    "read",
    "skip_whitespace",
]
