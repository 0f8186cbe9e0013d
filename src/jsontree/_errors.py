"""
Error taxonomy for parsing and navigating JSON value trees.

Every error raised by jsontree derives from JsonValueError and carries an
ErrorKind, so callers can either catch the builtin family (ValueError,
LookupError, TypeError, RuntimeError) or switch on the kind.
"""

from enum import Enum
from typing import TypeAlias

Position: TypeAlias = int

# Maximum number of characters of source text quoted in a ParseError
CONTEXT_WIDTH = 40


class ErrorKind(Enum):
    """Machine-distinguishable error categories with their display labels."""

    PARSE = "PARSE ERROR"
    NOT_FOUND = "NOT FOUND"
    ACCESS_TYPE = "ACCESS TYPE"
    NULL_TYPE = "NULL TYPE"
    INTERNAL = "INTERNAL ERROR"


class JsonValueError(Exception):
    """
    Base class for every error raised while parsing or accessing values.

    Holds the bare message separately from the formatted exception text so
    diagnostics can be rebuilt with get_msg().
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, msg: str) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        self.msg = msg
        super().__init__(msg)

    def get_msg(self) -> str:
        """Returns the message prefixed with the error kind label."""
        return f"{self.kind.value}:{self.msg}"


class ParseError(JsonValueError, ValueError):
    """
    Handles malformed input with position and context information.

    The context is a short snippet of the offending text starting at the
    anchor position, or the filename when the document could not be loaded.
    """

    kind = ErrorKind.PARSE

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        *,
        context: str | None = None,
    ) -> None:
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.doc = doc
        self.pos = pos
        self.context = (
            context if context is not None else doc[pos : pos + CONTEXT_WIDTH]
        )

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(msg)
        self.args = (
            f"{msg} at line {self.lineno}, column {self.colno}: "
            f"'{self.context}'",
        )

    def get_msg(self) -> str:
        return f"{super().get_msg()} '{self.context}'"


class NotFoundError(JsonValueError, LookupError):
    """Raised when a key or index does not exist in a well-typed container."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: str | int) -> None:
        self.key = key
        super().__init__(str(key))


class AccessTypeError(JsonValueError, TypeError):
    """Raised when an operation does not apply to the value's variant."""

    kind = ErrorKind.ACCESS_TYPE


class NullAccessError(JsonValueError, TypeError):
    """
    Raised for any payload or container access on a null value.

    Not an AccessTypeError. Null access is checked before the variant.
    """

    kind = ErrorKind.NULL_TYPE

    def __init__(self, msg: str = "Element is null") -> None:
        super().__init__(msg)


class InternalError(JsonValueError, RuntimeError):
    """Raised for internal consistency failures."""

    kind = ErrorKind.INTERNAL


__all__ = [
    "CONTEXT_WIDTH",
    "AccessTypeError",
    "ErrorKind",
    "InternalError",
    "JsonValueError",
    "NotFoundError",
    "NullAccessError",
    "ParseError",
    "Position",
]
