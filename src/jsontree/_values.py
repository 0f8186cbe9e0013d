"""
Immutable JSON value tree.

Each JSON variant is its own frozen dataclass, so a node only stores the
payload of the variant it represents. All accessors live on JsonValue and
fail by default; a variant overrides the accessors that apply to it. JsonNull
overrides the null check so that null access is reported before any variant
mismatch.
"""

from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from types import MappingProxyType
from typing import Any
from typing import ClassVar
from typing import TypeAlias

from ._errors import AccessTypeError
from ._errors import NotFoundError
from ._errors import NullAccessError

Pair: TypeAlias = tuple[str, "JsonValue"]


class ValueType(Enum):
    """Discriminator identifying which variant a JsonValue holds."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOL = "bool"
    NULL = "null"


class JsonValue:
    """
    Base class for every node in a parsed JSON tree.

    Provides the complete accessor surface. Accessors that do not apply to
    the concrete variant raise AccessTypeError, after first giving
    _check_null() the chance to raise NullAccessError.
    """

    type: ClassVar[ValueType]

    def _check_null(self) -> None:
        """Raises NullAccessError for null values; no-op otherwise."""

    def __getitem__(self, key: str | int) -> "JsonValue":
        """Looks up a member by name or an array element by index."""
        if isinstance(key, str):
            return self.get_member(key)
        if isinstance(key, int) and not isinstance(key, bool):
            return self.get_item(key)
        self._check_null()
        raise AccessTypeError(
            f"Can't index value with {type(key).__name__}"
        )

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            self._check_null()
            raise AccessTypeError("Can't index non-object with non-string")
        return self.has(name)

    def __iter__(self) -> Iterator["JsonValue"]:
        return iter(self.as_array())

    def __int__(self) -> int:
        return self.as_integer()

    def __float__(self) -> float:
        return self.as_float()

    def get_member(self, name: str) -> "JsonValue":
        self._check_null()
        raise AccessTypeError("Can't index non-object with string")

    def has(self, name: str) -> bool:
        self._check_null()
        raise AccessTypeError("Can't index non-object with string")

    def get_item(self, index: int) -> "JsonValue":
        self._check_null()
        raise AccessTypeError("Can't index non-array with integer")

    def length(self) -> int:
        self._check_null()
        raise AccessTypeError("Can't get length of non-array")

    def as_map(self) -> Mapping[str, "JsonValue"]:
        self._check_null()
        raise AccessTypeError("Can't get object map for non-object")

    def as_pairs(self) -> tuple[Pair, ...]:
        self._check_null()
        raise AccessTypeError("Can't get object pairs for non-object")

    def as_array(self) -> tuple["JsonValue", ...]:
        self._check_null()
        raise AccessTypeError("Can't get array for non-array")

    def as_string(self) -> str:
        self._check_null()
        raise AccessTypeError("Value is not a string")

    def as_integer(self) -> int:
        self._check_null()
        raise AccessTypeError("Value is not an integer")

    def as_float(self) -> float:
        self._check_null()
        raise AccessTypeError("Value is not a float")

    def as_bool(self) -> bool:
        self._check_null()
        raise AccessTypeError("Value is not a bool")

    def to_python(self) -> Any:
        """
        Converts the tree to plain Python values.

        Objects become dicts holding the last value of each key, arrays
        become lists and null becomes None.
        """
        return None


@dataclass(frozen=True)
class JsonObject(JsonValue):
    """
    A JSON object holding both document order and keyed lookup.

    `pairs` keeps every (key, value) pair as it appeared in the source,
    duplicates included. The lookup mapping is derived from the same pairs,
    so a repeated key resolves to its last assignment.
    """

    type: ClassVar[ValueType] = ValueType.OBJECT

    pairs: tuple[Pair, ...] = ()
    _members: dict[str, JsonValue] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        pairs = tuple(self.pairs)
        object.__setattr__(self, "pairs", pairs)
        object.__setattr__(self, "_members", dict(pairs))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair]) -> "JsonObject":
        return cls(tuple(pairs))

    def get_member(self, name: str) -> JsonValue:
        try:
            return self._members[name]
        except KeyError:
            raise NotFoundError(name) from None

    def has(self, name: str) -> bool:
        return name in self._members

    def as_map(self) -> Mapping[str, JsonValue]:
        return MappingProxyType(self._members)

    def as_pairs(self) -> tuple[Pair, ...]:
        return self.pairs

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.pairs}


@dataclass(frozen=True)
class JsonArray(JsonValue):
    """A JSON array in document order."""

    type: ClassVar[ValueType] = ValueType.ARRAY

    items: tuple[JsonValue, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def get_item(self, index: int) -> JsonValue:
        if isinstance(index, bool) or not isinstance(index, int):
            raise AccessTypeError("Array index must be an integer")
        if index < 0 or index >= len(self.items):
            raise NotFoundError(index)
        return self.items[index]

    def length(self) -> int:
        return len(self.items)

    def as_array(self) -> tuple[JsonValue, ...]:
        return self.items

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class JsonString(JsonValue):
    """
    A JSON string with escapes already resolved.

    An unpaired UTF-16 surrogate escape is kept as a lone surrogate code
    point; as_bytes() encodes it as its raw three byte form.
    """

    type: ClassVar[ValueType] = ValueType.STRING

    value: str = ""

    def as_string(self) -> str:
        return self.value

    def to_python(self) -> str:
        return self.value

    def as_bytes(self) -> bytes:
        """Returns the payload encoded as UTF-8."""
        return self.value.encode("utf-8", "surrogatepass")


@dataclass(frozen=True)
class JsonInteger(JsonValue):
    type: ClassVar[ValueType] = ValueType.INTEGER

    value: int = 0

    def as_integer(self) -> int:
        return self.value

    def to_python(self) -> int:
        return self.value

    def as_float(self) -> float:
        # JSON has a single number type, so integers widen on request
        return float(self.value)


@dataclass(frozen=True)
class JsonFloat(JsonValue):
    type: ClassVar[ValueType] = ValueType.FLOAT

    value: float = 0.0

    def as_float(self) -> float:
        return self.value

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class JsonBool(JsonValue):
    type: ClassVar[ValueType] = ValueType.BOOL

    value: bool = False

    def as_bool(self) -> bool:
        return self.value

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class JsonNull(JsonValue):
    """The JSON null; rejects every payload and container access."""

    type: ClassVar[ValueType] = ValueType.NULL

    def _check_null(self) -> None:
        raise NullAccessError()


__all__ = [
    "JsonArray",
    "JsonBool",
    "JsonFloat",
    "JsonInteger",
    "JsonNull",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "Pair",
    "ValueType",
]
