"""Avro schema variants.

Each variant is a plain immutable value exposing ``type_name``. Encoding, decoding
and comparison live in their own modules and dispatch over this closed set.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

PRIMITIVE_TYPE_NAMES = (
    "null",
    "boolean",
    "int",
    "long",
    "float",
    "double",
    "bytes",
    "string",
)


class _NoDefault:
    """Marker for a field declared without a default value."""

    _instance: _NoDefault | None = None

    def __new__(cls) -> _NoDefault:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT: Any = _NoDefault()


@dataclass(frozen=True)
class Primitive:
    """Primitive type referenced by its bare name."""

    name: str

    @property
    def type_name(self) -> str:
        return self.name

    @property
    def is_known(self) -> bool:
        """Whether the name is one of the eight Avro primitives."""
        return self.name in PRIMITIVE_TYPE_NAMES


class LogicalType(str, enum.Enum):
    """Stateless logical types layered on a primitive or fixed base."""

    DATE = "date"
    TIME_MILLIS = "time-millis"
    TIME_MICROS = "time-micros"
    TIMESTAMP_MILLIS = "timestamp-millis"
    TIMESTAMP_MICROS = "timestamp-micros"
    DURATION = "duration"

    @property
    def type_name(self) -> str:
        return self.value

    @property
    def base_type(self) -> str:
        return _LOGICAL_BASE_TYPES[self.value]


_LOGICAL_BASE_TYPES = {
    "date": "int",
    "time-millis": "int",
    "time-micros": "long",
    "timestamp-millis": "long",
    "timestamp-micros": "long",
    "duration": "fixed",
}

DURATION_SIZE = 12


@dataclass(frozen=True)
class Field:  # pylint: disable=too-many-instance-attributes
    """Named, typed slot of a record.

    Only ``name`` and ``type`` take part in structural equality; the remaining
    attributes are carried so that encoding reproduces them.
    """

    name: str
    type: Schema
    doc: str = ""
    default: Any = NO_DEFAULT
    aliases: tuple[str, ...] = ()
    order: str = ""

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


@dataclass(frozen=True)
class Record:
    """Named record type with ordered fields."""

    name: str
    fields: tuple[Field, ...] = ()
    namespace: str = ""
    doc: str = ""
    aliases: tuple[str, ...] = ()

    @property
    def type_name(self) -> str:
        return "record"

    def field(self, name: str) -> Field | None:
        """Return the first field with the given name."""
        for candidate in self.fields:
            if candidate.name == name:
                return candidate
        return None


@dataclass(frozen=True)
class Enum:
    """Named enumeration with ordered symbols."""

    name: str
    symbols: tuple[str, ...] = ()
    namespace: str = ""
    doc: str = ""
    aliases: tuple[str, ...] = ()

    @property
    def type_name(self) -> str:
        return "enum"


@dataclass(frozen=True)
class Array:
    items: Schema

    @property
    def type_name(self) -> str:
        return "array"


@dataclass(frozen=True)
class Map:
    """Map with implicit string keys."""

    values: Schema

    @property
    def type_name(self) -> str:
        return "map"


@dataclass(frozen=True)
class Fixed:
    """Named fixed-size byte sequence."""

    name: str
    size: int = 0
    namespace: str = ""
    aliases: tuple[str, ...] = ()

    @property
    def type_name(self) -> str:
        return "fixed"


@dataclass(frozen=True)
class Decimal:
    precision: int
    scale: int = 0

    @property
    def type_name(self) -> str:
        return "decimal"


@dataclass(frozen=True)
class Union:
    """Exactly one of the member schemas, in declaration order."""

    members: tuple[Schema, ...] = ()

    @property
    def type_name(self) -> str:
        return "union"

    def __iter__(self) -> Iterator[Schema]:
        return iter(self.members)


Schema = Primitive | LogicalType | Record | Enum | Array | Map | Fixed | Decimal | Union

SCHEMA_VARIANTS = (Primitive, LogicalType, Record, Enum, Array, Map, Fixed, Decimal, Union)

NULL = Primitive("null")
BOOLEAN = Primitive("boolean")
INT = Primitive("int")
LONG = Primitive("long")
FLOAT = Primitive("float")
DOUBLE = Primitive("double")
BYTES = Primitive("bytes")
STRING = Primitive("string")
