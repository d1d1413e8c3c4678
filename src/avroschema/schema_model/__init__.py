"""Schema model exports."""

from .schema_variants import (
    BOOLEAN,
    BYTES,
    DOUBLE,
    DURATION_SIZE,
    FLOAT,
    INT,
    LONG,
    NO_DEFAULT,
    NULL,
    PRIMITIVE_TYPE_NAMES,
    SCHEMA_VARIANTS,
    STRING,
    Array,
    Decimal,
    Enum,
    Field,
    Fixed,
    LogicalType,
    Map,
    Primitive,
    Record,
    Schema,
    Union,
)

__all__ = [
    "Array",
    "Decimal",
    "Enum",
    "Field",
    "Fixed",
    "LogicalType",
    "Map",
    "Primitive",
    "Record",
    "Schema",
    "Union",
    "SCHEMA_VARIANTS",
    "PRIMITIVE_TYPE_NAMES",
    "DURATION_SIZE",
    "NO_DEFAULT",
    "NULL",
    "BOOLEAN",
    "INT",
    "LONG",
    "FLOAT",
    "DOUBLE",
    "BYTES",
    "STRING",
]
