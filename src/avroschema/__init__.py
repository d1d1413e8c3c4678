"""Avro schema model, canonical codec and structural comparison."""

import logging

from .configuration import CodecSettings
from .schema_codec import (
    MalformedSchemaTextError,
    SchemaDecodeError,
    SchemaDepthError,
    SchemaEncodeError,
    SchemaError,
    UnknownComplexTypeError,
    UnknownLogicalTypeError,
    UnrecognizedSchemaTokenError,
    decode_into,
    decode_schema,
    encode_schema,
    to_canonical_tree,
)
from .schema_comparison import fields_equal, schema_contains, schemas_equal
from .schema_model import (
    BOOLEAN,
    BYTES,
    DOUBLE,
    FLOAT,
    INT,
    LONG,
    NO_DEFAULT,
    NULL,
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

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CodecSettings",
    "encode_schema",
    "to_canonical_tree",
    "decode_schema",
    "decode_into",
    "schemas_equal",
    "fields_equal",
    "schema_contains",
    "SchemaError",
    "SchemaEncodeError",
    "SchemaDecodeError",
    "MalformedSchemaTextError",
    "SchemaDepthError",
    "UnknownComplexTypeError",
    "UnknownLogicalTypeError",
    "UnrecognizedSchemaTokenError",
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
