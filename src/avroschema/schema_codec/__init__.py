"""Schema codec exports."""

from .canonical_encoder import encode_schema, to_canonical_tree
from .codec_errors import (
    MalformedSchemaTextError,
    SchemaDecodeError,
    SchemaDepthError,
    SchemaEncodeError,
    SchemaError,
    UnknownComplexTypeError,
    UnknownLogicalTypeError,
    UnrecognizedSchemaTokenError,
)
from .discriminating_decoder import decode_into, decode_schema

__all__ = [
    "encode_schema",
    "to_canonical_tree",
    "decode_schema",
    "decode_into",
    "SchemaError",
    "SchemaEncodeError",
    "SchemaDecodeError",
    "MalformedSchemaTextError",
    "SchemaDepthError",
    "UnknownComplexTypeError",
    "UnknownLogicalTypeError",
    "UnrecognizedSchemaTokenError",
]
