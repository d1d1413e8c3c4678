"""Schema codec error taxonomy."""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for schema encoding and decoding failures."""


class SchemaEncodeError(SchemaError):
    """Raised when a value handed to the encoder is not a schema."""


class SchemaDecodeError(SchemaError):
    """Raised when schema text cannot be decoded into a schema value."""


class MalformedSchemaTextError(SchemaDecodeError):
    """Raised when the schema text is not valid JSON."""


class UnknownLogicalTypeError(SchemaDecodeError):
    """Raised for a ``logicalType`` outside the supported set."""

    def __init__(self, logical_type: str) -> None:
        super().__init__(f"unknown logical type {logical_type}")
        self.logical_type = logical_type


class UnknownComplexTypeError(SchemaDecodeError):
    """Raised for an object whose ``type`` is not a complex type keyword."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"unknown complex type {type_name}")
        self.type_name = type_name


class UnrecognizedSchemaTokenError(SchemaDecodeError):
    """Raised when the text starts with something other than a string, array or object."""

    def __init__(self, text: str) -> None:
        super().__init__(f"could not parse {text} as Schema")
        self.text = text


class SchemaDepthError(SchemaDecodeError):
    """Raised when schema nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int, message: str | None = None) -> None:
        super().__init__(message or f"schema nesting exceeds maximum depth of {max_depth}")
        self.max_depth = max_depth
