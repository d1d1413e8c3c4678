"""Canonical JSON encoding of schema values."""

from __future__ import annotations

import json
import logging
from typing import Any

from avroschema.configuration.runtime_settings import DEFAULT_MAX_DEPTH, CodecSettings
from avroschema.schema_model import (
    DURATION_SIZE,
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

from .codec_errors import SchemaEncodeError

_LOGGER = logging.getLogger(__name__)


def encode_schema(schema: Schema, settings: CodecSettings | None = None) -> str:
    """Return the canonical JSON text for a schema value.

    Raises:
      SchemaEncodeError: If ``schema`` (or anything nested in it) is not a schema value,
        nests deeper than ``settings.max_depth``, or carries a field default that is
        not JSON-serializable.
    """
    settings = settings or CodecSettings()
    tree = to_canonical_tree(schema, max_depth=settings.max_depth)
    try:
        return json.dumps(tree, indent=settings.indent, sort_keys=settings.sort_keys)
    except (TypeError, ValueError, RecursionError) as exc:
        _LOGGER.debug("canonical tree is not JSON-serializable: %s", exc)
        raise SchemaEncodeError(f"Cannot serialize schema as JSON: {exc}") from exc


def to_canonical_tree(schema: Schema, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Return the JSON-compatible tree for a schema value."""
    try:
        return _CanonicalTreeEncoder(max_depth).encode(schema, depth=0)
    except RecursionError as exc:
        raise SchemaEncodeError(
            "schema nesting exceeds the interpreter recursion limit"
        ) from exc


class _CanonicalTreeEncoder:
    """Builds the JSON-compatible tree, bounded by a maximum nesting depth."""

    def __init__(self, max_depth: int) -> None:
        self._max_depth = max_depth

    def encode(self, schema: Schema, *, depth: int) -> Any:
        if depth > self._max_depth:
            raise SchemaEncodeError(
                f"schema nesting exceeds maximum depth of {self._max_depth}"
            )
        if isinstance(schema, LogicalType):
            return _encode_logical(schema)
        if isinstance(schema, Primitive):
            return schema.name
        if isinstance(schema, Record):
            return self._encode_record(schema, depth)
        if isinstance(schema, Enum):
            return _encode_enum(schema)
        if isinstance(schema, Array):
            return {"type": "array", "items": self.encode(schema.items, depth=depth + 1)}
        if isinstance(schema, Map):
            return {"type": "map", "values": self.encode(schema.values, depth=depth + 1)}
        if isinstance(schema, Fixed):
            return _encode_fixed(schema)
        if isinstance(schema, Decimal):
            return {
                "type": "bytes",
                "logicalType": "decimal",
                "precision": schema.precision,
                "scale": schema.scale,
            }
        if isinstance(schema, Union):
            return [self.encode(member, depth=depth + 1) for member in schema.members]
        _LOGGER.debug("refusing to encode %s", type(schema).__name__)
        raise SchemaEncodeError(f"Cannot encode {type(schema).__name__} as an Avro schema.")

    def _encode_record(self, schema: Record, depth: int) -> dict[str, Any]:
        encoded: dict[str, Any] = {"type": "record", "name": schema.name}
        _put_named_attributes(encoded, schema.namespace, schema.doc, schema.aliases)
        encoded["fields"] = [self._encode_field(field, depth) for field in schema.fields]
        return encoded

    def _encode_field(self, field: Field, depth: int) -> dict[str, Any]:
        encoded: dict[str, Any] = {
            "name": field.name,
            "type": self.encode(field.type, depth=depth + 1),
        }
        if field.doc:
            encoded["doc"] = field.doc
        if field.has_default:
            encoded["default"] = field.default
        if field.aliases:
            encoded["aliases"] = list(field.aliases)
        if field.order:
            encoded["order"] = field.order
        return encoded


def _encode_logical(schema: LogicalType) -> dict[str, Any]:
    encoded: dict[str, Any] = {"type": schema.base_type, "logicalType": schema.value}
    if schema is LogicalType.DURATION:
        encoded["size"] = DURATION_SIZE
    return encoded


def _encode_enum(schema: Enum) -> dict[str, Any]:
    encoded: dict[str, Any] = {"type": "enum", "name": schema.name}
    _put_named_attributes(encoded, schema.namespace, schema.doc, schema.aliases)
    encoded["symbols"] = list(schema.symbols)
    return encoded


def _encode_fixed(schema: Fixed) -> dict[str, Any]:
    encoded: dict[str, Any] = {"type": "fixed", "name": schema.name}
    _put_named_attributes(encoded, schema.namespace, "", schema.aliases)
    encoded["size"] = schema.size
    return encoded


def _put_named_attributes(
    encoded: dict[str, Any], namespace: str, doc: str, aliases: tuple[str, ...]
) -> None:
    if namespace:
        encoded["namespace"] = namespace
    if doc:
        encoded["doc"] = doc
    if aliases:
        encoded["aliases"] = list(aliases)
