"""Schema decoding service.

Text is parsed once into a generic JSON tree; the tree's shape and its ``type`` and
``logicalType`` attributes then select the schema variant to build. Nested schemas
(field types, array items, map values, union members) re-enter the same dispatch.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from avroschema.configuration.runtime_settings import CodecSettings
from avroschema.schema_model import (
    NO_DEFAULT,
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

from .codec_errors import (
    MalformedSchemaTextError,
    SchemaDecodeError,
    SchemaDepthError,
    UnknownComplexTypeError,
    UnknownLogicalTypeError,
    UnrecognizedSchemaTokenError,
)

_LOGGER = logging.getLogger(__name__)

_LEADING_TOKENS = ('"', "[", "{")

SchemaT = TypeVar("SchemaT", bound=Schema)

_VARIANT_KEYWORDS: dict[type, str] = {
    Record: "record",
    Enum: "enum",
    Array: "array",
    Map: "map",
    Fixed: "fixed",
}


def decode_schema(text: str | bytes, settings: CodecSettings | None = None) -> Schema | None:
    """Decode schema text into its schema variant.

    Returns ``None`` when the text is empty or whitespace only.

    Raises:
      MalformedSchemaTextError: If the text is not valid JSON.
      UnrecognizedSchemaTokenError: If the text does not start with a string, array or object.
      UnknownLogicalTypeError: If an object declares an unsupported ``logicalType``.
      UnknownComplexTypeError: If an object declares an unsupported ``type``.
      SchemaDecodeError: If a variant's attributes have the wrong shape.
    """
    stripped = _as_text(text).strip()
    if not stripped:
        return None
    if stripped[0] not in _LEADING_TOKENS:
        raise UnrecognizedSchemaTokenError(stripped)

    settings = settings or CodecSettings()
    tree = _load_tree(stripped, settings)
    try:
        schema = _SchemaTreeDecoder(settings).decode(tree, depth=0)
    except RecursionError as exc:
        raise _recursion_limit_error(settings) from exc
    _LOGGER.debug("decoded %s schema", schema.type_name)
    return schema


def decode_into(
    text: str | bytes, expected: type[SchemaT], settings: CodecSettings | None = None
) -> SchemaT:
    """Decode schema text as a specific variant.

    The top-level node is parsed with the ``expected`` variant's rules without
    consulting its ``type`` attribute; nested schemas still go through the generic
    dispatch.

    Raises:
      SchemaDecodeError: If the text is empty or its shape does not fit ``expected``.
    """
    stripped = _as_text(text).strip()
    if not stripped:
        raise MalformedSchemaTextError("Schema text is empty.")
    settings = settings or CodecSettings()
    tree = _load_tree(stripped, settings)
    try:
        decoded = _SchemaTreeDecoder(settings).decode_as(tree, expected)
    except RecursionError as exc:
        raise _recursion_limit_error(settings) from exc
    if not isinstance(decoded, expected):
        raise SchemaDecodeError(
            f"Decoded {decoded.type_name} schema where {expected.__name__} was expected."
        )
    return decoded


def _as_text(text: str | bytes) -> str:
    if isinstance(text, bytes | bytearray):
        try:
            return bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedSchemaTextError(f"Schema text is not valid UTF-8: {exc}") from exc
    return text


def _load_tree(text: str, settings: CodecSettings) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        _LOGGER.debug("schema text is not valid JSON: %s", exc)
        raise MalformedSchemaTextError(f"Invalid schema JSON: {exc}") from exc
    except RecursionError as exc:
        raise _recursion_limit_error(settings) from exc


def _recursion_limit_error(settings: CodecSettings) -> SchemaDepthError:
    _LOGGER.debug("schema nesting exhausted the interpreter stack")
    return SchemaDepthError(
        settings.max_depth, "schema nesting exceeds the interpreter recursion limit"
    )


class _SchemaTreeDecoder:
    """Builds schema variants from a parsed JSON tree."""

    def __init__(self, settings: CodecSettings) -> None:
        self._max_depth = settings.max_depth
        self._complex_parsers: dict[str, Callable[[Mapping[str, Any], int], Schema]] = {
            "record": self._parse_record,
            "enum": self._parse_enum,
            "array": self._parse_array,
            "map": self._parse_map,
            "fixed": self._parse_fixed,
        }

    def decode(self, node: Any, *, depth: int) -> Schema:
        if depth > self._max_depth:
            raise SchemaDepthError(self._max_depth)
        if isinstance(node, str):
            return Primitive(node)
        if isinstance(node, list):
            return self._decode_union(node, depth=depth)
        if isinstance(node, Mapping):
            return self._decode_object(node, depth=depth)
        raise UnrecognizedSchemaTokenError(json.dumps(node))

    def decode_as(self, node: Any, expected: type[Schema]) -> Schema:
        if expected is Primitive:
            if not isinstance(node, str):
                raise SchemaDecodeError("Primitive schemas must be encoded as a string.")
            return Primitive(node)
        if expected is Union:
            if not isinstance(node, list):
                raise SchemaDecodeError("Union schemas must be encoded as an array.")
            return self._decode_union(node, depth=0)
        if not isinstance(node, Mapping):
            raise SchemaDecodeError(f"{expected.__name__} schemas must be encoded as an object.")
        if expected is LogicalType:
            return self._decode_logical(_optional_string(node, "logicalType", "schema"), node)
        if expected is Decimal:
            return self._decode_logical("decimal", node)
        parser = self._complex_parsers.get(_VARIANT_KEYWORDS.get(expected, ""))
        if parser is None:
            raise SchemaDecodeError(f"Unsupported schema variant: {expected!r}")
        return parser(node, 0)

    def _decode_union(self, node: list[Any], *, depth: int) -> Union:
        members = tuple(self._decode_nested(member, depth, "union member") for member in node)
        return Union(members)

    def _decode_object(self, node: Mapping[str, Any], *, depth: int) -> Schema:
        logical_type = _optional_string(node, "logicalType", "schema")
        if logical_type:
            return self._decode_logical(logical_type, node)

        type_name = _optional_string(node, "type", "schema")
        parser = self._complex_parsers.get(type_name)
        if parser is None:
            _LOGGER.debug("unknown complex type %r", type_name)
            raise UnknownComplexTypeError(type_name)
        return parser(node, depth)

    def _decode_logical(self, logical_type: str, node: Mapping[str, Any]) -> Schema:
        if logical_type == "decimal":
            return Decimal(
                precision=_require_int(node, "precision", "decimal"),
                scale=_optional_int(node, "scale", "decimal"),
            )
        try:
            return LogicalType(logical_type)
        except ValueError as exc:
            _LOGGER.debug("unknown logical type %r", logical_type)
            raise UnknownLogicalTypeError(logical_type) from exc

    def _parse_record(self, node: Mapping[str, Any], depth: int) -> Record:
        raw_fields = node.get("fields")
        if raw_fields is None:
            raw_fields = []
        if not isinstance(raw_fields, list):
            raise SchemaDecodeError("record.fields must be a list.")
        fields = tuple(self._parse_field(raw_field, depth) for raw_field in raw_fields)
        return Record(
            name=_optional_string(node, "name", "record"),
            namespace=_optional_string(node, "namespace", "record"),
            doc=_optional_string(node, "doc", "record"),
            aliases=_string_tuple(node, "aliases", "record"),
            fields=fields,
        )

    def _parse_field(self, node: Any, depth: int) -> Field:
        if not isinstance(node, Mapping):
            raise SchemaDecodeError("Record field definitions must be objects.")
        name = _optional_string(node, "name", "field")
        if "type" not in node:
            raise SchemaDecodeError(f"Field '{name}' is missing a type.")
        return Field(
            name=name,
            type=self._decode_nested(node["type"], depth, f"field '{name}' type"),
            doc=_optional_string(node, "doc", "field"),
            default=node.get("default", NO_DEFAULT),
            aliases=_string_tuple(node, "aliases", "field"),
            order=_optional_string(node, "order", "field"),
        )

    def _parse_enum(self, node: Mapping[str, Any], _depth: int) -> Enum:
        return Enum(
            name=_optional_string(node, "name", "enum"),
            namespace=_optional_string(node, "namespace", "enum"),
            doc=_optional_string(node, "doc", "enum"),
            aliases=_string_tuple(node, "aliases", "enum"),
            symbols=_string_tuple(node, "symbols", "enum"),
        )

    def _parse_array(self, node: Mapping[str, Any], depth: int) -> Array:
        return Array(items=self._decode_nested(node.get("items"), depth, "array items"))

    def _parse_map(self, node: Mapping[str, Any], depth: int) -> Map:
        return Map(values=self._decode_nested(node.get("values"), depth, "map values"))

    def _parse_fixed(self, node: Mapping[str, Any], _depth: int) -> Fixed:
        return Fixed(
            name=_optional_string(node, "name", "fixed"),
            namespace=_optional_string(node, "namespace", "fixed"),
            aliases=_string_tuple(node, "aliases", "fixed"),
            size=_optional_int(node, "size", "fixed"),
        )

    def _decode_nested(self, node: Any, depth: int, label: str) -> Schema:
        if node is None:
            raise SchemaDecodeError(f"Missing schema for {label}.")
        return self.decode(node, depth=depth + 1)


def _optional_string(node: Mapping[str, Any], key: str, context: str) -> str:
    value = node.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise SchemaDecodeError(f"{context}.{key} must be a string.")
    return value


def _string_tuple(node: Mapping[str, Any], key: str, context: str) -> tuple[str, ...]:
    value = node.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise SchemaDecodeError(f"{context}.{key} must be a list of strings.")
    for item in value:
        if not isinstance(item, str):
            raise SchemaDecodeError(f"{context}.{key} entries must be strings.")
    return tuple(value)


def _optional_int(node: Mapping[str, Any], key: str, context: str) -> int:
    if node.get(key) is None:
        return 0
    return _require_int(node, key, context)


def _require_int(node: Mapping[str, Any], key: str, context: str) -> int:
    value = node.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaDecodeError(f"{context}.{key} must be an integer.")
    return value
