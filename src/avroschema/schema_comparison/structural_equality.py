"""Structural equality across schema variants."""

from __future__ import annotations

from avroschema.schema_model import (
    SCHEMA_VARIANTS,
    Array,
    Decimal,
    Enum,
    Field,
    Fixed,
    LogicalType,
    Map,
    Primitive,
    Record,
    Union,
)

_Pair = tuple[object, object]


def schemas_equal(left: object, right: object) -> bool:
    """Return True when both values denote the same Avro type.

    Unions compare positionally. Records compare names, namespaces and fields by
    position; a field's doc, default, aliases and order are ignored. Values that are
    not schemas are never equal to anything.

    The walk keeps its own stack of pending pairs, so nesting depth is not bounded
    by the interpreter recursion limit.
    """
    pending: list[_Pair] = [(left, right)]
    while pending:
        current_left, current_right = pending.pop()
        if not _shallow_equal(current_left, current_right, pending):
            return False
    return True


def fields_equal(left: Field, right: Field) -> bool:
    """Compare two record fields by name and type only."""
    return left.name == right.name and schemas_equal(left.type, right.type)


def _shallow_equal(left: object, right: object, pending: list[_Pair]) -> bool:
    """Compare the attributes of one pair and queue its nested schema pairs."""
    if not isinstance(left, SCHEMA_VARIANTS) or not isinstance(right, SCHEMA_VARIANTS):
        return False
    if left.type_name != right.type_name or type(left) is not type(right):
        return False

    if isinstance(left, Primitive | LogicalType):
        return True
    if isinstance(left, Union) and isinstance(right, Union):
        if len(left.members) != len(right.members):
            return False
        pending.extend(zip(left.members, right.members))
        return True
    if isinstance(left, Record) and isinstance(right, Record):
        if not _same_identity(left.name, left.namespace, right.name, right.namespace):
            return False
        if len(left.fields) != len(right.fields):
            return False
        for left_field, right_field in zip(left.fields, right.fields):
            if left_field.name != right_field.name:
                return False
            pending.append((left_field.type, right_field.type))
        return True
    if isinstance(left, Enum) and isinstance(right, Enum):
        return _same_identity(
            left.name, left.namespace, right.name, right.namespace
        ) and tuple(left.symbols) == tuple(right.symbols)
    if isinstance(left, Array) and isinstance(right, Array):
        pending.append((left.items, right.items))
        return True
    if isinstance(left, Map) and isinstance(right, Map):
        pending.append((left.values, right.values))
        return True
    if isinstance(left, Fixed) and isinstance(right, Fixed):
        return (
            _same_identity(left.name, left.namespace, right.name, right.namespace)
            and left.size == right.size
        )
    if isinstance(left, Decimal) and isinstance(right, Decimal):
        return left.precision == right.precision and left.scale == right.scale
    return False


def _same_identity(name: str, namespace: str, other_name: str, other_namespace: str) -> bool:
    return name == other_name and namespace == other_namespace
