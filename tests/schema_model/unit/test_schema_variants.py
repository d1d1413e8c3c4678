"""Schema variant model tests."""

from __future__ import annotations

import copy
from dataclasses import FrozenInstanceError

import pytest
from avroschema.schema_model import (
    NO_DEFAULT,
    NULL,
    PRIMITIVE_TYPE_NAMES,
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
    Union,
)


@pytest.mark.parametrize(
    ("schema", "type_name"),
    [
        (STRING, "string"),
        (LogicalType.DATE, "date"),
        (LogicalType.TIMESTAMP_MICROS, "timestamp-micros"),
        (Record(name="r"), "record"),
        (Enum(name="e"), "enum"),
        (Array(items=STRING), "array"),
        (Map(values=STRING), "map"),
        (Fixed(name="f", size=4), "fixed"),
        (Decimal(precision=9, scale=2), "decimal"),
        (Union((NULL, STRING)), "union"),
    ],
)
def test_every_variant_reports_its_type_name(schema: object, type_name: str) -> None:
    assert schema.type_name == type_name  # type: ignore[attr-defined]


def test_primitive_accepts_unknown_names_but_reports_them() -> None:
    assert len(PRIMITIVE_TYPE_NAMES) == 8
    assert STRING.is_known
    assert not Primitive("uuid").is_known
    assert Primitive("uuid").type_name == "uuid"


def test_logical_types_expose_their_base_type() -> None:
    assert LogicalType.DATE.base_type == "int"
    assert LogicalType.TIME_MILLIS.base_type == "int"
    assert LogicalType.TIME_MICROS.base_type == "long"
    assert LogicalType.TIMESTAMP_MILLIS.base_type == "long"
    assert LogicalType.DURATION.base_type == "fixed"


def test_schema_values_are_immutable() -> None:
    record = Record(name="r", fields=(Field(name="id", type=STRING),))

    with pytest.raises(FrozenInstanceError):
        record.name = "other"  # type: ignore[misc]


def test_field_without_default_is_distinguished_from_null_default() -> None:
    missing = Field(name="a", type=STRING)
    nullable = Field(name="a", type=Union((NULL, STRING)), default=None)

    assert missing.default is NO_DEFAULT
    assert not missing.has_default
    assert nullable.has_default
    assert copy.deepcopy(missing).default is NO_DEFAULT


def test_record_field_lookup_returns_first_match_or_none() -> None:
    record = Record(
        name="r",
        fields=(Field(name="id", type=STRING), Field(name="count", type=Primitive("int"))),
    )

    assert record.field("count") == Field(name="count", type=Primitive("int"))
    assert record.field("missing") is None


def test_union_iterates_over_members_in_order() -> None:
    assert list(Union((NULL, STRING))) == [NULL, STRING]
