"""Union membership tests."""

from __future__ import annotations

from avroschema.schema_comparison import schema_contains
from avroschema.schema_model import INT, NULL, STRING, Decimal, Enum, LogicalType, Union


def test_union_contains_members_regardless_of_position() -> None:
    for union in (Union((NULL, STRING)), Union((STRING, NULL))):
        assert schema_contains(union, STRING)
        assert schema_contains(union, NULL)
        assert not schema_contains(union, INT)


def test_union_contains_structured_members() -> None:
    union = Union((NULL, Decimal(precision=1, scale=2), STRING))

    assert schema_contains(union, Decimal(precision=1, scale=2))
    assert not schema_contains(union, Decimal(precision=1, scale=3))


def test_union_contains_named_types_by_structure() -> None:
    union = Union((NULL, Enum(name="sex", symbols=("Male", "Female"))))

    assert schema_contains(union, Enum(name="sex", symbols=("Male", "Female")))
    assert not schema_contains(union, Enum(name="gender", symbols=("Male", "Female")))


def test_non_union_container_degrades_to_equality() -> None:
    assert schema_contains(LogicalType.DATE, LogicalType.DATE)
    assert not schema_contains(STRING, NULL)


def test_union_is_not_a_member_of_an_equal_union() -> None:
    union = Union((NULL, STRING))

    assert not schema_contains(union, Union((NULL, STRING)))
    assert schema_contains(Union((NULL, union)), Union((NULL, STRING)))


def test_empty_union_contains_nothing() -> None:
    assert not schema_contains(Union(), NULL)
