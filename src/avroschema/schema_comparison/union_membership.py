"""Union membership policy."""

from __future__ import annotations

from avroschema.schema_model import Union

from .structural_equality import schemas_equal


def schema_contains(container: object, member: object) -> bool:
    """Return True when a value of type ``member`` fits where ``container`` is declared.

    For a union, membership ignores position. Any other container degrades to
    ``schemas_equal``.
    """
    if isinstance(container, Union):
        return any(schemas_equal(candidate, member) for candidate in container.members)
    return schemas_equal(container, member)
