"""Schema comparison exports."""

from .structural_equality import fields_equal, schemas_equal
from .union_membership import schema_contains

__all__ = ["schemas_equal", "fields_equal", "schema_contains"]
