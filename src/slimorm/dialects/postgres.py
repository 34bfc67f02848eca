"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from ..core.columns import DataType
from .base import render_on_conflict_upsert

if TYPE_CHECKING:
    from ..core.descriptor import TypeDescriptor
    from ..core.properties import Property


_COLUMN_TYPES: Final[dict[DataType, str]] = {
    DataType.INTEGER: "integer",
    DataType.BIGINT: "bigint",
    DataType.DOUBLE: "double precision",
    DataType.FLOAT: "real",
    DataType.TIMESTAMP: "timestamp",
    DataType.BOOLEAN: "boolean",
}


class PostgresDialect:
    """
    PostgreSQL dialect using identity columns and ``on conflict`` upserts.
    """

    name: Final[str] = "postgresql"
    generated_clause: Final[str] = " generated by default as identity"

    def column_type(self, prop: "Property") -> str:
        if prop.data_type is DataType.DECIMAL:
            return f"numeric({prop.precision},{prop.scale})"
        column_type = _COLUMN_TYPES.get(prop.data_type)
        if column_type is None:
            return f"varchar({prop.length})"
        return column_type

    def render_upsert(
        self, descriptor: "TypeDescriptor", row: Any, table: str
    ) -> tuple[str, list[Any]]:
        return render_on_conflict_upsert(descriptor, row, table)
