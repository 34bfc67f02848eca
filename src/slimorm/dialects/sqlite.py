"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from ..core.columns import DataType
from .base import render_on_conflict_upsert, standard_column_type

if TYPE_CHECKING:
    from ..core.descriptor import TypeDescriptor
    from ..core.properties import Property


class SQLiteDialect:
    """
    SQLite dialect. Generated integer keys are declared as plain ``integer``
    so SQLite assigns them through the rowid.
    """

    name: Final[str] = "sqlite"
    generated_clause: Final[str] = ""

    def column_type(self, prop: "Property") -> str:
        if prop.is_generated and prop.data_type in (DataType.INTEGER, DataType.BIGINT):
            return "integer"
        return standard_column_type(prop)

    def render_upsert(
        self, descriptor: "TypeDescriptor", row: Any, table: str
    ) -> tuple[str, list[Any]]:
        return render_on_conflict_upsert(descriptor, row, table)
