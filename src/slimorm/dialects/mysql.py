"""
MySQL dialect implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from .base import standard_column_type

if TYPE_CHECKING:
    from ..core.descriptor import TypeDescriptor
    from ..core.properties import Property


class MySQLDialect:
    """
    MySQL dialect: standard column types plus ``on duplicate key update`` upserts.
    """

    name: Final[str] = "mysql"
    generated_clause: Final[str] = " auto_increment"

    def column_type(self, prop: "Property") -> str:
        return standard_column_type(prop)

    def render_upsert(
        self, descriptor: "TypeDescriptor", row: Any, table: str
    ) -> tuple[str, list[Any]]:
        columns = descriptor.column_names
        placeholders = ",".join("?" for _ in columns)
        updates = ",".join(f"{column}=values({column})" for column in columns)
        sql = (
            f"insert into {table} ({','.join(columns)}) values ({placeholders}) "
            f"on duplicate key update {updates}"
        )
        return sql, descriptor.values(row, columns)
