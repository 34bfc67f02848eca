"""
Dialect strategy interface and the standard (ANSI-flavored) dialect.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Protocol

from ..core.columns import DataType
from ..errors import MissingPrimaryKeyError, UnsupportedOperationError

if TYPE_CHECKING:
    from ..core.descriptor import TypeDescriptor
    from ..core.properties import Property


class Dialect(Protocol):
    """
    Capabilities the SQL maker delegates to a database flavor.

    Everything else the maker renders is shared by all dialects.
    """

    @property
    def name(self) -> str: ...

    @property
    def generated_clause(self) -> str: ...

    def column_type(self, prop: "Property") -> str: ...

    def render_upsert(
        self, descriptor: "TypeDescriptor", row: Any, table: str
    ) -> tuple[str, list[Any]]: ...


def standard_column_type(prop: "Property") -> str:
    data_type = prop.data_type
    if data_type is DataType.INTEGER:
        return "integer"
    if data_type is DataType.BIGINT:
        return "bigint"
    if data_type is DataType.DOUBLE:
        return "double"
    if data_type is DataType.FLOAT:
        return "float"
    if data_type is DataType.DECIMAL:
        return f"decimal({prop.precision},{prop.scale})"
    if data_type is DataType.TIMESTAMP:
        return "datetime"
    return f"varchar({prop.length})"


def render_on_conflict_upsert(
    descriptor: "TypeDescriptor", row: Any, table: str
) -> tuple[str, list[Any]]:
    """
    ``insert ... on conflict (keys) do update set c=excluded.c`` as accepted
    by PostgreSQL and SQLite.

    Generated columns holding ``None`` are left out of the insert so the
    database assigns them. Generated columns are never overwritten on
    conflict.
    """
    keys = descriptor.primary_key_names
    if not keys:
        raise MissingPrimaryKeyError(
            f"Upsert on '{descriptor.row_type.__name__}' needs a primary key to detect conflicts"
        )
    properties = descriptor.properties
    columns = tuple(
        column
        for column in descriptor.column_names
        if not (properties[column].is_generated and properties[column].get(row) is None)
    )
    updates = [
        column
        for column in columns
        if column not in keys and not properties[column].is_generated
    ]
    if columns:
        placeholders = ",".join("?" for _ in columns)
        sql = f"insert into {table} ({','.join(columns)}) values ({placeholders}) "
    else:
        sql = f"insert into {table} default values "
    sql += f"on conflict ({','.join(keys)}) "
    if updates:
        sql += "do update set " + ",".join(f"{column}=excluded.{column}" for column in updates)
    else:
        sql += "do nothing"
    return sql, descriptor.values(row, columns)


class StandardDialect:
    """
    Dialect producing standard SQL. It has no upsert.
    """

    name: Final[str] = "standard"
    generated_clause: Final[str] = " auto_increment"

    def column_type(self, prop: "Property") -> str:
        return standard_column_type(prop)

    def render_upsert(
        self, descriptor: "TypeDescriptor", row: Any, table: str
    ) -> tuple[str, list[Any]]:
        raise UnsupportedOperationError(
            "There is no standard upsert. Use a dialect that supports it, "
            "e.g. SqlMaker(dialect=MySQLDialect())."
        )
