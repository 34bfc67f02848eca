"""
SQL maker rendering statements and positional arguments for row types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, NamedTuple, Optional, Sequence

from ..cache import DescriptorRegistry, default_registry
from ..core.descriptor import TypeDescriptor, key_predicate
from ..core.properties import Property
from ..dialects import Dialect, StandardDialect, get_dialect
from ..errors import ConfigurationError, MissingPrimaryKeyError, MissingTableNameError
from ..utils import get_logger

if TYPE_CHECKING:
    from ..config import MakerSettings


class Statement(NamedTuple):
    """SQL text with ``?`` placeholders and the matching positional arguments."""

    sql: str
    args: List[Any]


class SqlMaker:
    """
    Render insert/update/delete/select/create-table/upsert statements.

    Row metadata comes from the descriptor registry; column types, the
    generated-column clause and upserts come from the dialect. A ``table``
    argument on any method overrides the row type's table name.
    """

    def __init__(
        self,
        dialect: Optional[Dialect] = None,
        *,
        registry: Optional[DescriptorRegistry] = None,
    ) -> None:
        self.dialect: Dialect = dialect or StandardDialect()
        self.registry = registry if registry is not None else default_registry
        self.logger = get_logger("sql.maker")

    @classmethod
    def from_settings(
        cls, settings: "MakerSettings", *, registry: Optional[DescriptorRegistry] = None
    ) -> "SqlMaker":
        return cls(get_dialect(settings.dialect), registry=registry)

    def describe(self, row_type: type) -> TypeDescriptor:
        return self.registry.describe(row_type)

    # ------------------------------------------------------------------ #
    # Row operations
    # ------------------------------------------------------------------ #
    def insert(self, row: Any, *, table: Optional[str] = None) -> Statement:
        descriptor = self._describe_row(row)
        sql = descriptor.render(descriptor.insert_sql, self._resolve_table(table, descriptor))
        return self._statement("insert", sql, descriptor.values(row, descriptor.insert_columns))

    def update(self, row: Any, *, table: Optional[str] = None) -> Statement:
        descriptor = self._describe_row(row)
        self._require_primary_key(descriptor, "update")
        if not descriptor.update_columns:
            raise ConfigurationError(
                f"Nothing to update on '{descriptor.row_type.__name__}': "
                "every column is a primary key or generated"
            )
        sql = descriptor.render(descriptor.update_sql, self._resolve_table(table, descriptor))
        args = descriptor.values(row, descriptor.update_columns)
        # Key values bind to the where clause, after every updated column.
        args.extend(descriptor.values(row, descriptor.primary_key_names))
        return self._statement("update", sql, args)

    def delete(self, row: Any, *, table: Optional[str] = None) -> Statement:
        descriptor = self._describe_row(row)
        self._require_primary_key(descriptor, "delete")
        resolved = self._resolve_table(table, descriptor)
        sql = f"delete from {resolved} where {key_predicate(descriptor.primary_key_names)}"
        return self._statement("delete", sql, descriptor.values(row, descriptor.primary_key_names))

    def upsert(self, row: Any, *, table: Optional[str] = None) -> Statement:
        descriptor = self._describe_row(row)
        resolved = self._resolve_table(table, descriptor)
        sql, args = self.dialect.render_upsert(descriptor, row, resolved)
        return self._statement("upsert", sql, args)

    # ------------------------------------------------------------------ #
    # Type operations
    # ------------------------------------------------------------------ #
    def select(
        self,
        row_type: type,
        *,
        where: Optional[str] = None,
        order_by: Optional[str] = None,
        params: Sequence[Any] = (),
        table: Optional[str] = None,
    ) -> Statement:
        descriptor = self.describe(row_type)
        parts = [
            f"select {descriptor.select_columns} from {self._resolve_table(table, descriptor)}"
        ]
        if where is not None:
            parts.append(f"where {where}")
        if order_by is not None:
            parts.append(f"order by {order_by}")
        return self._statement("select", " ".join(parts), list(params))

    def select_count(
        self,
        row_type: Optional[type] = None,
        *,
        where: Optional[str] = None,
        params: Sequence[Any] = (),
        table: Optional[str] = None,
    ) -> Statement:
        descriptor = self.describe(row_type) if row_type is not None and not table else None
        sql = f"select count(*) from {self._resolve_table(table, descriptor)}"
        if where is not None:
            sql += f" where {where}"
        return self._statement("select_count", sql, list(params))

    def delete_where(
        self,
        row_type: Optional[type] = None,
        *,
        where: Optional[str] = None,
        params: Sequence[Any] = (),
        table: Optional[str] = None,
    ) -> Statement:
        descriptor = self.describe(row_type) if row_type is not None and not table else None
        sql = f"delete from {self._resolve_table(table, descriptor)}"
        if where is not None:
            sql += f" where {where}"
        return self._statement("delete_where", sql, list(params))

    def create_table(self, row_type: type, *, table: Optional[str] = None) -> Statement:
        descriptor = self.describe(row_type)
        clauses = [self._column_clause(prop) for prop in descriptor.properties.values()]
        if descriptor.primary_key_names:
            clauses.append(f"primary key ({','.join(descriptor.primary_key_names)})")
        sql = f"create table {self._resolve_table(table, descriptor)} ({', '.join(clauses)})"
        return self._statement("create_table", sql, [])

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _describe_row(self, row: Any) -> TypeDescriptor:
        if row is None:
            raise ValueError("A row instance is required, received None")
        return self.registry.describe(type(row))

    def _column_clause(self, prop: Property) -> str:
        column = prop.column
        if column is not None and column.definition:
            return column.definition
        clause = f"{prop.name} {self.dialect.column_type(prop)}"
        if prop.is_generated:
            clause += self.dialect.generated_clause
        if column is not None:
            if column.unique:
                clause += " unique"
            if not column.nullable:
                clause += " not null"
        return clause

    @staticmethod
    def _resolve_table(table: Optional[str], descriptor: Optional[TypeDescriptor]) -> str:
        if table:
            return table
        if descriptor is not None and descriptor.table:
            return descriptor.table
        raise MissingTableNameError(
            "You must specify a table name: pass table=... or a row type that maps to a table"
        )

    @staticmethod
    def _require_primary_key(descriptor: TypeDescriptor, operation: str) -> None:
        if not descriptor.primary_key_names:
            raise MissingPrimaryKeyError(
                f"Cannot {operation} '{descriptor.row_type.__name__}': no primary key declared. "
                "Mark the key column with Id()."
            )

    def _statement(self, operation: str, sql: str, args: List[Any]) -> Statement:
        self.logger.debug("Rendered %s statement", operation, extra={"sql": sql})
        return Statement(sql, args)
