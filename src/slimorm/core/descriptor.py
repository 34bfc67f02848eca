"""
Per-row-type descriptors carrying the precompiled SQL templates.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Optional

from ..errors import ConfigurationError
from ..utils import camel_to_snake
from .properties import Property, collect_properties

TABLE_PLACEHOLDER = "{table}"


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Immutable metadata for one row type.

    ``insert_sql`` and ``update_sql`` contain a single ``{table}``
    substitution point filled in at render time.
    """

    row_type: type
    table: Optional[str]
    properties: Mapping[str, Property]
    primary_key_names: tuple[str, ...]
    insert_columns: tuple[str, ...]
    insert_sql: str
    update_columns: tuple[str, ...]
    update_sql: str
    select_columns: str

    @property
    def insert_arg_count(self) -> int:
        return len(self.insert_columns)

    @property
    def update_arg_count(self) -> int:
        return len(self.update_columns) + len(self.primary_key_names)

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(self.properties)

    def get_property(self, column: str) -> Property:
        try:
            return self.properties[column]
        except KeyError as exc:
            raise KeyError(
                f"Unknown column '{column}' on row type '{self.row_type.__name__}'"
            ) from exc

    def get_value(self, row: Any, column: str) -> Any:
        return self.get_property(column).get(row)

    def set_value(self, row: Any, column: str, value: Any) -> None:
        self.get_property(column).set(row, value)

    def values(self, row: Any, columns: tuple[str, ...]) -> list[Any]:
        return [self.properties[column].get(row) for column in columns]

    def render(self, template: str, table: str) -> str:
        return template.replace(TABLE_PLACEHOLDER, table, 1)


def resolve_table_name(row_type: type) -> Optional[str]:
    """
    Table name from the row type's ``Meta`` (``table`` and optional
    ``schema``), else the class name in snake_case. Mapping types have none.
    """
    meta = getattr(row_type, "Meta", None)
    table = getattr(meta, "table", None) if meta else None
    schema = getattr(meta, "schema", None) if meta else None
    if table is None:
        if issubclass(row_type, Mapping):
            return None
        table = camel_to_snake(row_type.__name__)
    if not isinstance(table, str) or not table:
        raise ConfigurationError(f"Invalid table name {table!r} on '{row_type.__name__}'")
    if schema:
        return f"{schema}.{table}"
    return table


def build_descriptor(row_type: type) -> TypeDescriptor:
    """
    Reflect over ``row_type`` and precompile its templates.
    """
    if not isinstance(row_type, type):
        raise TypeError(f"Expected a row type, received {row_type!r}")

    properties = {prop.name: prop for prop in collect_properties(row_type)}
    primary_keys = tuple(name for name, prop in properties.items() if prop.is_primary_key)

    insert_columns = tuple(name for name, prop in properties.items() if not prop.is_generated)
    update_columns = tuple(
        name
        for name, prop in properties.items()
        if not prop.is_primary_key and not prop.is_generated
    )

    return TypeDescriptor(
        row_type=row_type,
        table=resolve_table_name(row_type),
        properties=MappingProxyType(properties),
        primary_key_names=primary_keys,
        insert_columns=insert_columns,
        insert_sql=make_insert_sql(insert_columns),
        update_columns=update_columns,
        update_sql=make_update_sql(update_columns, primary_keys),
        select_columns=make_select_columns(tuple(properties)),
    )


def make_insert_sql(columns: tuple[str, ...]) -> str:
    placeholders = ",".join("?" for _ in columns)
    return f"insert into {TABLE_PLACEHOLDER} ({','.join(columns)}) values ({placeholders})"


def make_update_sql(columns: tuple[str, ...], primary_keys: tuple[str, ...]) -> str:
    assignments = ",".join(f"{column}=?" for column in columns)
    return f"update {TABLE_PLACEHOLDER} set {assignments} where {key_predicate(primary_keys)}"


def make_select_columns(columns: tuple[str, ...]) -> str:
    if not columns:
        # Dynamic rows select everything.
        return "*"
    return ",".join(columns)


def key_predicate(primary_keys: tuple[str, ...]) -> str:
    return " and ".join(f"{key}=?" for key in primary_keys)
