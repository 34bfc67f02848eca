"""
Declarative column metadata for row types.

Metadata is attached to annotations with :data:`typing.Annotated`::

    class Name:
        class Meta:
            table = "names"

        id: Annotated[Long, Id(), GeneratedValue()]
        firstname: str
"""

from __future__ import annotations

import datetime
import decimal
import enum
from dataclasses import dataclass
from typing import Any, NewType, Optional

Long = NewType("Long", int)
"""64-bit integer column (``bigint``)."""

Float32 = NewType("Float32", float)
"""Single-precision float column (``float``); plain ``float`` maps to ``double``."""


class DataType(enum.Enum):
    """
    Semantic value types used to pick a default column type.
    """

    INTEGER = "integer"
    BIGINT = "bigint"
    DOUBLE = "double"
    FLOAT = "float"
    DECIMAL = "decimal"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"
    ENUM = "enum"
    TEXT = "text"


@dataclass(frozen=True)
class Column:
    """
    Explicit overrides for a mapped column.

    ``definition`` is raw DDL for the whole column clause and, when set,
    replaces everything create-table would otherwise derive.
    """

    name: Optional[str] = None
    length: int = 255
    precision: int = 10
    scale: int = 2
    nullable: bool = True
    unique: bool = False
    definition: Optional[str] = None
    data_type: Optional[DataType] = None


@dataclass(frozen=True)
class Id:
    """Marks a primary-key column."""


@dataclass(frozen=True)
class GeneratedValue:
    """Marks a column whose value the database assigns (e.g. auto-increment)."""


@dataclass(frozen=True)
class Transient:
    """Excludes a member from all generated SQL."""


DEFAULT_COLUMN = Column()


def has_marker(metadata: tuple[Any, ...], marker: type) -> bool:
    """Return True if ``marker`` (class or instance) appears in ``metadata``."""
    return any(item is marker or isinstance(item, marker) for item in metadata)


def find_column(metadata: tuple[Any, ...]) -> Column | None:
    for item in metadata:
        if isinstance(item, Column):
            return item
        if item is Column:
            return DEFAULT_COLUMN
    return None


def data_type_for(python_type: Any) -> DataType:
    """
    Map an unwrapped Python annotation to its :class:`DataType`.
    """
    if python_type is Long:
        return DataType.BIGINT
    if python_type is Float32:
        return DataType.FLOAT
    if not isinstance(python_type, type):
        return DataType.TEXT
    # bool is a subclass of int and must be checked first.
    if issubclass(python_type, bool):
        return DataType.BOOLEAN
    if issubclass(python_type, enum.Enum):
        return DataType.ENUM
    if issubclass(python_type, int):
        return DataType.INTEGER
    if issubclass(python_type, float):
        return DataType.DOUBLE
    if issubclass(python_type, decimal.Decimal):
        return DataType.DECIMAL
    if issubclass(python_type, (datetime.datetime, datetime.date)):
        return DataType.TIMESTAMP
    return DataType.TEXT
