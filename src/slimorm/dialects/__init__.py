"""
Dialect strategy registry.
"""

from ..errors import ConfigurationError
from .base import Dialect, StandardDialect
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

_DIALECTS = {
    "standard": StandardDialect,
    "ansi": StandardDialect,
    "mysql": MySQLDialect,
    "mariadb": MySQLDialect,
    "postgres": PostgresDialect,
    "postgresql": PostgresDialect,
    "sqlite": SQLiteDialect,
}


def get_dialect(name: str) -> Dialect:
    """Instantiate the dialect registered under ``name`` (case-insensitive)."""
    try:
        factory = _DIALECTS[name.strip().lower()]
    except KeyError as exc:
        known = ", ".join(sorted(_DIALECTS))
        raise ConfigurationError(f"Unknown dialect '{name}'. Known dialects: {known}") from exc
    return factory()


__all__ = [
    "Dialect",
    "StandardDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "get_dialect",
]
