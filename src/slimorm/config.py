"""
Settings for building SQL makers from the environment or a DSN.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlparse

from .dialects import get_dialect
from .errors import ConfigurationError
from .utils import configure_logging

_SCHEME_DIALECTS = {
    "mysql": "mysql",
    "mariadb": "mysql",
    "postgres": "postgresql",
    "postgresql": "postgresql",
    "sqlite": "sqlite",
    "sqlite3": "sqlite",
}

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def dialect_for_dsn(dsn: str) -> str:
    """
    Map a DSN scheme (``postgresql+psycopg://...``) to a dialect name.
    """
    scheme = urlparse(dsn).scheme.lower()
    if not scheme:
        raise ConfigurationError(f"DSN has no scheme: {dsn!r}")
    driver = scheme.split("+", 1)[0]
    try:
        return _SCHEME_DIALECTS[driver]
    except KeyError as exc:
        raise ConfigurationError(f"No dialect known for DSN scheme '{scheme}'") from exc


def _parse_dialect(value: str, *, key: str) -> str:
    normalized = value.strip().lower()
    try:
        get_dialect(normalized)
    except ConfigurationError as exc:
        raise ConfigurationError(f"Invalid dialect for '{key}': {value!r}") from exc
    return normalized


def _parse_log_level(value: str, *, key: str) -> str:
    normalized = value.strip().upper()
    if normalized not in _LOG_LEVELS:
        raise ConfigurationError(f"Invalid log level for '{key}': {value!r}")
    return normalized


@dataclass
class MakerSettings:
    """
    Normalized configuration for :class:`slimorm.SqlMaker`.
    """

    dialect: str = "standard"
    log_level: str = "WARNING"
    source: Optional[str] = None

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs) -> "MakerSettings":
        return cls(dialect=dialect_for_dsn(dsn), **kwargs)

    @classmethod
    def from_env(
        cls, prefix: str = "SLIMORM_", environ: Optional[Mapping[str, str]] = None
    ) -> "MakerSettings":
        """
        Read ``<prefix>DIALECT``, ``<prefix>DSN`` and ``<prefix>LOG_LEVEL``.

        An explicit dialect wins over one derived from the DSN.
        """
        env = os.environ if environ is None else environ
        settings = cls(source="environment")

        dialect = env.get(f"{prefix}DIALECT")
        dsn = env.get(f"{prefix}DSN")
        if dialect:
            settings.dialect = _parse_dialect(dialect, key=f"{prefix}DIALECT")
        elif dsn:
            settings.dialect = dialect_for_dsn(dsn)

        log_level = env.get(f"{prefix}LOG_LEVEL")
        if log_level:
            settings.log_level = _parse_log_level(log_level, key=f"{prefix}LOG_LEVEL")
        return settings

    def apply_logging(self) -> None:
        configure_logging(self.log_level)
        logging.getLogger("slimorm").setLevel(self.log_level)
