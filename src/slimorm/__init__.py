"""
slimorm public package initialization.

Renders parameterized SQL for annotated Python row types. Statements are
returned as text plus positional arguments; executing them is up to the
caller.
"""

from .cache import DescriptorRegistry, default_registry  # noqa: F401
from .config import MakerSettings  # noqa: F401
from .core import (  # noqa: F401
    Column,
    DataType,
    Float32,
    GeneratedValue,
    Id,
    Long,
    Property,
    Transient,
    TypeDescriptor,
)
from .dialects import (  # noqa: F401
    Dialect,
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    StandardDialect,
    get_dialect,
)
from .errors import (  # noqa: F401
    ConfigurationError,
    MissingPrimaryKeyError,
    MissingTableNameError,
    SlimORMError,
    UnsupportedOperationError,
)
from .sql import SqlMaker, Statement  # noqa: F401

__all__ = [
    "Column",
    "DataType",
    "Float32",
    "GeneratedValue",
    "Id",
    "Long",
    "Transient",
    "Property",
    "TypeDescriptor",
    "DescriptorRegistry",
    "default_registry",
    "Dialect",
    "StandardDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "get_dialect",
    "MakerSettings",
    "SqlMaker",
    "Statement",
    "SlimORMError",
    "ConfigurationError",
    "MissingPrimaryKeyError",
    "MissingTableNameError",
    "UnsupportedOperationError",
]
