"""
Error hierarchy for slimorm.
"""


class SlimORMError(RuntimeError):
    """Base error for slimorm failures."""


class ConfigurationError(SlimORMError):
    """Raised when a row type, dialect, or setting cannot be used."""


class MissingPrimaryKeyError(SlimORMError):
    """Raised when an operation needs row identity but the type declares no primary key."""


class MissingTableNameError(SlimORMError):
    """Raised when neither a table override nor the row type supplies a table name."""


class UnsupportedOperationError(SlimORMError, NotImplementedError):
    """Raised when the active dialect does not implement an operation."""
