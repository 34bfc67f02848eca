import pytest

from slimorm import ConfigurationError, SqlMaker
from slimorm.config import MakerSettings
from slimorm.dialects import (
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    StandardDialect,
    get_dialect,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("standard", StandardDialect),
        ("MySQL", MySQLDialect),
        ("mariadb", MySQLDialect),
        ("postgres", PostgresDialect),
        ("postgresql", PostgresDialect),
        (" sqlite ", SQLiteDialect),
    ],
)
def test_get_dialect_by_name(name, expected):
    assert isinstance(get_dialect(name), expected)


def test_unknown_dialect_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        get_dialect("oracle")


def test_maker_from_settings_uses_named_dialect():
    maker = SqlMaker.from_settings(MakerSettings(dialect="postgresql"))
    assert maker.dialect.name == "postgresql"


def test_standard_dialect_is_the_default():
    assert SqlMaker().dialect.name == "standard"
