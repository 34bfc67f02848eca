import dataclasses
import decimal
from datetime import datetime
from typing import Annotated

import pytest

from slimorm import (
    Column,
    DescriptorRegistry,
    Float32,
    GeneratedValue,
    Id,
    Long,
    MissingPrimaryKeyError,
    SqlMaker,
)
from slimorm.dialects import PostgresDialect


@dataclasses.dataclass
class Invoice:
    class Meta:
        table = "invoices"

    id: Annotated[Long, Id(), GeneratedValue()]
    total: Annotated[decimal.Decimal, Column(precision=14, scale=2)]
    ratio: float
    weight: Float32
    count: int
    issued_at: datetime
    paid: bool
    memo: Annotated[str, Column(length=500)]


@dataclasses.dataclass
class Tag:
    name: Annotated[str, Id()]


@dataclasses.dataclass
class Note:
    body: str


def _maker():
    return SqlMaker(PostgresDialect(), registry=DescriptorRegistry())


def test_postgres_column_types():
    sql = _maker().create_table(Invoice).sql
    assert sql == (
        "create table invoices ("
        "id bigint generated by default as identity, "
        "total numeric(14,2), "
        "ratio double precision, "
        "weight real, "
        "count integer, "
        "issued_at timestamp, "
        "paid boolean, "
        "memo varchar(500), "
        "primary key (id))"
    )


def test_postgres_upsert_on_conflict():
    row = Invoice(1, decimal.Decimal("9.50"), 0.5, 1.0, 2, datetime(2024, 1, 1), False, "x")
    sql, args = _maker().upsert(row)
    assert sql == (
        "insert into invoices (id,total,ratio,weight,count,issued_at,paid,memo) "
        "values (?,?,?,?,?,?,?,?) on conflict (id) do update set "
        "total=excluded.total,ratio=excluded.ratio,weight=excluded.weight,count=excluded.count,"
        "issued_at=excluded.issued_at,paid=excluded.paid,memo=excluded.memo"
    )
    assert args == [1, decimal.Decimal("9.50"), 0.5, 1.0, 2, datetime(2024, 1, 1), False, "x"]


def test_postgres_upsert_of_new_row_omits_identity_key():
    row = Invoice(None, decimal.Decimal("1.00"), 0.1, 2.0, 1, datetime(2024, 2, 1), True, "new")
    sql, args = _maker().upsert(row)
    assert sql.startswith(
        "insert into invoices (total,ratio,weight,count,issued_at,paid,memo) "
        "values (?,?,?,?,?,?,?) on conflict (id) do update set total=excluded.total,"
    )
    assert "excluded.id" not in sql
    assert args == [decimal.Decimal("1.00"), 0.1, 2.0, 1, datetime(2024, 2, 1), True, "new"]


def test_postgres_upsert_with_only_keys_does_nothing_on_conflict():
    sql, args = _maker().upsert(Tag("python"))
    assert sql == "insert into tag (name) values (?) on conflict (name) do nothing"
    assert args == ["python"]


def test_postgres_upsert_requires_primary_key():
    with pytest.raises(MissingPrimaryKeyError):
        _maker().upsert(Note("hello"))


@dataclasses.dataclass
class Counter:
    id: Annotated[Long, Id(), GeneratedValue()]


def test_postgres_upsert_with_nothing_to_insert_uses_default_values():
    sql, args = _maker().upsert(Counter(None), table="counters")
    assert sql == "insert into counters default values on conflict (id) do nothing"
    assert args == []
