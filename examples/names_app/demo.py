"""
Names example: slimorm renders the SQL, the stdlib sqlite3 module runs it.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional

from slimorm import SQLiteDialect, SqlMaker, Statement

from .models import Name

maker = SqlMaker(SQLiteDialect())


def _execute(connection: sqlite3.Connection, statement: Statement) -> sqlite3.Cursor:
    return connection.execute(statement.sql, statement.args)


def bootstrap_connection(path: str = ":memory:") -> sqlite3.Connection:
    connection = sqlite3.connect(path)
    connection.execute("drop table if exists names")
    _execute(connection, maker.create_table(Name))
    return connection


def save_name(connection: sqlite3.Connection, name: Name) -> Name:
    cursor = _execute(connection, maker.insert(name))
    maker.describe(Name).set_value(name, "id", cursor.lastrowid)
    return name


def fetch_names(
    connection: sqlite3.Connection,
    *,
    where: Optional[str] = None,
    params: tuple = (),
    order_by: Optional[str] = None,
) -> List[Name]:
    descriptor = maker.describe(Name)
    cursor = _execute(connection, maker.select(Name, where=where, params=params, order_by=order_by))
    columns = [column[0] for column in cursor.description]
    names: List[Name] = []
    for values in cursor.fetchall():
        name = Name()
        for column, value in zip(columns, values):
            descriptor.set_value(name, column, value)
        names.append(name)
    return names


def count_names(connection: sqlite3.Connection) -> int:
    return _execute(connection, maker.select_count(Name)).fetchone()[0]


def run_demo(path: str = ":memory:") -> Dict[str, Any]:
    connection = bootstrap_connection(path)
    try:
        john = save_name(connection, Name("John", "Doe"))
        bill = save_name(connection, Name("Bill", "Smith"))
        johns = fetch_names(connection, where="firstname=?", params=("John",))

        _execute(connection, maker.delete(john))
        remaining = fetch_names(connection, order_by="lastname")

        bill.firstname = "Joe"
        updated = _execute(connection, maker.update(bill)).rowcount
        after_update = fetch_names(connection)

        _execute(connection, maker.delete_where(Name, where="firstname=?", params=("Joe",)))
        connection.commit()
        return {
            "john_only": [repr(n) for n in johns],
            "bill_only": [repr(n) for n in remaining],
            "rows_updated": updated,
            "joe_only": [repr(n) for n in after_update],
            "final_count": count_names(connection),
        }
    finally:
        connection.close()


if __name__ == "__main__":
    for label, value in run_demo().items():
        print(f"{label}: {value}")
