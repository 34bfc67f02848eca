"""
Row types for the names example.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Optional

from slimorm import Column, GeneratedValue, Id, Long, Transient


class Name:
    class Meta:
        table = "names"

    # primary key, assigned by the database
    id: Annotated[Optional[Long], Id(), GeneratedValue()]
    # a plain attribute
    firstname: Optional[str]
    # never persisted
    ignore_me: Annotated[Optional[str], Transient()]
    # class-scoped, never persisted
    ignore_this_too: ClassVar[str] = "static"

    def __init__(self, firstname: Optional[str] = None, lastname: Optional[str] = None) -> None:
        self.id = None
        self.firstname = firstname
        self._lastname = lastname
        self.ignore_me = None

    # a private attribute exposed through a getter/setter pair
    @property
    def last_name(self) -> Annotated[Optional[str], Column(name="lastname", length=80)]:
        return self._lastname

    @last_name.setter
    def last_name(self, value: Optional[str]) -> None:
        self._lastname = value

    def __repr__(self) -> str:
        return f"{self.id} {self.firstname} {self._lastname}"
