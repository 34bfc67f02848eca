import dataclasses
import datetime
import decimal
import enum
from typing import Annotated, ClassVar, Final, Optional

import pytest

from slimorm.core import (
    Column,
    DataType,
    Float32,
    GeneratedValue,
    Id,
    Long,
    Transient,
    collect_properties,
)
from slimorm.errors import ConfigurationError


class Status(enum.Enum):
    ACTIVE = 1
    BANNED = 2


class Account:
    id: Annotated[Long, Id(), GeneratedValue]
    userName: str
    balance: decimal.Decimal
    ratio: float
    weight: Float32
    visits: int
    created_at: datetime.datetime
    verified: bool
    status: Status
    nickname: Optional[str]
    _secret: str
    cache_key: Annotated[str, Transient()]
    registry: ClassVar[dict] = {}
    VERSION: Final[int] = 3

    def __init__(self) -> None:
        self.status = Status.ACTIVE

    @property
    def display(self) -> str:
        return f"account {self.userName}"


def test_members_collected_in_declaration_order():
    names = [prop.name for prop in collect_properties(Account)]
    assert names == [
        "id",
        "user_name",
        "balance",
        "ratio",
        "weight",
        "visits",
        "created_at",
        "verified",
        "status",
        "nickname",
    ]


def test_data_types_follow_annotations():
    types = {prop.name: prop.data_type for prop in collect_properties(Account)}
    assert types["id"] is DataType.BIGINT
    assert types["balance"] is DataType.DECIMAL
    assert types["ratio"] is DataType.DOUBLE
    assert types["weight"] is DataType.FLOAT
    assert types["visits"] is DataType.INTEGER
    assert types["created_at"] is DataType.TIMESTAMP
    assert types["verified"] is DataType.BOOLEAN
    assert types["status"] is DataType.ENUM
    assert types["nickname"] is DataType.TEXT


def test_key_and_generated_markers_accept_classes_and_instances():
    prop = collect_properties(Account)[0]
    assert prop.is_primary_key
    assert prop.is_generated


def test_enum_columns_read_and_write_by_name():
    account = Account()
    status = next(prop for prop in collect_properties(Account) if prop.name == "status")
    assert status.get(account) == "ACTIVE"
    status.set(account, "BANNED")
    assert account.status is Status.BANNED


class Person:
    class Meta:
        table = "people"

    id: Annotated[int, Id()]
    first_name: str

    def __init__(self, id=None, first_name=None, last_name=None):
        self.id = id
        self.first_name = first_name
        self._last_name = last_name

    @property
    def last_name(self) -> Annotated[str, Column(name="surname", nullable=False)]:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = value.strip()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self._last_name}"


def test_accessor_pairs_follow_plain_attributes():
    props = collect_properties(Person)
    assert [prop.name for prop in props] == ["id", "first_name", "surname"]
    assert props[2].member == "last_name"
    assert props[2].column.nullable is False


def test_accessor_pair_routes_through_getter_and_setter():
    person = Person(1, "Ada", "Lovelace")
    surname = collect_properties(Person)[2]
    assert surname.get(person) == "Lovelace"
    surname.set(person, "  Byron ")
    assert person._last_name == "Byron"


class Member:
    id: Annotated[int, Id(), GeneratedValue()]
    email: str
    label: Optional[str]

    def __init__(self, id=None, email="", label=None):
        self._id = id
        self.email = email
        self.label = label

    @property
    def id(self) -> Annotated[int, Column(name="member_id")]:
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        self._id = int(value)


def test_annotated_accessor_pair_keeps_position_and_markers():
    props = collect_properties(Member)
    assert [prop.name for prop in props] == ["member_id", "email", "label"]
    key = props[0]
    assert key.member == "id"
    assert key.is_primary_key and key.is_generated
    assert key.data_type is DataType.INTEGER

    member = Member(7, "a@example.com")
    assert key.get(member) == 7
    key.set(member, "8")
    assert member._id == 8


def test_read_only_property_is_not_mapped():
    assert "full_name" not in [prop.member for prop in collect_properties(Person)]


class Base:
    id: Annotated[int, Id()]


class Derived(Base):
    label: str


def test_base_class_members_come_first():
    assert [prop.name for prop in collect_properties(Derived)] == ["id", "label"]


@dataclasses.dataclass
class Reading:
    sensor: Annotated[str, Id(), Column(length=32)]
    value: float = 0.0
    scale: dataclasses.InitVar[int] = 1
    notes: Annotated[Optional[str], Transient()] = None


def test_dataclass_rows_skip_init_vars_and_transients():
    props = collect_properties(Reading)
    assert [prop.name for prop in props] == ["sensor", "value"]
    assert props[0].length == 32


def test_attribute_accessors_read_and_write_instances():
    reading = Reading("t-1", 20.5)
    value = collect_properties(Reading)[1]
    assert value.get(reading) == 20.5
    value.set(reading, 21.0)
    assert reading.value == 21.0


def test_mapping_rows_have_no_properties():
    assert collect_properties(dict) == []


def test_duplicate_column_names_are_rejected():
    class Clash:
        name: str
        label: Annotated[str, Column(name="name")]

    with pytest.raises(ConfigurationError):
        collect_properties(Clash)


def test_unresolvable_annotation_is_a_configuration_error():
    class Broken:
        owner: "MissingType"  # noqa: F821

    with pytest.raises(ConfigurationError):
        collect_properties(Broken)


def test_column_defaults_apply_without_metadata():
    props = {prop.name: prop for prop in collect_properties(Account)}
    assert props["nickname"].column is None
    assert (props["balance"].precision, props["balance"].scale) == (10, 2)
    assert props["nickname"].length == 255
