"""
Property descriptors and reflective extraction of mapped members.
"""

from __future__ import annotations

import dataclasses
import enum
import inspect
import operator
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Annotated, Any, Callable, ClassVar, Final, Optional, Union

from ..errors import ConfigurationError
from ..utils import camel_to_snake
from .columns import (
    DEFAULT_COLUMN,
    Column,
    DataType,
    GeneratedValue,
    Id,
    Transient,
    data_type_for,
    find_column,
    has_marker,
)

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


@dataclass(frozen=True)
class Property:
    """
    One mapped column of a row type.

    Values are read and written through ``getter``/``setter``, which are
    resolved once when the property is collected.
    """

    name: str
    member: str
    data_type: DataType
    getter: Getter = field(repr=False, compare=False)
    setter: Optional[Setter] = field(default=None, repr=False, compare=False)
    is_primary_key: bool = False
    is_generated: bool = False
    column: Optional[Column] = None

    def get(self, row: Any) -> Any:
        return self.getter(row)

    def set(self, row: Any, value: Any) -> None:
        if self.setter is None:
            raise AttributeError(f"Column '{self.name}' is read-only")
        self.setter(row, value)

    @property
    def metadata(self) -> Column:
        return self.column or DEFAULT_COLUMN

    @property
    def length(self) -> int:
        return self.metadata.length

    @property
    def precision(self) -> int:
        return self.metadata.precision

    @property
    def scale(self) -> int:
        return self.metadata.scale


def collect_properties(row_type: type) -> list[Property]:
    """
    Enumerate the mapped members of ``row_type`` in a stable order.

    Annotated attributes come first (base classes before subclasses,
    declaration order within a class), followed by getter/setter property
    pairs. An annotated member that is also a getter/setter pair stays at
    its annotated position and is read and written through the pair.
    Mapping types are dynamic rows and have no mapped members.
    """
    if issubclass(row_type, Mapping):
        return []

    hints = _type_hints(row_type, row_type)
    collected: list[Property] = []
    columns: dict[str, str] = {}
    seen: set[str] = set()

    for member in _annotated_names(row_type):
        if member.startswith("_") or member not in hints:
            continue
        hint = hints[member]
        if _is_class_scoped(hint):
            continue
        seen.add(member)
        python_type, metadata = _unwrap(hint)
        accessor = inspect.getattr_static(row_type, member, None)
        if isinstance(accessor, property):
            if not (accessor.fget and accessor.fset):
                continue
            # The pair keeps the annotated position; both sets of markers apply.
            _, returned = _unwrap(_type_hints(accessor.fget, row_type).get("return", Any))
            metadata += returned
            getter, setter = accessor.fget, accessor.fset
        else:
            getter, setter = _attribute_accessors(member)
        if has_marker(metadata, Transient):
            continue
        _add(collected, columns, row_type, member, python_type, metadata, getter, setter)

    for member, accessor in _accessor_pairs(row_type):
        if member in seen:
            continue
        hint = _type_hints(accessor.fget, row_type).get("return", Any)
        python_type, metadata = _unwrap(hint)
        if has_marker(metadata, Transient):
            continue
        _add(collected, columns, row_type, member, python_type, metadata, accessor.fget, accessor.fset)

    return collected


def _add(
    collected: list[Property],
    columns: dict[str, str],
    row_type: type,
    member: str,
    python_type: Any,
    metadata: tuple[Any, ...],
    getter: Getter,
    setter: Setter | None,
) -> None:
    column = find_column(metadata)
    name = column.name if column and column.name else camel_to_snake(member)
    if name in columns:
        raise ConfigurationError(
            f"Duplicate column '{name}' on row type '{row_type.__name__}' "
            f"(members '{columns[name]}' and '{member}')"
        )
    columns[name] = member

    data_type = column.data_type if column and column.data_type else data_type_for(python_type)
    if data_type is DataType.ENUM and isinstance(python_type, type):
        getter, setter = _enum_accessors(python_type, getter, setter)

    collected.append(
        Property(
            name=name,
            member=member,
            data_type=data_type,
            is_primary_key=has_marker(metadata, Id),
            is_generated=has_marker(metadata, GeneratedValue),
            column=column,
            getter=getter,
            setter=setter,
        )
    )


def _type_hints(obj: Any, row_type: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(obj, include_extras=True)
    except Exception as exc:
        raise ConfigurationError(
            f"Cannot resolve annotations of row type '{row_type.__name__}': {exc}"
        ) from exc


def _annotated_names(row_type: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(row_type.__mro__):
        if klass is object:
            continue
        try:
            own = inspect.get_annotations(klass)
        except Exception as exc:
            raise ConfigurationError(
                f"Cannot read annotations of '{klass.__name__}': {exc}"
            ) from exc
        for name in own:
            if name not in names:
                names.append(name)
    return names


def _accessor_pairs(row_type: type) -> list[tuple[str, property]]:
    names: list[str] = []
    for klass in reversed(row_type.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, property) and not name.startswith("_") and name not in names:
                names.append(name)

    pairs: list[tuple[str, property]] = []
    for name in names:
        # A subclass may replace an inherited property with a plain attribute.
        accessor = inspect.getattr_static(row_type, name)
        if isinstance(accessor, property) and accessor.fget and accessor.fset:
            pairs.append((name, accessor))
    return pairs


def _is_class_scoped(hint: Any) -> bool:
    if hint is ClassVar or hint is Final or hint is dataclasses.InitVar:
        return True
    if isinstance(hint, dataclasses.InitVar):
        return True
    return typing.get_origin(hint) in (ClassVar, Final)


def _unwrap(hint: Any) -> tuple[Any, tuple[Any, ...]]:
    """
    Strip ``Annotated`` and ``Optional`` wrappers, returning the bare type
    and the collected ``Annotated`` metadata.
    """
    metadata: list[Any] = []
    while True:
        origin = typing.get_origin(hint)
        if origin is Annotated:
            base, *extras = typing.get_args(hint)
            metadata.extend(extras)
            hint = base
        elif origin is Union or origin is types.UnionType:
            args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
            if len(args) != 1:
                break
            hint = args[0]
        else:
            break
    return hint, tuple(metadata)


def _attribute_accessors(member: str) -> tuple[Getter, Setter]:
    def setter(row: Any, value: Any) -> None:
        setattr(row, member, value)

    return operator.attrgetter(member), setter


def _enum_accessors(
    enum_type: type[enum.Enum], getter: Getter, setter: Setter | None
) -> tuple[Getter, Setter | None]:
    # Enum members are stored by name.
    def get(row: Any) -> Any:
        value = getter(row)
        if isinstance(value, enum.Enum):
            return value.name
        return value

    if setter is None:
        return get, None

    def set_(row: Any, value: Any) -> None:
        if isinstance(value, str):
            value = enum_type[value]
        setter(row, value)

    return get, set_
