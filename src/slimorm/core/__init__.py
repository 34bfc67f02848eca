"""
Row-type metadata: column markers, property extraction and descriptors.
"""

from .columns import Column, DataType, Float32, GeneratedValue, Id, Long, Transient
from .descriptor import TypeDescriptor, build_descriptor, resolve_table_name
from .properties import Property, collect_properties

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
    "build_descriptor",
    "collect_properties",
    "resolve_table_name",
]
