"""Descriptor registry for slimorm."""

from .registry import DescriptorRegistry, default_registry

__all__ = ["DescriptorRegistry", "default_registry"]
