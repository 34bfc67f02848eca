"""Process-wide cache of row-type descriptors."""

from __future__ import annotations

from threading import RLock
from typing import Callable, Dict, Iterator, Optional

from ..core.descriptor import TypeDescriptor, build_descriptor
from ..utils import get_logger, log_duration

DescriptorBuilder = Callable[[type], TypeDescriptor]


class DescriptorRegistry:
    """
    Maps row types to their descriptors, building each one at most once.

    Published descriptors are read without locking. Building and publishing
    a missing descriptor happens under a single lock, so concurrent first use
    of a type yields one descriptor and nobody sees a partial one. A failed
    build publishes nothing and the next lookup tries again.
    """

    def __init__(self, builder: Optional[DescriptorBuilder] = None) -> None:
        self._builder = builder or build_descriptor
        self._store: Dict[type, TypeDescriptor] = {}
        self._lock = RLock()
        self.logger = get_logger("cache.registry")

    def describe(self, row_type: type) -> TypeDescriptor:
        if not isinstance(row_type, type):
            raise TypeError(f"Expected a row type, received {row_type!r}")
        descriptor = self._store.get(row_type)
        if descriptor is not None:
            return descriptor
        with self._lock:
            descriptor = self._store.get(row_type)
            if descriptor is None:
                with log_duration(f"describe {row_type.__qualname__}", self.logger):
                    descriptor = self._builder(row_type)
                self._store[row_type] = descriptor
                self.logger.debug(
                    "Built descriptor for %s (table=%s, %d columns)",
                    row_type.__qualname__,
                    descriptor.table,
                    len(descriptor.properties),
                )
            return descriptor

    def get(self, row_type: type) -> Optional[TypeDescriptor]:
        """Return the published descriptor for ``row_type`` without building it."""
        return self._store.get(row_type)

    def __contains__(self, row_type: object) -> bool:
        return row_type in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[type]:
        with self._lock:
            return iter(list(self._store))


default_registry = DescriptorRegistry()
