from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, Mapping, Optional, Union

from celine.rowfilter.comparators.models import Comparator
from celine.rowfilter.core.config import settings

logger = logging.getLogger(__name__)


@dataclass
class ComparatorRegistry:
    """Custom comparators keyed by the attribute they compare."""

    comparators: Dict[str, Comparator] = field(default_factory=dict)

    def get(self, name: str) -> Optional[Comparator]:
        return self.comparators.get(name)

    def register(self, name: str, comparator: Comparator) -> None:
        if not callable(comparator):
            raise TypeError(f"Comparator for '{name}' is not callable: {comparator!r}")
        if name in self.comparators:
            raise ValueError(f"Duplicate comparator for attribute: {name}")
        self.comparators[name] = comparator

    def comparator(self, name: str) -> Callable[[Comparator], Comparator]:
        """Decorator form of :meth:`register`."""

        def decorator(fn: Comparator) -> Comparator:
            self.register(name, fn)
            return fn

        return decorator

    def __contains__(self, name: object) -> bool:
        return name in self.comparators

    def __iter__(self) -> Iterator[str]:
        return iter(self.comparators)

    def __len__(self) -> int:
        return len(self.comparators)

    @classmethod
    def of(
        cls, comparators: Union["ComparatorRegistry", Mapping[str, Comparator], None]
    ) -> "ComparatorRegistry":
        if isinstance(comparators, ComparatorRegistry):
            return comparators
        reg = cls()
        for name, fn in (comparators or {}).items():
            # a None entry means no comparator for that attribute
            if fn is None:
                continue
            reg.register(name, fn)
        return reg


_registry: ComparatorRegistry | None = None


def _load_modules() -> None:
    modules = settings.comparator_modules
    if not modules:
        return
    if isinstance(modules, str):
        modules = [m.strip() for m in modules.split(",") if m.strip()]
    for m in modules:
        try:
            importlib.import_module(m)
            logger.info("Loaded comparator module: %s", m)
        except Exception:
            logger.exception("Failed to load comparator module: %s", m)
            raise


def get_comparator_registry() -> ComparatorRegistry:
    """Shared registry, populated by the modules listed in settings."""
    global _registry
    if _registry is not None:
        return _registry

    # plugin modules register into the shared registry while they load
    _registry = ComparatorRegistry()
    try:
        _load_modules()
    except Exception:
        _registry = None
        raise
    return _registry
