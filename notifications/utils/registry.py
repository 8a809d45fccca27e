from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Generic, Mapping, Optional, TypeVar

from notifications.errors import UnknownKind


T = TypeVar("T")

logger = logging.getLogger(__name__)


class Registry(Generic[T]):
    """
    Minimal string-to-builder registry.

    Keys are case-insensitive and the last registration for a key wins.
    Builders take a single configuration mapping and return the product.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._registry: Dict[str, Callable[[Mapping[str, str]], T]] = {}
        self._lock = threading.Lock()

    def register(self, key: str, builder: Callable[[Mapping[str, str]], T]) -> None:
        normalized = key.lower()
        with self._lock:
            replaced = normalized in self._registry
            self._registry[normalized] = builder
        if replaced:
            logger.debug("%s registry: replaced builder for '%s'", self._name, normalized)

    def create(self, key: str, config: Optional[Mapping[str, str]] = None) -> T:
        normalized = key.lower()
        with self._lock:
            builder = self._registry.get(normalized)
            available = tuple(sorted(self._registry.keys())) if builder is None else ()
        if builder is None:
            raise UnknownKind(key, registry=self._name, available=available)
        # Builders run outside the lock so they may register further kinds.
        return builder({} if config is None else config)

    def keys(self):
        with self._lock:
            return tuple(sorted(self._registry.keys()))

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key.lower() in self._registry

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)
