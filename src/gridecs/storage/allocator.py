"""Entity allocation service.

EntityCounter is a stateful service that hands out entity identifiers.
"""

from __future__ import annotations

import threading
from typing import Any

from gridecs.core.identity import Entity
from gridecs.storage.global_store import Global
from gridecs.storage.protocol import GlobalStore


class EntityCounter:
    """Allocates monotonically increasing entity identifiers.

    Identifiers start at 0 and are never reused. The counter value lives in a
    global store created through the store type's ``initialize``; allocation is
    the only thing that writes to it.

    Args:
        store_type: GlobalStore implementation holding the counter (default Global).
    """

    def __init__(self, store_type: type[GlobalStore[int]] = Global):
        self._store: GlobalStore[int] = store_type.initialize(0)
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """Next identifier to be handed out."""
        return self._store.read()

    def allocate(self) -> Entity[Any]:
        """Bump the counter and return an entity for its previous value.

        The read-modify-write happens under a lock so concurrent callers never
        receive the same identifier.

        Returns:
            Freshly allocated entity.
        """
        with self._lock:
            n = self._store.read()
            self._store.write(n + 1)
        return Entity(n)
