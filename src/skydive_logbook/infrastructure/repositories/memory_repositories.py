"""In-memory store implementation for testing and development."""

import copy
from typing import Any, Dict, List, Optional

from skydive_logbook.application.ports.repositories import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """In-memory implementation of the key-prefix store."""

    def __init__(self):
        self._items: Dict[str, Dict[str, Any]] = {}

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Get the value stored under a key."""
        value = self._items.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def set(self, key: str, value: Dict[str, Any]) -> None:
        """Store a value under a key."""
        self._items[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> bool:
        """Delete a key."""
        if key in self._items:
            del self._items[key]
            return True
        return False

    async def get_by_prefix(self, prefix: str) -> List[Dict[str, Any]]:
        """Get all values whose key starts with prefix, in key order."""
        return [
            copy.deepcopy(self._items[key])
            for key in sorted(self._items)
            if key.startswith(prefix)
        ]

    def __len__(self) -> int:
        return len(self._items)
