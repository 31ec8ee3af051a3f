"""In-memory KeyValueStore for tests and throwaway sessions."""

from __future__ import annotations

from dataclasses import dataclass, field

from .api import KeyValueStore


@dataclass(slots=True)
class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed store. Nothing survives the process."""

    values: dict[str, str] = field(default_factory=dict)

    def get_text(self, key: str) -> str | None:
        """See KeyValueStore.get_text."""
        return self.values.get(key)

    def set_text(self, key: str, value: str) -> None:
        """See KeyValueStore.set_text."""
        self.values[key] = value
