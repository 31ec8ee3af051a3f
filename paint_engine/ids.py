"""
Identifier sources for newly created entities.

Notes
-----
Model operations never call uuid directly. Callers provide an IdSource so that
tests can produce stable, predictable identifiers.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Protocol


class IdSource(Protocol):
    """A source of fresh, unique entity identifiers."""

    def new_id(self) -> str:
        """
        Return a new identifier.

        Returns
        -------
        str
            An opaque identifier never returned before by this source.
        """
        ...


@dataclass(frozen=True, slots=True)
class UuidIdSource:
    """Id source backed by random UUID4 values (hex form)."""

    def new_id(self) -> str:
        """
        Return a random UUID4 in hex form.

        Returns
        -------
        str
            32-character lowercase hex string.
        """
        return uuid.uuid4().hex


@dataclass(slots=True)
class SequentialIdSource:
    """Id source that counts upwards from 1 (useful for tests)."""

    prefix: str = "id"
    _counter: int = field(default=0, repr=False)

    def new_id(self) -> str:
        """
        Return the next identifier in sequence.

        Returns
        -------
        str
            ``"<prefix>-<n>"`` with n starting at 1.
        """
        self._counter += 1
        return f"{self.prefix}-{self._counter}"


DEFAULT_ID_SOURCE: IdSource = UuidIdSource()
