"""
State store public API.

The session persists its collections through this minimal key-value surface.
Keys are short collection names (``"paints"``, ``"rooms"``); values are JSON
text. Implementations own the durable format; callers never see SQLite or file
details.
"""

from __future__ import annotations

from typing import Protocol

PAINTS_KEY = "paints"
ROOMS_KEY = "rooms"


class KeyValueStore(Protocol):
    """
    Durable text key-value storage.

    Implementations raise StateStoreError for I/O failures. A missing key is
    not a failure.
    """

    def get_text(self, key: str) -> str | None:
        """
        Return the text stored under ``key``.

        Parameters
        ----------
        key:
            Record name.

        Returns
        -------
        str | None
            Stored text, or None if the key has never been written.

        Raises
        ------
        StateStoreError
            If the store cannot be read.
        """
        raise NotImplementedError

    def set_text(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        Raises
        ------
        StateStoreError
            If the store cannot be written.
        """
        raise NotImplementedError
