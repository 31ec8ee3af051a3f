"""
JSON codec for persisted calculator state.

Each collection is stored independently as a JSON array of plain objects under
its own key. Loading is forgiving: a missing key, text that is not JSON, or a
payload that is not an array of objects with string ids all load as an empty
collection. Bad records are logged, never raised.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

from ..data_models import Paint, Paints, Room, Rooms
from .api import PAINTS_KEY, ROOMS_KEY, KeyValueStore

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PersistedState:
    """The two persisted collections."""

    paints: Paints = ()
    rooms: Rooms = ()


def dumps_paints(paints: Paints) -> str:
    """Serialize paints to JSON array text."""
    return json.dumps([p.to_dict() for p in paints], ensure_ascii=False)


def dumps_rooms(rooms: Rooms) -> str:
    """Serialize rooms (with their walls) to JSON array text."""
    return json.dumps([r.to_dict() for r in rooms], ensure_ascii=False)


def _loads_array(text: str | None, parse: Callable[[object], T], *, key: str) -> tuple[T, ...]:
    if text is None:
        return ()
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        LOGGER.warning("Stored %s is not valid JSON; starting empty", key)
        return ()
    if not isinstance(payload, list):
        LOGGER.warning("Stored %s is not a JSON array; starting empty", key)
        return ()
    try:
        return tuple(parse(item) for item in payload)
    except ValueError as exc:
        LOGGER.warning("Stored %s is malformed (%s); starting empty", key, exc)
        return ()


def loads_paints(text: str | None) -> Paints:
    """
    Deserialize paints from JSON text.

    Parameters
    ----------
    text:
        Stored text, or None if nothing was stored.

    Returns
    -------
    Paints
        Parsed paints, or an empty tuple for missing or corrupt input.
    """
    return _loads_array(text, Paint.from_dict, key=PAINTS_KEY)


def loads_rooms(text: str | None) -> Rooms:
    """
    Deserialize rooms from JSON text.

    Parameters
    ----------
    text:
        Stored text, or None if nothing was stored.

    Returns
    -------
    Rooms
        Parsed rooms, or an empty tuple for missing or corrupt input.
    """
    return _loads_array(text, Room.from_dict, key=ROOMS_KEY)


def load_state(store: KeyValueStore) -> PersistedState:
    """
    Read both collections from ``store``.

    Raises
    ------
    StateStoreError
        If the store itself cannot be read. Corrupt content is not an error.
    """
    return PersistedState(
        paints=loads_paints(store.get_text(PAINTS_KEY)),
        rooms=loads_rooms(store.get_text(ROOMS_KEY)),
    )


def save_paints(store: KeyValueStore, paints: Paints) -> None:
    """Write the paints record."""
    store.set_text(PAINTS_KEY, dumps_paints(paints))


def save_rooms(store: KeyValueStore, rooms: Rooms) -> None:
    """Write the rooms record."""
    store.set_text(ROOMS_KEY, dumps_rooms(rooms))
