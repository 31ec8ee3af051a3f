"""Data models for the paint calculator.

This module defines the canonical, typed representation of paints, rooms and
walls, along with their JSON-compatible dict forms. The dict forms are the
persisted layout: unset numeric fields are omitted and the wall's paint
reference is stored under ``paintId``.

The models are frozen dataclasses; collections are tuples. Nothing here is
mutated in place.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Self

DEFAULT_ROOM_NAME = "New Room"
DEFAULT_WALL_NAME = "New Wall"


def parse_measure(raw: object) -> float | None:
    """Normalize raw numeric input to a non-negative float or ``None``.

    Parameters
    ----------
    raw
        User input (text or number) or a value read back from storage.

    Returns
    -------
    float | None
        The value as a finite, non-negative float, or ``None`` ("unset") when
        the input is missing, blank, unparsable, not finite or negative.
    """

    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value) or value < 0:
        return None
    return value


def _text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key, "")
    return value if isinstance(value, str) else ""


def _require_id(payload: Mapping[str, Any], *, context: str) -> str:
    value = payload.get("id")
    if not isinstance(value, str) or not value:
        raise ValueError(f"Missing or invalid id in {context}")
    return value


def _require_mapping(payload: object, *, context: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValueError(f"Expected an object for {context}, got {type(payload).__name__}")
    return payload


@dataclass(frozen=True, slots=True)
class Paint:
    """A paint product.

    Attributes
    ----------
    id
        Opaque identifier, unique within the paints collection.
    name
        Display name.
    code
        Product code.
    coverage
        Area in m² one liter covers, or ``None`` until configured.
    price
        Price in € per m², or ``None`` until configured.
    """

    id: str
    name: str = ""
    code: str = ""
    coverage: float | None = None
    price: float | None = None

    @property
    def label(self) -> str:
        """Return the display label used in paint pickers: ``"name (code)"``."""

        return f"{self.name} ({self.code})"

    @classmethod
    def from_dict(cls, payload: object) -> Self:
        """Construct a :class:`Paint` from a persisted mapping.

        Raises
        ------
        ValueError
            If the payload is not a mapping or carries no string id.
        """

        data = _require_mapping(payload, context="paint")
        return cls(
            id=_require_id(data, context="paint"),
            name=_text(data, "name"),
            code=_text(data, "code"),
            coverage=parse_measure(data.get("coverage")),
            price=parse_measure(data.get("price")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert this model to a JSON-serializable dict."""

        payload: dict[str, Any] = {"id": self.id, "name": self.name, "code": self.code}
        if self.coverage is not None:
            payload["coverage"] = self.coverage
        if self.price is not None:
            payload["price"] = self.price
        return payload


@dataclass(frozen=True, slots=True)
class Wall:
    """A paintable wall.

    Attributes
    ----------
    id
        Opaque identifier, unique across all walls of all rooms.
    name
        Display name.
    length, height
        Dimensions in meters, or ``None`` until entered.
    paint_id
        Id of the assigned paint; empty string means no paint selected. May
        dangle if the paint was deleted.
    """

    id: str
    name: str = DEFAULT_WALL_NAME
    length: float | None = None
    height: float | None = None
    paint_id: str = ""

    @classmethod
    def from_dict(cls, payload: object) -> Self:
        """Construct a :class:`Wall` from a persisted mapping."""

        data = _require_mapping(payload, context="wall")
        return cls(
            id=_require_id(data, context="wall"),
            name=_text(data, "name"),
            length=parse_measure(data.get("length")),
            height=parse_measure(data.get("height")),
            paint_id=_text(data, "paintId"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert this model to a JSON-serializable dict."""

        payload: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.length is not None:
            payload["length"] = self.length
        if self.height is not None:
            payload["height"] = self.height
        payload["paintId"] = self.paint_id
        return payload


@dataclass(frozen=True, slots=True)
class Room:
    """A room: a name and an ordered sequence of walls it owns."""

    id: str
    name: str = DEFAULT_ROOM_NAME
    walls: tuple[Wall, ...] = ()

    @classmethod
    def from_dict(cls, payload: object) -> Self:
        """Construct a :class:`Room` (and its walls) from a persisted mapping."""

        data = _require_mapping(payload, context="room")
        raw_walls = data.get("walls", [])
        if not isinstance(raw_walls, list):
            raw_walls = []
        return cls(
            id=_require_id(data, context="room"),
            name=_text(data, "name"),
            walls=tuple(Wall.from_dict(w) for w in raw_walls),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert this model to a JSON-serializable dict."""

        return {
            "id": self.id,
            "name": self.name,
            "walls": [w.to_dict() for w in self.walls],
        }


Paints = tuple[Paint, ...]
Rooms = tuple[Room, ...]
