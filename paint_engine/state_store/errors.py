"""Domain exceptions for the state store."""

from __future__ import annotations

from ..errors import PaintCalcError


class StateStoreError(PaintCalcError):
    """Base error for state store operations (open, read, write)."""
