"""
Domain exceptions for the paint calculator.

Notes
-----
Mutation operations in the domain model never raise for unknown ids; they are
no-ops instead. Exceptions are reserved for storage failures and programming
errors such as an unknown field name.
"""

from __future__ import annotations


class PaintCalcError(RuntimeError):
    """Base exception for all paint calculator domain failures."""


class UnknownFieldError(PaintCalcError, ValueError):
    """Raised when an update names a field outside the entity's closed field set."""
