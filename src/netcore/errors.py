"""
Error kinds raised by the netlist core.

Every entity-resolution failure surfaces to the caller as one of these
exceptions. The builder decides whether to abort or skip the record.
"""

from __future__ import annotations
from typing import Optional


class NetlistError(Exception):
    """Base class for all netlist construction and query errors."""


class DuplicateEntity(NetlistError):
    """A module or net label was added twice to the same collection."""

    def __init__(self, kind: str, label: str):
        self.kind = kind
        self.label = label
        super().__init__(f"{kind} '{label}' already exists")


class MissingEntity(NetlistError, KeyError):
    """An operation referenced a module or net label that was never added."""

    def __init__(self, kind: str, label: str):
        self.kind = kind
        self.label = label
        super().__init__(f"{kind} '{label}' does not exist")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return self.args[0]


class InvalidConfiguration(NetlistError, ValueError):
    """Malformed scalar configuration or attribute value."""

    def __init__(self, field_name: str, value: object, reason: Optional[str] = None):
        self.field_name = field_name
        self.value = value
        message = f"invalid {field_name}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class FrozenNetlist(NetlistError):
    """A mutation was attempted after the netlist was frozen."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"cannot {operation}: netlist is frozen")
