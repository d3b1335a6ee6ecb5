"""Core data structures for netlist representation."""
from .config import NetlistConfig
from .errors import (
    NetlistError, DuplicateEntity, MissingEntity,
    InvalidConfiguration, FrozenNetlist,
)
from .netlist import Netlist

__all__ = [
    "Netlist", "NetlistConfig",
    "NetlistError", "DuplicateEntity", "MissingEntity",
    "InvalidConfiguration", "FrozenNetlist",
]
