"""Configuration scalars carried by a Netlist."""

from __future__ import annotations
from dataclasses import dataclass

from .errors import InvalidConfiguration


def check_count(field_name: str, value: object) -> int:
    """Return ``value`` if it is a non-negative int, else raise InvalidConfiguration."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(field_name, value, "expected an integer")
    if value < 0:
        raise InvalidConfiguration(field_name, value, "must be non-negative")
    return value


@dataclass(frozen=True)
class NetlistConfig:
    """
    Scalars set by the builder and read by downstream consumers.

    Immutable: a Netlist swaps in a new instance when a value changes, so
    one config may seed several netlists.

    Attributes:
        num_pads: Number of pad (I/O boundary) modules.
        cost_model: Selector for how consumers compute connectivity cost.
            Opaque to the core.
    """
    num_pads: int = 0
    cost_model: int = 0

    def validate(self) -> None:
        check_count("num_pads", self.num_pads)
        check_count("cost_model", self.cost_model)
