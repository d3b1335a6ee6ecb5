"""Builders that populate a Netlist through its public API."""
from .generator import create_test_netlist, generate_random

__all__ = ["create_test_netlist", "generate_random"]
