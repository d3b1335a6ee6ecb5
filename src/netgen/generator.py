"""
Netlist builders.

Provides the small reference netlist used throughout the tests and a
seeded random generator for algorithm development. Both go through the
same mutation API a file parser would use.
"""

from __future__ import annotations
import logging
from typing import Optional
import numpy as np

from netcore.config import check_count
from netcore.errors import InvalidConfiguration
from netcore.netlist import Netlist

logger = logging.getLogger(__name__)


def create_test_netlist() -> Netlist:
    """
    Build the reference netlist.

    - 3 modules: "a0", "a1", "a2" weighted 533, 543 and 532
    - 3 nets: "a3", "a4", "a5" (no net weights)
    - edges: a3-a0, a3-a1, a5-a0 ("a4" and "a2" are left unconnected)
    - no fixed modules
    """
    netlist = Netlist(name="test")
    for module in ("a0", "a1", "a2"):
        netlist.add_module(module)
    for net in ("a3", "a4", "a5"):
        netlist.add_net(net)
    for net, module in (("a3", "a0"), ("a3", "a1"), ("a5", "a0")):
        netlist.add_edge(net, module)
    for module, weight in (("a0", 533), ("a1", 543), ("a2", 532)):
        netlist.set_module_weight(module, weight)
    return netlist


def generate_random(num_modules: int = 20, num_nets: int = 30,
                    avg_net_degree: int = 3,
                    num_pads: int = 0,
                    weighted: bool = False,
                    seed: Optional[int] = None) -> Netlist:
    """
    Generate a random netlist for testing.

    Args:
        num_modules: Number of ordinary modules ("m_000", ...).
        num_nets: Number of nets ("n_000", ...).
        avg_net_degree: Average modules per net.
        num_pads: Extra pad modules ("pad_00", ...), marked fixed.
        weighted: Assign random integer weights to modules and nets.
        seed: Random seed for reproducibility.

    Returns:
        A Netlist with ``num_pads`` recorded in its configuration.
    """
    check_count("num_modules", num_modules)
    check_count("num_nets", num_nets)
    check_count("num_pads", num_pads)
    if avg_net_degree < 1:
        raise InvalidConfiguration("avg_net_degree", avg_net_degree, "must be at least 1")
    if num_nets and num_modules + num_pads < 2:
        raise InvalidConfiguration("num_modules", num_modules,
                                   "nets need at least two modules to connect")

    rng = np.random.default_rng(seed)
    netlist = Netlist(name=f"random_{num_modules}m_{num_nets}n")

    module_names = []
    for i in range(num_modules):
        name = f"m_{i:03d}"
        netlist.add_module(name)
        module_names.append(name)
        if weighted:
            netlist.set_module_weight(name, int(rng.integers(1, 1000)))

    for i in range(num_pads):
        name = f"pad_{i:02d}"
        netlist.add_module(name)
        netlist.mark_fixed(name)
        module_names.append(name)
    netlist.num_pads = num_pads

    for i in range(num_nets):
        degree = max(2, int(rng.poisson(avg_net_degree - 1) + 1))
        degree = min(degree, len(module_names))

        name = f"n_{i:03d}"
        netlist.add_net(name)
        if weighted:
            netlist.set_net_weight(name, int(rng.integers(1, 10)))

        # Pick distinct modules for this net
        connected = rng.choice(len(module_names), size=degree, replace=False)
        for idx in connected:
            netlist.add_edge(name, module_names[idx])

    logger.debug("Generated %r", netlist)
    return netlist
