"""
Netlist Construction Example
============================

Builds a netlist the way a parser would:
  1. Generate a random module/net structure
  2. Annotate weights and fixed pads
  3. Report a rejected record (edge to a module that was never added)
  4. Freeze and hand the read-only netlist to a consumer

Usage:
    cd netlistx
    python examples/build_netlist.py
"""

import sys
import os
import logging

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from netcore import MissingEntity
from netcore.log import setup_logging
from netgen import generate_random


def main():
    setup_logging(logging.INFO)
    netlist = generate_random(num_modules=25, num_nets=40, num_pads=4,
                              weighted=True, seed=42)
    netlist.cost_model = 1

    try:
        netlist.add_edge("n_000", "m_missing")
    except MissingEntity as exc:
        print(f"   Skipped malformed record: {exc}")

    netlist.freeze()
    print(netlist.summary())

    print("\nModule degree histogram:")
    for degree, count in netlist.degree_histogram().items():
        print(f"  {degree:>3d}: {'#' * count}")


if __name__ == "__main__":
    main()
