"""
Unit tests for the netlist builders.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from netcore import InvalidConfiguration
from netgen import create_test_netlist, generate_random


class TestReferenceNetlist:

    def test_contents(self):
        netlist = create_test_netlist()
        assert netlist.modules == ("a0", "a1", "a2")
        assert netlist.nets == ("a3", "a4", "a5")
        assert netlist.module_weight("a2") == 532
        assert netlist.net_weights == {}
        assert netlist.fixed_modules == []

    def test_instances_are_independent(self):
        first = create_test_netlist()
        first.add_module("extra")
        assert create_test_netlist().num_modules == 3


class TestRandomGeneration:

    def test_counts(self):
        netlist = generate_random(num_modules=10, num_nets=15, seed=42)
        assert netlist.num_modules == 10
        assert netlist.num_nets == 15
        assert netlist.num_pads == 0

    def test_net_degrees_in_range(self):
        netlist = generate_random(num_modules=8, num_nets=40, avg_net_degree=4, seed=1)
        for net in netlist.nets:
            assert 2 <= netlist.net_degree(net) <= 8
        assert netlist.num_edges == sum(netlist.net_degree(n) for n in netlist.nets)
        assert netlist.num_edges == sum(netlist.degree(m) for m in netlist.modules)

    def test_maxima_consistent(self):
        netlist = generate_random(num_modules=30, num_nets=60, seed=7)
        eager = (netlist.max_degree, netlist.max_net_degree)
        assert netlist.recompute_statistics() == eager

    def test_pads_are_fixed(self):
        netlist = generate_random(num_modules=6, num_nets=10, num_pads=4, seed=3)
        assert netlist.num_modules == 10
        assert netlist.num_pads == 4
        assert netlist.fixed_modules == ["pad_00", "pad_01", "pad_02", "pad_03"]
        assert len(netlist.movable_modules) == 6

    def test_weighted(self):
        netlist = generate_random(num_modules=5, num_nets=5, weighted=True, seed=0)
        assert set(netlist.module_weights) == set(netlist.modules)
        assert set(netlist.net_weights) == set(netlist.nets)
        assert all(w >= 1 for w in netlist.module_weights.values())

    def test_unweighted(self):
        netlist = generate_random(num_modules=5, num_nets=5, seed=0)
        assert netlist.module_weights == {}
        assert netlist.module_weight("m_000") is None

    def test_seed_reproducible(self):
        a = generate_random(num_modules=12, num_nets=20, seed=99)
        b = generate_random(num_modules=12, num_nets=20, seed=99)
        for net in a.nets:
            assert list(a.net_neighbors(net)) == list(b.net_neighbors(net))

    def test_invalid_arguments(self):
        with pytest.raises(InvalidConfiguration):
            generate_random(num_modules=-1)
        with pytest.raises(InvalidConfiguration):
            generate_random(num_modules=5, avg_net_degree=0)
        with pytest.raises(InvalidConfiguration):
            generate_random(num_modules=1, num_nets=3)

    def test_no_nets(self):
        netlist = generate_random(num_modules=1, num_nets=0, seed=0)
        assert netlist.num_modules == 1
        assert netlist.max_degree == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
