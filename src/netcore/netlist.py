"""
Netlist: the module/net incidence hypergraph.

A Netlist holds an ordered registry of modules and nets, the bipartite
incidence graph connecting them, and the per-entity attributes (weights,
fixed markings) read by partitioning and placement tools.

The graph is a ``networkx.Graph`` over integer node handles. Each handle
is allocated once, at insertion time, and recorded in a per-kind
label -> handle map, so resolving a label never scans the graph.
"""

from __future__ import annotations
import logging
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Iterator, Optional
import networkx as nx
import numpy as np

from .config import NetlistConfig, check_count
from .errors import DuplicateEntity, FrozenNetlist, InvalidConfiguration, MissingEntity

logger = logging.getLogger(__name__)

MODULE = "module"
NET = "net"


@dataclass(eq=False)
class Netlist:
    """
    Bipartite netlist of modules connected through nets.

    Modules and nets live in separate namespaces: a module and a net may
    share a label without aliasing the same graph node. Edges are
    deduplicated and the degree maxima are maintained eagerly on every
    new edge.

    Attributes:
        name: Design name.
        config: Builder-set scalars (``num_pads``, ``cost_model``).
    """
    name: str = "netlist"
    config: NetlistConfig = field(default_factory=NetlistConfig)

    _graph: nx.Graph = field(default_factory=nx.Graph, init=False, repr=False)
    _modules: list[str] = field(default_factory=list, init=False, repr=False)
    _nets: list[str] = field(default_factory=list, init=False, repr=False)
    _module_handles: dict[str, int] = field(default_factory=dict, init=False, repr=False)
    _net_handles: dict[str, int] = field(default_factory=dict, init=False, repr=False)
    _module_weight: dict[str, int] = field(default_factory=dict, init=False, repr=False)
    _net_weight: dict[str, int] = field(default_factory=dict, init=False, repr=False)
    _module_fixed: set[str] = field(default_factory=set, init=False, repr=False)
    _max_degree: int = field(default=0, init=False, repr=False)
    _max_net_degree: int = field(default=0, init=False, repr=False)
    _frozen: bool = field(default=False, init=False, repr=False)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "config":
            if getattr(self, "_frozen", False):
                raise FrozenNetlist("replace config")
            value.validate()
        super().__setattr__(name, value)

    # ── Entity Registry ───────────────────────────────────────────────

    def add_module(self, label: str) -> None:
        """Add a module. Raises DuplicateEntity if the label is taken."""
        self._check_mutable("add module")
        self._register(MODULE, label, self._modules, self._module_handles)

    def add_net(self, label: str) -> None:
        """Add a net. Raises DuplicateEntity if the label is taken."""
        self._check_mutable("add net")
        self._register(NET, label, self._nets, self._net_handles)

    def _register(self, kind: str, label: str,
                  labels: list[str], handles: dict[str, int]) -> None:
        if label in handles:
            logger.debug("Rejected duplicate %s %r", kind, label)
            raise DuplicateEntity(kind, label)
        handle = self._graph.number_of_nodes()
        self._graph.add_node(handle, kind=kind, label=label, index=len(labels))
        handles[label] = handle
        labels.append(label)
        logger.debug("Added %s %r as node %d", kind, label, handle)

    def _module_handle(self, label: str) -> int:
        try:
            return self._module_handles[label]
        except KeyError:
            raise MissingEntity(MODULE, label) from None

    def _net_handle(self, label: str) -> int:
        try:
            return self._net_handles[label]
        except KeyError:
            raise MissingEntity(NET, label) from None

    def has_module(self, label: str) -> bool:
        return label in self._module_handles

    def has_net(self, label: str) -> bool:
        return label in self._net_handles

    def module_index(self, label: str) -> int:
        """Position of a module in insertion order."""
        return self._graph.nodes[self._module_handle(label)]["index"]

    def net_index(self, label: str) -> int:
        """Position of a net in insertion order."""
        return self._graph.nodes[self._net_handle(label)]["index"]

    @property
    def modules(self) -> tuple[str, ...]:
        """Module labels in insertion order."""
        return tuple(self._modules)

    @property
    def nets(self) -> tuple[str, ...]:
        """Net labels in insertion order."""
        return tuple(self._nets)

    @property
    def num_modules(self) -> int:
        return len(self._modules)

    @property
    def num_nets(self) -> int:
        return len(self._nets)

    # ── Incidence Structure ───────────────────────────────────────────

    def add_edge(self, net: str, module: str) -> bool:
        """
        Connect a net to a module.

        Both labels are resolved before anything is inserted, so a failed
        call leaves the graph untouched.

        Returns:
            True if a new edge was inserted, False if the net already
            touched the module.

        Raises:
            MissingEntity: if either label is unknown.
        """
        self._check_mutable("add edge")
        net_handle = self._net_handle(net)
        module_handle = self._module_handle(module)
        if self._graph.has_edge(net_handle, module_handle):
            return False

        self._graph.add_edge(net_handle, module_handle)
        self._max_degree = max(self._max_degree, self._graph.degree[module_handle])
        self._max_net_degree = max(self._max_net_degree, self._graph.degree[net_handle])
        logger.debug("Connected net %r to module %r", net, module)
        return True

    def degree(self, module: str) -> int:
        """Number of distinct nets touching a module."""
        return self._graph.degree[self._module_handle(module)]

    def net_degree(self, net: str) -> int:
        """Number of distinct modules touched by a net."""
        return self._graph.degree[self._net_handle(net)]

    def neighbors(self, module: str) -> Iterator[str]:
        """Yield the labels of nets touching a module, in edge insertion order."""
        handle = self._module_handle(module)
        return self._labels_of(self._graph.neighbors(handle))

    def net_neighbors(self, net: str) -> Iterator[str]:
        """Yield the labels of modules touched by a net, in edge insertion order."""
        handle = self._net_handle(net)
        return self._labels_of(self._graph.neighbors(handle))

    def edges(self) -> Iterator[tuple[str, str]]:
        """Yield every incidence edge as a (net, module) label pair."""
        nodes = self._graph.nodes
        for u, v in self._graph.edges:
            if nodes[u]["kind"] == NET:
                yield nodes[u]["label"], nodes[v]["label"]
            else:
                yield nodes[v]["label"], nodes[u]["label"]

    def _labels_of(self, handles: Iterator[int]) -> Iterator[str]:
        nodes = self._graph.nodes
        for handle in handles:
            yield nodes[handle]["label"]

    @property
    def num_edges(self) -> int:
        """Total number of incidence edges (pins)."""
        return self._graph.number_of_edges()

    @property
    def graph(self) -> nx.Graph:
        """Read-only view of the incidence graph."""
        return self._graph.copy(as_view=True)

    # ── Attributes ────────────────────────────────────────────────────

    def set_module_weight(self, module: str, weight: int) -> None:
        self._check_mutable("set module weight")
        self._module_handle(module)
        self._module_weight[module] = _check_weight(weight)

    def set_net_weight(self, net: str, weight: int) -> None:
        self._check_mutable("set net weight")
        self._net_handle(net)
        self._net_weight[net] = _check_weight(weight)

    def module_weight(self, module: str) -> Optional[int]:
        """Weight of a module, or None if it was never weighted."""
        self._module_handle(module)
        return self._module_weight.get(module)

    def net_weight(self, net: str) -> Optional[int]:
        """Weight of a net, or None if it was never weighted."""
        self._net_handle(net)
        return self._net_weight.get(net)

    @property
    def module_weights(self) -> dict[str, int]:
        return dict(self._module_weight)

    @property
    def net_weights(self) -> dict[str, int]:
        return dict(self._net_weight)

    def mark_fixed(self, module: str) -> None:
        """Exclude a module from movement by placers. Idempotent."""
        self._check_mutable("mark module fixed")
        self._module_handle(module)
        self._module_fixed.add(module)

    def is_fixed(self, module: str) -> bool:
        self._module_handle(module)
        return module in self._module_fixed

    @property
    def fixed_modules(self) -> list[str]:
        """Fixed module labels in insertion order."""
        return [m for m in self._modules if m in self._module_fixed]

    @property
    def movable_modules(self) -> list[str]:
        """Non-fixed module labels in insertion order."""
        return [m for m in self._modules if m not in self._module_fixed]

    # ── Configuration ─────────────────────────────────────────────────

    @property
    def num_pads(self) -> int:
        return self.config.num_pads

    @num_pads.setter
    def num_pads(self, value: int) -> None:
        self._check_mutable("set num_pads")
        self.config = replace(self.config, num_pads=check_count("num_pads", value))

    @property
    def cost_model(self) -> int:
        return self.config.cost_model

    @cost_model.setter
    def cost_model(self, value: int) -> None:
        self._check_mutable("set cost_model")
        self.config = replace(self.config, cost_model=check_count("cost_model", value))

    # ── Statistics ────────────────────────────────────────────────────

    @property
    def max_degree(self) -> int:
        """Largest module degree, kept current on every new edge."""
        return self._max_degree

    @property
    def max_net_degree(self) -> int:
        """Largest net degree, kept current on every new edge."""
        return self._max_net_degree

    def recompute_statistics(self) -> tuple[int, int]:
        """
        Rescan every entity and reset the degree maxima.

        Returns:
            (max_degree, max_net_degree)
        """
        degrees = self._graph.degree
        self._max_degree = max((degrees[h] for h in self._module_handles.values()), default=0)
        self._max_net_degree = max((degrees[h] for h in self._net_handles.values()), default=0)
        logger.info("Recomputed statistics for %r: max_degree=%d, max_net_degree=%d",
                    self.name, self._max_degree, self._max_net_degree)
        return self._max_degree, self._max_net_degree

    def avg_net_degree(self) -> float:
        """Average number of modules per net."""
        if not self._nets:
            return 0.0
        return float(np.mean([self.net_degree(n) for n in self._nets]))

    def degree_histogram(self) -> dict[int, int]:
        """Map of module degree -> number of modules with that degree."""
        return dict(sorted(Counter(self.degree(m) for m in self._modules).items()))

    # ── Freeze ────────────────────────────────────────────────────────

    def freeze(self) -> None:
        """End construction. Any later mutation raises FrozenNetlist."""
        if self._frozen:
            return
        nx.freeze(self._graph)
        self._frozen = True
        logger.info("Froze netlist %r: %d modules, %d nets, %d edges",
                    self.name, self.num_modules, self.num_nets, self.num_edges)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self, operation: str) -> None:
        if self._frozen:
            logger.debug("Rejected %s on frozen netlist %r", operation, self.name)
            raise FrozenNetlist(operation)

    def summary(self) -> str:
        """Return a human-readable summary of the netlist."""
        lines = [
            f"╔══════════════════════════════════════════╗",
            f"║  Netlist: {self.name:<30s} ║",
            f"╠══════════════════════════════════════════╣",
            f"║  Modules:         {self.num_modules:<22d} ║",
            f"║  Nets:            {self.num_nets:<22d} ║",
            f"║  Pins:            {self.num_edges:<22d} ║",
            f"║  Pads:            {self.num_pads:<22d} ║",
            f"║  Max Degree:      {self.max_degree:<22d} ║",
            f"║  Max Net Degree:  {self.max_net_degree:<22d} ║",
            f"║  Avg Net Degree:  {self.avg_net_degree():<22.2f} ║",
            f"║  Fixed Modules:   {len(self._module_fixed):<22d} ║",
            f"╚══════════════════════════════════════════╝",
        ]
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        # handles depend on interleaving of add_module/add_net, so compare by label
        if not isinstance(other, Netlist):
            return NotImplemented
        return (self.name == other.name
                and self.config == other.config
                and self._modules == other._modules
                and self._nets == other._nets
                and self._module_weight == other._module_weight
                and self._net_weight == other._net_weight
                and self._module_fixed == other._module_fixed
                and set(self.edges()) == set(other.edges()))

    def __repr__(self) -> str:
        return (f"Netlist('{self.name}', modules={self.num_modules}, "
                f"nets={self.num_nets}, edges={self.num_edges})")


def _check_weight(weight: object) -> int:
    if isinstance(weight, bool) or not isinstance(weight, (int, np.integer)):
        raise InvalidConfiguration("weight", weight, "expected an integer")
    return int(weight)
