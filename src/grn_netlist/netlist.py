# -*- coding: utf-8 -*-
"""
grn_netlist.netlist
~~~~~~~~~~~~~~~~~~~

Defines the netlist graph handed to downstream design stages.

A **Netlist** instance

* keeps its nodes and edges in insertion order,
* owns every :class:`NetlistNode` and :class:`NetlistEdge` it holds; an edge
  is only added once both endpoints are registered,
* serializes to the Cello netlist JSON shape.

Example
-------
>>> nl = Netlist(name="toggle")
>>> a, b = NetlistNode("A"), NetlistNode("B")
>>> nl.add_node(a); nl.add_node(b)
>>> nl.add_edge(NetlistEdge("A_p", a, b))
>>> [e.name for e in b.in_edges]
['A_p']
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, List, Optional


# --------------------------------------------------------------------------- #
# Gate types
# --------------------------------------------------------------------------- #
class GateType(str, Enum):
    """Logic label carried by a netlist node."""

    PRIMARY_INPUT = "PRIMARY_INPUT"
    PRIMARY_OUTPUT = "PRIMARY_OUTPUT"
    AND = "AND"
    OR = "OR"
    NAND = "NAND"
    NOR = "NOR"
    NOT = "NOT"
    BUF = "BUF"
    UNSET = ""


# --------------------------------------------------------------------------- #
# Graph elements
# --------------------------------------------------------------------------- #
class NetlistNode:
    """A vertex of the netlist, named after a component definition."""

    def __init__(self, name: str, node_type: GateType = GateType.UNSET) -> None:
        self.name = name
        self.node_type = node_type
        self.in_edges: List[NetlistEdge] = []
        self.out_edges: List[NetlistEdge] = []

    @property
    def num_in_edges(self) -> int:
        return len(self.in_edges)

    @property
    def num_out_edges(self) -> int:
        return len(self.out_edges)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "nodeType": self.node_type.value,
            "partitionID": -1,
            "deviceName": "",
        }

    def __repr__(self) -> str:
        return f"NetlistNode({self.name!r}, {self.node_type.name})"


class NetlistEdge:
    """Directed edge ``src -> dst``: the source regulates the destination."""

    def __init__(self, name: str, src: NetlistNode, dst: NetlistNode) -> None:
        self.name = name
        self.src = src
        self.dst = dst

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "src": self.src.name, "dst": self.dst.name}

    def __repr__(self) -> str:
        return f"NetlistEdge({self.name!r}, {self.src.name!r} -> {self.dst.name!r})"


# --------------------------------------------------------------------------- #
# Public class
# --------------------------------------------------------------------------- #
class Netlist:
    """
    Directed graph of logic-gate nodes and regulatory edges.

    Parameters
    ----------
    name : str, optional
        Netlist name, taken from the root module definition. Empty for the
        netlist of a document without a root module.
    input_filename : str, optional
        Path of the document the netlist was derived from.
    """

    def __init__(self, name: str = "", input_filename: str = "") -> None:
        self.name = name
        self.input_filename = input_filename
        self.nodes: List[NetlistNode] = []
        self.edges: List[NetlistEdge] = []
        # id(node) -> slot in self.nodes
        self._slots: Dict[int, int] = {}

    # ----------------------------------------------------------------------- #
    # Mutation
    # ----------------------------------------------------------------------- #
    def add_node(self, node: NetlistNode) -> None:
        self._slots[id(node)] = len(self.nodes)
        self.nodes.append(node)

    def replace_node(self, old: NetlistNode, new: NetlistNode) -> None:
        """Put ``new`` in the slot held by ``old``."""
        idx = self._slots.pop(id(old), None)
        if idx is None:
            raise KeyError(f"Node {old.name!r} is not in netlist {self.name!r}")
        self.nodes[idx] = new
        self._slots[id(new)] = idx

    def add_edge(self, edge: NetlistEdge) -> None:
        """Register ``edge`` and append it to both endpoints."""
        for end in (edge.src, edge.dst):
            if not self.contains(end):
                raise KeyError(f"Edge {edge.name!r} endpoint {end.name!r} is not in the netlist")
        edge.src.out_edges.append(edge)
        edge.dst.in_edges.append(edge)
        self.edges.append(edge)

    # ----------------------------------------------------------------------- #
    # Queries
    # ----------------------------------------------------------------------- #
    def contains(self, node: NetlistNode) -> bool:
        return id(node) in self._slots

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def get_node(self, name: str) -> Optional[NetlistNode]:
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def get_stats(self) -> Dict[str, int]:
        """Count nodes per gate type (keys are :class:`GateType` names)."""
        stats = {gate_type.name: 0 for gate_type in GateType}
        for node in self.nodes:
            stats[node.node_type.name] += 1
        return stats

    # ----------------------------------------------------------------------- #
    # Serialization
    # ----------------------------------------------------------------------- #
    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "inputFilename": self.input_filename,
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def write_json(self, path: str, indent: Optional[int] = 2) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_json(indent=indent))
            f.write("\n")

    def __repr__(self) -> str:
        return f"Netlist({self.name!r}, nodes={self.num_nodes}, edges={self.num_edges})"
