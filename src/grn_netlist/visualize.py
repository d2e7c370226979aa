# -*- coding: utf-8 -*-
"""
grn_netlist.visualize
~~~~~~~~~~~~~~~~~~~~~

Render a :class:`~grn_netlist.netlist.Netlist` for inspection.

* :func:`to_dot` / :func:`write_dot` - Graphviz DOT, one box per node labelled
  with its gate type.
* :class:`CytoscapeExporter` - Cytoscape.js element spec with a stylesheet.
* :func:`make_plot` - interactive Plotly figure on a circular layout.

Quickstart
----------
>>> from grn_netlist.visualize import CytoscapeExporter, write_dot
>>> cy = CytoscapeExporter().export(netlist)
>>> write_dot(netlist, "toggle_dsgrn_import.dot")
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

import graphviz
import numpy as np
import plotly.graph_objects as go

from .netlist import GateType, Netlist

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #
DEFAULT_COLOR = "#94a3b8"

GATE_COLORS = {
    GateType.PRIMARY_INPUT: "#16a34a",
    GateType.PRIMARY_OUTPUT: "#ef4444",
    GateType.AND: "#0ea5e9",
    GateType.OR: "#3b82f6",
    GateType.NAND: "#8b5cf6",
    GateType.NOR: "#f59e0b",
    GateType.NOT: "#f97316",
    GateType.BUF: "#64748b",
    GateType.UNSET: DEFAULT_COLOR,
}


def _node_ids(netlist: Netlist) -> Dict[int, str]:
    """Stable element ids by position; display ids need not be unique."""
    return {id(node): f"n{i}" for i, node in enumerate(netlist.nodes)}


# --------------------------------------------------------------------------- #
# Layout
# --------------------------------------------------------------------------- #
def circular_layout(netlist: Netlist, radius: float = 1.0) -> Dict[int, Tuple[float, float]]:
    """Place nodes evenly on a circle, in netlist order. Keys are ``id(node)``."""
    n = netlist.num_nodes
    if n == 0:
        return {}
    angles = np.linspace(0.0, 2.0 * np.pi, num=n, endpoint=False)
    xs = radius * np.cos(angles)
    ys = radius * np.sin(angles)
    return {id(node): (float(x), float(y)) for node, x, y in zip(netlist.nodes, xs, ys)}


# --------------------------------------------------------------------------- #
# DOT
# --------------------------------------------------------------------------- #
def to_dot(netlist: Netlist) -> str:
    """Return the Graphviz DOT source of ``netlist``, left to right, one box per node."""
    ids = _node_ids(netlist)
    dot = graphviz.Digraph(name=netlist.name or "netlist")
    dot.attr(rankdir="LR")
    dot.attr("node", shape="box")
    for node in netlist.nodes:
        # \n inside a DOT label is a line break
        dot.node(ids[id(node)], label=f"{node.name}\\n{node.node_type.name}")
    for edge in netlist.edges:
        dot.edge(ids[id(edge.src)], ids[id(edge.dst)], label=edge.name)
    return dot.source


def write_dot(netlist: Netlist, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_dot(netlist))
    logger.info(f"Wrote DOT graph for '{netlist.name}' to {path}")


# --------------------------------------------------------------------------- #
# Exporters
# --------------------------------------------------------------------------- #
class NetlistExporter(ABC):
    """Abstract base for netlist exporters."""

    @abstractmethod
    def export(self, netlist: Netlist) -> Any:
        """Export a netlist to a specific format."""


class CytoscapeExporter(NetlistExporter):
    """Export a netlist to Cytoscape.js format."""

    def __init__(self, palette: Optional[Dict[GateType, str]] = None):
        self._palette = dict(GATE_COLORS)
        if palette:
            self._palette.update(palette)

    def export(self, netlist: Netlist, *, layout: str = "preset", scale: float = 300.0) -> Dict[str, Any]:
        elements = self._to_cytoscape_elements(netlist)

        if layout == "preset":
            positions = circular_layout(netlist, radius=scale)
            for node, el in zip(netlist.nodes, elements["nodes"]):
                x, y = positions[id(node)]
                el["position"] = {"x": x, "y": y}

        return {
            "elements": elements,
            "layout": {"name": layout, "animate": False},
            "style": self._get_stylesheet(),
        }

    def _to_cytoscape_elements(self, netlist: Netlist) -> Dict[str, List[Dict[str, Any]]]:
        ids = _node_ids(netlist)
        nodes = []
        for node in netlist.nodes:
            nodes.append({"data": {
                "id": ids[id(node)],
                "label": node.name,
                "type": node.node_type.name,
                "color": self._palette.get(node.node_type, DEFAULT_COLOR),
                "hoverLabel": f"{node.name} ({node.node_type.name}) | in={node.num_in_edges} out={node.num_out_edges}",
            }})
        edges = []
        for i, edge in enumerate(netlist.edges):
            edges.append({"data": {
                "id": f"e{i}",
                "label": edge.name,
                "source": ids[id(edge.src)],
                "target": ids[id(edge.dst)],
            }})
        return {"nodes": nodes, "edges": edges}

    def _get_stylesheet(self) -> List[Dict[str, Any]]:
        return [
            {"selector": "node", "style": {
                "label": "data(label)",
                "font-size": 10,
                "shape": "round-rectangle",
                "background-color": "data(color)",
                "border-width": 1,
                "border-color": "#334155",
            }},
            {"selector": 'node[type = "PRIMARY_INPUT"]', "style": {"shape": "triangle"}},
            {"selector": 'node[type = "PRIMARY_OUTPUT"]', "style": {"shape": "diamond"}},
            {"selector": "edge", "style": {
                "curve-style": "bezier",
                "width": 2,
                "line-color": DEFAULT_COLOR,
                "target-arrow-shape": "vee",
                "target-arrow-color": DEFAULT_COLOR,
            }},
        ]


# --------------------------------------------------------------------------- #
# Plotly
# --------------------------------------------------------------------------- #
def make_plot(netlist: Netlist, title: Optional[str] = None) -> go.Figure:
    """
    Create an interactive Plotly figure of the netlist.

    Nodes sit on a circle in netlist order and are coloured by gate type; one
    legend entry per gate type present.
    """
    positions = circular_layout(netlist)
    fig = go.Figure()

    edge_x: List[Optional[float]] = []
    edge_y: List[Optional[float]] = []
    for edge in netlist.edges:
        x0, y0 = positions[id(edge.src)]
        x1, y1 = positions[id(edge.dst)]
        edge_x += [x0, x1, None]
        edge_y += [y0, y1, None]
    fig.add_trace(go.Scatter(
        x=edge_x, y=edge_y, mode="lines",
        line=dict(color=DEFAULT_COLOR, width=1.5),
        hoverinfo="skip", showlegend=False,
    ))

    for gate_type in GateType:
        members = [n for n in netlist.nodes if n.node_type is gate_type]
        if not members:
            continue
        fig.add_trace(go.Scatter(
            x=[positions[id(n)][0] for n in members],
            y=[positions[id(n)][1] for n in members],
            mode="markers+text",
            text=[n.name for n in members],
            textposition="top center",
            name=gate_type.name,
            marker=dict(size=18, color=GATE_COLORS[gate_type], line=dict(color="black", width=1)),
            hovertemplate="<b>%{text}</b><br>" + gate_type.name + "<extra></extra>",
        ))

    fig.update_layout(
        title=title or f"Netlist {netlist.name}".strip(),
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x"),
        template="plotly_white",
    )
    return fig
