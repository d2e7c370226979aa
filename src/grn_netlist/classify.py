# -*- coding: utf-8 -*-
"""
grn_netlist.classify
~~~~~~~~~~~~~~~~~~~~

Infer a logic-gate type for every netlist node.

Two strategies share the :class:`GateClassifier` interface. Both add the
regulatory edges to the netlist and label every node.

``two_pass`` (reference)
    Edges first, then a classification pass that aggregates, per node, the
    modifier participations feeding it (inputs) and the participations through
    which it regulates other nodes (outputs). Gates are read from the tables
    below using the input count, the input/output roles and the logic tag of
    the node's governing interaction.

    ============================  =================  =====  ======
    inputs                        outputs            tag    gate
    ============================  =================  =====  ======
    2, both stimulator            all inhibitor      or     NOR
    2, both stimulator            all inhibitor      and    NAND
    2, both inhibitor             all inhibitor      nor    NAND
    2, both inhibitor             all inhibitor      nand   NOR
    1                             first stimulator   any    BUF
    1                             first inhibitor    any    NOT
    ============================  =================  =====  ======

    Anything else stays ``UNSET``.

``single_pass``
    One scan over the interactions: the modified node's gate is read straight
    from :data:`SINGLE_PASS_GATES` using the logic tag. No role checks; when a
    node is modified by several interactions the last one wins.

With both strategies a node with no in-edges is a primary input and a node
with no out-edges a primary output, whatever the annotations say.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Dict, List, Optional, Set, Type

from . import ontology
from .builder import NodeMap, add_edge, add_edges, participant_node, split_participations
from .document import Document, Interaction, ModuleDefinition, Participation
from .netlist import GateType, Netlist, NetlistNode
from .ontology import LogicTag

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Tables
# --------------------------------------------------------------------------- #
# (shared input role, logic tag) -> gate, for two inputs and inhibiting outputs
TWO_INPUT_GATES = {
    (ontology.STIMULATOR, LogicTag.OR): GateType.NOR,
    (ontology.STIMULATOR, LogicTag.AND): GateType.NAND,
    (ontology.INHIBITOR, LogicTag.NOR): GateType.NAND,
    (ontology.INHIBITOR, LogicTag.NAND): GateType.NOR,
}

# output role -> gate, for a single input
ONE_INPUT_GATES = {
    ontology.STIMULATOR: GateType.BUF,
    ontology.INHIBITOR: GateType.NOT,
}

SINGLE_PASS_GATES = {
    LogicTag.NOR: GateType.NAND,
    LogicTag.NAND: GateType.NOR,
    LogicTag.OR: GateType.AND,
    LogicTag.AND: GateType.OR,
    LogicTag.NOT: GateType.BUF,
    LogicTag.EQUIVALENT: GateType.NOT,
}


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #
def label_boundaries(netlist: Netlist) -> Set[NetlistNode]:
    """Label source nodes PRIMARY_INPUT and sink nodes PRIMARY_OUTPUT; return them."""
    boundary: Set[NetlistNode] = set()
    for node in netlist.nodes:
        if node.num_in_edges == 0:
            node.node_type = GateType.PRIMARY_INPUT
        elif node.num_out_edges == 0:
            node.node_type = GateType.PRIMARY_OUTPUT
        else:
            continue
        boundary.add(node)
    return boundary


def _all_have(participations: List[Participation], role: str) -> bool:
    return all(role in p.roles for p in participations)


def infer_gate(
    inputs: List[Participation],
    outputs: List[Participation],
    logic: Optional[LogicTag],
) -> GateType:
    """Look up the gate for a node from its accumulated inputs and outputs."""
    gate = GateType.UNSET
    if len(inputs) == 2 and _all_have(outputs, ontology.INHIBITOR):
        for role in (ontology.STIMULATOR, ontology.INHIBITOR):
            if _all_have(inputs, role):
                gate = TWO_INPUT_GATES.get((role, logic), gate)
    elif len(inputs) == 1 and outputs:
        first = outputs[0].roles
        for role, candidate in ONE_INPUT_GATES.items():
            if role in first:
                gate = candidate
    return gate


# --------------------------------------------------------------------------- #
# Strategies
# --------------------------------------------------------------------------- #
class GateClassifier(ABC):
    """Adds edges to a netlist holding only nodes, then labels every node."""

    name: str = ""

    @abstractmethod
    def classify(
        self,
        netlist: Netlist,
        document: Document,
        root: ModuleDefinition,
        node_map: NodeMap,
    ) -> Netlist:
        """Classify the nodes of ``netlist`` from the interactions of ``root``."""


class TwoPassClassifier(GateClassifier):
    """Reference classifier: role-pattern tables over aggregated inputs/outputs."""

    name = "two_pass"

    def classify(self, netlist, document, root, node_map):
        add_edges(document, root, netlist, node_map)
        boundary = label_boundaries(netlist)

        inputs: Dict[NetlistNode, List[Participation]] = defaultdict(list)
        outputs: Dict[NetlistNode, List[Participation]] = defaultdict(list)
        governing: Dict[NetlistNode, Interaction] = {}

        for interaction in root.interactions:
            modified, modifiers = split_participations(interaction)
            if modified is None:
                continue
            node = participant_node(document, root, modified, node_map)
            governing[node] = interaction
            inputs[node].extend(modifiers)
            for p in modifiers:
                outputs[participant_node(document, root, p, node_map)].append(p)

        for node in netlist.nodes:
            if node in boundary:
                continue
            interaction = governing.get(node)
            logic = interaction.logic if interaction is not None else None
            node.node_type = infer_gate(inputs[node], outputs[node], logic)
            if node.node_type is GateType.UNSET:
                logger.debug(
                    f"No gate for '{node.name}': {len(inputs[node])} input(s), "
                    f"{len(outputs[node])} output(s), logic={logic.value if logic else None}"
                )
        return netlist


class SinglePassClassifier(GateClassifier):
    """Fast path: gate taken straight from the logic tag while edges are built."""

    name = "single_pass"

    def classify(self, netlist, document, root, node_map):
        for interaction in root.interactions:
            modified, modifiers = split_participations(interaction)
            if modified is None:
                continue
            dst = participant_node(document, root, modified, node_map)
            for p in modifiers:
                add_edge(netlist, p.display_id, participant_node(document, root, p, node_map), dst)
            if interaction.logic is not None:
                dst.node_type = SINGLE_PASS_GATES[interaction.logic]
        label_boundaries(netlist)
        return netlist


CLASSIFIERS: Dict[str, Type[GateClassifier]] = {
    TwoPassClassifier.name: TwoPassClassifier,
    SinglePassClassifier.name: SinglePassClassifier,
}


def get_classifier(name: str) -> GateClassifier:
    try:
        return CLASSIFIERS[name]()
    except KeyError:
        raise ValueError(f"Unknown classifier {name!r}; expected one of {sorted(CLASSIFIERS)}") from None
