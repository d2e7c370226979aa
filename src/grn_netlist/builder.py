# -*- coding: utf-8 -*-
"""
grn_netlist.builder
~~~~~~~~~~~~~~~~~~~

Build the netlist skeleton from a root module definition.

* :func:`root_module` picks the module to convert.
* :func:`add_nodes` creates one node per component definition.
* :func:`add_edges` creates one edge per modifier participation, pointing at
  the interaction's modified participant.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .document import Document, Interaction, ModuleDefinition, Participation
from .exceptions import ConversionError, MappingError
from .netlist import Netlist, NetlistEdge, NetlistNode
from .roles import resolve_roles

logger = logging.getLogger(__name__)

# definition identity -> node
NodeMap = Dict[str, NetlistNode]


# --------------------------------------------------------------------------- #
# Module extraction
# --------------------------------------------------------------------------- #
def root_module(document: Document) -> Optional[ModuleDefinition]:
    """Return the first root module definition, or ``None`` if there is none."""
    roots = document.root_module_definitions()
    if not roots:
        return None
    if len(roots) > 1:
        ignored = ", ".join(md.display_id for md in roots[1:])
        logger.warning(f"Document has {len(roots)} root modules; converting '{roots[0].display_id}', ignoring {ignored}")
    return roots[0]


# --------------------------------------------------------------------------- #
# Nodes
# --------------------------------------------------------------------------- #
def add_nodes(document: Document, root: ModuleDefinition, netlist: Netlist) -> NodeMap:
    """
    Add one node per functional component of ``root`` to ``netlist``.

    A definition shared by several functional components keeps the node of
    the last one: it replaces the earlier node in both the returned map and
    the netlist.

    Returns
    -------
    NodeMap
        Component definition identity -> node.
    """
    node_map: NodeMap = {}
    for fc in root.functional_components:
        definition = document.get_component_definition(fc.definition)
        if definition is None:
            raise ConversionError(
                f"Functional component '{fc.display_id}' references unknown definition '{fc.definition}'"
            )
        node = NetlistNode(definition.display_id)
        previous = node_map.get(definition.identity)
        if previous is not None:
            logger.warning(
                f"Definition '{definition.display_id}' is shared by several functional components; "
                f"'{fc.display_id}' overwrites the earlier node"
            )
            netlist.replace_node(previous, node)
        else:
            netlist.add_node(node)
        node_map[definition.identity] = node
    return node_map


def participant_node(
    document: Document, root: ModuleDefinition, participation: Participation, node_map: NodeMap
) -> NetlistNode:
    definition = document.participant_definition(root, participation)
    node = node_map.get(definition.identity) if definition is not None else None
    if node is None:
        raise ConversionError(f"Participation '{participation.display_id}' has no netlist node")
    return node


# --------------------------------------------------------------------------- #
# Participations
# --------------------------------------------------------------------------- #
def split_participations(
    interaction: Interaction,
) -> Tuple[Optional[Participation], List[Participation]]:
    """
    Split an interaction into its modified participation and its modifiers.

    Returns ``(None, [])`` when the interaction is neither a stimulation nor an
    inhibition, and ``(None, modifiers)`` when nothing holds the modified role.

    Raises
    ------
    MappingError
        More than one participation holds the modified role.
    """
    modified_role, modifier_role = resolve_roles(interaction.types)
    if modified_role is None:
        return None, []
    modified: Optional[Participation] = None
    for p in interaction.participations:
        if modified_role in p.roles:
            if modified is not None:
                raise MappingError(
                    f"Cannot map interaction '{interaction.display_id}': participations "
                    f"'{modified.display_id}' and '{p.display_id}' are both modified"
                )
            modified = p
    modifiers = [p for p in interaction.participations if p is not modified and modifier_role in p.roles]
    return modified, modifiers


# --------------------------------------------------------------------------- #
# Edges
# --------------------------------------------------------------------------- #
def add_edge(netlist: Netlist, name: str, src: NetlistNode, dst: NetlistNode) -> NetlistEdge:
    edge = NetlistEdge(name, src, dst)
    netlist.add_edge(edge)
    return edge


def add_edges(document: Document, root: ModuleDefinition, netlist: Netlist, node_map: NodeMap) -> None:
    """Add a ``modifier -> modified`` edge for every modifier participation in ``root``."""
    for interaction in root.interactions:
        modified, modifiers = split_participations(interaction)
        if modified is None:
            logger.debug(f"Skipping interaction '{interaction.display_id}': no modified participant")
            continue
        dst = participant_node(document, root, modified, node_map)
        for modifier in modifiers:
            src = participant_node(document, root, modifier, node_map)
            add_edge(netlist, modifier.display_id, src, dst)
