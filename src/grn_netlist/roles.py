# -*- coding: utf-8 -*-
"""
grn_netlist.roles
~~~~~~~~~~~~~~~~~

Derive the regulation roles an interaction's participations are expected to
carry from the interaction's declared types.

* modified role: the regulated species (``stimulated`` / ``inhibited``)
* modifier role: the regulating species (``stimulator`` / ``inhibitor``)

Inhibition overrides stimulation when an interaction declares both.
"""

from __future__ import annotations

from typing import Collection, Optional, Tuple

from . import ontology


def modified_role(types: Collection[str]) -> Optional[str]:
    role = None
    if ontology.STIMULATION in types:
        role = ontology.STIMULATED
    if ontology.INHIBITION in types:
        role = ontology.INHIBITED
    return role


def modifier_role(types: Collection[str]) -> Optional[str]:
    role = None
    if ontology.STIMULATION in types:
        role = ontology.STIMULATOR
    if ontology.INHIBITION in types:
        role = ontology.INHIBITOR
    return role


def resolve_roles(types: Collection[str]) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(modified, modifier)``; both ``None`` for a non-regulatory interaction."""
    return modified_role(types), modifier_role(types)
