# -*- coding: utf-8 -*-
"""
grn_netlist.ontology
~~~~~~~~~~~~~~~~~~~~

Controlled vocabulary used by regulatory-network documents.

* Interaction types and participation roles are Systems Biology Ontology
  (SBO) terms, written as ``identifiers.org`` URIs.
* The per-interaction boolean operator ("logic tag") comes from the OpenMath
  ``logic1`` content dictionary. :class:`LogicTag` accepts either the bare
  token (``"nor"``) or the full URI.

>>> from grn_netlist.ontology import LogicTag
>>> LogicTag.parse("https://www.openmath.org/cd/logic1#nand")
<LogicTag.NAND: 'nand'>
"""

from __future__ import annotations

from enum import Enum
from typing import Union


# --------------------------------------------------------------------------- #
# SBO terms
# --------------------------------------------------------------------------- #
SBO_PREFIX = "http://identifiers.org/biomodels.sbo/"

# Interaction types
STIMULATION = SBO_PREFIX + "SBO:0000170"
INHIBITION = SBO_PREFIX + "SBO:0000169"

# Participation roles
STIMULATOR = SBO_PREFIX + "SBO:0000459"
INHIBITOR = SBO_PREFIX + "SBO:0000020"
STIMULATED = SBO_PREFIX + "SBO:0000643"
INHIBITED = SBO_PREFIX + "SBO:0000642"

# Short names accepted wherever a term URI is expected
SBO_ALIASES = {
    "stimulation": STIMULATION,
    "inhibition": INHIBITION,
    "stimulator": STIMULATOR,
    "inhibitor": INHIBITOR,
    "stimulated": STIMULATED,
    "inhibited": INHIBITED,
}


def normalize_term(term: str) -> str:
    """Return the full SBO URI for ``term`` (alias, ``SBO:nnnnnnn`` or URI)."""
    t = term.strip()
    alias = SBO_ALIASES.get(t.lower())
    if alias is not None:
        return alias
    if t.startswith("SBO:"):
        return SBO_PREFIX + t
    return t


# --------------------------------------------------------------------------- #
# Logic tags
# --------------------------------------------------------------------------- #
LOGIC_NAMESPACE = "https://www.openmath.org/cd/logic1#"


class LogicTag(str, Enum):
    """Boolean operator declared on an interaction."""

    OR = "or"
    AND = "and"
    NOR = "nor"
    NAND = "nand"
    NOT = "not"
    EQUIVALENT = "equivalent"

    @classmethod
    def parse(cls, value: Union[str, "LogicTag"]) -> "LogicTag":
        """Resolve a token or OpenMath URI to a :class:`LogicTag`."""
        if isinstance(value, cls):
            return value
        token = str(value).strip()
        if token.startswith(LOGIC_NAMESPACE):
            token = token[len(LOGIC_NAMESPACE):]
        try:
            return cls(token.lower())
        except ValueError as exc:
            raise ValueError(f"Unknown logic tag {value!r}") from exc
