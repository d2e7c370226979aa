from typing import Any, Dict, List, Optional, Sequence

import pytest

from grn_netlist.document import Document, load_document


# --------------------------------------------------------------------------- #
# Document builders
# --------------------------------------------------------------------------- #
def part(display_id: str, species: str, *roles: str) -> Dict[str, Any]:
    """Participation of ``species`` (its functional component is ``<species>_fc``)."""
    return {"display_id": display_id, "participant": f"{species}_fc", "roles": list(roles)}


def interaction(
    display_id: str,
    types: Sequence[str],
    participations: List[Dict[str, Any]],
    logic: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "display_id": display_id,
        "types": list(types),
        "participations": participations,
        "logic": logic,
    }


def regulation(
    display_id: str,
    kind: str,
    sources: Sequence[str],
    target: str,
    logic: Optional[str] = None,
) -> Dict[str, Any]:
    """``sources`` stimulate (kind="stimulation") or inhibit ("inhibition") ``target``."""
    modifier, modified = ("stimulator", "stimulated") if kind == "stimulation" else ("inhibitor", "inhibited")
    parts = [part(f"{display_id}_{s}", s, modifier) for s in sources]
    parts.append(part(f"{display_id}_{target}", target, modified))
    return interaction(display_id, [kind], parts, logic)


def module(display_id: str, species: Sequence[str], interactions: List[Dict[str, Any]], modules=()) -> Dict[str, Any]:
    return {
        "display_id": display_id,
        "functional_components": [{"display_id": f"{s}_fc", "definition": s} for s in species],
        "interactions": interactions,
        "modules": list(modules),
    }


def make_document(species: Sequence[str], interactions: List[Dict[str, Any]], name: str = "net") -> Document:
    return load_document({
        "component_definitions": [{"display_id": s} for s in species],
        "module_definitions": [module(name, species, interactions)],
    })


def gate_of(netlist, name: str) -> str:
    return netlist.get_node(name).node_type.name


# --------------------------------------------------------------------------- #
# Fixtures
# --------------------------------------------------------------------------- #
@pytest.fixture
def nor_document() -> Document:
    """A and B both stimulate G (logic "or"); G inhibits Out."""
    return make_document(
        ["A", "B", "G", "Out"],
        [
            regulation("AB_G", "stimulation", ["A", "B"], "G", logic="or"),
            regulation("G_Out", "inhibition", ["G"], "Out", logic="not"),
        ],
        name="nor_net",
    )
