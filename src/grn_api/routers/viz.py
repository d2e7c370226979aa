from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from grn_netlist.visualize import CytoscapeExporter

from ..store import store


router = APIRouter(prefix="/viz", tags=["viz"])


@router.get("/cytoscape")
def build_cytoscape_spec(
    netlist_id: str = Query(...),
    layout: str = Query(default="preset"),
):
    """Return a Cytoscape.js spec for a stored netlist."""
    try:
        netlist = store.get_netlist_obj(netlist_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Netlist not found")
    return CytoscapeExporter().export(netlist, layout=layout)
