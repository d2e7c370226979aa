from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Response, status

from grn_netlist.exceptions import ConversionError

from ..schemas import ConvertRequest, NetlistListItem, NetlistOut
from ..store import store


router = APIRouter(prefix="/netlists", tags=["netlists"])


@router.get("/", response_model=List[NetlistListItem])
def list_netlists() -> List[NetlistListItem]:
    return store.list_netlists()


@router.post("/", response_model=NetlistOut, status_code=status.HTTP_201_CREATED)
def create_netlist(payload: ConvertRequest) -> NetlistOut:
    try:
        return store.create_netlist(payload)
    except ConversionError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.get("/{netlist_id}", response_model=NetlistOut)
def get_netlist(netlist_id: str) -> NetlistOut:
    try:
        return store.get_netlist(netlist_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Netlist not found")


@router.delete(
    "/{netlist_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_netlist(netlist_id: str) -> Response:
    ok = store.delete_netlist(netlist_id)
    if not ok:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Netlist not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
