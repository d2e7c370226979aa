from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from grn_netlist.config import ClassifierName
from grn_netlist.document import Document


class ConvertRequest(BaseModel):
    document: Document
    classifier: Optional[ClassifierName] = Field(
        default=None, description="Gate classifier; server default when omitted"
    )
    input_filename: str = ""


class NodeOut(BaseModel):
    name: str
    nodeType: str
    partitionID: int = -1
    deviceName: str = ""


class EdgeOut(BaseModel):
    name: str
    src: str
    dst: str


class NetlistOut(BaseModel):
    id: str
    name: str
    inputFilename: str = ""
    classifier: ClassifierName
    nodes: List[NodeOut] = Field(default_factory=list)
    edges: List[EdgeOut] = Field(default_factory=list)
    stats: Dict[str, int] = Field(default_factory=dict)


class NetlistListItem(BaseModel):
    id: str
    name: str
    classifier: ClassifierName
    num_nodes: int
    num_edges: int
