from __future__ import annotations

import threading
import uuid
from typing import Any, Dict, List, Optional

from grn_netlist.config import ConverterConfig
from grn_netlist.converter import NetlistConverter
from grn_netlist.netlist import Netlist

from .schemas import ConvertRequest, NetlistListItem, NetlistOut


class InMemoryStore:
    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        self._lock = threading.Lock()
        self._config = config or ConverterConfig()
        self._netlists: Dict[str, Dict[str, Any]] = {}

    # ---------------- Netlists ---------------- #
    def create_netlist(self, payload: ConvertRequest) -> NetlistOut:
        """Convert the payload's document; raises ConversionError on failure."""
        cfg = self._config
        if payload.classifier is not None:
            cfg = cfg.with_updates(classifier=payload.classifier)
        netlist = NetlistConverter(cfg).convert(payload.document)
        netlist.input_filename = payload.input_filename

        nid = str(uuid.uuid4())
        with self._lock:
            self._netlists[nid] = {"netlist": netlist, "classifier": cfg.classifier}
        return self._to_out(nid, netlist, cfg.classifier)

    def list_netlists(self) -> List[NetlistListItem]:
        with self._lock:
            items = list(self._netlists.items())
        return [
            NetlistListItem(
                id=nid,
                name=rec["netlist"].name,
                classifier=rec["classifier"],
                num_nodes=rec["netlist"].num_nodes,
                num_edges=rec["netlist"].num_edges,
            )
            for nid, rec in items
        ]

    def get_netlist(self, netlist_id: str) -> NetlistOut:
        rec = self._get_netlist_rec(netlist_id)
        return self._to_out(netlist_id, rec["netlist"], rec["classifier"])

    def get_netlist_obj(self, netlist_id: str) -> Netlist:
        return self._get_netlist_rec(netlist_id)["netlist"]

    def delete_netlist(self, netlist_id: str) -> bool:
        with self._lock:
            return self._netlists.pop(netlist_id, None) is not None

    def _get_netlist_rec(self, netlist_id: str) -> Dict[str, Any]:
        with self._lock:
            rec = self._netlists.get(netlist_id)
        if rec is None:
            raise KeyError(netlist_id)
        return rec

    @staticmethod
    def _to_out(nid: str, netlist: Netlist, classifier: str) -> NetlistOut:
        data = netlist.to_dict()
        return NetlistOut(
            id=nid,
            name=data["name"],
            inputFilename=data["inputFilename"],
            classifier=classifier,
            nodes=data["nodes"],
            edges=data["edges"],
            stats=netlist.get_stats(),
        )


store = InMemoryStore()
