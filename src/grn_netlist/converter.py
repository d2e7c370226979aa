# -*- coding: utf-8 -*-
"""
grn_netlist.converter
~~~~~~~~~~~~~~~~~~~~~

Convert a regulatory-network document, as produced by the DSGRN design tool,
to a logic netlist.

Usage
-----
>>> from grn_netlist import NetlistConverter, load_document
>>> doc = load_document("network.json")
>>> netlist = NetlistConverter().convert(doc)
>>> netlist.to_json()        # Cello netlist JSON
"""

from __future__ import annotations

import logging
from typing import Optional

from .builder import add_nodes, root_module
from .classify import GateClassifier, get_classifier
from .config import ConverterConfig
from .document import Document
from .netlist import Netlist

logger = logging.getLogger(__name__)


class NetlistConverter:
    """
    Document -> netlist conversion.

    Parameters
    ----------
    config : ConverterConfig, optional
        Selects the gate classifier. Defaults to the two-pass classifier.
    classifier : GateClassifier, optional
        Explicit classifier instance; takes precedence over ``config``.

    Notes
    -----
    Every call builds a fresh netlist; the converter holds no state between
    calls. A :class:`~grn_netlist.exceptions.ConversionError` raised during a
    call means no netlist was produced.
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        classifier: Optional[GateClassifier] = None,
    ) -> None:
        self.config = config or ConverterConfig()
        self.classifier = classifier or get_classifier(self.config.classifier)

    def convert(self, document: Document) -> Netlist:
        root = root_module(document)
        if root is None:
            logger.info("Document has no root module definition; returning an empty netlist")
            return Netlist()

        netlist = Netlist(name=root.display_id)
        node_map = add_nodes(document, root, netlist)
        self.classifier.classify(netlist, document, root, node_map)

        logger.info(
            f"Converted '{netlist.name}' with {self.classifier.name}: "
            f"{netlist.num_nodes} nodes, {netlist.num_edges} edges"
        )
        return netlist


def convert_document(document: Document, classifier: str = "two_pass") -> Netlist:
    """Convert ``document`` with the named classifier."""
    return NetlistConverter(ConverterConfig(classifier=classifier)).convert(document)
