"""
grn_netlist
~~~~~~~~~~~

Convert regulatory-network documents (DSGRN designs in SBOL form) to logic
netlists for genetic-circuit design.

This package provides the document model, the netlist graph, the gate
classifiers and the converter that ties them together.
"""

from ._version import __version__

# Public API
from .ontology import LogicTag
from .document import (
    ComponentDefinition,
    Document,
    FunctionalComponent,
    Interaction,
    ModuleDefinition,
    Participation,
    load_document,
)
from .netlist import GateType, Netlist, NetlistEdge, NetlistNode
from .exceptions import ConversionError, MappingError
from .classify import GateClassifier, SinglePassClassifier, TwoPassClassifier, get_classifier
from .config import ConverterConfig, load_config
from .converter import NetlistConverter, convert_document


__all__ = [
    "LogicTag",
    "ComponentDefinition",
    "Document",
    "FunctionalComponent",
    "Interaction",
    "ModuleDefinition",
    "Participation",
    "load_document",
    "GateType",
    "Netlist",
    "NetlistEdge",
    "NetlistNode",
    "ConversionError",
    "MappingError",
    "GateClassifier",
    "SinglePassClassifier",
    "TwoPassClassifier",
    "get_classifier",
    "ConverterConfig",
    "load_config",
    "NetlistConverter",
    "convert_document",
]
