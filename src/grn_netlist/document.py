# -*- coding: utf-8 -*-
"""
grn_netlist.document
~~~~~~~~~~~~~~~~~~~~

Structured form of a regulatory-network document.

The models mirror the subset of SBOL that a DSGRN design uses: component
definitions (molecular species), module definitions holding functional
components and interactions, and role-tagged participations. A document
arrives already parsed; :func:`load_document` only validates a mapping or a
JSON file with the same shape.

Example
-------
>>> doc = load_document({
...     "component_definitions": [{"display_id": "X"}, {"display_id": "Y"}],
...     "module_definitions": [{
...         "display_id": "net",
...         "functional_components": [
...             {"display_id": "X_fc", "definition": "X"},
...             {"display_id": "Y_fc", "definition": "Y"},
...         ],
...         "interactions": [{
...             "display_id": "X_inh_Y",
...             "types": ["inhibition"],
...             "participations": [
...                 {"display_id": "X_p", "participant": "X_fc", "roles": ["inhibitor"]},
...                 {"display_id": "Y_p", "participant": "Y_fc", "roles": ["inhibited"]},
...             ],
...             "logic": "not",
...         }],
...     }],
... })
>>> [m.display_id for m in doc.root_module_definitions()]
['net']
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from .ontology import LogicTag, normalize_term


DocumentLike = Union[str, Path, Mapping[str, Any]]


# --------------------------------------------------------------------------- #
# Base
# --------------------------------------------------------------------------- #
class Identified(BaseModel):
    """An object with a URI identity and a display id.

    When ``identity`` is omitted it defaults to ``display_id``.
    """

    model_config = ConfigDict(extra="forbid")

    identity: str = ""
    display_id: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def default_identity(self) -> "Identified":
        if not self.identity:
            self.identity = self.display_id
        return self


def _normalize_terms(values: List[str]) -> List[str]:
    out: List[str] = []
    for v in values or []:
        term = normalize_term(str(v))
        if term not in out:
            out.append(term)
    return out


# --------------------------------------------------------------------------- #
# Records
# --------------------------------------------------------------------------- #
class ComponentDefinition(Identified):
    """A molecular species definition."""

    name: Optional[str] = None


class FunctionalComponent(Identified):
    """Instance of a component definition inside a module."""

    definition: str = Field(..., min_length=1, description="ComponentDefinition identity")


class Participation(Identified):
    participant: str = Field(..., min_length=1, description="FunctionalComponent identity")
    roles: List[str] = Field(default_factory=list)

    @field_validator("roles")
    @classmethod
    def validate_roles(cls, v: List[str]) -> List[str]:
        return _normalize_terms(v)


class Interaction(Identified):
    types: List[str] = Field(default_factory=list)
    participations: List[Participation] = Field(default_factory=list)
    logic: Optional[LogicTag] = None

    @field_validator("types")
    @classmethod
    def validate_types(cls, v: List[str]) -> List[str]:
        return _normalize_terms(v)

    @field_validator("logic", mode="before")
    @classmethod
    def validate_logic(cls, v: Any) -> Optional[LogicTag]:
        if v is None or v == "":
            return None
        return LogicTag.parse(v)


class ModuleDefinition(Identified):
    functional_components: List[FunctionalComponent] = Field(default_factory=list)
    interactions: List[Interaction] = Field(default_factory=list)
    modules: List[str] = Field(
        default_factory=list,
        description="Identities of module definitions instantiated by this one",
    )

    _components: Dict[str, FunctionalComponent] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        self._components = {fc.identity: fc for fc in self.functional_components}

    def get_functional_component(self, identity: str) -> Optional[FunctionalComponent]:
        return self._components.get(identity)


class Document(BaseModel):
    """A parsed regulatory-network document."""

    model_config = ConfigDict(extra="forbid")

    component_definitions: List[ComponentDefinition] = Field(default_factory=list)
    module_definitions: List[ModuleDefinition] = Field(default_factory=list)

    _definitions: Dict[str, ComponentDefinition] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def check_references(self) -> "Document":
        seen = set()
        for cd in self.component_definitions:
            if cd.identity in seen:
                raise ValueError(f"Duplicate component definition identity {cd.identity!r}")
            seen.add(cd.identity)
        for md in self.module_definitions:
            for interaction in md.interactions:
                for p in interaction.participations:
                    if md.get_functional_component(p.participant) is None:
                        raise ValueError(
                            f"Participation {p.display_id!r} in {md.display_id!r} references "
                            f"unknown functional component {p.participant!r}"
                        )
        return self

    def model_post_init(self, __context: Any) -> None:
        self._definitions = {cd.identity: cd for cd in self.component_definitions}

    # ------------------------------------------------------------------ #
    # Lookups
    # ------------------------------------------------------------------ #
    def get_component_definition(self, identity: str) -> Optional[ComponentDefinition]:
        return self._definitions.get(identity)

    def root_module_definitions(self) -> List[ModuleDefinition]:
        """Module definitions not instantiated by any other module, in document order."""
        children = {child for md in self.module_definitions for child in md.modules}
        return [md for md in self.module_definitions if md.identity not in children]

    def participant_definition(
        self, module: ModuleDefinition, participation: Participation
    ) -> Optional[ComponentDefinition]:
        """Resolve participation -> functional component -> component definition."""
        fc = module.get_functional_component(participation.participant)
        if fc is None:
            return None
        return self.get_component_definition(fc.definition)


# --------------------------------------------------------------------------- #
# Loading
# --------------------------------------------------------------------------- #
def load_document(source: DocumentLike) -> Document:
    """
    Validate a document from a JSON file path or a pre-loaded mapping.

    Parameters
    ----------
    source : str | Path | Mapping
        Path to a JSON file, or a dict with the :class:`Document` shape.

    Returns
    -------
    Document
    """
    if isinstance(source, (str, Path)):
        with open(source, "r", encoding="utf-8") as f:
            return Document.model_validate(json.load(f))
    if isinstance(source, Mapping):
        return Document.model_validate(dict(source))
    raise TypeError("source must be a file path or a mapping")
