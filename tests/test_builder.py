import logging

import pytest

from grn_netlist.builder import add_edges, add_nodes, root_module, split_participations
from grn_netlist.document import load_document
from grn_netlist.exceptions import ConversionError, MappingError
from grn_netlist.netlist import Netlist

from conftest import interaction, make_document, module, part, regulation


@pytest.mark.unit
def test_root_module_is_none_without_modules() -> None:
    assert root_module(load_document({})) is None


@pytest.mark.unit
def test_first_of_several_roots_is_used(caplog) -> None:
    doc = load_document({
        "component_definitions": [{"display_id": "A"}],
        "module_definitions": [module("first", ["A"], []), module("second", ["A"], [])],
    })
    with caplog.at_level(logging.WARNING, logger="grn_netlist.builder"):
        root = root_module(doc)
    assert root.display_id == "first"
    assert "second" in caplog.text


@pytest.mark.unit
def test_one_node_per_functional_component_named_after_definition() -> None:
    doc = make_document(["A", "B", "C"], [])
    root = root_module(doc)
    nl = Netlist(root.display_id)
    node_map = add_nodes(doc, root, nl)
    assert [n.name for n in nl.nodes] == ["A", "B", "C"]
    assert set(node_map) == {"A", "B", "C"}
    assert node_map["B"] is nl.get_node("B")


@pytest.mark.unit
def test_shared_definition_keeps_last_node(caplog) -> None:
    # Regression: last write wins when two functional components share a definition.
    md = module("net", ["A", "B"], [])
    md["functional_components"].append({"display_id": "A_again", "definition": "A"})
    doc = load_document({
        "component_definitions": [{"display_id": "A"}, {"display_id": "B"}],
        "module_definitions": [md],
    })
    root = root_module(doc)
    nl = Netlist()
    with caplog.at_level(logging.WARNING, logger="grn_netlist.builder"):
        node_map = add_nodes(doc, root, nl)
    assert nl.num_nodes == 2
    assert [n.name for n in nl.nodes] == ["A", "B"]
    assert nl.nodes[0] is node_map["A"]
    assert "A_again" in caplog.text


@pytest.mark.unit
def test_unknown_definition_is_a_conversion_error() -> None:
    md = module("net", ["A"], [])
    md["functional_components"].append({"display_id": "Z_fc", "definition": "Z"})
    doc = load_document({"component_definitions": [{"display_id": "A"}], "module_definitions": [md]})
    with pytest.raises(ConversionError):
        add_nodes(doc, root_module(doc), Netlist())


@pytest.mark.unit
def test_k_modifiers_give_k_edges_into_the_target() -> None:
    doc = make_document(["A", "B", "C", "G"], [regulation("ABC_G", "inhibition", ["A", "B", "C"], "G")])
    root = root_module(doc)
    nl = Netlist()
    node_map = add_nodes(doc, root, nl)
    add_edges(doc, root, nl, node_map)
    g = nl.get_node("G")
    assert [e.name for e in g.in_edges] == ["ABC_G_A", "ABC_G_B", "ABC_G_C"]
    assert all(e.dst is g for e in nl.edges)
    assert [e.src.name for e in nl.edges] == ["A", "B", "C"]
    assert nl.get_node("A").out_edges == [nl.edges[0]]


@pytest.mark.unit
def test_non_regulatory_interaction_adds_no_edges() -> None:
    binding = interaction(
        "A_binds_B",
        ["SBO:0000177"],
        [part("A_p", "A", "SBO:0000010"), part("B_p", "B", "SBO:0000010")],
    )
    doc = make_document(["A", "B"], [binding])
    root = root_module(doc)
    nl = Netlist()
    add_edges(doc, root, nl, add_nodes(doc, root, nl))
    assert nl.num_edges == 0


@pytest.mark.unit
def test_interaction_without_modified_participant_is_skipped() -> None:
    dangling = interaction("A_alone", ["stimulation"], [part("A_p", "A", "stimulator")])
    doc = make_document(["A", "B"], [dangling])
    modified, modifiers = split_participations(doc.module_definitions[0].interactions[0])
    assert modified is None
    assert [p.display_id for p in modifiers] == ["A_p"]
    root = root_module(doc)
    nl = Netlist()
    add_edges(doc, root, nl, add_nodes(doc, root, nl))
    assert nl.num_edges == 0


@pytest.mark.unit
def test_two_modified_participations_raise_mapping_error() -> None:
    bad = interaction(
        "A_B_C",
        ["inhibition"],
        [part("A_p", "A", "inhibitor"), part("B_p", "B", "inhibited"), part("C_p", "C", "inhibited")],
    )
    doc = make_document(["A", "B", "C"], [bad])
    with pytest.raises(MappingError, match="A_B_C"):
        split_participations(doc.module_definitions[0].interactions[0])
