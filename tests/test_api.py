import pytest
from fastapi.testclient import TestClient

from grn_api.main import create_app

from conftest import interaction, module, part, regulation


def nor_payload(**extra):
    species = ["A", "B", "G", "Out"]
    doc = {
        "component_definitions": [{"display_id": s} for s in species],
        "module_definitions": [module("nor_net", species, [
            regulation("AB_G", "stimulation", ["A", "B"], "G", logic="or"),
            regulation("G_Out", "inhibition", ["G"], "Out"),
        ])],
    }
    return {"document": doc, **extra}


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.mark.integration
def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}


@pytest.mark.integration
def test_create_get_list_delete(client) -> None:
    r = client.post("/api/netlists/", json=nor_payload())
    assert r.status_code == 201
    body = r.json()
    assert body["name"] == "nor_net"
    assert body["classifier"] == "two_pass"
    assert [n["nodeType"] for n in body["nodes"]] == ["PRIMARY_INPUT", "PRIMARY_INPUT", "NOR", "PRIMARY_OUTPUT"]
    assert body["stats"]["NOR"] == 1
    nid = body["id"]

    assert client.get(f"/api/netlists/{nid}").json() == body
    assert nid in [item["id"] for item in client.get("/api/netlists/").json()]

    assert client.delete(f"/api/netlists/{nid}").status_code == 204
    assert client.get(f"/api/netlists/{nid}").status_code == 404
    assert client.delete(f"/api/netlists/{nid}").status_code == 404


@pytest.mark.integration
def test_single_pass_requested(client) -> None:
    body = client.post("/api/netlists/", json=nor_payload(classifier="single_pass")).json()
    assert body["classifier"] == "single_pass"
    assert body["nodes"][2]["nodeType"] == "AND"


@pytest.mark.integration
def test_mapping_error_is_422(client) -> None:
    bad = interaction(
        "A_BC",
        ["stimulation"],
        [part("A_p", "A", "stimulator"), part("B_p", "B", "stimulated"), part("C_p", "C", "stimulated")],
    )
    doc = {
        "component_definitions": [{"display_id": s} for s in "ABC"],
        "module_definitions": [module("net", list("ABC"), [bad])],
    }
    r = client.post("/api/netlists/", json={"document": doc})
    assert r.status_code == 422
    assert "A_BC" in r.json()["detail"]


@pytest.mark.integration
def test_cytoscape_view(client) -> None:
    nid = client.post("/api/netlists/", json=nor_payload()).json()["id"]
    cy = client.get("/api/viz/cytoscape", params={"netlist_id": nid}).json()
    assert [n["data"]["label"] for n in cy["elements"]["nodes"]] == ["A", "B", "G", "Out"]
    assert client.get("/api/viz/cytoscape", params={"netlist_id": "missing"}).status_code == 404
