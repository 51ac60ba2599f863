"""
API tests: unit endpoints, catalog admin, projects.

Tests:
1.     Health check
2-8.   /api/units
9-13.  /api/catalog
14-22. /api/projects
"""

from datetime import datetime


def _new_unit(client, **body):
    response = client.post("/api/units/new", json=body)
    assert response.status_code == 200
    return response.json()


def _create_project(client, **fields):
    body = {"name": "Casa Norte", "client_name": "Ana Ruiz", "client_address": "Av. Costanera 120"}
    body.update(fields)
    response = client.post("/api/projects/", json=body)
    assert response.status_code == 200
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "glazier-configurator"}


# ============================================================
# Units
# ============================================================

def test_new_unit_defaults(client):
    data = _new_unit(client)
    assert data["config"]["line_key"] == "al_25"
    assert data["config"]["sash_sizes"] == [460, 460]
    assert data["price"] == 183090
    cells = data["layout"]["cells"]
    assert [c["opening_type"] for c in cells] == ["fixed", "slider"]
    assert cells[0]["show_handle"] is False


def test_new_unit_pvc(client):
    data = _new_unit(client, material_family="pvc")
    assert data["config"]["line_key"] == "pvc_58cd"
    assert data["price"] == 271090


def test_update_unit_resets_sizes(client):
    config = _new_unit(client)["config"]
    response = client.post("/api/units/update", json={"config": config, "updates": {"sash_count": 3}})
    assert response.status_code == 200
    sizes = response.json()["config"]["sash_sizes"]
    assert len(sizes) == 3
    assert abs(sum(sizes) - 920) <= 1


def test_resize_cell(client):
    config = _new_unit(client)["config"]
    response = client.post("/api/units/resize-cell", json={"config": config, "index": 0, "size": 300})
    assert response.status_code == 200
    assert response.json()["config"]["sash_sizes"] == [300, 620]

    response = client.post("/api/units/resize-cell", json={"config": config, "index": 5, "size": 300})
    assert response.status_code == 400


def test_price_breakdown(client):
    config = _new_unit(client)["config"]
    response = client.post("/api/units/price", json=config)
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 183090
    assert data["items"][0] == {"factor": "base", "description": "Base price", "amount": 60000}


def test_cut_list_endpoint(client):
    config = _new_unit(client)["config"]
    response = client.post("/api/units/cut-list", json=config)
    assert response.status_code == 200
    assert response.json()["line_key"] == "al_25"

    door = _new_unit(client, overrides={"opening_type": "door_left"})["config"]
    response = client.post("/api/units/cut-list", json=door)
    assert response.status_code == 404


def test_compatibility_endpoint(client):
    response = client.get("/api/units/compatibility/al_5000")
    assert response.status_code == 200
    data = response.json()
    assert data["standard_glass"] == "clear_3"
    assert data["valid_thicknesses"] == [3, 4]
    keys = [g["key"] for g in data["compatible_glass"]]
    assert "clear_4" in keys
    assert "clear_6" not in keys

    unconstrained = client.get("/api/units/compatibility/pvc_70cd?family=pvc").json()
    assert unconstrained["constrained"] is False


# ============================================================
# Catalog
# ============================================================

def test_get_catalog(client):
    response = client.get("/api/catalog/aluminum")
    assert response.status_code == 200
    data = response.json()
    assert "glass_types" in data
    assert any(entry["key"] == "clear_4" for entry in data["glass_types"])


def test_override_changes_price(client):
    response = client.put("/api/catalog/aluminum/base/base", json={"price": 70000})
    assert response.status_code == 200
    assert response.json()["overridden"] is True
    assert _new_unit(client)["price"] == 193090
    # PVC is a separate catalog
    assert _new_unit(client, material_family="pvc")["price"] == 271090


def test_delete_and_restore_option(client):
    response = client.delete("/api/catalog/aluminum/frame_colors/walnut")
    assert response.status_code == 200
    keys = [e["key"] for e in client.get("/api/catalog/aluminum/frame_colors").json()]
    assert "walnut" not in keys

    # Saved units that still use it keep pricing
    walnut = _new_unit(client, overrides={"color_key": "walnut"})
    assert walnut["price"] == 183090 - 26000 + 33000

    response = client.post("/api/catalog/aluminum/frame_colors/walnut/restore")
    assert response.status_code == 200
    keys = [e["key"] for e in client.get("/api/catalog/aluminum/frame_colors").json()]
    assert "walnut" in keys


def test_delete_unknown_option_404(client):
    response = client.delete("/api/catalog/aluminum/frame_colors/plaid")
    assert response.status_code == 404


def test_restore_without_override_404(client):
    response = client.post("/api/catalog/pvc/glass_types/clear_4/restore")
    assert response.status_code == 404


# ============================================================
# Projects
# ============================================================

def test_create_project(client):
    project = _create_project(client)
    year = datetime.utcnow().year
    assert project["project_number"] == f"GZ-{year}-0001"
    assert project["units"] == []
    assert project["material_family"] == "aluminum"


def test_project_numbers_increment(client):
    _create_project(client)
    second = _create_project(client, name="Casa Sur")
    assert second["project_number"].endswith("-0002")
    assert len(client.get("/api/projects/").json()) == 2


def test_project_number_not_reused_after_delete(client):
    first = _create_project(client, name="A")
    second = _create_project(client, name="B")
    assert client.delete(f"/api/projects/{first['id']}").status_code == 200

    third = _create_project(client, name="C")
    assert third["project_number"].endswith("-0003")
    assert third["project_number"] != second["project_number"]

    # Deleting the newest one still moves forward from what remains
    client.delete(f"/api/projects/{third['id']}")
    assert _create_project(client, name="D")["project_number"].endswith("-0003")


def test_add_and_edit_unit(client):
    project = _create_project(client, material_family="pvc")
    response = client.post(f"/api/projects/{project['id']}/units", json={})
    assert response.status_code == 200
    units = response.json()["units"]
    assert len(units) == 1
    assert units[0]["line_key"] == "pvc_58cd"

    response = client.put(
        f"/api/projects/{project['id']}/units/0",
        json={"updates": {"sash_count": 2, "overall_width": 1400}},
    )
    assert response.status_code == 200
    unit = response.json()["units"][0]
    assert unit["sash_count"] == 2
    assert unit["sash_sizes"] == [660, 660]


def test_edit_missing_unit_404(client):
    project = _create_project(client)
    response = client.put(f"/api/projects/{project['id']}/units/3", json={"updates": {}})
    assert response.status_code == 404


def test_remove_unit(client):
    project = _create_project(client)
    client.post(f"/api/projects/{project['id']}/units", json={})
    client.post(f"/api/projects/{project['id']}/units", json={"overrides": {"opening_type": "fixed"}})
    response = client.delete(f"/api/projects/{project['id']}/units/0")
    assert response.status_code == 200
    units = response.json()["units"]
    assert len(units) == 1
    assert units[0]["opening_type"] == "fixed"


def test_project_quote(client):
    project = _create_project(client, price_adjustment_pct=10)
    client.post(f"/api/projects/{project['id']}/units", json={})
    response = client.get(f"/api/projects/{project['id']}/quote")
    assert response.status_code == 200
    quote = response.json()
    assert quote["subtotal"] == 183090
    assert quote["adjustment"] == 18309
    assert quote["total"] == 201399
    unit = quote["units"][0]
    assert unit["cut_list"]["line_key"] == "al_25"
    assert unit["summary"].startswith("1000 x 1000 mm slider")


def test_project_pdf(client):
    project = _create_project(client)
    client.post(f"/api/projects/{project['id']}/units", json={})
    response = client.get(f"/api/projects/{project['id']}/pdf")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "Quote-GZ-" in response.headers["content-disposition"]
    assert response.content[:4] == b"%PDF"


def test_update_and_delete_project(client):
    project = _create_project(client)
    response = client.patch(f"/api/projects/{project['id']}", json={"name": "Casa Este"})
    assert response.status_code == 200
    assert response.json()["name"] == "Casa Este"
    assert response.json()["client_name"] == "Ana Ruiz"

    assert client.delete(f"/api/projects/{project['id']}").status_code == 200
    assert client.get(f"/api/projects/{project['id']}").status_code == 404
