import pytest


@pytest.fixture
def item_payload(workspace_id, category_id, type_id, location_id):
    return {
        "workspaceId": workspace_id,
        "categoryId": category_id,
        "typeId": type_id,
        "locationId": location_id,
        "name": "Cordless drill",
        "description": "18V",
        "quantity": 4,
        "wholesalePrice": 80.0,
        "retailPrice": 129.99,
        "indicativeWholesalePrice": 75.0,
        "indicativeRetailPrice": 119.99,
        "width": 20.0,
        "height": 25.0,
        "depth": 8.0,
        "weight": 1.6,
        "forSale": True,
        "barcode": "0123456789012",
        "serialNumber": "SN-001",
    }


def test_create_item_round_trip(client, item_payload):
    created = client.post("/api/item/", json=item_payload)
    assert created.status_code == 200

    response = client.get(f"/api/item/{created.json()['id']}")

    assert response.status_code == 200
    body = response.json()
    for key, value in item_payload.items():
        assert body[key] == value


def test_location_is_optional(client, item_payload):
    del item_payload["locationId"]

    response = client.post("/api/item/", json=item_payload)

    assert response.status_code == 200
    assert response.json()["locationId"] is None


@pytest.mark.parametrize("missing", ["quantity", "forSale", "typeId", "categoryId"])
def test_required_fields(client, item_payload, missing):
    del item_payload[missing]

    response = client.post("/api/item/", json=item_payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid body"}


def test_unknown_category_is_server_error(client, item_payload):
    item_payload["categoryId"] = "missing"

    response = client.post("/api/item/", json=item_payload)

    assert response.status_code == 500
    assert "error" in response.json()


def test_items_by_workspace(client, item_payload, workspace_id):
    assert client.get(f"/api/item/workspace/{workspace_id}").status_code == 404

    item_id = client.post("/api/item/", json=item_payload).json()["id"]
    response = client.get(f"/api/item/workspace/{workspace_id}")

    assert response.status_code == 200
    assert [i["id"] for i in response.json()] == [item_id]


def test_update_item(client, item_payload):
    item_id = client.post("/api/item/", json=item_payload).json()["id"]

    response = client.put(f"/api/item/{item_id}",
                          json={"quantity": 10, "forSale": False})

    assert response.status_code == 200
    fetched = client.get(f"/api/item/{item_id}").json()
    assert fetched["quantity"] == 10
    assert fetched["forSale"] is False
    assert fetched["name"] == "Cordless drill"


def test_delete_item(client, item_payload):
    item_id = client.post("/api/item/", json=item_payload).json()["id"]

    assert client.delete(f"/api/item/{item_id}").status_code == 200
    assert client.get(f"/api/item/{item_id}").status_code == 404
    assert client.delete(f"/api/item/{item_id}").status_code == 404


def test_type_in_use_cannot_be_deleted(client, item_payload, type_id):
    client.post("/api/item/", json=item_payload)

    response = client.delete(f"/api/type/{type_id}")

    assert response.status_code == 500
    assert client.get(f"/api/type/{type_id}").status_code == 200


@pytest.mark.parametrize("field", ["quantity", "forSale", "name", "categoryId"])
def test_update_cannot_null_required_fields(client, item_payload, field):
    item_id = client.post("/api/item/", json=item_payload).json()["id"]

    response = client.put(f"/api/item/{item_id}", json={field: None})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid body"}


def test_update_can_clear_location(client, item_payload):
    item_id = client.post("/api/item/", json=item_payload).json()["id"]

    response = client.put(f"/api/item/{item_id}", json={"locationId": None})

    assert response.status_code == 200
    assert response.json()["locationId"] is None
