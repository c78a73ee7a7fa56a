def _post(client, workspace_id, name, parent_id=None):
    payload = {"workspaceId": workspace_id, "name": name}
    if parent_id is not None:
        payload["parentId"] = parent_id
    return client.post("/api/category/", json=payload)


def test_create_category(client, workspace_id):
    response = _post(client, workspace_id, "Hardware")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Hardware"
    assert (body["lft"], body["rgt"]) == (1, 2)


def test_create_category_with_unknown_parent_is_rejected(client, workspace_id):
    response = _post(client, workspace_id, "Child", "missing")

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid body"}


def test_create_category_missing_name_is_rejected(client, workspace_id):
    response = client.post("/api/category/", json={"workspaceId": workspace_id})

    assert response.status_code == 400


def test_tree_endpoints(client, workspace_id):
    root = _post(client, workspace_id, "Root").json()
    child = _post(client, workspace_id, "Child", root["id"]).json()

    descendants = client.get(f"/api/category/{root['id']}/descendants")
    ancestors = client.get(f"/api/category/{child['id']}/ancestors")

    assert descendants.status_code == 200
    assert [c["id"] for c in descendants.json()] == [child["id"]]
    assert [c["id"] for c in ancestors.json()] == [root["id"]]
    assert client.get("/api/category/missing/descendants").status_code == 404


def test_categories_by_workspace(client, workspace_id, category_id):
    response = client.get(f"/api/category/workspace/{workspace_id}")

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [category_id]
    assert client.get("/api/category/workspace/empty").status_code == 404


def test_update_and_delete_category(client, category_id):
    updated = client.put(
        f"/api/category/{category_id}", json={"description": "Bolts and nuts"})
    assert updated.status_code == 200
    assert updated.json()["description"] == "Bolts and nuts"

    assert client.delete(f"/api/category/{category_id}").status_code == 200
    assert client.get(f"/api/category/{category_id}").status_code == 404
    assert client.delete(f"/api/category/{category_id}").status_code == 404
