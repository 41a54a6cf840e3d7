import pytest

from repositories import stores

FARM = {"name": "North field", "location": "Nakuru", "size": 12.5, "farmType": "Crop"}
CROP = {"name": "Maize", "quantity": 300, "plantingDate": "2026-03-01T00:00:00"}
HERD = {"type": "Cattle", "count": 8}
EMPLOYEE = {"firstName": "Jo", "lastName": "Otieno", "position": "Herder", "salary": 12000}

# route prefix, envelope key, id field, create body, update body
CHILD_KINDS = [
    ("/api/crops", "crop", "cropId", CROP, {"status": "Harvested"}),
    ("/api/livestock", "livestock", "livestockId", HERD, {"healthStatus": "Sick"}),
    ("/api/employees", "employee", "employeeId", EMPLOYEE, {"position": "Manager"}),
]


@pytest.fixture
def owner(auth_headers):
    return auth_headers("a@x.com")


@pytest.fixture
def intruder(auth_headers):
    return auth_headers("b@x.com")


@pytest.fixture
def farm_id(client, owner):
    resp = client.post("/api/farms/", headers=owner, json=FARM)
    assert resp.status_code == 201, resp.text
    return resp.json()["farm"]["farmId"]


def _create_child(client, headers, farm_id, prefix, key, body):
    resp = client.post(f"{prefix}/", headers=headers, params={"farmId": farm_id}, json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()[key]


# -- farms --------------------------------------------------------------------


def test_farm_crud_for_owner(client, owner):
    created = client.post("/api/farms/", headers=owner, json=FARM)
    assert created.status_code == 201
    farm = created.json()["farm"]
    assert farm["name"] == "North field"
    assert farm["farmType"] == "Crop"
    assert farm["status"] == "Active"

    listed = client.get("/api/farms/", headers=owner).json()["farms"]
    assert [f["farmId"] for f in listed] == [farm["farmId"]]

    updated = client.put(f"/api/farms/{farm['farmId']}", headers=owner, json={"size": 20})
    assert updated.status_code == 200
    assert updated.json()["farm"]["size"] == 20
    assert updated.json()["farm"]["name"] == "North field"

    assert client.delete(f"/api/farms/{farm['farmId']}", headers=owner).status_code == 200
    assert client.get(f"/api/farms/{farm['farmId']}", headers=owner).status_code == 404
    assert client.get("/api/farms/", headers=owner).json()["farms"] == []


def test_farm_owner_comes_from_token_not_body(client, owner, db):
    resp = client.post("/api/farms/", headers=owner, json={**FARM, "userId": "someone-else"})

    assert resp.status_code == 201
    me = stores.accounts.get_by_identity(db, "a@x.com")
    assert resp.json()["farm"]["userId"] == me.user_id


def test_farm_list_only_shows_own_farms(client, owner, intruder, farm_id):
    client.post("/api/farms/", headers=intruder, json={**FARM, "name": "South field"})

    mine = client.get("/api/farms/", headers=owner).json()["farms"]
    theirs = client.get("/api/farms/", headers=intruder).json()["farms"]

    assert [f["farmId"] for f in mine] == [farm_id]
    assert [f["name"] for f in theirs] == ["South field"]


@pytest.mark.parametrize("size", [0, -3])
def test_farm_size_must_be_positive(client, owner, size):
    resp = client.post("/api/farms/", headers=owner, json={**FARM, "size": size})

    assert resp.status_code == 422


def test_farm_routes_require_token(client):
    assert client.get("/api/farms/").status_code == 401
    assert client.post("/api/farms/", json=FARM).status_code == 401


# -- child resources ----------------------------------------------------------


@pytest.mark.parametrize("prefix, key, id_field, body, patch", CHILD_KINDS, ids=["crop", "livestock", "employee"])
def test_child_crud_for_owner(client, owner, farm_id, prefix, key, id_field, body, patch):
    item = _create_child(client, owner, farm_id, prefix, key, body)
    item_id = item[id_field]
    assert item["farmId"] == farm_id

    listed = client.get(f"{prefix}/", headers=owner, params={"farmId": farm_id})
    assert listed.status_code == 200
    assert [row[id_field] for row in listed.json()[f"{key}s"]] == [item_id]

    fetched = client.get(f"{prefix}/{item_id}", headers=owner)
    assert fetched.status_code == 200
    assert fetched.json()[key][id_field] == item_id

    updated = client.put(f"{prefix}/{item_id}", headers=owner, json=patch)
    assert updated.status_code == 200
    for field, value in patch.items():
        assert updated.json()[key][field] == value

    assert client.delete(f"{prefix}/{item_id}", headers=owner).status_code == 200
    gone = client.get(f"{prefix}/{item_id}", headers=owner)
    assert gone.status_code == 404
    assert gone.json()["detail"] == f"{key} not found"


def test_list_requires_farm_id(client, owner):
    assert client.get("/api/crops/", headers=owner).status_code == 422


def test_create_under_unknown_farm_is_not_found(client, owner):
    resp = client.post(
        "/api/crops/",
        headers=owner,
        params={"farmId": "00000000-0000-0000-0000-000000000000"},
        json=CROP,
    )

    assert resp.status_code == 404
    assert resp.json()["detail"] == "farm not found"


def test_children_of_deleted_farm_are_forbidden(client, owner, farm_id):
    crop = _create_child(client, owner, farm_id, "/api/crops", "crop", CROP)
    client.delete(f"/api/farms/{farm_id}", headers=owner)

    resp = client.get(f"/api/crops/{crop['cropId']}", headers=owner)

    assert resp.status_code == 403


def test_livestock_count_must_be_positive(client, owner, farm_id):
    resp = client.post(
        "/api/livestock/", headers=owner, params={"farmId": farm_id}, json={**HERD, "count": 0}
    )

    assert resp.status_code == 422


# -- employees: linked accounts -----------------------------------------------


def test_employee_can_link_an_existing_account(client, owner, farm_id, auth_headers, db):
    auth_headers("worker@x.com")
    worker = stores.accounts.get_by_identity(db, "worker@x.com")

    item = _create_child(
        client, owner, farm_id, "/api/employees", "employee", {**EMPLOYEE, "userId": worker.user_id}
    )
    assert item["userId"] == worker.user_id

    unlinked = client.put(f"/api/employees/{item['employeeId']}", headers=owner, json={"userId": ""})
    assert unlinked.status_code == 200
    assert unlinked.json()["employee"]["userId"] is None


def test_employee_with_unknown_linked_account_is_rejected(client, owner, farm_id):
    resp = client.post(
        "/api/employees/",
        headers=owner,
        params={"farmId": farm_id},
        json={**EMPLOYEE, "userId": "no-such-user"},
    )

    assert resp.status_code == 400
    assert resp.json()["detail"] == "linked user not found"


def test_linked_employee_cannot_read_the_farm(client, owner, farm_id, auth_headers, db):
    worker_headers = auth_headers("worker@x.com")
    worker = stores.accounts.get_by_identity(db, "worker@x.com")
    item = _create_child(
        client, owner, farm_id, "/api/employees", "employee", {**EMPLOYEE, "userId": worker.user_id}
    )

    assert client.get(f"/api/farms/{farm_id}", headers=worker_headers).status_code == 403
    assert client.get(f"/api/employees/{item['employeeId']}", headers=worker_headers).status_code == 403


# -- cross-tenant isolation ---------------------------------------------------


def test_other_account_cannot_touch_farm(client, owner, intruder, farm_id):
    assert client.get(f"/api/farms/{farm_id}", headers=intruder).status_code == 403
    assert client.put(f"/api/farms/{farm_id}", headers=intruder, json={"name": "Mine"}).status_code == 403
    assert client.delete(f"/api/farms/{farm_id}", headers=intruder).status_code == 403

    # Nothing changed for the owner
    farm = client.get(f"/api/farms/{farm_id}", headers=owner).json()["farm"]
    assert farm["name"] == "North field"


@pytest.mark.parametrize("prefix, key, id_field, body, patch", CHILD_KINDS, ids=["crop", "livestock", "employee"])
def test_other_account_cannot_touch_children(
    client, owner, intruder, farm_id, prefix, key, id_field, body, patch
):
    item_id = _create_child(client, owner, farm_id, prefix, key, body)[id_field]

    assert client.get(f"{prefix}/{item_id}", headers=intruder).status_code == 403
    assert client.put(f"{prefix}/{item_id}", headers=intruder, json=patch).status_code == 403
    assert client.delete(f"{prefix}/{item_id}", headers=intruder).status_code == 403
    assert client.get(f"{prefix}/", headers=intruder, params={"farmId": farm_id}).status_code == 403
    create = client.post(f"{prefix}/", headers=intruder, params={"farmId": farm_id}, json=body)
    assert create.status_code == 403

    # Owner still sees exactly one untouched item
    rows = client.get(f"{prefix}/", headers=owner, params={"farmId": farm_id}).json()[f"{key}s"]
    assert [row[id_field] for row in rows] == [item_id]


# -- partial updates ----------------------------------------------------------


def test_explicit_null_clears_nullable_fields_only(client, owner, farm_id):
    crop = _create_child(
        client, owner, farm_id, "/api/crops", "crop", {**CROP, "notes": "irrigate weekly"}
    )

    resp = client.put(
        f"/api/crops/{crop['cropId']}",
        headers=owner,
        json={"notes": None, "plantingDate": None, "name": None},
    )

    assert resp.status_code == 200
    updated = resp.json()["crop"]
    assert updated["notes"] is None
    assert updated["plantingDate"] is None
    assert updated["name"] == "Maize"


def test_omitted_fields_are_left_alone(client, owner):
    farm = client.post(
        "/api/farms/", headers=owner, json={**FARM, "description": "Rift valley plot"}
    ).json()["farm"]

    kept = client.put(f"/api/farms/{farm['farmId']}", headers=owner, json={"size": 3})
    cleared = client.put(f"/api/farms/{farm['farmId']}", headers=owner, json={"description": None})

    assert kept.json()["farm"]["description"] == "Rift valley plot"
    assert cleared.json()["farm"]["description"] is None
    assert cleared.json()["farm"]["size"] == 3


def test_employee_null_user_id_unlinks(client, owner, farm_id, auth_headers, db):
    auth_headers("worker@x.com")
    worker = stores.accounts.get_by_identity(db, "worker@x.com")
    item = _create_child(
        client, owner, farm_id, "/api/employees", "employee", {**EMPLOYEE, "userId": worker.user_id}
    )

    resp = client.put(
        f"/api/employees/{item['employeeId']}", headers=owner, json={"userId": None, "salary": None}
    )

    assert resp.status_code == 200
    assert resp.json()["employee"]["userId"] is None
    assert resp.json()["employee"]["salary"] is None
    assert resp.json()["employee"]["position"] == "Herder"
