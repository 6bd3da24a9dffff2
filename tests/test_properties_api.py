# tests/test_properties_api.py

import uuid
from datetime import datetime, timedelta
from decimal import Decimal

from property_service.app.enum.properties_enum import PropertyStatus
from property_service.app.models import Task

PROPERTIES_URL = "/api/properties"

NEW_PROPERTY = {
    "name": "Sunset Apartments",
    "address": "123 Main Street, San Francisco, CA 94102",
    "ownerName": "John Smith",
    "monthlyRent": 2500,
    "status": "OCCUPIED",
}


def test_health(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_property(client) -> None:
    response = client.post(PROPERTIES_URL, json=NEW_PROPERTY)

    assert response.status_code == 201, response.text
    body = response.json()
    assert uuid.UUID(body["id"])
    assert body["name"] == "Sunset Apartments"
    assert body["ownerName"] == "John Smith"
    assert Decimal(body["monthlyRent"]) == Decimal("2500")
    assert body["status"] == "OCCUPIED"
    assert body["tasks"] == []
    assert body["createdAt"]


def test_create_property_rejects_rent_over_max(client) -> None:
    response = client.post(PROPERTIES_URL, json={**NEW_PROPERTY, "monthlyRent": 100000000.00})

    assert response.status_code == 422
    body = response.json()
    assert body["status"] == "Failure"
    assert any("monthly" in err["field"].lower() for err in body["data"])

    assert client.get(PROPERTIES_URL).json()["total"] == 0


def test_create_property_reports_every_bad_field(client) -> None:
    response = client.post(PROPERTIES_URL, json={"name": "ab", "monthlyRent": -1})

    assert response.status_code == 422
    fields = {err["field"] for err in response.json()["data"]}
    assert "name" in fields
    assert len(fields) >= 4


def test_list_properties_paginates(client, make_property) -> None:
    base = datetime(2024, 1, 1)
    for i in range(3):
        make_property(name=f"Property {i}", created_at=base + timedelta(hours=i))

    response = client.get(PROPERTIES_URL, params={"page": 1, "limit": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["limit"] == 2
    assert body["totalPages"] == 2
    assert [p["name"] for p in body["data"]] == ["Property 2", "Property 1"]


def test_list_properties_defaults(client) -> None:
    body = client.get(PROPERTIES_URL).json()

    assert body == {"data": [], "total": 0, "page": 1, "limit": 10, "totalPages": 0}


def test_list_properties_rejects_non_positive_page(client) -> None:
    assert client.get(PROPERTIES_URL, params={"page": 0}).status_code == 422
    assert client.get(PROPERTIES_URL, params={"limit": 0}).status_code == 422


def test_vacant_properties(client, make_property) -> None:
    vacant = make_property(name="Property A", status=PropertyStatus.VACANT)
    make_property(name="Property B", status=PropertyStatus.OCCUPIED)

    response = client.get(f"{PROPERTIES_URL}/vacant")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [str(vacant.id)]


def test_status_lookup(client) -> None:
    response = client.get(f"{PROPERTIES_URL}/status-lookup")

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == ["VACANT", "OCCUPIED", "MAINTENANCE"]


def test_get_property_with_tasks(client, make_property, make_task) -> None:
    prop = make_property()
    task = make_task(prop.id)

    response = client.get(f"{PROPERTIES_URL}/{prop.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == str(prop.id)
    assert [t["id"] for t in body["tasks"]] == [str(task.id)]
    assert body["tasks"][0]["assignedTo"] == "Maria Garcia"


def test_get_missing_property_returns_404(client) -> None:
    missing = uuid.uuid4()

    response = client.get(f"{PROPERTIES_URL}/{missing}")

    assert response.status_code == 404
    body = response.json()
    assert body["status"] == "Failure"
    assert body["message"] == f"Property with ID {missing} not found"


def test_get_property_with_malformed_id_returns_422(client) -> None:
    assert client.get(f"{PROPERTIES_URL}/not-a-uuid").status_code == 422


def test_patch_property_changes_only_sent_fields(client, make_property) -> None:
    prop = make_property(name="Old Name")

    response = client.patch(f"{PROPERTIES_URL}/{prop.id}", json={"status": "MAINTENANCE"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "MAINTENANCE"
    assert body["name"] == "Old Name"
    assert body["address"] == prop.address


def test_patch_property_validates_fields(client, make_property) -> None:
    prop = make_property()

    response = client.patch(f"{PROPERTIES_URL}/{prop.id}", json={"name": "ab"})

    assert response.status_code == 422


def test_patch_missing_property_returns_404(client) -> None:
    response = client.patch(f"{PROPERTIES_URL}/{uuid.uuid4()}", json={"name": "Whatever"})

    assert response.status_code == 404


def test_delete_property_cascades(client, db, make_property, make_task) -> None:
    prop = make_property()
    make_task(prop.id)
    make_task(prop.id)
    prop_id = prop.id

    response = client.delete(f"{PROPERTIES_URL}/{prop_id}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"{PROPERTIES_URL}/{prop_id}").status_code == 404
    db.expire_all()
    assert db.query(Task).filter(Task.property_id == prop_id).count() == 0


def test_delete_missing_property_returns_404(client) -> None:
    assert client.delete(f"{PROPERTIES_URL}/{uuid.uuid4()}").status_code == 404


def test_property_tasks_endpoint(client, make_property, make_task) -> None:
    prop = make_property()
    make_task(prop.id, due_date=datetime(2024, 12, 20))
    make_task(prop.id, due_date=datetime(2024, 12, 1))

    response = client.get(f"{PROPERTIES_URL}/{prop.id}/tasks")

    assert response.status_code == 200
    assert [t["dueDate"][:10] for t in response.json()] == ["2024-12-01", "2024-12-20"]


def test_property_tasks_for_missing_property_returns_404(client) -> None:
    assert client.get(f"{PROPERTIES_URL}/{uuid.uuid4()}/tasks").status_code == 404


def test_patch_property_rejects_blank_text(client, make_property) -> None:
    prop = make_property(name="Old Name")

    response = client.patch(f"{PROPERTIES_URL}/{prop.id}", json={"name": "", "ownerName": "   "})

    assert response.status_code == 422
    fields = {err["field"] for err in response.json()["data"]}
    assert {"name", "ownerName"} <= fields
    assert client.get(f"{PROPERTIES_URL}/{prop.id}").json()["name"] == "Old Name"


def test_patch_property_ignores_explicit_null(client, make_property) -> None:
    prop = make_property(name="Old Name")

    response = client.patch(f"{PROPERTIES_URL}/{prop.id}", json={"name": None, "status": "OCCUPIED"})

    assert response.status_code == 200
    assert response.json()["name"] == "Old Name"
    assert response.json()["status"] == "OCCUPIED"


def test_timestamps_carry_utc_offset(client) -> None:
    body = client.post(PROPERTIES_URL, json=NEW_PROPERTY).json()

    assert body["createdAt"].endswith(("Z", "+00:00"))


def test_properties_created_in_quick_succession_list_newest_first(client) -> None:
    for i in range(3):
        response = client.post(PROPERTIES_URL, json={**NEW_PROPERTY, "name": f"Rapid {i}"})
        assert response.status_code == 201

    names = [p["name"] for p in client.get(PROPERTIES_URL).json()["data"]]

    assert names == ["Rapid 2", "Rapid 1", "Rapid 0"]
