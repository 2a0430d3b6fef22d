from tests.conftest import auth_headers, make_lease, make_request, make_unit, make_user


def test_overview_metrics(client, landlord, tenant):
    unit = make_unit(landlord, unit_number="1A", status="occupied")
    make_unit(landlord, unit_number="1B", status="available")
    make_unit(landlord, unit_number="1C", status="maintenance")
    make_request(unit)
    make_request(unit, status="completed")

    resp = client.get("/api/units/overview", headers=auth_headers(landlord))

    assert resp.status_code == 200
    assert resp.get_json() == {
        "numberOfUnits": 3,
        "availableUnits": 1,
        "numberOfOccupiedUnits": 1,
        "numberOfMaintenanceRequests": 2,
    }


def test_available_units(client, landlord):
    make_unit(landlord, unit_number="1A", status="occupied")
    free = make_unit(landlord, unit_number="1B", status="available", rent_price="12500.50")

    resp = client.get("/api/units/available", headers=auth_headers(landlord))

    assert resp.get_json() == [
        {"id": free.id, "address": "123 Main St", "unit_number": "1B", "rent_price": 12500.5},
    ]


def test_units_table_data(client, landlord, folder_store, photo_root):
    landlord.user_contact_number = "+63 912 345 6789"
    unit = make_unit(
        landlord,
        amenities="wifi; parking",
        unit_photos=["/uploads/a.jpg"],
        description="Sunny studio",
    )

    resp = client.get("/api/units", headers=auth_headers(landlord))

    assert resp.status_code == 200
    [row] = resp.get_json()
    assert row["id"] == unit.id
    assert row["landlord"] == {
        "id": landlord.id,
        "user_name": "John Smith",
        "email": "landlord@example.com",
        "user_contact_number": "+63 912 345 6789",
    }
    assert row["amenities"] == ["wifi", "parking"]
    assert row["unit_photos"] == ["/uploads/a.jpg"]
    assert row["floor_area"] == 45.5
    assert row["rent_price"] == 15000.0
    assert row["description"] == "Sunny studio"
    assert row["created_at"].startswith(str(unit.created_at.year))


def test_units_table_forbidden_for_tenants(client, tenant):
    assert client.get("/api/units", headers=auth_headers(tenant)).status_code == 403


def test_listings_are_public(client, landlord, folder_store, photo_root):
    occupied = make_unit(landlord, unit_number="1A", status="occupied", amenities=["gym"])
    free = make_unit(landlord, unit_number="1B", status="available")
    folder = photo_root / "rental_units" / "b"
    folder.mkdir()
    (folder / "main.jpg").write_bytes(b"x")
    folder_store.set(free.id, "b")

    resp = client.get("/api/listings")

    assert resp.status_code == 200
    rows = {row["id"]: row for row in resp.get_json()}
    assert rows[occupied.id]["can_apply"] is False
    assert rows[occupied.id]["amenities"] == ["gym"]
    assert rows[occupied.id]["unit_photos"] == []
    assert rows[free.id]["can_apply"] is True
    assert rows[free.id]["unit_photos"] == ["/storage/rental_units/b/main.jpg"]
    assert "landlord_id" not in rows[free.id]


def test_listings_status_filter(client, landlord):
    make_unit(landlord, unit_number="1A", status="occupied")
    free = make_unit(landlord, unit_number="1B", status="available")

    resp = client.get("/api/listings?status=available")

    assert [row["id"] for row in resp.get_json()] == [free.id]


def test_apply_for_listing(client, landlord, tenant):
    unit = make_unit(landlord)

    resp = client.post(
        f"/api/listings/{unit.id}/applications",
        json={"message": "I'd like to view the unit."},
        headers=auth_headers(tenant),
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["unit_id"] == unit.id
    assert body["tenant_id"] == tenant.id
    assert body["application_status"] == "pending"

    again = client.post(f"/api/listings/{unit.id}/applications", json={}, headers=auth_headers(tenant))
    assert again.status_code == 409
    assert again.get_json()["error"] == "conflict"


def test_cannot_apply_for_occupied_unit(client, landlord, tenant):
    unit = make_unit(landlord, status="Occupied")

    resp = client.post(f"/api/listings/{unit.id}/applications", json={}, headers=auth_headers(tenant))

    assert resp.status_code == 409
    assert resp.get_json() == {"error": "conflict", "message": "Unit is occupied"}


def test_only_tenants_apply(client, landlord):
    unit = make_unit(landlord)
    resp = client.post(f"/api/listings/{unit.id}/applications", json={}, headers=auth_headers(landlord))
    assert resp.status_code == 403


def test_current_lease_prefers_latest_active(app, landlord, tenant, caplog):
    from datetime import date

    unit = make_unit(landlord, status="occupied")
    other = make_user("other@example.com")
    make_lease(unit, tenant, status="expired", start=date(2024, 1, 1), end=date(2024, 12, 31))
    make_lease(unit, tenant, status="active", start=date(2025, 1, 1), end=date(2025, 12, 31))
    latest = make_lease(unit, other, status="active", start=date(2026, 1, 1), end=date(2026, 12, 31))

    assert unit.current_lease.id == latest.id
    assert "has 2 active leases" in caplog.text


def test_application_rejects_non_object_body(client, landlord, tenant):
    unit = make_unit(landlord)

    resp = client.post(f"/api/listings/{unit.id}/applications", json=["hi"], headers=auth_headers(tenant))

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid payload"
