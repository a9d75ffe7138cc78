import pytest
from fastapi import status


def _day_off(client, employee_id, day, **amount):
    return client.post("/api/paid-days-off", json={"employee_id": employee_id, "date": day, **amount})


@pytest.fixture
def seeded(client, employee):
    _day_off(client, employee["id"], "2026-03-10", minutes=480, initial_hours_text="40:00")
    _day_off(client, employee["id"], "2026-05-02", hours_text="04:00")
    return employee


def test_yearly_balance_uses_stored_allowance(client, seeded):
    response = client.get(f"/api/paid-days-off/employee/{seeded['id']}/balance?year=2026")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "employee_id": seeded["id"],
        "year": 2026,
        "initial_minutes": 2400,
        "used_minutes": 720,
        "balance_minutes": 1680,
        "balance": "28:00",
    }


def test_year_defaults_to_current_year(client, seeded):
    data = client.get(f"/api/paid-days-off/employee/{seeded['id']}/balance").json()
    assert data["year"] == 2026
    assert data["balance_minutes"] == 1680


def test_allowance_override(client, seeded):
    data = client.get(f"/api/paid-days-off/employee/{seeded['id']}/balance?initial_hours=08:00").json()
    assert data["initial_minutes"] == 480
    assert data["balance"] == "-04:00"


def test_invalid_allowance_override(client, seeded):
    response = client.get(f"/api/paid-days-off/employee/{seeded['id']}/balance?initial_hours=eight")
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_other_years_are_ignored(client, seeded):
    _day_off(client, seeded["id"], "2025-12-30", minutes=60)
    _day_off(client, seeded["id"], "2025-12-31", minutes=120, year=2026)

    assert client.get(f"/api/paid-days-off/employee/{seeded['id']}/balance?year=2026").json()["used_minutes"] == 840
    last_year = client.get(f"/api/paid-days-off/employee/{seeded['id']}/balance?year=2025").json()
    assert last_year["initial_minutes"] == 0
    assert last_year["balance"] == "-01:00"


def test_latest_dated_allowance_wins(client, seeded):
    _day_off(client, seeded["id"], "2026-08-01", minutes=60, initial_minutes=3000)
    data = client.get(f"/api/paid-days-off/employee/{seeded['id']}/balance?year=2026").json()
    assert data["initial_minutes"] == 3000
    assert data["balance_minutes"] == 3000 - 780


def test_record_fields(client, employee):
    response = _day_off(client, employee["id"], "2026-10-30", hours_text="08:00")
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["minutes"] == 480
    assert data["hours"] == "08:00"
    assert data["year"] == 2026
    assert data["initial_minutes"] is None


@pytest.mark.parametrize("amount", [{"minutes": 0}, {"minutes": -30}, {"hours_text": "-01:00"}, {"hours_text": "00:00"}])
def test_amount_must_be_positive(client, employee, amount):
    response = _day_off(client, employee["id"], "2026-10-30", **amount)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_unknown_employee(client):
    assert _day_off(client, "ghost", "2026-10-30", minutes=60).status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/api/paid-days-off/employee/ghost/balance").status_code == status.HTTP_404_NOT_FOUND


def test_listing_and_delete(client, seeded):
    rows = client.get(f"/api/paid-days-off/employee/{seeded['id']}").json()
    assert [r["date"] for r in rows] == ["2026-05-02", "2026-03-10"]

    assert client.delete(f"/api/paid-days-off/{rows[0]['id']}").status_code == status.HTTP_200_OK
    assert client.delete(f"/api/paid-days-off/{rows[0]['id']}").status_code == status.HTTP_404_NOT_FOUND
    assert len(client.get("/api/paid-days-off").json()) == 1
