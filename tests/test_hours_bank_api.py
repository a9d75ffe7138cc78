import pytest
from fastapi import status


def _entry(client, employee_id, **amount):
    return client.post("/api/hours-bank", json={"employee_id": employee_id, "month": 5, "year": 2026, **amount})


def test_balance_sums_signed_entries(client, employee):
    for text in ("08:00", "-02:00", "01:00"):
        assert _entry(client, employee["id"], hours_text=text).status_code == status.HTTP_201_CREATED

    response = client.get(f"/api/hours-bank/employee/{employee['id']}/balance")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "employee_id": employee["id"],
        "entries": 3,
        "balance_minutes": 420,
        "balance": "07:00",
    }


def test_entry_reports_formatted_hours(client, employee):
    response = _entry(client, employee["id"], minutes=-135, description="Left early")
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["minutes"] == -135
    assert data["hours"] == "-02:15"
    assert data["description"] == "Left early"


@pytest.mark.parametrize("text", ["8h", "08:60", "123:00", "8:5", ""])
def test_malformed_hours_text_is_rejected(client, employee, text):
    response = _entry(client, employee["id"], hours_text=text)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["code"] == "VALIDATION_ERROR"


def test_amount_must_be_given_exactly_once(client, employee):
    assert _entry(client, employee["id"]).status_code == 422
    assert _entry(client, employee["id"], minutes=30, hours_text="00:30").status_code == 422


def test_month_out_of_range(client, employee):
    response = client.post(
        "/api/hours-bank", json={"employee_id": employee["id"], "month": 13, "year": 2026, "minutes": 10}
    )
    assert response.status_code == 422


def test_unknown_employee(client):
    assert _entry(client, "ghost", minutes=10).status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/api/hours-bank/employee/ghost/balance").status_code == status.HTTP_404_NOT_FOUND


def test_listing_is_newest_first(client, employee):
    for month, year in ((1, 2026), (11, 2025), (4, 2026)):
        client.post(
            "/api/hours-bank", json={"employee_id": employee["id"], "month": month, "year": year, "minutes": 1}
        )
    rows = client.get(f"/api/hours-bank/employee/{employee['id']}").json()
    assert [(r["year"], r["month"]) for r in rows] == [(2026, 4), (2026, 1), (2025, 11)]


def test_delete_entry(client, employee):
    entry = _entry(client, employee["id"], minutes=60).json()
    assert client.delete(f"/api/hours-bank/{entry['id']}").status_code == status.HTTP_200_OK
    assert client.get(f"/api/hours-bank/employee/{employee['id']}/balance").json()["balance_minutes"] == 0
