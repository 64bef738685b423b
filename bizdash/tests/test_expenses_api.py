import pytest

pytestmark = pytest.mark.integration


def test_expense_crud_and_total(auth_client):
    first = auth_client.post(
        "/api/expenses",
        json={"description": "Rent", "amount": 1200, "category": "Office", "expense_date": "2026-03-01"},
    )
    assert first.status_code == 201
    auth_client.post("/api/expenses", json={"description": "Coffee", "amount": 15.5, "expense_date": "2026-04-02"})

    listing = auth_client.get("/api/expenses").get_json()
    assert listing["total"] == 2
    assert listing["total_amount"] == 1215.5
    assert [e["description"] for e in listing["items"]] == ["Coffee", "Rent"]

    eid = first.get_json()["expense"]["id"]
    updated = auth_client.patch(f"/api/expenses/{eid}", json={"amount": 1100}).get_json()
    assert updated["expense"]["amount"] == 1100.0
    assert updated["expense"]["expense_date"] == "2026-03-01"

    assert auth_client.delete(f"/api/expenses/{eid}").status_code == 200
    assert auth_client.get("/api/expenses").get_json()["total_amount"] == 15.5


def test_expense_defaults_to_today(auth_client):
    from datetime import date

    expense = auth_client.post("/api/expenses", json={"description": "Misc", "amount": 1}).get_json()["expense"]
    assert expense["expense_date"] == date.today().isoformat()


def test_expense_validation(auth_client):
    assert auth_client.post("/api/expenses", json={"description": "", "amount": 1}).status_code == 400
    assert auth_client.post("/api/expenses", json={"description": "x", "amount": -2}).status_code == 400
    assert auth_client.get("/api/expenses/missing").status_code == 404


@pytest.mark.parametrize("amount", ["Infinity", "-Infinity", "NaN", "10000000000"])
def test_expense_amount_must_be_finite_and_in_range(auth_client, amount):
    body = '{"description": "Odd", "amount": %s}' % amount
    resp = auth_client.post("/api/expenses", data=body, content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"

    stats = auth_client.get("/api/dashboard").get_json()["stats"]
    assert stats["expenses"] == 0.0


def test_expense_patch_applies_create_rules(auth_client):
    eid = auth_client.post(
        "/api/expenses", json={"description": "Rent", "amount": 10, "category": "Office"}
    ).get_json()["expense"]["id"]

    assert auth_client.patch(f"/api/expenses/{eid}", json={"description": " "}).status_code == 400
    resp = auth_client.patch(f"/api/expenses/{eid}", data='{"amount": Infinity}', content_type="application/json")
    assert resp.status_code == 400

    expense = auth_client.patch(f"/api/expenses/{eid}", json={"category": ""}).get_json()["expense"]
    assert expense["category"] is None
    assert expense["description"] == "Rent"
    assert expense["amount"] == 10.0
