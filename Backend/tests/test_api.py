"""End-to-end checks through the FastAPI app with an overridden session."""

import pytest


@pytest.fixture
def shelf(pharmacy, make_stock):
    return {
        "paracetamol": make_stock(pharmacy.id, "Paracetamol", "500mg", price=500, quantity=10),
        "azithromycin": make_stock(
            pharmacy.id, "Azithromycin", "suspension", price=3000, quantity=2, requires_prescription=True
        ),
    }


def _order(client, headers, pharmacy_id="ph-test", **item):
    item.setdefault("quantity", 1)
    return client.post("/orders/", json={"pharmacy_id": pharmacy_id, "items": [item]}, headers=headers)


class TestHealthAndAuth:
    def test_health(self, client):
        assert client.get("/").json()["status"] == "ok"

    def test_register_then_login(self, client):
        res = client.post(
            "/auth/register",
            json={"email": "Bob@Example.com", "password": "hunter22", "name": "Bob"},
        )
        assert res.status_code == 201
        assert res.json()["role"] == "customer"

        res = client.post("/auth/login", json={"email": "bob@example.com", "password": "hunter22"})
        assert res.status_code == 200
        assert res.json()["access_token"]

    def test_duplicate_registration(self, client, customer):
        res = client.post("/auth/register", json={"email": customer.email, "password": "secret123"})
        assert res.status_code == 409
        assert res.json() == {"error": "Conflict", "message": "Email already registered"}

    def test_bad_login(self, client, customer):
        res = client.post("/auth/login", json={"email": customer.email, "password": "wrong-one"})
        assert res.status_code == 401


class TestPharmacyRoutes:
    def test_search_and_detail(self, client, shelf):
        res = client.get("/pharmacies/", params={"q": "paracetamol"})
        assert [p["id"] for p in res.json()] == ["ph-test"]

        detail = client.get("/pharmacies/ph-test").json()
        assert {s["name"] for s in detail["stocks"]} == {"Paracetamol", "Azithromycin"}

    def test_unknown_pharmacy(self, client):
        res = client.get("/pharmacies/ph-missing")
        assert res.status_code == 404
        assert res.json() == {"error": "Not found", "message": "Pharmacy not found"}


class TestOrderRoutes:
    def test_requires_login(self, client, shelf):
        assert _order(client, {}, name="Paracetamol").status_code == 401

    def test_place_order(self, client, customer_headers, shelf):
        res = _order(client, customer_headers, name="Paracetamol 500mg", quantity=5)
        assert res.status_code == 201
        body = res.json()
        assert body["total_rwf"] == 2500
        assert body["prescription_status"] is None
        assert body["id"].startswith("ORD-")

        mine = client.get("/orders/", headers=customer_headers).json()
        assert [o["id"] for o in mine] == [body["id"]]
        assert mine[0]["customer_name"] == "Alice"
        assert mine[0]["pharmacy"]["name"] == "Test Pharmacy"
        assert mine[0]["items"][0]["line_total"] == 2500

    def test_prescription_order_is_pending(self, client, customer_headers, shelf):
        res = _order(client, customer_headers, name="Azithromycin (suspension)")
        assert res.json()["prescription_status"] == "pending"

    def test_unknown_item(self, client, customer_headers, shelf):
        res = _order(client, customer_headers, name="Unobtainium")
        assert res.status_code == 400
        assert res.json()["error"] == "Invalid item"
        assert "Unobtainium" in res.json()["message"]

    def test_insufficient_stock(self, client, customer_headers, shelf):
        res = _order(client, customer_headers, name="Paracetamol", quantity=11)
        assert res.status_code == 400
        assert res.json() == {"error": "Insufficient stock", "message": "Only 10 available for Paracetamol"}

    def test_unknown_pharmacy(self, client, customer_headers, shelf):
        res = _order(client, customer_headers, pharmacy_id="ph-missing", name="Paracetamol")
        assert res.status_code == 404

    def test_zero_quantity_is_rejected(self, client, customer_headers, shelf):
        res = _order(client, customer_headers, name="Paracetamol", quantity=0)
        assert res.status_code == 400
        body = res.json()
        assert body["error"] == "Validation error"
        assert "quantity" in body["message"]

    def test_malformed_body_uses_error_envelope(self, client, customer_headers):
        res = client.post("/orders/", json={"items": []}, headers=customer_headers)
        assert res.status_code == 400
        assert set(res.json()) == {"error", "message"}

    def test_upload_prescription(self, client, customer_headers):
        res = client.post(
            "/orders/prescriptions",
            files={"file": ("rx.png", b"\x89PNG\r\n", "image/png")},
            headers=customer_headers,
        )
        assert res.status_code == 201
        assert res.json()["prescription_file"].startswith("/uploads/prescriptions/")

        res = client.post(
            "/orders/prescriptions",
            files={"file": ("rx.exe", b"MZ", "application/octet-stream")},
            headers=customer_headers,
        )
        assert res.status_code == 400


class TestDashboard:
    def test_customers_are_forbidden(self, client, customer_headers):
        res = client.get("/dashboard/stock", headers=customer_headers)
        assert res.status_code == 403
        assert res.json() == {"error": "Forbidden", "message": "Pharmacy access required"}

    def test_missing_token_keeps_bearer_challenge(self, client):
        res = client.get("/dashboard/stock")
        assert res.status_code == 401
        assert res.headers["www-authenticate"] == "Bearer"
        assert res.json()["error"] == "Unauthorized"

    def test_stock_crud(self, client, pharmacy_headers, shelf):
        rows = client.get("/dashboard/stock", headers=pharmacy_headers).json()
        assert [r["name"] for r in rows] == ["Azithromycin", "Paracetamol"]

        medicine_id = shelf["paracetamol"].medicine_id
        res = client.post(
            "/dashboard/stock",
            json={"medicine_id": medicine_id, "quantity": 1, "price_rwf": 1},
            headers=pharmacy_headers,
        )
        assert res.status_code == 409
        assert res.json() == {"error": "Conflict", "message": "Stock already exists for this medicine"}
        assert client.get("/dashboard/stock", headers=pharmacy_headers).json() == rows

        res = client.put(
            f"/dashboard/stock/{medicine_id}",
            json={"quantity": 20, "price_rwf": 550},
            headers=pharmacy_headers,
        )
        updated = {r["medicine_id"]: r for r in res.json()}[medicine_id]
        assert (updated["quantity"], updated["price_rwf"]) == (20, 550)

        res = client.delete(f"/dashboard/stock/{medicine_id}", headers=pharmacy_headers)
        assert [r["name"] for r in res.json()] == ["Azithromycin"]

    def test_order_status_is_scoped(self, client, customer_headers, pharmacy_headers, other_pharmacy_headers, shelf):
        order_id = _order(client, customer_headers, name="Azithromycin").json()["id"]

        res = client.put(
            f"/dashboard/orders/{order_id}/status", json={"status": "cancelled"}, headers=other_pharmacy_headers
        )
        assert res.status_code == 404
        assert client.get(f"/dashboard/orders/{order_id}", headers=pharmacy_headers).json()["status"] == "pending"

        res = client.put(f"/dashboard/orders/{order_id}/status", json={"status": "ready"}, headers=pharmacy_headers)
        assert res.status_code == 200
        assert res.json()[0]["status"] == "ready"

        res = client.put(
            f"/dashboard/orders/{order_id}/prescription",
            json={"prescription_status": "approved"},
            headers=pharmacy_headers,
        )
        assert res.json()[0]["prescription_status"] == "approved"

        listed = client.get("/dashboard/orders", params={"status": "ready"}, headers=pharmacy_headers).json()
        assert [o["id"] for o in listed] == [order_id]

    def test_insurance_partners(self, client, pharmacy_headers, insurance_types):
        britam = insurance_types[0]
        available = client.get("/dashboard/insurance/available", headers=pharmacy_headers).json()
        assert len(available) == 3

        res = client.post("/dashboard/insurance", json={"insurance_id": britam.id}, headers=pharmacy_headers)
        assert [i["name"] for i in res.json()] == ["Britam"]
        res = client.post("/dashboard/insurance", json={"insurance_id": britam.id}, headers=pharmacy_headers)
        assert res.status_code == 409
        assert res.json() == {"error": "Conflict", "message": "Insurance partner already added"}

        res = client.delete(f"/dashboard/insurance/{britam.id}", headers=pharmacy_headers)
        assert res.json() == []
