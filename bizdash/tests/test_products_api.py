import pytest

pytestmark = pytest.mark.integration


def _product(client, name, stock, price=10.0, **extra):
    resp = client.post("/api/products", json={"name": name, "price": price, "stock_quantity": stock, **extra})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()["product"]


def test_product_crud(auth_client):
    product = _product(auth_client, "Widget", 25, price=19.999, category="Hardware", sku="W-1")
    assert product["price"] == 20.0
    pid = product["id"]

    resp = auth_client.patch(f"/api/products/{pid}", json={"stock_quantity": 3, "category": "Tools"})
    assert resp.get_json()["product"]["stock_quantity"] == 3
    assert resp.get_json()["product"]["category"] == "Tools"

    assert auth_client.delete(f"/api/products/{pid}").status_code == 200
    assert auth_client.get(f"/api/products/{pid}").status_code == 404


def test_product_rejects_negative_values(auth_client):
    resp = auth_client.post("/api/products", json={"name": "Bad", "price": -1, "stock_quantity": 1})
    assert resp.status_code == 400
    resp = auth_client.post("/api/products", json={"name": "Bad", "price": 1, "stock_quantity": -5})
    assert resp.status_code == 400


def test_low_stock_uses_threshold(auth_client):
    _product(auth_client, "Plenty", 50)
    _product(auth_client, "Edge", 10)
    _product(auth_client, "Scarce", 2)
    _product(auth_client, "Empty", 0)

    data = auth_client.get("/api/products/low-stock").get_json()
    assert data["threshold"] == 10
    assert [p["name"] for p in data["items"]] == ["Empty", "Scarce"]

    wider = auth_client.get("/api/products/low-stock?threshold=11").get_json()
    assert [p["name"] for p in wider["items"]] == ["Empty", "Scarce", "Edge"]


@pytest.mark.parametrize("price", ["Infinity", "NaN", "1e13"])
def test_product_price_must_fit_money_column(auth_client, price):
    body = '{"name": "Odd", "stock_quantity": 1, "price": %s}' % price
    resp = auth_client.post("/api/products", data=body, content_type="application/json")
    assert resp.status_code == 400
    assert auth_client.get("/api/products").get_json()["total"] == 0


def test_product_patch_applies_create_rules(auth_client):
    pid = _product(auth_client, "Widget", 5, sku="W-1", category="Tools")["id"]

    assert auth_client.patch(f"/api/products/{pid}", json={"name": "  "}).status_code == 400
    resp = auth_client.patch(
        f"/api/products/{pid}", data='{"price": Infinity}', content_type="application/json"
    )
    assert resp.status_code == 400

    product = auth_client.patch(f"/api/products/{pid}", json={"sku": "", "category": "  "}).get_json()["product"]
    assert product["sku"] is None
    assert product["category"] is None
    assert product["name"] == "Widget"
