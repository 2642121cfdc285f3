"""
============================================================================
Integration Test - HTTP gateway
============================================================================

Runs the FastAPI app through TestClient with the query components pointed at
the per-test SQLite store via dependency overrides.
============================================================================
"""

import pytest
from fastapi.testclient import TestClient

from orderbook.errors import StoreFailure
from orderbook.main import create_app
from orderbook.queries import (
    DashboardQueries,
    OrderProductQueries,
    OrderQueries,
    OrderStatusQueries,
    UserQueries,
)
from orderbook.routers import deps

BASE = "/api/v1/gateway"


@pytest.fixture
def app(session_factory):
    app = create_app()
    app.dependency_overrides[deps.get_order_product_queries] = lambda: OrderProductQueries(session_factory)
    app.dependency_overrides[deps.get_order_queries] = lambda: OrderQueries(session_factory)
    app.dependency_overrides[deps.get_order_status_queries] = lambda: OrderStatusQueries(session_factory)
    app.dependency_overrides[deps.get_user_queries] = lambda: UserQueries(session_factory)
    app.dependency_overrides[deps.get_dashboard_queries] = lambda: DashboardQueries(session_factory)
    return app


@pytest.fixture
def client(app):
    # no context manager: the lifespan would open the configured database
    return TestClient(app)


# =============================================================================
# Line items
# =============================================================================

def test_example_scenario(client, order_id):
    r = client.post(f"{BASE}/orders/{order_id}/products/", json={"product_id": "prod-A", "quantity": 2})
    assert r.status_code == 201
    body = r.json()
    assert (body["order_id"], body["product_id"], body["quantity"]) == (order_id, "prod-A", 2)

    r = client.put(f"{BASE}/orders/{order_id}/status", json={"is_done": True})
    assert r.status_code == 200
    assert r.json()["is_done"] is True

    r = client.put(f"{BASE}/orders/{order_id}/products/prod-A", json={"quantity": 10})
    assert r.status_code == 409

    r = client.get(f"{BASE}/orders/{order_id}/products/prod-A")
    assert r.status_code == 200
    assert r.json()["quantity"] == 2


def test_line_item_round_trip(client, order_id):
    url = f"{BASE}/orders/{order_id}/products/"
    assert client.post(url, json={"product_id": "prod-A", "quantity": 3}).status_code == 201
    assert client.post(url, json={"product_id": "prod-B", "quantity": 1}).status_code == 201

    r = client.get(url)
    assert [it["product_id"] for it in r.json()] == ["prod-A", "prod-B"]

    r = client.put(f"{url}prod-A", json={"quantity": 5})
    assert r.json()["quantity"] == 5

    r = client.delete(f"{url}prod-A")
    assert r.status_code == 200
    assert r.json()["quantity"] == 5

    assert client.get(f"{url}prod-A").status_code == 404
    assert client.delete(f"{url}prod-A").status_code == 404


def test_duplicate_line_item_is_conflict(client, order_id):
    url = f"{BASE}/orders/{order_id}/products/"
    client.post(url, json={"product_id": "prod-A", "quantity": 1})
    r = client.post(url, json={"product_id": "prod-A", "quantity": 1})
    assert r.status_code == 409


def test_missing_order_is_not_found(client):
    r = client.post(f"{BASE}/orders/nope/products/", json={"product_id": "prod-A", "quantity": 1})
    assert r.status_code == 404
    assert client.get(f"{BASE}/orders/nope/status").status_code == 404


def test_quantity_must_be_positive(client, order_id):
    r = client.post(f"{BASE}/orders/{order_id}/products/", json={"product_id": "prod-A", "quantity": 0})
    assert r.status_code == 422


def test_store_failure_is_service_unavailable(app, client, order_id):
    class BrokenLedger:
        def show_all_products(self, order_id):
            raise StoreFailure("connection refused")

    app.dependency_overrides[deps.get_order_product_queries] = lambda: BrokenLedger()
    r = client.get(f"{BASE}/orders/{order_id}/products/")
    assert r.status_code == 503


# =============================================================================
# Orders
# =============================================================================

def test_order_lifecycle(client, user_id):
    r = client.post(f"{BASE}/orders/", json={"user_id": user_id, "id": "order-2"})
    assert r.status_code == 201
    assert r.json()["is_done"] is False

    assert client.get(f"{BASE}/orders/order-2/status").json() == {"order_id": "order-2", "is_done": False}
    assert {o["id"] for o in client.get(f"{BASE}/orders/").json()} == {"order-1", "order-2"}

    assert client.put(f"{BASE}/orders/order-2/status", json={"is_done": True}).status_code == 200
    assert client.put(f"{BASE}/orders/order-2/status", json={"is_done": False}).status_code == 409
    assert client.delete(f"{BASE}/orders/order-2").status_code == 409

    assert client.delete(f"{BASE}/orders/order-1").status_code == 200
    assert client.get(f"{BASE}/orders/order-1").status_code == 404


# =============================================================================
# Users and dashboard
# =============================================================================

def test_user_crud(client):
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "user_name": "ada",
        "email": "ada@example.com",
        "password": "analytical",
    }
    r = client.post(f"{BASE}/users/", json=payload)
    assert r.status_code == 201
    user = r.json()
    assert "password" not in user

    assert client.post(f"{BASE}/users/", json=payload).status_code == 409

    r = client.put(f"{BASE}/users/{user['id']}", json={**payload, "first_name": "Augusta"})
    assert r.json()["first_name"] == "Augusta"

    assert client.delete(f"{BASE}/users/{user['id']}").status_code == 200
    assert client.get(f"{BASE}/users/{user['id']}").status_code == 404


def test_dashboard(client, order_id):
    client.post(f"{BASE}/orders/{order_id}/products/", json={"product_id": "prod-B", "quantity": 2})
    rows = client.get(f"{BASE}/dashboard/products-in-orders").json()
    assert len(rows) == 1
    assert rows[0]["product_name"] == "Milk frother"
    assert rows[0]["total_price"] == pytest.approx(79.8)
