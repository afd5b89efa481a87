"""
Tests for the HTTP endpoints.

The repository dependency is overridden with one built over the
bundled data, so the tests do not depend on environment configuration.
"""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from grocery_store.dependencies import get_repository
from grocery_store.main import app
from grocery_store.repositories.order_repository import OrderRepository


@pytest.fixture
def client(repository: OrderRepository) -> Iterator[TestClient]:
    app.dependency_overrides[get_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestOrdersEndpoints:
    """Tests for /orders routes."""

    def test_list_orders(self, client: TestClient) -> None:
        response = client.get("/orders")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 100
        assert len(body["orders"]) == 100
        assert body["orders"][-1]["id"] == 100

    def test_get_order(self, client: TestClient) -> None:
        response = client.get("/orders/1")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 1
        assert body["customer"]["id"] == 25
        assert body["fulfillment_status"] == "complete"
        assert set(body["products"]) == {"Lobster", "Annatto seed", "Camomile"}

    def test_get_missing_order(self, client: TestClient) -> None:
        response = client.get("/orders/9999")

        assert response.status_code == 404
        assert "9999" in response.json()["detail"]

    def test_get_order_with_non_numeric_id(self, client: TestClient) -> None:
        assert client.get("/orders/gibberish").status_code == 422

    def test_get_orders_by_customer(self, client: TestClient) -> None:
        response = client.get("/orders/customer/4")

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [11, 44, 86]

    def test_get_orders_for_customer_without_orders(self, client: TestClient) -> None:
        assert client.get("/orders/customer/35").status_code == 404


class TestHealthEndpoints:
    """Tests for health and root routes."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["orders"] == 100

    def test_health_reports_load_failure(self, write_sources) -> None:
        broken = OrderRepository(write_sources(customers="x,a@a.co,1 Main,Boise,ID,83702\n"))
        app.dependency_overrides[get_repository] = lambda: broken
        try:
            response = TestClient(app).get("/health")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"

    def test_root(self, client: TestClient) -> None:
        assert client.get("/").json()["docs"] == "/docs"
