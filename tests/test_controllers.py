"""
Integration tests for the HTTP layer.
"""

import pytest
from fastapi.testclient import TestClient

from cakeshop.app import create_app
from cakeshop.patterns.cakes import CakeKind, CakeSize
from cakeshop.patterns.factory import CakeCatalog
from cakeshop.patterns.singleton import OrderCoordinator


@pytest.fixture
def app(coordinator, session_factory):
    return create_app(coordinator=coordinator, session_factory=session_factory, persist_history=True)


@pytest.fixture
def client(app):
    return TestClient(app)


def place(client, kind="chocolate", size="medium", decorations=(), customer=None):
    return client.post(
        "/orders/",
        json={"kind": kind, "size": size, "decorations": list(decorations), "customer": customer},
    )


@pytest.mark.integration
class TestOrderRoutes:
    """Test placing and listing orders."""

    def test_place_order(self, client):
        response = place(client, decorations=["cream", "chocolate_chips", "skittles"], customer="Bob")

        assert response.status_code == 201
        body = response.json()
        assert body["order_id"] == "CHO-M-001"
        assert body["customer"] == "Bob"
        assert body["decorations"] == ["Cream", "Chocolate Chips", "Skittles"]
        assert body["base_price"] == 12.0
        assert body["total_price"] == 18.0
        assert body["description"].endswith("with Cream, Chocolate Chips, and Skittles")

    def test_unknown_decoration_is_400(self, client):
        response = place(client, decorations=["glitter"])

        assert response.status_code == 400
        assert "glitter" in response.json()["detail"]

    def test_unknown_kind_is_400(self, client):
        assert place(client, kind="carrot").status_code == 400

    def test_missing_price_row_is_500(self, client, coordinator):
        coordinator.catalog.remove_price(CakeKind.APPLE, CakeSize.SMALL)

        assert place(client, kind="apple", size="small").status_code == 500

    def test_list_orders(self, client):
        place(client, kind="apple", size="large", decorations=["cream"])
        place(client, kind="cheese", size="small")

        orders = client.get("/orders/").json()

        assert [o["order_id"] for o in orders] == ["APP-L-001", "CHE-S-001"]

    def test_decoration_menu(self, client):
        menu = {d["kind"]: d for d in client.get("/orders/decorations").json()}

        assert menu["chocolate_chips"]["name"] == "Chocolate Chips"
        assert menu["chocolate_chips"]["surcharge"] == 2.5
        assert menu["cream"]["surcharge"] == 2.0
        assert menu["skittles"]["surcharge"] == 1.5


@pytest.mark.integration
class TestCatalogRoutes:
    """Test the catalog administration routes."""

    def test_list_prices(self, client):
        prices = client.get("/catalog/prices").json()

        assert len(prices) == 9
        assert {"kind": "apple", "size": "small", "display_name": "Apple Cake (Small)", "price": 8.0} in prices

    def test_get_price(self, client):
        response = client.get("/catalog/prices/cheese/large")

        assert response.status_code == 200
        assert response.json()["price"] == 15.0

    def test_get_price_bad_kind(self, client):
        assert client.get("/catalog/prices/carrot/large").status_code == 400

    def test_get_missing_row_is_404(self, client, coordinator):
        coordinator.catalog.remove_price(CakeKind.CHEESE, CakeSize.LARGE)

        assert client.get("/catalog/prices/cheese/large").status_code == 404

    def test_set_price_then_reset(self, client):
        before = place(client, kind="apple", size="small").json()

        response = client.put("/catalog/prices/apple/small", json={"price": 9.5})
        assert response.status_code == 200
        assert response.json()["price"] == 9.5

        after = place(client, kind="apple", size="small").json()
        assert before["base_price"] == 8.0
        assert after["base_price"] == 9.5

        client.post("/catalog/prices/reset")
        assert client.get("/catalog/prices/apple/small").json()["price"] == 8.0

    def test_negative_price_rejected(self, client):
        assert client.put("/catalog/prices/apple/small", json={"price": -1}).status_code == 422

    def test_counts(self, client):
        place(client, kind="apple")
        place(client, kind="apple")
        place(client, kind="cheese")

        body = client.get("/catalog/counts").json()

        assert body["counts"] == {"apple": 2, "cheese": 1, "chocolate": 0}
        assert body["total"] == 3


@pytest.mark.integration
class TestDashboardRoutes:
    """Test the dashboards."""

    def test_manager_dashboard(self, client):
        place(client, kind="chocolate")
        place(client, kind="chocolate", decorations=["skittles"])

        body = client.get("/dashboard/manager").json()

        assert body["latest_sales"] == {"Chocolate Cake": 2}
        assert body["orders_shown_to_customers"] == 2

    def test_history(self, client):
        place(client, kind="apple", size="large", decorations=["cream"], customer="Alice Smith")
        place(client, kind="cheese", size="small", decorations=["chocolate_chips"])

        history = client.get("/dashboard/history").json()

        assert [h["order_id"] for h in history] == ["CHE-S-001", "APP-L-001"]
        assert history[1]["customer"] == "Alice Smith"
        assert history[1]["total_price"] == 14.0

    def test_history_filtered_by_kind(self, client):
        place(client, kind="apple")
        place(client, kind="cheese")

        history = client.get("/dashboard/history", params={"kind": "cheese"}).json()

        assert [h["kind"] for h in history] == ["cheese"]

    def test_history_survives_server_restart(self, session_factory):
        first_run = TestClient(create_app(OrderCoordinator(CakeCatalog()), session_factory, persist_history=True))
        second_run = TestClient(create_app(OrderCoordinator(CakeCatalog()), session_factory, persist_history=True))

        assert place(first_run, kind="apple", size="large").status_code == 201
        response = place(second_run, kind="apple", size="large")

        assert response.status_code == 201
        assert response.json()["order_id"] == "APP-L-001"
        history = second_run.get("/dashboard/history").json()
        assert [h["order_id"] for h in history] == ["APP-L-001", "APP-L-001"]

    def test_history_disabled(self, coordinator):
        client = TestClient(create_app(coordinator=coordinator, persist_history=False))

        assert client.get("/dashboard/history").status_code == 404


@pytest.mark.integration
class TestAppRoutes:

    def test_root(self, client):
        assert "singleton" in client.get("/").json()["patterns"]

    def test_health_counts_observers(self, client):
        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["observers"] == 3
        assert body["history"] is True
