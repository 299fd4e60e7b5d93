from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from promo_quoter.infrastructure.configuration import AppSettings
from promo_quoter.infrastructure.entrypoints.api.app_factory import create_app
from promo_quoter.infrastructure.resolution.container import build_container

SEED_YAML = """
products:
  - {id: 1, name: Laptop, category: ELECTRONICS, price: "1000.00", stock: 10}
  - {id: 2, name: Mouse, category: ELECTRONICS, price: "25.00", stock: 5}
  - {id: 3, name: Soda, category: DRINKS, price: "1.25", stock: 50}
promotions:
  - {id: 1, type: PERCENT_OFF_CATEGORY, name: Tech10, priority: 1, category: ELECTRONICS, percent: "10"}
  - {id: 2, type: BUY_X_GET_Y, name: Soda2x1, priority: 2, product_id: 3, buy_qty: 2, free_qty: 1}
"""


@pytest.fixture
def container(tmp_path):
    seed = tmp_path / "seed.yaml"
    seed.write_text(SEED_YAML, encoding="utf-8")
    settings = AppSettings(
        _env_file=None,
        seed_data_path=seed,
        confirm_retry_initial_wait=0,
        confirm_retry_max_wait=0,
        confirm_retry_jitter=0,
    )
    return build_container(settings)


@pytest.fixture
def client(container):
    return TestClient(create_app(container.settings, container))


def _body(*items, segment="REGULAR"):
    return {
        "items": [{"productId": product_id, "qty": qty} for product_id, qty in items],
        "customerSegment": segment,
    }


class TestQuoteEndpoint:

    def test_quote_returns_priced_lines(self, client):
        response = client.post("/cart/quote", json=_body((1, 1), (3, 5)))

        assert response.status_code == 200
        data = response.json()
        laptop, soda = data["items"]
        assert laptop["productId"] == 1
        assert Decimal(laptop["discount"]) == Decimal("100.00")
        assert Decimal(laptop["finalSubtotal"]) == Decimal("900.00")
        assert Decimal(soda["finalSubtotal"]) == Decimal("5.00")
        assert Decimal(data["total"]) == Decimal("905.00")
        assert data["appliedPromotions"] == ["Tech10", "Soda2x1"]
        assert data["auditTrail"] == [
            "PERCENT_OFF_CATEGORY(10%) on Laptop: -100.00",
            "BUY_2_GET_1 on Soda: free=1, -1.25",
        ]

    def test_unknown_product_is_404(self, client):
        response = client.post("/cart/quote", json=_body((1, 1), (99, 1)))

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found: 99"}

    def test_non_positive_qty_is_400(self, client):
        response = client.post("/cart/quote", json=_body((1, 0)))

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert len(errors) == 1
        assert errors[0].startswith("items.0.qty:")

    def test_empty_items_is_400(self, client):
        response = client.post("/cart/quote", json={"items": [], "customerSegment": "REGULAR"})

        assert response.status_code == 400

    def test_blank_segment_is_400(self, client):
        response = client.post("/cart/quote", json=_body((1, 1), segment="  "))

        assert response.status_code == 400
        assert response.json()["errors"][0].startswith("customerSegment:")


class TestConfirmEndpoint:

    def test_confirm_creates_order(self, client, container):
        response = client.post("/cart/confirm", json=_body((2, 2)))

        assert response.status_code == 200
        data = response.json()
        assert data["orderId"]
        assert Decimal(data["total"]) == Decimal("45.00")
        assert container.products.find_by_id(2).stock == 3

    def test_same_idempotency_key_replays_order(self, client, container):
        headers = {"Idempotency-Key": "abc-123"}

        first = client.post("/cart/confirm", json=_body((1, 2)), headers=headers)
        second = client.post("/cart/confirm", json=_body((1, 2)), headers=headers)

        assert first.status_code == second.status_code == 200
        assert second.json() == first.json()
        assert container.products.find_by_id(1).stock == 8
        assert container.orders.count() == 1

    def test_insufficient_stock_is_409_and_rolls_back(self, client, container):
        response = client.post(
            "/cart/confirm", json=_body((1, 2), (2, 6)), headers={"Idempotency-Key": "k-1"}
        )

        assert response.status_code == 409
        assert response.json() == {"error": "Insufficient stock for Mouse"}
        assert container.products.find_by_id(1).stock == 10
        assert container.orders.count() == 0
        assert container.idempotency.find_by_key("k-1") is None

    def test_unknown_product_is_404(self, client, container):
        response = client.post("/cart/confirm", json=_body((42, 1)))

        assert response.status_code == 404
        assert container.orders.count() == 0


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["service"] == "promo-quoter"


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "corr-1"})

    assert response.headers["x-correlation-id"] == "corr-1"


def test_correlation_id_is_generated_when_absent(client):
    response = client.get("/health")

    assert response.headers["x-correlation-id"]


class TestUnexpectedFailures:

    def test_unexpected_quote_failure_is_409(self, client, container, monkeypatch):
        def failing_quote(items, customer_segment):
            raise RuntimeError("unexpected failure")

        monkeypatch.setattr(container.quotation_service, "quote", failing_quote)

        response = client.post("/cart/quote", json=_body((1, 1)), headers={"X-Correlation-ID": "corr-9"})

        assert response.status_code == 409
        assert response.json() == {"error": "unexpected failure"}
        assert response.headers["x-correlation-id"] == "corr-9"

    def test_unexpected_confirm_failure_is_409_and_rolls_back(self, client, container, monkeypatch):
        def failing_save(order):
            raise OSError("disk full")

        monkeypatch.setattr(container.orders, "save", failing_save)

        response = client.post("/cart/confirm", json=_body((1, 2)), headers={"Idempotency-Key": "k-9"})

        assert response.status_code == 409
        assert response.json() == {"error": "disk full"}
        assert container.products.find_by_id(1).stock == 10
        assert container.idempotency.find_by_key("k-9") is None


def test_health_reports_version_and_backend(client):
    body = client.get("/health").json()

    assert body["version"] == "0.1.0"
    assert body["store_backend"] == "memory"
