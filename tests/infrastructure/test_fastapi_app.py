import asyncio
import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from src.application.state.actions import add_stock_portfolio, fetch_start, remove_stock_from_portfolio
from src.domain.entities.holding import Holding
from src.infrastructure.entrypoints.fastapi_app import build_app, create_app, state_events


@pytest.fixture
def client(store, authenticator, stock_provider, news_provider) -> TestClient:
    app = create_app(store, authenticator, stock_provider, news_provider)
    return TestClient(app)


def _login(client, password="pw"):
    return client.post("/auth/login", json={"email": "a@b.com", "password": password})


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_initial_state_snapshot(client):
    assert client.get("/state").json() == {
        "auth": {"user": None, "is_authenticated": False, "error": None},
        "portfolio": {"stocks": []},
        "stock": {"data": [], "loading": False, "error": None},
    }


def test_login_and_logout(client):
    body = _login(client).json()
    assert body["is_authenticated"] is True
    assert body["user"] == {"uid": "user-123", "email": "a@b.com", "display_name": "Ada"}

    body = client.post("/auth/logout").json()
    assert body == {"user": None, "is_authenticated": False, "error": None}


def test_failed_login_is_reported_in_state(client):
    response = _login(client, password="wrong")
    assert response.status_code == 200
    assert response.json()["error"] == "invalid credentials"
    assert response.json()["is_authenticated"] is False


def test_portfolio_requires_login(client):
    response = client.post("/portfolio", json={"symbol": "AAPL", "shares": 10, "price": 150})
    assert response.status_code == 401


def test_portfolio_add_update_remove(client, store):
    _login(client)

    client.post("/portfolio", json={"symbol": "aapl", "shares": 10, "price": 150})
    body = client.post("/portfolio", json={"symbol": "GOOG", "shares": 5, "price": 2800}).json()
    assert body["stocks"] == [
        {"symbol": "AAPL", "shares": 10, "price": 150},
        {"symbol": "GOOG", "shares": 5, "price": 2800},
    ]

    body = client.put("/portfolio/AAPL", json={"shares": 12, "price": 155}).json()
    assert body["stocks"][0] == {"symbol": "AAPL", "shares": 12, "price": 155}

    body = client.delete("/portfolio/aapl").json()
    assert body["stocks"] == [{"symbol": "GOOG", "shares": 5, "price": 2800}]

    assert store.get_state().portfolio.stocks == (Holding("GOOG", 5, 2800),)


def test_negative_shares_rejected(client):
    _login(client)
    response = client.post("/portfolio", json={"symbol": "AAPL", "shares": -1, "price": 150})
    assert response.status_code == 422


@pytest.mark.parametrize("body", [
    '{"symbol": "AAPL", "shares": NaN, "price": 150}',
    '{"symbol": "AAPL", "shares": 10, "price": Infinity}',
])
def test_non_finite_holding_rejected_and_state_stays_readable(client, store, body):
    _login(client)
    response = client.post("/portfolio", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 422
    assert store.get_state().portfolio.stocks == ()
    assert client.get("/state").status_code == 200


def test_non_finite_update_rejected(client, store):
    _login(client)
    client.post("/portfolio", json={"symbol": "AAPL", "shares": 10, "price": 150})
    response = client.put(
        "/portfolio/AAPL",
        content='{"shares": NaN, "price": 150}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    assert store.get_state().portfolio.stocks == (Holding("AAPL", 10, 150),)


def test_fetch_stock_success_and_failure(client):
    body = client.post("/stock/aapl").json()
    assert body["loading"] is False
    assert body["error"] is None
    assert body["data"] == [
        {"date": "2024-01-01", "close": 100.0},
        {"date": "2024-01-02", "close": 101.5},
    ]

    body = client.post("/stock/NOPE").json()
    assert body["error"] == "No historical data available for symbol: 'NOPE'"
    assert len(body["data"]) == 2


def test_news(client):
    body = client.get("/news/aapl").json()
    assert body == {
        "symbol": "AAPL",
        "articles": [{"title": "Apple beats estimates", "url": "https://news.example.com/aapl-1"}],
    }


def test_news_provider_failure_is_bad_gateway(client):
    response = client.get("/news/TSLA")
    assert response.status_code == 502
    assert "TSLA" in response.json()["detail"]


def test_state_events_stream_snapshots_and_unsubscribe(store):
    async def scenario():
        events = state_events(store)
        first = await events.__anext__()
        store.dispatch(fetch_start())
        second = await events.__anext__()
        await events.aclose()
        return first, second

    first, second = asyncio.run(scenario())

    assert first.startswith("data: ")
    assert json.loads(first[len("data: "):])["stock"]["loading"] is False
    assert json.loads(second[len("data: "):])["stock"]["loading"] is True
    # Closing the generator removed its listener.
    assert store._listeners == []


def test_state_events_skip_to_latest_snapshot_for_slow_consumer(store):
    async def scenario():
        events = state_events(store)
        await events.__anext__()
        store.dispatch(fetch_start())
        store.dispatch(add_stock_portfolio(Holding("AAPL", 1, 100)))
        store.dispatch(add_stock_portfolio(Holding("GOOG", 2, 200)))
        caught_up = await events.__anext__()

        store.dispatch(remove_stock_from_portfolio("AAPL"))
        following = await events.__anext__()
        await events.aclose()
        return caught_up, following

    caught_up, following = asyncio.run(scenario())

    caught_up_state = json.loads(caught_up[len("data: "):])
    assert caught_up_state["stock"]["loading"] is True
    assert [h["symbol"] for h in caught_up_state["portfolio"]["stocks"]] == ["AAPL", "GOOG"]
    # Only the newest snapshot was buffered, so nothing stale comes next.
    assert [h["symbol"] for h in json.loads(following[len("data: "):])["portfolio"]["stocks"]] == ["GOOG"]


def test_build_app_wires_production_adapters(monkeypatch):
    monkeypatch.setenv("COGNITO_USER_POOL_ID", "us-east-1_pool")
    monkeypatch.setenv("COGNITO_CLIENT_ID", "app-client")
    with patch("src.infrastructure.config.load_dotenv"), \
            patch("src.infrastructure.auth.cognito_authenticator.boto3.client") as mock_boto, \
            patch("src.infrastructure.entrypoints.fastapi_app.configure_logging"):
        app = build_app()

    mock_boto.assert_called_once_with("cognito-idp", region_name="us-east-1")
    paths = {route.path for route in app.routes}
    assert {"/state", "/auth/login", "/portfolio", "/stock/{symbol}", "/news/{symbol}"} <= paths
