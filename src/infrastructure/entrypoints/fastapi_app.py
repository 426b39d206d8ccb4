"""
FastAPI entry point: HTTP surface of the dashboard.

This module is the Composition Root: build_app() wires the infrastructure
adapters and one explicitly constructed Store, then hands them to create_app().
Views read state through GET /state (or the /state/stream SSE feed) and
request changes through the action routes.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:build_app --factory --reload --port 8000
"""

import asyncio
import dataclasses
import json
from typing import AsyncIterator

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from src.application.state.actions import (
    add_stock_portfolio,
    remove_stock_from_portfolio,
    update_stock_in_portfolio,
)
from src.application.state.store import AppState, Store
from src.application.use_cases.fetch_stock_data import FetchStockDataUseCase
from src.application.use_cases.get_news_articles import GetNewsArticlesUseCase
from src.application.use_cases.login_user import LoginUserUseCase, LogoutUserUseCase
from src.domain.entities.holding import Holding
from src.domain.errors import FetchError
from src.domain.ports.auth_port import IAuthenticator
from src.domain.ports.news_port import INewsProvider
from src.domain.ports.stock_data_port import IStockDataProvider
from src.infrastructure.auth.cognito_authenticator import CognitoAuthenticator
from src.infrastructure.auth.cognito_validator import CognitoTokenValidator
from src.infrastructure.config import Settings, configure_logging
from src.infrastructure.news.http_news_provider import HttpNewsProvider
from src.infrastructure.stock_data.yfinance_adapter import YFinanceStockDataProvider


class LoginRequest(BaseModel):
    email: str
    password: str


class HoldingRequest(BaseModel):
    symbol: str
    shares: float
    price: float


class HoldingUpdateRequest(BaseModel):
    shares: float
    price: float


def snapshot_to_dict(state: AppState) -> dict:
    return dataclasses.asdict(state)


async def state_events(store: Store) -> AsyncIterator[str]:
    """Yield the current snapshot, then the latest snapshot after each dispatch.

    Each snapshot is the whole state, so a slow consumer only gets the newest
    one; intermediate snapshots are dropped. The store listener is registered
    on first iteration and removed when the consumer closes the generator.
    """
    queue: asyncio.Queue[AppState] = asyncio.Queue(maxsize=1)

    def keep_latest(state: AppState) -> None:
        if queue.full():
            queue.get_nowait()
        queue.put_nowait(state)

    unsubscribe = store.subscribe(keep_latest)
    try:
        state = store.get_state()
        while True:
            yield f"data: {json.dumps(snapshot_to_dict(state))}\n\n"
            state = await queue.get()
    finally:
        unsubscribe()


def create_app(
    store: Store,
    authenticator: IAuthenticator,
    stock_provider: IStockDataProvider,
    news_provider: INewsProvider,
) -> FastAPI:
    """Build the FastAPI app around an already constructed store and adapters."""
    login_uc = LoginUserUseCase(store, authenticator)
    logout_uc = LogoutUserUseCase(store)
    fetch_uc = FetchStockDataUseCase(store, stock_provider)
    news_uc = GetNewsArticlesUseCase(news_provider)

    app = FastAPI(title="Stock Market Dashboard API")

    def require_session() -> None:
        """FastAPI dependency: portfolio edits need a signed-in user."""
        if not store.get_state().auth.is_authenticated:
            raise HTTPException(status_code=401, detail="Login required.")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/state")
    async def get_state():
        return snapshot_to_dict(store.get_state())

    @app.get("/state/stream")
    async def stream_state():
        """Stream state snapshots as Server-Sent Events."""
        return StreamingResponse(state_events(store), media_type="text/event-stream")

    @app.post("/auth/login")
    async def login(body: LoginRequest):
        """Sign in; failures are reported in the returned auth.error field."""
        await login_uc.execute(body.email, body.password)
        return dataclasses.asdict(store.get_state().auth)

    @app.post("/auth/logout")
    async def logout():
        logout_uc.execute()
        return dataclasses.asdict(store.get_state().auth)

    @app.post("/portfolio", dependencies=[Depends(require_session)])
    async def add_holding(body: HoldingRequest):
        try:
            holding = Holding(symbol=body.symbol.upper().strip(), shares=body.shares, price=body.price)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        store.dispatch(add_stock_portfolio(holding))
        return dataclasses.asdict(store.get_state().portfolio)

    @app.put("/portfolio/{symbol}", dependencies=[Depends(require_session)])
    async def update_holding(symbol: str, body: HoldingUpdateRequest):
        try:
            holding = Holding(symbol=symbol.upper().strip(), shares=body.shares, price=body.price)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        store.dispatch(update_stock_in_portfolio(holding))
        return dataclasses.asdict(store.get_state().portfolio)

    @app.delete("/portfolio/{symbol}", dependencies=[Depends(require_session)])
    async def remove_holding(symbol: str):
        store.dispatch(remove_stock_from_portfolio(symbol.upper().strip()))
        return dataclasses.asdict(store.get_state().portfolio)

    @app.post("/stock/{symbol}")
    async def fetch_stock(symbol: str):
        """Load the price series; failures are reported in stock.error."""
        await fetch_uc.execute(symbol)
        return dataclasses.asdict(store.get_state().stock)

    @app.get("/news/{symbol}")
    async def get_news(symbol: str):
        try:
            articles = await news_uc.execute(symbol)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except FetchError as exc:
            raise HTTPException(status_code=502, detail=exc.message) from exc
        return {"symbol": symbol.upper().strip(), "articles": [dataclasses.asdict(a) for a in articles]}

    return app


def build_app() -> FastAPI:
    """uvicorn --factory target: read settings and wire the production adapters."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    validator = CognitoTokenValidator(
        user_pool_id=settings.cognito_user_pool_id,
        client_id=settings.cognito_client_id,
        region=settings.cognito_region,
    )
    return create_app(
        store=Store(),
        authenticator=CognitoAuthenticator(
            client_id=settings.cognito_client_id,
            validator=validator,
            region=settings.cognito_region,
        ),
        stock_provider=YFinanceStockDataProvider(
            period=settings.stock_history_period,
            interval=settings.stock_history_interval,
        ),
        news_provider=HttpNewsProvider(settings.news_api_url),
    )
