import pytest

from src.application.state.store import Store
from src.domain.entities.article import Article
from src.domain.entities.stock_price import PricePoint
from src.domain.entities.user import User
from src.domain.errors import AuthError, FetchError
from src.domain.ports.auth_port import IAuthenticator
from src.domain.ports.news_port import INewsProvider
from src.domain.ports.stock_data_port import IStockDataProvider


class FakeAuthenticator(IAuthenticator):
    """Accepts exactly one email/password pair."""

    def __init__(self, user: User, password: str = "pw") -> None:
        self.user = user
        self.password = password
        self.calls: list[tuple[str, str]] = []

    async def authenticate(self, email: str, password: str) -> User:
        self.calls.append((email, password))
        if email != self.user.email or password != self.password:
            raise AuthError("invalid credentials")
        return self.user


class FakeStockDataProvider(IStockDataProvider):
    def __init__(self, series: dict) -> None:
        self.series = series
        self.requested: list[str] = []

    async def fetch_historical_series(self, symbol: str):
        self.requested.append(symbol)
        if symbol not in self.series:
            raise FetchError(f"No historical data available for symbol: {symbol!r}", symbol)
        return self.series[symbol]


class FakeNewsProvider(INewsProvider):
    def __init__(self, articles: dict) -> None:
        self.articles = articles

    async def fetch_articles(self, symbol: str) -> list[Article]:
        if symbol not in self.articles:
            raise FetchError(f"News request for {symbol!r} failed: 404", symbol)
        return self.articles[symbol]


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def user() -> User:
    return User(uid="user-123", email="a@b.com", display_name="Ada")


@pytest.fixture
def aapl_series():
    return (PricePoint(date="2024-01-01", close=100.0), PricePoint(date="2024-01-02", close=101.5))


@pytest.fixture
def authenticator(user) -> FakeAuthenticator:
    return FakeAuthenticator(user)


@pytest.fixture
def stock_provider(aapl_series) -> FakeStockDataProvider:
    return FakeStockDataProvider({"AAPL": aapl_series})


@pytest.fixture
def news_provider() -> FakeNewsProvider:
    return FakeNewsProvider(
        {"AAPL": [Article(title="Apple beats estimates", url="https://news.example.com/aapl-1")]}
    )
