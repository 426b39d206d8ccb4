"""
Runtime settings read from the environment (optionally a local .env file).
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from src.domain.errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    cognito_user_pool_id: str
    cognito_client_id: str
    cognito_region: str = "us-east-1"
    news_api_url: str = "https://api.example.com"
    stock_history_period: str = "3mo"
    stock_history_interval: str = "1d"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from *environ* (defaults to os.environ after loading .env).

        Raises:
            ConfigurationError: if a required Cognito setting is missing.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        def required(key: str) -> str:
            value = environ.get(key, "").strip()
            if not value:
                raise ConfigurationError(key)
            return value

        return cls(
            cognito_user_pool_id=required("COGNITO_USER_POOL_ID"),
            cognito_client_id=required("COGNITO_CLIENT_ID"),
            cognito_region=environ.get("COGNITO_REGION", "us-east-1"),
            news_api_url=environ.get("NEWS_API_URL", "https://api.example.com"),
            stock_history_period=environ.get("STOCK_HISTORY_PERIOD", "3mo"),
            stock_history_interval=environ.get("STOCK_HISTORY_INTERVAL", "1d"),
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
