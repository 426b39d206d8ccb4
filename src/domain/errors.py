"""
Domain error hierarchy.

Infrastructure adapters translate library exceptions into these types so the
application layer never handles transport-specific errors.
"""


class DashboardError(Exception):
    """Base class for all dashboard errors."""

    def __init__(self, message: str = "An error occurred") -> None:
        self.message = message
        super().__init__(message)


class AuthError(DashboardError):
    """Raised when credential verification fails."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class FetchError(DashboardError):
    """Raised when market data or news cannot be retrieved for a symbol."""

    def __init__(self, message: str, symbol: str = "") -> None:
        self.symbol = symbol
        super().__init__(message)


class ConfigurationError(DashboardError):
    """Raised when a required setting is missing or invalid."""

    def __init__(self, config_key: str, message: str = "is missing or invalid") -> None:
        self.config_key = config_key
        super().__init__(f"Configuration '{config_key}' {message}")


def error_message(exc: BaseException) -> str:
    """Best human-readable text for *exc*, falling back to its class name."""
    return getattr(exc, "message", None) or str(exc) or exc.__class__.__name__
