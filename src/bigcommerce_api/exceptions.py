"""Exception hierarchy for the BigCommerce client."""

from typing import Optional


class BigcommerceError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(BigcommerceError):
    """A required setting is missing or the client was used before configuration."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class HttpError(BigcommerceError):
    """Response with an error status code."""

    def __init__(self, message: str, code: int, body: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code
        self.body = body

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ClientError(HttpError):
    """4xx response. The message is the raw response body."""

    def __init__(self, body: str, code: int):
        super().__init__(body or "Bigcommerce connection error", code, body)


class ServerError(HttpError):
    """5xx response."""

    PREFIX = "BigCommerce Server Exception: "

    def __init__(self, body: str, code: int):
        super().__init__(f"{self.PREFIX}{body}", code, body)


class MappingError(BigcommerceError):
    """Decoded body does not have the shape the mapping expected."""
