from __future__ import annotations

from typing import Optional


class MerchantAPIError(RuntimeError):
    """Base error for merchant client failures."""


class ConfigurationError(MerchantAPIError):
    """Raised when credentials, endpoint or transport options are missing or invalid."""


class RequestValidationError(MerchantAPIError, ValueError):
    """Raised when a call's arguments break a rule the API enforces."""


class UnsupportedOperationError(MerchantAPIError, AttributeError):
    """Raised for HTTP verbs other than get, post, put and delete."""


class TransportError(MerchantAPIError):
    """Raised when the request fails before a response arrives."""


class TransportTimeout(TransportError):
    """Raised when request times out."""


class MalformedResponseError(MerchantAPIError):
    """Raised when a successful response is not a JSON envelope with a `response` field."""


class RemoteAPIError(MerchantAPIError):
    """
    Raised for non-success HTTP responses.

    `code`, `error_type` and `message` come from the envelope's `meta`
    block when the body has one, otherwise from the HTTP status line.
    """

    def __init__(
        self,
        code: int,
        message: str,
        error_type: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.status_code = status_code if status_code is not None else code

        label = f"{code} {error_type}" if error_type else str(code)
        super().__init__(f"Foursquare API error {label}: {message}")
