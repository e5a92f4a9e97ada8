from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote

import requests
from pydantic import ValidationError

from . import __version__
from .config import ClientConfig
from .connection import Connection, build_connection
from .errors import (
    MalformedResponseError,
    RemoteAPIError,
    TransportError,
    TransportTimeout,
    UnsupportedOperationError,
)
from .response import Envelope, ErrorMeta, wrap


logger = logging.getLogger(__name__)


USER_AGENT = f"foursquare-merchant-python/{__version__}"

# Characters left alone when the path and query are encoded together:
# unreserved and reserved URI characters.
_URI_SAFE = "-_.!~*'();/?:@&=+$,[]"


class HTTPVerb(str, Enum):
    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"

    @classmethod
    def coerce(cls, verb: Union["HTTPVerb", str]) -> "HTTPVerb":
        if isinstance(verb, cls):
            return verb
        try:
            return cls(str(verb).lower())
        except ValueError:
            raise UnsupportedOperationError(
                f"Unsupported operation '{verb}'; expected one of "
                f"{', '.join(v.value for v in cls)}"
            ) from None


def api_version(now: Optional[datetime] = None) -> str:
    """Date-stamped API version, e.g. '20261019'."""
    return (now or datetime.now()).strftime("%Y%m%d")


def paramify(path: str, params: Mapping[str, Any]) -> str:
    """
    Turn params into an HTTP query and encode it together with the path.
    None values are left out.
    """
    query = "&".join(
        f"{key}={_format_value(value)}"
        for key, value in params.items()
        if value is not None
    )
    return quote(f"{path}?{query}", safe=_URI_SAFE)


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class BaseAPIClient:
    """
    Request pipeline shared by every resource method.

    Each call:
    - builds a fresh authenticated connection
    - adds the User-Agent header and client_id / client_secret / v params
    - turns non-2xx responses into RemoteAPIError
    - returns the envelope's `response` payload with attribute access
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    @property
    def client_id(self) -> str:
        return self.config.client_id

    @property
    def client_secret(self) -> str:
        return self.config.client_secret

    @property
    def user_agent(self) -> str:
        return USER_AGENT

    def connection(self) -> Connection:
        return build_connection(self.config)

    # ---------------------------------------------------
    # Verb helpers
    # ---------------------------------------------------
    def get(self, path: str, params=None, headers=None, raw: bool = False) -> Any:
        return self.request(HTTPVerb.GET, path, params, headers, raw)

    def post(self, path: str, params=None, headers=None, raw: bool = False) -> Any:
        return self.request(HTTPVerb.POST, path, params, headers, raw)

    def put(self, path: str, params=None, headers=None, raw: bool = False) -> Any:
        return self.request(HTTPVerb.PUT, path, params, headers, raw)

    def delete(self, path: str, params=None, headers=None, raw: bool = False) -> Any:
        return self.request(HTTPVerb.DELETE, path, params, headers, raw)

    # ---------------------------------------------------
    # Core request method
    # ---------------------------------------------------
    def request(
        self,
        verb: Union[HTTPVerb, str],
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        raw: bool = False,
    ) -> Any:
        """
        Perform an HTTP request.

        Returns the requests.Response when `raw` is set, otherwise the
        parsed `response` field of the JSON envelope.
        """
        verb = HTTPVerb.coerce(verb)

        request_headers: Dict[str, str] = dict(headers or {})
        request_headers["User-Agent"] = self.user_agent

        query: Dict[str, Any] = dict(params or {})
        query.update(
            {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "v": api_version(),
            }
        )

        try:
            with self.connection() as conn:
                response = conn.request(verb.value, paramify(path, query), request_headers)
        except requests.Timeout as e:
            raise TransportTimeout(f"Request timed out calling {path}") from e
        except requests.RequestException as e:
            raise TransportError(f"Request failed calling {path}: {e}") from e

        if not 200 <= response.status_code < 300:
            raise self._remote_error(response)

        if raw:
            return response

        return self._parse_envelope(response, path)

    # ---------------------------------------------------
    # Helpers
    # ---------------------------------------------------
    @staticmethod
    def _remote_error(response: requests.Response) -> RemoteAPIError:
        meta = ErrorMeta()
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("meta"), dict):
            try:
                meta = ErrorMeta.model_validate(body["meta"])
            except ValidationError:
                logger.debug("Unreadable error meta from API: %r", body["meta"])

        error = RemoteAPIError(
            code=meta.code if meta.code is not None else response.status_code,
            message=meta.error_detail or response.reason or "Unknown error",
            error_type=meta.error_type,
            status_code=response.status_code,
        )
        logger.warning("Foursquare API returned an error: %s", error)
        return error

    @staticmethod
    def _parse_envelope(response: requests.Response, path: str) -> Any:
        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Invalid JSON returned from {path}") from e

        if not isinstance(body, dict):
            raise MalformedResponseError(
                f"Unexpected response shape from {path}; expected a JSON object"
            )

        try:
            envelope = Envelope.model_validate(body)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Response from {path} has no 'response' field"
            ) from e

        if not isinstance(envelope.response, dict):
            raise MalformedResponseError(
                f"Response from {path} has a non-object 'response' field"
            )

        return wrap(envelope.response)
