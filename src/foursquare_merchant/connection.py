from __future__ import annotations

import logging
from typing import Dict, Optional

import requests
from requests.auth import AuthBase

from .config import ClientConfig


logger = logging.getLogger(__name__)


class OAuthTokenAuth(AuthBase):
    """Signs requests by appending the access token as an `oauth_token` query parameter."""

    param_name = "oauth_token"

    def __init__(self, access_token: str) -> None:
        self.access_token = access_token

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.prepare_url(r.url, {self.param_name: self.access_token})
        return r

    def __eq__(self, other) -> bool:
        return isinstance(other, OAuthTokenAuth) and other.access_token == self.access_token

    def __ne__(self, other) -> bool:
        return not self == other


class Connection:
    """
    Authenticated transport for the merchant API.

    Wraps a requests session carrying the transport options from the
    config (TLS verification, client cert, proxies) and the token auth.
    Nothing touches the network until `request` is called.
    """

    def __init__(self, config: ClientConfig) -> None:
        self.endpoint = config.endpoint
        self.timeout = config.timeout

        self.session = requests.Session()
        self.session.auth = OAuthTokenAuth(config.access_token)
        self.session.verify = config.verify
        if config.cert:
            self.session.cert = config.cert
        if config.proxies:
            self.session.proxies.update(config.proxies)

    def url_for(self, path: str) -> str:
        return f"{self.endpoint.rstrip('/')}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """
        Issue one request. `path` may already carry an encoded query string.
        Transport exceptions from requests propagate to the caller.
        """
        url = self.url_for(path)
        logger.debug("%s %s", method.upper(), url.split("?", 1)[0])
        return self.session.request(
            method.upper(),
            url,
            headers=headers,
            timeout=self.timeout,
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def build_connection(config: ClientConfig) -> Connection:
    """Build an authenticated connection from a validated config."""
    return Connection(config)
