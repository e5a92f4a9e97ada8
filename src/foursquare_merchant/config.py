from __future__ import annotations

import os
import logging
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError


logger = logging.getLogger(__name__)


DEFAULT_ENDPOINT = "https://api.foursquare.com/v2/"
DEFAULT_TIMEOUT = 15.0  # seconds

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ClientConfig(BaseModel):
    """
    Static credentials and transport options for one client instance.

    Instances are frozen: a client keeps the same credentials for its
    whole lifetime. Validation failures surface as ConfigurationError
    so callers never have to know about pydantic.
    """

    model_config = ConfigDict(frozen=True)

    # --- Credentials ---
    client_id: str = Field(..., description="OAuth consumer key")
    client_secret: str = Field(..., description="OAuth consumer secret")
    access_token: str = Field(..., description="OAuth access token of the acting user")

    # --- Endpoint ---
    endpoint: str = Field(DEFAULT_ENDPOINT, description="Base URL of the API")

    # --- Transport options (passed through to requests) ---
    timeout: Optional[float] = Field(
        DEFAULT_TIMEOUT, description="Request timeout in seconds (None waits forever)"
    )
    verify: Union[bool, str] = Field(
        True, description="TLS verification flag or path to a CA bundle"
    )
    cert: Optional[str] = Field(None, description="Client certificate path")
    proxies: Dict[str, str] = Field(
        default_factory=dict, description="Proxy URLs keyed by scheme"
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            raise ConfigurationError(
                f"Invalid client configuration ({fields}): {e}"
            ) from e

    # ------------------------------
    # Field Validators (Pydantic v2)
    # ------------------------------

    @field_validator("client_id", "client_secret", "access_token", mode="before")
    @classmethod
    def validate_credential(cls, v):
        if v is None:
            raise ValueError("credential is required")
        v = str(v).strip()
        if not v:
            raise ValueError("credential must not be empty")
        return v

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v):
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"endpoint is not a valid http(s) URL: '{v}'")
        return v.rstrip("/") + "/"

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v):
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    # ------------------------------
    # Environment loading
    # ------------------------------

    @classmethod
    def from_env(cls, prefix: str = "FOURSQUARE_") -> "ClientConfig":
        """
        Build a config from environment variables:

            FOURSQUARE_CLIENT_ID       - Required
            FOURSQUARE_CLIENT_SECRET   - Required
            FOURSQUARE_ACCESS_TOKEN    - Required
            FOURSQUARE_ENDPOINT        - Override the default API endpoint
            FOURSQUARE_TIMEOUT_SEC     - Request timeout (default: 15)
            FOURSQUARE_VERIFY_SSL      - true/false, or a CA bundle path
        """
        data: Dict[str, Any] = {}

        for field_name in ("client_id", "client_secret", "access_token"):
            var = f"{prefix}{field_name.upper()}"
            value = os.getenv(var)
            if not value or not value.strip():
                raise ConfigurationError(f"{var} must be set.")
            data[field_name] = value

        endpoint = os.getenv(f"{prefix}ENDPOINT")
        if endpoint:
            data["endpoint"] = endpoint.strip()

        timeout_raw = os.getenv(f"{prefix}TIMEOUT_SEC")
        if timeout_raw is not None and timeout_raw.strip():
            try:
                data["timeout"] = float(timeout_raw.strip())
            except ValueError as e:
                raise ConfigurationError(
                    f"{prefix}TIMEOUT_SEC must be a number, got '{timeout_raw}'."
                ) from e

        verify_raw = os.getenv(f"{prefix}VERIFY_SSL")
        if verify_raw is not None and verify_raw.strip():
            data["verify"] = _parse_verify(verify_raw.strip())

        logger.debug("Loaded client configuration from %s* environment", prefix)
        return cls(**data)


def _parse_verify(raw: str) -> Union[bool, str]:
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    # Anything else is treated as a CA bundle path
    return raw
