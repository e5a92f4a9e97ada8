"""
Foursquare Merchant - API client

Typed wrapper around the Foursquare merchant endpoints (campaigns and
specials) with OAuth2 access-token authentication.

Usage:
------
    from foursquare_merchant import MerchantClient

    client = MerchantClient(
        client_id="...",
        client_secret="...",
        access_token="...",
    )

    special = client.add_special("Coffee", "Free coffee", "Enjoy!")
    campaign = client.add_campaign(special.id, venue_id="4b0588e0f964a520c9d922e3")
    client.start_campaign(campaign.id)

Configuration:
--------------
MerchantClient.from_env() reads these environment variables:

    FOURSQUARE_CLIENT_ID        - Required
    FOURSQUARE_CLIENT_SECRET    - Required
    FOURSQUARE_ACCESS_TOKEN     - Required
    FOURSQUARE_ENDPOINT         - Override the default API endpoint
    FOURSQUARE_TIMEOUT_SEC      - Request timeout (default: 15)
    FOURSQUARE_VERIFY_SSL       - true/false, or a CA bundle path
"""

__version__ = "0.1.0"

# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------
from .errors import (
    MerchantAPIError,
    ConfigurationError,
    RequestValidationError,
    UnsupportedOperationError,
    TransportError,
    TransportTimeout,
    MalformedResponseError,
    RemoteAPIError,
)

# -----------------------------------------------------------------------------
# Configuration and transport
# -----------------------------------------------------------------------------
from .config import ClientConfig
from .connection import Connection, OAuthTokenAuth, build_connection

# -----------------------------------------------------------------------------
# Request pipeline and client
# -----------------------------------------------------------------------------
from .client_base import BaseAPIClient, HTTPVerb
from .client import MerchantClient

# -----------------------------------------------------------------------------
# Response objects
# -----------------------------------------------------------------------------
from .response import ResponseObject


__all__ = [
    "__version__",
    # Errors
    "MerchantAPIError",
    "ConfigurationError",
    "RequestValidationError",
    "UnsupportedOperationError",
    "TransportError",
    "TransportTimeout",
    "MalformedResponseError",
    "RemoteAPIError",
    # Configuration and transport
    "ClientConfig",
    "Connection",
    "OAuthTokenAuth",
    "build_connection",
    # Client
    "BaseAPIClient",
    "HTTPVerb",
    "MerchantClient",
    # Responses
    "ResponseObject",
]
