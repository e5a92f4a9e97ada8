from __future__ import annotations

import logging
from typing import Any, Optional

from .campaigns import CampaignMethods
from .client_base import BaseAPIClient
from .config import ClientConfig
from .specials import SpecialMethods


logger = logging.getLogger(__name__)


class MerchantClient(BaseAPIClient, CampaignMethods, SpecialMethods):
    """
    Client for the Foursquare merchant API (campaigns and specials).

    Usage:
        client = MerchantClient(
            client_id="...",
            client_secret="...",
            access_token="...",
        )
        campaign = client.add_campaign("special_id", venue_id=["v1", "v2"])
        print(campaign.id)

    Or, with credentials in FOURSQUARE_* environment variables:
        client = MerchantClient.from_env()
    """

    def __init__(self, config: Optional[ClientConfig] = None, **options: Any) -> None:
        if config is None:
            config = ClientConfig(**options)
        elif options:
            # Rebuild so the overrides go through validation
            config = ClientConfig(**{**config.model_dump(), **options})

        super().__init__(config)
        logger.info("MerchantClient initialized for %s", config.endpoint)

    @classmethod
    def from_env(cls, **options: Any) -> "MerchantClient":
        return cls(ClientConfig.from_env(), **options)
