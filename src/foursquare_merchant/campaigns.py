"""Campaign methods for the merchant API.

See https://developer.foursquare.com/merchant/campaigns/campaigns.html
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Optional

from .errors import RequestValidationError
from .params import IdList, Timestamp, as_datetime, join_ids, to_epoch, utc_now
from .response import pluck


logger = logging.getLogger(__name__)


# The API rejects campaigns scheduled further back than this
MAX_START_LAG = timedelta(minutes=10)


class CampaignMethods:
    """Mixin for campaign endpoints. Requires `get` and `post` from BaseAPIClient."""

    def add_campaign(
        self,
        special_id: str,
        group_id: IdList = None,
        venue_id: IdList = None,
        start_at: Timestamp = None,
        end_at: Timestamp = None,
    ) -> Any:
        """
        Create a new campaign for the authenticated business.

        Args:
            special_id: Required. The special this campaign runs.
            group_id: One or more venue group ids.
            venue_id: One or more venue ids.
            start_at: When the campaign starts (datetime or seconds since epoch).
                Cannot be more than 10 minutes in the past.
            end_at: When the campaign is automatically deactivated.

        Returns:
            The created campaign.

        Raises:
            RequestValidationError: If start_at is older than 10 minutes.
        """
        if start_at is not None and as_datetime(start_at) < utc_now() - MAX_START_LAG:
            raise RequestValidationError(
                "start_at must be no more than 10 minutes in the past "
                "according to the Foursquare API"
            )

        logger.info("Creating campaign for special %s", special_id)
        result = self.post(
            "campaigns/add",
            {
                "specialId": special_id,
                "groupId": join_ids(group_id),
                "venueId": join_ids(venue_id),
                "startAt": to_epoch(start_at),
                "endAt": to_epoch(end_at),
            },
        )
        return pluck(result, "campaign")

    def start_campaign(self, campaign_id: str) -> Any:
        """Start a campaign. Returns the API's success payload."""
        return self.post(f"campaigns/{campaign_id}/start")

    def end_campaign(self, campaign_id: str) -> Any:
        """End a campaign. Returns the API's success payload."""
        return self.post(f"campaigns/{campaign_id}/end")

    def delete_campaign(self, campaign_id: str) -> Any:
        """Delete a campaign that has never been activated."""
        return self.post(f"campaigns/{campaign_id}/delete")

    def list_campaigns(
        self,
        special_id: Optional[str] = None,
        group_id: IdList = None,
        status: str = "all",
    ) -> Any:
        """
        List campaigns of the authenticated business.

        Args:
            special_id: Limit to campaigns running this special.
            group_id: Limit to campaigns involving this group.
            status: pending, scheduled, active, expired, notStarted or all.

        Returns:
            An object with count and the campaign items.
        """
        return self.get(
            "campaigns/list",
            {
                "specialId": special_id,
                "groupId": join_ids(group_id) if group_id is not None else None,
                "status": status,
            },
        )

    def timeseries_for_campaign(
        self,
        campaign_id: str,
        start_at: Timestamp = None,
        end_at: Timestamp = None,
    ) -> Any:
        """
        Campaign stats over a time range, one time series per participating venue.
        Omitted bounds default to the campaign's own start and end (or now).
        """
        result = self.get(
            f"campaigns/{campaign_id}/timeseries",
            {"startAt": to_epoch(start_at), "endAt": to_epoch(end_at)},
        )
        return pluck(result, "timeseries")
