"""Special methods for the merchant API.

See https://developer.foursquare.com/docs/specials/specials.html
"""

from __future__ import annotations

from typing import Any, Optional, Union

from .params import IdList, join_ids
from .response import pluck


class SpecialMethods:
    """Mixin for special endpoints. Requires `get` and `post` from BaseAPIClient."""

    def flag_special(
        self,
        special_id: str,
        venue_id: str,
        problem: str,
        text: Optional[str] = None,
    ) -> None:
        """
        Flag a special as improper.

        Args:
            special_id: The special being flagged.
            venue_id: The venue running the special.
            problem: One of not_redeemable, not_valuable, other.
            text: Additional text about why the special was flagged.
        """
        self.post(
            f"specials/{special_id}/flag",
            {"venueId": venue_id, "problem": problem, "text": text},
        )
        return None

    def special(self, special_id: str, venue_id: str) -> Any:
        """Details about a special at a venue, including text and unlock rules."""
        result = self.get(f"specials/{special_id}", {"venueId": venue_id})
        return pluck(result, "special")

    def special_search(
        self,
        ll: str,
        ll_acc: Optional[float] = None,
        alt: Optional[float] = None,
        alt_acc: Optional[float] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """
        Specials near a location.

        Args:
            ll: "latitude,longitude" to search near.
            ll_acc: Accuracy of ll, in meters.
            alt: Altitude, in meters.
            alt_acc: Accuracy of alt, in meters.
            limit: Number of results, up to 50.
        """
        result = self.get(
            "specials/search",
            {"ll": ll, "llAcc": ll_acc, "alt": alt, "altAcc": alt_acc, "limit": limit},
        )
        return pluck(result, "specials")

    def add_special(
        self,
        name: str,
        text: str,
        unlocked_text: str,
        fine_print: Optional[str] = None,
        special_type: str = "regular",
        count1: Optional[int] = 1,
        count2: Optional[int] = None,
        count3: Optional[int] = None,
    ) -> Any:
        """
        Create a new special for the authenticated business.

        Args:
            name: Required. A name for the special.
            text: Required. Description of the special.
            unlocked_text: Required. Text shown once the user unlocks the special.
            fine_print: Fine print shown on the special detail page.
            special_type: mayor, frequency, count, regular, swarm, friends or flash.
            count1: Count for frequency, count, regular, swarm, friends and flash specials.
            count2: Secondary count for regular and flash specials.
            count3: Tertiary count for flash specials.

        Returns:
            The created special.
        """
        result = self.post(
            "specials/add",
            {
                "name": name,
                "text": text,
                "unlockedText": unlocked_text,
                "finePrint": fine_print,
                "type": special_type,
                "count1": count1,
                "count2": count2,
                "count3": count3,
            },
        )
        return pluck(result, "special")

    def retire_special(self, special_id: str) -> Any:
        return self.post(f"specials/{special_id}/retire")

    def list_specials(self, venue_ids: IdList = None, status: str = "all") -> Any:
        """
        List specials for the given venues.

        Args:
            venue_ids: One or more venue ids.
            status: pending, active, expired or all.
        """
        return self.get(
            "specials/list",
            {"venueId": join_ids(venue_ids), "status": status},
        )

    def configuration_for_special(self, special_id: Union[str, int]) -> Any:
        """Special configuration details related to its campaign."""
        return pluck(self.get(f"specials/{special_id}"), "special")
