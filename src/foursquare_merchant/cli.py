"""
Foursquare Merchant - command line interface

Read-only queries against the merchant API, printed as JSON.
Credentials come from the FOURSQUARE_* environment variables.

    foursquare-merchant list-campaigns --status active
    foursquare-merchant campaign-timeseries 4e0debea922e6f94b1410bb7
    foursquare-merchant list-specials --venue-id v1 --venue-id v2
    foursquare-merchant special-config 4e0deab1922e6f94b1410af3
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from .client import MerchantClient
from .errors import MerchantAPIError
from .response import to_plain


STATUS_CHOICES = ["pending", "scheduled", "active", "expired", "notStarted", "all"]


def setup_logging(log_level: str) -> logging.Logger:
    logger = logging.getLogger("foursquare_merchant")
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.handlers.clear()

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.setLevel(logger.level)
    logger.addHandler(ch)

    return logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="foursquare-merchant",
        description="Query Foursquare merchant campaigns and specials",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: WARNING)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    lc = sub.add_parser("list-campaigns", help="List campaigns")
    lc.add_argument("--special-id", default=None)
    lc.add_argument("--group-id", action="append", default=None)
    lc.add_argument("--status", default="all", choices=STATUS_CHOICES)

    ts = sub.add_parser("campaign-timeseries", help="Campaign stats over a time range")
    ts.add_argument("campaign_id")
    ts.add_argument("--start-at", type=int, default=None, help="Seconds since epoch")
    ts.add_argument("--end-at", type=int, default=None, help="Seconds since epoch")

    ls = sub.add_parser("list-specials", help="List specials for venues")
    ls.add_argument("--venue-id", action="append", default=None)
    ls.add_argument("--status", default="all", choices=STATUS_CHOICES)

    sc = sub.add_parser("special-config", help="Special configuration details")
    sc.add_argument("special_id")

    return p.parse_args(argv)


def run_command(client: MerchantClient, args: argparse.Namespace) -> Any:
    if args.command == "list-campaigns":
        return client.list_campaigns(args.special_id, args.group_id, args.status)
    if args.command == "campaign-timeseries":
        return client.timeseries_for_campaign(args.campaign_id, args.start_at, args.end_at)
    if args.command == "list-specials":
        return client.list_specials(args.venue_id, args.status)
    if args.command == "special-config":
        return client.configuration_for_special(args.special_id)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = setup_logging(args.log_level)

    try:
        client = MerchantClient.from_env()
        result = run_command(client, args)
    except MerchantAPIError as e:
        logger.error("%s failed: %s", args.command, e)
        return 1

    print(json.dumps(to_plain(result), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
