#!/usr/bin/env python3
"""
Run the NanoInteractive adapter against local files.

Usage:
    python run_adapter.py build request.json
    python run_adapter.py parse response.json --status 200
    python run_adapter.py info
    python run_adapter.py build request.json --endpoint https://nano.example.com/hbs
"""

import argparse
import json
import sys
from pathlib import Path


def build(args, bidder) -> int:
    from src.nano.models import BidRequest

    bid_request = BidRequest.from_json(Path(args.file).read_bytes())
    requests, errors = bidder.make_requests(bid_request)

    for request in requests:
        print(json.dumps({
            "method": request.method,
            "uri": request.uri,
            "headers": request.headers,
            "body": json.loads(request.body),
        }, indent=2))
    for error in errors:
        print(f"error: {error}", file=sys.stderr)
    return 0 if requests else 1


def parse(args, bidder) -> int:
    from src.nano.adapters import RequestData, ResponseData
    from src.nano.models import BidRequest

    response = ResponseData(status_code=args.status, body=Path(args.file).read_bytes())
    external = RequestData(method="POST", uri=args.endpoint or "", body=b"")
    bidder_response, errors = bidder.make_bids(BidRequest(id=""), external, response)

    if bidder_response is not None:
        print(json.dumps({
            "currency": bidder_response.currency,
            "bids": [
                {"type": typed.bid_type.value, **typed.bid.to_dict()}
                for typed in bidder_response.bids
            ],
        }, indent=2))
    for error in errors:
        print(f"error: {error}", file=sys.stderr)
    return 1 if errors else 0


def info(args, manager) -> int:
    from src.nano.utils.constants import BIDDER_CODE

    bidder_info = manager.load_bidder_info(BIDDER_CODE)
    print(json.dumps({
        "bidder": BIDDER_CODE,
        "endpoint": args.endpoint or manager.get(BIDDER_CODE).endpoint,
        "maintainer": bidder_info.maintainer_email,
        "site_media_types": bidder_info.site_media_types,
        "app_media_types": bidder_info.app_media_types,
    }, indent=2))
    return 0


def main():
    parser = argparse.ArgumentParser(description="Run the NanoInteractive bid adapter")
    parser.add_argument("--endpoint", help="Partner endpoint (defaults to configuration)")
    parser.add_argument("--log-format", default="console", help="Log format: console or json")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("info", help="Show endpoint and bidder-info metadata")

    build_parser = subparsers.add_parser("build", help="Build the outbound request for a bid request")
    build_parser.add_argument("file", help="OpenRTB bid request JSON file")

    parse_parser = subparsers.add_parser("parse", help="Parse a partner response body")
    parse_parser.add_argument("file", help="Partner response body file")
    parse_parser.add_argument("--status", type=int, default=200, help="HTTP status of the response")

    args = parser.parse_args()

    from src.nano.adapters import build_bidder
    from src.nano.config import get_adapter_config_manager
    from src.nano.logging import configure_logging
    from src.nano.utils.constants import BIDDER_CODE

    configure_logging(format=args.log_format)

    try:
        manager = get_adapter_config_manager()
        if args.command == "info":
            sys.exit(info(args, manager))

        bidder = build_bidder(BIDDER_CODE, args.endpoint or manager.get(BIDDER_CODE).endpoint)
        if args.command == "build":
            sys.exit(build(args, bidder))
        sys.exit(parse(args, bidder))
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
