"""
Bid Adapter Module

Provides the NanoInteractive bid adapter and the registry the host uses
to construct adapters by bidder code.

Usage:
    from src.nano.adapters import build_bidder

    bidder = build_bidder("nanointeractive", "https://ad.audiencemanager.de/hbs")
    requests, errors = bidder.make_requests(bid_request)
"""

from typing import Callable

from ..config.adapter_config import AdapterConfigManager
from .base import Bidder
from .errors import (
    AdapterError,
    BadInputError,
    BadServerResponseError,
    NoValidImpressionsError,
)
from .nanointeractive import (
    NanoInteractiveAdapter,
    check_imp,
    create_headers,
    new_nano_interactive_adapter,
    new_nano_interactive_bidder,
)
from .types import (
    BidderResponse,
    BidType,
    ExtraRequestInfo,
    RequestData,
    ResponseData,
    TypedBid,
)

# Map of bidder codes to adapter constructors
ADAPTER_REGISTRY: dict[str, Callable[[str], Bidder]] = {
    "nanointeractive": new_nano_interactive_bidder,
}


def build_bidder(bidder_code: str, endpoint: str) -> Bidder:
    """Factory function to build the adapter for a bidder code."""
    builder = ADAPTER_REGISTRY.get(bidder_code.lower())
    if not builder:
        raise ValueError(f"Unknown bidder code: {bidder_code}")
    if not endpoint:
        raise ValueError(f"Endpoint required for bidder: {bidder_code}")
    return builder(endpoint)


def build_bidders(manager: AdapterConfigManager) -> dict[str, Bidder]:
    """Build every enabled, registered adapter from configuration."""
    return {
        config.bidder_code: build_bidder(config.bidder_code, config.endpoint)
        for config in manager.get_enabled()
        if config.bidder_code in ADAPTER_REGISTRY
    }


__all__ = [
    "ADAPTER_REGISTRY",
    "AdapterError",
    "BadInputError",
    "BadServerResponseError",
    "BidType",
    "Bidder",
    "BidderResponse",
    "ExtraRequestInfo",
    "NanoInteractiveAdapter",
    "NoValidImpressionsError",
    "RequestData",
    "ResponseData",
    "TypedBid",
    "build_bidder",
    "build_bidders",
    "check_imp",
    "create_headers",
    "new_nano_interactive_adapter",
    "new_nano_interactive_bidder",
]
