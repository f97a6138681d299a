"""
NanoInteractive bid adapter for an OpenRTB 2.5 exchange host.

Translates the host's bid requests into NanoInteractive HTTP requests and
the partner's responses back into typed banner bids.
"""

from .adapters import (
    Bidder,
    BidderResponse,
    BidType,
    NanoInteractiveAdapter,
    RequestData,
    ResponseData,
    TypedBid,
    build_bidder,
)
from .models import BidRequest, BidResponse

__version__ = '1.0.0'

__all__ = [
    'Bidder',
    'BidderResponse',
    'BidRequest',
    'BidResponse',
    'BidType',
    'NanoInteractiveAdapter',
    'RequestData',
    'ResponseData',
    'TypedBid',
    'build_bidder',
]
