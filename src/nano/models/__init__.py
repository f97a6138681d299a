"""OpenRTB Models and Extension Types."""

from .ext import ExtImpBidder, ExtImpNanoInteractive
from .openrtb import (
    Banner,
    Bid,
    BidRequest,
    BidResponse,
    Device,
    Format,
    Imp,
    Publisher,
    SeatBid,
    Site,
    User,
)

__all__ = [
    "Banner",
    "Bid",
    "BidRequest",
    "BidResponse",
    "Device",
    "ExtImpBidder",
    "ExtImpNanoInteractive",
    "Format",
    "Imp",
    "Publisher",
    "SeatBid",
    "Site",
    "User",
]
