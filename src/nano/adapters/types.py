"""
Host plugin envelope types.

These are the values exchanged between the host's dispatch framework and a
bid adapter: the outbound HTTP request an adapter asks the host to send, the
raw HTTP response the host hands back, and the typed bids the adapter returns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..models.openrtb import Bid


class BidType(str, Enum):
    """Ad format of a returned bid."""

    BANNER = "banner"
    VIDEO = "video"
    AUDIO = "audio"
    NATIVE = "native"


@dataclass
class ExtraRequestInfo:
    """Host-supplied context that accompanies a bid request."""

    pbs_entry_point: str = ""
    global_privacy_control: bool = False
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class RequestData:
    """
    Outbound HTTP request built by an adapter.

    Attributes:
        method: HTTP method
        uri: Partner endpoint
        body: Serialized JSON body
        headers: HTTP headers to send
    """

    method: str
    uri: str
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class ResponseData:
    """Raw HTTP response received by the host from the partner."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class TypedBid:
    """A partner bid tagged with its ad format."""

    bid: Bid
    bid_type: BidType


@dataclass
class BidderResponse:
    """Bids returned by one adapter for one outbound request."""

    currency: str = "USD"
    bids: list[TypedBid] = field(default_factory=list)
