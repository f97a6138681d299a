"""Bidder interface shared by every bid adapter the host can dispatch to."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.openrtb import BidRequest
from .types import BidderResponse, ExtraRequestInfo, RequestData, ResponseData


class Bidder(ABC):
    """
    Abstract base class for bid adapters.

    The host calls make_requests() to turn its bid request into outbound HTTP
    requests, sends them, and hands each response to make_bids(). Both calls
    return their errors instead of raising, so a partial failure still yields
    usable results.
    """

    @abstractmethod
    def make_requests(
        self,
        bid_request: BidRequest,
        req_info: Optional[ExtraRequestInfo] = None,
    ) -> tuple[list[RequestData], list[Exception]]:
        """Build the outbound HTTP requests for a bid request."""
        pass

    @abstractmethod
    def make_bids(
        self,
        internal_request: BidRequest,
        external_request: RequestData,
        response: ResponseData,
    ) -> tuple[Optional[BidderResponse], list[Exception]]:
        """Translate a partner HTTP response into typed bids."""
        pass

    @abstractmethod
    def name(self) -> str:
        """Human-readable adapter name."""
        pass

    def skip_no_cookies(self) -> bool:
        """Whether the host should skip this bidder for users without a partner cookie."""
        return False
