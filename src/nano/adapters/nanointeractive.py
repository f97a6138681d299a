"""
NanoInteractive bid adapter.

Translates the host's OpenRTB 2.5 bid request into a single POST to the
NanoInteractive endpoint and turns the partner's response back into typed
banner bids. Only banner impressions are supported.
"""

from typing import Optional

from ..logging import LogContext, bidder_logger
from ..models.ext import ExtImpBidder, ExtImpNanoInteractive
from ..models.openrtb import BidRequest, BidResponse, Imp, Site
from ..utils.constants import (
    BIDDER_CODE,
    BIDDER_NAME,
    DEFAULT_CURRENCY,
    HEADER_COOKIE,
    HEADER_FORWARDED_IP,
    HEADER_REFERER,
    HEADER_USER_AGENT,
    HTTP_BAD_REQUEST,
    HTTP_NO_CONTENT,
    HTTP_OK,
    PARTNER_COOKIE_NAME,
    STATIC_HEADERS,
)
from .base import Bidder
from .errors import BadInputError, BadServerResponseError, NoValidImpressionsError
from .types import (
    BidderResponse,
    BidType,
    ExtraRequestInfo,
    RequestData,
    ResponseData,
    TypedBid,
)

logger = bidder_logger(BIDDER_CODE)


class NanoInteractiveAdapter(Bidder):
    """
    Bid adapter for the NanoInteractive demand partner.

    The endpoint is fixed at construction; translation calls never write
    instance state, so one adapter can serve concurrent requests.
    """

    def __init__(self, endpoint: str):
        """
        Initialize the adapter.

        Args:
            endpoint: Partner URL every outbound request is POSTed to
        """
        self._endpoint = endpoint

    @property
    def endpoint(self) -> str:
        """Partner endpoint URL."""
        return self._endpoint

    def name(self) -> str:
        return BIDDER_NAME

    def skip_no_cookies(self) -> bool:
        return False

    def make_requests(
        self,
        bid_request: BidRequest,
        req_info: Optional[ExtraRequestInfo] = None,
    ) -> tuple[list[RequestData], list[Exception]]:
        """
        Build the outbound request for a bid request.

        Invalid impressions are dropped with one error each. The request is
        sent only if at least one impression survives.

        Args:
            bid_request: Host bid request (not modified)
            req_info: Host request context (unused by this partner)

        Returns:
            Tuple of (zero or one RequestData, errors)
        """
        with LogContext(request_id=bid_request.id):
            return self._build_requests(bid_request)

    def _build_requests(
        self, bid_request: BidRequest
    ) -> tuple[list[RequestData], list[Exception]]:
        errors: list[Exception] = []
        valid_imps: list[Imp] = []
        referrer = ""

        for imp in bid_request.imp:
            try:
                ref = check_imp(imp)
            except BadInputError as e:
                logger.debug("Impression dropped", imp_id=imp.id, reason=e.message)
                errors.append(e)
                continue

            if not referrer and ref:
                referrer = ref
            valid_imps.append(imp)

        if not valid_imps:
            logger.warning("No valid impressions", dropped=len(errors))
            errors.append(NoValidImpressionsError())
            return [], errors

        update: dict = {"imp": valid_imps}

        # The first impression-level referrer always wins over site.ref
        if referrer:
            site = bid_request.site
            update["site"] = (
                site.model_copy(update={"ref": referrer}) if site else Site(ref=referrer)
            )

        outbound = bid_request.model_copy(update=update)

        try:
            body = outbound.to_json()
        except (TypeError, ValueError, RecursionError) as e:
            logger.error("Bid request serialization failed", error=str(e))
            errors.append(BadInputError(f"failed to serialize bid request: {e}"))
            return [], errors

        request = RequestData(
            method="POST",
            uri=self._endpoint,
            body=body,
            headers=create_headers(outbound),
        )
        return [request], errors

    def make_bids(
        self,
        internal_request: BidRequest,
        external_request: RequestData,
        response: ResponseData,
    ) -> tuple[Optional[BidderResponse], list[Exception]]:
        """
        Translate the partner response into banner bids.

        Args:
            internal_request: The host bid request the call was made for
            external_request: The outbound request that was sent
            response: Raw partner response

        Returns:
            Tuple of (BidderResponse or None, errors)
        """
        with LogContext(request_id=internal_request.id):
            return self._parse_response(response)

    def _parse_response(
        self, response: ResponseData
    ) -> tuple[Optional[BidderResponse], list[Exception]]:
        status = response.status_code

        if status == HTTP_NO_CONTENT:
            return None, []

        if status == HTTP_BAD_REQUEST:
            logger.warning("Partner rejected request", status_code=status)
            return None, [BadInputError("Invalid request.")]

        if status != HTTP_OK:
            logger.warning("Unexpected partner status", status_code=status)
            return None, [
                BadServerResponseError(
                    f"unexpected HTTP status {status}.", status_code=status
                )
            ]

        try:
            bid_response = BidResponse.from_json(response.body)
        except ValueError as e:
            logger.warning("Unparsable partner response", error=str(e))
            return None, [
                BadServerResponseError("bad server body response", status_code=status)
            ]

        bidder_response = BidderResponse(currency=bid_response.cur or DEFAULT_CURRENCY)

        # Only the first seat is read; an empty seatbid list means no bids
        if not bid_response.seatbid:
            return bidder_response, []

        for bid in bid_response.seatbid[0].bid:
            if bid.price > 0:
                bidder_response.bids.append(TypedBid(bid=bid, bid_type=BidType.BANNER))

        logger.debug(
            "Partner bids parsed",
            received=len(bid_response.seatbid[0].bid),
            kept=len(bidder_response.bids),
            currency=bidder_response.currency,
        )
        return bidder_response, []


def check_imp(imp: Imp) -> str:
    """
    Validate one impression for NanoInteractive.

    Args:
        imp: Impression to validate

    Returns:
        The impression-level referrer, or "" if none was given

    Raises:
        BadInputError: If the impression cannot be sent to the partner
    """
    if imp.banner is None:
        raise BadInputError(
            f"invalid MediaType. NanoInteractive only supports Banner type. ImpID={imp.id}"
        )

    try:
        bidder_ext = ExtImpBidder.from_ext(imp.ext)
    except ValueError:
        raise BadInputError(f"ext not provided; ImpID={imp.id}")

    if not bidder_ext.has_bidder:
        raise BadInputError(f"ext.bidder not provided; ImpID={imp.id}")

    try:
        nano_ext = ExtImpNanoInteractive.from_ext(bidder_ext.bidder)
    except ValueError:
        raise BadInputError(f"ext.bidder not provided; ImpID={imp.id}")

    if not nano_ext.has_identifier:
        raise BadInputError(
            f"pid and nid are empty, one of them must be provided; ImpID={imp.id}"
        )

    return nano_ext.ref


def create_headers(bid_request: BidRequest) -> dict[str, str]:
    """
    Build the outbound headers for a bid request.

    Device, site and user derived headers are only set when the source
    field is non-empty.
    """
    headers = dict(STATIC_HEADERS)

    device = bid_request.device
    if device is not None:
        if device.ua:
            headers[HEADER_USER_AGENT] = device.ua
        if device.ip:
            headers[HEADER_FORWARDED_IP] = device.ip

    if bid_request.site is not None and bid_request.site.page:
        headers[HEADER_REFERER] = bid_request.site.page

    if bid_request.user is not None and bid_request.user.buyeruid:
        headers[HEADER_COOKIE] = f"{PARTNER_COOKIE_NAME}={bid_request.user.buyeruid}"

    return headers


def new_nano_interactive_bidder(endpoint: str) -> NanoInteractiveAdapter:
    """Create the adapter from the configured bidder endpoint."""
    return NanoInteractiveAdapter(endpoint=endpoint)


def new_nano_interactive_adapter(uri: str) -> NanoInteractiveAdapter:
    """Create the adapter from a partner URI."""
    return NanoInteractiveAdapter(endpoint=uri)
