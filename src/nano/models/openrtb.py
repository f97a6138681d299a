"""
OpenRTB 2.5 Bid Request / Response Models

These pydantic models mirror the subset of the OpenRTB 2.5 objects the
adapter reads or forwards. Objects the adapter never inspects (app, regs,
source, video, native, ...) are carried as plain dictionaries and passed
through. Unknown fields are ignored on input.

Scalars are strictly typed: a string where a number belongs (or the
reverse) fails validation with pydantic.ValidationError, a ValueError.

Serialization follows the OpenRTB wire convention: fields that are None,
empty strings or empty lists are omitted from the JSON output, except the
ones the wire format requires (ids, bid price). Empty objects are kept, so
a bare banner still serializes as "banner": {}.

Reference: https://github.com/InteractiveAdvertisingBureau/openrtb2.x
"""

import json
from typing import Annotated, Any, ClassVar, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    Field,
    StrictInt,
    StrictStr,
    field_serializer,
    model_serializer,
)


def _number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("must be a number")
    try:
        return float(value)
    except OverflowError as e:
        raise ValueError("number out of range") from e


Number = Annotated[float, BeforeValidator(_number)]


def _raw_json(value: Any) -> Any:
    """Decode an undecoded JSON extension blob so it can be embedded."""
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return json.loads(value)
    return value


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list)) and not value)


class OpenRTBObject(BaseModel):
    """Common base: pass-through ext and omit-empty serialization."""

    # Keys emitted even when empty
    wire_required: ClassVar[frozenset[str]] = frozenset()

    ext: Any = None

    @field_serializer("ext")
    def serialize_ext(self, ext: Any) -> Any:
        return _raw_json(ext)

    @model_serializer(mode="wrap")
    def omit_empty(self, handler) -> dict[str, Any]:
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if key in self.wire_required or not _is_empty(value)
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.model_dump()


# ============================================================================
# Bid Request objects
# ============================================================================

class Format(OpenRTBObject):
    """Allowed banner size (Section 3.2.10)."""

    w: Optional[StrictInt] = None
    h: Optional[StrictInt] = None


class Banner(OpenRTBObject):
    """Banner impression descriptor (Section 3.2.6)."""

    format: list[Format] = Field(default_factory=list)
    w: Optional[StrictInt] = None
    h: Optional[StrictInt] = None
    id: Optional[StrictStr] = None
    pos: Optional[StrictInt] = None
    mimes: list[StrictStr] = Field(default_factory=list)


class Imp(OpenRTBObject):
    """
    Impression object (Section 3.2.4).

    Attributes:
        id: Impression identifier, unique within the request
        banner: Banner descriptor; None when the slot is not a banner
        ext: Per-adapter extension blob, raw JSON (str/bytes) or decoded dict
    """

    wire_required: ClassVar[frozenset[str]] = frozenset({"id"})

    id: StrictStr = ""
    banner: Optional[Banner] = None
    video: Optional[dict[str, Any]] = None
    audio: Optional[dict[str, Any]] = None
    native: Optional[dict[str, Any]] = None
    tagid: Optional[StrictStr] = None
    bidfloor: Optional[Number] = None
    bidfloorcur: Optional[StrictStr] = None
    secure: Optional[StrictInt] = None
    pmp: Optional[dict[str, Any]] = None


class Publisher(OpenRTBObject):
    """Publisher of the site or app (Section 3.2.15)."""

    id: Optional[StrictStr] = None
    name: Optional[StrictStr] = None
    domain: Optional[StrictStr] = None


class Site(OpenRTBObject):
    """Website the impression is shown on (Section 3.2.13)."""

    id: Optional[StrictStr] = None
    name: Optional[StrictStr] = None
    domain: Optional[StrictStr] = None
    cat: list[StrictStr] = Field(default_factory=list)
    page: Optional[StrictStr] = None
    ref: Optional[StrictStr] = None
    search: Optional[StrictStr] = None
    keywords: Optional[StrictStr] = None
    publisher: Optional[Publisher] = None


class Device(OpenRTBObject):
    """Device the impression is delivered to (Section 3.2.18)."""

    ua: Optional[StrictStr] = None
    ip: Optional[StrictStr] = None
    ipv6: Optional[StrictStr] = None
    geo: Optional[dict[str, Any]] = None
    devicetype: Optional[StrictInt] = None
    make: Optional[StrictStr] = None
    model: Optional[StrictStr] = None
    os: Optional[StrictStr] = None
    osv: Optional[StrictStr] = None
    language: Optional[StrictStr] = None
    dnt: Optional[StrictInt] = None
    lmt: Optional[StrictInt] = None
    ifa: Optional[StrictStr] = None
    connectiontype: Optional[StrictInt] = None


class User(OpenRTBObject):
    """Human user of the device (Section 3.2.20)."""

    id: Optional[StrictStr] = None
    buyeruid: Optional[StrictStr] = None
    yob: Optional[StrictInt] = None
    gender: Optional[StrictStr] = None
    keywords: Optional[StrictStr] = None


class BidRequest(OpenRTBObject):
    """
    Top-level bid request (Section 3.2.1).

    The host owns this object; the adapter only reads it and builds
    filtered copies for the outbound request.
    """

    wire_required: ClassVar[frozenset[str]] = frozenset({"id"})

    id: StrictStr = ""
    imp: list[Imp] = Field(default_factory=list)
    site: Optional[Site] = None
    app: Optional[dict[str, Any]] = None
    device: Optional[Device] = None
    user: Optional[User] = None
    test: Optional[StrictInt] = None
    at: Optional[StrictInt] = None
    tmax: Optional[StrictInt] = None
    wseat: list[StrictStr] = Field(default_factory=list)
    cur: list[StrictStr] = Field(default_factory=list)
    bcat: list[StrictStr] = Field(default_factory=list)
    badv: list[StrictStr] = Field(default_factory=list)
    source: Optional[dict[str, Any]] = None
    regs: Optional[dict[str, Any]] = None

    def to_json(self) -> bytes:
        """
        Serialize to the OpenRTB wire form.

        Raises:
            TypeError: If an extension holds a value JSON cannot encode
            ValueError: If a value is NaN/Infinity or a raw extension is not valid JSON
        """
        return json.dumps(
            self.to_dict(), separators=(",", ":"), allow_nan=False
        ).encode("utf-8")

    @classmethod
    def from_json(cls, body: str | bytes) -> "BidRequest":
        """
        Create from a JSON document.

        Raises:
            ValueError: If the document is not valid JSON or does not match the schema
        """
        return cls.model_validate_json(body)


# ============================================================================
# Bid Response objects
# ============================================================================

class Bid(OpenRTBObject):
    """Single bid for one impression (Section 4.2.3)."""

    # price is required and may legitimately be zero
    wire_required: ClassVar[frozenset[str]] = frozenset({"id", "impid", "price"})

    id: StrictStr = ""
    impid: StrictStr = ""
    price: Number = Field(default=0.0, allow_inf_nan=False)
    adm: Optional[StrictStr] = None
    nurl: Optional[StrictStr] = None
    adid: Optional[StrictStr] = None
    adomain: list[StrictStr] = Field(default_factory=list)
    iurl: Optional[StrictStr] = None
    cid: Optional[StrictStr] = None
    crid: Optional[StrictStr] = None
    cat: list[StrictStr] = Field(default_factory=list)
    dealid: Optional[StrictStr] = None
    w: Optional[StrictInt] = None
    h: Optional[StrictInt] = None


class SeatBid(OpenRTBObject):
    """Group of bids from one bidder seat (Section 4.2.2)."""

    bid: list[Bid] = Field(default_factory=list)
    seat: Optional[StrictStr] = None
    group: Optional[StrictInt] = None


class BidResponse(OpenRTBObject):
    """Top-level bid response (Section 4.2.1)."""

    wire_required: ClassVar[frozenset[str]] = frozenset({"id"})

    id: StrictStr = ""
    seatbid: list[SeatBid] = Field(default_factory=list)
    bidid: Optional[StrictStr] = None
    cur: Optional[StrictStr] = None
    customdata: Optional[StrictStr] = None
    nbr: Optional[StrictInt] = None

    @classmethod
    def from_json(cls, body: str | bytes) -> "BidResponse":
        """
        Parse a bid response body.

        Raises:
            ValueError: If the body is not valid JSON or does not match the schema
        """
        try:
            return cls.model_validate_json(body)
        except (OverflowError, RecursionError) as e:
            raise ValueError(f"bid response is not decodable: {e}") from e
