"""
Impression Extension Models

imp.ext carries a generic per-bidder envelope:

    {"prebid": {...}, "bidder": {"pid": "...", "nid": "...", ...}}

The "bidder" block holds the NanoInteractive parameters. An explicit
"bidder": null decodes to an empty parameter block; a missing "bidder"
key does not decode at all.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictStr


def _null_as(empty):
    return BeforeValidator(lambda value: empty() if value is None else value)


class ExtImpBidder(BaseModel):
    """
    Generic per-bidder impression extension envelope.

    Attributes:
        bidder: Raw bidder-specific parameter block
        prebid: Host-specific extension data, passed through untouched
    """

    bidder: Any = None
    prebid: Optional[dict[str, Any]] = None

    @property
    def has_bidder(self) -> bool:
        """Check that the envelope names a bidder block, even a null one."""
        return "bidder" in self.model_fields_set

    @classmethod
    def from_ext(cls, raw: Any) -> "ExtImpBidder":
        """
        Decode imp.ext from a dict or raw JSON text/bytes.

        Raises:
            ValueError: If imp.ext is missing or not a parsable JSON object
        """
        if raw is None:
            raise ValueError("imp.ext is missing")
        try:
            if isinstance(raw, (str, bytes, bytearray)):
                return cls.model_validate_json(raw)
            return cls.model_validate(raw)
        except RecursionError as e:
            raise ValueError("imp.ext is nested too deeply") from e


class ExtImpNanoInteractive(BaseModel):
    """
    NanoInteractive parameters from imp.ext.bidder.

    Either pid or nid must be provided; the other is then optional.

    Attributes:
        pid: Placement (pixel) identifier
        nid: Network identifier
        nq: Search query terms
        category: Content category
        sub_id: Publisher sub identifier (wire name "subId")
        ref: Referrer of the page showing the impression
    """

    model_config = ConfigDict(populate_by_name=True)

    pid: Annotated[StrictStr, _null_as(str)] = ""
    nid: Annotated[StrictStr, _null_as(str)] = ""
    nq: Annotated[list[StrictStr], _null_as(list)] = Field(default_factory=list)
    category: Annotated[StrictStr, _null_as(str)] = ""
    sub_id: Annotated[StrictStr, _null_as(str)] = Field(default="", alias="subId")
    ref: Annotated[StrictStr, _null_as(str)] = ""

    @property
    def has_identifier(self) -> bool:
        """Check that a placement or network identifier is present."""
        return bool(self.pid or self.nid)

    @classmethod
    def from_ext(cls, bidder: Any) -> "ExtImpNanoInteractive":
        """
        Decode the imp.ext.bidder block; None (JSON null) is an empty block.

        Raises:
            ValueError: If the block is not an object, or a field has the wrong type
        """
        if bidder is None:
            return cls()
        return cls.model_validate(bidder)
