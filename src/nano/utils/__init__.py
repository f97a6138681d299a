"""Adapter Utilities."""

from .constants import (
    BIDDER_CODE,
    BIDDER_NAME,
    DEFAULT_ENDPOINT,
    OPENRTB_VERSION,
    PARTNER_COOKIE_NAME,
    STATIC_HEADERS,
)

__all__ = [
    'BIDDER_CODE',
    'BIDDER_NAME',
    'DEFAULT_ENDPOINT',
    'OPENRTB_VERSION',
    'PARTNER_COOKIE_NAME',
    'STATIC_HEADERS',
]
