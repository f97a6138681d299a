"""Adapter Constants and Configuration Values."""

BIDDER_CODE: str = "nanointeractive"
BIDDER_NAME: str = "Nano"

# Default partner endpoint, overridable through config/adapters.yaml
DEFAULT_ENDPOINT: str = "https://ad.audiencemanager.de/hbs"

# OpenRTB protocol version advertised to the partner
OPENRTB_VERSION: str = "2.5"

# Name of the partner cookie carrying user.buyeruid
PARTNER_COOKIE_NAME: str = "Nano"

# Outbound header names
HEADER_CONTENT_TYPE: str = "Content-Type"
HEADER_ACCEPT: str = "Accept"
HEADER_OPENRTB_VERSION: str = "X-Openrtb-Version"
HEADER_USER_AGENT: str = "User-Agent"
HEADER_FORWARDED_IP: str = "X-Forwarded-IP"
HEADER_REFERER: str = "Referer"
HEADER_COOKIE: str = "Cookie"

CONTENT_TYPE_JSON_UTF8: str = "application/json;charset=utf-8"
ACCEPT_JSON: str = "application/json"

# Headers sent on every outbound request
STATIC_HEADERS: dict[str, str] = {
    HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON_UTF8,
    HEADER_ACCEPT: ACCEPT_JSON,
    HEADER_OPENRTB_VERSION: OPENRTB_VERSION,
}

# HTTP status codes interpreted by the response parser
HTTP_OK: int = 200
HTTP_NO_CONTENT: int = 204
HTTP_BAD_REQUEST: int = 400

DEFAULT_CURRENCY: str = "USD"
