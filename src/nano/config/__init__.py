"""
Adapter Configuration Module

Provides endpoint and bidder-info configuration loaded from YAML.
"""

from .adapter_config import (
    AdapterConfig,
    AdapterConfigManager,
    BidderInfo,
    get_adapter_config_manager,
)

__all__ = [
    "AdapterConfig",
    "AdapterConfigManager",
    "BidderInfo",
    "get_adapter_config_manager",
]
