"""
Adapter Configuration Management

Loads bidder endpoints and bidder-info metadata from YAML files, with
environment variable overrides. Layout of the adapters file:

    adapters:
      nanointeractive:
        endpoint: https://ad.audiencemanager.de/hbs
        enabled: true
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..logging import config_logger
from ..utils.constants import BIDDER_CODE, DEFAULT_ENDPOINT

logger = config_logger()

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "adapters.yaml"
BIDDER_INFO_DIR = PROJECT_ROOT / "config" / "bidder-info"

# Built-in endpoints for bidders missing from the config file
DEFAULT_ENDPOINTS: dict[str, str] = {
    BIDDER_CODE: DEFAULT_ENDPOINT,
}


@dataclass
class AdapterConfig:
    """Configuration for a single bid adapter."""

    bidder_code: str
    endpoint: str
    enabled: bool = True


@dataclass
class BidderInfo:
    """Static metadata describing a bidder's maintainer and capabilities."""

    bidder_code: str
    maintainer_email: str = ""
    site_media_types: list[str] = field(default_factory=list)
    app_media_types: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, bidder_code: str, data: dict[str, Any]) -> "BidderInfo":
        """Create from a parsed bidder-info document."""
        maintainer = data.get("maintainer") or {}
        capabilities = data.get("capabilities") or {}
        site = capabilities.get("site") or {}
        app = capabilities.get("app") or {}
        return cls(
            bidder_code=bidder_code,
            maintainer_email=maintainer.get("email", ""),
            site_media_types=list(site.get("mediaTypes", [])),
            app_media_types=list(app.get("mediaTypes", [])),
        )


def _env_key(bidder_code: str) -> str:
    """Environment variable overriding a bidder's endpoint."""
    return f"ADAPTERS_{bidder_code.upper().replace('-', '_')}_ENDPOINT"


def _read_yaml(path: Path) -> dict[str, Any]:
    """
    Read a YAML mapping from disk.

    Raises:
        ValueError: If the file is not valid YAML or not a mapping
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"YAML error in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}")
    return data


class AdapterConfigManager:
    """
    Manages adapter configurations from YAML files.

    Supports loading from:
    - A single adapters YAML file
    - Environment variable overrides (ADAPTERS_<CODE>_ENDPOINT)
    - Built-in default endpoints
    """

    def __init__(self, config_path: str | None = None, bidder_info_dir: str | None = None):
        """
        Initialize the config manager.

        Args:
            config_path: Adapters YAML file. Defaults to $NANO_ADAPTER_CONFIG
                         or config/adapters.yaml
            bidder_info_dir: Directory of <bidder_code>.yaml bidder-info files
        """
        if config_path is None:
            config_path = os.environ.get("NANO_ADAPTER_CONFIG", str(DEFAULT_CONFIG_PATH))
        self.config_path = Path(config_path)
        self.bidder_info_dir = Path(bidder_info_dir) if bidder_info_dir else BIDDER_INFO_DIR
        self._cache: dict[str, AdapterConfig] = {}

    def load_all(self) -> dict[str, AdapterConfig]:
        """
        Load every adapter configuration.

        Bidders with a built-in default endpoint are always present, even
        when the file does not mention them.
        """
        file_data: dict[str, Any] = {}
        if self.config_path.exists():
            file_data = _read_yaml(self.config_path).get("adapters") or {}
        else:
            logger.info("Adapter config file not found, using defaults", path=str(self.config_path))

        codes = list(DEFAULT_ENDPOINTS)
        codes.extend(code for code in file_data if code not in DEFAULT_ENDPOINTS)

        configs = {}
        for code in codes:
            configs[code] = self._build(code, file_data.get(code) or {})

        self._cache = configs
        return configs

    def get(self, bidder_code: str) -> AdapterConfig | None:
        """
        Get configuration for a specific bidder.

        Args:
            bidder_code: The bidder's code

        Returns:
            AdapterConfig if known, None otherwise
        """
        if not self._cache:
            self.load_all()
        return self._cache.get(bidder_code)

    def get_enabled(self) -> list[AdapterConfig]:
        """Get configurations of enabled adapters."""
        if not self._cache:
            self.load_all()
        return [config for config in self._cache.values() if config.enabled]

    def reload(self) -> None:
        """Reload configurations from disk."""
        self._cache.clear()
        self.load_all()

    def load_bidder_info(self, bidder_code: str) -> BidderInfo:
        """
        Load static bidder-info metadata.

        Returns an empty BidderInfo if no file exists for the bidder.
        """
        path = self.bidder_info_dir / f"{bidder_code}.yaml"
        if not path.exists():
            return BidderInfo(bidder_code=bidder_code)
        return BidderInfo.from_dict(bidder_code, _read_yaml(path))

    def _build(self, bidder_code: str, data: dict[str, Any]) -> AdapterConfig:
        """Build one adapter config, applying env overrides and defaults."""
        if not isinstance(data, dict):
            raise ValueError(f"Adapter config for {bidder_code} must be a mapping")

        endpoint = (
            os.environ.get(_env_key(bidder_code))
            or data.get("endpoint")
            or DEFAULT_ENDPOINTS.get(bidder_code, "")
        )
        if not endpoint:
            raise ValueError(f"No endpoint configured for bidder: {bidder_code}")

        return AdapterConfig(
            bidder_code=bidder_code,
            endpoint=endpoint,
            enabled=data.get("enabled", True),
        )


# Global instance for easy access
_manager: AdapterConfigManager | None = None


def get_adapter_config_manager() -> AdapterConfigManager:
    """Get the global adapter config manager instance."""
    global _manager
    if _manager is None:
        _manager = AdapterConfigManager()
        _manager.load_all()
    return _manager
