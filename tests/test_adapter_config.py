"""Tests for adapter configuration and the adapter registry."""

import pytest

from src.nano.adapters import (
    ADAPTER_REGISTRY,
    Bidder,
    NanoInteractiveAdapter,
    build_bidder,
    build_bidders,
)
from src.nano.config.adapter_config import AdapterConfigManager, BidderInfo
from src.nano.utils.constants import DEFAULT_ENDPOINT


class TestAdapterConfigManager:
    """Test YAML-backed adapter configuration."""

    @pytest.fixture(autouse=True)
    def clear_env(self, monkeypatch):
        """Make sure no endpoint override leaks in from the environment."""
        monkeypatch.delenv("ADAPTERS_NANOINTERACTIVE_ENDPOINT", raising=False)

    def test_load_from_yaml(self, tmp_path):
        """Test loading endpoints from a YAML file."""
        config_file = tmp_path / "adapters.yaml"
        config_file.write_text(
            "adapters:\n"
            "  nanointeractive:\n"
            "    endpoint: https://nano.example.com/hbs\n"
            "    enabled: true\n"
        )

        manager = AdapterConfigManager(config_path=str(config_file))
        config = manager.get("nanointeractive")

        assert config is not None
        assert config.endpoint == "https://nano.example.com/hbs"
        assert config.enabled is True

    def test_missing_file_uses_default_endpoint(self, tmp_path):
        """Test the built-in default endpoint."""
        manager = AdapterConfigManager(config_path=str(tmp_path / "missing.yaml"))

        assert manager.get("nanointeractive").endpoint == DEFAULT_ENDPOINT

    def test_env_override(self, tmp_path, monkeypatch):
        """Test that the environment overrides the file."""
        config_file = tmp_path / "adapters.yaml"
        config_file.write_text("adapters:\n  nanointeractive:\n    endpoint: https://file.example.com\n")
        monkeypatch.setenv("ADAPTERS_NANOINTERACTIVE_ENDPOINT", "https://env.example.com")

        manager = AdapterConfigManager(config_path=str(config_file))

        assert manager.get("nanointeractive").endpoint == "https://env.example.com"

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        """Test selecting the config file through NANO_ADAPTER_CONFIG."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("adapters:\n  nanointeractive:\n    enabled: false\n")
        monkeypatch.setenv("NANO_ADAPTER_CONFIG", str(config_file))

        manager = AdapterConfigManager()

        assert manager.config_path == config_file
        assert manager.get_enabled() == []

    def test_invalid_yaml(self, tmp_path):
        """Test that broken YAML is reported as ValueError."""
        config_file = tmp_path / "adapters.yaml"
        config_file.write_text("adapters: [unclosed\n")

        manager = AdapterConfigManager(config_path=str(config_file))

        with pytest.raises(ValueError):
            manager.load_all()

    def test_unknown_bidder_without_endpoint(self, tmp_path):
        """Test that a bidder without any endpoint is rejected."""
        config_file = tmp_path / "adapters.yaml"
        config_file.write_text("adapters:\n  otherdsp:\n    enabled: true\n")

        manager = AdapterConfigManager(config_path=str(config_file))

        with pytest.raises(ValueError, match="otherdsp"):
            manager.load_all()

    def test_reload(self, tmp_path):
        """Test that reload picks up file changes."""
        config_file = tmp_path / "adapters.yaml"
        config_file.write_text("adapters:\n  nanointeractive:\n    endpoint: https://one.example.com\n")
        manager = AdapterConfigManager(config_path=str(config_file))
        assert manager.get("nanointeractive").endpoint == "https://one.example.com"

        config_file.write_text("adapters:\n  nanointeractive:\n    endpoint: https://two.example.com\n")
        manager.reload()

        assert manager.get("nanointeractive").endpoint == "https://two.example.com"


class TestBidderInfo:
    """Test bidder-info metadata."""

    def test_shipped_bidder_info(self):
        """Test the bidder-info file shipped with the adapter."""
        info = AdapterConfigManager().load_bidder_info("nanointeractive")

        assert info.maintainer_email == "development@nanointeractive.com"
        assert info.site_media_types == ["banner"]
        assert info.app_media_types == ["banner"]

    def test_missing_bidder_info(self, tmp_path):
        """Test that an unknown bidder gets empty metadata."""
        manager = AdapterConfigManager(bidder_info_dir=str(tmp_path))

        info = manager.load_bidder_info("unknown")

        assert info == BidderInfo(bidder_code="unknown")


class TestAdapterRegistry:
    """Test building adapters by bidder code."""

    def test_registry_contains_nanointeractive(self):
        """Test the registered bidder codes."""
        assert "nanointeractive" in ADAPTER_REGISTRY

    def test_build_bidder(self):
        """Test building a registered adapter."""
        bidder = build_bidder("NanoInteractive", "https://nano.example.com")

        assert isinstance(bidder, NanoInteractiveAdapter)
        assert isinstance(bidder, Bidder)
        assert bidder.endpoint == "https://nano.example.com"

    def test_build_unknown_bidder(self):
        """Test that unknown bidder codes are rejected."""
        with pytest.raises(ValueError, match="Unknown bidder code"):
            build_bidder("nope", "https://example.com")

    def test_build_requires_endpoint(self):
        """Test that an endpoint is required."""
        with pytest.raises(ValueError, match="Endpoint required"):
            build_bidder("nanointeractive", "")

    def test_build_bidders_from_config(self, tmp_path, monkeypatch):
        """Test building every enabled adapter from configuration."""
        monkeypatch.delenv("ADAPTERS_NANOINTERACTIVE_ENDPOINT", raising=False)
        config_file = tmp_path / "adapters.yaml"
        config_file.write_text(
            "adapters:\n"
            "  nanointeractive:\n"
            "    endpoint: https://nano.example.com\n"
            "  otherdsp:\n"
            "    endpoint: https://other.example.com\n"
        )

        bidders = build_bidders(AdapterConfigManager(config_path=str(config_file)))

        assert list(bidders) == ["nanointeractive"]
        assert bidders["nanointeractive"].endpoint == "https://nano.example.com"
