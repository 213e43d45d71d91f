"""Tests for signpost.config — RouterConfig frozen dataclass."""

import pytest

from signpost.config import RouterConfig


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.strict_params is False
        assert cfg.indexed is False
        assert cfg.log_misses is False
        assert cfg.offload_sync_handlers is False

    def test_override(self) -> None:
        cfg = RouterConfig(strict_params=True, indexed=True, log_misses=True)

        assert cfg.strict_params is True
        assert cfg.indexed is True
        assert cfg.log_misses is True

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.indexed = True  # type: ignore[misc]
