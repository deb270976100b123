"""Tests for configuration section models."""

import pytest

from cusiptool.config.models import CheckConfig


class TestCheckConfig:
    def test_defaults(self) -> None:
        cfg = CheckConfig()
        assert cfg.fix is False
        assert cfg.report_invalid is True
        assert cfg.skip_blank is False
        assert cfg.strip_whitespace is False

    def test_frozen(self) -> None:
        cfg = CheckConfig()
        with pytest.raises(Exception):
            cfg.fix = True  # type: ignore[misc]
