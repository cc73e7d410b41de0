"""Tests for environment-driven settings."""

from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from tradeview.config import AppSettings, ViewSettings


class TestViewSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("VIEW_TIMEZONE", "VIEW_PAIR_FILTER", "VIEW_BUY_COLOR", "VIEW_SELL_COLOR"):
            monkeypatch.delenv(name, raising=False)
        settings = ViewSettings()

        assert settings.timezone == "UTC"
        assert settings.price_precision == 5
        assert settings.buy_color == "#25CE8F"
        assert settings.sell_color == "#F45353"
        assert settings.pair_filter == "strict"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIEW_TIMEZONE", "Europe/Berlin")
        monkeypatch.setenv("VIEW_PAIR_FILTER", "permissive")
        settings = ViewSettings()

        assert settings.tz == ZoneInfo("Europe/Berlin")
        assert settings.pair_filter == "permissive"

    def test_unknown_timezone_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ViewSettings(timezone="Mars/Olympus_Mons")

    def test_negative_price_precision_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ViewSettings(price_precision=-2)

    def test_zero_price_precision_allowed(self) -> None:
        assert ViewSettings(price_precision=0).price_precision == 0

    def test_unknown_pair_filter_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ViewSettings(pair_filter="loose")


class TestAppSettings:
    def test_nested_view_settings(self) -> None:
        settings = AppSettings(log_level="DEBUG", view=ViewSettings(timezone="Asia/Tokyo"))

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "console"
        assert settings.view.timezone == "Asia/Tokyo"
