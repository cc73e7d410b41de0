"""Configuration system using pydantic-settings with environment variable loading."""

from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ViewSettings(BaseSettings):
    """Presentation parameters shared by every view selector.

    Pins the reference time zone used for hour bucketing and timestamp
    formatting so candle boundaries are identical across environments.
    All fields configurable via VIEW_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="VIEW_")

    timezone: str = "UTC"
    price_precision: int = Field(default=5, ge=0)  # decimal places kept on token_price
    buy_color: str = "#25CE8F"  # also the "price up" trend color
    sell_color: str = "#F45353"  # also the "price down" trend color
    pair_filter: Literal["strict", "permissive"] = "strict"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {value!r}") from e
        return value

    @property
    def tz(self) -> ZoneInfo:
        """Resolved reference time zone."""
        return ZoneInfo(self.timezone)


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    view: ViewSettings = ViewSettings()
