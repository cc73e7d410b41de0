"""Tests for structlog configuration."""

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from tradeview.config import AppSettings
from tradeview.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger("tradeview")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_json_rendering(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(AppSettings(log_level="DEBUG", log_format="json"))
        get_logger("tradeview.test").debug("order_book_built", buy=2, sell=1)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "order_book_built"
        assert record["buy"] == 2
        assert record["level"] == "debug"
        assert record["logger"] == "tradeview.test"

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(AppSettings(log_level="INFO", log_format="json"))
        get_logger("tradeview.test").debug("candles_built", candles=3)

        assert "candles_built" not in capsys.readouterr().err

    def test_console_rendering(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(AppSettings(log_level="INFO", log_format="console"))
        get_logger("tradeview.test").info("views_ready", pair="DAPP/mETH")

        err = capsys.readouterr().err
        assert "views_ready" in err
        assert "pair=DAPP/mETH" in err
