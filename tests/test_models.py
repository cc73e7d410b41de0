"""Tests for token, order and view data models."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from tradeview.exceptions import OrderRecordError, TokenRecordError, TradeViewError
from tradeview.models import (
    CandlePoint,
    DecoratedOrder,
    Order,
    OrderSide,
    PriceChange,
    PriceChartView,
    Token,
    TokenPair,
)


def _raw_order(**overrides) -> dict:
    data = {
        "id": 1,
        "tokenGet": "0xA",
        "amountGet": "4000000000000000000000",
        "tokenGive": "0xB",
        "amountGive": 2 * 10**18,
        "timestamp": 1000,
    }
    data.update(overrides)
    return data


class TestToken:
    def test_from_dict(self) -> None:
        token = Token.from_dict({"address": "0xA", "symbol": "USDC", "decimals": "6"})
        assert token == Token(address="0xA", symbol="USDC", decimals=6)

    def test_from_dict_defaults(self) -> None:
        token = Token.from_dict({"address": "0xA"})
        assert token.decimals == 18
        assert token.symbol == ""

    def test_missing_address_raises(self) -> None:
        with pytest.raises(TokenRecordError):
            Token.from_dict({"symbol": "X"})

    def test_bad_decimals_raises(self) -> None:
        with pytest.raises(TokenRecordError):
            Token.from_dict({"address": "0xA", "decimals": "eighteen"})

    def test_same_as_compares_address(self) -> None:
        token = Token(address="0xA", symbol="A")
        assert token.same_as("0xA")
        assert not token.same_as("0xB")
        assert not token.same_as(None)


class TestTokenPair:
    def test_default_not_ready(self) -> None:
        assert not TokenPair().is_ready

    def test_ready_with_both(self) -> None:
        assert TokenPair(Token("0xA"), Token("0xB")).is_ready

    def test_from_list_accepts_dicts_and_tokens(self) -> None:
        pair = TokenPair.from_list([{"address": "0xA"}, Token("0xB")])
        assert pair.token0 == Token("0xA")
        assert pair.token1 == Token("0xB")

    def test_from_list_short_or_missing(self) -> None:
        assert TokenPair.from_list(None) == TokenPair()
        assert TokenPair.from_list([{"address": "0xA"}]).token1 is None


class TestOrderFromDict:
    """Tests for Order.from_dict."""

    def test_parses_camel_case_keys(self) -> None:
        order = Order.from_dict(_raw_order())

        assert order.token_get == "0xA"
        assert order.amount_get == 4000 * 10**18
        assert order.token_give == "0xB"
        assert order.amount_give == 2 * 10**18
        assert order.timestamp == 1000

    def test_integral_float_accepted(self) -> None:
        assert Order.from_dict(_raw_order(amountGive=2e18)).amount_give == 2 * 10**18

    def test_fractional_amount_rejected(self) -> None:
        with pytest.raises(OrderRecordError):
            Order.from_dict(_raw_order(amountGet=1.5))

    def test_non_numeric_amount_rejected(self) -> None:
        with pytest.raises(OrderRecordError):
            Order.from_dict(_raw_order(amountGet="lots"))

    def test_bool_amount_rejected(self) -> None:
        with pytest.raises(OrderRecordError):
            Order.from_dict(_raw_order(amountGet=True))

    def test_missing_field_raises(self) -> None:
        data = _raw_order()
        del data["tokenGive"]
        with pytest.raises(OrderRecordError, match="tokenGive"):
            Order.from_dict(data)

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(TradeViewError):
            Order.from_dict({})

    def test_key_is_string_form(self) -> None:
        assert Order.from_dict(_raw_order(id=5)).key == Order.from_dict(_raw_order(id="5")).key

    def test_to_dict_round_trip_keys(self) -> None:
        raw = _raw_order(amountGet=10, amountGive=20)
        assert Order.from_dict(raw).to_dict() == raw


class TestOrderSide:
    def test_opposite(self) -> None:
        assert OrderSide.BUY.opposite is OrderSide.SELL
        assert OrderSide.SELL.opposite is OrderSide.BUY

    def test_values(self) -> None:
        assert OrderSide.BUY == "buy"
        assert PriceChange.UP == "+"
        assert PriceChange.DOWN == "-"


class TestDecoratedOrderToDict:
    def test_includes_trend_class_only_when_set(self) -> None:
        order = DecoratedOrder(
            id=1, token_get="0xA", amount_get=1, token_give="0xB", amount_give=1,
            timestamp=0, token_price=Decimal("1"), token_price_class="#25CE8F",
        )
        data = order.to_dict()

        assert data["tokenPriceClass"] == "#25CE8F"
        assert "orderType" not in data
        assert data["token0Amount"] == "0.0"

    def test_non_finite_price_left_unserialized(self) -> None:
        order = DecoratedOrder(
            id=1, token_get="0xA", amount_get=0, token_give="0xB", amount_give=0,
            timestamp=0, token_price=Decimal("NaN"),
        )
        price = order.to_dict()["tokenPrice"]

        assert isinstance(price, Decimal)
        assert price.is_nan()


class TestPriceChartViewToDict:
    def test_series_wraps_candles(self) -> None:
        candle = CandlePoint(
            x=datetime(1970, 1, 1, tzinfo=timezone.utc),
            y=(Decimal("1"), Decimal("3"), Decimal("1"), Decimal("2")),
        )
        view = PriceChartView(
            last_price=Decimal("2"),
            second_last_price=Decimal("1"),
            last_price_change=PriceChange.UP,
            candles=[candle],
        )

        assert view.to_dict() == {
            "lastPrice": Decimal("2"),
            "lastPriceChange": "+",
            "series": [{"data": [{"x": candle.x, "y": list(candle.y)}]}],
        }
