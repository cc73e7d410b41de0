"""Data models for token metadata, raw order records and derived views.

CRITICAL: Amounts stay integers in base units and prices use Decimal.
Never use float for amounts or prices.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from tradeview.exceptions import OrderRecordError, TokenRecordError

DEFAULT_DECIMALS = 18


class OrderSide(str, Enum):
    """Order-book side, seen from the pair's first token."""

    BUY = "buy"
    SELL = "sell"

    @property
    def opposite(self) -> "OrderSide":
        return OrderSide.SELL if self is OrderSide.BUY else OrderSide.BUY


class PriceChange(str, Enum):
    """Direction of the last traded price against the one before it."""

    UP = "+"
    DOWN = "-"


@dataclass(frozen=True)
class Token:
    """ERC-20 style token metadata. Identity is the contract address."""

    address: str
    symbol: str = ""
    decimals: int = DEFAULT_DECIMALS

    def same_as(self, address: str | None) -> bool:
        return address is not None and self.address == address

    @classmethod
    def from_dict(cls, data: dict) -> "Token":
        try:
            decimals = data.get("decimals", DEFAULT_DECIMALS)
            return cls(
                address=data["address"],
                symbol=data.get("symbol", ""),
                decimals=int(decimals),
            )
        except KeyError as e:
            raise TokenRecordError(f"Missing required field in Token: {e}") from e
        except (TypeError, ValueError) as e:
            raise TokenRecordError(f"Invalid decimals in Token: {e}") from e


@dataclass(frozen=True)
class TokenPair:
    """The selected trading pair. Either side is None until the user picks one."""

    token0: Token | None = None
    token1: Token | None = None

    @property
    def is_ready(self) -> bool:
        return self.token0 is not None and self.token1 is not None

    @classmethod
    def from_list(cls, tokens: list[Any] | None) -> "TokenPair":
        """Build a pair from a ``[token0, token1]`` list of dicts or Tokens."""
        tokens = list(tokens or [])
        parsed: list[Token | None] = []
        for raw in (tokens + [None, None])[:2]:
            if raw is None or isinstance(raw, Token):
                parsed.append(raw)
            else:
                parsed.append(Token.from_dict(raw))
        return cls(token0=parsed[0], token1=parsed[1])


def _parse_amount(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise OrderRecordError(f"Invalid {name} in Order: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise OrderRecordError(f"Non-integer {name} in Order: {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise OrderRecordError(f"Invalid {name} in Order: {value!r}") from e


@dataclass(frozen=True)
class Order:
    """A raw order as recorded in the exchange's order log.

    Orders are immutable facts. The same record may later be referenced by
    id from the filled or the cancelled log, never both.
    """

    id: int | str
    token_get: str
    amount_get: int  # base units
    token_give: str
    amount_give: int  # base units
    timestamp: int  # unix seconds

    @property
    def key(self) -> str:
        """Canonical id form, robust to int/str representation mismatches."""
        return str(self.id)

    @classmethod
    def from_dict(cls, data: dict) -> "Order":
        """Parse a raw log entry using the source's camelCase keys."""
        try:
            return cls(
                id=data["id"],
                token_get=data["tokenGet"],
                amount_get=_parse_amount("amountGet", data["amountGet"]),
                token_give=data["tokenGive"],
                amount_give=_parse_amount("amountGive", data["amountGive"]),
                timestamp=_parse_amount("timestamp", data["timestamp"]),
            )
        except KeyError as e:
            raise OrderRecordError(f"Missing required field in Order: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "tokenGet": self.token_get,
            "amountGet": self.amount_get,
            "tokenGive": self.token_give,
            "amountGive": self.amount_give,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class DecoratedOrder(Order):
    """A raw order plus display fields derived from the selected pair.

    ``token0_amount`` is the leg denominated in the pair's second token and
    ``token1_amount`` the leg denominated in the first, so ``token_price`` is
    the price of the second token quoted in the first.
    """

    token0_amount: str = "0.0"
    token1_amount: str = "0.0"
    token_price: Decimal = Decimal("0")
    formatted_timestamp: str = ""

    # Order-book context
    order_type: OrderSide | None = None
    order_type_class: str | None = None
    order_fill_action: OrderSide | None = None

    # Trade-history context; None when the trend is undefined (NaN price)
    token_price_class: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """camelCase rendering shape.

        ``tokenPrice`` stays a Decimal (possibly Infinity or NaN); serializing
        it is left to the caller.
        """
        data = super().to_dict()
        data.update(
            token0Amount=self.token0_amount,
            token1Amount=self.token1_amount,
            tokenPrice=self.token_price,
            formattedTimestamp=self.formatted_timestamp,
        )
        if self.order_type is not None:
            data["orderType"] = self.order_type.value
            data["orderTypeClass"] = self.order_type_class
            data["orderFillAction"] = self.order_fill_action.value if self.order_fill_action else None
        if self.token_price_class is not None:
            data["tokenPriceClass"] = self.token_price_class
        return data


@dataclass(frozen=True)
class CandlePoint:
    """One hourly OHLC candle: ``x`` is the bucket start, ``y`` is (o, h, l, c)."""

    x: datetime
    y: tuple[Decimal, Decimal, Decimal, Decimal]

    @property
    def open(self) -> Decimal:
        return self.y[0]

    @property
    def high(self) -> Decimal:
        return self.y[1]

    @property
    def low(self) -> Decimal:
        return self.y[2]

    @property
    def close(self) -> Decimal:
        return self.y[3]

    def to_dict(self) -> dict[str, Any]:
        """``x`` stays a tz-aware datetime and ``y`` a list of Decimals."""
        return {"x": self.x, "y": list(self.y)}


@dataclass
class OrderBookView:
    """Open orders for the selected pair, grouped by side.

    ``buy``/``sell`` keep the partition in log order; ``buy_orders`` and
    ``sell_orders`` are the same groups sorted by price, highest first.
    """

    buy: list[DecoratedOrder] = field(default_factory=list)
    sell: list[DecoratedOrder] = field(default_factory=list)
    buy_orders: list[DecoratedOrder] = field(default_factory=list)
    sell_orders: list[DecoratedOrder] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "buy": [o.to_dict() for o in self.buy],
            "sell": [o.to_dict() for o in self.sell],
            "buyOrders": [o.to_dict() for o in self.buy_orders],
            "sellOrders": [o.to_dict() for o in self.sell_orders],
        }


@dataclass
class PriceChartView:
    """Latest price summary plus the hourly candlestick series."""

    last_price: Decimal
    second_last_price: Decimal
    last_price_change: PriceChange
    candles: list[CandlePoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Chart shape; Decimal and datetime values are not serialized."""
        return {
            "lastPrice": self.last_price,
            "lastPriceChange": self.last_price_change.value,
            "series": [{"data": [c.to_dict() for c in self.candles]}],
        }
