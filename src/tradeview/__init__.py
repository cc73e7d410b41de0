"""tradeview: derive order book, trade history and price chart views from exchange order logs."""

from tradeview.config import AppSettings, ViewSettings
from tradeview.exceptions import OrderRecordError, TokenRecordError, TradeViewError
from tradeview.models import (
    CandlePoint,
    DecoratedOrder,
    Order,
    OrderBookView,
    OrderSide,
    PriceChange,
    PriceChartView,
    Token,
    TokenPair,
)
from tradeview.views import (
    ExchangeState,
    ExchangeViews,
    build_order_book,
    build_price_chart,
    build_trade_history,
)

__all__ = [
    "AppSettings",
    "CandlePoint",
    "DecoratedOrder",
    "ExchangeState",
    "ExchangeViews",
    "Order",
    "OrderBookView",
    "OrderRecordError",
    "OrderSide",
    "PriceChange",
    "PriceChartView",
    "Token",
    "TokenPair",
    "TokenRecordError",
    "TradeViewError",
    "ViewSettings",
    "build_order_book",
    "build_price_chart",
    "build_trade_history",
]
