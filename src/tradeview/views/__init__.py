"""View selectors: order book, trade history and price chart.

Each ``build_*`` function is pure and returns None until both sides of the
selected pair are set. ``ExchangeViews`` wraps them in single-entry memoized
selectors over an ``ExchangeState`` snapshot.
"""

from tradeview.views.memo import MemoizedSelector, create_selector
from tradeview.views.order_book import build_order_book
from tradeview.views.price_chart import build_price_chart
from tradeview.views.state import (
    ExchangeState,
    ExchangeViews,
    select_all_orders,
    select_cancelled_orders,
    select_filled_orders,
    select_open_orders,
    select_pair,
)
from tradeview.views.trade_history import build_trade_history

__all__ = [
    "ExchangeState",
    "ExchangeViews",
    "MemoizedSelector",
    "build_order_book",
    "build_price_chart",
    "build_trade_history",
    "create_selector",
    "select_all_orders",
    "select_cancelled_orders",
    "select_filled_orders",
    "select_open_orders",
    "select_pair",
]
