"""Derivation pipeline stages.

Formatting, lifecycle classification, pair filtering, order decoration and
candlestick aggregation. Every stage is a pure function over its inputs; the
view selectors in ``tradeview.views`` compose them.
"""

from tradeview.pipeline.candles import build_graph_data
from tradeview.pipeline.classifier import classify_open, classify_settled
from tradeview.pipeline.decorators import (
    decorate_filled_order,
    decorate_filled_orders,
    decorate_order,
    decorate_order_book_order,
    decorate_order_book_orders,
)
from tradeview.pipeline.filters import filter_by_pair, order_touches_pair
from tradeview.pipeline.formatter import (
    compute_token_price,
    format_timestamp,
    format_units,
    hour_bucket,
    price_sort_key,
)

__all__ = [
    "build_graph_data",
    "classify_open",
    "classify_settled",
    "compute_token_price",
    "decorate_filled_order",
    "decorate_filled_orders",
    "decorate_order",
    "decorate_order_book_order",
    "decorate_order_book_orders",
    "filter_by_pair",
    "format_timestamp",
    "format_units",
    "hour_bucket",
    "order_touches_pair",
    "price_sort_key",
]
