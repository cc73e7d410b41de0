"""Order book view: open orders for the selected pair, grouped and sorted by side."""

from collections.abc import Iterable
from decimal import Decimal

from tradeview.config import ViewSettings
from tradeview.logging import get_logger
from tradeview.models import DecoratedOrder, Order, OrderBookView, OrderSide, TokenPair
from tradeview.pipeline.decorators import decorate_order_book_orders
from tradeview.pipeline.filters import filter_by_pair
from tradeview.pipeline.formatter import price_sort_key

logger = get_logger(__name__)


def _highest_price_first(order: DecoratedOrder) -> tuple[bool, Decimal]:
    is_nan, price = price_sort_key(order.token_price)
    return (is_nan, -price)


def sort_by_price_desc(orders: Iterable[DecoratedOrder]) -> list[DecoratedOrder]:
    """Sort by token_price, highest first. NaN prices go last; ties keep input order."""
    return sorted(orders, key=_highest_price_first)


def build_order_book(
    open_orders: Iterable[Order],
    pair: TokenPair,
    settings: ViewSettings | None = None,
) -> OrderBookView | None:
    """Build the order book for the selected pair.

    Pipeline: pair filter -> decorate (price + side) -> partition by
    order_type -> sort each side by price descending.

    Args:
        open_orders: Orders neither filled nor cancelled.
        pair: Selected token pair.
        settings: View settings; loaded from the environment when omitted.

    Returns:
        OrderBookView, or None when the pair is not fully selected.
    """
    if not pair.is_ready:
        return None
    settings = settings or ViewSettings()

    orders = filter_by_pair(open_orders, pair, settings.pair_filter)
    decorated = decorate_order_book_orders(orders, pair, settings)

    buy = [o for o in decorated if o.order_type is OrderSide.BUY]
    sell = [o for o in decorated if o.order_type is OrderSide.SELL]

    logger.debug(
        "order_book_built",
        token0=pair.token0.symbol,
        token1=pair.token1.symbol,
        buy=len(buy),
        sell=len(sell),
    )
    return OrderBookView(
        buy=buy,
        sell=sell,
        buy_orders=sort_by_price_desc(buy),
        sell_orders=sort_by_price_desc(sell),
    )
