"""Price chart view: last price, its direction, and the hourly candlestick series."""

from collections.abc import Iterable
from decimal import Decimal

from tradeview.config import ViewSettings
from tradeview.logging import get_logger
from tradeview.models import DecoratedOrder, Order, PriceChange, PriceChartView, TokenPair
from tradeview.pipeline.candles import build_graph_data
from tradeview.pipeline.decorators import decorate_order
from tradeview.pipeline.filters import filter_by_pair
from tradeview.pipeline.formatter import prices_comparable

logger = get_logger(__name__)


def last_prices(orders: list[DecoratedOrder]) -> tuple[Decimal, Decimal]:
    """Prices of the final and penultimate orders, each Decimal("0") if absent."""
    last = orders[-1].token_price if orders else Decimal("0")
    second_last = orders[-2].token_price if len(orders) >= 2 else Decimal("0")
    return last, second_last


def price_change(last: Decimal, second_last: Decimal) -> PriceChange:
    """UP when ``last >= second_last``; DOWN otherwise or when either is NaN."""
    if prices_comparable(last, second_last) and last >= second_last:
        return PriceChange.UP
    return PriceChange.DOWN


def build_price_chart(
    filled_orders: Iterable[Order],
    pair: TokenPair,
    settings: ViewSettings | None = None,
) -> PriceChartView | None:
    """Build the price chart for the selected pair.

    Args:
        filled_orders: Orders from the filled log.
        pair: Selected token pair.
        settings: View settings; loaded from the environment when omitted.

    Returns:
        PriceChartView, or None when the pair is not fully selected. With no
        filled orders both prices are 0, the change is UP (0 >= 0) and the
        candle series is empty.
    """
    if not pair.is_ready:
        return None
    settings = settings or ViewSettings()

    orders = filter_by_pair(filled_orders, pair, settings.pair_filter)
    chronological = sorted(orders, key=lambda o: o.timestamp)
    decorated = [decorate_order(o, pair, settings) for o in chronological]

    last, second_last = last_prices(decorated)

    logger.debug("price_chart_built", trades=len(decorated), last_price=str(last))
    return PriceChartView(
        last_price=last,
        second_last_price=second_last,
        last_price_change=price_change(last, second_last),
        candles=build_graph_data(decorated, settings.tz),
    )
