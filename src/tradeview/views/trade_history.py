"""Trade history view: filled orders for the selected pair with trend coloring."""

from collections.abc import Iterable

from tradeview.config import ViewSettings
from tradeview.logging import get_logger
from tradeview.models import DecoratedOrder, Order, TokenPair
from tradeview.pipeline.decorators import decorate_filled_orders
from tradeview.pipeline.filters import filter_by_pair

logger = get_logger(__name__)


def build_trade_history(
    filled_orders: Iterable[Order],
    pair: TokenPair,
    settings: ViewSettings | None = None,
) -> list[DecoratedOrder] | None:
    """Build the trade history for the selected pair, most recent first.

    Two sort passes are required: decoration compares each trade with the one
    immediately before it in time, so it runs over the ascending sequence;
    display wants the reverse.

    Args:
        filled_orders: Orders from the filled log.
        pair: Selected token pair.
        settings: View settings; loaded from the environment when omitted.

    Returns:
        Decorated orders sorted by timestamp descending, or None when the
        pair is not fully selected.
    """
    if not pair.is_ready:
        return None
    settings = settings or ViewSettings()

    orders = filter_by_pair(filled_orders, pair, settings.pair_filter)
    chronological = sorted(orders, key=lambda o: o.timestamp)
    decorated = decorate_filled_orders(chronological, pair, settings)

    logger.debug("trade_history_built", trades=len(decorated))
    return sorted(decorated, key=lambda o: o.timestamp, reverse=True)
