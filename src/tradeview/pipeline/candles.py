"""Hourly OHLC candlestick aggregation over decorated orders.

Groups orders by the start of their containing clock hour (in the configured
reference time zone) and reduces each group to open/high/low/close prices.

Callers must pass orders sorted by timestamp ascending: groups are emitted in
first-occurrence order, which is then chronological.
"""

from collections.abc import Iterable
from datetime import datetime, timezone, tzinfo
from decimal import Decimal

from tradeview.logging import get_logger
from tradeview.models import CandlePoint, DecoratedOrder
from tradeview.pipeline.formatter import hour_bucket

logger = get_logger(__name__)

_NAN = Decimal("NaN")


def group_by_hour(
    orders: Iterable[DecoratedOrder], tz: tzinfo
) -> list[tuple[datetime, list[DecoratedOrder]]]:
    """Group orders by hour bucket, preserving first-occurrence order.

    Buckets are keyed by their UTC instant: aware datetimes in one zone compare
    and hash by wall clock, which would merge the repeated hour of a DST
    fall-back day.

    Returns:
        ``(local bucket start, orders)`` pairs.
    """
    groups: dict[datetime, tuple[datetime, list[DecoratedOrder]]] = {}
    for order in orders:
        start = hour_bucket(order.timestamp, tz)
        groups.setdefault(start.astimezone(timezone.utc), (start, []))[1].append(order)
    return list(groups.values())


def reduce_candle(bucket_start: datetime, group: list[DecoratedOrder]) -> CandlePoint:
    """Reduce one non-empty hour group to a candle.

    High and low skip NaN prices; ``max``/``min`` keep the first occurrence
    on ties. A group made only of NaN prices gets NaN high and low.
    """
    prices = [o.token_price for o in group]
    comparable = [p for p in prices if not p.is_nan()]

    high = max(comparable) if comparable else _NAN
    low = min(comparable) if comparable else _NAN

    return CandlePoint(x=bucket_start, y=(prices[0], high, low, prices[-1]))


def build_graph_data(orders: Iterable[DecoratedOrder], tz: tzinfo) -> list[CandlePoint]:
    """Build the hourly candlestick series for a chronological order sequence.

    Args:
        orders: Decorated orders sorted by timestamp ascending.
        tz: Reference time zone for hour truncation.

    Returns:
        One CandlePoint per populated hour, in group-discovery order.
    """
    groups = group_by_hour(orders, tz)
    candles = [reduce_candle(start, group) for start, group in groups]

    logger.debug("candles_built", candles=len(candles))
    return candles
