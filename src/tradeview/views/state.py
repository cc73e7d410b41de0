"""Exchange state snapshot, read accessors and the memoized view selectors.

``ExchangeState`` is the read-only snapshot handed over by the state owner.
Its order logs are append-only; the owner publishes a new tuple whenever a
log grows, which is what the memoized selectors key on.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from tradeview.config import ViewSettings
from tradeview.models import (
    DecoratedOrder,
    Order,
    OrderBookView,
    PriceChartView,
    TokenPair,
)
from tradeview.pipeline.classifier import classify_open
from tradeview.views.memo import MemoizedSelector, create_selector
from tradeview.views.order_book import build_order_book
from tradeview.views.price_chart import build_price_chart
from tradeview.views.trade_history import build_trade_history


def _get(data: Any, path: str, default: Any = None) -> Any:
    """Walk a dotted path through nested dicts, returning ``default`` on any miss."""
    node = data
    for part in path.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return default if node is None else node


@dataclass(frozen=True)
class ExchangeState:
    """Snapshot of the selected pair and the three order logs."""

    pair: TokenPair = TokenPair()
    all_orders: tuple[Order, ...] = ()
    filled_orders: tuple[Order, ...] = ()
    cancelled_orders: tuple[Order, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "ExchangeState":
        """Parse the nested store shape used by the front end.

        Reads ``tokens.contracts`` and ``exchange.{allOrders,filledOrders,
        cancelledOrders}.data``. Missing branches become an unset pair or
        empty logs.

        Raises:
            OrderRecordError: If an order record is malformed.
            TokenRecordError: If token metadata is malformed.
        """
        return cls(
            pair=TokenPair.from_list(_get(data, "tokens.contracts", [])),
            all_orders=tuple(Order.from_dict(o) for o in _get(data, "exchange.allOrders.data", [])),
            filled_orders=tuple(
                Order.from_dict(o) for o in _get(data, "exchange.filledOrders.data", [])
            ),
            cancelled_orders=tuple(
                Order.from_dict(o) for o in _get(data, "exchange.cancelledOrders.data", [])
            ),
        )


def select_pair(state: ExchangeState) -> TokenPair:
    return state.pair


def select_all_orders(state: ExchangeState) -> tuple[Order, ...]:
    return state.all_orders


def select_filled_orders(state: ExchangeState) -> tuple[Order, ...]:
    return state.filled_orders


def select_cancelled_orders(state: ExchangeState) -> tuple[Order, ...]:
    return state.cancelled_orders


def select_open_orders(state: ExchangeState) -> list[Order]:
    """Open orders of a single snapshot.

    Recomputes on every call; ``ExchangeViews.open_orders`` caches the same
    result across snapshots that share their logs.
    """
    return classify_open(state.all_orders, state.filled_orders, state.cancelled_orders)


class ExchangeViews:
    """Memoized view selectors bound to one set of view settings.

    Each selector recomputes only when one of its tracked inputs changes
    reference. The order book tracks the memoized open-order list, so it is
    stable as long as none of the three logs changes.

    Args:
        settings: View settings; loaded from the environment when omitted.
    """

    def __init__(self, settings: ViewSettings | None = None) -> None:
        self._settings = settings or ViewSettings()

        self.open_orders: MemoizedSelector[ExchangeState, list[Order]] = create_selector(
            select_all_orders,
            select_filled_orders,
            select_cancelled_orders,
            combiner=classify_open,
            name="open_orders",
        )
        self.order_book: MemoizedSelector[ExchangeState, OrderBookView | None] = create_selector(
            self.open_orders,
            select_pair,
            combiner=self._bind(build_order_book),
            name="order_book",
        )
        self.trade_history: MemoizedSelector[
            ExchangeState, list[DecoratedOrder] | None
        ] = create_selector(
            select_filled_orders,
            select_pair,
            combiner=self._bind(build_trade_history),
            name="trade_history",
        )
        self.price_chart: MemoizedSelector[ExchangeState, PriceChartView | None] = create_selector(
            select_filled_orders,
            select_pair,
            combiner=self._bind(build_price_chart),
            name="price_chart",
        )

    @property
    def settings(self) -> ViewSettings:
        return self._settings

    def _bind(self, build: Callable[..., Any]) -> Callable[[Any, TokenPair], Any]:
        def combiner(orders: Any, pair: TokenPair) -> Any:
            return build(orders, pair, self._settings)

        return combiner

    def reset(self) -> None:
        """Drop every cached view."""
        for selector in (self.open_orders, self.order_book, self.trade_history, self.price_chart):
            selector.reset()
