"""Order decoration: price, formatted amounts and context-specific display fields.

Each decorator takes a (possibly already decorated) order and returns a new
frozen DecoratedOrder; inputs are never mutated.

The amount legs are assigned from the pair's second token: when the order
gives token1, the give amount is ``token0_amount`` and the get amount is
``token1_amount``; otherwise the reverse. ``token_price`` is therefore the
price of token1 quoted in token0.
"""

from collections.abc import Iterable
from dataclasses import fields, replace
from functools import reduce

from tradeview.config import ViewSettings
from tradeview.models import DecoratedOrder, Order, OrderSide, TokenPair
from tradeview.pipeline.formatter import (
    compute_token_price,
    format_timestamp,
    format_units,
    prices_comparable,
    to_decimal_amount,
)

_ORDER_FIELDS = tuple(f.name for f in fields(Order))


def _raw_fields(order: Order) -> dict:
    return {name: getattr(order, name) for name in _ORDER_FIELDS}


def decorate_order(order: Order, pair: TokenPair, settings: ViewSettings) -> DecoratedOrder:
    """Attach amounts, price and a human timestamp to a raw order.

    Each leg is formatted with the decimals of the token it is denominated
    in, and the price is computed from those decimal-normalized amounts.
    Deterministic and side-effect free.

    Args:
        order: Raw order. Must touch ``pair``.
        pair: Selected pair; both sides must be set.
        settings: Supplies time zone and price precision.

    Returns:
        DecoratedOrder with token0_amount, token1_amount, token_price and
        formatted_timestamp set.
    """
    if pair.token1.same_as(order.token_give):
        amount0, amount1 = order.amount_give, order.amount_get
    else:
        amount0, amount1 = order.amount_get, order.amount_give

    # amount0 is denominated in token1, amount1 in token0
    decimals0 = pair.token1.decimals
    decimals1 = pair.token0.decimals

    token_price = compute_token_price(
        to_decimal_amount(amount0, decimals0),
        to_decimal_amount(amount1, decimals1),
        precision=settings.price_precision,
    )

    return DecoratedOrder(
        **_raw_fields(order),
        token0_amount=format_units(amount0, decimals0),
        token1_amount=format_units(amount1, decimals1),
        token_price=token_price,
        formatted_timestamp=format_timestamp(order.timestamp, settings.tz),
    )


def decorate_order_book_order(
    order: DecoratedOrder, pair: TokenPair, settings: ViewSettings
) -> DecoratedOrder:
    """Tag an order with its book side, side color and fill action.

    Giving token1 means buying token0, so the order is a buy; anything else
    is a sell. The fill action is the opposite side.
    """
    order_type = OrderSide.BUY if pair.token1.same_as(order.token_give) else OrderSide.SELL
    return replace(
        order,
        order_type=order_type,
        order_type_class=settings.buy_color if order_type is OrderSide.BUY else settings.sell_color,
        order_fill_action=order_type.opposite,
    )


def decorate_order_book_orders(
    orders: Iterable[Order], pair: TokenPair, settings: ViewSettings
) -> list[DecoratedOrder]:
    return [
        decorate_order_book_order(decorate_order(o, pair, settings), pair, settings)
        for o in orders
    ]


def token_price_class(
    order: DecoratedOrder, previous: DecoratedOrder | None, settings: ViewSettings
) -> str | None:
    """Trend color of ``order`` against the order immediately before it.

    Returns the up color for the first order of a sequence or when the price
    held or rose, the down color when it fell, and None when either price is
    NaN (undefined trend).
    """
    if previous is None or previous.key == order.key:
        return settings.buy_color
    if not prices_comparable(previous.token_price, order.token_price):
        return None
    if previous.token_price <= order.token_price:
        return settings.buy_color
    return settings.sell_color


def decorate_filled_order(
    order: DecoratedOrder, previous: DecoratedOrder | None, settings: ViewSettings
) -> DecoratedOrder:
    return replace(order, token_price_class=token_price_class(order, previous, settings))


def decorate_filled_orders(
    orders: Iterable[Order], pair: TokenPair, settings: ViewSettings
) -> list[DecoratedOrder]:
    """Decorate a chronologically ascending sequence of filled orders.

    A left fold carries the immediately preceding decorated order as the
    trend baseline, so colors reflect time-adjacent trades regardless of
    any later re-sort.
    """

    def step(decorated: list[DecoratedOrder], order: Order) -> list[DecoratedOrder]:
        previous = decorated[-1] if decorated else None
        current = decorate_filled_order(decorate_order(order, pair, settings), previous, settings)
        decorated.append(current)
        return decorated

    return reduce(step, orders, [])
