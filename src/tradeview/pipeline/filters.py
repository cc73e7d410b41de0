"""Selected-pair filtering for order logs.

Two modes are supported:

- ``strict`` (default): an order belongs to the pair when its get and give
  tokens are the pair's two tokens, one each.
- ``permissive``: every order passes. This reproduces the legacy predicate
  ``tokenGet == token0 || token1``, which is always truthy once a pair is
  selected. Kept for deployments that relied on the old behavior.
"""

from collections.abc import Iterable
from typing import Literal

from tradeview.models import Order, TokenPair

PairFilterMode = Literal["strict", "permissive"]


def order_touches_pair(order: Order, pair: TokenPair) -> bool:
    """True when the order trades exactly the pair's two tokens."""
    if not pair.is_ready:
        return False
    addresses = {pair.token0.address, pair.token1.address}
    return (
        order.token_get in addresses
        and order.token_give in addresses
        and order.token_get != order.token_give
    )


def filter_by_pair(
    orders: Iterable[Order],
    pair: TokenPair,
    mode: PairFilterMode = "strict",
) -> list[Order]:
    """Keep the orders belonging to ``pair`` under the given filter mode."""
    if mode == "permissive":
        return list(orders)
    return [o for o in orders if order_touches_pair(o, pair)]
