"""Order lifecycle classification.

Partitions the all-orders log into open orders (referenced by neither the
filled nor the cancelled log) and settled orders. Ids are compared by their
canonical string form so numeric and string ids classify identically.
"""

from collections.abc import Iterable

from tradeview.models import Order


def settled_keys(filled: Iterable[Order], cancelled: Iterable[Order]) -> frozenset[str]:
    """Canonical ids referenced by the filled or cancelled logs."""
    return frozenset(o.key for o in filled) | frozenset(o.key for o in cancelled)


def classify_open(
    all_orders: Iterable[Order],
    filled: Iterable[Order],
    cancelled: Iterable[Order],
) -> list[Order]:
    """Return every order that has been neither filled nor cancelled.

    Args:
        all_orders: The full order log.
        filled: Orders from the filled log.
        cancelled: Orders from the cancelled log.

    Returns:
        Open orders, in all-orders log order.
    """
    settled = settled_keys(filled, cancelled)
    return [o for o in all_orders if o.key not in settled]


def classify_settled(
    all_orders: Iterable[Order],
    filled: Iterable[Order],
    cancelled: Iterable[Order],
) -> list[Order]:
    """Return the complement of ``classify_open``: orders filled or cancelled."""
    settled = settled_keys(filled, cancelled)
    return [o for o in all_orders if o.key in settled]
