"""Single-entry memoized selectors.

``create_selector`` composes input accessors with a combiner. The combiner
only runs again when at least one input accessor returns a different object
(compared by identity) than on the previous call. Order logs are append-only
and replaced wholesale by the state owner, so a new reference is the change
signal.

Each selector owns exactly one cache slot; there is no global cache.
"""

import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from tradeview.logging import get_logger

logger = get_logger(__name__)

S = TypeVar("S")
R = TypeVar("R")

_UNSET = object()


class MemoizedSelector(Generic[S, R]):
    """Callable ``state -> result`` with a one-entry cache keyed by input references.

    Args:
        inputs: Accessors extracting the tracked inputs from the state.
        combiner: Pure function of the accessor results.
        name: Used in log events.
    """

    def __init__(
        self,
        inputs: tuple[Callable[[S], Any], ...],
        combiner: Callable[..., R],
        name: str = "selector",
    ) -> None:
        self._inputs = inputs
        self._combiner = combiner
        self._name = name
        self._lock = threading.Lock()
        self._last_args: tuple[Any, ...] | object = _UNSET
        self._last_result: R | None = None
        self._recomputations = 0

    def __call__(self, state: S) -> R:
        args = tuple(select(state) for select in self._inputs)
        with self._lock:
            if self._is_hit(args):
                return self._last_result  # type: ignore[return-value]

            result = self._combiner(*args)
            self._last_args = args
            self._last_result = result
            self._recomputations += 1

        logger.debug("selector_recomputed", selector=self._name, count=self._recomputations)
        return result

    def _is_hit(self, args: tuple[Any, ...]) -> bool:
        last = self._last_args
        if last is _UNSET or len(last) != len(args):  # type: ignore[arg-type]
            return False
        return all(a is b for a, b in zip(args, last))  # type: ignore[arg-type]

    def recomputations(self) -> int:
        """Number of times the combiner has run."""
        return self._recomputations

    def reset(self) -> None:
        """Drop the cached entry and the recomputation count."""
        with self._lock:
            self._last_args = _UNSET
            self._last_result = None
            self._recomputations = 0


def create_selector(
    *inputs: Callable[[S], Any],
    combiner: Callable[..., R],
    name: str | None = None,
) -> MemoizedSelector[S, R]:
    """Compose input accessors and a combiner into a memoized selector.

    Example:
        order_book = create_selector(
            select_open_orders, select_pair,
            combiner=lambda orders, pair: build_order_book(orders, pair, settings),
        )
    """
    if not inputs:
        raise ValueError("create_selector needs at least one input accessor")
    return MemoizedSelector(inputs, combiner, name or getattr(combiner, "__name__", "selector"))
