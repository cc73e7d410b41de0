"""Amount, price and timestamp formatting.

Converts integer base-unit amounts to decimal display strings, computes the
rounded unit price of an order, and renders unix timestamps in the configured
reference time zone.

CRITICAL: All computations use Decimal. Never use float.
Non-finite prices (a zero-amount leg) are preserved as Decimal Infinity/NaN
rather than coerced, so callers can treat them as an undefined trend.
"""

from datetime import datetime, tzinfo
from decimal import ROUND_HALF_UP, Context, Decimal, Overflow, localcontext

#: Arithmetic context for amounts and prices. Precision covers uint256
#: amounts (78 digits); DivisionByZero and InvalidOperation are not trapped
#: so a zero leg yields Infinity or NaN instead of raising.
_PRICE_CONTEXT = Context(prec=100, rounding=ROUND_HALF_UP, traps=[Overflow])

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_units(amount: int, decimals: int = 18) -> str:
    """Format an integer base-unit amount as a decimal string without data loss.

    Follows the usual ``formatUnits`` shape: trailing zeros of the fraction are
    stripped but at least one fractional digit is kept.

    Args:
        amount: Amount in base units (e.g. wei).
        decimals: Token decimal exponent.

    Returns:
        Decimal string such as "2.0" or "0.000000000000000001".
    """
    negative = amount < 0
    whole, fraction = divmod(abs(amount), 10**decimals)

    if decimals > 0:
        fraction_str = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    else:
        fraction_str = "0"

    result = f"{whole}.{fraction_str}"
    return f"-{result}" if negative else result


def to_decimal_amount(amount: int, decimals: int = 18) -> Decimal:
    """Exact Decimal value of a base-unit amount."""
    with localcontext(_PRICE_CONTEXT) as ctx:
        return Decimal(amount).scaleb(-decimals, context=ctx)


def compute_token_price(
    token0_amount: Decimal,
    token1_amount: Decimal,
    precision: int = 5,
) -> Decimal:
    """Compute the unit price ``token1_amount / token0_amount``.

    Equivalent to ``round(token1 / token0 * 10**precision) / 10**precision``
    with halves rounded up.

    Args:
        token0_amount: Leg in the denominator (second token of the pair).
        token1_amount: Leg in the numerator (first token of the pair).
        precision: Decimal places kept.

    Returns:
        Rounded Decimal price. ``Infinity`` when only token0_amount is zero,
        ``NaN`` when both are zero.
    """
    with localcontext(_PRICE_CONTEXT) as ctx:
        price = ctx.divide(token1_amount, token0_amount)
        if not price.is_finite():
            return price
        return price.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP, context=ctx)


def price_sort_key(price: Decimal) -> tuple[bool, Decimal]:
    """Total ordering key for prices: comparable values first, NaN last.

    Decimal raises on ordering comparisons with NaN, so NaN is mapped to a
    flag plus a neutral value. Infinity compares normally.
    """
    if price.is_nan():
        return (True, Decimal(0))
    return (False, price)


def prices_comparable(*prices: Decimal) -> bool:
    return not any(p.is_nan() for p in prices)


def to_local(timestamp: int, tz: tzinfo) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=tz)


def format_timestamp(timestamp: int, tz: tzinfo) -> str:
    """Render a unix timestamp as ``h:mm:ssa d MMM D``.

    12-hour clock with lowercase am/pm, then the weekday number (Sunday = 0),
    the short month name and the day of month, e.g. "3:04:05pm 2 Jan 15".
    """
    moment = to_local(timestamp, tz)
    hour = moment.hour % 12 or 12
    meridiem = "am" if moment.hour < 12 else "pm"
    weekday = moment.isoweekday() % 7
    return (
        f"{hour}:{moment.minute:02d}:{moment.second:02d}{meridiem} "
        f"{weekday} {_MONTHS[moment.month - 1]} {moment.day}"
    )


def hour_bucket(timestamp: int, tz: tzinfo) -> datetime:
    """Start of the clock hour containing ``timestamp`` in zone ``tz``."""
    return to_local(timestamp, tz).replace(minute=0, second=0, microsecond=0)
