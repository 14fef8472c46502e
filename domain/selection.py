"""Best-quote selection across provider quotes."""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from domain.models.quote import Quote, TradeDirection


def usable_rate(value) -> Decimal | None:
    """Return ``value`` as a positive finite Decimal, or None if it can't take part in selection."""
    if value is None or isinstance(value, bool):
        return None
    try:
        rate = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not rate.is_finite() or rate <= 0:
        return None
    return rate


def select_best(quotes: Iterable[Quote], direction: "TradeDirection | str") -> Quote | None:
    """
    Pick the optimal quote for a trade direction.

    Buying wants the lowest buy rate, selling wants the highest sell rate.
    Quotes whose rate for the direction is missing or not a positive number
    are skipped. Ties go to the quote that appears first.
    """
    direction = TradeDirection.parse(direction)

    best: Quote | None = None
    best_rate: Decimal | None = None
    for quote in quotes:
        rate = usable_rate(direction.rate_of(quote))
        if rate is None:
            continue
        if best_rate is None:
            best, best_rate = quote, rate
        elif direction is TradeDirection.BUY and rate < best_rate:
            best, best_rate = quote, rate
        elif direction is TradeDirection.SELL and rate > best_rate:
            best, best_rate = quote, rate

    return best
