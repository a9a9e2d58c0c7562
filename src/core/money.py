"""Money handling utilities - units and nanos, never floats!"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable

from src.core.exceptions import InvalidValueError, MismatchingCurrencyError, MoneyError, MoneyFault


NANOS_MIN = -999999999
NANOS_MAX = +999999999
NANOS_MOD = 1000000000


@dataclass(frozen=True)
class Money:
    """Amount of money as whole units plus billionths of a unit.

    Construction does not validate; call ``is_valid`` before trusting a value
    that came from outside.
    """

    units: int = 0
    nanos: int = 0
    currency_code: str = ""

    def __neg__(self) -> "Money":
        return negate(self)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return sum_money(self, other)

    def __mul__(self, n: int) -> "Money":
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return multiply_slow(self, n)

    __rmul__ = __mul__


def is_valid(m: Money) -> bool:
    """Check that ``m`` has valid units/nanos signs and ranges."""
    return _sign_matches(m) and _valid_nanos(m.nanos)


def _sign_matches(m: Money) -> bool:
    return m.nanos == 0 or m.units == 0 or (m.nanos < 0) == (m.units < 0)


def _valid_nanos(nanos: int) -> bool:
    return NANOS_MIN <= nanos <= NANOS_MAX


def is_zero(m: Money) -> bool:
    """Check if amount is zero."""
    return m.units == 0 and m.nanos == 0


def is_positive(m: Money) -> bool:
    """Check if amount is valid and strictly positive."""
    return is_valid(m) and (m.units > 0 or (m.units == 0 and m.nanos > 0))


def is_negative(m: Money) -> bool:
    """Check if amount is valid and strictly negative."""
    return is_valid(m) and (m.units < 0 or (m.units == 0 and m.nanos < 0))


def are_same_currency(a: Money, b: Money) -> bool:
    """Check that both amounts carry the same, non-empty currency code."""
    return a.currency_code == b.currency_code and a.currency_code != ""


def are_equals(a: Money, b: Money) -> bool:
    """
    Check that two amounts have the same units and nanos.

    Currency codes are ignored, so this only means something when both
    values are of the same currency or both have no currency code.
    """
    return a.units == b.units and a.nanos == b.nanos


def negate(m: Money) -> Money:
    """
    Return the same amount with the sign negated.

    Raises:
        InvalidValueError: If ``m`` is not valid
    """
    if not is_valid(m):
        raise InvalidValueError()
    return Money(units=-m.units, nanos=-m.nanos, currency_code=m.currency_code)


def _trunc_divmod(n: int, d: int):
    # Quotient rounds toward zero, remainder keeps the sign of n.
    q = abs(n) // d
    if n < 0:
        q = -q
    return q, n - q * d


def sum_money(a: Money, b: Money) -> Money:
    """
    Add two amounts of the same currency.

    Currency codes are compared as plain strings, so two amounts without a
    currency code can be added together.

    When the raw units add up to zero and nanos do not, the borrow branch
    runs, e.g. 0.5 + 0.3 gives ``Money(1, -200000000)``, which is not valid.

    Raises:
        InvalidValueError: If either operand is not valid
        MismatchingCurrencyError: If currency codes differ
    """
    if not is_valid(a) or not is_valid(b):
        raise InvalidValueError()
    if a.currency_code != b.currency_code:
        raise MismatchingCurrencyError()

    units = a.units + b.units
    nanos = a.nanos + b.nanos

    if (units == 0 and nanos == 0) or (units > 0 and nanos >= 0) or (units < 0 and nanos <= 0):
        # same sign <units, nanos>
        carry, nanos = _trunc_divmod(nanos, NANOS_MOD)
        units += carry
    elif units > 0:
        # different sign, nanos is not 0 here
        units -= 1
        nanos += NANOS_MOD
    else:
        units += 1
        nanos -= NANOS_MOD

    return Money(units=units, nanos=nanos, currency_code=a.currency_code)


def multiply_slow(m: Money, n: int) -> Money:
    """
    Multiply by adding the value to itself ``n - 1`` times.

    Args:
        m: Amount to multiply
        n: Non-negative integer multiplier

    Raises:
        InvalidValueError: If ``m`` is not valid
        TypeError: If ``n`` is not an integer
        ValueError: If ``n`` is negative
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Multiplier must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"Multiplier cannot be negative: {n}")
    if not is_valid(m):
        raise InvalidValueError()
    if n == 0:
        return zero_money(m.currency_code)
    if n == 1:
        return m

    product = m
    for _ in range(1, n):
        product = sum_money(product, m)
    return product


def must(operation: Callable[..., Money], *args: Any, **kwargs: Any) -> Money:
    """
    Run a money operation that the caller knows cannot fail.

    Usage::

        total = must(sum_money, a, b)

    Raises:
        MoneyFault: If the operation raised a MoneyError anyway
    """
    try:
        return operation(*args, **kwargs)
    except MoneyError as e:
        raise MoneyFault(e) from e


def zero_money(currency_code: str = "") -> Money:
    """Create zero Money object."""
    return Money(units=0, nanos=0, currency_code=currency_code)


def to_decimal(m: Money) -> Decimal:
    """Convert a valid amount to an exact Decimal."""
    if not is_valid(m):
        raise InvalidValueError()
    return Decimal(m.units) + Decimal(m.nanos).scaleb(-9)
