"""Order total calculation for checkout."""

from dataclasses import dataclass
from typing import Iterable

from src.core.money import Money, is_valid, multiply_slow, sum_money, to_decimal
from src.core.exceptions import InvalidValueError, MismatchingCurrencyError, MoneyError
from src.core.logging import get_logger
from src.utils.metrics import track_order_total, track_order_total_failure

logger = get_logger(__name__)


@dataclass(frozen=True)
class OrderItem:
    """One cart line: unit cost and how many were ordered."""

    product_id: str
    cost: Money
    quantity: int


def _check_amount(amount: Money, currency_code: str, what: str) -> None:
    if not is_valid(amount):
        raise InvalidValueError(f"Invalid {what}: {amount}")
    if amount.currency_code != currency_code:
        raise MismatchingCurrencyError(
            f"{what} currency {amount.currency_code!r} != order currency {currency_code!r}"
        )


def _validate(items: list, shipping_cost: Money, currency_code: str) -> None:
    _check_amount(shipping_cost, currency_code, "shipping cost")
    for item in items:
        _check_amount(item.cost, currency_code, f"cost of {item.product_id}")
        if isinstance(item.quantity, bool) or not isinstance(item.quantity, int):
            raise TypeError(
                f"Quantity of {item.product_id} must be an integer, got {type(item.quantity).__name__}"
            )
        if item.quantity < 0:
            raise ValueError(f"Quantity of {item.product_id} cannot be negative: {item.quantity}")


def _accumulate(items: list, shipping_cost: Money) -> Money:
    total = shipping_cost
    for item in items:
        line_total = multiply_slow(item.cost, item.quantity)
        total = sum_money(total, line_total)
    return total


def calculate_order_total(
    items: Iterable[OrderItem],
    shipping_cost: Money,
    currency_code: str
) -> Money:
    """
    Calculate shipping cost plus cost times quantity of every item.

    Args:
        items: Order lines, costs already in the order currency
        shipping_cost: Shipping cost in the order currency
        currency_code: Currency the order is placed in

    Returns:
        Total amount in ``currency_code``

    Raises:
        InvalidValueError: If any cost is not a valid amount, or a partial
            sum of sub-unit amounts normalizes to an invalid value
        MismatchingCurrencyError: If any cost is in another currency
        TypeError: If any quantity is not an integer
        ValueError: If any quantity is negative
    """
    items = list(items)
    try:
        _validate(items, shipping_cost, currency_code)
        total = _accumulate(items, shipping_cost)
    except (MoneyError, TypeError, ValueError) as e:
        track_order_total_failure(type(e).__name__)
        logger.warning(
            "Order total rejected",
            currency=currency_code,
            error_type=type(e).__name__,
            error_message=str(e)
        )
        raise

    track_order_total(currency_code, float(to_decimal(total)))
    logger.info(
        "Order total calculated",
        currency=currency_code,
        items=len(items),
        units=total.units,
        nanos=total.nanos
    )
    return total
