"""Final payable amount for a tiffin order.

The amount is base price + add-ons + weekly customizations + delivery - discount,
clamped at zero. Nothing is validated here: negative prices flow through the
arithmetic and NaN comes back out as NaN.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List

from tiffin.domain.PriceCalculation import (
    AddOnSelection,
    PriceCalculationParams,
    WeeklyCustomizationSelection,
)

__all__ = [
    "calculate_add_ons_total",
    "calculate_weekly_customizations_total",
    "calculate_final_amount",
    "calculate_price_breakdown",
]


def calculate_add_ons_total(add_ons: List[AddOnSelection]) -> float:
    return sum(add_on.price * add_on.quantity for add_on in add_ons)


def calculate_weekly_customizations_total(customizations: List[WeeklyCustomizationSelection],
                                          selected_days: Iterable[str]) -> float:
    """Bill each customization once per one of its days that the customer selected."""
    selected = set(selected_days)
    total = 0
    for custom in customizations:
        applicable_days = [day for day in custom.days if day in selected]
        total += custom.price * len(applicable_days)
    return total


def _clamp(amount: float) -> float:
    # max() keeps its first argument when the comparison is False, so NaN survives
    return max(amount, 0)


def calculate_final_amount(params: PriceCalculationParams) -> float:
    """Return the amount payable; never negative. params.quantity does not take part."""
    add_ons_total = calculate_add_ons_total(params.add_ons)
    weekly_total = calculate_weekly_customizations_total(params.weekly_customizations, params.selected_days)

    subtotal = params.base_price + add_ons_total + weekly_total
    final_amount = subtotal + params.delivery_charge - params.discount_amount
    return _clamp(final_amount)


def calculate_price_breakdown(params: PriceCalculationParams) -> Dict[str, Any]:
    """Itemised version of calculate_final_amount, for display next to the total."""
    add_ons_price = calculate_add_ons_total(params.add_ons)
    weekly_price = calculate_weekly_customizations_total(params.weekly_customizations, params.selected_days)
    subtotal = params.base_price + add_ons_price + weekly_price
    total_before_discount = subtotal + params.delivery_charge
    return {
        "base_price": params.base_price,
        "add_ons_price": add_ons_price,
        "weekly_customization_price": weekly_price,
        "subtotal": subtotal,
        "delivery_charge": params.delivery_charge,
        "total_before_discount": total_before_discount,
        "discount_amount": params.discount_amount,
        "final_amount": _clamp(total_before_discount - params.discount_amount),
    }
