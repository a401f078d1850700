"""Booking-type pricing helpers.

Turns a tiffin listing plus the customer's selections (plan type, quantity,
days, add-ons, customizations) into PriceCalculationParams.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional

from tiffin.domain.PriceCalculation import (
    AddOnSelection,
    PriceCalculationParams,
    WeeklyCustomizationSelection,
)
from tiffin.domain.Tiffin import ServiceType, Tiffin
from tiffin.utilities.config import DEFAULT_DELIVERY_CHARGE, DEFAULT_MONTHLY_PRICE, DEFAULT_TRIAL_PRICE

logger = logging.getLogger(__name__)

__all__ = ["BookingType", "calculate_base_price", "calculate_delivery_charge", "build_price_params"]


class BookingType(str, Enum):
    SINGLE = "single"
    TRIAL = "trial"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


def calculate_base_price(tiffin: Tiffin, booking_type: BookingType, quantity: int = 1,
                         selected_days: Optional[Iterable[str]] = None) -> float:
    """Plan price times quantity; weekly plans are also multiplied by the number of selected days."""
    booking_type = BookingType(booking_type)
    days = list(selected_days or [])
    if booking_type is BookingType.SINGLE:
        return tiffin.price * quantity
    if booking_type is BookingType.TRIAL:
        return (tiffin.trial_price or DEFAULT_TRIAL_PRICE) * quantity
    if booking_type is BookingType.WEEKLY:
        return tiffin.price * quantity * len(days)
    return (tiffin.monthly_price or DEFAULT_MONTHLY_PRICE) * quantity


def calculate_delivery_charge(service_type: ServiceType, booking_type: BookingType) -> float:
    '''
    Meal service always pays delivery. Tiffin service pays it on trial and
    single orders only; weekly and monthly plans deliver free.
    Raises ValueError for an unknown booking type.
    '''
    booking_type = BookingType(booking_type)
    if service_type == ServiceType.TIFFIN and booking_type in (BookingType.WEEKLY, BookingType.MONTHLY):
        return 0
    return DEFAULT_DELIVERY_CHARGE


def build_price_params(tiffin: Tiffin, booking_type: BookingType, quantity: int = 1,
                       selected_days: Optional[Iterable[str]] = None,
                       add_on_quantities: Optional[Dict[str, int]] = None,
                       customization_names: Optional[List[str]] = None,
                       discount_amount: float = 0) -> PriceCalculationParams:
    '''
    Resolves the selected catalog items of a tiffin by name.
    Raises ValueError for an unknown booking type or an unknown/unavailable item.
    '''
    booking_type = BookingType(booking_type)
    days = list(selected_days or [])

    add_ons: List[AddOnSelection] = []
    for name, qty in (add_on_quantities or {}).items():
        item = tiffin.find_add_on(name)
        if item is None or not item.available:
            raise ValueError(f"Add-on '{name}' is not offered by '{tiffin.title}'.")
        add_ons.append(AddOnSelection(price=item.price, quantity=qty))

    customizations: List[WeeklyCustomizationSelection] = []
    for name in customization_names or []:
        item = tiffin.find_customization(name)
        if item is None or not item.available:
            raise ValueError(f"Weekly customization '{name}' is not offered by '{tiffin.title}'.")
        customizations.append(WeeklyCustomizationSelection(price=item.price, days=item.days))

    unavailable = [d for d in days if tiffin.available_days and d not in tiffin.available_days]
    if unavailable:
        logger.warning(f"Selected days not served by '{tiffin.title}': {', '.join(unavailable)}")

    return PriceCalculationParams(
        base_price=calculate_base_price(tiffin, booking_type, quantity, days),
        add_ons=add_ons,
        weekly_customizations=customizations,
        delivery_charge=calculate_delivery_charge(tiffin.service_type, booking_type),
        discount_amount=discount_amount,
        quantity=quantity,
        selected_days=days,
    )
