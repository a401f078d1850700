"""Price calculation inputs: add-on and weekly customization selections plus the order parameters."""
from typing import Iterable, List, Optional


class AddOnSelection:
    def __init__(self, price: float = 0, quantity: int = 0):
        self.price = price
        self.quantity = quantity

    def __str__(self) -> str:
        return f"AddOn {self.price} x {self.quantity}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return AddOnSelection(price=d.get("price", 0), quantity=d.get("quantity", 0))

    def to_dict(self):
        return {"price": self.price, "quantity": self.quantity}


class WeeklyCustomizationSelection:
    def __init__(self, price: float = 0, days: Optional[Iterable[str]] = None):
        self.price = price
        self.days = list(days) if days else []

    def __str__(self) -> str:
        return f"Customization {self.price} on {', '.join(self.days) or '-'}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return WeeklyCustomizationSelection(price=d.get("price", 0), days=d.get("days") or [])

    def to_dict(self):
        return {"price": self.price, "days": list(self.days)}


class PriceCalculationParams:
    '''
    Everything needed to price one order.

    quantity is carried for the caller's benefit only; the final amount does
    not depend on it (the order quantity is already folded into base_price
    when the base price comes from calculate_base_price).
    '''

    def __init__(self, base_price: float = 0,
                 add_ons: Optional[List[AddOnSelection]] = None,
                 weekly_customizations: Optional[List[WeeklyCustomizationSelection]] = None,
                 delivery_charge: float = 0, discount_amount: float = 0, quantity: int = 1,
                 selected_days: Optional[Iterable[str]] = None):
        self.base_price = base_price
        self.add_ons = add_ons[:] if add_ons else []
        self.weekly_customizations = weekly_customizations[:] if weekly_customizations else []
        self.delivery_charge = delivery_charge
        self.discount_amount = discount_amount
        self.quantity = quantity
        self.selected_days = list(selected_days) if selected_days else []

    def __str__(self) -> str:
        return (f"PriceCalculationParams(base={self.base_price}, add_ons={len(self.add_ons)}, "
                f"customizations={len(self.weekly_customizations)}, days={self.selected_days})")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Builds params from a camelCase payload (as sent by the ordering UI). Missing keys default to 0/empty.'''
        d = dict(data) if isinstance(data, dict) else {}
        return PriceCalculationParams(
            base_price=d.get("basePrice", 0),
            add_ons=[AddOnSelection.from_dict(a) for a in d.get("addOns") or []],
            weekly_customizations=[WeeklyCustomizationSelection.from_dict(c)
                                   for c in d.get("weeklyCustomizations") or []],
            delivery_charge=d.get("deliveryCharge", 0),
            discount_amount=d.get("discountAmount", 0),
            quantity=d.get("quantity", 1),
            selected_days=d.get("selectedDays") or [],
        )

    def to_dict(self):
        return {
            "basePrice": self.base_price,
            "addOns": [a.to_dict() for a in self.add_ons],
            "weeklyCustomizations": [c.to_dict() for c in self.weekly_customizations],
            "deliveryCharge": self.delivery_charge,
            "discountAmount": self.discount_amount,
            "quantity": self.quantity,
            "selectedDays": list(self.selected_days),
        }
