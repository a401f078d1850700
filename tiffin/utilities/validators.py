"""
Input validation schemas using Pydantic, for callers that gather order data from users.

The price calculator itself accepts anything; these schemas are where
non-negative prices and well-formed day names get enforced.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from tiffin.domain.PriceCalculation import (
    AddOnSelection,
    PriceCalculationParams,
    WeeklyCustomizationSelection,
)
from tiffin.utilities.constants import WEEK_DAYS, WEEK_DAY_ABBREVIATIONS

_DAY_NAMES = set(WEEK_DAYS) | set(WEEK_DAY_ABBREVIATIONS)


def _check_days(days: List[str]) -> List[str]:
    unknown = [d for d in days if d not in _DAY_NAMES]
    if unknown:
        raise ValueError(f"Unknown day name(s): {', '.join(map(str, unknown))}")
    return days


class _Input(BaseModel):
    # accepts both the UI's camelCase keys and snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AddOnInput(_Input):
    """Schema for a selected add-on."""
    price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=0)


class WeeklyCustomizationInput(_Input):
    """Schema for a selected weekly customization."""
    price: float = Field(..., ge=0)
    days: List[str] = Field(default_factory=list)

    @field_validator('days')
    @classmethod
    def validate_days(cls, v):
        return _check_days(v)


class OrderSelectionInput(_Input):
    """Schema for the price-calculation payload."""
    base_price: float = Field(..., ge=0)
    add_ons: List[AddOnInput] = Field(default_factory=list)
    weekly_customizations: List[WeeklyCustomizationInput] = Field(default_factory=list)
    delivery_charge: float = Field(0, ge=0)
    discount_amount: float = Field(0, ge=0)
    quantity: int = Field(1, ge=1)
    selected_days: List[str] = Field(default_factory=list)

    @field_validator('selected_days')
    @classmethod
    def validate_selected_days(cls, v):
        return _check_days(v)

    def to_params(self) -> PriceCalculationParams:
        return PriceCalculationParams(
            base_price=self.base_price,
            add_ons=[AddOnSelection(a.price, a.quantity) for a in self.add_ons],
            weekly_customizations=[WeeklyCustomizationSelection(c.price, c.days)
                                   for c in self.weekly_customizations],
            delivery_charge=self.delivery_charge,
            discount_amount=self.discount_amount,
            quantity=self.quantity,
            selected_days=self.selected_days,
        )


class SellerInput(_Input):
    """Schema for seller registration."""
    shop_name: str = Field(..., min_length=1, max_length=200)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1, max_length=100)
    contact_number: str = Field(..., pattern=r'^\+?[0-9 \-]{7,15}$')

    @field_validator('shop_name', 'address', 'city')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        v = v.strip()
        if not v:
            raise ValueError('Field cannot be blank')
        return v


class CouponInput(_Input):
    """Schema for coupon creation."""
    code: str = Field(..., min_length=3, max_length=30)
    description: str = Field(..., min_length=1)
    discount_type: str = Field(..., pattern=r'^(fixed|percentage)$')
    discount_value: float = Field(..., gt=0)
    min_order_amount: float = Field(0, ge=0)
    max_discount_amount: Optional[float] = Field(None, gt=0)
    valid_from: datetime
    valid_until: datetime
    usage_limit: int = Field(100, ge=1)

    @field_validator('code')
    @classmethod
    def normalize_code(cls, v):
        """Coupon codes are stored upper-cased."""
        return v.strip().upper()

    @model_validator(mode='after')
    def check_ranges(self):
        if self.discount_type == 'percentage' and self.discount_value > 100:
            raise ValueError('Percentage discount cannot exceed 100')
        if self.valid_until <= self.valid_from:
            raise ValueError('validUntil must be after validFrom')
        return self


class ReviewInput(_Input):
    """Schema for a customer rating of a seller."""
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = Field(None, max_length=1000)
