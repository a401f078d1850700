"""Coupon domain entity: fixed or percentage discounts with a validity window and usage limit."""
from datetime import datetime
from enum import Enum
from typing import Optional

from tiffin.utilities.dates import parse_datetime, format_datetime


class DiscountType(str, Enum):
    FIXED = "fixed"
    PERCENTAGE = "percentage"


def normalize_code(code: str) -> str:
    return (code or "").strip().upper()


class Coupon:
    def __init__(self, code: str, description: str, discount_type: DiscountType, discount_value: float,
                 valid_from: datetime, valid_until: datetime, min_order_amount: float = 0,
                 max_discount_amount: Optional[float] = None, usage_limit: int = 100,
                 used_count: int = 0, is_active: bool = True, id: Optional[str] = None):
        self.id = id
        self.code = normalize_code(code)
        self.description = description
        self.discount_type = DiscountType(discount_type)
        self.discount_value = discount_value
        self.min_order_amount = min_order_amount
        self.max_discount_amount = max_discount_amount
        self.valid_from = valid_from
        self.valid_until = valid_until
        self.usage_limit = usage_limit
        self.used_count = used_count
        self.is_active = is_active

    @property
    def usage_exhausted(self) -> bool:
        return self.used_count >= self.usage_limit

    def redeem(self):
        '''Records one use of the coupon.'''
        self.used_count += 1
        return self

    def __str__(self) -> str:
        unit = "%" if self.discount_type is DiscountType.PERCENTAGE else ""
        return f"{self.code}: {self.discount_value}{unit} off ({self.used_count}/{self.usage_limit} used)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        coupon_id = d.get("_id", d.get("id"))
        return Coupon(
            id=str(coupon_id) if coupon_id is not None else None,
            code=d.get("code", ""),
            description=d.get("description", ""),
            discount_type=d.get("discountType"),
            discount_value=d.get("discountValue", 0),
            min_order_amount=d.get("minOrderAmount", 0),
            max_discount_amount=d.get("maxDiscountAmount"),
            valid_from=parse_datetime(d.get("validFrom")),
            valid_until=parse_datetime(d.get("validUntil")),
            usage_limit=d.get("usageLimit", 100),
            used_count=d.get("usedCount", 0),
            is_active=d.get("isActive", True),
        )

    def to_dict(self):
        data = {
            "code": self.code,
            "description": self.description,
            "discountType": self.discount_type.value,
            "discountValue": self.discount_value,
            "minOrderAmount": self.min_order_amount,
            "validFrom": format_datetime(self.valid_from),
            "validUntil": format_datetime(self.valid_until),
            "usageLimit": self.usage_limit,
            "usedCount": self.used_count,
            "isActive": self.is_active,
        }
        if self.max_discount_amount is not None:
            data["maxDiscountAmount"] = self.max_discount_amount
        if self.id is not None:
            data["_id"] = self.id
        return data
