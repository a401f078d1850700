"""Coupon validation: decides whether a coupon applies to an order total and how much it takes off.

A rejected coupon is reported through CouponValidation.message with a zero
discount; validation never raises for business-rule failures.
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Optional

from tiffin.domain.Coupon import Coupon, DiscountType
from tiffin.utilities.config import CURRENCY_SYMBOL

logger = logging.getLogger(__name__)

__all__ = ["CouponValidation", "compute_coupon_discount", "validate_coupon"]


class CouponValidation:
    def __init__(self, is_valid: bool, discount_amount: float = 0, message: str = "",
                 coupon: Optional[Coupon] = None):
        self.is_valid = is_valid
        self.discount_amount = discount_amount
        self.message = message
        self.coupon = coupon

    def __str__(self) -> str:
        return f"{'valid' if self.is_valid else 'invalid'}: {self.message} (-{self.discount_amount})"

    __repr__ = __str__

    def to_dict(self):
        return {
            "isValid": self.is_valid,
            "discountAmount": self.discount_amount,
            "message": self.message,
            "couponCode": self.coupon.code if self.coupon else None,
        }


def compute_coupon_discount(coupon: Coupon, total_amount: float) -> float:
    """Discount for total_amount, capped by max_discount_amount (percentage only) and by the total itself."""
    if coupon.discount_type is DiscountType.PERCENTAGE:
        discount = total_amount * coupon.discount_value / 100
        if coupon.max_discount_amount and discount > coupon.max_discount_amount:
            discount = coupon.max_discount_amount
    else:
        discount = coupon.discount_value
    return max(min(discount, total_amount), 0)


def _as_comparable(moment: datetime, reference: datetime) -> datetime:
    # stored dates may be naive (UTC) or aware
    if moment.tzinfo is None and reference.tzinfo is not None:
        return moment.replace(tzinfo=timezone.utc)
    if moment.tzinfo is not None and reference.tzinfo is None:
        return moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def validate_coupon(coupon: Optional[Coupon], total_amount: float,
                    now: Optional[datetime] = None) -> CouponValidation:
    """Check a coupon against an order total (food + delivery) at the given moment (default: now, UTC)."""
    if coupon is None:
        return CouponValidation(False, 0, "Invalid coupon code")
    if not coupon.is_active:
        return CouponValidation(False, 0, "Invalid or inactive coupon code", coupon)

    now = now or datetime.now(timezone.utc)
    if coupon.valid_from and now < _as_comparable(coupon.valid_from, now):
        return CouponValidation(False, 0, "Coupon is not yet valid", coupon)
    if coupon.valid_until and now > _as_comparable(coupon.valid_until, now):
        return CouponValidation(False, 0, "Coupon has expired", coupon)
    if coupon.usage_exhausted:
        return CouponValidation(False, 0, "Coupon usage limit reached", coupon)
    if total_amount < coupon.min_order_amount:
        return CouponValidation(
            False, 0,
            f"Minimum order amount of {CURRENCY_SYMBOL}{coupon.min_order_amount} required",
            coupon,
        )

    discount = compute_coupon_discount(coupon, total_amount)
    logger.info(f"Coupon {coupon.code} applied: -{discount} on {total_amount}")
    return CouponValidation(True, discount, f"Coupon applied: {coupon.description}", coupon)
