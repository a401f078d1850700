import unittest
from datetime import datetime, timedelta, timezone
from tiffin.domain.Coupon import Coupon, DiscountType
from tiffin.logic.coupons.validation import compute_coupon_discount, validate_coupon

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


def make_coupon(**overrides):
    fields = dict(
        code=" welcome50 ",
        description="Flat 50 off",
        discount_type=DiscountType.FIXED,
        discount_value=50,
        valid_from=NOW - timedelta(days=10),
        valid_until=NOW + timedelta(days=10),
        min_order_amount=200,
    )
    fields.update(overrides)
    return Coupon(**fields)


class TestCouponValidation(unittest.TestCase):

    def test_fixed_coupon_applies(self):
        result = validate_coupon(make_coupon(), 300, now=NOW)
        self.assertTrue(result.is_valid)
        self.assertEqual(result.discount_amount, 50)
        self.assertEqual(result.coupon.code, "WELCOME50")

    def test_percentage_capped_by_max_discount(self):
        coupon = make_coupon(discount_type="percentage", discount_value=20, max_discount_amount=60)
        self.assertEqual(validate_coupon(coupon, 250, now=NOW).discount_amount, 50)
        self.assertEqual(validate_coupon(coupon, 1000, now=NOW).discount_amount, 60)

    def test_discount_never_exceeds_total(self):
        coupon = make_coupon(discount_value=500, min_order_amount=0)
        self.assertEqual(compute_coupon_discount(coupon, 120), 120)

    def test_missing_coupon(self):
        result = validate_coupon(None, 300, now=NOW)
        self.assertFalse(result.is_valid)
        self.assertEqual(result.discount_amount, 0)
        self.assertEqual(result.message, "Invalid coupon code")

    def test_inactive(self):
        result = validate_coupon(make_coupon(is_active=False), 300, now=NOW)
        self.assertFalse(result.is_valid)

    def test_not_yet_valid(self):
        coupon = make_coupon(valid_from=NOW + timedelta(days=1))
        self.assertEqual(validate_coupon(coupon, 300, now=NOW).message, "Coupon is not yet valid")

    def test_expired(self):
        coupon = make_coupon(valid_until=NOW - timedelta(seconds=1))
        self.assertEqual(validate_coupon(coupon, 300, now=NOW).message, "Coupon has expired")

    def test_naive_dates_compare_as_utc(self):
        coupon = make_coupon(valid_from=datetime(2026, 3, 1), valid_until=datetime(2026, 3, 31))
        self.assertTrue(validate_coupon(coupon, 300, now=NOW).is_valid)

    def test_usage_limit(self):
        coupon = make_coupon(usage_limit=2)
        coupon.redeem().redeem()
        result = validate_coupon(coupon, 300, now=NOW)
        self.assertFalse(result.is_valid)
        self.assertEqual(result.message, "Coupon usage limit reached")

    def test_minimum_order(self):
        result = validate_coupon(make_coupon(), 199, now=NOW)
        self.assertFalse(result.is_valid)
        self.assertIn("200", result.message)

    def test_to_dict(self):
        data = validate_coupon(make_coupon(), 300, now=NOW).to_dict()
        self.assertEqual(data, {
            "isValid": True,
            "discountAmount": 50,
            "message": "Coupon applied: Flat 50 off",
            "couponCode": "WELCOME50",
        })


if __name__ == '__main__':
    unittest.main()
