"""Core business logic layer.

Subpackages:
- pricing: final amount, price breakdown and booking-type helpers
- coupons: coupon validation and discount computation
- ratings: seller rating statistics
"""
__all__ = ["pricing", "coupons", "ratings"]
