"""Seller rating statistics computed from individual review ratings."""
from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from tiffin.domain.Seller import RatingStats
from tiffin.utilities.constants import RATING_VALUES

__all__ = ["compute_rating_stats"]


def compute_rating_stats(ratings: Iterable[int]) -> RatingStats:
    """Average (one decimal), total and per-star breakdown. Raises ValueError for a rating outside 1..5."""
    values = list(ratings)
    if not values:
        return RatingStats()

    breakdown = {star: 0 for star in RATING_VALUES}
    for rating in values:
        if isinstance(rating, bool) or not isinstance(rating, int) or rating not in breakdown:
            raise ValueError(f"Rating must be one of {RATING_VALUES}, got {rating!r}")
        breakdown[rating] += 1

    # half-up, so 4.25 shows as 4.3
    average = float((Decimal(sum(values)) / Decimal(len(values))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    return RatingStats(average_rating=average, total_ratings=len(values), rating_breakdown=breakdown)
