"""Seller domain entity: shop identity, contact details, lifecycle status and rating statistics."""
from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from tiffin.utilities.constants import RATING_VALUES
from tiffin.utilities.dates import parse_datetime, format_datetime


class SellerStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"


class RatingStats:
    def __init__(self, average_rating: float = 0, total_ratings: int = 0,
                 rating_breakdown: Optional[Dict[int, int]] = None):
        self.average_rating = average_rating
        self.total_ratings = total_ratings
        self.rating_breakdown = {star: 0 for star in RATING_VALUES}
        if rating_breakdown:
            for star, count in rating_breakdown.items():
                self.rating_breakdown[int(star)] = count

    def __eq__(self, other) -> bool:
        if not isinstance(other, RatingStats):
            return NotImplemented
        return (self.average_rating == other.average_rating
                and self.total_ratings == other.total_ratings
                and self.rating_breakdown == other.rating_breakdown)

    def __str__(self) -> str:
        return f"{self.average_rating}/5 ({self.total_ratings} ratings)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return RatingStats(
            average_rating=d.get("averageRating", 0),
            total_ratings=d.get("totalRatings", 0),
            rating_breakdown=d.get("ratingBreakdown"),
        )

    def to_dict(self):
        return {
            "averageRating": self.average_rating,
            "totalRatings": self.total_ratings,
            # document keys are strings once serialised
            "ratingBreakdown": {str(star): count for star, count in self.rating_breakdown.items()},
        }


class Seller:
    def __init__(self, user_id: str, shop_name: str, address: str, city: str, contact_number: str,
                 status: SellerStatus = SellerStatus.PENDING, is_top_rated: bool = False,
                 rating_stats: Optional[RatingStats] = None, id: Optional[str] = None,
                 created_at: Optional[datetime] = None, updated_at: Optional[datetime] = None):
        self.id = id
        self.user_id = user_id
        self.shop_name = shop_name
        self.address = address
        self.city = city
        self.contact_number = contact_number
        self.status = SellerStatus(status)
        self.is_top_rated = is_top_rated
        self.rating_stats = rating_stats or RatingStats()
        self.created_at = created_at
        self.updated_at = updated_at

    @property
    def is_active(self) -> bool:
        return self.status is SellerStatus.ACTIVE

    def __str__(self) -> str:
        return f"{self.shop_name} ({self.city}) - {self.status.value} - {self.rating_stats}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Seller from a stored document. Ignores unknown keys; raises ValueError on an unknown status.'''
        d = dict(data) if isinstance(data, dict) else {}
        seller_id = d.get("_id", d.get("id"))
        return Seller(
            id=str(seller_id) if seller_id is not None else None,
            user_id=str(d.get("userId", "")),
            shop_name=d.get("shopName", ""),
            address=d.get("address", ""),
            city=d.get("city", ""),
            contact_number=d.get("contactNumber", ""),
            status=d.get("status") or SellerStatus.PENDING,
            is_top_rated=bool(d.get("isTopRated", False)),
            rating_stats=RatingStats.from_dict(d.get("ratingStats")),
            created_at=parse_datetime(d.get("createdAt")),
            updated_at=parse_datetime(d.get("updatedAt")),
        )

    def to_dict(self):
        data = {
            "userId": self.user_id,
            "shopName": self.shop_name,
            "address": self.address,
            "city": self.city,
            "contactNumber": self.contact_number,
            "status": self.status.value,
            "isTopRated": self.is_top_rated,
            "ratingStats": self.rating_stats.to_dict(),
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }
        if self.id is not None:
            data["_id"] = self.id
        return data
