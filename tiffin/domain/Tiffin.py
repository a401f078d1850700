"""Tiffin domain entity: a seller's meal listing with its add-on and weekly customization catalog."""
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional

from tiffin.utilities.config import DEFAULT_MONTHLY_PRICE, DEFAULT_TRIAL_PRICE
from tiffin.utilities.dates import parse_datetime, format_datetime


class Category(str, Enum):
    VEG = "Veg"
    NON_VEG = "Non-Veg"
    JAIN = "Jain"


class ServiceType(str, Enum):
    MEAL = "meal"
    TIFFIN = "tiffin"


class MealType(str, Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    FULL_DAY = "Full Day"


class TiffinAddOn:
    def __init__(self, name: str, description: str = "", price: float = 0, available: bool = True):
        self.name = name
        self.description = description
        self.price = price
        self.available = available

    def __str__(self) -> str:
        return f"{self.name} +{self.price}" + ("" if self.available else " (unavailable)")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return TiffinAddOn(
            name=d.get("name", ""),
            description=d.get("description", ""),
            price=d.get("price", 0),
            available=d.get("available", True),
        )

    def to_dict(self):
        return {"name": self.name, "description": self.description,
                "price": self.price, "available": self.available}


class TiffinCustomization:
    def __init__(self, name: str, description: str = "", price: float = 0,
                 days: Optional[Iterable[str]] = None, available: bool = True):
        self.name = name
        self.description = description
        self.price = price
        self.days = list(days) if days else []
        self.available = available

    def __str__(self) -> str:
        return f"{self.name} +{self.price} on {', '.join(self.days) or '-'}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return TiffinCustomization(
            name=d.get("name", ""),
            description=d.get("description", ""),
            price=d.get("price", 0),
            days=d.get("days") or [],
            available=d.get("available", True),
        )

    def to_dict(self):
        return {"name": self.name, "description": self.description, "price": self.price,
                "days": list(self.days), "available": self.available}


class Tiffin:
    def __init__(self, seller_id: str, title: str, description: str, category: Category, price: float,
                 available_days: Optional[Iterable[str]] = None, slots: Optional[Iterable[str]] = None,
                 image_url: Optional[str] = None,
                 add_ons: Optional[List[TiffinAddOn]] = None,
                 weekly_customizations: Optional[List[TiffinCustomization]] = None,
                 service_type: ServiceType = ServiceType.MEAL, meal_type: MealType = MealType.LUNCH,
                 trial_price: float = DEFAULT_TRIAL_PRICE, monthly_price: float = DEFAULT_MONTHLY_PRICE,
                 customizable_options: Optional[List[str]] = None,
                 id: Optional[str] = None, created_at: Optional[datetime] = None):
        self.id = id
        self.seller_id = seller_id
        self.title = title
        self.description = description
        self.category = Category(category)
        self.price = price
        self.available_days = list(available_days) if available_days else []
        self.slots = list(slots) if slots else []
        self.image_url = image_url
        self.add_ons = add_ons[:] if add_ons else []
        self.weekly_customizations = weekly_customizations[:] if weekly_customizations else []
        self.service_type = ServiceType(service_type)
        self.meal_type = MealType(meal_type)
        self.trial_price = trial_price
        self.monthly_price = monthly_price
        self.customizable_options = customizable_options[:] if customizable_options else []
        self.created_at = created_at

    def find_add_on(self, name: str) -> Optional[TiffinAddOn]:
        return next((a for a in self.add_ons if a.name == name), None)

    def find_customization(self, name: str) -> Optional[TiffinCustomization]:
        return next((c for c in self.weekly_customizations if c.name == name), None)

    def __str__(self) -> str:
        return f"{self.title} [{self.category.value}, {self.meal_type.value}] - {self.price}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Tiffin from a stored document. Ignores unknown keys; raises ValueError on unknown enum values.'''
        d = dict(data) if isinstance(data, dict) else {}
        tiffin_id = d.get("_id", d.get("id"))
        return Tiffin(
            id=str(tiffin_id) if tiffin_id is not None else None,
            seller_id=str(d.get("sellerId", "")),
            title=d.get("title", ""),
            description=d.get("description", ""),
            category=d.get("category"),
            price=d.get("price", 0),
            available_days=d.get("availableDays") or [],
            slots=d.get("slots") or [],
            image_url=d.get("imageUrl") or None,
            add_ons=[TiffinAddOn.from_dict(a) for a in d.get("addOns") or []],
            weekly_customizations=[TiffinCustomization.from_dict(c)
                                   for c in d.get("weeklyCustomizations") or []],
            service_type=d.get("serviceType") or ServiceType.MEAL,
            meal_type=d.get("mealType") or MealType.LUNCH,
            trial_price=d.get("trialPrice", DEFAULT_TRIAL_PRICE),
            monthly_price=d.get("monthlyPrice", DEFAULT_MONTHLY_PRICE),
            customizable_options=d.get("customizableOptions") or [],
            created_at=parse_datetime(d.get("createdAt")),
        )

    def to_dict(self):
        data = {
            "sellerId": self.seller_id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "price": self.price,
            "availableDays": list(self.available_days),
            "slots": list(self.slots),
            "addOns": [a.to_dict() for a in self.add_ons],
            "weeklyCustomizations": [c.to_dict() for c in self.weekly_customizations],
            "serviceType": self.service_type.value,
            "mealType": self.meal_type.value,
            "trialPrice": self.trial_price,
            "monthlyPrice": self.monthly_price,
            "customizableOptions": list(self.customizable_options),
            "createdAt": format_datetime(self.created_at),
        }
        if self.image_url:
            data["imageUrl"] = self.image_url
        if self.id is not None:
            data["_id"] = self.id
        return data
