"""Nutrition data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4


class DayType(str, Enum):
    """Training day classification used to pick macro targets."""

    LONG_RUN = "long_run"  # 90+ min endurance
    QUALITY = "quality"  # Intervals, tempo
    EASY = "easy"  # Recovery/easy session
    STRENGTH = "strength"  # Gym day
    REST = "rest"  # Complete rest
    RACE_WEEK = "race_week"  # Week of race/event
    RACE_DAY = "race_day"  # Day of race/event
    HIGH_VOLUME = "high_volume"  # High volume strength day
    DELOAD = "deload"  # Deload/recovery week


@dataclass(frozen=True)
class FoodEntry:
    """A logged food item. Entries are never edited, only removed."""

    name: str
    quantity: float
    unit: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    logged_at: datetime = field(default_factory=datetime.now)
    food_id: str = field(default_factory=lambda: f"manual_{uuid4().hex[:12]}")
    id: int | None = None

    def to_dict(self) -> dict:
        return {
            "food_id": self.food_id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
            "fiber": self.fiber,
            "logged_at": self.logged_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "FoodEntry":
        return cls(
            id=id,
            food_id=data["food_id"],
            name=data["name"],
            quantity=data["quantity"],
            unit=data.get("unit", "g"),
            calories=data["calories"],
            protein=data["protein"],
            carbs=data["carbs"],
            fat=data["fat"],
            fiber=data.get("fiber"),
            logged_at=datetime.fromisoformat(data["logged_at"]),
        )


@dataclass
class MacroTotals:
    """Accumulated (or remaining) macros. Values may be negative."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float = 0

    def to_dict(self) -> dict:
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
            "fiber": self.fiber,
        }


@dataclass(frozen=True)
class MacroTargets:
    """Daily calorie and macro goals."""

    calories: int
    protein: int
    carbs: int
    fat: int
    fiber: int = 30

    def to_dict(self) -> dict:
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
            "fiber": self.fiber,
        }
