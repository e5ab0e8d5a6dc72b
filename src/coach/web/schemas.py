"""Request bodies for the JSON API."""

from pydantic import BaseModel, Field

from ..models.athlete import ActivityLevel, Sex


class ProfileUpsert(BaseModel):
    name: str = "Athlete"
    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age: int = Field(gt=0)
    sex: Sex
    activity_level: ActivityLevel = ActivityLevel.HIGH
    resting_heart_rate: int | None = None
    max_heart_rate: int | None = None


class WeightUpdate(BaseModel):
    weight_kg: float


class GoalUpdate(BaseModel):
    goal: dict  # serialized goal, discriminated by "type"
    secondary: bool = False


class BodyCompositionCreate(BaseModel):
    weight_kg: float
    body_fat_percentage: float


class FoodEntryCreate(BaseModel):
    name: str
    quantity: float = Field(gt=0)
    unit: str = "g"
    calories: float = Field(ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    fiber: float | None = None
