"""Database layer for coach."""

from .engine import get_db_path, init_db
from .repositories import (
    ActivityRepository,
    AthleteRepository,
    BodyCompositionRepository,
    FoodLogRepository,
    IntegrationRepository,
    export_all,
)

__all__ = [
    "ActivityRepository",
    "AthleteRepository",
    "BodyCompositionRepository",
    "export_all",
    "FoodLogRepository",
    "get_db_path",
    "init_db",
    "IntegrationRepository",
]
