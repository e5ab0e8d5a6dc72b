"""Static catalogs for coach."""

from .meals import MEAL_TEMPLATES
from .routines import FOCUS_ROUTINES, PHASE_ROUTINES

__all__ = ["FOCUS_ROUTINES", "MEAL_TEMPLATES", "PHASE_ROUTINES"]
