"""Sample meal templates with approximate macros."""

from ..models.nutrition import MacroTotals

MEAL_TEMPLATES: dict[str, tuple[str, MacroTotals]] = {
    "breakfast_pre_long_run": (
        "Oats with banana and honey",
        MacroTotals(calories=450, protein=12, carbs=85, fat=8),
    ),
    "breakfast": (
        "Toast with egg and avocado",
        MacroTotals(calories=400, protein=20, carbs=35, fat=22),
    ),
    "lunch_post_run": (
        "Chicken with rice and vegetables",
        MacroTotals(calories=550, protein=40, carbs=60, fat=14),
    ),
    "dinner_recovery": (
        "Salmon with potato and salad",
        MacroTotals(calories=500, protein=35, carbs=40, fat=20),
    ),
    "protein_snack": (
        "Greek yoghurt with walnuts",
        MacroTotals(calories=250, protein=20, carbs=12, fat=14),
    ),
    "pre_run_snack": (
        "Banana with peanut butter",
        MacroTotals(calories=200, protein=5, carbs=30, fat=8),
    ),
}
