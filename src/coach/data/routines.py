"""Pre-authored strength routines.

PHASE_ROUTINES holds complementary strength work for endurance athletes,
keyed by training phase. FOCUS_ROUTINES holds dedicated programs keyed by
strength focus.
"""

from ..models.strength import MuscleGroup, StrengthExercise, StrengthRoutine

CORE = MuscleGroup.CORE
GLUTES = MuscleGroup.GLUTES
LEGS = MuscleGroup.LEGS
UPPER = MuscleGroup.UPPER


PHASE_ROUTINES: dict[str, tuple[StrengthRoutine, ...]] = {
    "base": (
        StrengthRoutine(
            name="Base A - Max Strength",
            key="base",
            duration_minutes=50,
            notes="Heavy loads, full recovery between sets.",
            exercises=(
                StrengthExercise("Back Squat", sets=4, reps=5, muscle_group=LEGS, rest_seconds=150),
                StrengthExercise("Romanian Deadlift", sets=3, reps=6, muscle_group=GLUTES, rest_seconds=120),
                StrengthExercise("Bulgarian Split Squat", sets=3, reps="6/side", muscle_group=LEGS, rest_seconds=90),
                StrengthExercise("Single-Leg Calf Raise", sets=3, reps=12, muscle_group=LEGS),
                StrengthExercise("Plank", sets=3, reps="45s", muscle_group=CORE, rest_seconds=45),
            ),
        ),
        StrengthRoutine(
            name="Base B - Stability",
            key="base",
            duration_minutes=40,
            notes="Control the eccentric, focus on alignment.",
            exercises=(
                StrengthExercise("Hip Thrust", sets=4, reps=8, muscle_group=GLUTES, rest_seconds=90),
                StrengthExercise("Step-Up", sets=3, reps="8/side", muscle_group=LEGS),
                StrengthExercise("Single-Leg Deadlift", sets=3, reps="8/side", muscle_group=GLUTES),
                StrengthExercise("Side Plank", sets=3, reps="30s/side", muscle_group=CORE, rest_seconds=30),
                StrengthExercise("Dead Bug", sets=3, reps=10, muscle_group=CORE, rest_seconds=30),
            ),
        ),
    ),
    "build": (
        StrengthRoutine(
            name="Build A - Strength-Endurance",
            key="build",
            duration_minutes=45,
            notes="Moderate loads, shorter rest.",
            exercises=(
                StrengthExercise("Goblet Squat", sets=3, reps=12, muscle_group=LEGS, rest_seconds=60),
                StrengthExercise("Walking Lunge", sets=3, reps="10/side", muscle_group=LEGS, rest_seconds=60),
                StrengthExercise("Hip Thrust", sets=3, reps=12, muscle_group=GLUTES, rest_seconds=60),
                StrengthExercise("Calf Raise", sets=3, reps=15, muscle_group=LEGS, rest_seconds=45),
                StrengthExercise("Pallof Press", sets=3, reps="10/side", muscle_group=CORE, rest_seconds=30),
            ),
        ),
        StrengthRoutine(
            name="Build B - Circuit",
            key="build",
            duration_minutes=35,
            notes="Move between exercises with minimal rest, 3 rounds.",
            exercises=(
                StrengthExercise("Box Step-Up", sets=3, reps="12/side", muscle_group=LEGS, rest_seconds=20),
                StrengthExercise("Kettlebell Swing", sets=3, reps=15, muscle_group=GLUTES, rest_seconds=20),
                StrengthExercise("Push-Up", sets=3, reps=12, muscle_group=UPPER, rest_seconds=20),
                StrengthExercise("Mountain Climber", sets=3, reps="30s", muscle_group=CORE, rest_seconds=20),
            ),
        ),
    ),
    "peak": (
        StrengthRoutine(
            name="Peak - Maintenance",
            key="peak",
            duration_minutes=30,
            notes="Keep the load, halve the volume. Stop well short of failure.",
            exercises=(
                StrengthExercise("Back Squat", sets=2, reps=5, muscle_group=LEGS, rest_seconds=120),
                StrengthExercise("Single-Leg Deadlift", sets=2, reps="6/side", muscle_group=GLUTES),
                StrengthExercise("Calf Raise", sets=2, reps=12, muscle_group=LEGS, rest_seconds=45),
                StrengthExercise("Plank", sets=2, reps="45s", muscle_group=CORE, rest_seconds=30),
            ),
        ),
    ),
    "taper": (
        StrengthRoutine(
            name="Taper - Activation",
            key="taper",
            duration_minutes=20,
            notes="Fast, light and crisp. Nothing that leaves you sore.",
            exercises=(
                StrengthExercise("Bodyweight Squat Jump", sets=2, reps=5, muscle_group=LEGS, rest_seconds=60),
                StrengthExercise("Glute Bridge", sets=2, reps=10, muscle_group=GLUTES, rest_seconds=30),
                StrengthExercise("A-Skip", sets=2, reps="20m", muscle_group=LEGS, rest_seconds=30),
                StrengthExercise("Bird Dog", sets=2, reps="8/side", muscle_group=CORE, rest_seconds=30),
            ),
        ),
    ),
}


FOCUS_ROUTINES: dict[str, tuple[StrengthRoutine, ...]] = {
    "hypertrophy": (
        StrengthRoutine(
            name="Hypertrophy - Upper",
            key="hypertrophy",
            duration_minutes=60,
            exercises=(
                StrengthExercise("Bench Press", sets=4, reps=10, muscle_group=UPPER, rest_seconds=90),
                StrengthExercise("Seated Cable Row", sets=4, reps=10, muscle_group=UPPER, rest_seconds=90),
                StrengthExercise("Dumbbell Shoulder Press", sets=3, reps=12, muscle_group=UPPER),
                StrengthExercise("Lat Pulldown", sets=3, reps=12, muscle_group=UPPER),
                StrengthExercise("Lateral Raise", sets=3, reps=15, muscle_group=UPPER, rest_seconds=45),
            ),
        ),
        StrengthRoutine(
            name="Hypertrophy - Lower",
            key="hypertrophy",
            duration_minutes=60,
            exercises=(
                StrengthExercise("Back Squat", sets=4, reps=8, muscle_group=LEGS, rest_seconds=120),
                StrengthExercise("Romanian Deadlift", sets=4, reps=10, muscle_group=GLUTES, rest_seconds=90),
                StrengthExercise("Leg Press", sets=3, reps=12, muscle_group=LEGS, rest_seconds=90),
                StrengthExercise("Leg Curl", sets=3, reps=12, muscle_group=LEGS),
                StrengthExercise("Calf Raise", sets=4, reps=15, muscle_group=LEGS, rest_seconds=45),
            ),
        ),
        StrengthRoutine(
            name="Hypertrophy - Full Body",
            key="hypertrophy",
            duration_minutes=55,
            exercises=(
                StrengthExercise("Incline Dumbbell Press", sets=3, reps=10, muscle_group=UPPER, rest_seconds=90),
                StrengthExercise("Pull-Up", sets=3, reps=8, muscle_group=UPPER, rest_seconds=90),
                StrengthExercise("Walking Lunge", sets=3, reps="10/side", muscle_group=LEGS),
                StrengthExercise("Hip Thrust", sets=3, reps=12, muscle_group=GLUTES),
                StrengthExercise("Cable Crunch", sets=3, reps=15, muscle_group=CORE, rest_seconds=45),
            ),
        ),
    ),
    "strength": (
        StrengthRoutine(
            name="Strength - Squat & Bench",
            key="strength",
            duration_minutes=60,
            notes="Work up to the top sets at RPE 8.",
            exercises=(
                StrengthExercise("Back Squat", sets=5, reps=5, muscle_group=LEGS, rest_seconds=180),
                StrengthExercise("Bench Press", sets=5, reps=5, muscle_group=UPPER, rest_seconds=180),
                StrengthExercise("Barbell Row", sets=3, reps=6, muscle_group=UPPER, rest_seconds=120),
            ),
        ),
        StrengthRoutine(
            name="Strength - Deadlift & Press",
            key="strength",
            duration_minutes=60,
            notes="Work up to the top sets at RPE 8.",
            exercises=(
                StrengthExercise("Deadlift", sets=3, reps=5, muscle_group=GLUTES, rest_seconds=180),
                StrengthExercise("Overhead Press", sets=5, reps=5, muscle_group=UPPER, rest_seconds=150),
                StrengthExercise("Weighted Pull-Up", sets=3, reps=5, muscle_group=UPPER, rest_seconds=120),
            ),
        ),
    ),
    "power": (
        StrengthRoutine(
            name="Power - Lower",
            key="power",
            duration_minutes=45,
            notes="Maximal intent on every rep; stop a set when speed drops.",
            exercises=(
                StrengthExercise("Box Jump", sets=4, reps=4, muscle_group=LEGS, rest_seconds=90),
                StrengthExercise("Power Clean", sets=5, reps=3, muscle_group=LEGS, rest_seconds=150),
                StrengthExercise("Trap Bar Jump", sets=3, reps=5, muscle_group=LEGS, rest_seconds=120),
                StrengthExercise("Medicine Ball Slam", sets=3, reps=6, muscle_group=CORE),
            ),
        ),
        StrengthRoutine(
            name="Power - Upper",
            key="power",
            duration_minutes=40,
            exercises=(
                StrengthExercise("Push Press", sets=5, reps=3, muscle_group=UPPER, rest_seconds=150),
                StrengthExercise("Plyometric Push-Up", sets=4, reps=5, muscle_group=UPPER, rest_seconds=90),
                StrengthExercise("Medicine Ball Chest Pass", sets=3, reps=6, muscle_group=UPPER),
            ),
        ),
    ),
    "endurance": (
        StrengthRoutine(
            name="Muscular Endurance - Circuit A",
            key="endurance",
            duration_minutes=40,
            exercises=(
                StrengthExercise("Goblet Squat", sets=3, reps=20, muscle_group=LEGS, rest_seconds=30),
                StrengthExercise("Push-Up", sets=3, reps=20, muscle_group=UPPER, rest_seconds=30),
                StrengthExercise("Inverted Row", sets=3, reps=15, muscle_group=UPPER, rest_seconds=30),
                StrengthExercise("Plank", sets=3, reps="60s", muscle_group=CORE, rest_seconds=30),
            ),
        ),
        StrengthRoutine(
            name="Muscular Endurance - Circuit B",
            key="endurance",
            duration_minutes=40,
            exercises=(
                StrengthExercise("Walking Lunge", sets=3, reps="15/side", muscle_group=LEGS, rest_seconds=30),
                StrengthExercise("Kettlebell Swing", sets=3, reps=20, muscle_group=GLUTES, rest_seconds=30),
                StrengthExercise("Dumbbell Thruster", sets=3, reps=15, muscle_group=UPPER, rest_seconds=30),
                StrengthExercise("Hollow Hold", sets=3, reps="30s", muscle_group=CORE, rest_seconds=30),
            ),
        ),
    ),
    "functional": (
        StrengthRoutine(
            name="Functional - Movement Patterns",
            key="functional",
            duration_minutes=45,
            exercises=(
                StrengthExercise("Goblet Squat", sets=3, reps=10, muscle_group=LEGS),
                StrengthExercise("Kettlebell Deadlift", sets=3, reps=10, muscle_group=GLUTES),
                StrengthExercise("Farmer's Carry", sets=3, reps="40m", muscle_group=CORE),
                StrengthExercise("Half-Kneeling Press", sets=3, reps="8/side", muscle_group=UPPER),
                StrengthExercise("Single-Arm Row", sets=3, reps="10/side", muscle_group=UPPER),
            ),
        ),
        StrengthRoutine(
            name="Functional - Unilateral & Core",
            key="functional",
            duration_minutes=40,
            exercises=(
                StrengthExercise("Reverse Lunge", sets=3, reps="8/side", muscle_group=LEGS),
                StrengthExercise("Single-Leg Deadlift", sets=3, reps="8/side", muscle_group=GLUTES),
                StrengthExercise("Suitcase Carry", sets=3, reps="30m/side", muscle_group=CORE),
                StrengthExercise("Pallof Press", sets=3, reps="10/side", muscle_group=CORE, rest_seconds=30),
            ),
        ),
    ),
    "maintenance": (
        StrengthRoutine(
            name="Maintenance - Full Body",
            key="maintenance",
            duration_minutes=40,
            notes="Two sessions a week keep strength with minimal fatigue.",
            exercises=(
                StrengthExercise("Back Squat", sets=3, reps=6, muscle_group=LEGS, rest_seconds=120),
                StrengthExercise("Bench Press", sets=3, reps=6, muscle_group=UPPER, rest_seconds=120),
                StrengthExercise("Romanian Deadlift", sets=2, reps=8, muscle_group=GLUTES, rest_seconds=90),
                StrengthExercise("Pull-Up", sets=3, reps=6, muscle_group=UPPER, rest_seconds=90),
            ),
        ),
    ),
}
