"""Jacob: upper-body strength cycle.

Base program with a barbell row in place of the seated row on pull days and
fixed higher-rep targets on the accessory lifts.
"""

from overload.catalog.base import BASE_DAY_TEMPLATES, BASE_EXERCISE_LIBRARY, TRAINING_DAYS
from overload.catalog.types import ExerciseDefinition, ProfileDefaults, Program, ProgramProfile

BARBELL_ROW = ExerciseDefinition(
    id="barbell_row",
    name="Barbell Row",
    description=(
        "Bend over with hips back (approx 45 degrees). Keep spine neutral. Pull bar to lower chest/upper abs. "
        "Squeeze shoulder blades, lower with control."
    ),
    type="barbell",
    increment_kg=2.5,
    start_weight_kg=50,
)

# Accessories move to fixed hypertrophy rep targets
HYPERTROPHY_OVERRIDES: dict[str, dict[str, float | int]] = {
    "incline_db_press": {"fixed_target_reps": 10},
    "smith_incline_press": {"fixed_target_reps": 10, "start_weight_kg": 35},
    "cable_lateral_raise": {"fixed_target_reps": 15, "start_weight_kg": 4},
    "tricep_pushdown": {"fixed_target_reps": 12, "start_weight_kg": 10},
    "skullcrusher": {"fixed_target_reps": 12, "start_weight_kg": 15},
    "face_pull": {"fixed_target_reps": 15, "start_weight_kg": 15},
    "preacher_curl": {"fixed_target_reps": 12, "start_weight_kg": 15},
    "hammer_curl": {"fixed_target_reps": 12, "start_weight_kg": 12},
    "cable_row": {"fixed_target_reps": 12, "start_weight_kg": 20},
    "bulgarian_split_squat": {"fixed_target_reps": 10, "start_weight_kg": 16},
}


def _build_library() -> dict[str, ExerciseDefinition]:
    library = dict(BASE_EXERCISE_LIBRARY)
    library[BARBELL_ROW.id] = BARBELL_ROW
    for exercise_id, changes in HYPERTROPHY_OVERRIDES.items():
        if exercise_id in library:
            library[exercise_id] = library[exercise_id].with_overrides(**changes)
    return library


def _build_templates() -> dict[str, tuple[str, ...]]:
    templates = dict(BASE_DAY_TEMPLATES)
    for day_key in ("Pull A", "Pull B"):
        templates[day_key] = tuple(
            BARBELL_ROW.id if exercise_id == "seated_row" else exercise_id for exercise_id in templates[day_key]
        )
    return templates


JACOB = ProgramProfile(
    id="jacob",
    name="Jacob",
    title="Upper-Body Strength Cycle",
    short_title="Upper-Body Strength",
    program=Program(
        training_days=TRAINING_DAYS,
        exercise_library=_build_library(),
        day_templates=_build_templates(),
    ),
    default_settings=ProfileDefaults(bodyweight_kg=105, rest_seconds=90),
)
