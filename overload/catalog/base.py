"""Base upper/lower strength program shared by the shipped profiles."""

from overload.catalog.types import ExerciseDefinition, Program

TRAINING_DAYS = ("Push A", "Pull A", "Mobility", "Push B", "Pull B")

_EXERCISES = [
    ExerciseDefinition(
        id="squat",
        name="Back Squat",
        description=(
            "Set bar on upper back (not neck). Feet shoulder-width with slight toe out. Big breath and brace, "
            "sit hips back and down between heels. Keep chest proud, knees track over toes. Descend under "
            "control, then drive up through mid-foot while keeping the bar over the mid-foot."
        ),
        type="barbell",
        increment_kg=5,
        start_weight_kg=94.0,
    ),
    ExerciseDefinition(
        id="bench",
        name="Bench Press",
        description=(
            "Lie with eyes under bar. Pin shoulder blades down and back, feet planted. Grip slightly wider "
            "than shoulders. Lower bar to mid-chest with elbows about 45 degrees from torso. Pause lightly, "
            "then press up and back toward the rack while keeping the chest up."
        ),
        type="barbell",
        increment_kg=2.5,
        start_weight_kg=62.0,
    ),
    ExerciseDefinition(
        id="overhead_press",
        name="Overhead Press",
        description=(
            "Hands just outside shoulders, wrists stacked. Squeeze glutes and ribs down. Press bar straight "
            "up, move head slightly back, then push head through at the top. Lower under control to upper chest."
        ),
        type="barbell",
        increment_kg=2.5,
        start_weight_kg=32.0,
    ),
    ExerciseDefinition(
        id="floor_press",
        name="Floor Press (DB)",
        description="Upper arms rest on the floor each rep, press dumbbells with control, stop short of bouncing elbows.",
        type="dumbbell",
        increment_kg=2.0,
        start_weight_kg=24.0,
    ),
    ExerciseDefinition(
        id="incline_db_press",
        name="Incline DB Press",
        description=(
            "Set bench at 20-30 degrees. Pull shoulder blades back and down. Start dumbbells over chest, lower "
            "to upper chest line with elbows at 45 degrees, then press up and slightly back, staying controlled."
        ),
        type="dumbbell",
        increment_kg=2.0,
        start_weight_kg=24.0,
    ),
    ExerciseDefinition(
        id="smith_incline_press",
        name="Smith Incline Press",
        description="Bench at 20-30 degrees, keep wrists stacked, bar path to upper chest, drive up smoothly.",
        type="smith",
        increment_kg=2.5,
        start_weight_kg=50.0,
    ),
    ExerciseDefinition(
        id="close_grip_bench",
        name="Close-Grip Bench Press",
        description=(
            "Hands just inside shoulder width. Keep elbows tucked, lower bar to lower chest, then press up "
            "without flaring elbows. Keep shoulder blades pinned and feet planted."
        ),
        type="barbell",
        increment_kg=2.5,
        start_weight_kg=60.0,
    ),
    ExerciseDefinition(
        id="skullcrusher",
        name="Skullcrusher",
        description="Elbows stay still, lower bar toward forehead, extend hard without letting elbows flare.",
        type="barbell",
        increment_kg=1.25,
        start_weight_kg=20.8,
    ),
    ExerciseDefinition(
        id="tricep_pushdown",
        name="Tricep Pushdown",
        description="Elbows pinned to ribs, press down fully, slow return with control.",
        type="cable",
        increment_kg=1.25,
        start_weight_kg=12.0,
    ),
    ExerciseDefinition(
        id="cable_lateral_raise",
        name="Cable Lateral Raise",
        description=(
            "Stand with cable behind you, slight lean. Keep a soft elbow and raise to shoulder height with "
            "pinky slightly up. Pause, then lower slowly to keep tension."
        ),
        type="cable",
        increment_kg=1.25,
        start_weight_kg=6.0,
    ),
    ExerciseDefinition(
        id="leg_press",
        name="Leg Press",
        description=(
            "Feet shoulder-width, toes slightly out. Lower sled until knees are near 90 degrees while keeping "
            "heels down. Drive through mid-foot/heel, don't lock knees hard at the top."
        ),
        type="machine",
        increment_kg=5,
        start_weight_kg=70.0,
        max_weight_kg=90.0,
    ),
    ExerciseDefinition(
        id="bulgarian_split_squat",
        name="Bulgarian Split Squat",
        description=(
            "Rear foot elevated on bench. Chest tall, front shin near vertical. Lower until front thigh is "
            "near parallel, drive through mid-foot/heel. Use controlled tempo."
        ),
        type="dumbbell",
        increment_kg=2.5,
        start_weight_kg=20.0,
    ),
    ExerciseDefinition(
        id="deadlift",
        name="Deadlift",
        description=(
            "Bar over mid-foot, shins close. Grip just outside legs. Brace hard, lift chest, then push the "
            "floor away. Keep bar close to legs, stand tall with glutes. Lower by hinging hips back, then bend knees."
        ),
        type="barbell",
        increment_kg=5,
        start_weight_kg=80.0,
    ),
    ExerciseDefinition(
        id="romanian_deadlift",
        name="Romanian Deadlift",
        description="Soft knees, hinge hips back, bar stays close to legs, feel hamstrings, stand tall at top.",
        type="barbell",
        increment_kg=5,
        start_weight_kg=70.0,
    ),
    ExerciseDefinition(
        id="lat_pulldown",
        name="Lat Pulldown",
        description=(
            "Sit tall with chest up. Pull bar to upper chest, elbows down and back. Avoid swinging. Control "
            "the return fully to stretch lats."
        ),
        type="machine",
        increment_kg=2.5,
        start_weight_kg=28.0,
    ),
    ExerciseDefinition(
        id="seated_row",
        name="Seated Row",
        description="Neutral spine, pull handle to mid-torso, squeeze shoulder blades, controlled return.",
        type="machine",
        increment_kg=2.5,
        start_weight_kg=50.0,
    ),
    ExerciseDefinition(
        id="dumbbell_row",
        name="Dumbbell Row",
        description=(
            "One knee/hand on bench, back flat. Pull elbow toward hip, squeeze back. Avoid twisting torso. "
            "Lower with control."
        ),
        type="dumbbell",
        increment_kg=2.0,
        start_weight_kg=26.0,
    ),
    ExerciseDefinition(
        id="cable_row",
        name="Cable Row (Single Arm)",
        description=(
            "Set cable at mid-torso height. Brace on the bench or rack, pull elbow toward hip, squeeze back, "
            "control the return."
        ),
        type="cable",
        increment_kg=2.5,
        start_weight_kg=30.0,
    ),
    ExerciseDefinition(
        id="face_pull",
        name="Face Pull (Rope)",
        description=(
            "Set cable at upper chest height. Pull rope to nose/eyes, elbows high and out. Squeeze rear "
            "delts, slow return."
        ),
        type="cable",
        increment_kg=2.5,
        start_weight_kg=20.0,
    ),
    ExerciseDefinition(
        id="preacher_curl",
        name="Preacher Curl",
        description="Upper arms fixed, curl without shoulder swing, full extension with control.",
        type="machine",
        increment_kg=1.25,
        start_weight_kg=20.0,
    ),
    ExerciseDefinition(
        id="hammer_curl",
        name="Hammer Curl (DB)",
        description="Neutral grip, elbows at sides. Curl without swinging. Pause briefly at top, lower slowly.",
        type="dumbbell",
        increment_kg=1.25,
        start_weight_kg=18.0,
    ),
    ExerciseDefinition(
        id="overhead_cable_extension",
        name="Overhead Cable Extension",
        description="Elbows in, extend fully, keep ribcage down, slow return.",
        type="cable",
        increment_kg=1.25,
        start_weight_kg=14.0,
    ),
    ExerciseDefinition(
        id="pullup",
        name="Pull-up",
        description=(
            "Grip just outside shoulders. Start from a dead hang, brace core, pull chest to bar. Lower slowly "
            "to full hang."
        ),
        type="bodyweight",
        increment_kg=1.25,
        start_weight_kg=0,
        uses_bodyweight=True,
    ),
    ExerciseDefinition(
        id="pullup_negative",
        name="Pull-up Negative",
        description="Jump or step to top, lower slowly for 3-5 seconds, stay tight.",
        type="bodyweight",
        increment_kg=0,
        start_weight_kg=0,
        uses_bodyweight=True,
        fixed_target_reps=3,
    ),
    ExerciseDefinition(
        id="mobility_hips",
        name="Hip Mobility Flow",
        description="Slow, controlled hip circles and openers. Breathe and stay smooth.",
        type="mobility",
        increment_kg=0,
        start_weight_kg=0,
        fixed_target_reps=8,
    ),
    ExerciseDefinition(
        id="mobility_shoulders",
        name="Shoulder CARs",
        description="Controlled shoulder rotations with full range and no momentum.",
        type="mobility",
        increment_kg=0,
        start_weight_kg=0,
        fixed_target_reps=6,
    ),
    ExerciseDefinition(
        id="mobility_core",
        name="Dead Bug",
        description="Low back stays down, extend opposite arm/leg, slow and controlled.",
        type="mobility",
        increment_kg=0,
        start_weight_kg=0,
        fixed_target_reps=10,
    ),
]

BASE_EXERCISE_LIBRARY: dict[str, ExerciseDefinition] = {exercise.id: exercise for exercise in _EXERCISES}

BASE_DAY_TEMPLATES: dict[str, tuple[str, ...]] = {
    "Push A": ("squat", "bench", "overhead_press", "incline_db_press", "cable_lateral_raise", "tricep_pushdown"),
    "Push B": (
        "bulgarian_split_squat",
        "close_grip_bench",
        "smith_incline_press",
        "overhead_press",
        "cable_lateral_raise",
        "skullcrusher",
        "tricep_pushdown",
    ),
    "Pull A": ("deadlift", "lat_pulldown", "cable_row", "seated_row", "face_pull", "preacher_curl"),
    "Pull B": ("deadlift", "lat_pulldown", "seated_row", "cable_row", "face_pull", "hammer_curl"),
    "Mobility": ("mobility_hips", "mobility_shoulders", "mobility_core"),
}

BASE_PROGRAM = Program(
    training_days=TRAINING_DAYS,
    exercise_library=BASE_EXERCISE_LIBRARY,
    day_templates=BASE_DAY_TEMPLATES,
)
