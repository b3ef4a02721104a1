"""Mari: full-body toning on machines, cables and dumbbells."""

from overload.catalog.base import TRAINING_DAYS
from overload.catalog.types import ExerciseDefinition, ProfileDefaults, Program, ProgramProfile


def _exercise(
    exercise_id: str,
    name: str,
    description: str,
    type_: str,
    increment_kg: float,
    start_weight_kg: float,
    **extra: object,
) -> ExerciseDefinition:
    return ExerciseDefinition(
        id=exercise_id,
        name=name,
        description=description,
        type=type_,  # type: ignore[arg-type]
        increment_kg=increment_kg,
        start_weight_kg=start_weight_kg,
        **extra,  # type: ignore[arg-type]
    )


_EXERCISES = [
    _exercise(
        "leg_press",
        "Leg Press",
        "Back and head pressed into the pad, feet shoulder-width and high enough that heels stay flat. "
        "Lower under control until knees are near 90 degrees, drive through heels and mid-foot. "
        "Never fully lock the knees at the top.",
        "machine",
        5,
        65.0,
        max_weight_kg=90.0,
    ),
    _exercise(
        "chest_press_machine",
        "Chest Press Machine",
        "Seat so the handles line up with the middle of the chest. Push forward until arms are extended, "
        "return slowly without letting the stack slam. Elbows slightly below shoulders.",
        "machine",
        2.5,
        25.0,
    ),
    _exercise(
        "ohp_machine",
        "Overhead Press (Machine)",
        "Handles at chin level. Press straight up, lower slowly to ear level. Brace the core and keep the "
        "shoulders down.",
        "machine",
        2.5,
        20.0,
    ),
    _exercise(
        "smith_bench_press",
        "Smith Bench Press",
        "Bar over the nipple line, grip slightly wider than shoulders. Lower slowly, touch the chest without "
        "bouncing, press back up. Wrists straight, feet planted.",
        "smith",
        2.5,
        30.0,
    ),
    _exercise(
        "seated_db_shoulder_press",
        "Seated DB Shoulder Press",
        "Back supported, dumbbells at shoulder level. Press up until they almost touch, lower slowly to ear level.",
        "dumbbell",
        2.0,
        10.0,
    ),
    _exercise(
        "dumbbell_lateral_raise",
        "Dumbbell Lateral Raise",
        "Slight bend in the elbows, raise to shoulder height leading with the elbows, lower slowly. No swinging.",
        "dumbbell",
        1.0,
        6.0,
    ),
    _exercise(
        "cable_triceps_pressdown",
        "Cable Triceps Pressdown",
        "Elbows glued to the sides, push down until arms are straight, squeeze, return slowly to chest level.",
        "cable",
        1.25,
        12.0,
    ),
    _exercise(
        "cable_overhead_triceps_extension",
        "Cable Overhead Triceps Extension",
        "Rope behind the head facing away from the stack, lunge stance. Extend until straight, return to a stretch.",
        "cable",
        1.25,
        10.0,
    ),
    _exercise(
        "lat_pulldown",
        "Lat Pulldown Machine",
        "Thighs locked under the pads, wide grip. Pull to the collarbone driving elbows down, control the return.",
        "machine",
        2.5,
        25.0,
    ),
    _exercise(
        "seated_cable_row",
        "Seated Cable Row",
        "Sit tall with a neutral spine, pull the V-handle to the belly button, squeeze the shoulder blades, "
        "extend slowly.",
        "cable",
        2.5,
        30.0,
    ),
    _exercise(
        "dumbbell_rdl",
        "Dumbbell RDL (Romanian Deadlift)",
        "Soft knees, hinge hips back sliding the dumbbells down the legs with a flat back. Stand up by "
        "squeezing the glutes.",
        "dumbbell",
        2.5,
        20.0,
    ),
    _exercise(
        "cable_face_pull",
        "Cable Face Pull",
        "Rope at face height, pull toward the eyes with elbows back and out, squeeze the rear shoulders.",
        "cable",
        1.25,
        12.0,
    ),
    _exercise(
        "straight_arm_pulldown",
        "Straight-Arm Cable Pulldown",
        "Hips hinged, arms straight. Sweep the bar down in an arc to the thighs, return slowly to eye level.",
        "cable",
        1.25,
        12.0,
    ),
    _exercise(
        "one_arm_cable_row",
        "One-Arm Cable Row",
        "Cable at waist height, pull the elbow back past the body, let the torso rotate slightly on the stretch.",
        "cable",
        2.5,
        20.0,
    ),
    _exercise(
        "smith_rdl",
        "Smith Machine RDL",
        "Feet hip-width, knees soft. Push hips back sliding the bar down the thighs, drive hips forward to stand.",
        "smith",
        5,
        40.0,
    ),
    _exercise(
        "dumbbell_biceps_curl",
        "Dumbbell Biceps Curl",
        "Palms forward, curl to the shoulders, squeeze, lower over three seconds. Elbows stay by the ribs.",
        "dumbbell",
        1.0,
        8.0,
    ),
    _exercise(
        "smith_squat_box",
        "Smith Squat to Box",
        "Box behind you, feet slightly forward. Sit back until you lightly touch the box, then stand up.",
        "smith",
        5,
        30.0,
    ),
    _exercise(
        "cable_chest_fly",
        "Cable Chest Fly",
        "Pulleys at chest height, lunge stance. Hug the tree with a slight elbow bend, open slowly to a stretch.",
        "cable",
        1.25,
        10.0,
    ),
    _exercise(
        "cable_rear_delt_fly",
        "Cable Rear-Delt Fly",
        "Criss-cross the cables, pull hands apart and back with nearly straight arms.",
        "cable",
        1.25,
        8.0,
    ),
    _exercise(
        "leg_press_calf",
        "Leg Press Calf Press",
        "Balls of the feet on the platform edge, heels dropping for a stretch, press through the toes.",
        "machine",
        5,
        65.0,
        max_weight_kg=90.0,
    ),
    _exercise(
        "dumbbell_shrug",
        "Dumbbell Shrug",
        "Heavy dumbbells at the sides, shrug straight up, hold one second, lower slowly.",
        "dumbbell",
        2.5,
        16.0,
    ),
    _exercise(
        "hammer_curl",
        "Hammer Curl",
        "Palms facing the body, curl keeping the elbows fixed.",
        "dumbbell",
        1.0,
        10.0,
    ),
    _exercise(
        "mobility_hips",
        "Hip Mobility Flow",
        "Deep squat hold, leg swings front/back and side to side, then deep lunge hip openers.",
        "mobility",
        0,
        0,
        fixed_target_reps=8,
    ),
    _exercise(
        "mobility_shoulders",
        "Shoulder CARs (Rotations)",
        "Biggest possible arm circle, super slow, torso still. Reverse the direction.",
        "mobility",
        0,
        0,
        fixed_target_reps=6,
    ),
    _exercise(
        "mobility_core",
        "Dead Bug",
        "Lower back flat on the floor, slowly extend opposite arm and leg, breathe out hard as you extend.",
        "mobility",
        0,
        0,
        fixed_target_reps=10,
    ),
]

MARI = ProgramProfile(
    id="mari",
    name="Mari",
    title="Full-Body Toning",
    program=Program(
        training_days=TRAINING_DAYS,
        exercise_library={exercise.id: exercise for exercise in _EXERCISES},
        day_templates={
            "Push A": (
                "leg_press",
                "chest_press_machine",
                "ohp_machine",
                "cable_triceps_pressdown",
                "smith_squat_box",
                "leg_press_calf",
            ),
            "Pull A": (
                "lat_pulldown",
                "seated_cable_row",
                "dumbbell_rdl",
                "cable_face_pull",
                "straight_arm_pulldown",
                "dumbbell_shrug",
            ),
            "Push B": (
                "leg_press",
                "smith_bench_press",
                "seated_db_shoulder_press",
                "dumbbell_lateral_raise",
                "cable_chest_fly",
                "cable_overhead_triceps_extension",
            ),
            "Pull B": (
                "lat_pulldown",
                "one_arm_cable_row",
                "smith_rdl",
                "dumbbell_biceps_curl",
                "cable_rear_delt_fly",
                "hammer_curl",
            ),
            "Mobility": ("mobility_hips", "mobility_shoulders", "mobility_core"),
        },
    ),
    default_settings=ProfileDefaults(bodyweight_kg=65, rest_seconds=90),
)
