"""Tests for the shipped program catalog."""

from overload.catalog import PROGRAM_PROFILES, get_next_training_day_key, get_program, get_training_days


def test_every_template_references_known_exercises() -> None:
    for profile in PROGRAM_PROFILES:
        library = profile.program.exercise_library
        for day_key, template in profile.program.day_templates.items():
            missing = [exercise_id for exercise_id in template if exercise_id not in library]
            assert not missing, f"{profile.id} {day_key} references {missing}"


def test_jacob_rows_with_barbell_on_pull_days() -> None:
    program = get_program("jacob")

    assert "barbell_row" in program.day_templates["Pull A"]
    assert "seated_row" not in program.day_templates["Pull B"]
    assert program.get_exercise("cable_lateral_raise").fixed_target_reps == 15


def test_mari_has_no_pullup_progression() -> None:
    program = get_program("mari")

    assert program.get_exercise("lat_pulldown") is not None
    assert program.get_exercise("pullup") is None


def test_unknown_program() -> None:
    assert get_program("nobody") is None
    assert get_training_days(None) == []
    assert get_next_training_day_key(None, "Push A") is None


def test_next_training_day_wraps() -> None:
    program = get_program("jacob")

    assert get_next_training_day_key(program, "Pull A") == "Mobility"
    assert get_next_training_day_key(program, "Pull B") == "Push A"
    assert get_next_training_day_key(program, "Rest") == "Push A"
