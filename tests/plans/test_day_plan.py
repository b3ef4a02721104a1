"""Tests for the day plan builder.

Tests cover:
- Template prefix length by program week
- Mobility and rest days
- Pull-up substitution and negatives from lat pulldown history
- plan_today day selection
"""

import pytest

from overload.plans.day_plan import build_day_plan, evaluate_pullup_transition, get_exercise_count, plan_today
from overload.plans.progress import derive_progress
from overload.plans.progression import create_initial_exercise_state


@pytest.mark.parametrize(
    ("week_number", "expected"),
    [(1, 3), (4, 3), (5, 4), (8, 4), (9, 5), (12, 5), (13, 6), (40, 6)],
)
def test_get_exercise_count(week_number: int, expected: int) -> None:
    assert get_exercise_count(week_number) == expected


def _pulldown_sessions(make_session, make_performance, weights, target_reps=7, day_key="Pull A"):
    return [
        make_session(
            f"pd-{i}",
            f"2026-02-{i + 1:02d}",
            day_key=day_key,
            exercises=(make_performance("lat_pulldown", weight, target_reps, (target_reps,) * 3),),
        )
        for i, weight in enumerate(weights)
    ]


class TestBuildDayPlan:
    def test_week_one_uses_first_three_exercises(self, jacob_program) -> None:
        states = create_initial_exercise_state(jacob_program)

        plan = build_day_plan(jacob_program, "Push A", 1, states, [], 105.0)

        assert [exercise.id for exercise in plan] == ["squat", "bench", "overhead_press"]
        assert plan[0].weight_kg == 94.0
        assert plan[0].target_reps == 5

    def test_later_weeks_use_longer_prefix(self, jacob_program) -> None:
        states = create_initial_exercise_state(jacob_program)

        assert len(build_day_plan(jacob_program, "Push B", 6, states, [], 105.0)) == 4
        assert len(build_day_plan(jacob_program, "Push B", 13, states, [], 105.0)) == 6

    def test_mobility_day_uses_full_template(self, jacob_program) -> None:
        states = create_initial_exercise_state(jacob_program)

        plan = build_day_plan(jacob_program, "Mobility", 1, states, [], 105.0)

        assert [exercise.id for exercise in plan] == ["mobility_hips", "mobility_shoulders", "mobility_core"]

    def test_unknown_day_has_no_exercises(self, jacob_program) -> None:
        assert build_day_plan(jacob_program, "Rest", 1, {}, [], 105.0) == []

    def test_planned_exercise_uses_current_state(self, jacob_program) -> None:
        states = create_initial_exercise_state(jacob_program)
        states["bench"] = states["bench"].model_copy(update={"weight_kg": 70.0, "target_reps": 6})

        plan = build_day_plan(jacob_program, "Push A", 1, states, [], 105.0)
        bench = next(exercise for exercise in plan if exercise.id == "bench")

        assert (bench.weight_kg, bench.target_reps, bench.bodyweight_kg) == (70.0, 6, 105.0)


class TestPullupTransition:
    """Lat pulldown strength relative to bodyweight unlocks pull-ups."""

    def test_three_bodyweight_successes_replace_pulldown(self, jacob_program, make_session, make_performance) -> None:
        history = _pulldown_sessions(make_session, make_performance, [100.0, 105.0, 105.0, 110.0])
        states = create_initial_exercise_state(jacob_program)

        plan = build_day_plan(jacob_program, "Pull A", 1, states, history, 105.0)

        ids = [exercise.id for exercise in plan]
        assert "pullup" in ids
        assert "lat_pulldown" not in ids
        assert "pullup_negative" not in ids
        assert ids.index("pullup") == 1

    def test_two_strong_successes_add_negatives_on_pull_day(
        self, jacob_program, make_session, make_performance
    ) -> None:
        history = _pulldown_sessions(make_session, make_performance, [85.0, 85.0])
        states = create_initial_exercise_state(jacob_program)

        plan = build_day_plan(jacob_program, "Pull B", 1, states, history, 105.0)

        assert [exercise.id for exercise in plan] == ["deadlift", "lat_pulldown", "barbell_row", "pullup_negative"]
        assert plan[-1].target_reps == 3

    def test_negatives_not_added_on_push_day(self, jacob_program, make_session, make_performance) -> None:
        history = _pulldown_sessions(make_session, make_performance, [85.0, 85.0])
        states = create_initial_exercise_state(jacob_program)

        plan = build_day_plan(jacob_program, "Push A", 1, states, history, 105.0)

        assert "pullup_negative" not in [exercise.id for exercise in plan]

    def test_successes_below_ceiling_do_not_qualify(self, make_session, make_performance) -> None:
        history = _pulldown_sessions(make_session, make_performance, [110.0, 110.0, 110.0], target_reps=6)

        readiness = evaluate_pullup_transition(history, 105.0)

        assert readiness.qualifying_successes == 0
        assert not readiness.ready_for_negatives
        assert not readiness.ready_for_pullup

    def test_only_last_four_performances_count(self, make_session, make_performance) -> None:
        strong = _pulldown_sessions(make_session, make_performance, [110.0, 110.0, 110.0])
        recent_failures = [
            make_session(
                f"fail-{i}",
                f"2026-03-{i + 1:02d}",
                day_key="Pull A",
                exercises=(make_performance("lat_pulldown", 110.0, 7, (7, 6, 5)),),
            )
            for i in range(4)
        ]

        readiness = evaluate_pullup_transition(strong + recent_failures, 105.0)

        assert readiness.qualifying_successes == 0
        assert not readiness.ready_for_pullup

    def test_average_below_bodyweight_only_unlocks_negatives(self, make_session, make_performance) -> None:
        history = _pulldown_sessions(make_session, make_performance, [90.0, 95.0, 100.0])

        readiness = evaluate_pullup_transition(history, 105.0)

        assert readiness.ready_for_negatives
        assert not readiness.ready_for_pullup
        assert readiness.average_weight_kg == pytest.approx(95.0)

    def test_program_without_pullups_is_unchanged(self, mari_program, make_session, make_performance) -> None:
        history = _pulldown_sessions(make_session, make_performance, [70.0, 70.0, 70.0])
        states = create_initial_exercise_state(mari_program)

        plan = build_day_plan(mari_program, "Pull A", 1, states, history, 65.0)

        assert [exercise.id for exercise in plan][:1] == ["lat_pulldown"]
        assert len(plan) == 3


class TestPlanToday:
    def test_fresh_profile_starts_cycle(self, jacob_profile, jacob_program) -> None:
        plan = plan_today(jacob_profile, jacob_program)

        assert plan.day_key == "Push A"
        assert plan.week_number == 1
        assert plan.sets_per_exercise == 3
        assert len(plan.exercises) == 3

    def test_next_day_follows_last_completed(self, jacob_profile, jacob_program, make_session) -> None:
        sessions = (make_session("s1", "2026-01-05", day_key="Push A"),)
        profile = jacob_profile.model_copy(
            update={"sessions": sessions, "progress": derive_progress(sessions, jacob_program.training_days)}
        )

        plan = plan_today(profile, jacob_program)

        assert plan.day_key == "Pull A"

    def test_cycle_wraps_after_last_day(self, jacob_profile, jacob_program, make_session) -> None:
        sessions = (make_session("s1", "2026-01-05", day_key="Pull B"),)
        profile = jacob_profile.model_copy(
            update={"sessions": sessions, "progress": derive_progress(sessions, jacob_program.training_days)}
        )

        assert plan_today(profile, jacob_program).day_key == "Push A"

    def test_unknown_program_has_no_day(self, jacob_profile) -> None:
        plan = plan_today(jacob_profile, None)

        assert plan.day_key is None
        assert plan.exercises == ()


class TestPullupThresholdBoundaries:
    """Averages exactly on a threshold qualify; just below do not."""

    def test_negatives_at_exactly_eighty_percent(self, make_session, make_performance) -> None:
        readiness = evaluate_pullup_transition(
            _pulldown_sessions(make_session, make_performance, [80.0, 80.0]), 100.0
        )

        assert readiness.ready_for_negatives
        assert not readiness.ready_for_pullup

    def test_negatives_just_below_eighty_percent(self, make_session, make_performance) -> None:
        readiness = evaluate_pullup_transition(
            _pulldown_sessions(make_session, make_performance, [79.75, 79.75]), 100.0
        )

        assert not readiness.ready_for_negatives

    def test_pullup_at_exactly_bodyweight(self, make_session, make_performance) -> None:
        readiness = evaluate_pullup_transition(
            _pulldown_sessions(make_session, make_performance, [100.0, 100.0, 100.0]), 100.0
        )

        assert readiness.ready_for_pullup

    def test_pullup_just_below_bodyweight(self, make_session, make_performance) -> None:
        readiness = evaluate_pullup_transition(
            _pulldown_sessions(make_session, make_performance, [100.0, 100.0, 99.75]), 100.0
        )

        assert not readiness.ready_for_pullup
        assert readiness.ready_for_negatives
