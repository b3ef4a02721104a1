"""Progression and plan engine.

This module provides:
- ProgressionEngine: rep ladder, weight increments, caps and deloads
- DayPlanBuilder: today's exercise list with bodyweight substitutions
- WeekProgressTracker: week/cycle progress derived from history
- SessionRecorder: closing a workout into the append-only log
"""

from overload.plans.day_plan import build_day_plan, evaluate_pullup_transition, get_exercise_count, plan_today
from overload.plans.progress import derive_progress
from overload.plans.progression import (
    create_initial_exercise_state,
    normalize_exercise_states,
    rebuild_exercise_states,
    update_exercise_state,
)
from overload.plans.recorder import finish_session, record_set, start_session

__all__ = [
    "build_day_plan",
    "create_initial_exercise_state",
    "derive_progress",
    "evaluate_pullup_transition",
    "finish_session",
    "get_exercise_count",
    "normalize_exercise_states",
    "plan_today",
    "rebuild_exercise_states",
    "record_set",
    "start_session",
    "update_exercise_state",
]
