"""Root conftest for all tests.

Shared fixtures: program catalogs, a fresh Jacob profile and factories for
performances and session records.
"""

import datetime as dt

import pytest

from overload.catalog.jacob import JACOB
from overload.catalog.mari import MARI
from overload.plans.types import ExercisePerformance, SessionRecord, SetRecord
from overload.sync.migration import build_profile_state

PROGRAM_START = dt.date(2026, 1, 5)


@pytest.fixture
def jacob_program():
    return JACOB.program


@pytest.fixture
def mari_program():
    return MARI.program


@pytest.fixture
def jacob_profile():
    """Fresh Jacob profile with no history."""
    return build_profile_state("jacob", None, today=PROGRAM_START)


@pytest.fixture
def make_performance():
    """Factory for a performed exercise; reps lists the reps of each set."""

    def _make(
        exercise_id: str = "bench",
        weight_kg: float = 62.0,
        target_reps: int = 5,
        reps: tuple[int, ...] = (5, 5, 5),
        increment_kg: float = 2.5,
        **extra,
    ) -> ExercisePerformance:
        return ExercisePerformance(
            id=exercise_id,
            target_reps=target_reps,
            weight_kg=weight_kg,
            increment_kg=increment_kg,
            sets=tuple(SetRecord(reps=r) for r in reps),
            success=bool(reps) and all(r >= target_reps for r in reps),
            **extra,
        )

    return _make


@pytest.fixture
def make_session():
    """Factory for a finished session record."""

    def _make(
        session_id: str,
        date: str,
        day_key: str = "Push A",
        exercises: tuple[ExercisePerformance, ...] = (),
        created_at: int | None = None,
        week_number: int = 1,
    ) -> SessionRecord:
        return SessionRecord(
            id=session_id,
            date=dt.date.fromisoformat(date),
            day_key=day_key,
            week_number=week_number,
            exercises=tuple(exercises),
            created_at=created_at,
        )

    return _make
