"""Week progress derived from the session log.

Progress is never stored authoritatively: the snapshot is recomputed from
history after every log change and after every merge.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Sequence

from overload.plans.constants import MOBILITY_DAY_KEY
from overload.plans.history import sort_sessions
from overload.plans.types import ProgressSnapshot, SessionRecord


def get_required_days(training_days: Sequence[str]) -> list[str]:
    """Training days that must be completed to roll the week over."""
    return [day_key for day_key in training_days if day_key != MOBILITY_DAY_KEY]


def derive_progress(sessions: Iterable[SessionRecord], training_days: Sequence[str]) -> ProgressSnapshot:
    """Recompute week/cycle progress from the session history.

    Walks sessions in chronological order. Each required day adds to the
    current week's completed set; once every required day is present the
    week counter advances and the set is cleared.

    Args:
        sessions: Session log in any order
        training_days: The program's training-day cycle

    Returns:
        ProgressSnapshot reflecting the state after the final session
    """
    sessions = list(sessions)
    if not sessions or not training_days:
        return ProgressSnapshot()

    training_day_set = set(training_days)
    required_days = get_required_days(training_days)
    required_count = len(set(required_days))

    current_week = 1
    completed: set[str] = set()
    last_session: SessionRecord | None = None
    last_week: int | None = None

    for session in sort_sessions(sessions):
        if session.day_key not in training_day_set:
            continue
        last_session = session
        last_week = current_week
        if session.day_key in required_days:
            completed.add(session.day_key)
            if required_count and len(completed) >= required_count:
                current_week += 1
                completed = set()

    if last_session is None:
        return ProgressSnapshot()

    return ProgressSnapshot(
        last_completed_date=last_session.date,
        last_completed_day_key=last_session.day_key,
        last_completed_week_number=last_week,
        current_week_number=current_week,
        completed_days=tuple(day_key for day_key in training_days if day_key in completed),
    )


# -------------------------------------------------------------------
# Calendar helpers (program start date based)
# -------------------------------------------------------------------


def get_week_number(start_date: dt.date, on: dt.date) -> int:
    """Calendar week of the program, counted from start_date (minimum 1)."""
    return max(1, (on - start_date).days // 7 + 1)


def get_cycle_index(start_date: dt.date, on: dt.date) -> int:
    return (on - start_date).days % 7
