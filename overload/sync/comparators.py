"""Named comparator tables used by the state merge.

Merging never produces a conflict: every collision is settled by walking an
ordered rule table. The tables are kept here so that their tie-break
semantics can be tested on their own.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Iterable

from overload.plans.history import total_set_count
from overload.plans.types import Profile, SessionRecord


def build_legacy_session_id(date: str, day_key: str, exercise_ids: Iterable[str]) -> str:
    return f"legacy-{date}-{day_key}-{'-'.join(exercise_ids)}"


def session_key(session: SessionRecord) -> str:
    """Merge key: the session id, or a composite for records created before ids existed."""
    if session.id:
        return session.id
    return build_legacy_session_id(
        session.date.isoformat(),
        session.day_key,
        (exercise.id for exercise in session.exercises),
    )


# -------------------------------------------------------------------
# Session completeness: which of two colliding records to keep
# -------------------------------------------------------------------

SESSION_COMPLETENESS_RULES: tuple[tuple[str, Callable[[SessionRecord], int]], ...] = (
    ("set_count", total_set_count),
    ("exercise_count", lambda session: len(session.exercises)),
    ("created_at", lambda session: session.created_at or 0),
)


def compare_session_completeness(left: SessionRecord, right: SessionRecord) -> int:
    """Compare two records by completeness.

    Returns:
        1 if left is more complete, -1 if right is, 0 only for identical records
    """
    for _name, rule in SESSION_COMPLETENESS_RULES:
        left_value, right_value = rule(left), rule(right)
        if left_value != right_value:
            return 1 if left_value > right_value else -1

    # Last resort: canonical serialization, so the winner never depends on operand order
    left_payload = left.model_dump_json(by_alias=True)
    right_payload = right.model_dump_json(by_alias=True)
    if left_payload == right_payload:
        return 0
    return 1 if left_payload > right_payload else -1


def pick_session(current: SessionRecord | None, incoming: SessionRecord) -> SessionRecord:
    if current is None:
        return incoming
    return incoming if compare_session_completeness(incoming, current) > 0 else current


# -------------------------------------------------------------------
# Profile authority: whose settings and raw state win the shallow union
# -------------------------------------------------------------------


def latest_session_date(sessions: Iterable[SessionRecord]) -> dt.date | None:
    return max((session.date for session in sessions), default=None)


PROFILE_AUTHORITY_RULES: tuple[tuple[str, Callable[[Profile], int | dt.date]], ...] = (
    ("session_count", lambda profile: len(profile.sessions)),
    ("latest_session_date", lambda profile: latest_session_date(profile.sessions) or dt.date.min),
)


def remote_is_authoritative(local: Profile | None, remote: Profile | None) -> bool:
    """Remote wins if it is ahead on any authority rule (more sessions or a later session)."""
    if remote is None:
        return False
    if local is None:
        return True
    return any(rule(remote) > rule(local) for _name, rule in PROFILE_AUTHORITY_RULES)
