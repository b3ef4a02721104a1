"""Lookup of shipped program profiles and cycle navigation."""

from overload.catalog.jacob import JACOB
from overload.catalog.mari import MARI
from overload.catalog.types import Program, ProgramProfile

PROGRAM_PROFILES: tuple[ProgramProfile, ...] = (JACOB, MARI)
PROGRAMS_BY_ID: dict[str, ProgramProfile] = {profile.id: profile for profile in PROGRAM_PROFILES}


def get_program_profile(program_id: str | None) -> ProgramProfile | None:
    if not program_id:
        return None
    return PROGRAMS_BY_ID.get(program_id)


def get_program(program_id: str | None) -> Program | None:
    profile = get_program_profile(program_id)
    return profile.program if profile else None


def get_training_days(program: Program | None) -> list[str]:
    if program is None:
        return []
    return list(program.training_days)


def get_next_training_day_key(program: Program | None, day_key: str | None) -> str | None:
    """Return the training day that follows day_key in the cycle.

    Args:
        program: Program whose cycle is walked
        day_key: Last completed day key (None or unknown restarts the cycle)

    Returns:
        Next day key, or None when the program has no training days
    """
    training_days = get_training_days(program)
    if not training_days:
        return None
    if day_key not in training_days:
        return training_days[0]
    return training_days[(training_days.index(day_key) + 1) % len(training_days)]
