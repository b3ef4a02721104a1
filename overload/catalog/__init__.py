"""Static program catalog: exercise definitions, day templates, shipped profiles."""

from overload.catalog.registry import (
    PROGRAM_PROFILES,
    PROGRAMS_BY_ID,
    get_next_training_day_key,
    get_program,
    get_program_profile,
    get_training_days,
)
from overload.catalog.types import ExerciseDefinition, ProfileDefaults, Program, ProgramProfile

__all__ = [
    "PROGRAMS_BY_ID",
    "PROGRAM_PROFILES",
    "ExerciseDefinition",
    "ProfileDefaults",
    "Program",
    "ProgramProfile",
    "get_next_training_day_key",
    "get_program",
    "get_program_profile",
    "get_training_days",
]
