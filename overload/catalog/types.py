"""Program catalog data models.

Catalog entries are static program definitions. They are frozen so that
no engine function can alter a program while planning or replaying history.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal

EquipmentType = Literal["barbell", "dumbbell", "smith", "cable", "machine", "bodyweight", "mobility"]


@dataclass(frozen=True)
class ExerciseDefinition:
    """Immutable exercise metadata.

    Attributes:
        id: Stable exercise identifier used as key in state and history
        name: Display name
        description: Instructional text shown to the athlete
        type: Equipment type
        increment_kg: Weight added on a ladder rollover (0 = non-progressing)
        start_weight_kg: Working weight before any history exists
        max_weight_kg: Optional hard cap (machine stack limit, etc.)
        uses_bodyweight: Weight is added load on top of bodyweight
        fixed_target_reps: Optional rep target that never climbs the ladder
    """

    id: str
    name: str
    description: str
    type: EquipmentType
    increment_kg: float
    start_weight_kg: float
    max_weight_kg: float | None = None
    uses_bodyweight: bool = False
    fixed_target_reps: int | None = None

    def with_overrides(self, **changes: object) -> ExerciseDefinition:
        return replace(self, **changes)


@dataclass(frozen=True)
class Program:
    """A repeating training micro-cycle.

    Attributes:
        training_days: Ordered day keys of the cycle
        exercise_library: Exercise id -> definition
        day_templates: Day key -> ordered exercise ids, longest first; early
            weeks use a prefix of the template
        sets_per_exercise: Sets prescribed for every exercise
    """

    training_days: tuple[str, ...]
    exercise_library: dict[str, ExerciseDefinition]
    day_templates: dict[str, tuple[str, ...]]
    sets_per_exercise: int = 3

    def get_exercise(self, exercise_id: str) -> ExerciseDefinition | None:
        return self.exercise_library.get(exercise_id)


@dataclass(frozen=True)
class ProfileDefaults:
    bodyweight_kg: float = 105.0
    rest_seconds: int = 90


@dataclass(frozen=True)
class ProgramProfile:
    """A named athlete program shipped with the app."""

    id: str
    name: str
    title: str
    program: Program
    short_title: str | None = None
    default_settings: ProfileDefaults = field(default_factory=ProfileDefaults)
