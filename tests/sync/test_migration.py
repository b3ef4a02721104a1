"""Tests for snapshot loading and schema migration."""

import datetime as dt

import pytest

from overload.plans.types import CURRENT_SCHEMA_VERSION, ExerciseState
from overload.sync.migration import build_default_state, dump_state, load_state, migrate_raw_state

TODAY = dt.date(2026, 1, 5)


@pytest.fixture
def legacy_snapshot() -> dict:
    """Single-athlete snapshot written before profiles existed."""
    return {
        "deviceId": "device-legacy",
        "programStartDate": "2025-11-03",
        "settings": {"bodyweightKg": 100, "restSeconds": 120, "syncUrl": "http://relay.local:8787"},
        "exerciseStates": {"bench": {"weightKg": 70, "targetReps": 6}},
        "sessions": [
            {
                "date": "2025-11-03",
                "dayKey": "Push A",
                "exercises": [
                    {
                        "id": "bench",
                        "name": "Bench Press",
                        "weightKg": 62,
                        "targetReps": 5,
                        "incrementKg": 2.5,
                        "sets": [{"reps": 5, "durationSec": 30}, {"reps": 5}, {"reps": 6}],
                    }
                ],
            },
            {"dayKey": "Pull A", "exercises": []},
        ],
        "updatedAt": 1_690_000_000_000,
    }


class TestMigrateRawState:
    def test_legacy_snapshot_becomes_jacob_profile(self, legacy_snapshot) -> None:
        migrated = migrate_raw_state(legacy_snapshot)

        assert migrated["schemaVersion"] == CURRENT_SCHEMA_VERSION
        assert migrated["activeProfileId"] == "jacob"
        assert migrated["settings"] == {"syncUrl": "http://relay.local:8787"}
        assert migrated["profiles"]["jacob"]["settings"] == {"bodyweightKg": 100, "restSeconds": 120}
        assert len(migrated["profiles"]["jacob"]["sessions"]) == 2

    def test_current_snapshot_is_unchanged(self) -> None:
        raw = {"schemaVersion": CURRENT_SCHEMA_VERSION, "deviceId": "device-x", "profiles": {}}

        assert migrate_raw_state(raw) == raw


class TestLoadState:
    def test_legacy_snapshot(self, legacy_snapshot) -> None:
        state = load_state(legacy_snapshot, today=TODAY)

        assert state.device_id == "device-legacy"
        assert state.settings.sync_url == "http://relay.local:8787"
        assert state.updated_at == 1_690_000_000_000
        assert set(state.profiles) == {"jacob", "mari"}

        jacob = state.profiles["jacob"]
        assert jacob.program_start_date == dt.date(2025, 11, 3)
        assert jacob.settings.bodyweight_kg == 100.0
        assert jacob.settings.rest_seconds == 120
        assert [session.id for session in jacob.sessions] == ["legacy-2025-11-03-Push A-bench"]
        # Rebuilt from history, not taken from the stale cached state
        assert jacob.exercise_states["bench"] == ExerciseState(weight_kg=62.0, target_reps=6)
        assert jacob.progress.last_completed_day_key == "Push A"

    def test_none_and_garbage_yield_default_state(self) -> None:
        for raw in (None, [1, 2, 3], "not a snapshot"):
            state = load_state(raw, today=TODAY)
            assert set(state.profiles) == {"jacob", "mari"}
            assert state.active_profile_id == "jacob"
            assert state.device_id.startswith("device-")

    def test_non_finite_values_fall_back_to_catalog_defaults(self) -> None:
        raw = {
            "schemaVersion": 2,
            "deviceId": "device-x",
            "updatedAt": float("nan"),
            "profiles": {
                "jacob": {
                    "id": "jacob",
                    "programId": "jacob",
                    "settings": {"bodyweightKg": float("inf"), "restSeconds": 75},
                    "exerciseStates": {
                        "squat": {"weightKg": float("nan"), "targetReps": 6},
                        "deadlift": {"weightKg": 100, "targetReps": 6},
                    },
                    "sessions": [
                        {
                            "id": "s1",
                            "date": "2026-01-05",
                            "dayKey": "Push A",
                            "exercises": [
                                {"id": "bench", "weightKg": "heavy", "targetReps": 5, "sets": [{"reps": 5}] * 3}
                            ],
                        }
                    ],
                }
            },
        }

        state = load_state(raw, today=TODAY, now_ms=42)
        jacob = state.profiles["jacob"]

        assert state.updated_at == 42
        assert jacob.settings.bodyweight_kg == 105.0
        assert jacob.settings.rest_seconds == 75
        assert jacob.exercise_states["squat"] == ExerciseState(weight_kg=94.0, target_reps=5)
        assert jacob.exercise_states["deadlift"] == ExerciseState(weight_kg=100.0, target_reps=6)
        bench = jacob.sessions[0].exercises[0]
        assert bench.weight_kg == 62.0
        assert bench.increment_kg == 2.5
        assert jacob.exercise_states["bench"] == ExerciseState(weight_kg=62.0, target_reps=6)

    def test_same_day_duplicates_are_collapsed(self) -> None:
        session = {"date": "2026-01-05", "dayKey": "Push A", "exercises": []}
        raw = {
            "schemaVersion": 2,
            "profiles": {
                "mari": {
                    "sessions": [
                        {**session, "id": "one", "createdAt": 1},
                        {**session, "id": "two", "createdAt": 2},
                    ]
                }
            },
        }

        mari = load_state(raw, today=TODAY).profiles["mari"]

        assert [s.id for s in mari.sessions] == ["two"]

    def test_unknown_active_profile_falls_back_to_default(self) -> None:
        state = load_state({"schemaVersion": 2, "activeProfileId": "nobody", "profiles": {}}, today=TODAY)

        assert state.active_profile_id == "jacob"


def test_dump_state_is_camel_case_json() -> None:
    state = build_default_state(device_id="device-x", now_ms=123, today=TODAY)

    dumped = dump_state(state)

    assert dumped["schemaVersion"] == CURRENT_SCHEMA_VERSION
    assert dumped["deviceId"] == "device-x"
    assert dumped["updatedAt"] == 123
    assert dumped["settings"] == {"syncUrl": ""}
    jacob = dumped["profiles"]["jacob"]
    assert jacob["programStartDate"] == "2026-01-05"
    assert jacob["exerciseStates"]["squat"] == {"weightKg": 94.0, "targetReps": 5, "consecutiveFailures": 0}
    assert load_state(dumped, today=TODAY) == state
