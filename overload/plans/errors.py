"""Error types for session recording."""


class UnknownExerciseError(KeyError):
    """Raised when a set is recorded for an exercise that is not part of the draft.

    Attributes:
        exercise_id: The exercise id that was not found
        session_id: The draft's session id
    """

    def __init__(self, exercise_id: str, session_id: str):
        self.exercise_id = exercise_id
        self.session_id = session_id
        super().__init__(f"Exercise {exercise_id!r} is not part of session {session_id}")
