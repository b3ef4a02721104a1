"""Error types for snapshot synchronization.

Transport failures are reported to callers as reason strings; merges never
raise conflict errors.
"""


class SyncError(RuntimeError):
    """Base class for synchronization errors.

    Attributes:
        reason: Human-readable failure reason surfaced to the caller
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class SyncTransportError(SyncError):
    """Raised when a pull or push cannot reach the relay or gets an error status."""


class MissingStatePayloadError(SyncError):
    """Raised when a push carries no state snapshot."""

    def __init__(self, reason: str = "Missing state payload"):
        super().__init__(reason)
