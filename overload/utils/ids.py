import uuid


def create_session_id() -> str:
    return f"session-{uuid.uuid4().hex}"


def create_device_id() -> str:
    return f"device-{uuid.uuid4().hex[:12]}"
