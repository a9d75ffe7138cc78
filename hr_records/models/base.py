import uuid


def new_id() -> str:
    """Opaque primary key shared by every table."""
    return str(uuid.uuid4())
