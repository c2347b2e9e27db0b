from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_rfc3339(value: datetime) -> str:
    """Render *value* as an RFC3339 timestamp (second precision, ``Z`` for UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        return text[:-6] + "Z"
    return text


# --- User ---

class User(BaseModel):
    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CreateUserInput(BaseModel):
    email: str
    name: str


class UpdateUserInput(BaseModel):
    """Partial update: a field left as ``None`` keeps the stored value."""

    email: str | None = None
    name: str | None = None

    def changes(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)
