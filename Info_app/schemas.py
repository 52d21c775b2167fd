from pydantic import BaseModel, field_validator


# 요청 스키마
class SetRequest(BaseModel):
    """Query parameters of /set. Both fields must be non-empty."""
    key: str
    value: str

    @field_validator("key", "value")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v


# 알림 스키마
class Notification(BaseModel):
    """One record pushed to every subscriber per write."""
    key: str
    value: str
