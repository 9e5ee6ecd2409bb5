"""Type definitions and enums for the github_auth client library."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, TypeAdapter


class ErrorKind(str, Enum):
    USERNAME_REQUIRED = "username_required"
    USER_NOT_FOUND = "user_not_found"
    UNAVAILABLE = "unavailable"
    UNEXPECTED_RESPONSE = "unexpected_response"
    TRANSPORT = "transport"


class KeyRecord(BaseModel):
    """One entry of the ``/users/{username}/keys`` response. Unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    key: str


KeyRecordList = TypeAdapter(list[KeyRecord])
