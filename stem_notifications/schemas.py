from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class DispatchStatus(str, Enum):
    SENT = "SENT"
    MISSING_SNAPSHOT = "MISSING_SNAPSHOT"
    MISSING_USER_ID = "MISSING_USER_ID"
    INVALID_DOCUMENT = "INVALID_DOCUMENT"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    MISSING_TOKEN = "MISSING_TOKEN"
    LOOKUP_FAILED = "LOOKUP_FAILED"
    SEND_FAILED = "SEND_FAILED"


class NotifyStatus(str, Enum):
    WRITTEN = "WRITTEN"
    MISSING_SNAPSHOT = "MISSING_SNAPSHOT"
    INVALID_DOCUMENT = "INVALID_DOCUMENT"
    NO_RECIPIENTS = "NO_RECIPIENTS"
    WRITE_FAILED = "WRITE_FAILED"


class EventDocument(BaseModel):
    """Document in the events collection, created outside these functions"""
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None


class NotificationDocument(BaseModel):
    """Notification trigger document consumed by the dispatcher"""
    model_config = ConfigDict(extra="ignore")

    # Optional here so a missing recipient is reported on its own
    userId: Optional[str] = None
    title: Optional[str] = None
    body: Optional[str] = None
    route: Optional[str] = None


class UserDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    fcmToken: Optional[str] = None
