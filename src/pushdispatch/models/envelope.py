"""
Push notification envelope - the payload delivered by the messaging channel.

Exactly one of `activity` / `project` is expected; the classifier decides
which lane (if any) handles the envelope.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

CATEGORY_BACKING = "backing"
CATEGORY_CANCELLATION = "cancellation"
CATEGORY_FAILURE = "failure"
CATEGORY_FOLLOW = "follow"
CATEGORY_FUNDING = "funding"
CATEGORY_LAUNCH = "launch"
CATEGORY_SUCCESS = "success"
CATEGORY_SUSPENSION = "suspension"
CATEGORY_UPDATE = "update"
CATEGORY_WATCH = "watch"


class Gcm(BaseModel):
    """Display payload: alert title and body text."""
    model_config = ConfigDict(frozen=True)

    title: str
    alert: str


class Activity(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    id: Optional[int] = None
    user_photo: Optional[str] = None
    project_id: Optional[int] = None
    project_photo: Optional[str] = None
    update_id: Optional[int] = None


class ProjectReminder(BaseModel):
    """Reminder payload - the project is about to end."""
    model_config = ConfigDict(frozen=True)

    id: int
    photo: Optional[str] = None


class PushNotificationEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    signature: int
    gcm: Gcm
    activity: Optional[Activity] = None
    project: Optional[ProjectReminder] = None
