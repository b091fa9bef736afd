"""
Envelope classifier - one predicate per lane.

The predicates are mutually exclusive: an envelope matches at most one, and
an envelope matching none is never rendered.
"""

from enum import Enum
from typing import Callable, Optional

from pushdispatch.models.envelope import (
    CATEGORY_BACKING,
    CATEGORY_CANCELLATION,
    CATEGORY_FAILURE,
    CATEGORY_FOLLOW,
    CATEGORY_LAUNCH,
    CATEGORY_SUCCESS,
    CATEGORY_SUSPENSION,
    CATEGORY_UPDATE,
    PushNotificationEnvelope,
)

PROJECT_NOTIFICATION_CATEGORIES = frozenset({
    CATEGORY_BACKING,
    CATEGORY_CANCELLATION,
    CATEGORY_FAILURE,
    CATEGORY_LAUNCH,
    CATEGORY_SUCCESS,
    CATEGORY_SUSPENSION,
})


class Category(str, Enum):
    FRIEND_FOLLOW = "friend_follow"
    PROJECT_ACTIVITY = "project_activity"
    PROJECT_REMINDER = "project_reminder"
    PROJECT_UPDATE = "project_update"


def is_friend_follow(envelope: PushNotificationEnvelope) -> bool:
    return envelope.activity is not None and envelope.activity.category == CATEGORY_FOLLOW


def is_project_activity(envelope: PushNotificationEnvelope) -> bool:
    return envelope.activity is not None and envelope.activity.category in PROJECT_NOTIFICATION_CATEGORIES


def is_project_reminder(envelope: PushNotificationEnvelope) -> bool:
    # An activity payload wins over a reminder payload.
    return envelope.project is not None and envelope.activity is None


def is_project_update_activity(envelope: PushNotificationEnvelope) -> bool:
    return envelope.activity is not None and envelope.activity.category == CATEGORY_UPDATE


PREDICATES: dict[Category, Callable[[PushNotificationEnvelope], bool]] = {
    Category.FRIEND_FOLLOW: is_friend_follow,
    Category.PROJECT_ACTIVITY: is_project_activity,
    Category.PROJECT_REMINDER: is_project_reminder,
    Category.PROJECT_UPDATE: is_project_update_activity,
}


def classify(envelope: PushNotificationEnvelope) -> Optional[Category]:
    """Return the lane that handles this envelope, or None if no lane does."""
    for category, predicate in PREDICATES.items():
        if predicate(envelope):
            return category
    return None
