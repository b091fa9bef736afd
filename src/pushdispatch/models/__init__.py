from pushdispatch.models.alert import (
    AlertDescription,
    Bitmap,
    ImageMask,
    ImageRequest,
    NavigationHop,
    Screen,
    TapTarget,
)
from pushdispatch.models.envelope import Activity, Gcm, ProjectReminder, PushNotificationEnvelope
from pushdispatch.models.update import EnvelopeUpdatePair, Update

__all__ = [
    "Activity",
    "AlertDescription",
    "Bitmap",
    "EnvelopeUpdatePair",
    "Gcm",
    "ImageMask",
    "ImageRequest",
    "NavigationHop",
    "ProjectReminder",
    "PushNotificationEnvelope",
    "Screen",
    "TapTarget",
    "Update",
]
