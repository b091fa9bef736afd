from typing import Any, Optional

import pytest

from pushdispatch.models import Activity, Gcm, ProjectReminder, PushNotificationEnvelope


def _envelope(
    signature: int = 1,
    title: str = "Title",
    alert: str = "Body",
    activity: Optional[dict[str, Any]] = None,
    project: Optional[dict[str, Any]] = None,
) -> PushNotificationEnvelope:
    return PushNotificationEnvelope(
        signature=signature,
        gcm=Gcm(title=title, alert=alert),
        activity=Activity(**activity) if activity is not None else None,
        project=ProjectReminder(**project) if project is not None else None,
    )


@pytest.fixture
def make_envelope():
    return _envelope
