"""
Presentation builders - (envelope, enrichment) -> AlertDescription.

Each builder returns None when the envelope lacks a field its alert needs;
the lane then drops the envelope without rendering anything.
"""

from typing import NamedTuple, Optional

from pushdispatch.models.alert import (
    DEFAULT_COLOR,
    DEFAULT_SMALL_ICON,
    AlertDescription,
    ImageMask,
    ImageRequest,
    NavigationHop,
    Screen,
    TapTarget,
)
from pushdispatch.models.envelope import PushNotificationEnvelope
from pushdispatch.models.update import EnvelopeUpdatePair

ENVELOPE_PARAM = "push_notification_envelope"
PROJECT_PARAM = "project_param"
URL_PARAM = "url"


class AlertStyle(NamedTuple):
    small_icon: str = DEFAULT_SMALL_ICON
    color: str = DEFAULT_COLOR


def _alert(
    envelope: PushNotificationEnvelope,
    style: AlertStyle,
    large_image: Optional[ImageRequest] = None,
    tap_target: Optional[TapTarget] = None,
) -> AlertDescription:
    gcm = envelope.gcm
    return AlertDescription(
        title=gcm.title,
        body=gcm.alert,
        big_text=gcm.alert,
        small_icon=style.small_icon,
        color=style.color,
        auto_cancel=True,
        large_image=large_image,
        tap_target=tap_target,
    )


def _image(url: Optional[str], circle: bool = False) -> Optional[ImageRequest]:
    if url is None:
        return None
    masks = (ImageMask.SQUARE, ImageMask.CIRCLE) if circle else (ImageMask.SQUARE,)
    return ImageRequest(url=url, masks=masks)


def project_hop(project_param: str, envelope: Optional[PushNotificationEnvelope] = None) -> NavigationHop:
    params: dict = {PROJECT_PARAM: project_param}
    if envelope is not None:
        params[ENVELOPE_PARAM] = envelope
    return NavigationHop(screen=Screen.PROJECT, params=params)


def web_view_hop(url: str, envelope: PushNotificationEnvelope) -> NavigationHop:
    return NavigationHop(screen=Screen.WEB_VIEW, params={URL_PARAM: url, ENVELOPE_PARAM: envelope})


def build_friend_follow(
    envelope: PushNotificationEnvelope, style: AlertStyle = AlertStyle(),
) -> Optional[AlertDescription]:
    activity = envelope.activity
    if activity is None:
        return None
    return _alert(envelope, style, large_image=_image(activity.user_photo, circle=True))


def build_project_activity(
    envelope: PushNotificationEnvelope, style: AlertStyle = AlertStyle(),
) -> Optional[AlertDescription]:
    activity = envelope.activity
    if activity is None or activity.project_id is None:
        return None
    tap_target = TapTarget(
        hops=(project_hop(str(activity.project_id), envelope),),
        request_code=envelope.signature,
    )
    return _alert(envelope, style, large_image=_image(activity.project_photo), tap_target=tap_target)


def build_project_reminder(
    envelope: PushNotificationEnvelope, style: AlertStyle = AlertStyle(),
) -> Optional[AlertDescription]:
    project = envelope.project
    if project is None:
        return None
    tap_target = TapTarget(
        hops=(project_hop(str(project.id), envelope),),
        request_code=envelope.signature,
    )
    return _alert(envelope, style, large_image=_image(project.photo), tap_target=tap_target)


def build_project_update(
    pair: EnvelopeUpdatePair, style: AlertStyle = AlertStyle(),
) -> Optional[AlertDescription]:
    envelope, update = pair
    activity = envelope.activity
    if activity is None or activity.update_id is None or activity.project_id is None:
        return None
    tap_target = TapTarget(
        hops=(
            project_hop(str(activity.project_id)),
            web_view_hop(update.web_url, envelope),
        ),
        request_code=envelope.signature,
    )
    return _alert(envelope, style, large_image=_image(activity.project_photo), tap_target=tap_target)
