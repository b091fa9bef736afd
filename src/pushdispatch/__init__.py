"""
pushdispatch - client-side push notification dispatcher.

Classifies incoming push envelopes, enriches update notifications with a
REST fetch, and renders alerts through a pluggable sink.
"""

from pushdispatch.dispatcher import AsyncPushNotifications, PushNotifications
from pushdispatch.classifier import Category, classify
from pushdispatch.config import Config, load_config
from pushdispatch.errors import PushDispatchError, FetchError, RegistrationError, ConfigError
from pushdispatch.models import AlertDescription, PushNotificationEnvelope, Update
from pushdispatch.sink import NotificationTray
from pushdispatch.transport.envelope import parse_envelope

__version__ = "0.1.0"
__all__ = [
    "PushNotifications",
    "AsyncPushNotifications",
    "Category",
    "classify",
    "Config",
    "load_config",
    "PushDispatchError",
    "FetchError",
    "RegistrationError",
    "ConfigError",
    "AlertDescription",
    "PushNotificationEnvelope",
    "Update",
    "NotificationTray",
    "parse_envelope",
]
