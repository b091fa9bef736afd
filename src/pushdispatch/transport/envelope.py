"""
Envelope parsing for raw message-data maps from the messaging channel.
"""

import json
from typing import Any, Optional

from pydantic import ValidationError

from pushdispatch.models.envelope import PushNotificationEnvelope

NESTED_KEYS = ("gcm", "activity", "project")


def parse_envelope(raw: dict[str, Any]) -> Optional[PushNotificationEnvelope]:
    """Parse a message-data map. Nested payloads may arrive as JSON strings.

    Returns None if invalid.
    """
    if not isinstance(raw, dict):
        return None
    data = dict(raw)
    for key in NESTED_KEYS:
        value = data.get(key)
        if isinstance(value, str):
            try:
                data[key] = json.loads(value)
            except ValueError:
                return None
    try:
        return PushNotificationEnvelope.model_validate(data)
    except ValidationError:
        return None
