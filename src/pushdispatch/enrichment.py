"""
Update enrichment - pairs an update-activity envelope with its Update.

Envelopes missing identifiers and failed fetches produce no output; nothing
is raised to the lane.
"""

import asyncio
import logging
from typing import Optional, Protocol

from pushdispatch.models.envelope import PushNotificationEnvelope
from pushdispatch.models.update import EnvelopeUpdatePair, Update

logger = logging.getLogger(__name__)


class UpdateFetcher(Protocol):
    async def fetch_update(self, project_param: str, update_param: str) -> Update: ...


async def fetch_update_with_envelope(
    client: UpdateFetcher, envelope: PushNotificationEnvelope,
) -> Optional[EnvelopeUpdatePair]:
    activity = envelope.activity
    if activity is None or activity.update_id is None or activity.project_id is None:
        logger.debug(f"Dropping update envelope {envelope.signature}: missing project_id/update_id")
        return None

    project_param = str(activity.project_id)
    update_param = str(activity.update_id)
    try:
        update = await client.fetch_update(project_param, update_param)
    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.debug(f"Dropping update envelope {envelope.signature}: fetch of {project_param}/{update_param} failed: {e}")
        return None

    return EnvelopeUpdatePair(envelope, update)
