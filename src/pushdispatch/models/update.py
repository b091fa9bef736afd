"""
Project update resource - fetched once per update-activity envelope.
"""

from typing import NamedTuple, Optional
from pydantic import BaseModel

from pushdispatch.models.envelope import PushNotificationEnvelope


class UpdateWebUrls(BaseModel):
    update: str
    likes: Optional[str] = None


class UpdateUrls(BaseModel):
    web: UpdateWebUrls


class Update(BaseModel):
    id: int
    project_id: int
    sequence: Optional[int] = None
    title: Optional[str] = None
    body: Optional[str] = None
    published_at: Optional[int] = None
    urls: UpdateUrls

    @property
    def web_url(self) -> str:
        return self.urls.web.update


class EnvelopeUpdatePair(NamedTuple):
    envelope: PushNotificationEnvelope
    update: Update
