"""
Large-icon loading.

Loading blocks the calling thread, so it only ever runs on a lane worker.
A failed load degrades to "no large icon"; the alert still renders.
"""

import logging
from typing import Optional, Protocol

import httpx

from pushdispatch.models.alert import Bitmap, ImageRequest

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_TIMEOUT = 15.0


class ImageLoader(Protocol):
    def load(self, request: ImageRequest) -> Optional[Bitmap]: ...


class HttpImageLoader:
    """Downloads thumbnails; the renderer applies the recorded masks."""

    def __init__(self, timeout: float = DEFAULT_IMAGE_TIMEOUT, client: Optional[httpx.Client] = None):
        self._client = client or httpx.Client(
            headers={"User-Agent": "pushdispatch/0.1.0", "Accept": "image/*"},
            timeout=timeout,
            follow_redirects=True,
        )

    def load(self, request: ImageRequest) -> Optional[Bitmap]:
        try:
            resp = self._client.get(request.url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to load large icon: {e}")
            return None
        return Bitmap(
            url=request.url,
            data=resp.content,
            content_type=resp.headers.get("content-type"),
            transforms=request.masks,
        )

    def close(self) -> None:
        self._client.close()
