"""
Device registration with the push backend. Called once per bus lifetime.
"""

import logging
from typing import Optional

from pushdispatch.errors import PushDispatchError, RegistrationError
from pushdispatch.transport.http import HttpClient

logger = logging.getLogger(__name__)

DEVICES_PATH = "/v1/users/self/devices"
DEFAULT_APP_ID = "com.kickstarter.kickstarter"


class DeviceRegistrar:
    def __init__(self, http: HttpClient, device_token: Optional[str] = None, app_id: str = DEFAULT_APP_ID):
        self._http = http
        self._device_token = device_token
        self._app_id = app_id

    async def register_device(self) -> None:
        if not self._device_token:
            logger.debug("No device token configured, skipping registration")
            return
        try:
            await self._http.post(DEVICES_PATH, {"app": self._app_id, "token": self._device_token})
        except PushDispatchError as e:
            raise RegistrationError(f"Failed to register device: {e}")

    async def unregister_device(self) -> None:
        if not self._device_token:
            return
        try:
            await self._http.delete(f"{DEVICES_PATH}/{self._device_token}", params={"app": self._app_id})
        except PushDispatchError as e:
            raise RegistrationError(f"Failed to unregister device: {e}")
