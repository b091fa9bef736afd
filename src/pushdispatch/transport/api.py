"""
API client - the single resource the dispatcher fetches.
"""

import httpx
from pydantic import ValidationError

from pushdispatch.errors import FetchError, PushDispatchError
from pushdispatch.models.update import Update
from pushdispatch.transport.http import HttpClient


class ApiClient:
    def __init__(self, http: HttpClient):
        self._http = http

    async def fetch_update(self, project_param: str, update_param: str) -> Update:
        """GET /v1/projects/{project}/updates/{update}"""
        path = f"/v1/projects/{project_param}/updates/{update_param}"
        try:
            data = await self._http.get(path)
        except (PushDispatchError, httpx.HTTPError, ValueError) as e:
            raise FetchError(f"Failed to fetch update {project_param}/{update_param}: {e}")
        try:
            return Update.model_validate(data)
        except ValidationError as e:
            raise FetchError(
                f"Malformed update {project_param}/{update_param}",
                details={"errors": e.errors()},
            )

    async def close(self) -> None:
        await self._http.close()
