import pytest

from pushdispatch.enrichment import fetch_update_with_envelope
from pushdispatch.errors import FetchError
from pushdispatch.models import Update


class FakeClient:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    async def fetch_update(self, project_param, update_param):
        self.calls.append((project_param, update_param))
        if self.fail:
            raise FetchError("boom")
        return Update.model_validate({
            "id": int(update_param),
            "project_id": int(project_param),
            "urls": {"web": {"update": f"http://x/u{update_param}"}},
        })


class TestFetchUpdateWithEnvelope:
    @pytest.mark.asyncio
    async def test_pairs_envelope_with_update(self, make_envelope):
        client = FakeClient()
        envelope = make_envelope(activity={"category": "update", "project_id": 3, "update_id": 5})

        pair = await fetch_update_with_envelope(client, envelope)

        assert client.calls == [("3", "5")]
        assert pair.envelope is envelope
        assert pair.update.web_url == "http://x/u5"

    @pytest.mark.asyncio
    async def test_missing_update_id_never_fetches(self, make_envelope):
        client = FakeClient()
        envelope = make_envelope(activity={"category": "update", "project_id": 3})

        assert await fetch_update_with_envelope(client, envelope) is None
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_missing_project_id_never_fetches(self, make_envelope):
        client = FakeClient()
        envelope = make_envelope(activity={"category": "update", "update_id": 5})

        assert await fetch_update_with_envelope(client, envelope) is None
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_fetch_failure_is_swallowed(self, make_envelope):
        client = FakeClient(fail=True)
        envelope = make_envelope(activity={"category": "update", "project_id": 3, "update_id": 5})

        assert await fetch_update_with_envelope(client, envelope) is None
        assert client.calls == [("3", "5")]
