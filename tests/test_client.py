import asyncio

import httpx
import pydantic
import pytest

from elastic_email import ClientSettings, ElasticEmailClient
from elastic_email.adapters.resources import ContactResource, FileResource, ListResource
from elastic_email.core.interfaces.transport import ApiTransport

from .conftest import API_BASE, Recorder, envelope, form_items


@pytest.mark.asyncio
async def test_client_exposes_resources(make_client):
    async with make_client(Recorder(envelope())) as client:
        assert isinstance(client.contact, ContactResource)
        assert isinstance(client.list, ListResource)
        assert isinstance(client.file, FileResource)
        assert isinstance(client.transport, ApiTransport)


@pytest.mark.asyncio
async def test_keyword_overrides_do_not_mutate_settings(settings):
    recorder = Recorder(envelope())
    client = ElasticEmailClient(
        settings,
        api_key="sub-account-key",
        transport=httpx.MockTransport(recorder),
    )
    async with client:
        await client.sms.send("+1", "hi")

    assert client.settings.api_key == "sub-account-key"
    assert settings.api_key == "test-key"
    assert ("apikey", "sub-account-key") in form_items(recorder.last)


@pytest.mark.asyncio
async def test_base_url_is_used_as_prefix(settings):
    recorder = Recorder(envelope())
    async with ElasticEmailClient(settings, transport=httpx.MockTransport(recorder)) as client:
        await client.channel.delete("old")

    assert str(recorder.last.url) == f"{API_BASE}/channel/delete"


@pytest.mark.asyncio
async def test_owned_http_client_is_closed_on_exit(make_client):
    client = make_client(Recorder(envelope()))
    async with client:
        pass

    assert client._http_client.is_closed


@pytest.mark.asyncio
async def test_injected_http_client_is_left_open(settings):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(Recorder(envelope())))
    async with ElasticEmailClient(settings, http_client=http_client):
        pass

    assert not http_client.is_closed
    await http_client.aclose()


@pytest.mark.asyncio
async def test_concurrent_calls_are_independent(make_client):
    def respond(request: httpx.Request) -> httpx.Response:
        name = dict(form_items(request))["listName"]
        return envelope({"ListName": name, "Count": len(name)})

    async with make_client(Recorder(respond)) as client:
        results = await asyncio.gather(*(client.list.load(name) for name in ["a", "bb", "ccc"]))

    assert [(r.list_name, r.count) for r in results] == [("a", 1), ("bb", 2), ("ccc", 3)]


def test_settings_are_frozen():
    settings = ClientSettings(api_key="k")

    with pytest.raises(pydantic.ValidationError):
        settings.api_key = "other"
