import json

import httpx
import pytest

from elastic_email.adapters.transport import FORM_CONTENT_TYPE, HttpTransport
from elastic_email.core.domain.models import Contact, FilePayload
from elastic_email.core.errors import ApiError, DecodeError, NotFoundError, TransportError

from .conftest import API_BASE, API_KEY, Recorder, envelope, form_items


def _transport(handler, api_key=API_KEY) -> HttpTransport:
    client = httpx.AsyncClient(base_url=API_BASE + "/", transport=httpx.MockTransport(handler))
    return HttpTransport(client, api_key=api_key)


@pytest.mark.asyncio
async def test_post_sends_form_body_with_api_key():
    recorder = Recorder(envelope({"Email": "ana@example.com"}))
    transport = _transport(recorder)

    contact = await transport.post("/contact/loadcontact", [("email", "ana@example.com")], Contact)

    request = recorder.last
    assert request.method == "POST"
    assert request.url.path == "/v2/contact/loadcontact"
    assert request.headers["content-type"] == FORM_CONTENT_TYPE
    assert form_items(request) == [("apikey", API_KEY), ("email", "ana@example.com")]
    assert contact.email == "ana@example.com"


@pytest.mark.asyncio
async def test_post_replaces_caller_supplied_api_key():
    recorder = Recorder(envelope())
    transport = _transport(recorder)

    await transport.post("/sms/send", [("apikey", "other"), ("to", "+100")])

    assert form_items(recorder.last) == [("apikey", API_KEY), ("to", "+100")]


@pytest.mark.asyncio
async def test_post_api_failure_raises_api_error():
    transport = _transport(Recorder(envelope(success=False, error="Incorrect apikey")))

    with pytest.raises(ApiError, match="Incorrect apikey"):
        await transport.post("/account/load", [], Contact)


@pytest.mark.asyncio
async def test_post_non_2xx_raises_transport_error():
    response = httpx.Response(503, content=b"busy", headers={"Retry-After": "5"})
    transport = _transport(Recorder(response))

    with pytest.raises(TransportError) as exc_info:
        await transport.post("/account/load", [])

    error = exc_info.value
    assert error.status_code == 503
    assert str(error) == "Service Unavailable"
    assert error.body == b"busy"
    assert error.headers["retry-after"] == "5"


@pytest.mark.asyncio
async def test_post_malformed_body_raises_decode_error():
    transport = _transport(Recorder(httpx.Response(200, content=b"not json")))

    with pytest.raises(DecodeError):
        await transport.post("/account/load", [])


@pytest.mark.asyncio
async def test_network_failure_is_transport_error_without_status():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = _transport(handler)

    with pytest.raises(TransportError) as exc_info:
        await transport.post("/account/load", [])

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_upload_builds_multipart_request_and_returns_raw_body():
    raw = json.dumps({"success": True, "error": None, "data": 5}).encode()
    recorder = Recorder(httpx.Response(200, content=raw))
    transport = _transport(recorder)
    files = [FilePayload(content=b"email\nana@example.com\n", file_name="c.csv", content_type="text/csv")]

    body = await transport.upload_files("/contact/upload", files, [("listName", "News")])

    assert body == raw
    request = recorder.last
    content_type = request.headers["content-type"]
    assert content_type.startswith("multipart/form-data; boundary=")
    boundary = content_type.split("boundary=", 1)[1]
    assert request.content.startswith(f"--{boundary}\r\n".encode())
    assert b'name="apikey"\r\n\r\ntest-key\r\n' in request.content
    assert b'name="listName"\r\n\r\nNews\r\n' in request.content
    assert b'name="filefoobarname"; filename="c.csv"' in request.content
    assert request.content.endswith(f"--{boundary}--\r\n".encode())


@pytest.mark.asyncio
async def test_upload_non_2xx_keeps_server_status_description():
    response = httpx.Response(500, content=b"", extensions={"reason_phrase": b"Internal error"})
    transport = _transport(Recorder(response))

    with pytest.raises(TransportError) as exc_info:
        await transport.upload_files("/file/upload", [FilePayload(content=b"x", file_name="x.txt")], [])

    assert str(exc_info.value) == "Internal error"
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_download_returns_file_payload():
    response = httpx.Response(
        200,
        content=b"a,b\n",
        headers={
            "Content-Disposition": 'attachment; filename="report.csv"; size=4',
            "Content-Type": "text/csv",
        },
    )
    recorder = Recorder(response)
    transport = _transport(recorder)

    payload = await transport.download_file("/file/download", [("filename", "report 2024.csv")])

    assert payload == FilePayload(content=b"a,b\n", file_name="report.csv", content_type="text/csv")
    request = recorder.last
    assert request.method == "GET"
    assert request.url.params.get("apikey") == API_KEY
    assert request.url.params.get("filename") == "report 2024.csv"


@pytest.mark.asyncio
async def test_download_empty_body_is_not_found_even_with_header():
    response = httpx.Response(200, content=b"", headers={"Content-Disposition": 'attachment; filename="x.csv"'})
    transport = _transport(Recorder(response))

    with pytest.raises(NotFoundError):
        await transport.download_file("/file/download", [("filename", "x.csv")])


@pytest.mark.asyncio
async def test_download_empty_body_without_header_is_not_found():
    transport = _transport(Recorder(httpx.Response(200, content=b"")))

    with pytest.raises(NotFoundError):
        await transport.download_file("/file/download", [("filename", "x.csv")])


@pytest.mark.asyncio
async def test_download_without_header_and_failed_envelope_raises_api_error():
    transport = _transport(Recorder(envelope(success=False, error="File not found")))

    with pytest.raises(ApiError, match="File not found"):
        await transport.download_file("/file/download", [("filename", "x.csv")])


@pytest.mark.asyncio
async def test_download_without_header_and_successful_envelope_returns_none():
    transport = _transport(Recorder(envelope()))

    assert await transport.download_file("/file/download", [("filename", "x.csv")]) is None


@pytest.mark.asyncio
async def test_download_non_2xx_raises_transport_error():
    response = httpx.Response(404, content=b"missing", extensions={"reason_phrase": b"No such file"})
    transport = _transport(Recorder(response))

    with pytest.raises(TransportError, match="No such file"):
        await transport.download_file("/file/download", [])


@pytest.mark.asyncio
async def test_post_body_percent_encodes_values():
    recorder = Recorder(envelope())
    transport = _transport(recorder)

    await transport.post("/contact/quickadd", [("q", "a b&c"), ("k", "x"), ("k", "y")])

    assert recorder.last.content == b"apikey=test-key&q=a+b%26c&k=x&k=y"


@pytest.mark.asyncio
async def test_download_without_header_and_non_json_body_is_decode_error():
    response = httpx.Response(200, content=b"<html>error</html>", headers={"Content-Type": "text/html"})
    transport = _transport(Recorder(response))

    with pytest.raises(DecodeError):
        await transport.download_file("/file/download", [("filename", "x.csv")])


@pytest.mark.asyncio
async def test_download_network_failure_is_transport_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    transport = _transport(handler)

    with pytest.raises(TransportError) as exc_info:
        await transport.download_file("/file/download", [("filename", "x.csv")])

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
