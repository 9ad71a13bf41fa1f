import json
from datetime import datetime

import httpx
import pytest

from elastic_email.core.domain.enums import (
    AccountStatus,
    ContactSource,
    ContactStatus,
    ExportFileFormats,
    LogJobStatus,
    TemplateType,
)
from elastic_email.core.domain.models import Campaign, EmailSend, FilePayload, Survey, TemplateList
from elastic_email.core.errors import ApiError

from .conftest import API_KEY, Recorder, envelope, form_items


def _params(request: httpx.Request) -> list[tuple[str, str]]:
    # Sin la API key, para comparar solo lo que arma el recurso.
    return [(k, v) for k, v in form_items(request) if k != "apikey"]


@pytest.mark.asyncio
async def test_contact_add_expands_repeatable_and_custom_fields(make_client):
    recorder = Recorder(envelope("contact-id"))
    async with make_client(recorder) as client:
        result = await client.contact.add(
            "pub-1",
            "ana@example.com",
            public_list_ids=["l1", "l2"],
            list_names=["News"],
            source=ContactSource.WebForm,
            fields={"city": "Madrid", "plan": "pro"},
        )

    assert result == "contact-id"
    assert recorder.last.url.path.endswith("/contact/add")
    assert _params(recorder.last) == [
        ("publicAccountID", "pub-1"),
        ("email", "ana@example.com"),
        ("publicListID", "l1"),
        ("publicListID", "l2"),
        ("listName", "News"),
        ("source", "WebForm"),
        ("field_city", "Madrid"),
        ("field_plan", "pro"),
    ]


@pytest.mark.asyncio
async def test_only_required_parameters_when_optionals_unset(make_client):
    recorder = Recorder(envelope(1))
    async with make_client(recorder) as client:
        await client.list.add("News")

    assert form_items(recorder.last) == [("apikey", API_KEY), ("listName", "News")]


@pytest.mark.asyncio
async def test_contact_quick_add_joins_emails(make_client):
    recorder = Recorder(envelope())
    async with make_client(recorder) as client:
        assert await client.contact.quick_add(["a@x.com", "b@x.com"], status=ContactStatus.Active) is None

    assert _params(recorder.last) == [("emails", "a@x.com,b@x.com"), ("status", "Active")]


@pytest.mark.asyncio
async def test_contact_list_parses_contacts(make_client):
    data = [
        {"Email": "a@x.com", "Status": 0, "TotalSent": 4},
        {"Email": "b@x.com", "Status": "Unsubscribed"},
    ]
    async with make_client(Recorder(envelope(data))) as client:
        contacts = await client.contact.list(limit=2)

    assert [c.email for c in contacts] == ["a@x.com", "b@x.com"]
    assert contacts[0].total_sent == 4
    assert contacts[1].status is ContactStatus.Unsubscribed


@pytest.mark.asyncio
async def test_list_endpoints_return_empty_list_for_null_data(make_client):
    async with make_client(Recorder(envelope(None))) as client:
        assert await client.list.list() == []


@pytest.mark.asyncio
async def test_contact_upload_goes_through_multipart(make_client):
    recorder = Recorder(envelope(12))
    async with make_client(recorder) as client:
        count = await client.contact.upload(
            FilePayload(content=b"email\na@x.com\n", file_name="c.csv", content_type="text/csv"),
            list_name="News",
            status=ContactStatus.Active,
        )

    assert count == 12
    request = recorder.last
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'name="listName"\r\n\r\nNews\r\n' in request.content
    assert b'name="status"\r\n\r\nActive\r\n' in request.content
    assert b'filename="c.csv"' in request.content


@pytest.mark.asyncio
async def test_email_send_form_encodes_headers_and_merge_fields(make_client):
    recorder = Recorder(envelope({"TransactionID": "tx-1", "MessageID": "msg-1"}))
    async with make_client(recorder) as client:
        result = await client.email.send(
            to=["a@x.com", "b@x.com"],
            subject="Hello",
            from_email="me@x.com",
            body_text="Hi {firstname}",
            headers={"X-Campaign": "spring"},
            merge={"firstname": "Ana"},
            is_transactional=True,
        )

    assert result == EmailSend(transaction_id="tx-1", message_id="msg-1")
    assert recorder.last.headers["content-type"] == "application/x-www-form-urlencoded"
    assert _params(recorder.last) == [
        ("subject", "Hello"),
        ("from", "me@x.com"),
        ("to", "a@x.com,b@x.com"),
        ("bodyText", "Hi {firstname}"),
        ("headers_X-Campaign", "spring"),
        ("merge_firstname", "Ana"),
        ("isTransactional", "True"),
    ]


@pytest.mark.asyncio
async def test_email_send_with_attachments_uses_multipart(make_client):
    recorder = Recorder(envelope({"TransactionID": "tx-2"}))
    async with make_client(recorder) as client:
        result = await client.email.send(
            to=["a@x.com"],
            subject="Report",
            attachment_files=[FilePayload(content=b"%PDF", file_name="r.pdf", content_type="application/pdf")],
        )

    assert result.transaction_id == "tx-2"
    request = recorder.last
    assert request.url.path.endswith("/email/send")
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b"Content-Type: application/pdf\r\n\r\n%PDF\r\n" in request.content


@pytest.mark.asyncio
async def test_file_upload_decodes_envelope_from_raw_body(make_client):
    data = {"FileName": "logo.png", "Size": 3, "ContentType": "image/png"}
    async with make_client(Recorder(envelope(data))) as client:
        info = await client.file.upload(FilePayload(content=b"png", file_name="logo.png"), expires_after_days=7)

    assert info.file_name == "logo.png"
    assert info.size == 3


@pytest.mark.asyncio
async def test_file_upload_api_failure_raises(make_client):
    async with make_client(Recorder(envelope(success=False, error="Storage full"))) as client:
        with pytest.raises(ApiError, match="Storage full"):
            await client.file.upload(FilePayload(content=b"x", file_name="x.txt"))


@pytest.mark.asyncio
async def test_file_download_uses_get_with_query(make_client):
    response = httpx.Response(
        200,
        content=b"PK\x03\x04",
        headers={"Content-Disposition": "attachment; filename=export.zip", "Content-Type": "application/zip"},
    )
    recorder = Recorder(response)
    async with make_client(recorder) as client:
        payload = await client.file.download(filename="export.zip")

    assert payload is not None
    assert payload.file_name == "export.zip"
    assert payload.content_type == "application/zip"
    assert recorder.last.method == "GET"
    assert recorder.last.url.params.get("filename") == "export.zip"


@pytest.mark.asyncio
async def test_campaign_add_sends_json_document(make_client):
    recorder = Recorder(envelope(77))
    async with make_client(recorder) as client:
        channel_id = await client.campaign.add(Campaign(name="Spring", recipient_list_names=["News"]))

    assert channel_id == 77
    (key, value), = _params(recorder.last)
    assert key == "campaign"
    document = json.loads(value)
    assert document["Name"] == "Spring"
    assert document["RecipientListNames"] == ["News"]
    assert document["Status"] == 6


@pytest.mark.asyncio
async def test_survey_add_round_trips_model(make_client):
    data = {"PublicSurveyID": "s-1", "Name": "NPS", "Status": 1}
    async with make_client(Recorder(envelope(data))) as client:
        survey = await client.survey.add(Survey(name="NPS"))

    assert survey.public_survey_id == "s-1"


@pytest.mark.asyncio
async def test_template_get_list(make_client):
    data = {
        "Templates": [{"TemplateID": 5, "Name": "Welcome", "TemplateType": 0}],
        "TemplatesCount": 1,
    }
    async with make_client(Recorder(envelope(data))) as client:
        result = await client.template.get_list(limit=10)

    assert isinstance(result, TemplateList)
    assert result.templates_count == 1
    assert result.templates[0].template_id == 5
    assert result.templates[0].template_type is TemplateType.RawHTML


@pytest.mark.asyncio
async def test_template_check_usage_joins_ids(make_client):
    recorder = Recorder(envelope(True))
    async with make_client(recorder) as client:
        assert await client.template.check_usage(template_ids=[1, 2]) is True

    assert _params(recorder.last) == [("templateIDs", "1,2")]


@pytest.mark.asyncio
async def test_log_load_formats_dates_and_statuses(make_client):
    recorder = Recorder(envelope({"RecipientsCount": 0, "Recipients": []}))
    async with make_client(recorder) as client:
        log = await client.log.load(
            [LogJobStatus.Sent, LogJobStatus.Opened],
            from_date=datetime(2024, 1, 5, 15, 4, 5),
            include_email=True,
        )

    assert log.recipients == []
    assert _params(recorder.last) == [
        ("statuses", "Sent,Opened"),
        ("from", "1/5/2024 3:04:05 PM"),
        ("includeEmail", "True"),
    ]


@pytest.mark.asyncio
async def test_account_load_parses_enums(make_client):
    data = {"PublicAccountID": "pub", "Email": "me@x.com", "Status": 1, "Credit": "12.50"}
    async with make_client(Recorder(envelope(data))) as client:
        account = await client.account.load()

    assert account.status is AccountStatus.Active
    assert str(account.credit) == "12.50"


@pytest.mark.asyncio
async def test_segment_export(make_client):
    recorder = Recorder(envelope({"Link": "https://dl/x.csv", "PublicExportID": "e-1"}))
    async with make_client(recorder) as client:
        link = await client.segment.export("Engaged", file_format=ExportFileFormats.Csv)

    assert link.link == "https://dl/x.csv"
    assert _params(recorder.last) == [("segmentName", "Engaged"), ("fileFormat", "Csv")]


@pytest.mark.asyncio
async def test_sms_send_void(make_client):
    recorder = Recorder(envelope())
    async with make_client(recorder) as client:
        assert await client.sms.send("+15550100", "code 1234") is None

    assert _params(recorder.last) == [("to", "+15550100"), ("body", "code 1234")]


@pytest.mark.asyncio
async def test_resource_propagates_api_error(make_client):
    async with make_client(Recorder(envelope(success=False, error="Domain not found"))) as client:
        with pytest.raises(ApiError) as exc_info:
            await client.domain.verify_spf("example.com")

    assert str(exc_info.value) == "Domain not found"
