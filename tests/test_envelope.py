import json

import pytest

from elastic_email.adapters.envelope import decode, parse_envelope
from elastic_email.core.domain.enums import AccountStatus, ExportStatus
from elastic_email.core.domain.models import Account, Contact, ContactList
from elastic_email.core.errors import ApiError, DecodeError


def _body(data=None, *, success=True, error=None) -> str:
    return json.dumps({"success": success, "error": error, "data": data})


@pytest.mark.parametrize(
    ("value", "result_type"),
    [
        ("plain text", str),
        (123, int),
        (True, bool),
        ([1, 2, 3], list[int]),
        ({"a": "1"}, dict[str, str]),
    ],
)
def test_success_returns_data_unchanged(value, result_type):
    assert decode(_body(value), result_type) == value


def test_success_validates_into_models():
    body = _body({"Email": "ana@example.com", "FirstName": "Ana", "Status": 0, "Unknown": "x"})

    contact = decode(body, Contact)

    assert isinstance(contact, Contact)
    assert contact.email == "ana@example.com"
    assert contact.first_name == "Ana"


def test_success_validates_lists_of_models():
    body = _body([{"ListName": "News", "Count": 3, "PublicListID": "abc"}])

    lists = decode(body, list[ContactList])

    assert lists[0].list_name == "News"
    assert lists[0].public_list_id == "abc"


def test_wire_ids_are_uppercase():
    account = decode(_body({"PublicAccountID": "pub-1", "Status": 1}), Account)

    assert account.public_account_id == "pub-1"
    assert account.status is AccountStatus.Active


def test_enums_accept_symbolic_names():
    assert decode(_body("Ready"), ExportStatus) is ExportStatus.Ready
    assert decode(_body(2), ExportStatus) is ExportStatus.Expired


def test_void_operation_returns_none():
    assert decode(_body(None)) is None
    assert decode(_body({"ignored": True})) is None


def test_accepts_bytes_body():
    assert decode(_body("x").encode("utf-8"), str) == "x"


@pytest.mark.parametrize("message", ["X", "Access denied.", "Contact not found: ana@example.com"])
def test_failure_raises_api_error_with_server_message(message):
    with pytest.raises(ApiError) as exc_info:
        decode(_body({"partial": 1}, success=False, error=message), dict)

    assert str(exc_info.value) == message
    assert exc_info.value.message == message


def test_malformed_json_is_decode_error_not_api_error():
    with pytest.raises(DecodeError) as exc_info:
        decode("<html>502 Bad Gateway</html>", str)

    assert not isinstance(exc_info.value, ApiError)
    assert exc_info.value.body == "<html>502 Bad Gateway</html>"


def test_non_object_json_is_decode_error():
    with pytest.raises(DecodeError):
        parse_envelope("[1, 2]")


def test_missing_success_flag_is_decode_error():
    with pytest.raises(DecodeError):
        parse_envelope('{"data": 1}')


def test_payload_not_matching_type_is_decode_error():
    with pytest.raises(DecodeError):
        decode(_body({"FirstName": "no email"}), Contact)
