from edgeapi.clients.headers import (
    IDENTITY_HEADER,
    REQUEST_ID_HEADER,
    REQUEST_ID_KEY,
    get_outgoing_headers,
)
from edgeapi.common.identity import set_original_identity


def test_request_id_is_passed_without_auth():
    ctx = {REQUEST_ID_KEY: "req-1"}
    assert get_outgoing_headers(ctx, auth=False) == {REQUEST_ID_HEADER: "req-1"}


def test_identity_not_passed_without_auth():
    ctx = set_original_identity({REQUEST_ID_KEY: "req-1"}, "ident")
    headers = get_outgoing_headers(ctx, auth=False)
    assert IDENTITY_HEADER not in headers


def test_identity_passed_with_auth():
    ctx = set_original_identity({REQUEST_ID_KEY: "req-2"}, "ident")
    headers = get_outgoing_headers(ctx, auth=True)
    assert headers == {REQUEST_ID_HEADER: "req-2", IDENTITY_HEADER: "ident"}


def test_missing_identity_with_auth_is_left_out():
    headers = get_outgoing_headers({REQUEST_ID_KEY: "req-3"}, auth=True)
    assert headers == {REQUEST_ID_HEADER: "req-3"}


def test_missing_request_id_is_empty():
    assert get_outgoing_headers({}, auth=False) == {REQUEST_ID_HEADER: ""}


def test_header_names():
    ctx = set_original_identity({REQUEST_ID_KEY: "req-4"}, "ident")
    headers = get_outgoing_headers(ctx, auth=True)
    assert headers == {"x-rh-insights-request-id": "req-4", "x-rh-identity": "ident"}