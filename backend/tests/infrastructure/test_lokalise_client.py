"""Lokalise client tests — authentication header, error mapping, pagination, no retries.

Tests cover:
    - X-Api-Token header carries the credential on every call
    - Error message extraction: error.message → message → reason phrase
    - Upstream status code preserved on UpstreamError
    - Transport failures map to 502 / 504
    - Exactly one attempt per call, even for 5xx
    - Cursor pagination parameters and next-cursor header
"""

import httpx
import pytest

from lokalise_proxy.core.errors import UpstreamError
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient


async def test_every_call_sends_api_token_header(fake_lokalise, lokalise_client):
    fake_lokalise.add("GET", "projects", json={"projects": []})
    fake_lokalise.add("GET", "projects/p1/tasks", json={"tasks": []})

    await lokalise_client.list_projects()
    await lokalise_client.list_tasks("p1")

    assert [r.headers["x-api-token"] for r in fake_lokalise.requests] == ["tok-test", "tok-test"]


async def test_request_targets_api2_base_url(fake_lokalise, lokalise_client):
    fake_lokalise.add("GET", "projects/p1", json={"project_id": "p1"})

    result = await lokalise_client.get_project("p1")

    assert result == {"project_id": "p1"}
    assert str(fake_lokalise.requests[0].url) == "https://api.lokalise.com/api2/projects/p1"


async def test_post_sends_json_body(fake_lokalise, lokalise_client):
    fake_lokalise.add("POST", "projects/p1/keys", json={"keys": [{"key_id": 1}]})

    await lokalise_client.create_keys("p1", [{"key_name": "title", "platforms": ["web"]}])

    request = fake_lokalise.calls("POST", "projects/p1/keys")[0]
    assert fake_lokalise.body_of(request) == {"keys": [{"key_name": "title", "platforms": ["web"]}]}


async def test_path_segments_are_quoted(fake_lokalise, lokalise_client):
    fake_lokalise.add("GET", "projects/a/b/keys", json={"keys": []})

    await lokalise_client.list_keys("a/b")

    assert fake_lokalise.requests[0].url.raw_path == b"/api2/projects/a%2Fb/keys"


@pytest.mark.parametrize("body, expected", [
    ({"error": {"message": "Invalid `project_id` parameter", "code": 400}}, "Invalid `project_id` parameter"),
    ({"message": "Token is invalid"}, "Token is invalid"),
    ({"error": "plain string"}, "Bad Request"),
    ([], "Bad Request"),
])
async def test_error_message_extraction(fake_lokalise, lokalise_client, body, expected):
    fake_lokalise.add("GET", "projects", json=body, status=400)

    with pytest.raises(UpstreamError) as exc_info:
        await lokalise_client.list_projects()

    assert exc_info.value.status_code == 400
    assert exc_info.value.upstream_message == expected
    assert exc_info.value.message == f"Lokalise API error: 400 - {expected}"


async def test_non_json_error_body_uses_reason_phrase(fake_lokalise, lokalise_client):
    fake_lokalise.add("GET", "projects", status=503, content=b"<html>down</html>")

    with pytest.raises(UpstreamError) as exc_info:
        await lokalise_client.list_projects()

    assert exc_info.value.status_code == 503
    assert exc_info.value.upstream_message == "Service Unavailable"


async def test_upstream_status_is_passed_through(fake_lokalise, lokalise_client):
    fake_lokalise.add("GET", "projects/p1", status=404, json={"error": {"message": "Not Found"}})

    with pytest.raises(UpstreamError) as exc_info:
        await lokalise_client.get_project("p1")

    assert exc_info.value.http_status == 404
    assert exc_info.value.to_response()["error"]["status_code"] == 404


async def test_no_retry_on_server_error(fake_lokalise, lokalise_client):
    fake_lokalise.add("POST", "projects/p1/tasks", status=500, json={"message": "boom"})

    with pytest.raises(UpstreamError):
        await lokalise_client.create_task("p1", {"title": "T"})

    assert len(fake_lokalise.requests) == 1


async def test_timeout_maps_to_504(fake_lokalise, lokalise_client):
    fake_lokalise.add("GET", "projects", error=httpx.ReadTimeout("slow"))

    with pytest.raises(UpstreamError) as exc_info:
        await lokalise_client.list_projects()

    assert exc_info.value.status_code == 504


async def test_connection_error_maps_to_502(fake_lokalise, lokalise_client):
    fake_lokalise.add("GET", "projects", error=httpx.ConnectError("refused"))

    with pytest.raises(UpstreamError) as exc_info:
        await lokalise_client.list_projects()

    assert exc_info.value.status_code == 502


async def test_unreadable_success_body_maps_to_502(fake_lokalise, lokalise_client):
    fake_lokalise.add("GET", "projects", content=b"not json")

    with pytest.raises(UpstreamError) as exc_info:
        await lokalise_client.list_projects()

    assert exc_info.value.status_code == 502


async def test_list_keys_page_uses_cursor_pagination(fake_lokalise, lokalise_client):
    fake_lokalise.add(
        "GET", "projects/p1/keys",
        json={"keys": [{"key_id": 1}]},
        headers={"X-Pagination-Next-Cursor": "eyIxIjoxfQ=="},
    )

    body, next_cursor = await lokalise_client.list_keys_page("p1", limit=500, cursor="abc")

    assert body == {"keys": [{"key_id": 1}]}
    assert next_cursor == "eyIxIjoxfQ=="
    params = fake_lokalise.requests[0].url.params
    assert params["pagination"] == "cursor"
    assert params["limit"] == "500"
    assert params["include_translations"] == "1"
    assert params["cursor"] == "abc"


async def test_list_keys_page_without_next_cursor(fake_lokalise, lokalise_client):
    fake_lokalise.add("GET", "projects/p1/keys", json={"keys": []}, headers={"X-Pagination-Next-Cursor": ""})

    _, next_cursor = await lokalise_client.list_keys_page("p1", limit=10)

    assert next_cursor is None
    assert "cursor" not in fake_lokalise.requests[0].url.params


async def test_client_closes_on_exit(fake_lokalise):
    client = LokaliseClient("tok", transport=fake_lokalise.transport)
    async with client:
        pass
    assert client._client.is_closed
