"""Error envelopes for routing, transport and unexpected failures."""

import httpx


async def test_unknown_route_lists_endpoints(anonymous_client):
    response = await anonymous_client.get("/api/nope")

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["message"] == "Route GET /api/nope not found"
    assert "/api/translations" in error["availableEndpoints"]


async def test_wrong_method_keeps_status(client):
    response = await client.delete("/api/projects")

    assert response.status_code == 405
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "HTTP_ERROR"


async def test_upstream_timeout_is_504(client, fake_lokalise):
    fake_lokalise.add("GET", "projects", error=httpx.ReadTimeout("slow"))

    response = await client.get("/api/projects")

    assert response.status_code == 504
    assert response.json()["error"]["code"] == "UPSTREAM_ERROR"


async def test_upstream_unreachable_is_502(client, fake_lokalise):
    fake_lokalise.add("GET", "projects", error=httpx.ConnectError("refused"))

    response = await client.get("/api/projects")

    assert response.status_code == 502


async def test_unexpected_error_hides_details(client, fake_lokalise):
    fake_lokalise.add("GET", "projects", error=RuntimeError("kaboom"))

    response = await client.get("/api/projects")

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["message"] == "Internal server error"
    assert "type" not in error


async def test_unexpected_error_detailed_in_debug(client, fake_lokalise, api_app):
    api_app.state.debug = True
    fake_lokalise.add("GET", "projects", error=RuntimeError("kaboom"))

    response = await client.get("/api/projects")

    error = response.json()["error"]
    assert error["message"] == "kaboom"
    assert error["type"] == "RuntimeError"


async def test_error_never_echoes_token(client, fake_lokalise):
    fake_lokalise.add("GET", "projects", status=401, json={"error": {"message": "Invalid `X-Api-Token` header"}})

    response = await client.get("/api/projects")

    assert response.status_code == 401
    assert "tok-plugin" not in response.text
