"""Round trips through the FastMCP server using the in-memory client."""

import json
import logging
import time

import anyio
import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from lokalise_mcp import app
from lokalise_mcp.app import build_server
from lokalise_mcp.core.config import Settings
from lokalise_mcp.tools import build_registry


@pytest.fixture
def server(settings, registry):
    return build_server(settings, registry=registry)


@pytest.mark.asyncio
async def test_lists_four_tools(server):
    async with Client(server) as client:
        tools = await client.list_tools()

    by_name = {t.name: t for t in tools}
    assert sorted(by_name) == ["create-keys", "get-project-info", "search-keys", "update-keys"]
    assert by_name["search-keys"].inputSchema["required"] == ["projectId", "filterKeys"]


@pytest.mark.asyncio
async def test_call_returns_text_and_structured_content(server, fake_api):
    async with Client(server) as client:
        result = await client.call_tool("search-keys", {"projectId": "p1", "filterKeys": "a,b"})

    assert fake_api.calls == [("list_keys", "p1", "a,b")]
    assert json.loads(result.content[0].text) == {"method": "list_keys", "ok": True}
    assert result.structured_content == {"method": "list_keys", "ok": True}


@pytest.mark.asyncio
async def test_remote_failure_is_tool_error(server, fake_api, not_found):
    fake_api.fail_with = not_found

    async with Client(server) as client:
        with pytest.raises(ToolError, match="Lokalise API 404: Not Found"):
            await client.call_tool("get-project-info", {"projectId": "missing"})


@pytest.mark.asyncio
async def test_validation_failure_is_tool_error(server, fake_api):
    keys = [{"keyName": "k", "translations": [{"translation": "x"}]}]

    async with Client(server) as client:
        with pytest.raises(ToolError, match="languageIso"):
            await client.call_tool("create-keys", {"projectId": "p1", "keys": keys})
    assert fake_api.calls == []


def test_fatal_startup_error_exits_nonzero(monkeypatch, caplog):
    monkeypatch.setenv("PLATFORMS", "web,desktop")

    with caplog.at_level(logging.ERROR, logger="lokalise_mcp"):
        with pytest.raises(SystemExit) as exc:
            app.main()

    assert exc.value.code == 1
    assert "desktop" in caplog.text


def test_main_runs_stdio_transport(monkeypatch):
    calls = []

    class FakeServer:
        def run(self, transport):
            calls.append(transport)

    monkeypatch.delenv("PLATFORMS", raising=False)
    monkeypatch.setattr(app, "build_server", lambda settings: FakeServer())

    app.main()

    assert calls == ["stdio"]


def test_build_server_uses_settings_name():
    server = build_server(Settings(service_name="lokalise-test"))
    assert server.name == "lokalise-test"


@pytest.mark.asyncio
async def test_concurrent_calls_overlap(settings, fake_api):
    """A slow Lokalise call must not block a second invocation on the same server."""

    def slow_get_project(project_id):
        time.sleep(0.5)
        return fake_api._record("get_project", project_id)

    fake_api.get_project = slow_get_project
    server = build_server(settings, registry=build_registry(settings, api=fake_api))

    async with Client(server) as client:
        started = time.monotonic()
        async with anyio.create_task_group() as tg:
            tg.start_soon(client.call_tool, "get-project-info", {"projectId": "p1"})
            tg.start_soon(client.call_tool, "get-project-info", {"projectId": "p2"})
        elapsed = time.monotonic() - started

    assert sorted(fake_api.calls) == [("get_project", "p1"), ("get_project", "p2")]
    assert elapsed < 0.9
