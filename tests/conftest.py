"""Shared fixtures: settings, a recording fake Lokalise client and a registry."""

import pytest

from lokalise_mcp.core.config import Settings
from lokalise_mcp.core.errors import LokaliseAPIError
from lokalise_mcp.tools import build_registry


class FakeLokaliseAPI:
    """Records every call and returns canned responses instead of hitting HTTP."""

    def __init__(self):
        self.calls = []
        self.fail_with = None

    def _record(self, method, *args):
        self.calls.append((method, *args))
        if self.fail_with is not None:
            raise self.fail_with
        return {"method": method, "ok": True}

    def get_project(self, project_id):
        return self._record("get_project", project_id)

    def list_keys(self, project_id, filter_keys):
        return self._record("list_keys", project_id, filter_keys)

    def create_keys(self, project_id, keys):
        return self._record("create_keys", project_id, keys)

    def bulk_update_keys(self, project_id, keys):
        return self._record("bulk_update_keys", project_id, keys)


@pytest.fixture
def settings():
    return Settings(api_key="test-token", default_project_id="default.project")


@pytest.fixture
def fake_api():
    return FakeLokaliseAPI()


@pytest.fixture
def registry(settings, fake_api):
    return build_registry(settings, api=fake_api)


@pytest.fixture
def not_found():
    return LokaliseAPIError(404, "Not Found", details={"error": {"message": "Not Found", "code": 404}})
