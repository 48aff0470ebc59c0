from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from .config import LOKALISE_API
from .errors import ConfigurationError, LokaliseAPIError

log = logging.getLogger(__name__)


def safe_json(resp: requests.Response) -> Dict[str, Any]:
    try:
        return resp.json()
    except ValueError:
        return {"text": (resp.text or "")[:2000]}


def error_message(resp: requests.Response, body: Dict[str, Any]) -> str:
    # Lokalise errors look like {"error": {"message": "...", "code": 404}}
    err = body.get("error") if isinstance(body, dict) else None
    if isinstance(err, dict) and err.get("message"):
        return str(err["message"])
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return resp.reason or (resp.text or "")[:500] or "HTTP error"


class LokaliseAPI:
    def __init__(
        self,
        token: Optional[str],
        base: str = LOKALISE_API,
        timeout: Optional[float] = None,
        user_agent: str = "lokalise-mcp",
    ) -> None:
        self.token = (token or "").strip()
        self.base = base.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "X-Api-Token": self.token,
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

    def _project_url(self, project_id: str, *parts: str) -> str:
        return "/".join([self.base, "projects", quote(project_id, safe=""), *parts])

    def _req(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        if not self.token:
            raise ConfigurationError("Missing LOKALISE_API_KEY env var")

        log.debug("Lokalise %s %s", method, url)
        try:
            r = requests.request(method, url, headers=self.headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            log.warning("Lokalise %s %s failed: %s", method, url, e)
            raise LokaliseAPIError(None, str(e)) from e

        if r.status_code >= 400:
            body = safe_json(r)
            message = error_message(r, body)
            log.warning("Lokalise %s %s -> %s %s", method, url, r.status_code, message)
            raise LokaliseAPIError(r.status_code, message, details=body)
        return safe_json(r)

    def get_project(self, project_id: str) -> Dict[str, Any]:
        return self._req("GET", self._project_url(project_id))

    def list_keys(self, project_id: str, filter_keys: str) -> Dict[str, Any]:
        return self._req("GET", self._project_url(project_id, "keys"), params={"filter_keys": filter_keys})

    def create_keys(self, project_id: str, keys: List[Dict[str, Any]]) -> Dict[str, Any]:
        return self._req("POST", self._project_url(project_id, "keys"), json={"keys": keys})

    def bulk_update_keys(self, project_id: str, keys: List[Dict[str, Any]]) -> Dict[str, Any]:
        return self._req("PUT", self._project_url(project_id, "keys"), json={"keys": keys})
