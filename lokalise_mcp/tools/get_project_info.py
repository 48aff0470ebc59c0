from __future__ import annotations
import copy

from lokalise_mcp.core.config import Settings
from .mapping import PROJECT_ID_PROP, resolve_project_id
from .registry import ToolContext
from .result import text_result

TOOL_NAME = "get-project-info"

TOOL_SPEC = {
    "name": "get-project-info",
    "title": "Get Project Info",
    "description": "Retrieves a project object, acquire basic information. If user provides a projectId, use it.",
    "inputSchema": {
        "type": "object",
        "properties": {"projectId": PROJECT_ID_PROP},
        "additionalProperties": False,
    },
}


def tool_spec(settings: Settings) -> dict:
    spec = copy.deepcopy(TOOL_SPEC)
    if settings.default_project_id:
        spec["description"] += f" Otherwise, use the default projectId: {settings.default_project_id}"
    return spec


def run(args: dict, ctx: ToolContext) -> dict:
    project_id = resolve_project_id(args.get("projectId"), ctx.settings)
    return text_result(ctx.api.get_project(project_id))
