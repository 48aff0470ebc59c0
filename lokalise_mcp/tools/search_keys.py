from __future__ import annotations

from .mapping import PROJECT_ID_PROP, resolve_project_id
from .registry import ToolContext
from .result import text_result

TOOL_NAME = "search-keys"

TOOL_SPEC = {
    "name": "search-keys",
    "title": "Search Keys",
    "description": "Find the corresponding keyid by keyname",
    "inputSchema": {
        "type": "object",
        "properties": {
            "projectId": PROJECT_ID_PROP,
            "filterKeys": {
                "type": "string",
                "description": "One or more key name to filter by (comma separated)",
            },
        },
        "required": ["projectId", "filterKeys"],
        "additionalProperties": False,
    },
}


def run(args: dict, ctx: ToolContext) -> dict:
    project_id = resolve_project_id(args.get("projectId"), ctx.settings)
    # filter string goes to Lokalise as-is, it does the matching
    return text_result(ctx.api.list_keys(project_id, args["filterKeys"]))
