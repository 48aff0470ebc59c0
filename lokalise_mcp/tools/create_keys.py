from __future__ import annotations
import copy

from lokalise_mcp.core.config import Settings
from .mapping import (
    PLATFORMS_PROP,
    PROJECT_ID_PROP,
    TRANSLATIONS_PROP,
    map_translations,
    resolve_platforms,
    resolve_project_id,
)
from .registry import ToolContext
from .result import text_result

TOOL_NAME = "create-keys"

TOOL_SPEC = {
    "name": "create-keys",
    "title": "Create Keys",
    "description": "Creates one or more keys in the project",
    "inputSchema": {
        "type": "object",
        "properties": {
            "projectId": {
                **PROJECT_ID_PROP,
                "description": "A unique project identifier, if not provide, first use get-project-info tool to get the project id",
            },
            "keys": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "keyName": {"type": "string", "description": "Key identifier"},
                        "platforms": {**PLATFORMS_PROP, "description": "Platforms for the key"},
                        "translations": TRANSLATIONS_PROP,
                    },
                    "required": ["keyName", "translations"],
                },
            },
        },
        "required": ["keys"],
        "additionalProperties": False,
    },
}


def tool_spec(settings: Settings) -> dict:
    spec = copy.deepcopy(TOOL_SPEC)
    platforms = spec["inputSchema"]["properties"]["keys"]["items"]["properties"]["platforms"]
    default = ", ".join(settings.platforms)
    if settings.force_default_platforms:
        platforms["description"] += f". Always set to: {default}"
    else:
        platforms["description"] += f". If not provided, use the default platforms: {default}"
    return spec


def build_payload(keys: list, ctx: ToolContext) -> list:
    return [
        {
            "key_name": key["keyName"],
            "platforms": resolve_platforms(key.get("platforms"), ctx.settings),
            "translations": map_translations(key["translations"]),
        }
        for key in keys
    ]


def run(args: dict, ctx: ToolContext) -> dict:
    project_id = resolve_project_id(args.get("projectId"), ctx.settings)
    return text_result(ctx.api.create_keys(project_id, build_payload(args["keys"], ctx)))
