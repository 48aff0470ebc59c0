from __future__ import annotations

from .mapping import PROJECT_ID_PROP, TRANSLATIONS_PROP, map_translations, resolve_project_id
from .registry import ToolContext
from .result import text_result

TOOL_NAME = "update-keys"

TOOL_SPEC = {
    "name": "update-keys",
    "title": "Update Keys",
    "description": "Updates one or more keys in the project",
    "inputSchema": {
        "type": "object",
        "properties": {
            "projectId": PROJECT_ID_PROP,
            "keys": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "keyId": {
                            "type": ["string", "integer"],
                            "description": "A unique identifier of the key",
                        },
                        "translations": TRANSLATIONS_PROP,
                    },
                    "required": ["keyId", "translations"],
                },
            },
        },
        "required": ["projectId", "keys"],
        "additionalProperties": False,
    },
}


def build_payload(keys: list) -> list:
    return [
        {"key_id": key["keyId"], "translations": map_translations(key["translations"])}
        for key in keys
    ]


def run(args: dict, ctx: ToolContext) -> dict:
    project_id = resolve_project_id(args.get("projectId"), ctx.settings)
    return text_result(ctx.api.bulk_update_keys(project_id, build_payload(args["keys"])))
