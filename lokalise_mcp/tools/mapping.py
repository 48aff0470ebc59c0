from __future__ import annotations
from typing import Any, Dict, List, Optional

from lokalise_mcp.core.config import ALLOWED_PLATFORMS, Settings
from lokalise_mcp.core.errors import ConfigurationError

PROJECT_ID_PROP = {"type": "string", "description": "A unique project identifier"}

TRANSLATIONS_PROP = {
    "type": "array",
    "description": "Translations for all languages",
    "items": {
        "type": "object",
        "properties": {
            "languageIso": {
                "type": "string",
                "description": "Unique code of the language of the translation, get the list from the get-project-info tool",
            },
            "translation": {"type": "string", "description": "The actual translation"},
        },
        "required": ["languageIso", "translation"],
    },
}

PLATFORMS_PROP = {
    "type": "array",
    "items": {"type": "string", "enum": list(ALLOWED_PLATFORMS)},
}


def resolve_project_id(project_id: Optional[str], settings: Settings) -> str:
    pid = (project_id or "").strip() or (settings.default_project_id or "")
    if not pid:
        raise ConfigurationError("No project ID provided, please set DEFAULT_PROJECT_ID")
    return pid


def map_translations(translations: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [
        {"language_iso": t["languageIso"], "translation": t["translation"]}
        for t in translations
    ]


def resolve_platforms(platforms: Optional[List[str]], settings: Settings) -> List[str]:
    if platforms is None or settings.force_default_platforms:
        return list(settings.platforms)
    return list(platforms)
