from __future__ import annotations
import json
from typing import Any, Dict


def text_result(response: Any) -> Dict[str, Any]:
    """Wrap a Lokalise response into the MCP tool result envelope."""
    out: Dict[str, Any] = {
        "content": [
            {"type": "text", "text": json.dumps(response, ensure_ascii=False, indent=2)}
        ]
    }
    if isinstance(response, dict):
        out["structuredContent"] = response
    return out
