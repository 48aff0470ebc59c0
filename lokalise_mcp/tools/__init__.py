from lokalise_mcp.core.config import Settings
from lokalise_mcp.core.lokalise_api import LokaliseAPI

from .loader import load_tools
from .registry import ToolContext, ToolDefinition, ToolRegistry


def build_registry(settings: Settings, api: LokaliseAPI | None = None) -> ToolRegistry:
    if api is None:
        api = LokaliseAPI(
            settings.api_key,
            base=settings.api_url,
            timeout=settings.timeout,
            user_agent=f"{settings.service_name}/{settings.version}",
        )
    return load_tools(ToolContext(settings=settings, api=api))


__all__ = ["ToolContext", "ToolDefinition", "ToolRegistry", "build_registry", "load_tools"]
