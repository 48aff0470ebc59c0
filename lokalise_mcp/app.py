import sys
import logging
from typing import Any, Dict

import anyio
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from lokalise_mcp.core.config import Settings, load_settings
from lokalise_mcp.core.errors import LokaliseMCPError
from lokalise_mcp.tools import ToolDefinition, ToolRegistry, build_registry

log = logging.getLogger("lokalise_mcp")


# -----------------------------
# Logging
# -----------------------------
def setup_logging(level: str = "INFO") -> None:
    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


# -----------------------------
# MCP tools backed by the registry
# -----------------------------
class RegistryTool(Tool):
    _registry: ToolRegistry = PrivateAttr()

    @classmethod
    def from_definition(cls, definition: ToolDefinition, registry: ToolRegistry) -> "RegistryTool":
        tool = cls(
            name=definition.name,
            title=definition.title,
            description=definition.description,
            parameters=definition.input_schema,
        )
        tool._registry = registry
        return tool

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        try:
            result = await anyio.to_thread.run_sync(self._registry.dispatch, self.name, arguments)
        except LokaliseMCPError as e:
            log.warning("Tool %s failed: %s", self.name, e)
            raise ToolError(str(e)) from e

        content = [TextContent(type="text", text=block["text"]) for block in result["content"]]
        return ToolResult(content=content, structured_content=result.get("structuredContent"))


def build_server(settings: Settings, registry: ToolRegistry | None = None) -> FastMCP:
    if registry is None:
        registry = build_registry(settings)

    mcp = FastMCP(name=settings.service_name, version=settings.version)
    for definition in registry.definitions():
        mcp.add_tool(RegistryTool.from_definition(definition, registry))
    return mcp


def main() -> None:
    # startup and stdio transport failures both end the process with status 1
    try:
        settings = load_settings()
        setup_logging(settings.log_level)
        if not settings.api_key:
            log.warning("LOKALISE_API_KEY is not set, every tool call will fail")

        mcp = build_server(settings)
        log.info("Lokalise MCP Server running on stdio")
        mcp.run(transport="stdio")
    except Exception as e:
        setup_logging()
        log.error("Fatal error in main(): %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
