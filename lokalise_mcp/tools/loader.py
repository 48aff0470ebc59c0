import importlib
import pkgutil

from .registry import ToolContext, ToolRegistry

SKIP_MODULES = ("loader", "registry", "schema", "mapping", "result")


def load_tools(context: ToolContext) -> ToolRegistry:
    """
    Auto-discover tool modules inside the tools/ package.
    Each tool module must expose:
      - TOOL_NAME (str)
      - TOOL_SPEC (dict)  (MCP-style tool schema)
      - run(args: dict, ctx: ToolContext) -> dict
    and may expose tool_spec(settings) -> dict to render descriptions
    from the configuration.

    Two modules declaring the same TOOL_NAME raise DuplicateToolError.
    """
    registry = ToolRegistry(context)
    package = importlib.import_module(__package__)

    for mod in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        if mod.name in SKIP_MODULES:
            continue

        m = importlib.import_module(f"{__package__}.{mod.name}")

        tool_name = getattr(m, "TOOL_NAME", None)
        tool_spec = getattr(m, "TOOL_SPEC", None)
        runner = getattr(m, "run", None)

        if not tool_name or not tool_spec or not callable(runner):
            continue

        render = getattr(m, "tool_spec", None)
        if callable(render):
            tool_spec = render(context.settings)

        registry.register(
            tool_name,
            tool_spec.get("description", ""),
            tool_spec.get("inputSchema", {"type": "object", "properties": {}}),
            runner,
            title=tool_spec.get("title"),
        )

    return registry
