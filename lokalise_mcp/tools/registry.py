from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from lokalise_mcp.core.config import Settings
from lokalise_mcp.core.errors import DuplicateToolError, UnknownToolError
from lokalise_mcp.core.lokalise_api import LokaliseAPI
from .schema import validate_args

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolContext:
    settings: Settings
    api: LokaliseAPI


Runner = Callable[[Dict[str, Any], ToolContext], Dict[str, Any]]


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    title: str
    description: str
    input_schema: Dict[str, Any]
    runner: Runner


class ToolRegistry:
    def __init__(self, context: ToolContext) -> None:
        self.context = context
        self._tools: Dict[str, ToolDefinition] = {}

    def register(
        self,
        name: str,
        description: str,
        input_schema: Dict[str, Any],
        runner: Runner,
        title: Optional[str] = None,
    ) -> ToolDefinition:
        if name in self._tools:
            raise DuplicateToolError(name)
        definition = ToolDefinition(
            name=name,
            title=title or name,
            description=description,
            input_schema=input_schema,
            runner=runner,
        )
        self._tools[name] = definition
        return definition

    def get(self, name: str) -> ToolDefinition:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> List[str]:
        return list(self._tools)

    def definitions(self) -> List[ToolDefinition]:
        return list(self._tools.values())

    def dispatch(self, name: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        definition = self.get(name)
        validated = validate_args(args, definition.input_schema)
        log.info("Dispatching tool %s", name)
        return definition.runner(validated, self.context)
