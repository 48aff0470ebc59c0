from __future__ import annotations
from typing import Any, Optional


class LokaliseMCPError(Exception):
    pass


class ConfigurationError(LokaliseMCPError):
    pass


class ToolValidationError(LokaliseMCPError):
    def __init__(self, field: str, expected: str) -> None:
        self.field = field
        self.expected = expected
        super().__init__(f"Invalid argument '{field}': {expected}")


class UnknownToolError(LokaliseMCPError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class DuplicateToolError(LokaliseMCPError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool already registered: {name}")


class LokaliseAPIError(LokaliseMCPError):
    def __init__(self, status: Optional[int], message: str, details: Any = None) -> None:
        self.status = status
        self.message = message
        self.details = details
        prefix = f"Lokalise API {status}" if status is not None else "Lokalise API request failed"
        super().__init__(f"{prefix}: {message}")
