# lokalise_mcp/tools/schema.py
# Validates tool arguments against the inputSchema of a TOOL_SPEC.
# Supports the JSON-Schema subset the tool specs use: type (or list of types),
# properties, required, items, enum. Unknown properties are dropped.

from __future__ import annotations
from typing import Any, Dict, List

from lokalise_mcp.core.errors import ToolValidationError

_TYPE_NAMES = {
    "string": "a string",
    "integer": "an integer",
    "number": "a number",
    "boolean": "a boolean",
    "array": "an array",
    "object": "an object",
}


def _is_type(value: Any, expected: str) -> bool:
    if expected == "string":
        return isinstance(value, str)
    if expected == "integer":
        return isinstance(value, int) and not isinstance(value, bool)
    if expected == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if expected == "boolean":
        return isinstance(value, bool)
    if expected == "array":
        return isinstance(value, list)
    if expected == "object":
        return isinstance(value, dict)
    return True


def _describe(types: List[str]) -> str:
    return " or ".join(_TYPE_NAMES.get(t, t) for t in types)


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def validate_value(value: Any, schema: Dict[str, Any], path: str) -> Any:
    expected = schema.get("type")
    types = expected if isinstance(expected, list) else ([expected] if expected else [])

    if types and not any(_is_type(value, t) for t in types):
        raise ToolValidationError(path, f"expected {_describe(types)}")

    enum = schema.get("enum")
    if isinstance(enum, list) and value not in enum:
        raise ToolValidationError(path, f"expected one of {enum}")

    if isinstance(value, dict) and "object" in types:
        return validate_object(value, schema, path)

    if isinstance(value, list) and "array" in types:
        items = schema.get("items")
        if not isinstance(items, dict):
            return list(value)
        return [validate_value(v, items, f"{path}[{i}]") for i, v in enumerate(value)]

    return value


def validate_object(obj: Dict[str, Any], schema: Dict[str, Any], path: str = "") -> Dict[str, Any]:
    properties = schema.get("properties")
    properties = properties if isinstance(properties, dict) else {}
    required = schema.get("required")
    required = required if isinstance(required, list) else []

    for field in required:
        if obj.get(field) is None:
            raise ToolValidationError(_join(path, field), "missing required field")

    clean: Dict[str, Any] = {}
    for key, prop in properties.items():
        # clients send null for omitted optional arguments
        if obj.get(key) is None:
            continue
        clean[key] = validate_value(obj[key], prop, _join(path, key))
    return clean


def validate_args(args: Any, input_schema: Dict[str, Any]) -> Dict[str, Any]:
    if args is None:
        args = {}
    if not isinstance(args, dict):
        raise ToolValidationError("arguments", "expected an object")
    return validate_object(args, input_schema)
