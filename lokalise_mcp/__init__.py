"""MCP server exposing Lokalise projects and keys as tools."""

__version__ = "1.0.0"
