"""Fin Calc MCP server."""
