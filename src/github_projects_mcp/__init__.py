"""GitHub Projects MCP Server.

Exposes GitHub Projects (V2) operations (projects, items, fields and views)
as MCP tools backed by the GitHub GraphQL API.

Run with: python -m github_projects_mcp
"""

__version__ = "1.0.0"
