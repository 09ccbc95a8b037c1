"""MCP tools registered on the shared DeepSRT server."""
