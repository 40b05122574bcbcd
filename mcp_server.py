"""
MCP Server Wrapping the To-Do API (`mcp_server.py`)
"""

import os

from mcp.server.fastmcp import FastMCP
import requests

TODO_API_URL = os.getenv("TODO_API_URL", "http://127.0.0.1:4000/api/todos").rstrip("/")
REQUEST_TIMEOUT = 10

# Initialize MCP server
mcp = FastMCP("To-Do API MCP Server")


@mcp.tool()
def list_todos() -> list:
    """Fetch all todos from the API."""
    response = requests.get(TODO_API_URL, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def add_todo(body: str) -> dict:
    """Create a new todo via the API."""
    response = requests.post(TODO_API_URL, json={"body": body}, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def toggle_todo(todo_id: int) -> dict:
    """Flip the completed flag of a todo."""
    response = requests.patch(f"{TODO_API_URL}/{todo_id}", timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def delete_todo(todo_id: int) -> dict:
    """Delete a todo."""
    response = requests.delete(f"{TODO_API_URL}/{todo_id}", timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


if __name__ == "__main__":
    # Run MCP server with stdio transport for local testing
    mcp.run(transport="stdio")
