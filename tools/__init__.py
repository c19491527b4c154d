"""Tool registry and execution.

Importing a tool module registers it with tools.base.
"""

from tools.base import execute_tool, get_tools
from tools import weather  # noqa: F401

# Tool definitions for OpenAI API
TOOLS = get_tools()

__all__ = ["TOOLS", "execute_tool"]
