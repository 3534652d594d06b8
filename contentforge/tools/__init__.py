# Tools: MCP tool catalogue and dispatcher
"""
Tool dispatch layer: argument models, the advertised catalogue and the
dispatcher that routes a tool call to the publisher, reports or SEO toolkit.
"""

from .catalog import TOOL_DEFINITIONS, TOOLS_BY_NAME, ToolDefinition, ToolName
from .dispatcher import ToolDispatcher, ToolResult

__all__ = [
    "TOOL_DEFINITIONS",
    "TOOLS_BY_NAME",
    "ToolDefinition",
    "ToolDispatcher",
    "ToolName",
    "ToolResult",
]
