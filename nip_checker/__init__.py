"""
NIP Checker

MCP tools for the Polish Ministry of Finance VAT taxpayer registry ("White List").
All tools are auto-discovered via registry.py
"""

from .registry import execute_tool, get_all_tools, get_tool
from .base import MCPTool, ToolParameter

__version__ = "1.0.0"

__all__ = ["execute_tool", "get_all_tools", "get_tool", "MCPTool", "ToolParameter", "__version__"]
