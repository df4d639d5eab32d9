"""
MCP Tool Registry

Single Source of Truth (SSOT) for tool discovery and dispatch.
Automatically discovers and registers all tools from nip_checker/tools/.
"""

import importlib
import inspect
import logging
import pkgutil
from pathlib import Path
from typing import Dict, List, Optional

from .base import MCPTool, ToolDefinition, UnknownToolError

logger = logging.getLogger(__name__)

# Global registry
_tool_registry: Dict[str, ToolDefinition] = {}
_initialized: bool = False


def _discover_tools() -> None:
    """
    Discover and register all tools from nip_checker/tools/.
    This is the ONLY place where tools are collected.
    """
    global _tool_registry, _initialized

    if _initialized:
        return

    tools_package = f"{__package__}.tools"
    tools_path = Path(__file__).parent / "tools"

    if not tools_path.exists():
        logger.warning(f"Tools directory not found: {tools_path}")
        _initialized = True
        return

    for _, module_name, _ in pkgutil.iter_modules([str(tools_path)]):
        if module_name.startswith("_"):
            continue

        try:
            full_module_name = f"{tools_package}.{module_name}"
            module = importlib.import_module(full_module_name)
            logger.debug(f"Loaded tool module: {full_module_name}")

            # Only classes defined in the module itself, not re-exported bases
            for name, obj in inspect.getmembers(module, inspect.isclass):
                if (
                    issubclass(obj, MCPTool)
                    and obj.__module__ == module.__name__
                    and not inspect.isabstract(obj)
                ):
                    try:
                        instance = obj()
                        definition = instance.to_definition()
                        _tool_registry[definition.name] = definition
                        logger.info(f"Registered tool: {definition.name} ({module_name})")
                    except Exception as e:
                        logger.error(f"Failed to instantiate tool {name}: {e}")

        except Exception as e:
            logger.error(f"Failed to load tool module {module_name}: {e}")

    _initialized = True
    logger.info(f"Tool discovery complete. Total tools: {len(_tool_registry)}")


def get_all_tools() -> Dict[str, ToolDefinition]:
    """
    Get all registered tools.
    This is the public API for accessing tools.
    """
    _discover_tools()
    return _tool_registry.copy()


def get_tool(name: str) -> Optional[ToolDefinition]:
    """
    Get a specific tool by name.
    Returns None if tool not found.
    """
    _discover_tools()
    return _tool_registry.get(name)


def list_tool_names() -> List[str]:
    """Get list of all registered tool names."""
    _discover_tools()
    return list(_tool_registry.keys())


def register_tool(tool: MCPTool) -> ToolDefinition:
    """Register (or replace) a tool instance, e.g. one built with a stub client."""
    _discover_tools()
    definition = tool.to_definition()
    _tool_registry[definition.name] = definition
    return definition


async def execute_tool(name: str, /, **kwargs) -> Dict:
    """
    Execute a tool by name with given arguments.
    Returns standardized response format.
    Raises UnknownToolError if no tool is registered under that name.
    """
    tool = get_tool(name)

    if tool is None or tool.handler is None:
        raise UnknownToolError(name)

    return await tool.handler(**kwargs)


def reset_registry() -> None:
    """Reset the registry (mainly for testing)."""
    global _tool_registry, _initialized
    _tool_registry = {}
    _initialized = False
