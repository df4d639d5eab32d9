"""
HTTP API Server

FastAPI surface over the same tool registry used by the stdio MCP server.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from . import __version__
from .base import UnknownToolError
from .registry import execute_tool, get_all_tools, get_tool, list_tool_names

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    tools = get_all_tools()
    logger.info(f"HTTP API starting with {len(tools)} tools")
    for name in tools:
        logger.info(f"  - {name}")

    yield

    logger.info("HTTP API shutting down")


app = FastAPI(
    title="NIP Checker",
    description="VAT taxpayer registry (White List) lookup tools",
    version=__version__,
    lifespan=lifespan,
)


class ToolRequest(BaseModel):
    """Request body for tool execution."""

    arguments: Dict[str, Any] = {}


class ToolResponse(BaseModel):
    """Response from tool execution."""

    success: bool
    tool: str
    result: Any = None
    error: str = None
    error_type: str = None


def _describe_parameters(definition):
    return [
        {
            "name": p.name,
            "type": p.type,
            "description": p.description,
            "required": p.required,
            "pattern": p.pattern,
        }
        for p in definition.parameters
    ]


# ============== API Endpoints ==============


@app.get("/")
async def root():
    return {
        "service": "NIP Checker",
        "version": __version__,
        "tools_count": len(list_tool_names()),
        "endpoints": {
            "list_tools": "/tools",
            "tool_info": "/tools/{tool_name}",
            "execute": "/tools/{tool_name}/execute",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    return {"status": "healthy", "tools_loaded": len(list_tool_names())}


@app.get("/tools")
async def list_tools():
    tools = get_all_tools()
    return {
        "total": len(tools),
        "tools": [
            {
                "name": name,
                "description": tool.description,
                "category": tool.category,
                "parameters": _describe_parameters(tool),
            }
            for name, tool in tools.items()
        ],
    }


@app.get("/tools/{tool_name}")
async def get_tool_info(tool_name: str):
    tool = get_tool(tool_name)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_name}")

    return {
        "name": tool.name,
        "description": tool.description,
        "category": tool.category,
        "parameters": _describe_parameters(tool),
        "input_schema": tool.input_schema(),
    }


@app.post("/tools/{tool_name}/execute", response_model=ToolResponse)
async def execute_tool_endpoint(tool_name: str, request: ToolRequest):
    try:
        result = await execute_tool(tool_name, **request.arguments)
    except UnknownToolError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return ToolResponse(**result)
