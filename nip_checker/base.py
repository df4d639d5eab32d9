"""
MCP Tool Base Classes

Provides common wrapper, validation, and error handling for all registry tools.
Every failure raised inside a tool is converted into a failure report at
MCPTool.run(); only UnknownToolError is allowed to escape dispatch.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ToolParameter:
    """Definition of a tool parameter."""
    name: str
    type: str
    description: str
    required: bool = True
    default: Any = None
    pattern: Optional[str] = None


@dataclass
class ToolDefinition:
    """Complete definition of an MCP tool."""
    name: str
    description: str
    parameters: List[ToolParameter] = field(default_factory=list)
    handler: Optional[Callable] = None
    category: str = "general"

    def input_schema(self) -> Dict[str, Any]:
        """JSON schema describing the tool's argument object."""
        properties: Dict[str, Dict[str, Any]] = {}
        required: List[str] = []

        for param in self.parameters:
            prop: Dict[str, Any] = {
                "type": param.type,
                "description": param.description,
            }
            if param.pattern:
                prop["pattern"] = param.pattern
            properties[param.name] = prop

            if param.required:
                required.append(param.name)

        return {
            "type": "object",
            "properties": properties,
            "required": required,
        }


class MCPToolError(Exception):
    """Base exception for MCP tool errors."""
    def __init__(self, message: str, tool_name: str = None, details: Dict = None):
        self.message = message
        self.tool_name = tool_name
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(MCPToolError):
    """Raised when tool input validation fails."""
    pass


class ExecutionError(MCPToolError):
    """Raised when tool execution fails."""
    pass


class RemoteError(ExecutionError):
    """The registry answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str, tool_name: str = None):
        self.status_code = status_code
        self.reason = reason
        super().__init__(
            f"API request failed: {status_code} {reason}".rstrip(),
            tool_name=tool_name,
            details={"status_code": status_code, "reason": reason},
        )


class TransportError(ExecutionError):
    """The registry call did not complete or returned an unreadable body."""
    pass


class UnknownToolError(MCPToolError):
    """Raised by dispatch when no tool is registered under the given name."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}", tool_name=tool_name)


# Most specific first; anything not listed is reported as "unexpected".
ERROR_TYPES = (
    (ValidationError, "validation"),
    (RemoteError, "remote"),
    (TransportError, "transport"),
    (ExecutionError, "execution"),
)


def error_type_for(exc: Exception) -> str:
    for exc_class, error_type in ERROR_TYPES:
        if isinstance(exc, exc_class):
            return error_type
    return "unexpected"


class MCPTool(ABC):
    """
    Abstract base class for MCP tools.

    All tools must inherit from this class and implement:
    - name: Tool identifier
    - description: What the tool does
    - parameters: List of ToolParameter definitions
    - execute(): The actual tool logic, returning the text report
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for the tool."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        pass

    @property
    def parameters(self) -> List[ToolParameter]:
        """List of parameters the tool accepts."""
        return []

    @property
    def category(self) -> str:
        """Category for grouping tools."""
        return "general"

    @property
    def error_prefix(self) -> str:
        """Lead-in for the failure report, e.g. 'Error checking NIP'."""
        return f"Error in {self.name}"

    def validate(self, /, **kwargs) -> Dict[str, Any]:
        """
        Validate input parameters.
        Returns validated/normalized parameters; unknown arguments are dropped.
        Raises ValidationError if validation fails.
        """
        validated = {}

        for param in self.parameters:
            value = kwargs.get(param.name)

            if value is None:
                if param.required:
                    raise ValidationError(
                        f"Missing required parameter: {param.name}",
                        tool_name=self.name
                    )
                value = param.default

            validated[param.name] = value

        return validated

    @abstractmethod
    async def execute(self, **kwargs) -> str:
        """
        Execute the tool with given parameters.
        This method should contain the actual tool logic.
        """
        pass

    def format_error(self, message: str) -> str:
        return f"❌ {self.error_prefix}: {message}"

    async def run(self, /, **kwargs) -> Dict[str, Any]:
        """
        Public entry point: validate and execute.
        Returns standardized response format.
        """
        try:
            validated = self.validate(**kwargs)
            result = await self.execute(**validated)
            return {
                "success": True,
                "tool": self.name,
                "result": result
            }
        except MCPToolError as e:
            error_type = error_type_for(e)
            logger.warning(f"{error_type.capitalize()} error in {self.name}: {e.message}")
            return {
                "success": False,
                "tool": self.name,
                "error": self.format_error(e.message),
                "error_type": error_type
            }
        except Exception as e:
            logger.exception(f"Unexpected error in {self.name}")
            return {
                "success": False,
                "tool": self.name,
                "error": self.format_error(str(e) or "Unknown error"),
                "error_type": "unexpected"
            }

    def to_definition(self) -> ToolDefinition:
        """Convert tool to ToolDefinition for registry."""
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
            handler=self.run,
            category=self.category
        )
