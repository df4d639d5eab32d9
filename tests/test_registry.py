"""
Tests for tool discovery, dispatch and the error taxonomy.
"""

import pytest

from nip_checker.base import (
    ExecutionError,
    MCPTool,
    RemoteError,
    TransportError,
    UnknownToolError,
    ValidationError,
    error_type_for,
)
from nip_checker.registry import (
    execute_tool,
    get_all_tools,
    get_tool,
    list_tool_names,
    register_tool,
)
from nip_checker.tools.check_nip import CheckNipTool


class ExplodingTool(MCPTool):

    @property
    def name(self) -> str:
        return "explode"

    @property
    def description(self) -> str:
        return "Always fails"

    async def execute(self, **kwargs) -> str:
        raise RuntimeError("kaboom")


def test_discovers_both_registry_tools(clean_registry):
    assert sorted(list_tool_names()) == ["check_nip", "check_nip_bank_account"]
    assert get_tool("check_nip").category == "vat_registry"


def test_input_schema_carries_patterns(clean_registry):
    schema = get_all_tools()["check_nip_bank_account"].input_schema()

    assert schema["type"] == "object"
    assert schema["required"] == ["nip", "bankAccount"]
    assert schema["properties"]["nip"]["pattern"] == "^[0-9-]{10,13}$"
    assert schema["properties"]["bankAccount"]["pattern"] == "^[0-9]{26}$"
    assert schema["properties"]["date"]["pattern"] == "^[0-9]{4}-[0-9]{2}-[0-9]{2}$"


@pytest.mark.asyncio
async def test_unknown_tool_raises(clean_registry):
    with pytest.raises(UnknownToolError) as exc_info:
        await execute_tool("check_regon", regon="123456789")

    assert exc_info.value.message == "Unknown tool: check_regon"


@pytest.mark.asyncio
async def test_dispatch_uses_registered_instance(clean_registry, client, clock, stub):
    register_tool(CheckNipTool(client=client, clock=clock))

    result = await execute_tool("check_nip", nip="12")

    assert result["tool"] == "check_nip"
    assert result["error_type"] == "validation"
    assert stub.requests == []


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_report(clean_registry):
    register_tool(ExplodingTool())

    result = await execute_tool("explode")

    assert result == {
        "success": False,
        "tool": "explode",
        "error": "❌ Error in explode: kaboom",
        "error_type": "unexpected",
    }


@pytest.mark.parametrize(
    "exc, expected",
    [
        (ValidationError("bad"), "validation"),
        (RemoteError(503, "Service Unavailable"), "remote"),
        (TransportError("dns"), "transport"),
        (ExecutionError("other"), "execution"),
        (KeyError("x"), "unexpected"),
    ],
)
def test_error_type_mapping(exc, expected):
    assert error_type_for(exc) == expected


def test_remote_error_message():
    error = RemoteError(404, "Not Found")

    assert error.message == "API request failed: 404 Not Found"
    assert error.details == {"status_code": 404, "reason": "Not Found"}


@pytest.mark.asyncio
async def test_arguments_named_like_dispatch_parameters(clean_registry, client, clock, stub):
    register_tool(CheckNipTool(client=client, clock=clock))

    result = await execute_tool("check_nip", nip="12", name="ACME", self="x")

    assert result["error_type"] == "validation"
    assert result["error"] == "❌ Error checking NIP: NIP must be exactly 10 digits"
    assert stub.requests == []
