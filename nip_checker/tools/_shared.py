"""
Shared plumbing for tools backed by the White List API.
"""

from datetime import date
from typing import Callable, Optional

from ..base import MCPTool, ToolParameter
from ..config import utc_today
from ..whitelist import WhiteListClient

NIP_PARAMETER_PATTERN = "^[0-9-]{10,13}$"
DATE_PARAMETER_PATTERN = "^[0-9]{4}-[0-9]{2}-[0-9]{2}$"


class RegistryTool(MCPTool):
    """Base for registry tools; the client and clock are injectable for tests."""

    def __init__(
        self,
        client: Optional[WhiteListClient] = None,
        clock: Callable[[], date] = utc_today
    ):
        self.client = client or WhiteListClient()
        self.clock = clock

    @property
    def category(self) -> str:
        return "vat_registry"


def nip_parameter(description: str) -> ToolParameter:
    return ToolParameter(
        name="nip",
        type="string",
        description=description,
        required=True,
        pattern=NIP_PARAMETER_PATTERN
    )


def date_parameter(description: str) -> ToolParameter:
    return ToolParameter(
        name="date",
        type="string",
        description=description,
        required=False,
        default=None,
        pattern=DATE_PARAMETER_PATTERN
    )
