"""
NIP Lookup Tool

Looks up a taxpayer in the VAT registry by NIP.
"""

import logging
from typing import List, Optional

from ..base import ToolParameter
from ..formatters import format_lookup
from ..validators import resolve_date, validate_nip
from ._shared import RegistryTool, date_parameter, nip_parameter

logger = logging.getLogger(__name__)


class CheckNipTool(RegistryTool):
    """Check a Polish NIP in the Ministry of Finance VAT taxpayer database."""

    @property
    def name(self) -> str:
        return "check_nip"

    @property
    def description(self) -> str:
        return (
            "Check Polish NIP (Tax Identification Number) in the Ministry of "
            "Finance VAT taxpayer database"
        )

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            nip_parameter("Polish NIP number (10 digits, hyphens optional)"),
            date_parameter(
                "Date for verification (YYYY-MM-DD format, optional - defaults to today)"
            ),
        ]

    @property
    def error_prefix(self) -> str:
        return "Error checking NIP"

    async def execute(self, nip: str, date: Optional[str] = None, **kwargs) -> str:
        normalized = validate_nip(nip, tool_name=self.name)
        query_date = resolve_date(date, self.clock, tool_name=self.name)

        result = await self.client.search_nip(normalized, query_date)
        if result.subject is None:
            logger.info(f"NIP {normalized} not found (request {result.request_id})")

        return format_lookup(normalized, result)
