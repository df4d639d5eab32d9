"""
Bank Account Assignment Tool

Verifies whether a bank account is on the White List for a given NIP.
"""

import logging
from typing import List, Optional

from ..base import ToolParameter
from ..formatters import format_bank_assignment
from ..validators import resolve_date, validate_bank_account, validate_nip
from ._shared import RegistryTool, date_parameter, nip_parameter

logger = logging.getLogger(__name__)


class CheckNipBankAccountTool(RegistryTool):
    """Verify that a bank account is assigned to a NIP on the White List."""

    @property
    def name(self) -> str:
        return "check_nip_bank_account"

    @property
    def description(self) -> str:
        return "Verify if a bank account is assigned to a specific NIP"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            nip_parameter("Polish NIP number (10 digits)"),
            ToolParameter(
                name="bankAccount",
                type="string",
                description="Bank account number (26 digits)",
                required=True,
                pattern="^[0-9]{26}$"
            ),
            date_parameter("Date for verification (YYYY-MM-DD format, optional)"),
        ]

    @property
    def error_prefix(self) -> str:
        return "Error checking NIP-Bank account"

    async def execute(
        self,
        nip: str,
        bankAccount: str,
        date: Optional[str] = None,
        **kwargs
    ) -> str:
        # NIP is checked before the account number
        normalized = validate_nip(nip, tool_name=self.name)
        bank_account = validate_bank_account(bankAccount, tool_name=self.name)
        query_date = resolve_date(date, self.clock, tool_name=self.name)

        result = await self.client.check_bank_account(normalized, bank_account, query_date)
        logger.info(
            f"Account check for NIP {normalized}: {result.account_assigned} "
            f"(request {result.request_id})"
        )

        return format_bank_assignment(normalized, bank_account, query_date, result)
