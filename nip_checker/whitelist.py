"""
White List API Client

Async client for the Ministry of Finance VAT taxpayer registry
(https://wl-api.mf.gov.pl). Each call opens its own httpx.AsyncClient and
issues exactly one GET; nothing is cached or retried.
"""

import logging
from typing import Any, Dict, Optional

import httpx
import pydantic

from .base import RemoteError, TransportError
from .config import Settings, get_settings
from .models import (
    BankAssignmentResponse,
    BankAssignmentResult,
    LookupResponse,
    LookupResult,
)

logger = logging.getLogger(__name__)

# Path templates relative to the configured API base URL
ENDPOINTS = {
    "search_nip": "/api/search/nip/{nip}",
    "check_bank_account": "/api/check/nip/{nip}/bank-account/{bank_account}",
}


class WhiteListClient:
    """Thin wrapper over the two registry endpoints used by the tools."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = settings or get_settings()
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": self.settings.user_agent,
        }

    def build_url(self, endpoint: str, **path_params: str) -> str:
        return self.settings.api_url + ENDPOINTS[endpoint].format(**path_params)

    async def _get(self, endpoint: str, date: str, **path_params: str) -> Any:
        url = self.build_url(endpoint, **path_params)
        logger.debug(f"GET {url} date={date}")

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout,
                transport=self._transport
            ) as client:
                response = await client.get(url, params={"date": date}, headers=self.headers)
        except httpx.TimeoutException:
            raise TransportError(
                f"Registry request timed out after {self.settings.timeout:g}s"
            )
        except httpx.RequestError as e:
            raise TransportError(f"Registry request failed: {e}")

        if not response.is_success:
            logger.warning(f"Registry returned HTTP {response.status_code} for {url}")
            raise RemoteError(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError:
            raise TransportError("Registry returned a response that is not valid JSON")

    async def search_nip(self, nip: str, date: str) -> LookupResult:
        """Look up a taxpayer by NIP as of the given date."""
        data = await self._get("search_nip", date, nip=nip)
        try:
            return LookupResponse.model_validate(data).result
        except pydantic.ValidationError as e:
            raise TransportError(f"Unexpected registry response: {e.error_count()} invalid field(s)")

    async def check_bank_account(self, nip: str, bank_account: str, date: str) -> BankAssignmentResult:
        """Check whether a bank account was assigned to the NIP on the given date."""
        data = await self._get("check_bank_account", date, nip=nip, bank_account=bank_account)
        try:
            return BankAssignmentResponse.model_validate(data).result
        except pydantic.ValidationError as e:
            raise TransportError(f"Unexpected registry response: {e.error_count()} invalid field(s)")
