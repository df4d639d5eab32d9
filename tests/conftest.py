"""
Shared fixtures: a stubbed White List API and a fixed clock.
"""

from datetime import date
from typing import Dict, List

import httpx
import pytest

from nip_checker.config import Settings
from nip_checker.registry import reset_registry
from nip_checker.whitelist import WhiteListClient

FIXED_DATE = date(2024, 3, 15)


class StubRegistry:
    """Records outgoing requests and answers with a canned response."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.payload: Dict = {}
        self.content: bytes = None
        self.error: Exception = None

    def respond(self, payload: Dict = None, status_code: int = 200) -> None:
        self.payload = payload or {}
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_url="https://wl-api.example.test",
        timeout=5.0,
        user_agent="NIP-Checker-Test/1.0",
    )


@pytest.fixture
def stub() -> StubRegistry:
    return StubRegistry()


@pytest.fixture
def client(settings, stub) -> WhiteListClient:
    return WhiteListClient(settings=settings, transport=httpx.MockTransport(stub.handler))


@pytest.fixture
def clock():
    return lambda: FIXED_DATE


@pytest.fixture
def clean_registry():
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def subject_payload() -> Dict:
    return {
        "result": {
            "subject": {
                "name": "PRZYKŁADOWA SPÓŁKA Z O.O.",
                "nip": "5260250274",
                "statusVat": "Czynny",
                "regon": "000002217",
                "pesel": None,
                "krs": "0000012345",
                "residenceAddress": "UL. ŚWIĘTOKRZYSKA 12, 00-916 WARSZAWA",
                "workingAddress": None,
                "registrationLegalDate": "2005-04-01",
                "registrationDenialDate": None,
                "removalDate": None,
                "accountNumbers": [
                    "12345678901234567890123456",
                    "65432109876543210987654321",
                ],
                "hasVirtualAccounts": False,
                "representatives": [],
            },
            "requestId": "d7k1x-8c0a2f1",
            "requestDateTime": "15-03-2024 10:22:41",
        }
    }
