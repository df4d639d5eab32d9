"""
Response models for the VAT taxpayer registry (White List) API.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VatStatus(str, Enum):
    ACTIVE = "Czynny"
    EXEMPT = "Zwolniony"
    UNREGISTERED = "Niezarejestrowany"


VAT_STATUS_LABELS = {
    VatStatus.ACTIVE.value: "Active",
    VatStatus.EXEMPT.value: "Exempt",
    VatStatus.UNREGISTERED.value: "Unregistered",
}

ACCOUNT_ASSIGNED = "TAK"


class RegistryModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Subject(RegistryModel):
    """Taxpayer entry as returned by /api/search/nip."""

    name: str
    nip: str
    # Kept as plain text: unknown statuses are rendered as-is
    status_vat: str = Field(..., alias="statusVat")
    regon: Optional[str] = None
    pesel: Optional[str] = None
    krs: Optional[str] = None
    residence_address: Optional[str] = Field(None, alias="residenceAddress")
    working_address: Optional[str] = Field(None, alias="workingAddress")
    registration_legal_date: Optional[str] = Field(None, alias="registrationLegalDate")
    registration_denial_date: Optional[str] = Field(None, alias="registrationDenialDate")
    removal_date: Optional[str] = Field(None, alias="removalDate")
    account_numbers: Optional[List[str]] = Field(None, alias="accountNumbers")
    has_virtual_accounts: Optional[bool] = Field(None, alias="hasVirtualAccounts")


class LookupResult(RegistryModel):
    subject: Optional[Subject] = None
    request_id: str = Field(..., alias="requestId")
    request_date_time: str = Field(..., alias="requestDateTime")


class BankAssignmentResult(RegistryModel):
    account_assigned: str = Field(..., alias="accountAssigned")
    request_id: str = Field(..., alias="requestId")
    request_date_time: str = Field(..., alias="requestDateTime")

    @property
    def is_assigned(self) -> bool:
        return self.account_assigned == ACCOUNT_ASSIGNED


class LookupResponse(RegistryModel):
    result: LookupResult


class BankAssignmentResponse(RegistryModel):
    result: BankAssignmentResult
