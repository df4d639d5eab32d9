"""
Text report formatting for registry results.
"""

from .models import VAT_STATUS_LABELS, BankAssignmentResult, LookupResult, Subject


def format_vat_status(status: str) -> str:
    """'Czynny' -> 'Czynny (Active)'; unknown statuses label themselves."""
    return f"{status} ({VAT_STATUS_LABELS.get(status, status)})"


def format_not_found(nip: str, result: LookupResult) -> str:
    return (
        f"❌ NIP {nip} not found in VAT registry\n\n"
        f"Request ID: {result.request_id}\n"
        f"Date: {result.request_date_time}"
    )


def format_subject(subject: Subject, result: LookupResult) -> str:
    bank_accounts = ", ".join(subject.account_numbers or []) or "None registered"

    lines = [
        "✅ NIP Verification Results",
        "",
        f"**NIP**: {subject.nip}",
        f"**Company**: {subject.name}",
        f"**VAT Status**: {format_vat_status(subject.status_vat)}",
        f"**Address**: {subject.residence_address or 'Not provided'}",
        f"**Working Address**: {subject.working_address or 'Same as residence'}",
        f"**Registration Date**: {subject.registration_legal_date or 'Not available'}",
        f"**Bank Accounts**: {bank_accounts}",
        f"**REGON**: {subject.regon or 'Not provided'}",
        f"**KRS**: {subject.krs or 'Not provided'}",
        f"**Virtual Accounts**: {'Yes' if subject.has_virtual_accounts else 'No'}",
        "",
        "**Request Details**:",
        f"- Request ID: {result.request_id}",
        f"- Query Date: {result.request_date_time}",
    ]
    return "\n".join(lines)


def format_lookup(nip: str, result: LookupResult) -> str:
    """Render a NIP lookup; a missing subject is a 'not found' report."""
    if result.subject is None:
        return format_not_found(nip, result)
    return format_subject(result.subject, result)


def format_bank_assignment(
    nip: str,
    bank_account: str,
    date: str,
    result: BankAssignmentResult
) -> str:
    if result.is_assigned:
        status = "✅ VERIFIED"
        meaning = "Account is assigned to this NIP"
    else:
        status = "❌ NOT VERIFIED"
        meaning = "Account is NOT assigned to this NIP"

    lines = [
        f"{status} Bank Account Assignment",
        "",
        f"**NIP**: {nip}",
        f"**Bank Account**: {bank_account}",
        f"**Assignment Status**: {result.account_assigned} ({meaning})",
        f"**Verification Date**: {date}",
        "",
        "**Request Details**:",
        f"- Request ID: {result.request_id}",
        f"- Query Time: {result.request_date_time}",
    ]
    return "\n".join(lines)
