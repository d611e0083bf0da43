# leads.py

import math
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

from config import BOOKING_BASE_URL, BOOKING_SOURCE, PERSONAL_EMAIL_DOMAINS

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Lead:
    full_name: str
    email: str
    company: str
    designation: str
    company_size: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            full_name=(data.get("full_name") or "").strip(),
            email=(data.get("email") or "").strip(),
            company=(data.get("company") or "").strip(),
            designation=(data.get("designation") or "").strip(),
            company_size=data.get("company_size") or None,
        )


def validate_email(email):
    """
    Check that `email` looks like an address and is not on a personal-mail domain.

    :param email: address typed by the lead
    :return: True for a usable work email
    """
    email = (email or "").strip()
    if not EMAIL_RE.match(email):
        return False
    domain = email.rsplit("@", 1)[1].lower()
    return domain not in PERSONAL_EMAIL_DOMAINS


def validate_lead(lead, require_company_size=True):
    """
    Return a mapping of field name -> error message. Empty means valid.
    """
    errors = {}
    if not lead.full_name.strip():
        errors["full_name"] = "Full name is required"
    if not lead.email.strip():
        errors["email"] = "Email is required"
    elif not validate_email(lead.email):
        errors["email"] = "Please use your work email"
    if not lead.company.strip():
        errors["company"] = "Company name is required"
    if require_company_size and not lead.company_size:
        errors["company_size"] = "Company size is required"
    if not lead.designation.strip():
        errors["designation"] = "Designation is required"
    return errors


def booking_url(lead, score):
    params = {
        "name": lead.full_name,
        "email": lead.email,
        "company": lead.company,
        "source": BOOKING_SOURCE,
        "score": str(score),
    }
    if lead.company_size:
        params["company_size"] = lead.company_size
    return f"{BOOKING_BASE_URL}?{urlencode(params)}"


def report_filename(company):
    """Suggested download name: whitespace runs in the company name become underscores."""
    name = re.sub(r"\s+", "_", (company or "").strip()) or "Company"
    return f"{name}_Audit_Debt_Report.pdf"


def progress(current_section_index, total_sections):
    """Percentage of the questionnaire completed before the given section."""
    if total_sections <= 0:
        return 0
    return int(math.floor(current_section_index / total_sections * 100 + 0.5))
