"""Contact records built from vCard entries, indexed by phone and email."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from contact_clients.vcf.models import VCardEntry

logger = logging.getLogger(__name__)


@dataclass
class Contact:
    """A contact record resolved from a vCard export."""

    identifier: str
    full_name: str | None = None
    organization: str | None = None
    phone_numbers: list[str] = field(default_factory=list)
    email_addresses: list[str] = field(default_factory=list)
    source: str = "vcf"


def normalize_phone(raw: str) -> str:
    """Reduce a TEL value to its last 10 digits for matching."""
    digits = re.sub(r"\D", "", raw)
    # Strip leading country code (1 for US/CA)
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]
    return digits[-10:] if len(digits) >= 10 else digits


def normalize_email(raw: str) -> str:
    """Lowercase and trim an EMAIL value for matching."""
    return raw.strip().lower()


def contacts_from_entries(entries: list[VCardEntry], source: str = "vcf") -> list[Contact]:
    """Convert extracted vCard entries into Contact records."""
    return [
        Contact(
            identifier=entry.source_record_id,
            full_name=entry.name or None,
            organization=entry.company or None,
            phone_numbers=[entry.phone] if entry.phone else [],
            email_addresses=[entry.email] if entry.email else [],
            source=source,
        )
        for entry in entries
    ]


def build_lookup(contacts: list[Contact]) -> dict[str, Contact]:
    """Index contacts by normalized phone and email.

    When two vCard records share a phone number or address, the later
    record in the export owns the key.
    """
    lookup: dict[str, Contact] = {}
    for contact in contacts:
        keys = [normalize_phone(p) for p in contact.phone_numbers]
        keys += [normalize_email(e) for e in contact.email_addresses]
        lookup.update((key, contact) for key in keys if key)
    logger.debug("Built contact lookup with %d keys", len(lookup))
    return lookup
