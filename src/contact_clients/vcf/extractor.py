"""Extract contact fields from raw vCard text.

This is a line-oriented field extractor, not a full vCard grammar: it does
not unfold continuation lines or decode quoted-printable values. It never
raises; anything it does not recognize is skipped.

Each record is scanned as a left fold over its lines. Only the first line
of each property is honored, so a record with two ``FN`` lines keeps the
first name.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from functools import reduce

from contact_clients.vcf.models import ExtractedContact, VCardEntry

logger = logging.getLogger(__name__)

RECORD_MARKER = "BEGIN:VCARD"

_LINE_SPLIT = re.compile(r"\r?\n")


@dataclass(frozen=True)
class _Fields:
    # None means "not seen yet"; an empty value still counts as seen.
    name: str | None = None
    structured_name: str | None = None
    phone: str | None = None
    email: str | None = None
    company: str | None = None


def split_records(document: str) -> list[str]:
    """Split a document on BEGIN:VCARD, dropping blank segments.

    Text before the first marker is never a record.
    """
    return [segment for segment in document.split(RECORD_MARKER)[1:] if segment.strip()]


def split_lines(record: str) -> list[str]:
    return _LINE_SPLIT.split(record)


def extract_contacts(document: str) -> list[ExtractedContact]:
    """Return one ExtractedContact per vCard record, in source order."""
    contacts = []
    for record in split_records(document):
        fields = _scan(record)
        contacts.append(ExtractedContact(name=fields.name or "", phone=fields.phone or ""))
    return contacts


def extract_entries(document: str) -> list[VCardEntry]:
    """Like extract_contacts, plus EMAIL and ORG, with N as a name fallback."""
    entries = []
    for index, record in enumerate(split_records(document), start=1):
        fields = _scan(record)
        name = fields.name or fields.structured_name
        entries.append(
            VCardEntry(
                source_record_id=f"vcf_{index}",
                name=name or "",
                phone=fields.phone or "",
                email=fields.email or "",
                company=fields.company or "",
            )
        )
    return entries


def parse_vcf_content(document: str) -> list[VCardEntry]:
    """Extract entries and keep only those with a name or a phone."""
    entries = extract_entries(document)
    usable = [entry for entry in entries if entry.is_usable]
    skipped = len(entries) - len(usable)
    if skipped:
        logger.warning("Skipped %d vCard records with no name or phone", skipped)
    logger.debug("Parsed %d usable contacts from %d vCard records", len(usable), len(entries))
    return usable


def _scan(record: str) -> _Fields:
    return reduce(_fold_line, split_lines(record), _Fields())


def _fold_line(fields: _Fields, line: str) -> _Fields:
    line = line.strip()

    if line.startswith("FN:"):
        if fields.name is None:
            return replace(fields, name=line[3:])
    elif line.startswith(("TEL:", "TEL;")):
        if fields.phone is None and ":" in line:
            return replace(fields, phone=_value_after_last_colon(line))
    elif line.startswith(("EMAIL:", "EMAIL;")):
        if fields.email is None and ":" in line:
            return replace(fields, email=_value_after_last_colon(line))
    elif line.startswith("ORG:"):
        if fields.company is None:
            return replace(fields, company=_join_components(line[4:]))
    elif line.startswith("N:"):
        if fields.structured_name is None:
            return replace(fields, structured_name=_join_components(line[2:]))

    return fields


def _value_after_last_colon(line: str) -> str:
    # Parameter lists may contain colons; the value follows the last one.
    return line[line.rfind(":") + 1:].strip()


def _join_components(value: str) -> str:
    return " ".join(part.strip() for part in value.split(";") if part.strip())
