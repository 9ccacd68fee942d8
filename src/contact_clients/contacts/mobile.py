"""Mobile contacts ingested from a phone's vCard export."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from contact_clients.contacts.lookup import Contact, contacts_from_entries
from contact_clients.exceptions import ContactResolutionError
from contact_clients.vcf.extractor import parse_vcf_content

logger = logging.getLogger(__name__)

SOURCE_SYSTEM = "MOBILE"


class MobileContactsSource:
    """Read contacts from a mobile vCard export and shape them for staging.

    Args:
        vcf_path: Path to the export. Defaults to $MOBILE_VCF_PATH or
            ./samples/mobile_contact.vcf.
        data_owner_name: Owner label written on every staging row.
    """

    def __init__(
        self,
        vcf_path: str | Path | None = None,
        data_owner_name: str = "Mobile Contacts",
    ) -> None:
        self.vcf_path = Path(
            vcf_path or os.environ.get("MOBILE_VCF_PATH") or Path.cwd() / "samples" / "mobile_contact.vcf"
        )
        self.data_owner_name = data_owner_name

    def fetch_contacts(self) -> list[Contact]:
        """Parse the export; returns [] when the file does not exist."""
        if not self.vcf_path.exists():
            logger.warning("Mobile vCard export not found at %s", self.vcf_path)
            return []

        try:
            content = self.vcf_path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContactResolutionError(f"Failed to read {self.vcf_path}: {e}") from e

        contacts = contacts_from_entries(parse_vcf_content(content), source="mobile")
        logger.info(f"Read {len(contacts)} contacts from {self.vcf_path}")
        return contacts

    def transform_to_staging(
        self,
        contacts: list[Contact],
        relationship_type: str = "OTHER",
    ) -> list[dict]:
        """Flatten contacts into raw staging rows for ingestion."""
        return [
            {
                "raw_name": contact.full_name or "",
                "raw_email": contact.email_addresses[0] if contact.email_addresses else "",
                "raw_phone": contact.phone_numbers[0] if contact.phone_numbers else "",
                "raw_company": contact.organization or "",
                "relationship_type": relationship_type,
                "data_owner_name": self.data_owner_name,
                "source_system": SOURCE_SYSTEM,
                "source_record_id": contact.identifier,
            }
            for contact in contacts
        ]
