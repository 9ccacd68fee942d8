"""vCard (.vcf) contact extraction and file storage."""

from contact_clients.vcf.extractor import (
    extract_contacts,
    extract_entries,
    parse_vcf_content,
    split_lines,
    split_records,
)
from contact_clients.vcf.models import ExtractedContact, VCardEntry, VcfFile, VcfFileStatus
from contact_clients.vcf.store import VcfFileStore

__all__ = [
    "extract_contacts",
    "extract_entries",
    "parse_vcf_content",
    "split_lines",
    "split_records",
    "ExtractedContact",
    "VCardEntry",
    "VcfFile",
    "VcfFileStatus",
    "VcfFileStore",
]
