"""Data models for the vCard module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ExtractedContact:
    """Display name and phone pulled from one vCard record."""

    name: str = ""
    phone: str = ""


@dataclass(frozen=True)
class VCardEntry:
    """A vCard record with the fields the ingestion path cares about."""

    source_record_id: str  # "vcf_{n}", 1-based position in the document
    name: str = ""
    phone: str = ""
    email: str = ""
    company: str = ""

    @property
    def is_usable(self) -> bool:
        return bool(self.name or self.phone)


class VcfFileStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class VcfFile:
    """An uploaded vCard file tracked by VcfFileStore."""

    id: str
    filename: str
    size: int
    uploaded_at: str  # ISO 8601
    file_path: str
    contact_count: int = 0
    status: VcfFileStatus = VcfFileStatus.PENDING
    error_message: str | None = None
