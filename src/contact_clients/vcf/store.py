"""Directory-backed store for uploaded vCard files."""

from __future__ import annotations

import logging
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path

import dateutil.parser as parser

from contact_clients.exceptions import (
    VcfFileNotFoundError,
    VcfProcessingError,
    VcfUploadError,
)
from contact_clients.vcf.extractor import parse_vcf_content
from contact_clients.vcf.models import VCardEntry, VcfFile, VcfFileStatus

logger = logging.getLogger(__name__)

VCF_EXTENSIONS = (".vcf", ".vcard")


class VcfFileStore:
    """Keep uploaded vCard files on disk and track their processing status.

    The index lives in memory. Files already in the directory when the
    store is created are indexed as pending under fresh IDs.

    Args:
        upload_dir: Directory holding the files. Defaults to $VCF_UPLOAD_DIR
            or ./uploads/vcf.
    """

    def __init__(self, upload_dir: str | Path | None = None) -> None:
        self.upload_dir = Path(
            upload_dir or os.environ.get("VCF_UPLOAD_DIR") or Path.cwd() / "uploads" / "vcf"
        )
        self._files: dict[str, VcfFile] = {}
        self._ensure_upload_dir()
        self._load_existing_files()

    def _ensure_upload_dir(self) -> None:
        if not self.upload_dir.exists():
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            logger.info("Created vCard upload directory: %s", self.upload_dir)

    def _load_existing_files(self) -> None:
        for path in sorted(self.upload_dir.iterdir()):
            if not path.is_file() or not path.name.endswith(VCF_EXTENSIONS):
                continue
            stats = path.stat()
            vcf_file = VcfFile(
                id=str(uuid.uuid4()),
                filename=path.name,
                size=stats.st_size,
                uploaded_at=datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc).isoformat(),
                file_path=str(path),
            )
            self._files[vcf_file.id] = vcf_file
        logger.info("Loaded %d existing vCard files", len(self._files))

    def upload_file(self, filename: str, data: bytes | None) -> VcfFile:
        """Write an uploaded vCard file to disk and index it as pending."""
        if not data:
            raise VcfUploadError("No file provided")
        if not filename or not filename.endswith(VCF_EXTENSIONS):
            raise VcfUploadError("Only .vcf and .vcard files are allowed")

        file_id = str(uuid.uuid4())
        path = self.upload_dir / f"{file_id}_{Path(filename).name}"
        try:
            path.write_bytes(data)
        except OSError as e:
            raise VcfUploadError(f"Failed to save {filename}: {e}") from e

        vcf_file = VcfFile(
            id=file_id,
            filename=filename,
            size=len(data),
            uploaded_at=datetime.now(timezone.utc).isoformat(),
            file_path=str(path),
        )
        self._files[file_id] = vcf_file
        logger.info("vCard file uploaded: %s (%d bytes)", filename, len(data))
        return vcf_file

    def list_files(self) -> list[VcfFile]:
        return list(self._files.values())

    def get_file(self, file_id: str) -> VcfFile:
        vcf_file = self._files.get(file_id)
        if vcf_file is None:
            raise VcfFileNotFoundError(f"vCard file with ID {file_id} not found")
        return vcf_file

    def process_file(self, file_id: str) -> list[VCardEntry]:
        """Parse a stored file and record how many contacts it holds.

        On failure the file is marked failed with the error message and the
        error is re-raised.
        """
        vcf_file = self.get_file(file_id)
        if vcf_file.status == VcfFileStatus.PROCESSING:
            raise VcfProcessingError("File is already being processed")

        vcf_file.status = VcfFileStatus.PROCESSING
        logger.info("Processing vCard file: %s", vcf_file.filename)

        try:
            try:
                content = Path(vcf_file.file_path).read_bytes().decode("utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise VcfProcessingError(f"Cannot read {vcf_file.filename}: {e}") from e
            entries = parse_vcf_content(content)
        except Exception as e:
            vcf_file.status = VcfFileStatus.FAILED
            vcf_file.error_message = str(e)
            logger.error("Error processing vCard file %s: %s", vcf_file.filename, e)
            raise

        vcf_file.contact_count = len(entries)
        vcf_file.status = VcfFileStatus.COMPLETED
        vcf_file.error_message = None
        logger.info("vCard file processed: %d contacts extracted", len(entries))
        return entries

    def delete_file(self, file_id: str) -> None:
        vcf_file = self.get_file(file_id)
        try:
            Path(vcf_file.file_path).unlink(missing_ok=True)
        except OSError as e:
            raise VcfProcessingError(f"Failed to delete {vcf_file.filename}: {e}") from e
        del self._files[file_id]
        logger.info("vCard file deleted: %s", vcf_file.filename)

    def get_file_status(self, file_id: str) -> dict:
        vcf_file = self.get_file(file_id)
        return {
            "status": vcf_file.status.value,
            "contact_count": vcf_file.contact_count,
            "error_message": vcf_file.error_message,
        }

    def get_latest_file(self) -> VcfFile | None:
        """Most recently uploaded file that finished processing."""
        completed = [f for f in self._files.values() if f.status == VcfFileStatus.COMPLETED]
        if not completed:
            return None
        return max(completed, key=lambda f: parser.isoparse(f.uploaded_at))
