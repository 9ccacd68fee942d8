"""Unified exception hierarchy for contact-clients."""


class ContactClientError(Exception):
    """Base exception for all contact-client errors."""


# vCard files
class VcfError(ContactClientError):
    """Base exception for vCard file operations."""


class VcfUploadError(VcfError):
    """Rejected vCard upload (missing data or wrong extension)."""


class VcfFileNotFoundError(VcfError):
    """No stored vCard file with the requested ID."""


class VcfProcessingError(VcfError):
    """Failed to read or process a stored vCard file."""


# Contacts
class ContactsError(ContactClientError):
    """Base exception for contacts operations."""


class ContactResolutionError(ContactsError):
    """Failed to resolve or look up a contact."""
