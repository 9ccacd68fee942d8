"""Contact records, phone/email lookup and mobile vCard ingestion."""

from contact_clients.contacts.lookup import (
    Contact,
    build_lookup,
    contacts_from_entries,
    normalize_email,
    normalize_phone,
)
from contact_clients.contacts.mobile import MobileContactsSource

__all__ = [
    "Contact",
    "build_lookup",
    "contacts_from_entries",
    "normalize_phone",
    "normalize_email",
    "MobileContactsSource",
]
