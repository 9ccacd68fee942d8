"""Tests for mobile vCard ingestion."""

from pathlib import Path
from unittest.mock import patch

import pytest

from contact_clients.contacts.mobile import MobileContactsSource
from contact_clients.exceptions import ContactResolutionError

EXPORT = (
    "BEGIN:VCARD\nVERSION:3.0\nN:Bale;Pranav;;;;\nFN:Pranav Bale\n"
    "TEL;TYPE=CELL;TYPE=PREF:+917499175557\nEND:VCARD\n"
    "BEGIN:VCARD\nVERSION:3.0\nEMAIL:nobody@example.com\nEND:VCARD\n"
)


def test_fetch_contacts_missing_file(tmp_path):
    source = MobileContactsSource(tmp_path / "absent.vcf")
    assert source.fetch_contacts() == []


def test_fetch_contacts(tmp_path):
    path = tmp_path / "mobile_contact.vcf"
    path.write_text(EXPORT, encoding="utf-8")
    contacts = MobileContactsSource(path).fetch_contacts()
    assert len(contacts) == 1
    assert contacts[0].full_name == "Pranav Bale"
    assert contacts[0].phone_numbers == ["+917499175557"]
    assert contacts[0].source == "mobile"


def test_fetch_contacts_read_error(tmp_path):
    path = tmp_path / "mobile_contact.vcf"
    path.write_text(EXPORT, encoding="utf-8")
    with patch.object(Path, "read_bytes", side_effect=PermissionError("denied")):
        with pytest.raises(ContactResolutionError):
            MobileContactsSource(path).fetch_contacts()


def test_transform_to_staging(tmp_path):
    path = tmp_path / "mobile_contact.vcf"
    path.write_text(EXPORT, encoding="utf-8")
    source = MobileContactsSource(path)
    rows = source.transform_to_staging(source.fetch_contacts())
    assert rows == [
        {
            "raw_name": "Pranav Bale",
            "raw_email": "",
            "raw_phone": "+917499175557",
            "raw_company": "",
            "relationship_type": "OTHER",
            "data_owner_name": "Mobile Contacts",
            "source_system": "MOBILE",
            "source_record_id": "vcf_1",
        }
    ]


def test_default_path_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("MOBILE_VCF_PATH", str(tmp_path / "export.vcf"))
    assert MobileContactsSource().vcf_path == tmp_path / "export.vcf"
