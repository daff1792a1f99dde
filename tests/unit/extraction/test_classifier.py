"""Tests for number/hidden classification."""

from waextractor.constants import EntryType
from waextractor.extraction.classifier import classify_participant, is_phone_id
from waextractor.extraction.models import ResolvedParticipant


def test_phone_id_without_name_uses_number():
    entry = classify_participant(ResolvedParticipant(id="1234567890@c.us"), "G1", "Group One")

    assert entry.type is EntryType.NUMBER
    assert entry.number == "1234567890"
    assert entry.name == "1234567890"
    assert entry.group_id == "G1"
    assert entry.group_name == "Group One"


def test_phone_id_with_display_name():
    resolved = ResolvedParticipant(id="1234567890@c.us", display_name="Ana", resolution_ok=True)
    entry = classify_participant(resolved, "G1", "Group One")

    assert entry.name == "Ana"
    assert entry.number == "1234567890"


def test_hidden_id_without_name_uses_raw_id():
    entry = classify_participant(ResolvedParticipant(id="ABCXYZ@lid"), "G1", "Group One")

    assert entry.type is EntryType.HIDDEN
    assert entry.number is None
    assert entry.name == "ABCXYZ@lid"
    assert "number" not in entry.to_record()


def test_hidden_id_with_display_name():
    resolved = ResolvedParticipant(id="ABCXYZ@lid", display_name="Bia", resolution_ok=True)
    assert classify_participant(resolved, "G1", "G").name == "Bia"


def test_other_address_spaces_are_hidden():
    assert not is_phone_id("123@s.whatsapp.net")
    assert not is_phone_id("@c.us")
    assert is_phone_id("123@c.us")
    entry = classify_participant(ResolvedParticipant(id="123@s.whatsapp.net"), "G1", "G")
    assert entry.type is EntryType.HIDDEN


def test_record_keys_and_values():
    entry = classify_participant(ResolvedParticipant(id="55@c.us", display_name="Ana"), "G1", "Group")
    assert entry.to_record() == {
        "groupId": "G1",
        "groupName": "Group",
        "name": "Ana",
        "number": "55",
        "id": "55@c.us",
        "type": "number",
    }
