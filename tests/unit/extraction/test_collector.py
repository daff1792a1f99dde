"""Tests for collecting participant ids from every container shape."""

from types import SimpleNamespace

import pytest

from waextractor.constants import ParticipantShape
from waextractor.extraction.collector import collect_participants, inspect_shape


class KeyedCollection:
    """Mimics a client collection keyed by participant id."""

    def __init__(self, items: dict):
        self._items = items

    def keys(self):
        return iter(self._items.keys())

    def values(self):
        return iter(self._items.values())


class EmptyKeysCollection(KeyedCollection):
    """A collection that exposes no keys but still holds values."""

    def keys(self):
        return iter(())


def _participant(serialized: str) -> dict:
    return {"id": {"_serialized": serialized}}


def test_sequence_of_mixed_shapes_is_normalized_and_deduplicated():
    participants = [
        _participant("1@c.us"),
        "2@c.us",
        SimpleNamespace(_serialized="X@lid"),
        _participant("1@c.us"),
        None,
        {"unexpected": True},
    ]
    assert collect_participants(participants) == {"1@c.us", "2@c.us", "X@lid"}


def test_keyed_collection_uses_keys():
    collection = KeyedCollection({"1@c.us": object(), "X@lid": object()})
    assert inspect_shape(collection) is ParticipantShape.KEYED_COLLECTION
    assert collect_participants(collection) == {"1@c.us", "X@lid"}


def test_keyed_collection_without_keys_falls_back_to_values():
    collection = EmptyKeysCollection({"a": _participant("1@c.us"), "b": _participant("X@lid")})
    assert collect_participants(collection) == {"1@c.us", "X@lid"}


def test_plain_mapping_uses_values():
    participants = {"0": _participant("1@c.us"), "1": _participant("2@c.us"), "2": "bogus-but-kept"}
    assert inspect_shape(participants) is ParticipantShape.PLAIN_MAPPING
    assert collect_participants(participants) == {"1@c.us", "2@c.us", "bogus-but-kept"}


def test_nested_metadata_is_used_when_participants_missing():
    metadata = SimpleNamespace(participants=[_participant("1@c.us"), _participant("X@lid")])
    assert inspect_shape(None, metadata) is ParticipantShape.NESTED_METADATA
    assert collect_participants(None, metadata) == {"1@c.us", "X@lid"}


def test_nested_metadata_as_mapping():
    metadata = {"participants": ["1@c.us", "1@c.us"]}
    assert collect_participants(None, metadata) == {"1@c.us"}


def test_sequence_takes_precedence_over_metadata():
    metadata = SimpleNamespace(participants=["ignored@c.us"])
    assert collect_participants([], metadata) == set()


@pytest.mark.parametrize("participants", [None, "1@c.us", 42])
def test_unrecognized_container_yields_empty_set(participants):
    assert inspect_shape(participants) is ParticipantShape.UNRECOGNIZED
    assert collect_participants(participants) == set()


def test_all_unextractable_yields_empty_set():
    assert collect_participants([None, {}, {"id": {}}, 0]) == set()


def test_order_does_not_matter():
    first = [_participant("1@c.us"), "2@c.us", _participant("X@lid")]
    second = list(reversed(first))
    assert collect_participants(first) == collect_participants(second)
