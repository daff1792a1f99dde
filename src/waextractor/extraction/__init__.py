"""Member-extraction and normalization pipeline."""

from waextractor.extraction.classifier import classify_participant, is_phone_id
from waextractor.extraction.collector import collect_participants, inspect_shape
from waextractor.extraction.models import (
    CombinedView,
    ExtractionEntry,
    ExtractionResult,
    GroupResult,
    HiddenRow,
    NumberRow,
    ResolvedParticipant,
)
from waextractor.extraction.normalizer import normalize_participant
from waextractor.extraction.orchestrator import ExtractionOrchestrator, extract_members
from waextractor.extraction.resolver import pick_display_name, resolve_contacts

__all__ = [
    "CombinedView",
    "ExtractionEntry",
    "ExtractionOrchestrator",
    "ExtractionResult",
    "GroupResult",
    "HiddenRow",
    "NumberRow",
    "ResolvedParticipant",
    "classify_participant",
    "collect_participants",
    "extract_members",
    "inspect_shape",
    "is_phone_id",
    "normalize_participant",
    "pick_display_name",
    "resolve_contacts",
]
