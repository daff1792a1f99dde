"""Central location for constants used throughout the application.

WhatsApp identifiers are ``<user>@<server>`` strings. The server part decides
which address space an identifier belongs to.
"""

from enum import Enum

PHONE_SUFFIX = "@c.us"
"""Phone-number-backed participant identifiers end with this tag."""

HIDDEN_SUFFIX = "@lid"
"""Privacy-shielded (linked id) participant identifiers."""

GROUP_SERVER = "g.us"

SERIALIZED_FIELD = "_serialized"

UNNAMED_GROUP = "(no name)"

EXPORT_COLUMNS: tuple[str, ...] = ("groupName", "groupId", "name", "number", "id", "type")


class EntryType(str, Enum):
    """Classification of an extracted participant."""

    NUMBER = "number"
    HIDDEN = "hidden"


class ExportFormat(str, Enum):
    """Supported export file formats."""

    CSV = "csv"
    XLSX = "xlsx"
    JSON = "json"


class ParticipantShape(str, Enum):
    """Container shapes a group's participant list may arrive in."""

    SEQUENCE = "sequence"
    KEYED_COLLECTION = "keyed_collection"
    PLAIN_MAPPING = "plain_mapping"
    NESTED_METADATA = "nested_metadata"
    UNRECOGNIZED = "unrecognized"


class SessionState(str, Enum):
    """Lifecycle of an authenticated messaging session."""

    UNINITIALIZED = "uninitialized"
    AUTHENTICATING = "authenticating"
    READY = "ready"
    DISCONNECTED = "disconnected"
