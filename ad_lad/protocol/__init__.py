from ad_lad.protocol.errors import (
    ALREADY_PLAYING,
    ERROR_REASONS,
    NO_ACTIVE_PLUGIN,
    NOT_SUPPORTED,
    UNKNOWN,
)
from ad_lad.protocol.models import AdKind, ShowAdResult

__all__ = [
    "ALREADY_PLAYING",
    "AdKind",
    "ERROR_REASONS",
    "NO_ACTIVE_PLUGIN",
    "NOT_SUPPORTED",
    "ShowAdResult",
    "UNKNOWN",
]
