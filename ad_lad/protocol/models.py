
"""Ad kinds and the result envelope returned for every ad call."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, model_validator

from ad_lad.protocol.errors import (
    ALREADY_PLAYING,
    ERROR_REASONS,
    NO_ACTIVE_PLUGIN,
    NOT_SUPPORTED,
    UNKNOWN,
)


ErrorReason = Literal[ERROR_REASONS]


class AdKind(str, Enum):
    FULL_SCREEN = "full-screen"
    REWARDED = "rewarded"

    @property
    def hook_name(self) -> str:
        """Name of the plugin hook that displays this kind of ad."""
        return _HOOK_NAMES[self]


_HOOK_NAMES = {
    AdKind.FULL_SCREEN: "show_full_screen_ad",
    AdKind.REWARDED: "show_rewarded_ad",
}


class ShowAdResult(BaseModel):
    """Stable result envelope. `error_reason` is set exactly when no ad was shown."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    did_show_ad: StrictBool
    error_reason: Optional[ErrorReason] = None

    @model_validator(mode="after")
    def _check_reason(self) -> "ShowAdResult":
        if self.did_show_ad and self.error_reason is not None:
            raise ValueError("error_reason must be None when an ad was shown")
        if not self.did_show_ad and self.error_reason is None:
            raise ValueError("error_reason is required when no ad was shown")
        return self

    @classmethod
    def shown(cls) -> "ShowAdResult":
        return cls(did_show_ad=True, error_reason=None)

    @classmethod
    def failed(cls, reason: str) -> "ShowAdResult":
        return cls(did_show_ad=False, error_reason=reason)


# Shared instances for the results the coordinator produces itself.
NO_ACTIVE_PLUGIN_RESULT = ShowAdResult.failed(NO_ACTIVE_PLUGIN)
NOT_SUPPORTED_RESULT = ShowAdResult.failed(NOT_SUPPORTED)
ALREADY_PLAYING_RESULT = ShowAdResult.failed(ALREADY_PLAYING)
UNKNOWN_RESULT = ShowAdResult.failed(UNKNOWN)
