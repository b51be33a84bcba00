"""Error reasons reported in ShowAdResult.error_reason."""

NO_ACTIVE_PLUGIN = "no-active-plugin"
NOT_SUPPORTED = "not-supported"
ALREADY_PLAYING = "already-playing"
UNKNOWN = "unknown"

ERROR_REASONS = (NO_ACTIVE_PLUGIN, NOT_SUPPORTED, ALREADY_PLAYING, UNKNOWN)
