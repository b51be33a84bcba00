"""Configuration lookup: explicit value, then environment, then config.toml."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional


CONFIG_PATH = "config.toml"


def _load_config_table(table: str) -> Dict[str, Any]:
    config_path = Path(CONFIG_PATH)
    if not config_path.exists():
        return {}

    try:
        import tomllib

        config = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except Exception:
        return {}

    value = config.get(table, {})
    return value if isinstance(value, dict) else {}


def active_plugin_name(explicit: Optional[str] = None) -> Optional[str]:
    return (
        explicit
        or os.environ.get("AD_LAD_PLUGIN")
        or _load_config_table("plugins").get("active")
        or None
    )


def dummy_timing(name: str) -> float:
    """Seconds for the dummy plugin's `ad_duration` or `init_delay`."""
    raw = os.environ.get(f"AD_LAD_DUMMY_{name.upper()}")
    if raw is None:
        raw = _load_config_table("dummy").get(name, 0.0)
    try:
        return max(float(raw), 0.0)
    except (TypeError, ValueError):
        return 0.0
