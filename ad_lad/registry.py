
"""Plugin discovery utilities."""

from __future__ import annotations

import importlib
import json
import warnings
from pathlib import Path
from typing import Dict

from ad_lad.plugins.base import OPTIONAL_HOOKS


def _validate_plugin(plugin: object, manifest: dict) -> None:
    name = getattr(plugin, "name", None)
    if not isinstance(name, str) or not name:
        raise TypeError("plugin name must be a non-empty string")
    if name != manifest.get("name"):
        raise ValueError("plugin name does not match plugin.json")

    for hook_name in manifest.get("hooks", []):
        if hook_name not in OPTIONAL_HOOKS:
            raise ValueError(f"unknown hook in plugin.json: {hook_name}")
        if not callable(getattr(plugin, hook_name, None)):
            raise TypeError(f"missing declared hook: {hook_name}")


def load_plugins() -> Dict[str, object]:
    plugins: Dict[str, object] = {}
    plugins_dir = Path(__file__).resolve().parent / "plugins"

    for manifest_path in sorted(plugins_dir.glob("*/plugin.json")):
        try:
            manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
            module_name = f"ad_lad.plugins.{manifest_path.parent.name}.plugin"
            module = importlib.import_module(module_name)
            plugin = module.Plugin()
            _validate_plugin(plugin, manifest)
            plugins[plugin.name] = plugin
        except Exception as exc:
            warnings.warn(
                f"Skipping plugin at {manifest_path}: {exc}",
                RuntimeWarning,
                stacklevel=2,
            )

    return plugins
