"""Plugin contract for AdLad.

A plugin only has to carry a `name`. Every other hook is optional: a missing
hook means the plugin does not support that feature. Hooks may be plain
functions or coroutines. Display hooks return a `ShowAdResult` or a mapping
with `did_show_ad` and `error_reason`.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol


OPTIONAL_HOOKS = (
    "initialize",
    "show_full_screen_ad",
    "show_rewarded_ad",
    "gameplay_start",
    "gameplay_stop",
    "loading_start",
    "loading_stop",
)


class AdLadPlugin(Protocol):
    name: str


def get_hook(plugin: object, hook_name: str) -> Optional[Callable[[], Any]]:
    if hook_name not in OPTIONAL_HOOKS:
        raise ValueError(f"unknown plugin hook: {hook_name}")
    hook = getattr(plugin, hook_name, None)
    if not callable(hook):
        return None
    return hook
