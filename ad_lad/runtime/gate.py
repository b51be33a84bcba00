"""Readiness gate that holds back plugin calls until initialization settles."""

from __future__ import annotations

import asyncio
import inspect
from typing import Optional

from ad_lad.plugins.base import get_hook
from ad_lad.runtime.diagnostics import ReportError


class PluginGate:
    """One-shot readiness signal for the active plugin.

    The plugin's `initialize` hook is called once, on construction. When it
    returns an awaitable the gate stays pending until that awaitable finishes,
    whether it succeeds or fails; construction must then happen on a running
    event loop. Without a plugin, without an `initialize` hook, or with a
    synchronous `initialize`, the gate is settled right away.
    """

    def __init__(self, plugin: Optional[object], report_error: ReportError):
        self._plugin = plugin
        self._report_error = report_error
        self._settled_event = asyncio.Event()
        self._init_task: Optional[asyncio.Future] = None

        initialize = get_hook(plugin, "initialize") if plugin is not None else None
        if initialize is None:
            self._settled_event.set()
            return

        try:
            pending = initialize()
        except Exception as exc:
            self._report_init_failure(exc)
            self._settled_event.set()
            return

        if not inspect.isawaitable(pending):
            self._settled_event.set()
            return

        self._init_task = asyncio.get_running_loop().create_task(self._wait_for_initialize(pending))

    @property
    def settled(self) -> bool:
        return self._settled_event.is_set()

    async def ready(self) -> None:
        if self._settled_event.is_set():
            return
        await self._settled_event.wait()

    async def _wait_for_initialize(self, pending) -> None:
        try:
            await pending
        except Exception as exc:
            self._report_init_failure(exc)
        finally:
            self._settled_event.set()

    def _report_init_failure(self, error: BaseException) -> None:
        name = getattr(self._plugin, "name", "<unnamed>")
        self._report_error(f'An error occurred while initializing the "{name}" plugin:', error)
