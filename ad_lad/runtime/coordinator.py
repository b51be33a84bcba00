
"""Ad display coordinator: one active plugin, one ad at a time."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Union

from ad_lad import config
from ad_lad.plugins.base import get_hook
from ad_lad.protocol.models import (
    ALREADY_PLAYING_RESULT,
    NO_ACTIVE_PLUGIN_RESULT,
    NOT_SUPPORTED_RESULT,
    UNKNOWN_RESULT,
    AdKind,
    ShowAdResult,
)
from ad_lad.runtime.diagnostics import ReportError, log_plugin_error
from ad_lad.runtime.gate import PluginGate


logger = logging.getLogger(__name__)

ShowingAdListener = Callable[[bool], Any]


@dataclass
class AdLadState:
    """Mutable state owned by a single AdLad instance."""

    active_plugin: Optional[object] = None
    is_showing_ad: bool = False
    gameplay_started: bool = False
    loading: bool = False


class AdLad:
    def __init__(
        self,
        plugins: Union[Iterable[object], Mapping] = (),
        *,
        plugin_name: Optional[str] = None,
        report_error: Optional[ReportError] = None,
    ):
        if isinstance(plugins, Mapping):
            plugins = plugins.values()
        self.plugins: List[object] = list(plugins)
        self._report_error = report_error or log_plugin_error
        self._showing_ad_listeners: List[ShowingAdListener] = []
        self.state = AdLadState(active_plugin=self._select_plugin(plugin_name))
        self._gate = PluginGate(self.state.active_plugin, self._report_error)

    def _select_plugin(self, plugin_name: Optional[str]) -> Optional[object]:
        if not self.plugins:
            return None

        requested = config.active_plugin_name(plugin_name)
        if requested is None:
            return self.plugins[0]
        for plugin in self.plugins:
            if getattr(plugin, "name", None) == requested:
                return plugin

        fallback = self.plugins[0]
        logger.warning(
            "Plugin '%s' is not registered, using '%s' instead",
            requested,
            getattr(fallback, "name", None),
        )
        return fallback

    @property
    def active_plugin_name(self) -> Optional[str]:
        plugin = self.state.active_plugin
        return None if plugin is None else plugin.name

    @property
    def is_showing_ad(self) -> bool:
        return self.state.is_showing_ad

    def on_is_showing_ad_change(self, callback: ShowingAdListener) -> None:
        self._showing_ad_listeners.append(callback)

    def remove_on_is_showing_ad_change(self, callback: ShowingAdListener) -> None:
        if callback in self._showing_ad_listeners:
            self._showing_ad_listeners.remove(callback)

    def _set_showing_ad(self, value: bool) -> None:
        self.state.is_showing_ad = value
        for callback in list(self._showing_ad_listeners):
            try:
                callback(value)
            except Exception as exc:
                self._report_error("An error occurred while running an is_showing_ad listener:", exc)

    def show_full_screen_ad(self) -> "asyncio.Future[ShowAdResult]":
        return self.show_ad(AdKind.FULL_SCREEN)

    def show_rewarded_ad(self) -> "asyncio.Future[ShowAdResult]":
        return self.show_ad(AdKind.REWARDED)

    def show_ad(self, kind: Union[AdKind, str]) -> "asyncio.Future[ShowAdResult]":
        """Request an ad and return a future that always resolves to a ShowAdResult.

        The exclusivity check and claim happen here, at call time, so two calls
        made back to back can never both reach the plugin. Only the part after
        the claim runs as a task on the event loop.
        """
        kind = AdKind(kind)
        loop = asyncio.get_running_loop()

        plugin = self.state.active_plugin
        if plugin is None:
            return _resolved(loop, NO_ACTIVE_PLUGIN_RESULT)
        if self.state.is_showing_ad:
            return _resolved(loop, ALREADY_PLAYING_RESULT)

        self._set_showing_ad(True)
        return loop.create_task(self._show_claimed(plugin, kind))

    async def _show_claimed(self, plugin: object, kind: AdKind) -> ShowAdResult:
        try:
            await self._gate.ready()

            hook = get_hook(plugin, kind.hook_name)
            if hook is None:
                return NOT_SUPPORTED_RESULT

            try:
                result = hook()
                if inspect.isawaitable(result):
                    result = await result
                return _as_result(result)
            except Exception as exc:
                self._report_error(
                    f'An error occurred while trying to display an ad from the "{plugin.name}" plugin:',
                    exc,
                )
                return UNKNOWN_RESULT
        finally:
            self._set_showing_ad(False)

    # Lifecycle calls update state at call time, so they may be fired without
    # awaiting. The returned future completes once the plugin hook has run.

    def gameplay_start(self) -> "asyncio.Future[None]":
        return self._change_lifecycle_state("gameplay_started", True, "gameplay_start")

    def gameplay_stop(self) -> "asyncio.Future[None]":
        return self._change_lifecycle_state("gameplay_started", False, "gameplay_stop")

    def loading_start(self) -> "asyncio.Future[None]":
        return self._change_lifecycle_state("loading", True, "loading_start")

    def loading_stop(self) -> "asyncio.Future[None]":
        return self._change_lifecycle_state("loading", False, "loading_stop")

    def _change_lifecycle_state(self, field: str, value: bool, hook_name: str) -> "asyncio.Future[None]":
        loop = asyncio.get_running_loop()
        if getattr(self.state, field) == value:
            return _resolved(loop, None)
        setattr(self.state, field, value)
        return loop.create_task(self._run_lifecycle_hook(hook_name))

    async def _run_lifecycle_hook(self, hook_name: str) -> None:
        plugin = self.state.active_plugin
        if plugin is None:
            return
        await self._gate.ready()

        hook = get_hook(plugin, hook_name)
        if hook is None:
            return
        try:
            result = hook()
            if inspect.isawaitable(result):
                await result
        except Exception as exc:
            self._report_error(
                f'An error occurred while running the "{hook_name}" hook of the "{plugin.name}" plugin:',
                exc,
            )


def _resolved(loop: asyncio.AbstractEventLoop, result: Any) -> asyncio.Future:
    future = loop.create_future()
    future.set_result(result)
    return future


def _as_result(value: Any) -> ShowAdResult:
    if isinstance(value, ShowAdResult):
        return value
    return ShowAdResult.model_validate(value)
