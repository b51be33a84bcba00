"""Plugins and utilities shared by the test modules."""

from __future__ import annotations

import asyncio

from ad_lad.protocol.models import ShowAdResult


class ErrorSink:
    def __init__(self):
        self.calls = []

    def __call__(self, message, error):
        self.calls.append((message, error))


async def wait_for_pending_tasks(rounds: int = 10) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0)


class EmptyPlugin:
    name = "plugin"


class SpyPlugin:
    name = "plugin"

    def __init__(self):
        self.full_screen_calls = 0

    async def show_full_screen_ad(self):
        self.full_screen_calls += 1
        return {"did_show_ad": True, "error_reason": None}


class ControlledPlugin:
    """Ads stay on screen until the test resolves `full_screen` or `rewarded`."""

    name = "plugin"

    def __init__(self):
        self.full_screen = None
        self.rewarded = None

    async def show_full_screen_ad(self):
        self.full_screen = asyncio.get_running_loop().create_future()
        await self.full_screen
        return ShowAdResult.shown()

    async def show_rewarded_ad(self):
        self.rewarded = asyncio.get_running_loop().create_future()
        await self.rewarded
        return ShowAdResult.shown()


def with_pending_initialize(plugin_cls):
    """Subclass `plugin_cls` so `initialize` waits on `init_future` until the test settles it."""

    class InitializingPlugin(plugin_cls):
        def initialize(self):
            self.init_future = asyncio.get_running_loop().create_future()
            return self.init_future

    return InitializingPlugin
