"""Local stand-in ad network. Ads are simulated with a sleep."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from ad_lad import config


logger = logging.getLogger(__name__)


class Plugin:
    name = "dummy"

    def __init__(self, ad_duration: Optional[float] = None, init_delay: Optional[float] = None) -> None:
        self.ad_duration = config.dummy_timing("ad_duration") if ad_duration is None else ad_duration
        self.init_delay = config.dummy_timing("init_delay") if init_delay is None else init_delay
        self.gameplay_active = False
        self.ads_shown = 0

    async def initialize(self) -> None:
        await asyncio.sleep(self.init_delay)
        logger.info("dummy ad network ready after %.2fs", self.init_delay)

    async def show_full_screen_ad(self) -> Dict[str, Any]:
        return await self._play("full-screen")

    async def show_rewarded_ad(self) -> Dict[str, Any]:
        return await self._play("rewarded")

    def gameplay_start(self) -> None:
        self.gameplay_active = True

    def gameplay_stop(self) -> None:
        self.gameplay_active = False

    async def _play(self, kind: str) -> Dict[str, Any]:
        logger.info("playing %s ad for %.2fs", kind, self.ad_duration)
        await asyncio.sleep(self.ad_duration)
        self.ads_shown += 1
        return {"did_show_ad": True, "error_reason": None}
