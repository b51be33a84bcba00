"""Diagnostic sink that receives plugin failures."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger("ad_lad")

ReportError = Callable[[str, BaseException], None]


def log_plugin_error(message: str, error: BaseException) -> None:
    logger.error(message, exc_info=error)
