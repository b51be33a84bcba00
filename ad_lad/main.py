
"""CLI entrypoint for AdLad."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from ad_lad.protocol.models import AdKind, ShowAdResult
from ad_lad.registry import load_plugins
from ad_lad.runtime.coordinator import AdLad


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        root.addHandler(handler)


async def _show(plugins: dict, kind: AdKind, plugin_name: Optional[str]) -> ShowAdResult:
    ad_lad = AdLad(plugins, plugin_name=plugin_name)
    return await ad_lad.show_ad(kind)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="ad-lad")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-plugins")
    show_parser = subparsers.add_parser("show")
    show_parser.add_argument("--kind", required=True, choices=[kind.value for kind in AdKind])
    show_parser.add_argument("--plugin", default=None, help="Name of the plugin to activate")

    args = parser.parse_args(argv)
    _setup_logging(args.log_level)

    plugins = load_plugins()

    if args.command == "list-plugins":
        print(json.dumps(sorted(plugins.keys()), indent=2))
        return 0

    result = asyncio.run(_show(plugins, AdKind(args.kind), args.plugin))
    print(json.dumps(result.model_dump(), indent=2, sort_keys=True))
    return 0 if result.did_show_ad else 1


if __name__ == "__main__":
    raise SystemExit(main())
