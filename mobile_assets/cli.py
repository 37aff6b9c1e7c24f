from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

from mobile_assets import display
from mobile_assets.catalog import list_icon_platforms, list_splash_platforms
from mobile_assets.errors import MissingSourceAsset
from mobile_assets.generator import Outcome
from mobile_assets.orchestrator import generate_icons, generate_splashes
from mobile_assets.preflight import check_source_assets
from mobile_assets.settings import ICON_FILE, SPLASH_FILE, Settings
from mobile_assets.transform import Adapter, PillowAdapter

EXIT_MISSING_SOURCE = 1
EXIT_GENERATION_FAILED = 2


@dataclass
class RunResult:
    outcomes: list[Outcome] = field(default_factory=list)

    @property
    def failures(self) -> list[Outcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


async def run(
    settings: Settings,
    adapter: Adapter | None = None,
    icon_table: Mapping[str, Mapping[str, Any]] | None = None,
    splash_table: Mapping[str, Mapping[str, Any]] | None = None,
) -> RunResult:
    """Check the masters, then generate icons and splash screens for every added platform.

    Raises MissingSourceAsset before touching the filesystem when neither
    master image exists. Per-file failures are collected in the result.
    """
    adapter = adapter or PillowAdapter()
    display.header("Checking Splash & Icon")
    sources = await check_source_assets(settings)
    if not sources.any:
        raise MissingSourceAsset(settings.icon_path, settings.splash_path)

    result = RunResult()
    if sources.has_icon:
        result.outcomes += await generate_icons(list_icon_platforms(icon_table), settings, adapter)
    if sources.has_splash:
        result.outcomes += await generate_splashes(list_splash_platforms(splash_table), settings, adapter)
    return result


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mobile-assets",
        description="Generate platform icon and splash-screen assets from master images.",
    )
    parser.add_argument("--root", type=Path, default=Path.cwd(),
                        help="Project directory holding the masters and the generated assets (default: cwd)")
    parser.add_argument("--icon", default=ICON_FILE, help=f"Master icon file name (default: {ICON_FILE})")
    parser.add_argument("--splash", default=SPLASH_FILE, help=f"Master splash file name (default: {SPLASH_FILE})")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = Settings(root=args.root, icon_file=args.icon, splash_file=args.splash)

    try:
        result = asyncio.run(run(settings))
        if not result.ok:
            print()
            display.error(f"{len(result.failures)} of {len(result.outcomes)} assets failed")
            raise SystemExit(EXIT_GENERATION_FAILED)
    except MissingSourceAsset as exc:
        display.error(str(exc))
        raise SystemExit(EXIT_MISSING_SOURCE) from exc
    finally:
        print()


if __name__ == "__main__":
    main()
