from __future__ import annotations

import asyncio
from typing import Iterable

from mobile_assets import display
from mobile_assets.catalog import PlatformSpec
from mobile_assets.generator import Outcome, generate_icon, generate_splash
from mobile_assets.settings import Settings
from mobile_assets.transform import Adapter


def added_platforms(platforms: Iterable[PlatformSpec]) -> list[PlatformSpec]:
    return [p for p in platforms if p.is_added]


async def generate_icons(
    platforms: Iterable[PlatformSpec],
    settings: Settings,
    adapter: Adapter,
) -> list[Outcome]:
    outcomes: list[Outcome] = []
    # One platform at a time; its variants run concurrently.
    for platform in added_platforms(platforms):
        display.header(f"Generating Icons for {platform.name}")
        outcomes.extend(await asyncio.gather(
            *(generate_icon(platform, icon, settings, adapter) for icon in platform.icons)
        ))
    return outcomes


async def generate_splashes(
    platforms: Iterable[PlatformSpec],
    settings: Settings,
    adapter: Adapter,
) -> list[Outcome]:
    outcomes: list[Outcome] = []
    for platform in added_platforms(platforms):
        display.header(f"Generating splash screen for {platform.name}")
        outcomes.extend(await asyncio.gather(
            *(generate_splash(platform, splash, settings, adapter) for splash in platform.splash)
        ))
    return outcomes
