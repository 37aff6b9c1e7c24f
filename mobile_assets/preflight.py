from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from mobile_assets import display
from mobile_assets.settings import Settings


@dataclass(frozen=True)
class SourceAssets:
    has_icon: bool
    has_splash: bool

    @property
    def any(self) -> bool:
        return self.has_icon or self.has_splash


async def _exists(path: Path) -> bool:
    found = await asyncio.to_thread(path.is_file)
    if found:
        display.success(f"{path.name} exists")
    else:
        display.error(f"{path.name} does not exist in {path.parent}")
    return found


async def check_source_assets(settings: Settings) -> SourceAssets:
    has_icon, has_splash = await asyncio.gather(
        _exists(settings.icon_path), _exists(settings.splash_path)
    )
    return SourceAssets(has_icon=has_icon, has_splash=has_splash)
