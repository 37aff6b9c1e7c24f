from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from mobile_assets import display
from mobile_assets.catalog import IconVariant, PlatformSpec, SplashVariant
from mobile_assets.errors import AssetError, DirectoryCreationFailure, TransformFailure
from mobile_assets.settings import Settings
from mobile_assets.transform import Adapter


@dataclass(frozen=True)
class Outcome:
    platform: str
    name: str
    destination: Path
    error: AssetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def _ensure_dir(directory: Path) -> None:
    try:
        await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationFailure(directory, exc) from exc


async def _generate(
    platform: PlatformSpec,
    name: str,
    destination: Path,
    operation: Callable[..., None],
    source: Path,
    width: int,
    height: int,
    fmt: str,
) -> Outcome:
    try:
        await _ensure_dir(destination.parent)
        try:
            await asyncio.to_thread(operation, source, destination, width, height, fmt)
        except Exception as exc:
            raise TransformFailure(name, exc) from exc
    except AssetError as exc:
        display.error(f"{name} failed: {exc.cause}")
        return Outcome(platform.name, name, destination, exc)

    display.success(f"{name} created")
    return Outcome(platform.name, name, destination)


async def generate_icon(
    platform: PlatformSpec,
    icon: IconVariant,
    settings: Settings,
    adapter: Adapter,
) -> Outcome:
    destination = Path(settings.root) / platform.icons_path / icon.name
    return await _generate(
        platform, icon.name, destination, adapter.resize,
        settings.icon_path, icon.size, icon.size, icon.format,
    )


async def generate_splash(
    platform: PlatformSpec,
    splash: SplashVariant,
    settings: Settings,
    adapter: Adapter,
) -> Outcome:
    destination = Path(settings.root) / platform.splash_path / splash.name
    return await _generate(
        platform, splash.name, destination, adapter.crop,
        settings.splash_path, splash.width, splash.height, splash.format,
    )
