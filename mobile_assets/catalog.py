from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any, Mapping


def _check_name(name: str) -> None:
    path = PurePosixPath(name)
    if not name or path.is_absolute() or ".." in path.parts or not path.suffix:
        raise ValueError(f"Variant name must be a relative file path under its base directory, got {name!r}")


def _check_positive(label: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{label} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class IconVariant:
    name: str
    size: int

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_positive("size", self.size)

    @property
    def format(self) -> str:
        return PurePosixPath(self.name).suffix[1:].lower()


@dataclass(frozen=True)
class SplashVariant:
    name: str
    width: int
    height: int

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_positive("width", self.width)
        _check_positive("height", self.height)

    @property
    def format(self) -> str:
        return PurePosixPath(self.name).suffix[1:].lower()


@dataclass(frozen=True)
class PlatformSpec:
    name: str
    icons_path: str = ""
    splash_path: str = ""
    is_added: bool = True
    icons: tuple[IconVariant, ...] = ()
    splash: tuple[SplashVariant, ...] = ()


# platform -> base path, whether the project has it, and (name, size...) rows.
ICON_PLATFORMS: dict[str, dict[str, Any]] = {
    "android": {
        "path": "res/",
        "added": True,
        "variants": [
            ("drawable-ldpi/ic_launcher.png", 36),
            ("drawable-mdpi/ic_launcher.png", 48),
            ("drawable-hdpi/ic_launcher.png", 72),
            ("drawable-xhdpi/ic_launcher.png", 96),
            ("drawable-xxhdpi/ic_launcher.png", 144),
            ("drawable-xxxhdpi/ic_launcher.png", 192),
        ],
    },
}

# Rows are (name, width, height).
SPLASH_PLATFORMS: dict[str, dict[str, Any]] = {}


def list_icon_platforms(table: Mapping[str, Mapping[str, Any]] | None = None) -> list[PlatformSpec]:
    table = ICON_PLATFORMS if table is None else table
    return [
        PlatformSpec(
            name=name,
            icons_path=entry["path"],
            is_added=entry.get("added", True),
            icons=tuple(IconVariant(n, size) for n, size in entry["variants"]),
        )
        for name, entry in table.items()
    ]


def list_splash_platforms(table: Mapping[str, Mapping[str, Any]] | None = None) -> list[PlatformSpec]:
    table = SPLASH_PLATFORMS if table is None else table
    return [
        PlatformSpec(
            name=name,
            splash_path=entry["path"],
            is_added=entry.get("added", True),
            splash=tuple(SplashVariant(n, w, h) for n, w, h in entry["variants"]),
        )
        for name, entry in table.items()
    ]
