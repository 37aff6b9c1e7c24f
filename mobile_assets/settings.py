from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

ICON_FILE = "icon.png"
SPLASH_FILE = "splash.png"


@dataclass(frozen=True)
class Settings:
    # Masters are looked up in root, and platform paths are relative to it.
    root: Path = field(default_factory=Path.cwd)
    icon_file: str = ICON_FILE
    splash_file: str = SPLASH_FILE

    @property
    def icon_path(self) -> Path:
        return Path(self.root) / self.icon_file

    @property
    def splash_path(self) -> Path:
        return Path(self.root) / self.splash_file
