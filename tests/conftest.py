from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from mobile_assets.settings import Settings


def make_master(path: Path, size: tuple[int, int]) -> Path:
    Image.new("RGBA", size, (200, 40, 40, 255)).save(path, format="PNG")
    return path


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(root=tmp_path)


@pytest.fixture
def icon_master(tmp_path: Path) -> Path:
    return make_master(tmp_path / "icon.png", (512, 512))


@pytest.fixture
def splash_master(tmp_path: Path) -> Path:
    return make_master(tmp_path / "splash.png", (1200, 800))
