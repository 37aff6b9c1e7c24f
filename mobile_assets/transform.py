from __future__ import annotations

from pathlib import Path
from typing import Protocol

from PIL import Image, ImageOps

# Formats that cannot store transparency get flattened onto white.
_OPAQUE_FORMATS = {"JPEG"}
_QUALITY_FORMATS = {"JPEG", "WEBP"}
MAX_QUALITY = 100


def pillow_format(fmt: str) -> str:
    """Map a lowercase file extension ("png", "jpg") to a Pillow format name."""
    try:
        return Image.registered_extensions()[f".{fmt.lower()}"]
    except KeyError:
        raise ValueError(f"Unsupported output format: {fmt!r}") from None


class Adapter(Protocol):
    def resize(self, source: Path, destination: Path, width: int, height: int, fmt: str) -> None: ...

    def crop(self, source: Path, destination: Path, width: int, height: int, fmt: str) -> None: ...


class PillowAdapter:
    """Resize and crop master images with Pillow.

    ``resize`` scales the whole source to the target box (icons). ``crop``
    scales the source to cover the box and trims the overflow around the
    center (splash screens), so the aspect ratio is never distorted.
    """

    def resize(self, source: Path, destination: Path, width: int, height: int, fmt: str) -> None:
        with Image.open(source) as img:
            resized = img.convert("RGBA").resize((width, height), Image.Resampling.LANCZOS)
        self._save(resized, destination, fmt)

    def crop(self, source: Path, destination: Path, width: int, height: int, fmt: str) -> None:
        with Image.open(source) as img:
            cropped = ImageOps.fit(img.convert("RGBA"), (width, height), method=Image.Resampling.LANCZOS)
        self._save(cropped, destination, fmt)

    def _save(self, img: Image.Image, destination: Path, fmt: str) -> None:
        name = pillow_format(fmt)
        if name in _OPAQUE_FORMATS:
            bg = Image.new("RGBA", img.size, (255, 255, 255, 255))
            bg.alpha_composite(img)
            img = bg.convert("RGB")

        params = {"quality": MAX_QUALITY} if name in _QUALITY_FORMATS else {}
        img.save(destination, format=name, **params)
