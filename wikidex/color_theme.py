"""
color_theme – Derive a page color theme from a creature or item image.

The theme is built from the average color of the image's opaque pixels:

  primary   the average color itself
  light     85% white / 15% primary, for backgrounds
  dark      primary at 70% brightness, for borders and text
  gradient  CSS ``linear-gradient`` from light to primary

Any failure to load or decode the image, and an image with no opaque
pixels, yields the slate ``DEFAULT_THEME``.  ``extract_theme`` reports which
of the two happened; ``extract_average_color`` returns the bare theme.
"""

from __future__ import annotations

import asyncio
import io
import logging
import math
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import BinaryIO, Dict, Union

import numpy as np
from PIL import Image

from wikidex.config import (
    ALPHA_THRESHOLD,
    DARK_FACTOR,
    DEFAULT_THEME_COLORS,
    GRADIENT_ANGLE,
    LARGE_IMAGE_PIXELS,
    LARGE_IMAGE_STRIDE,
    LIGHT_MIX,
    WHITE_MIX,
)

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, BinaryIO, Image.Image]

_DECODE_ERRORS = (OSError, ValueError, Image.DecompressionBombError)


# ── Data types ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ColorTheme:
    primary: str
    primary_rgb: str
    light: str
    dark: str
    gradient: str

    def to_dict(self) -> Dict[str, str]:
        """Keys as the front end expects them."""
        d = asdict(self)
        d["primaryRgb"] = d.pop("primary_rgb")
        return d


@dataclass(frozen=True)
class ThemeResult:
    """A theme tagged with where it came from."""
    theme: ColorTheme
    source: str  # "computed" | "fallback"
    reason: str = ""

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


def _gradient(light: str, primary: str) -> str:
    return f"linear-gradient({GRADIENT_ANGLE}deg, {light} 0%, {primary} 100%)"


DEFAULT_THEME = ColorTheme(
    primary=DEFAULT_THEME_COLORS["primary"],
    primary_rgb=DEFAULT_THEME_COLORS["primary_rgb"],
    light=DEFAULT_THEME_COLORS["light"],
    dark=DEFAULT_THEME_COLORS["dark"],
    gradient=_gradient(DEFAULT_THEME_COLORS["light"], DEFAULT_THEME_COLORS["primary"]),
)


def get_default_theme() -> ColorTheme:
    return DEFAULT_THEME


def _fallback(reason: str) -> ThemeResult:
    return ThemeResult(theme=DEFAULT_THEME, source="fallback", reason=reason)


# ── Color math ───────────────────────────────────────────────────────────────

def _round(value: float) -> int:
    # Half-up: 0.5 → 1, 2.5 → 3.
    return int(math.floor(value + 0.5))


def _hex(r: int, g: int, b: int) -> str:
    return "#" + "".join(f"{c:02x}" for c in (r, g, b))


def generate_theme_from_rgb(r: int, g: int, b: int) -> ColorTheme:
    """Build the full theme from an averaged (r, g, b)."""
    primary = _hex(r, g, b)
    light = _hex(*(_round(c * LIGHT_MIX + 255 * WHITE_MIX) for c in (r, g, b)))
    dark = _hex(*(max(0, _round(c * DARK_FACTOR)) for c in (r, g, b)))
    return ColorTheme(
        primary=primary,
        primary_rgb=f"{r}, {g}, {b}",
        light=light,
        dark=dark,
        gradient=_gradient(light, primary),
    )


def theme_from_pixels(rgba: np.ndarray) -> ThemeResult:
    """
    Average the opaque pixels of an (H, W, 4) uint8 RGBA array.

    Large images are sampled every ``LARGE_IMAGE_STRIDE`` pixels in
    row-major order; small ones (sprite-sized) use every pixel.
    """
    if rgba.ndim != 3 or rgba.shape[2] != 4:
        raise ValueError(f"Expected an (H, W, 4) RGBA array, got shape {rgba.shape}")

    height, width = rgba.shape[:2]
    step = LARGE_IMAGE_STRIDE if width * height > LARGE_IMAGE_PIXELS else 1

    pixels = rgba.reshape(-1, 4)[::step]
    opaque = pixels[pixels[:, 3] >= ALPHA_THRESHOLD]
    if len(opaque) == 0:
        logger.debug("No opaque pixels among %d sampled; using default theme", len(pixels))
        return _fallback("no opaque pixels")

    count = len(opaque)
    sums = opaque[:, :3].astype(np.int64).sum(axis=0)
    r, g, b = (_round(int(s) / count) for s in sums)
    return ThemeResult(theme=generate_theme_from_rgb(r, g, b), source="computed")


# ── Image loading ────────────────────────────────────────────────────────────

def _open(source: ImageSource) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, (bytes, bytearray)):
        return Image.open(io.BytesIO(source))
    if isinstance(source, str) and "://" in source:
        # Remote images are resolved by the caller; we only decode local data.
        raise OSError(f"Remote image sources are not fetched: {source}")
    return Image.open(source)


def _decode(source: ImageSource) -> np.ndarray:
    img = _open(source)
    try:
        img.load()
        return np.asarray(img.convert("RGBA"), dtype=np.uint8)
    finally:
        if img is not source:
            img.close()


def _extract_sync(source: ImageSource) -> ThemeResult:
    try:
        rgba = _decode(source)
    except _DECODE_ERRORS as exc:
        logger.warning("Could not decode image %r: %s", _describe(source), exc)
        return _fallback(f"decode failed: {exc}")
    return theme_from_pixels(rgba)


def _describe(source: ImageSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return type(source).__name__


# ── Public API ───────────────────────────────────────────────────────────────

async def extract_theme(source: ImageSource) -> ThemeResult:
    """Decode *source* off the event loop and compute its tagged theme."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _extract_sync, source)


async def extract_average_color(source: ImageSource) -> ColorTheme:
    """Theme for *source*; ``DEFAULT_THEME`` if it cannot be computed."""
    result = await extract_theme(source)
    return result.theme
