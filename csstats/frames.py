"""Rendering of player positions as dots on a map image."""

from __future__ import annotations

import math
from pathlib import Path

from PIL import Image

RED = (255, 0, 0, 255)
DOT_RADIUS = 10


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def load_map_image(path: str | Path) -> Image.Image:
    """Read a map image from a file."""
    with Image.open(path) as img:
        img.load()
        return img.copy()


def draw_dot(img: Image.Image, x: float, y: float) -> None:
    """Paint a filled red circle centred on (x, y), clipped to the image."""
    if img.mode != "RGBA":
        raise ValueError(f"expected an RGBA image, got {img.mode}")
    cx, cy = _round(x), _round(y)
    width, height = img.size
    pixels = img.load()
    for dx in range(-DOT_RADIUS, DOT_RADIUS + 1):
        for dy in range(-DOT_RADIUS, DOT_RADIUS + 1):
            if dx * dx + dy * dy > DOT_RADIUS * DOT_RADIUS:
                continue
            px, py = cx + dx, cy + dy
            if 0 <= px < width and 0 <= py < height:
                pixels[px, py] = RED


def create_frame(map_img: Image.Image, path: str | Path, index: int, x: float, y: float) -> Path:
    """Write the map with a dot at (x, y) as a numbered PNG frame in a directory."""
    frame = map_img.convert("RGBA")
    draw_dot(frame, x, y)
    out = Path(path) / f"frame_{index:03d}.png"
    frame.save(out, format="PNG")
    return out