"""Image helper utilities for decoding and pixel-buffer normalization."""

from __future__ import annotations

import io
from dataclasses import dataclass

import numpy as np
from PIL import Image, UnidentifiedImageError

RGBA_CHANNELS = 4


@dataclass(frozen=True)
class DecodedImage:
    """RGBA8 pixels in row-major order."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {self.width}x{self.height}")
        expected = self.width * self.height * RGBA_CHANNELS
        if len(self.pixels) != expected:
            raise ValueError(
                f"RGBA buffer holds {len(self.pixels)} bytes, expected {expected}"
            )


def decode_image(data: bytes) -> DecodedImage:
    """Decode any Pillow-supported format into an RGBA8 buffer."""

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ValueError(f"Unsupported or corrupt image data: {exc}") from exc
    width, height = rgba.size
    return DecodedImage(width=width, height=height, pixels=rgba.tobytes())


def ensure_rgba(image: np.ndarray) -> np.ndarray:
    if image.ndim != 3 or image.shape[2] != RGBA_CHANNELS:
        raise ValueError("Expected RGBA image with shape HxWx4")
    if image.dtype != np.uint8:
        image = image.astype(np.uint8)
    return np.ascontiguousarray(image)


def to_rgb_array(image: DecodedImage) -> np.ndarray:
    """Return an HxWx3 uint8 view of the image with alpha dropped."""

    rgba = np.frombuffer(image.pixels, dtype=np.uint8).reshape(
        image.height, image.width, RGBA_CHANNELS
    )
    return ensure_rgba(rgba)[:, :, :3]


__all__ = ["DecodedImage", "decode_image", "ensure_rgba", "to_rgb_array"]
