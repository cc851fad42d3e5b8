"""Adapter around the ``blurhash`` package.

The encoder is pure Python and walks every pixel once per component, so
encoding time grows with ``width * height * x * y``. Multi-megapixel photos
take minutes.
"""

from __future__ import annotations

from typing import Any

import blurhash

from .components import ComponentCounts
from .errors import EncodeFailure
from .image_utils import DecodedImage, to_rgb_array
from .logging_utils import get_logger

_log = get_logger("encoder")


def encode_image(image: DecodedImage, components: ComponentCounts, *, backend: Any = None) -> str:
    """Encode ``image`` with ``components`` and return the BlurHash string.

    Any failure of the backend surfaces as :class:`EncodeFailure`.
    """

    backend = backend if backend is not None else blurhash
    rgb = to_rgb_array(image)
    _log.debug(
        "Encoding {}x{} image with components {}x{}",
        image.width,
        image.height,
        components.x,
        components.y,
    )
    try:
        result = backend.encode(rgb, components.x, components.y)
    except Exception as exc:
        raise EncodeFailure(f"Error during BlurHash encoding: {exc}") from exc
    if not isinstance(result, str) or not result:
        raise EncodeFailure("Error during BlurHash encoding: encoder returned no hash")
    return result


__all__ = ["encode_image"]
