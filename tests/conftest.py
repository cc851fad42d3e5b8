from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("BLURHASHER_CONFIG", raising=False)
    yield
    logger.remove()


@pytest.fixture
def png_bytes_factory():
    def _factory(width: int = 8, height: int = 6, color=(200, 40, 90, 255)) -> bytes:
        buffer = io.BytesIO()
        Image.new("RGBA", (width, height), color).save(buffer, format="PNG")
        return buffer.getvalue()

    return _factory


class FakeEncoder:
    """Stand-in for the ``blurhash`` module that records its arguments."""

    def __init__(self, result: str = "LEHV6nWB2yk8pyo0adR*.7kCMdnj") -> None:
        self.result = result
        self.calls: list[tuple[int, int, int, int]] = []
        self.images: list = []

    def encode(self, image, components_x, components_y):
        self.images.append(image)
        self.calls.append((components_x, components_y, len(image[0]), len(image)))
        return self.result


@pytest.fixture
def fake_encoder() -> FakeEncoder:
    return FakeEncoder()
