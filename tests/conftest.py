from __future__ import annotations

import base64
import io
from pathlib import Path
import sys
from typing import List, Optional, Union

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from PIL import Image

from backend.llms.llm_strategy import VisionLLMStrategy


class FakeVisionLLM(VisionLLMStrategy):
    """Scripted vision model: replays replies (or raises) in call order."""

    def __init__(self, replies: List[Union[str, None, Exception]]):
        self.replies = list(replies)
        self.calls: List[tuple] = []

    def generate_from_image(self, image_data: str, prompt: str) -> Optional[str]:
        self.calls.append((image_data, prompt))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def is_available(self) -> bool:
        return True


@pytest.fixture()
def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 120, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture()
def png_data_url(png_bytes: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture()
def caption_reply() -> str:
    return (
        '[{"caption": "Sunset vibes 🌅", "hashtags": "#sunset #beach"},'
        ' {"caption": "Golden hour", "hashtags": ["#golden", "#hour"]},'
        ' {"caption": "Waves and light", "hashtags": ""}]'
    )
