"""Shared fixtures for the DeepSRT test suite.

The project uses a flat layout (``server``, ``tools``, ``utils`` at the
repository root), so the root is put on ``sys.path`` before any test
module imports it.  No test touches the network: the ``requests``
functions each client calls are replaced with fakes.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import pytest
import requests

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# Real srv3 captions, trimmed to three paragraphs.
SYLLABLE_SAMPLE = """<?xml version="1.0" encoding="utf-8" ?>
<timedtext format="3">
<head>
<ws id="0"/>
<ws id="1" mh="2" ju="0" sd="3"/>
<wp id="0"/>
<wp id="1" ap="6" ah="20" av="100" rc="2" cc="40"/>
</head>
<body>
<w t="0" id="1" wp="1" ws="1"/>
<p t="1634" d="3360" w="1"><s ac="0">wh</s><s t="33" ac="0">er</s><s t="67" ac="0">ev</s><s t="100" ac="0">er</s><s t="134" ac="0"> y</s><s t="167" ac="0">ou</s><s t="735" ac="0"> g</s><s t="768" ac="0">et</s><s t="901" ac="0"> y</s><s t="934" ac="0">ou</s><s t="967" ac="0">r </s><s t="1001" ac="0">po</s><s t="1034" ac="0">dc</s><s t="1067" ac="0">as</s><s t="1101" ac="0">ts</s><s t="1134" ac="0">.</s></p>
<p t="5572" d="1734" w="1"><s ac="0">&gt;&gt;</s><s t="33" ac="0"> W</s><s t="66" ac="0">el</s><s t="100" ac="0">co</s><s t="133" ac="0">me</s><s t="200" ac="0"> b</s><s t="233" ac="0">ac</s><s t="267" ac="0">k.</s><s t="300" ac="0"> O</s><s t="333" ac="0">ne</s><s t="1568" ac="0"> o</s><s t="1601" ac="0">f</s><s t="1634" ac="0"> t</s><s t="1668" ac="0">he</s></p>
<p t="7373" d="1267" w="1"><s ac="0">ye</s><s t="33" ac="0">ar</s><s t="67" ac="0">&#39;s</s><s t="301" ac="0"> h</s><s t="334" ac="0">ot</s><s t="367" ac="0">te</s><s t="401" ac="0">st</s><s t="434" ac="0"> I</s><s t="467" ac="0">PO</s><s t="501" ac="0">s.</s><s t="534" ac="0"> J</s><s t="567" ac="0">us</s><s t="601" ac="0">t</s></p>
</body>
</timedtext>"""

LEGACY_SAMPLE = """
<transcript>
  <text start="0" dur="2000">Hello world</text>
  <text start="2000" dur="3000">This is a test</text>
  <text start="5000" dur="2500">Final message</text>
</transcript>
"""

MANUAL_EN_URL = "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en&sig=abc"
ASR_EN_URL = "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en&kind=asr&sig=def"


class FakeResponse:
    """Just enough of ``requests.Response`` for the clients under test."""

    def __init__(
        self, json_data: Optional[Any] = None, text: str = "", status_code: int = 200
    ) -> None:
        self._json = json_data
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self) -> Any:
        if self._json is None:
            raise ValueError("Response is not JSON")
        return self._json


def make_player_response(tracks=None, **details: Any) -> Dict[str, Any]:
    video_details = {
        "videoId": "dQw4w9WgXcQ",
        "title": "Test Video",
        "author": "Test Author",
        "lengthSeconds": "212",
        "channelId": "UC123",
    }
    video_details.update(details)
    if tracks is None:
        tracks = [
            {
                "baseUrl": MANUAL_EN_URL,
                "name": {"simpleText": "English"},
                "vssId": ".en",
                "languageCode": "en",
                "isTranslatable": True,
            },
            {
                "baseUrl": ASR_EN_URL,
                "name": {"simpleText": "English (auto-generated)"},
                "vssId": "a.en",
                "languageCode": "en",
                "kind": "asr",
                "isTranslatable": True,
            },
        ]
    return {
        "videoDetails": video_details,
        "captions": {"playerCaptionsTracklistRenderer": {"captionTracks": tracks}},
    }


@pytest.fixture
def player_response() -> Dict[str, Any]:
    return make_player_response()


@pytest.fixture
def fake_youtube(monkeypatch, player_response):
    """Serve ``player_response`` for metadata and ``SYLLABLE_SAMPLE`` for captions.

    Returns a dict recording the calls made, which tests may also edit
    to change what is served.
    """
    state: Dict[str, Any] = {
        "player": player_response,
        "captions": SYLLABLE_SAMPLE,
        "posts": [],
        "gets": [],
    }

    def fake_post(url, json=None, timeout=None, **kwargs):
        state["posts"].append({"url": url, "json": json, "timeout": timeout})
        return FakeResponse(json_data=state["player"])

    def fake_get(url, timeout=None, **kwargs):
        state["gets"].append({"url": url, "timeout": timeout, **kwargs})
        return FakeResponse(text=state["captions"])

    monkeypatch.setattr(requests, "post", fake_post)
    monkeypatch.setattr(requests, "get", fake_get)
    return state
