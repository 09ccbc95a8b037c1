"""Caption track descriptors and the logic that picks one to use.

The InnerTube player response lists every caption track of a video as
a loosely structured dictionary in which an auto-generated (ASR) track
is recognised only by the presence of ``"kind": "asr"``.  This module
turns those dictionaries into immutable :class:`CaptionTrack` records
with an explicit ``is_auto_generated`` flag and chooses the best track
for a requested language.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class CaptionTrack:
    """One caption track offered for a video."""

    language_code: str
    display_name: str
    is_auto_generated: bool
    fetch_locator: str

    @property
    def kind_label(self) -> str:
        return "auto-generated" if self.is_auto_generated else "manual"

    @classmethod
    def from_innertube(cls, raw: Dict[str, Any]) -> "CaptionTrack":
        """Build a track from one ``captionTracks`` entry."""
        language_code = raw.get("languageCode", "")
        return cls(
            language_code=language_code,
            display_name=_display_name(raw.get("name")) or language_code,
            is_auto_generated=raw.get("kind") == "asr",
            fetch_locator=raw.get("baseUrl", ""),
        )


def _display_name(name: Any) -> str:
    # Android clients send ``runs`` where the web client sends ``simpleText``.
    if not isinstance(name, dict):
        return ""
    if name.get("simpleText"):
        return name["simpleText"]
    return "".join(run.get("text", "") for run in name.get("runs", []))


def parse_caption_tracks(raw_tracks: Iterable[Dict[str, Any]]) -> List[CaptionTrack]:
    """Convert raw ``captionTracks`` entries, dropping ones with no ``baseUrl``."""
    tracks = [CaptionTrack.from_innertube(raw) for raw in raw_tracks]
    return [track for track in tracks if track.fetch_locator]


def select_best_caption(
    tracks: Sequence[CaptionTrack], preferred_lang: str = DEFAULT_LANGUAGE
) -> Optional[CaptionTrack]:
    """Pick the caption track that best matches ``preferred_lang``.

    Preference order, first match wins:

    1. a manual track in the preferred language;
    2. an auto-generated track in the preferred language;
    3. any manual track;
    4. any auto-generated track;
    5. the first track listed.

    Args:
        tracks: Available tracks in the order the platform listed them.
        preferred_lang: Language code to look for, e.g. ``"en"``.

    Returns:
        The chosen track, or ``None`` when ``tracks`` is empty.
    """
    if not tracks:
        return None
    rules = (
        ("manual, preferred language",
         lambda t: t.language_code == preferred_lang and not t.is_auto_generated),
        ("auto-generated, preferred language",
         lambda t: t.language_code == preferred_lang and t.is_auto_generated),
        ("manual, any language", lambda t: not t.is_auto_generated),
        ("auto-generated, any language", lambda t: t.is_auto_generated),
    )
    for reason, matches in rules:
        for track in tracks:
            if matches(track):
                logger.debug("Selected %s caption track (%s)", track.language_code, reason)
                return track
    logger.debug("Falling back to first caption track (%s)", tracks[0].language_code)
    return tracks[0]
