"""Fetch YouTube video metadata, caption tracks and caption documents.

Metadata comes from YouTube's Innertube ``player`` endpoint, called
with an Android client context.  That single response carries the
video title, author and length together with every available caption
track.  Caption documents are then downloaded from the track's
``baseUrl`` and handed to :mod:`utils.timedtext` unchanged.

Every network failure is re-raised as a subclass of
:class:`utils.errors.UpstreamError` so that callers can tell which
call failed.  Nothing here retries.

Functions:
    extract_video_id(text: str) -> Optional[str]:
        Parse a YouTube URL (or bare ID) and return the video ID.

    get_video_info(video_id: str) -> VideoInfo:
        Look up title, author, length and caption tracks.

    fetch_caption_document(track: CaptionTrack) -> str:
        Download the raw timed-text document of a caption track.

    get_transcript(video_id: str, lang: str) -> TranscriptResult:
        Run the whole transcript path: metadata, track selection,
        download and parse.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from config import Config
from utils.captions import CaptionTrack, parse_caption_tracks, select_best_caption
from utils.errors import (
    CaptionFetchError,
    MetadataRequestError,
    NoCaptionsError,
    VideoDetailsUnavailableError,
)
from utils.timedtext import TranscriptSegment, parse_transcript_safely

logger = logging.getLogger(__name__)

# Patterns to match typical YouTube URL formats
_VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([A-Za-z0-9_-]{11})"),
    re.compile(r"youtube\.com/watch\?.*\bv=([A-Za-z0-9_-]{11})"),
]


@dataclass(frozen=True)
class VideoInfo:
    """Video details and caption tracks from one player response."""

    video_id: str
    title: str
    author: str
    length_seconds: int
    caption_tracks: List[CaptionTrack] = field(default_factory=list)


@dataclass(frozen=True)
class TranscriptResult:
    """Everything the transcript formatter needs."""

    video: VideoInfo
    track: CaptionTrack
    segments: List[TranscriptSegment]


def extract_video_id(text: str) -> Optional[str]:
    """Extract the YouTube video ID from a bare ID, full or shortened URL.

    Args:
        text: A video ID or a YouTube watch, short or embed URL.

    Returns:
        The 11‑character video ID if found, otherwise ``None``.

    Examples::

        >>> extract_video_id("https://www.youtube.com/watch?v=abc123def45")
        'abc123def45'
        >>> extract_video_id("https://youtu.be/abc123def45")
        'abc123def45'
        >>> extract_video_id("abc123def45")
        'abc123def45'
    """
    text = text.strip()
    if len(text) == 11 and "/" not in text and "=" not in text:
        return text
    for pattern in _VIDEO_ID_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def _player_request_body(video_id: str) -> Dict[str, Any]:
    return {
        "context": {
            "client": {
                "clientName": "ANDROID",
                "clientVersion": Config.INNERTUBE_CLIENT_VERSION,
                "androidSdkVersion": 30,
            }
        },
        "videoId": video_id,
    }


def get_video_info(video_id: str) -> VideoInfo:
    """Fetch title, author, length and caption tracks for a video.

    Raises:
        MetadataRequestError: The player request failed or returned
            something other than JSON.
        VideoDetailsUnavailableError: The response has no
            ``videoDetails`` (private, removed or region-locked video).
    """
    logger.info("Fetching video metadata for %s", video_id)
    try:
        resp = requests.post(
            Config.INNERTUBE_PLAYER_URL,
            json=_player_request_body(video_id),
            timeout=Config.REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        raise MetadataRequestError(str(e)) from e

    details = data.get("videoDetails")
    if not details:
        raise VideoDetailsUnavailableError()
    # Traverse the captions object to reach the track list
    raw_tracks = (
        data
        .get("captions", {})
        .get("playerCaptionsTracklistRenderer", {})
        .get("captionTracks", [])
    )
    try:
        length_seconds = int(details.get("lengthSeconds") or 0)
    except ValueError:
        length_seconds = 0
    return VideoInfo(
        video_id=details.get("videoId") or video_id,
        title=details.get("title", ""),
        author=details.get("author", ""),
        length_seconds=length_seconds,
        caption_tracks=parse_caption_tracks(raw_tracks),
    )


def choose_caption_track(video: VideoInfo, lang: str) -> CaptionTrack:
    """Select the track to use for ``video``, failing if it has none."""
    track = select_best_caption(video.caption_tracks, lang)
    if track is None:
        raise NoCaptionsError()
    logger.info(
        "Using %s caption track %r for %s", track.kind_label, track.language_code, video.video_id
    )
    return track


def fetch_caption_document(track: CaptionTrack) -> str:
    """Download the raw timed-text document for ``track``.

    The content type is not checked; the parser detects the document
    format itself.
    """
    try:
        resp = requests.get(track.fetch_locator, timeout=Config.REQUEST_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise CaptionFetchError(str(e)) from e
    return resp.text


def get_transcript(video_id: str, lang: Optional[str] = None) -> TranscriptResult:
    """Download and parse the best caption track of a video.

    Args:
        video_id: The 11‑character YouTube video ID.
        lang: Preferred caption language; defaults to
            ``Config.DEFAULT_TRANSCRIPT_LANG``.

    Returns:
        The video details, the chosen track and its parsed segments.
        ``segments`` may be empty when the track holds no speech.
    """
    video = get_video_info(video_id)
    track = choose_caption_track(video, lang or Config.DEFAULT_TRANSCRIPT_LANG)
    document = fetch_caption_document(track)
    segments = parse_transcript_safely(document, logger)
    if not segments:
        logger.warning("Caption track for %s produced no transcript segments", video_id)
    return TranscriptResult(video=video, track=track, segments=segments)
