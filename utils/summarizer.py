"""Client for the DeepSRT summarization service.

DeepSRT summarizes a video from its caption track.  The service is not
given the transcript itself: it receives the query string of the
selected caption track's ``baseUrl`` in an ``X-Transcript-Arg`` header
and fetches the captions on its own.  The same endpoint also translates
the video title.

``summarize_video`` issues the summary and title translation requests
concurrently and waits for both.  A failure in either is raised as its
own exception type so that the caller knows which request failed.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Type
from urllib.parse import urlsplit

import requests

from config import Config, SUMMARY_MODES
from utils.captions import CaptionTrack
from utils.errors import (
    InvalidArgumentError,
    SummaryRequestError,
    SummaryUnavailableError,
    TitleTranslationError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryResult:
    summary: str
    translated_title: str


def transcript_arg(track: CaptionTrack) -> str:
    """Return the query component of a track's fetch locator, unmodified."""
    return urlsplit(track.fetch_locator).query


def _call_worker(
    params: Dict[str, str], transcript_argument: str, error_type: Type[UpstreamError]
) -> Dict[str, Any]:
    url = f"{Config.DEEPSRT_API_BASE}/transcript2"
    headers = {
        "Accept": "application/json",
        "X-Transcript-Arg": transcript_argument,
        "User-Agent": Config.USER_AGENT,
    }
    logger.info("Calling DeepSRT %s for %s", params["action"], params["v"])
    try:
        resp = requests.get(url, params=params, headers=headers, timeout=Config.REQUEST_TIMEOUT)
        resp.raise_for_status()
        return resp.json()
    except (requests.RequestException, ValueError) as e:
        raise error_type(str(e)) from e


def request_summary(video_id: str, transcript_argument: str, lang: str, mode: str) -> str:
    """Ask DeepSRT for a summary of the video.

    Raises:
        SummaryRequestError: The request itself failed.
        SummaryUnavailableError: The service answered without summary text.
    """
    params = {"v": video_id, "action": "summarize", "lang": lang, "mode": mode}
    data = _call_worker(params, transcript_argument, SummaryRequestError)
    summary = data.get("summary") or data.get("result") or data.get("content")
    if not summary:
        raise SummaryUnavailableError(data.get("error") or "No summary generated")
    return summary


def request_title_translation(
    video_id: str, title: str, transcript_argument: str, lang: str, mode: str
) -> str:
    """Translate ``title`` into ``lang``; fall back to ``title`` when the service declines."""
    params = {"v": video_id, "txt": title, "action": "translate", "lang": lang, "mode": mode}
    data = _call_worker(params, transcript_argument, TitleTranslationError)
    if not data.get("success"):
        return title
    return data.get("result") or data.get("translation") or title


def summarize_video(
    video_id: str, title: str, track: CaptionTrack, lang: str, mode: str
) -> SummaryResult:
    """Summarize a video and translate its title in parallel.

    Args:
        video_id: The 11‑character YouTube video ID.
        title: Original video title, translated into ``lang``.
        track: Caption track whose locator DeepSRT reads captions from.
        lang: Target language of the summary, e.g. ``"zh-tw"``.
        mode: ``"narrative"`` or ``"bullet"``.

    Returns:
        The summary text and translated title.
    """
    if mode not in SUMMARY_MODES:
        raise InvalidArgumentError(
            f"Invalid summary mode {mode!r}; expected one of {', '.join(SUMMARY_MODES)}"
        )
    argument = transcript_arg(track)
    with ThreadPoolExecutor(max_workers=2) as pool:
        summary_future = pool.submit(request_summary, video_id, argument, lang, mode)
        title_future = pool.submit(
            request_title_translation, video_id, title, argument, lang, mode
        )
        # result() re-raises the worker's own exception, so each failure
        # keeps its type.  The summary is awaited first.
        summary = summary_future.result()
        translated_title = title_future.result()
    return SummaryResult(summary=summary, translated_title=translated_title)
