"""MCP tool for summarising YouTube videos with DeepSRT.

The ``get_summary`` tool looks up the video, picks its best caption
track, and asks the DeepSRT service for a narrative or bullet-point
summary in the requested language.  The video title is translated into
the same language in parallel.  The result is Markdown.
"""

from __future__ import annotations

import logging

import requests
from mcp.server.fastmcp.exceptions import ToolError

from config import Config
from server import mcp  # Shared FastMCP instance
from tools.transcript_tools import resolve_video_id
from utils.errors import DeepSRTError
from utils.formatting import format_summary
from utils.summarizer import summarize_video
from utils.video_transcript import choose_caption_track, get_video_info

logger = logging.getLogger(__name__)


def summary_markdown(video: str, lang: str, mode: str) -> str:
    """Summarise ``video`` and format the result."""
    video_id = resolve_video_id(video)
    lang = lang or Config.DEFAULT_SUMMARY_LANG
    mode = mode or Config.DEFAULT_SUMMARY_MODE
    info = get_video_info(video_id)
    # The summary language is the output language; captions are still
    # picked by the default transcript language.
    track = choose_caption_track(info, Config.DEFAULT_TRANSCRIPT_LANG)
    result = summarize_video(video_id, info.title, track, lang, mode)
    return format_summary(info, result.translated_title, result.summary, lang, mode)


@mcp.tool()
def get_summary(video_id: str, lang: str = "zh-tw", mode: str = "narrative") -> str:
    """Get an AI-generated summary of a YouTube video.

    Args:
        video_id: A YouTube video ID or a full YouTube URL.
        lang: Language to write the summary in (default ``"zh-tw"``).
        mode: ``"narrative"`` for prose or ``"bullet"`` for a
            bullet-point list (default ``"narrative"``).

    Returns:
        Markdown with the translated title, author, duration, language,
        mode and the summary text.
    """
    try:
        return summary_markdown(video_id, lang, mode)
    except (DeepSRTError, requests.RequestException) as e:
        logger.warning("get_summary failed for %r: %s", video_id, e)
        raise ToolError(f"Error getting summary: {e}") from e
