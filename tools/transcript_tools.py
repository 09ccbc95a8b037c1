"""MCP tool for retrieving timestamped YouTube transcripts.

This module exposes a single tool, ``get_transcript``, that accepts a
YouTube video ID or URL and returns the video's captions as Markdown,
one ``[MM:SS] text`` line per caption.  The caption track is chosen
by ``utils.captions.select_best_caption``: a manual track in the
requested language first, then an auto-generated one, then any other
track.

Example call:

.. code-block:: json

    {
      "video_id": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
      "lang": "en"
    }
"""

from __future__ import annotations

import logging

import requests
from mcp.server.fastmcp.exceptions import ToolError

from server import mcp  # Shared FastMCP instance
from utils.errors import DeepSRTError, InvalidArgumentError
from utils.formatting import format_transcript
from utils.video_transcript import extract_video_id, get_transcript as fetch_transcript

logger = logging.getLogger(__name__)


def resolve_video_id(video: str) -> str:
    """Return the video ID in ``video`` or raise :class:`InvalidArgumentError`."""
    video_id = extract_video_id(video or "")
    if not video_id:
        raise InvalidArgumentError("Invalid YouTube URL or video ID")
    return video_id


def transcript_markdown(video: str, lang: str) -> str:
    """Fetch, parse and format the transcript of ``video``.

    Raises the underlying :class:`DeepSRTError` on failure; the tool
    wrapper turns it into a ``ToolError``.
    """
    video_id = resolve_video_id(video)
    result = fetch_transcript(video_id, lang)
    return format_transcript(result.video, result.track, result.segments)


@mcp.tool()
def get_transcript(video_id: str, lang: str = "en") -> str:
    """Get the transcript of a YouTube video with timestamps.

    Args:
        video_id: A YouTube video ID or a full YouTube URL
            (``youtube.com/watch?v=``, ``youtu.be/`` or ``/embed/``).
        lang: Preferred caption language code (default ``"en"``).  If
            the video has no captions in this language, the best
            available track is used instead.

    Returns:
        Markdown with the video title, author, duration, the caption
        track used, and one ``[MM:SS] text`` line per caption.
    """
    try:
        return transcript_markdown(video_id, lang)
    except (DeepSRTError, requests.RequestException) as e:
        logger.warning("get_transcript failed for %r: %s", video_id, e)
        raise ToolError(f"Error getting transcript: {e}") from e
