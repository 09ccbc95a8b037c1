"""Render transcripts and summaries as Markdown for the assistant."""

from __future__ import annotations

from typing import Sequence

from utils.captions import CaptionTrack
from utils.timedtext import TranscriptSegment
from utils.video_transcript import VideoInfo

FOOTER = "---\n*Generated using DeepSRT MCP Server*"
EMPTY_TRANSCRIPT = "_No transcript segments found._"


def format_duration(length_seconds: int) -> str:
    """Format a video length as ``M:SS`` (minutes are not wrapped at the hour)."""
    minutes, seconds = divmod(max(length_seconds, 0), 60)
    return f"{minutes}:{seconds:02d}"


def format_transcript(
    video: VideoInfo, track: CaptionTrack, segments: Sequence[TranscriptSegment]
) -> str:
    """Render a parsed transcript below a short header about the video.

    An empty ``segments`` list is rendered as an explicit notice rather
    than an empty section.
    """
    if segments:
        body = "\n".join(f"{segment.timestamp} {segment.text}" for segment in segments)
    else:
        body = EMPTY_TRANSCRIPT
    # Two trailing spaces force Markdown line breaks in the header block.
    return (
        f"# {video.title}\n\n"
        f"**Author:** {video.author}  \n"
        f"**Duration:** {format_duration(video.length_seconds)}  \n"
        f"**Captions:** {track.display_name} ({track.kind_label})\n\n"
        f"## Transcript\n\n"
        f"{body}\n\n"
        f"{FOOTER}"
    )


def format_summary(video: VideoInfo, translated_title: str, summary: str, lang: str, mode: str) -> str:
    """Render a generated summary below the (translated) video title."""
    return (
        f"# {translated_title}\n\n"
        f"**Author:** {video.author}  \n"
        f"**Duration:** {format_duration(video.length_seconds)}  \n"
        f"**Language:** {lang}  \n"
        f"**Mode:** {mode}\n\n"
        f"## Summary\n\n"
        f"{summary}\n\n"
        f"{FOOTER}"
    )
