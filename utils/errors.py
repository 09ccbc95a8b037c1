"""Exception types raised by the DeepSRT tools and their collaborators.

Every failure that should reach the user as a readable message derives
from :class:`DeepSRTError`.  Network failures additionally derive from
:class:`UpstreamError`, which records the service that failed so that
concurrent calls (summary and title translation) can be told apart.
The timed-text parser never raises any of these.
"""

from __future__ import annotations


class DeepSRTError(Exception):
    """Base class for all errors reported back to the caller."""


class InvalidArgumentError(DeepSRTError):
    """A tool or CLI argument was missing or malformed."""


class UpstreamError(DeepSRTError):
    """A network call to an external service failed at the transport level."""

    service = "upstream"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.service} request failed: {message}")


class MetadataRequestError(UpstreamError):
    service = "video metadata"


class CaptionFetchError(UpstreamError):
    service = "caption track"


class SummaryRequestError(UpstreamError):
    service = "summary"


class TitleTranslationError(UpstreamError):
    service = "title translation"


class VideoDetailsUnavailableError(DeepSRTError):
    """The metadata response carried no ``videoDetails`` block."""

    def __init__(self, message: str = "Could not fetch video details") -> None:
        super().__init__(message)


class NoCaptionsError(DeepSRTError):
    """The video exposes no caption tracks at all."""

    def __init__(self, message: str = "No captions available for this video") -> None:
        super().__init__(message)


class SummaryUnavailableError(DeepSRTError):
    """The summarization service answered without any summary text."""
