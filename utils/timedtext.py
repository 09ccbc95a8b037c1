"""Parse YouTube timed-text caption documents into timestamped segments.

YouTube serves caption tracks in two shapes, and the parser detects
which one it was handed from the document itself:

* **Legacy flat text** – ``<transcript><text start="0" dur="2000">…``.
  Each ``<text>`` element holds the caption inline.  Word-timing ``<s>``
  tags may wrap parts of it; the tags are dropped and their text kept.

* **Syllable-segmented** (``srv3``) – a ``<timedtext format="3">`` root
  with ``<p t="1634" d="3360">`` paragraphs inside ``<body>``.  The
  paragraph text lives in ``<s>`` syllables.  A syllable that starts
  with a space begins a new word; any other syllable continues the word
  in progress.

Both shapes feed the same pipeline: decode entities per fragment, join
the fragments, collapse whitespace, drop annotations such as
``[Music]`` and ``♪♪♪``, and stamp the segment with its start offset.

The parser is a pure function of its input.  It skips fragments it
cannot make sense of instead of raising, and
:func:`parse_transcript_safely` turns anything unexpected into an empty
result plus a log record.

Functions:
    parse_transcript(document) -> List[TranscriptSegment]
    parse_transcript_safely(document, logger=None) -> List[TranscriptSegment]
    format_timestamp(milliseconds) -> str
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union


# Entities the caption service emits.  Anything else is left as-is.
HTML_ENTITIES: Dict[str, str] = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&nbsp;": " ",
}

# Instrumental-only passages.  Matched exactly, not as a heuristic.
MUSIC_ONLY_TEXT = "♪♪♪"

_ENTITY_RE = re.compile("|".join(re.escape(entity) for entity in HTML_ENTITIES))
_ANNOTATION_RE = re.compile(r"^\[.*\]$", re.S)
_TAG_RE = re.compile(r"<[^>]*>")

_TIMEDTEXT_ROOT_RE = re.compile(r"<timedtext\b")
_BODY_RE = re.compile(r"<body\b[^>]*>(.*?)</body>", re.S)
_PARAGRAPH_RE = re.compile(r"<p\b([^>]*?)(?<!/)>(.*?)</p>", re.S)
_PARAGRAPH_START_RE = re.compile(r'\bt="([^"]*)"')
_SYLLABLE_RE = re.compile(r"<s\b[^>]*?(?<!/)>(.*?)</s>", re.S)

_TEXT_RE = re.compile(r"<text\b([^>]*?)(?<!/)>(.*?)</text>", re.S)
_TEXT_START_RE = re.compile(r'\bstart="([^"]*)"')
# ASCII digits only; int() rejects superscripts that str.isdigit() accepts.
_START_DIGITS_RE = re.compile(r"[0-9]+")


class TimedTextVariant(enum.Enum):
    """The document shapes the parser understands."""

    LEGACY = "legacy"
    SYLLABLE = "syllable"


@dataclass(frozen=True)
class TranscriptSegment:
    """One caption line: where it starts and what it says."""

    start_ms: int
    text: str

    @property
    def timestamp(self) -> str:
        return format_timestamp(self.start_ms)


def format_timestamp(milliseconds: int) -> str:
    """Render a millisecond offset as ``[MM:SS]``.

    Minutes are not wrapped at the hour, so an offset of 3,661,000 ms
    renders as ``[61:01]``.

    Examples::

        >>> format_timestamp(90000)
        '[01:30]'
    """
    total_seconds = milliseconds // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"[{minutes:02d}:{seconds:02d}]"


def decode_entities(fragment: str) -> str:
    """Decode the fixed set of HTML entities in a single text fragment."""
    return _ENTITY_RE.sub(lambda match: HTML_ENTITIES[match.group(0)], fragment)


def detect_variant(document: str) -> TimedTextVariant:
    """Return which timed-text shape ``document`` is written in."""
    if _TIMEDTEXT_ROOT_RE.search(document):
        return TimedTextVariant.SYLLABLE
    return TimedTextVariant.LEGACY


# -----------------------------------------------------------------------------
# Variant-specific extraction.  Each extractor yields the raw start
# attribute and the raw (still entity-encoded) text fragments of every
# non-blank paragraph, in document order.

RawParagraph = Tuple[str, List[str]]


def _extract_legacy(document: str) -> Iterator[RawParagraph]:
    for match in _TEXT_RE.finditer(document):
        attrs, content = match.groups()
        if not content.strip():
            continue
        start = _TEXT_START_RE.search(attrs)
        if not start:
            continue
        # Splitting on tags keeps the text between word-timing spans.
        fragments = [piece for piece in _TAG_RE.split(content) if piece]
        yield start.group(1), fragments


def _extract_syllables(document: str) -> Iterator[RawParagraph]:
    body = _BODY_RE.search(document)
    if not body:
        return
    for match in _PARAGRAPH_RE.finditer(body.group(1)):
        attrs, content = match.groups()
        if not content.strip():
            continue
        start = _PARAGRAPH_START_RE.search(attrs)
        if not start:
            continue
        syllables = _SYLLABLE_RE.findall(content)
        if not syllables:
            continue
        yield start.group(1), syllables


def _join_fragments(fragments: List[str]) -> str:
    return "".join(fragments)


def _join_syllables(syllables: List[str]) -> str:
    words: List[str] = []
    current = ""
    for syllable in syllables:
        if syllable.startswith(" "):
            if current.strip():
                words.append(current.strip())
            current = syllable
        else:
            current += syllable
    if current.strip():
        words.append(current.strip())
    return " ".join(words)


_VARIANTS: Dict[
    TimedTextVariant,
    Tuple[Callable[[str], Iterator[RawParagraph]], Callable[[List[str]], str]],
] = {
    TimedTextVariant.LEGACY: (_extract_legacy, _join_fragments),
    TimedTextVariant.SYLLABLE: (_extract_syllables, _join_syllables),
}


# -----------------------------------------------------------------------------
# Shared segment assembly.


def _parse_start(raw: str) -> Optional[int]:
    raw = raw.strip()
    if not _START_DIGITS_RE.fullmatch(raw):
        return None
    return int(raw)


def _normalise_whitespace(text: str) -> str:
    return " ".join(text.split())


def _is_placeholder(text: str) -> bool:
    return not text or text == MUSIC_ONLY_TEXT or bool(_ANNOTATION_RE.match(text))


def parse_transcript(document: Union[str, bytes]) -> List[TranscriptSegment]:
    """Parse a timed-text caption document.

    Args:
        document: The complete caption document as served by the
            ``baseUrl`` of a caption track.  Bytes are decoded as UTF-8.

    Returns:
        Segments in document order.  The list is empty when the document
        has no usable captions, e.g. a music-only video.
    """
    if isinstance(document, bytes):
        document = document.decode("utf-8", errors="replace")
    extract, join = _VARIANTS[detect_variant(document)]
    segments: List[TranscriptSegment] = []
    for raw_start, fragments in extract(document):
        start_ms = _parse_start(raw_start)
        if start_ms is None:
            continue
        text = _normalise_whitespace(join([decode_entities(f) for f in fragments]))
        if _is_placeholder(text):
            continue
        segments.append(TranscriptSegment(start_ms=start_ms, text=text))
    return segments


def parse_transcript_safely(
    document: Union[str, bytes], logger: Optional[logging.Logger] = None
) -> List[TranscriptSegment]:
    """Like :func:`parse_transcript`, but never raises.

    An unexpected failure is logged on ``logger`` (or this module's
    logger) and reported as an empty transcript.
    """
    try:
        return parse_transcript(document)
    except Exception:  # pylint: disable=broad-except
        (logger or logging.getLogger(__name__)).exception(
            "Failed to parse caption document (%d chars); returning no segments",
            len(document),
        )
        return []
