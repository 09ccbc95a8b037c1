"""
Entry point for the DeepSRT MCP server and its command-line mode.

Run without arguments (or with ``--server``) to start the MCP server
on stdio.  When running via Claude for Desktop, your configuration
should specify something akin to::

    "command": "python",
    "args": ["main.py"]

or use a tool like ``uv run`` if you have ``uv`` installed. The
server blocks until it is terminated by the client.

The same operations can be run once from a shell::

    python main.py get-transcript https://www.youtube.com/watch?v=dQw4w9WgXcQ --lang en
    python main.py get-summary dQw4w9WgXcQ --lang zh-tw --mode bullet
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from config import Config, SUMMARY_MODES


def configure_logging() -> None:
    # stdout carries the MCP stdio transport, so logs go to stderr.
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="deepsrt-mcp",
        description="YouTube transcripts and summaries, as an MCP server or from the shell.",
    )
    ap.add_argument(
        "--server", action="store_true", help="Run the MCP server on stdio (the default)."
    )
    sub = ap.add_subparsers(dest="command")

    transcript = sub.add_parser("get-transcript", help="Print a transcript with timestamps.")
    transcript.add_argument("video", help="YouTube video ID or URL.")
    transcript.add_argument(
        "--lang",
        default=Config.DEFAULT_TRANSCRIPT_LANG,
        help="Preferred caption language (default: %(default)s).",
    )

    summary = sub.add_parser("get-summary", help="Print a DeepSRT summary of a video.")
    summary.add_argument("video", help="YouTube video ID or URL.")
    summary.add_argument(
        "--lang",
        default=Config.DEFAULT_SUMMARY_LANG,
        help="Summary language (default: %(default)s).",
    )
    summary.add_argument(
        "--mode",
        choices=SUMMARY_MODES,
        default=Config.DEFAULT_SUMMARY_MODE,
        help="Summary style (default: %(default)s).",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        Config.validate()
    except ValueError as e:
        print(f"[error] Configuration: {e}", file=sys.stderr)
        return 1
    configure_logging()

    # Import the shared MCP server instance.  Use an absolute import so
    # that the module can be executed directly (``python main.py``) or via
    # uv (``uv run main.py``) without relying on package-relative imports.
    from server import mcp  # type: ignore
    from tools.summary_tools import summary_markdown
    from tools.transcript_tools import transcript_markdown
    from utils.errors import DeepSRTError

    if args.command is None:
        mcp.run()
        return 0

    try:
        if args.command == "get-transcript":
            output = transcript_markdown(args.video, args.lang)
        else:
            output = summary_markdown(args.video, args.lang, args.mode)
    except DeepSRTError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
