"""
Reusable prompts to guide the language model when using the DeepSRT tools.

They are registered with FastMCP via the ``@mcp.prompt()`` decorator.
When queried, Claude can consult this guidance before deciding which
tool to call.
"""

from __future__ import annotations

from server import mcp  # type: ignore


@mcp.prompt()
def video_tools_guidance() -> str:
    """
    Guidance on choosing between ``get_transcript`` and ``get_summary``.

    - Use ``get_transcript`` when the user wants to quote the video,
      find where something was said, or needs the full wording.  Pass
      the video ID or URL as ``video_id`` and, if the user asks for a
      specific caption language, its code as ``lang``.  Every line of
      the result starts with a ``[MM:SS]`` timestamp that can be cited
      back to the user.

    - Use ``get_summary`` when the user wants an overview.  ``lang``
      is the language the summary is written in (default ``zh-tw``),
      not the caption language.  Set ``mode`` to ``"bullet"`` for a
      bullet-point list or leave the default ``"narrative"``.

    - A transcript section reading "No transcript segments found"
      means the captions exist but contain no speech (for example a
      music video).  That is different from an error result, which
      means the video or its captions could not be fetched.

    Example:

    .. code-block:: json

        {
          "video_id": "https://youtu.be/dQw4w9WgXcQ",
          "lang": "en",
          "mode": "bullet"
        }
    """
    return (
        "Use `get_transcript` when the user needs the exact wording or timestamps of a YouTube "
        "video; pass the ID or URL as `video_id` and an optional caption language code as `lang`. "
        "Each line starts with a [MM:SS] timestamp you can cite. Use `get_summary` when the user "
        "wants an overview; its `lang` is the output language (default zh-tw) and `mode` is "
        "'narrative' or 'bullet'. 'No transcript segments found' means the captions hold no "
        "speech, whereas an error result means the video or captions could not be fetched."
    )
