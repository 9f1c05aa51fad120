"""SSML helpers for spoken output.

The response builder wraps speech in ``<speak>`` itself; these helpers only
prepare the text that goes inside it.
"""

from __future__ import annotations

from xml.sax.saxutils import escape


def pause(seconds: int) -> str:
    """Return an SSML break of ``seconds`` length."""
    return f'<break time="{seconds}s"/>'


def to_ssml_text(text: str) -> str:
    """Escape free text (joke titles and bodies) for embedding in SSML."""
    return escape(text)


__all__ = ["pause", "to_ssml_text"]
