"""Markdown rendering."""

from __future__ import annotations

import markdown


def render_markdown(source: str) -> str:
    """Render Markdown source to an HTML fragment (standard syntax, no extensions)."""
    return markdown.markdown(source)
