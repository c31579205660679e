"""
HTML meta tag emitter.

Turns rendered MetaTag sequences into ``<meta property=... />`` markup for a
page head. Host templates that escape on their own should consume the tags
directly instead.
"""

from __future__ import annotations

from collections.abc import Iterable

from seo_meta.components.opengraph import MetaTag


def render_meta_tags_html(tags: Iterable[MetaTag], separator: str = "\n") -> str:
    """Render MetaTags to an HTML meta tag string."""
    return separator.join(
        f'<meta property="{_escape_html(tag.property)}" content="{_escape_html(tag.content)}" />'
        for tag in tags
    )


def _escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )
