"""
OpenGraph builder and renderer - functional core.

Key behaviors:
- Merges configuration defaults with page attributes (attributes win, shallow)
- Dispatches on ``type`` to build the matching detail record
- Normalises scalar-or-sequence fields to tuples at build time
- Renders a record to an ordered tuple of MetaTag emissions
- Pure functions: same inputs always produce same outputs

Rendering order is fixed: consumers snapshot the emitted markup.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import fields
from datetime import date, datetime
from typing import Any, TypeVar
from urllib.parse import ParseResult, SplitResult

from pydantic import AnyUrl

from .models import (
    DETERMINERS,
    OPEN_GRAPH_TYPES,
    ArticleDetail,
    Audio,
    BookDetail,
    Determiner,
    Image,
    MediaItem,
    MetaTag,
    OpenGraph,
    OpenGraphBuildError,
    OpenGraphDetail,
    OpenGraphType,
    ProfileDetail,
    Video,
    Website,
)

logger = logging.getLogger(__name__)

MediaT = TypeVar("MediaT", Image, Audio, Video)

RECORD_FIELDS = frozenset(
    {
        "title",
        "type",
        "type_detail",
        "url",
        "description",
        "determiner",
        "image",
        "audio",
        "video",
        "locale",
        "locale_alternate",
        "site_name",
    }
)

DETAIL_FIELDS = frozenset(
    f.name for cls in (ArticleDetail, BookDetail, ProfileDetail) for f in fields(cls)
)


# --- Value normalisation ---


def wrap(value: Any, field: str = "value") -> tuple[Any, ...]:
    """
    Normalise scalar-or-sequence to a tuple.

    None becomes an empty tuple and any ordered iterable (list, tuple,
    generator, dict view) is consumed in order. Strings, bytes, mappings and
    parsed URLs are scalars and become a one-element tuple. Sets have no
    order and are rejected.
    """
    if value is None:
        return ()
    if isinstance(value, (set, frozenset)):
        raise OpenGraphBuildError(
            field, "unordered_sequence", f"Field '{field}' must be an ordered sequence, got a set"
        )
    if isinstance(value, (str, bytes, Mapping, ParseResult, SplitResult)):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(value)
    return (value,)


def normalize_strings(field: str, value: Any) -> tuple[str, ...]:
    """Wrap a scalar-or-sequence of strings, dropping None elements."""
    result: list[str] = []
    for item in wrap(value, field):
        if item is None:
            continue
        if isinstance(item, str):
            result.append(item)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            result.append(str(item))
        else:
            raise OpenGraphBuildError(
                field, "invalid_value", f"Field '{field}' must contain strings, got {item!r}"
            )
    return tuple(result)


def normalize_url(field: str, value: Any) -> str | None:
    """Stringify a URL-typed value. Plain strings are taken literally."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (ParseResult, SplitResult)):
        return value.geturl()
    if isinstance(value, AnyUrl):
        return str(value)
    raise OpenGraphBuildError(
        field, "invalid_url", f"Field '{field}' must be a URL or string, got {type(value).__name__}"
    )


def normalize_datetime(field: str, value: Any) -> date | None:
    """
    Coerce a date/time value to ``date`` or ``datetime``.

    ISO 8601 strings are parsed; a bare calendar date stays a ``date`` so it
    renders without a time-of-day.
    """
    if value is None or isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise OpenGraphBuildError(
                field,
                "invalid_datetime",
                f"Field '{field}' is not an ISO 8601 date/time: {value!r}",
            ) from e
    raise OpenGraphBuildError(
        field,
        "invalid_datetime",
        f"Field '{field}' must be a date or datetime, got {type(value).__name__}",
    )


def normalize_dimension(field: str, value: Any) -> int | None:
    """Pixel dimension as int. Digit strings and whole floats are accepted."""
    if value is None:
        return None
    if isinstance(value, bool):
        pass
    elif isinstance(value, int) and value >= 0:
        return value
    elif isinstance(value, float) and value.is_integer() and value >= 0:
        return int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise OpenGraphBuildError(
        field, "invalid_dimension", f"Field '{field}' must be a non-negative integer, got {value!r}"
    )


def to_iso8601(value: Any, field: str = "datetime") -> str:
    """Canonical combined date-time string for a date/time value."""
    normalized = normalize_datetime(field, value)
    if normalized is None:
        raise OpenGraphBuildError(field, "invalid_datetime", f"Field '{field}' has no value")
    return normalized.isoformat()


# --- Media ---


def _build_media(cls: type[MediaT], field: str, data: Mapping[str, Any]) -> MediaT:
    known = {f.name for f in fields(cls)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.debug("Ignoring unknown %s attribute %r", field, key)
            continue
        if key in ("url", "secure_url"):
            kwargs[key] = normalize_url(f"{field}.{key}", value)
        elif key in ("width", "height"):
            kwargs[key] = normalize_dimension(f"{field}.{key}", value)
        else:
            kwargs[key] = value
    return cls(**kwargs)


def normalize_media(field: str, value: Any, cls: type[MediaT]) -> tuple[MediaItem, ...]:
    """
    Normalise an image/audio/video attribute into a tuple of media items.

    Each element may be a URL, a record of the matching media class, or a
    mapping describing one.
    """
    items: list[MediaItem] = []
    for item in wrap(value, field):
        if item is None or isinstance(item, cls):
            items.append(item)
        elif isinstance(item, Mapping):
            items.append(_build_media(cls, field, item))
        elif isinstance(item, (Image, Audio, Video)):
            raise OpenGraphBuildError(
                field,
                "invalid_media",
                f"Field '{field}' expects {cls.__name__} records, got {type(item).__name__}",
            )
        else:
            items.append(normalize_url(field, item))
    return tuple(items)


# --- Type detail builders ---


def build_article(attrs: Mapping[str, Any]) -> ArticleDetail:
    """Build article detail from the attributes it recognises."""
    return ArticleDetail(
        published_time=normalize_datetime("published_time", attrs.get("published_time")),
        modified_time=normalize_datetime("modified_time", attrs.get("modified_time")),
        expiration_time=normalize_datetime("expiration_time", attrs.get("expiration_time")),
        section=attrs.get("section"),
        author=normalize_strings("author", attrs.get("author")),
        tag=normalize_strings("tag", attrs.get("tag")),
    )


def build_book(attrs: Mapping[str, Any]) -> BookDetail:
    """Build book detail from the attributes it recognises."""
    return BookDetail(
        release_date=normalize_datetime("release_date", attrs.get("release_date")),
        isbn=attrs.get("isbn"),
        author=normalize_strings("author", attrs.get("author")),
        tag=normalize_strings("tag", attrs.get("tag")),
    )


def build_profile(attrs: Mapping[str, Any]) -> ProfileDetail:
    """Build profile detail from the attributes it recognises."""
    return ProfileDetail(
        first_name=attrs.get("first_name"),
        last_name=attrs.get("last_name"),
        username=attrs.get("username"),
        gender=attrs.get("gender"),
    )


DETAIL_BUILDERS: dict[OpenGraphType, Callable[[Mapping[str, Any]], OpenGraphDetail]] = {
    "website": lambda _attrs: Website(),
    "article": build_article,
    "book": build_book,
    "profile": build_profile,
}

DETAIL_CLASSES: dict[OpenGraphType, type] = {
    "website": Website,
    "article": ArticleDetail,
    "book": BookDetail,
    "profile": ProfileDetail,
}


def _resolve_type(value: Any) -> OpenGraphType:
    if value is None:
        return "website"
    if value not in OPEN_GRAPH_TYPES:
        raise OpenGraphBuildError(
            "type",
            "invalid_type",
            f"Field 'type' must be one of: {', '.join(OPEN_GRAPH_TYPES)}",
        )
    return value


def _resolve_determiner(value: Any) -> Determiner:
    if value is None or value == "":
        return "blank"
    if value not in DETERMINERS:
        raise OpenGraphBuildError(
            "determiner",
            "invalid_determiner",
            f"Field 'determiner' must be one of: {', '.join(DETERMINERS)}",
        )
    return value


def _log_ignored(source: str, attrs: Mapping[str, Any]) -> None:
    for key in attrs:
        if key not in RECORD_FIELDS and key not in DETAIL_FIELDS:
            logger.debug("Ignoring unknown OpenGraph %s key %r", source, key)


# --- Builder ---


def build_open_graph(
    attributes: Mapping[str, Any],
    defaults: Mapping[str, Any] | None = None,
) -> OpenGraph:
    """
    Build an OpenGraph record.

    Args:
        attributes: Page attributes, any subset of the record and detail fields
        defaults: Configuration defaults, overridden key by key by attributes

    Returns:
        Immutable OpenGraph record

    Raises:
        OpenGraphBuildError: If a value cannot be normalised
    """
    defaults = defaults or {}
    _log_ignored("default", defaults)
    _log_ignored("attribute", attributes)

    merged: dict[str, Any] = {**defaults, **attributes}
    og_type = _resolve_type(merged.get("type"))

    # Detail fields come from the page attributes only, never from defaults.
    explicit = merged.get("type_detail")
    if explicit is None:
        detail = DETAIL_BUILDERS[og_type](attributes)
    elif type(explicit) is DETAIL_CLASSES[og_type]:
        detail = explicit
    else:
        raise OpenGraphBuildError(
            "type_detail",
            "detail_mismatch",
            f"type_detail {type(explicit).__name__} does not match type '{og_type}'",
        )

    return OpenGraph(
        title=merged.get("title"),
        detail=detail,
        url=normalize_url("url", merged.get("url")),
        description=merged.get("description", ""),
        determiner=_resolve_determiner(merged.get("determiner")),
        image=normalize_media("image", merged.get("image"), Image),
        audio=normalize_media("audio", merged.get("audio"), Audio),
        video=normalize_media("video", merged.get("video"), Video),
        locale=merged.get("locale"),
        locale_alternate=normalize_strings("locale_alternate", merged.get("locale_alternate")),
        site_name=merged.get("site_name"),
    )


# --- Renderers ---


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional(tags: list[MetaTag], prop: str, value: Any) -> None:
    if value is not None:
        tags.append(MetaTag(property=prop, content=_text(value)))


def _repeated(tags: list[MetaTag], prop: str, values: Iterable[Any]) -> None:
    for value in wrap(values):
        if value is not None:
            tags.append(MetaTag(property=prop, content=_text(value)))


def render_url(prop: str, content: Any) -> list[MetaTag]:
    """Zero tags for an absent URL, otherwise exactly one."""
    if content is None:
        return []
    if isinstance(content, str):
        return [MetaTag(property=prop, content=content)]
    return [MetaTag(property=prop, content=_text(normalize_url(prop, content)))]


def render_article(content: ArticleDetail) -> list[MetaTag]:
    tags: list[MetaTag] = []
    for name in ("published_time", "modified_time", "expiration_time"):
        value = getattr(content, name)
        if value is not None:
            tags.append(MetaTag(property=f"article:{name}", content=to_iso8601(value, name)))
    _optional(tags, "article:section", content.section)
    _repeated(tags, "article:author", content.author)
    _repeated(tags, "article:tag", content.tag)
    return tags


def render_book(content: BookDetail) -> list[MetaTag]:
    tags: list[MetaTag] = []
    if content.release_date is not None:
        tags.append(
            MetaTag(
                property="book:release_date",
                content=to_iso8601(content.release_date, "release_date"),
            )
        )
    _optional(tags, "book:isbn", content.isbn)
    _repeated(tags, "book:author", content.author)
    _repeated(tags, "book:tag", content.tag)
    return tags


def render_profile(content: ProfileDetail) -> list[MetaTag]:
    tags: list[MetaTag] = []
    _optional(tags, "profile:first_name", content.first_name)
    _optional(tags, "profile:last_name", content.last_name)
    _optional(tags, "profile:username", content.username)
    _optional(tags, "profile:gender", content.gender)
    return tags


def render_type_detail(detail: OpenGraphDetail) -> list[MetaTag]:
    """Tags for the type-specific block; empty for websites."""
    if isinstance(detail, BookDetail):
        return render_book(detail)
    elif isinstance(detail, ArticleDetail):
        return render_article(detail)
    elif isinstance(detail, ProfileDetail):
        return render_profile(detail)
    return []


def render_image(content: MediaItem) -> list[MetaTag]:
    if not isinstance(content, Image):
        return render_url("og:image", content)

    # The primary url is emitted even when empty.
    tags = [MetaTag(property="og:image", content=_text(content.url))]
    _optional(tags, "og:image:secure_url", content.secure_url)
    _optional(tags, "og:image:type", content.type)
    _optional(tags, "og:image:width", content.width)
    _optional(tags, "og:image:height", content.height)
    _optional(tags, "og:image:alt", content.alt)
    return tags


def render_video(content: MediaItem) -> list[MetaTag]:
    if not isinstance(content, Video):
        return render_url("og:video", content)

    tags = [MetaTag(property="og:video", content=_text(content.url))]
    _optional(tags, "og:video:secure_url", content.secure_url)
    _optional(tags, "og:video:type", content.mime)
    _optional(tags, "og:video:width", content.width)
    _optional(tags, "og:video:height", content.height)
    _optional(tags, "og:video:alt", content.alt)
    return tags


def render_audio(content: MediaItem) -> list[MetaTag]:
    if not isinstance(content, Audio):
        return render_url("og:audio", content)

    tags = [MetaTag(property="og:audio", content=_text(content.url))]
    _optional(tags, "og:audio:secure_url", content.secure_url)
    _optional(tags, "og:audio:type", content.mime)
    return tags


def render_open_graph(og: OpenGraph) -> tuple[MetaTag, ...]:
    """
    Render a record to its ordered meta tags.

    og:title, og:type and og:description are always emitted (absent title
    and description become empty content). Every other field is skipped
    when absent.
    """
    tags: list[MetaTag] = []

    _optional(tags, "og:site_name", og.site_name)
    tags.append(MetaTag(property="og:title", content=_text(og.title)))
    tags.append(MetaTag(property="og:type", content=og.type))
    tags.extend(render_url("og:url", og.url))
    tags.append(MetaTag(property="og:description", content=_text(og.description)))
    _optional(tags, "og:locale", og.locale)
    _repeated(tags, "og:locale:alternate", og.locale_alternate)

    tags.extend(render_type_detail(og.detail))

    for image in wrap(og.image):
        tags.extend(render_image(image))
    for audio in wrap(og.audio):
        tags.extend(render_audio(audio))
    for video in wrap(og.video):
        tags.extend(render_video(video))

    logger.debug("Rendered %d OpenGraph tags for type %s", len(tags), og.type)
    return tuple(tags)


def render_pairs(og: OpenGraph) -> list[tuple[str, str]]:
    """Rendered tags as plain (property, content) pairs."""
    return [tag.as_pair() for tag in render_open_graph(og)]
