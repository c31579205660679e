"""
OpenGraph component models.

Record types for the Open Graph protocol plus the component input/output
models. Records are frozen: a record is built once per page render and never
mutated afterwards.

Type dispatch lives in the ``detail`` field. Its class decides ``og:type``,
so a record whose detail disagrees with its type cannot be constructed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, ClassVar, Literal

# --- Types ---

OpenGraphType = Literal["website", "article", "book", "profile"]
Determiner = Literal["a", "an", "the", "auto", "blank"]

OPEN_GRAPH_TYPES: tuple[OpenGraphType, ...] = ("website", "article", "book", "profile")
DETERMINERS: tuple[Determiner, ...] = ("a", "an", "the", "auto", "blank")


# --- Errors ---


class OpenGraphBuildError(ValueError):
    """Raised when an attribute cannot be shaped into the record."""

    def __init__(self, field: str, code: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.code = code
        self.message = message


@dataclass(frozen=True)
class OpenGraphValidationError:
    """OpenGraph validation error."""

    code: str
    message: str
    field: str | None = None


# --- Media ---


@dataclass(frozen=True)
class Image:
    """Structured og:image."""

    url: str | None = None
    secure_url: str | None = None
    type: str | None = None  # MIME type, e.g. "image/png"
    width: int | None = None
    height: int | None = None
    alt: str | None = None


@dataclass(frozen=True)
class Video:
    """Structured og:video."""

    url: str | None = None
    secure_url: str | None = None
    mime: str | None = None
    width: int | None = None
    height: int | None = None
    alt: str | None = None


@dataclass(frozen=True)
class Audio:
    """Structured og:audio."""

    url: str | None = None
    secure_url: str | None = None
    mime: str | None = None


MediaItem = str | Image | Audio | Video | None


# --- Type details ---


@dataclass(frozen=True)
class Website:
    """Marker detail for the default ``website`` type. Carries no fields."""

    og_type: ClassVar[OpenGraphType] = "website"


@dataclass(frozen=True)
class ArticleDetail:
    """article:* properties."""

    og_type: ClassVar[OpenGraphType] = "article"

    published_time: date | None = None
    modified_time: date | None = None
    expiration_time: date | None = None
    section: str | None = None
    author: tuple[str, ...] = ()
    tag: tuple[str, ...] = ()


@dataclass(frozen=True)
class BookDetail:
    """book:* properties."""

    og_type: ClassVar[OpenGraphType] = "book"

    release_date: date | None = None
    isbn: str | None = None
    author: tuple[str, ...] = ()
    tag: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProfileDetail:
    """profile:* properties."""

    og_type: ClassVar[OpenGraphType] = "profile"

    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    gender: str | None = None


TypeDetail = ArticleDetail | BookDetail | ProfileDetail
OpenGraphDetail = Website | ArticleDetail | BookDetail | ProfileDetail


# --- Root record ---


@dataclass(frozen=True)
class OpenGraph:
    """
    A built Open Graph object for one page.

    Scalar-or-sequence attributes are already normalised to tuples, URLs to
    strings and date/time values to ``date``/``datetime`` instances.
    """

    title: str | None = None
    detail: OpenGraphDetail = field(default_factory=Website)
    url: str | None = None
    description: str | None = ""
    determiner: Determiner = "blank"
    image: tuple[MediaItem, ...] = ()
    audio: tuple[MediaItem, ...] = ()
    video: tuple[MediaItem, ...] = ()
    locale: str | None = None
    locale_alternate: tuple[str, ...] = ()
    site_name: str | None = None

    @property
    def type(self) -> OpenGraphType:
        return self.detail.og_type

    @property
    def type_detail(self) -> TypeDetail | None:
        if isinstance(self.detail, Website):
            return None
        return self.detail


# --- Output tags ---


@dataclass(frozen=True)
class MetaTag:
    """One ``<meta property=... content=... />`` emission."""

    property: str
    content: str = ""

    def as_pair(self) -> tuple[str, str]:
        return (self.property, self.content)


# --- Input Models ---


@dataclass(frozen=True)
class BuildOpenGraphInput:
    """Input for building a record from page attributes."""

    attributes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderOpenGraphInput:
    """Input for rendering an already built record."""

    record: OpenGraph


@dataclass(frozen=True)
class MetaTagsInput:
    """Input for building and rendering in one step."""

    attributes: Mapping[str, Any] = field(default_factory=dict)


# --- Output Models ---


@dataclass(frozen=True)
class BuildOpenGraphOutput:
    """Output from record building."""

    record: OpenGraph | None
    errors: list[OpenGraphValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class RenderOpenGraphOutput:
    """Output containing the ordered meta tags."""

    tags: tuple[MetaTag, ...] = ()
    record: OpenGraph | None = None
    errors: list[OpenGraphValidationError] = field(default_factory=list)
    success: bool = True
