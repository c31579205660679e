"""
OpenGraph builder tests.

Covers default merging, type-detail dispatch, scalar-or-sequence
normalisation and fail-fast errors for values that cannot be normalised.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from urllib.parse import urlparse

import pytest
from pydantic import AnyUrl

from seo_meta.components.opengraph import (
    ArticleDetail,
    Audio,
    BookDetail,
    Image,
    OpenGraph,
    OpenGraphBuildError,
    ProfileDetail,
    Video,
    Website,
    build_open_graph,
    normalize_datetime,
    wrap,
)


class TestMergeDefaults:
    """Attributes override configuration defaults per key."""

    def test_defaults_fill_missing_keys(self, imdb_config) -> None:
        """site_name comes from the defaults."""
        og = build_open_graph({"title": "X"}, imdb_config.get_defaults())

        assert og.site_name == "IMDb"
        assert og.title == "X"

    def test_attributes_override_defaults(self) -> None:
        og = build_open_graph(
            {"site_name": "Page Site", "locale": "fr_FR"},
            {"site_name": "IMDb", "locale": "en_US"},
        )

        assert og.site_name == "Page Site"
        assert og.locale == "fr_FR"

    def test_merge_is_shallow(self) -> None:
        """A page image replaces the default image wholesale."""
        og = build_open_graph(
            {"image": "https://example.com/page.jpg"},
            {"image": {"url": "https://example.com/default.jpg", "width": 1200}},
        )

        assert og.image == ("https://example.com/page.jpg",)

    def test_no_defaults(self) -> None:
        og = build_open_graph({"title": "X"})

        assert og.title == "X"
        assert og.site_name is None

    def test_inputs_are_not_mutated(self) -> None:
        attrs = {"title": "X", "author": "Alice", "type": "article"}
        defaults = {"site_name": "IMDb"}

        build_open_graph(attrs, defaults)

        assert attrs == {"title": "X", "author": "Alice", "type": "article"}
        assert defaults == {"site_name": "IMDb"}


class TestFieldDefaults:
    """Record defaults when nothing is supplied."""

    def test_empty_attributes(self) -> None:
        og = build_open_graph({})

        assert og.type == "website"
        assert og.description == ""
        assert og.determiner == "blank"
        assert og.title is None
        assert og.url is None
        assert og.image == ()
        assert og.audio == ()
        assert og.video == ()
        assert og.locale_alternate == ()

    def test_equals_default_record(self) -> None:
        assert build_open_graph({}) == OpenGraph()

    def test_explicit_none_type_is_website(self) -> None:
        assert build_open_graph({"type": None}).type == "website"

    def test_blank_determiner_from_empty_string(self) -> None:
        assert build_open_graph({"determiner": ""}).determiner == "blank"

    def test_determiner_kept(self) -> None:
        assert build_open_graph({"determiner": "the"}).determiner == "the"


class TestTypeDispatch:
    """The detail record always matches the resolved type."""

    def test_website_has_no_detail(self) -> None:
        og = build_open_graph({"type": "website", "author": "Ignored"})

        assert isinstance(og.detail, Website)
        assert og.type_detail is None

    def test_article_detail(self) -> None:
        published = datetime(2024, 3, 1, 9, 30, tzinfo=UTC)
        og = build_open_graph(
            {
                "type": "article",
                "published_time": published,
                "section": "Tech",
                "author": ["Alice", "Bob"],
                "tag": "news",
                "isbn": "ignored",
            }
        )

        assert og.type == "article"
        assert og.type_detail == ArticleDetail(
            published_time=published,
            section="Tech",
            author=("Alice", "Bob"),
            tag=("news",),
        )

    def test_book_detail(self) -> None:
        og = build_open_graph(
            {
                "type": "book",
                "release_date": date(2011, 5, 2),
                "isbn": "978-3-16-148410-0",
                "author": "Ann Author",
                "section": "ignored",
            }
        )

        assert og.type == "book"
        assert og.type_detail == BookDetail(
            release_date=date(2011, 5, 2),
            isbn="978-3-16-148410-0",
            author=("Ann Author",),
        )

    def test_profile_detail(self) -> None:
        og = build_open_graph(
            {"type": "profile", "first_name": "Ada", "last_name": "Lovelace", "username": "ada"}
        )

        assert og.type == "profile"
        assert og.type_detail == ProfileDetail(
            first_name="Ada", last_name="Lovelace", username="ada"
        )

    def test_type_from_defaults(self) -> None:
        og = build_open_graph({"author": "Alice"}, {"type": "article"})

        assert og.type == "article"
        assert isinstance(og.type_detail, ArticleDetail)
        assert og.type_detail.author == ("Alice",)

    def test_detail_fields_never_come_from_defaults(self) -> None:
        og = build_open_graph({"type": "article"}, {"author": "Default Author"})

        assert isinstance(og.type_detail, ArticleDetail)
        assert og.type_detail.author == ()

    def test_matching_explicit_detail_is_used(self) -> None:
        detail = BookDetail(isbn="123")
        og = build_open_graph({"type": "book", "type_detail": detail})

        assert og.type_detail is detail

    def test_mismatched_explicit_detail_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"type": "article", "type_detail": BookDetail()})

        assert exc_info.value.field == "type_detail"
        assert exc_info.value.code == "detail_mismatch"

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"type": "video.movie"})

        assert exc_info.value.code == "invalid_type"

    def test_unknown_determiner_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"determiner": "some"})

        assert exc_info.value.field == "determiner"


class TestSequenceNormalisation:
    """Scalar-or-sequence fields become tuples at build time."""

    def test_wrap(self) -> None:
        assert wrap(None) == ()
        assert wrap("en_US") == ("en_US",)
        assert wrap(["en_US", "fr_FR"]) == ("en_US", "fr_FR")
        assert wrap({"url": "a.jpg"}) == ({"url": "a.jpg"},)

    def test_locale_alternate_scalar(self) -> None:
        assert build_open_graph({"locale_alternate": "en_US"}).locale_alternate == ("en_US",)

    def test_locale_alternate_list_keeps_order(self) -> None:
        og = build_open_graph({"locale_alternate": ["fr_FR", "en_US", "de_DE"]})

        assert og.locale_alternate == ("fr_FR", "en_US", "de_DE")

    def test_none_elements_dropped_from_strings(self) -> None:
        og = build_open_graph({"type": "article", "tag": ["a", None, "b"]})

        assert isinstance(og.type_detail, ArticleDetail)
        assert og.type_detail.tag == ("a", "b")

    def test_nested_sequence_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError):
            build_open_graph({"locale_alternate": [["en_US"]]})

    def test_generator_consumed_in_order(self) -> None:
        og = build_open_graph({"locale_alternate": (code for code in ["en_US", "fr_FR"])})

        assert og.locale_alternate == ("en_US", "fr_FR")

    def test_dict_keys_consumed_in_order(self) -> None:
        og = build_open_graph({"type": "article", "tag": {"python": 1, "web": 2}.keys()})

        assert isinstance(og.type_detail, ArticleDetail)
        assert og.type_detail.tag == ("python", "web")

    def test_set_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"locale_alternate": {"en_US"}})

        assert exc_info.value.field == "locale_alternate"
        assert exc_info.value.code == "unordered_sequence"

    def test_set_of_media_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"image": frozenset({"a.jpg"})})

        assert exc_info.value.field == "image"

    def test_numbers_stringified(self) -> None:
        og = build_open_graph({"type": "book", "tag": [2024, "fiction"]})

        assert isinstance(og.type_detail, BookDetail)
        assert og.type_detail.tag == ("2024", "fiction")

    def test_non_string_element_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"type": "article", "author": [object()]})

        assert exc_info.value.field == "author"
        assert exc_info.value.code == "invalid_value"

    def test_parsed_url_is_scalar(self) -> None:
        og = build_open_graph({"image": urlparse("https://example.com/a.jpg")})

        assert og.image == ("https://example.com/a.jpg",)


class TestMediaNormalisation:
    """image/audio/video elements: URLs, records or mappings."""

    def test_plain_url(self) -> None:
        og = build_open_graph({"image": "https://example.com/rock.jpg"})

        assert og.image == ("https://example.com/rock.jpg",)

    def test_mapping_becomes_record(self) -> None:
        og = build_open_graph(
            {
                "image": {"url": "a.jpg", "width": "100", "height": 50, "caption": "ignored"},
                "video": [{"url": "v.mp4", "mime": "video/mp4"}],
                "audio": {"url": "a.mp3", "mime": "audio/mpeg"},
            }
        )

        assert og.image == (Image(url="a.jpg", width=100, height=50),)
        assert og.video == (Video(url="v.mp4", mime="video/mp4"),)
        assert og.audio == (Audio(url="a.mp3", mime="audio/mpeg"),)

    def test_records_kept(self) -> None:
        image = Image(url="a.jpg")
        og = build_open_graph({"image": [image, "b.jpg"]})

        assert og.image == (image, "b.jpg")

    def test_wrong_media_record_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"image": Video(url="v.mp4")})

        assert exc_info.value.code == "invalid_media"

    def test_invalid_dimension_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"image": {"url": "a.jpg", "width": "wide"}})

        assert exc_info.value.field == "image.width"

    def test_negative_dimension_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"image": {"url": "a.jpg", "width": -5}})

        assert exc_info.value.code == "invalid_dimension"

    def test_whole_float_dimension_accepted(self) -> None:
        og = build_open_graph({"video": {"url": "v.mp4", "width": 1200.0, "height": 630.0}})

        assert og.video == (Video(url="v.mp4", width=1200, height=630),)

    def test_fractional_float_dimension_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"image": {"url": "a.jpg", "height": 630.5}})

        assert exc_info.value.field == "image.height"

    def test_bool_dimension_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError):
            build_open_graph({"image": {"url": "a.jpg", "width": True}})


class TestUrlNormalisation:
    """URL-typed values are stringified; strings are literal."""

    def test_parse_result(self) -> None:
        og = build_open_graph({"url": urlparse("https://example.com/rock?x=1")})

        assert og.url == "https://example.com/rock?x=1"

    def test_pydantic_url(self) -> None:
        og = build_open_graph({"url": AnyUrl("https://example.com/rock")})

        assert og.url == "https://example.com/rock"

    def test_relative_string_kept(self) -> None:
        assert build_open_graph({"url": "/rock"}).url == "/rock"

    def test_non_url_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"url": 42})

        assert exc_info.value.code == "invalid_url"


class TestDateTimeNormalisation:
    """Date/time values are coerced at build time."""

    def test_date_string(self) -> None:
        assert normalize_datetime("release_date", "2011-05-02") == date(2011, 5, 2)

    def test_datetime_string(self) -> None:
        value = normalize_datetime("published_time", "2024-03-01T09:30:00+00:00")

        assert value == datetime(2024, 3, 1, 9, 30, tzinfo=UTC)

    def test_datetime_passthrough(self) -> None:
        value = datetime(2024, 3, 1, 9, 30)

        assert normalize_datetime("published_time", value) is value

    def test_invalid_string_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError) as exc_info:
            build_open_graph({"type": "article", "published_time": "last tuesday"})

        assert exc_info.value.field == "published_time"
        assert exc_info.value.code == "invalid_datetime"

    def test_invalid_type_rejected(self) -> None:
        with pytest.raises(OpenGraphBuildError):
            build_open_graph({"type": "book", "release_date": 2011})

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            build_open_graph({"type": "book", "release_date": "soon"})


class TestUnknownKeys:
    """Unknown keys are ignored and logged."""

    def test_unknown_key_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="seo_meta.components.opengraph._impl")

        og = build_open_graph({"title": "X", "colour": "blue"}, {"theme": "dark"})

        assert og.title == "X"
        assert "'colour'" in caplog.text
        assert "'theme'" in caplog.text

    def test_detail_keys_not_reported(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="seo_meta.components.opengraph._impl")

        build_open_graph({"type": "article", "author": "Alice"})

        assert "'author'" not in caplog.text


class TestImmutability:
    def test_record_is_frozen(self) -> None:
        og = build_open_graph({"title": "X"})

        with pytest.raises(AttributeError):
            og.title = "Y"  # type: ignore[misc]
