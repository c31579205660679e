"""
OpenGraph component - og:* meta tag builder and renderer.
"""

from ._impl import (
    build_article,
    build_book,
    build_open_graph,
    build_profile,
    normalize_datetime,
    normalize_media,
    normalize_url,
    render_article,
    render_audio,
    render_book,
    render_image,
    render_open_graph,
    render_pairs,
    render_profile,
    render_type_detail,
    render_url,
    render_video,
    to_iso8601,
    wrap,
)
from .component import (
    run,
    run_build,
    run_meta_tags,
    run_render,
)
from .models import (
    DETERMINERS,
    OPEN_GRAPH_TYPES,
    ArticleDetail,
    Audio,
    BookDetail,
    BuildOpenGraphInput,
    BuildOpenGraphOutput,
    Determiner,
    Image,
    MediaItem,
    MetaTag,
    MetaTagsInput,
    OpenGraph,
    OpenGraphBuildError,
    OpenGraphType,
    OpenGraphValidationError,
    ProfileDetail,
    RenderOpenGraphInput,
    RenderOpenGraphOutput,
    TypeDetail,
    Video,
    Website,
)
from .ports import OpenGraphConfigPort

__all__ = [
    # Entry points
    "run",
    "run_build",
    "run_render",
    "run_meta_tags",
    # Input models
    "BuildOpenGraphInput",
    "RenderOpenGraphInput",
    "MetaTagsInput",
    # Output models
    "BuildOpenGraphOutput",
    "RenderOpenGraphOutput",
    "MetaTag",
    "OpenGraphValidationError",
    # Record models
    "OpenGraph",
    "Website",
    "ArticleDetail",
    "BookDetail",
    "ProfileDetail",
    "TypeDetail",
    "Image",
    "Audio",
    "Video",
    "MediaItem",
    "OpenGraphType",
    "Determiner",
    "OPEN_GRAPH_TYPES",
    "DETERMINERS",
    "OpenGraphBuildError",
    # Builder
    "build_open_graph",
    "build_article",
    "build_book",
    "build_profile",
    "normalize_datetime",
    "normalize_media",
    "normalize_url",
    "to_iso8601",
    "wrap",
    # Renderers
    "render_open_graph",
    "render_pairs",
    "render_url",
    "render_type_detail",
    "render_article",
    "render_book",
    "render_profile",
    "render_image",
    "render_audio",
    "render_video",
    # Ports
    "OpenGraphConfigPort",
]
