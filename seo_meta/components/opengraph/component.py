"""
OpenGraph component - og:* meta tag builder.

Builds an immutable OpenGraph record from page attributes merged over the
configured defaults, then renders it to ordered meta tags for the page head.

Invariants:
- Attributes override defaults per key (shallow merge)
- The detail block always matches og:type
- Absent fields produce no tags (except og:title and og:description)
- Either the full tag sequence is returned or none at all
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ._impl import build_open_graph, render_open_graph
from .models import (
    BuildOpenGraphInput,
    BuildOpenGraphOutput,
    MetaTagsInput,
    OpenGraphBuildError,
    OpenGraphValidationError,
    RenderOpenGraphInput,
    RenderOpenGraphOutput,
)
from .ports import OpenGraphConfigPort


def _defaults(config: OpenGraphConfigPort | None) -> Mapping[str, Any]:
    return config.get_defaults() if config else {}


def _to_validation_error(exc: OpenGraphBuildError) -> OpenGraphValidationError:
    return OpenGraphValidationError(code=exc.code, message=exc.message, field=exc.field)


# --- Component Entry Points ---


def run_build(
    inp: BuildOpenGraphInput,
    *,
    config: OpenGraphConfigPort | None = None,
) -> BuildOpenGraphOutput:
    """
    Build an OpenGraph record.

    Args:
        inp: Input containing the page attributes.
        config: Optional config port supplying site-wide defaults.

    Returns:
        BuildOpenGraphOutput with the record, or errors if a value was invalid.
    """
    try:
        record = build_open_graph(inp.attributes, _defaults(config))
    except OpenGraphBuildError as e:
        return BuildOpenGraphOutput(record=None, errors=[_to_validation_error(e)], success=False)

    return BuildOpenGraphOutput(record=record, errors=[], success=True)


def run_render(inp: RenderOpenGraphInput) -> RenderOpenGraphOutput:
    """
    Render a built record to ordered meta tags.

    Args:
        inp: Input containing the record.

    Returns:
        RenderOpenGraphOutput with the tags.
    """
    try:
        tags = render_open_graph(inp.record)
    except OpenGraphBuildError as e:
        return RenderOpenGraphOutput(
            tags=(), record=inp.record, errors=[_to_validation_error(e)], success=False
        )

    return RenderOpenGraphOutput(tags=tags, record=inp.record, errors=[], success=True)


def run_meta_tags(
    inp: MetaTagsInput,
    *,
    config: OpenGraphConfigPort | None = None,
) -> RenderOpenGraphOutput:
    """
    Build and render in one step.

    Args:
        inp: Input containing the page attributes.
        config: Optional config port supplying site-wide defaults.

    Returns:
        RenderOpenGraphOutput with the tags and the record they came from.
    """
    built = run_build(BuildOpenGraphInput(attributes=inp.attributes), config=config)
    if built.record is None:
        return RenderOpenGraphOutput(tags=(), record=None, errors=built.errors, success=False)

    return run_render(RenderOpenGraphInput(record=built.record))


def run(
    inp: BuildOpenGraphInput | RenderOpenGraphInput | MetaTagsInput,
    *,
    config: OpenGraphConfigPort | None = None,
) -> BuildOpenGraphOutput | RenderOpenGraphOutput:
    """
    Main entry point for the OpenGraph component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, BuildOpenGraphInput):
        return run_build(inp, config=config)
    elif isinstance(inp, RenderOpenGraphInput):
        return run_render(inp)
    elif isinstance(inp, MetaTagsInput):
        return run_meta_tags(inp, config=config)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
