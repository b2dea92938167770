"""
Open Graph component - meta tag renderer.

Renders an OpenGraph record into an HTML fragment of <meta> elements for a
document head, together with diagnostics about omitted values.

Invariants:
- I1: Output is escaped HTML (no attribute or tag injection)
- I2: Tag order follows the Open Graph emission table
- I3: URL fields are only emitted when they carry an http(s) scheme
- I4: Rendering never fails; missing or invalid fields are omitted
"""

from __future__ import annotations

import logging

from ._impl import (
    LEGACY_IMAGE_FALLBACK_PROPERTY,
    build_meta_tags,
    collect_warnings,
    render_meta_tags_html,
)
from .models import RenderOpenGraphInput, RenderOpenGraphOutput, RenderWarning
from .ports import OpenGraphRulesPort

logger = logging.getLogger(__name__)


def run_render(
    inp: RenderOpenGraphInput,
    *,
    rules: OpenGraphRulesPort | None = None,
) -> RenderOpenGraphOutput:
    """
    Render Open Graph meta tags for one page.

    Args:
        inp: Input containing the OpenGraph record.
        rules: Optional rules port. Without it the historical og:type image
            fallback is used and diagnostics are collected.

    Returns:
        RenderOpenGraphOutput with the fragment, statements and warnings.
    """
    fallback_property = (
        rules.get_image_fallback_property() if rules else LEGACY_IMAGE_FALLBACK_PROPERTY
    )
    want_warnings = rules.collect_warnings() if rules else True

    tags = build_meta_tags(inp.og, image_fallback_property=fallback_property)

    warnings: list[RenderWarning] = []
    if want_warnings:
        warnings = collect_warnings(inp.og, image_fallback_property=fallback_property)
        for warning in warnings:
            logger.debug(
                "Open Graph %s on %s: %s", warning.code, warning.field_name, warning.message
            )

    logger.debug("Rendered %d Open Graph tags (%d warnings)", len(tags), len(warnings))

    return RenderOpenGraphOutput(
        html=render_meta_tags_html(tags),
        tags=tuple(tags),
        warnings=warnings,
        success=True,
    )


def run(
    inp: RenderOpenGraphInput,
    *,
    rules: OpenGraphRulesPort | None = None,
) -> RenderOpenGraphOutput:
    """
    Main entry point for the Open Graph component.

    Args:
        inp: Input object determining the operation.
        rules: Optional rules port for rendering configuration.

    Returns:
        RenderOpenGraphOutput with the rendered fragment.
    """
    if isinstance(inp, RenderOpenGraphInput):
        return run_render(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
