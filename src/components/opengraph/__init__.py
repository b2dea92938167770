"""
Open Graph component - <meta property="og:*"> renderer.
"""

from ._impl import (
    IMAGE_FALLBACK_PROPERTIES,
    LEGACY_IMAGE_FALLBACK_PROPERTY,
    OPENGRAPH_RULES,
    FieldRule,
    GroupRule,
    build_meta_tags,
    collect_warnings,
    escape_attribute,
    is_valid_secure_url,
    is_valid_url,
    meta_tag_html,
    page_rules,
    render_meta_tags_html,
    render_opengraph,
)
from .component import run, run_render
from .models import (
    DETERMINER_A,
    DETERMINER_AN,
    DETERMINER_AUTO,
    DETERMINER_BLANK,
    DETERMINER_THE,
    KNOWN_DETERMINERS,
    LOCALE_DE_DE,
    LOCALE_EN_GB,
    LOCALE_EN_US,
    LOCALE_ES_ES,
    LOCALE_FR_FR,
    Audio,
    Determiner,
    Image,
    Locale,
    MetaTag,
    OpenGraph,
    RenderOpenGraphInput,
    RenderOpenGraphOutput,
    RenderWarning,
    Video,
)
from .ports import OpenGraphRulesPort

__all__ = [
    # Entry points
    "run",
    "run_render",
    # Pure functions
    "build_meta_tags",
    "collect_warnings",
    "escape_attribute",
    "is_valid_secure_url",
    "is_valid_url",
    "meta_tag_html",
    "page_rules",
    "render_meta_tags_html",
    "render_opengraph",
    # Rule tables
    "FieldRule",
    "GroupRule",
    "OPENGRAPH_RULES",
    "IMAGE_FALLBACK_PROPERTIES",
    "LEGACY_IMAGE_FALLBACK_PROPERTY",
    # Models
    "Audio",
    "Image",
    "MetaTag",
    "OpenGraph",
    "RenderOpenGraphInput",
    "RenderOpenGraphOutput",
    "RenderWarning",
    "Video",
    # Enumerations
    "Determiner",
    "DETERMINER_A",
    "DETERMINER_AN",
    "DETERMINER_AUTO",
    "DETERMINER_BLANK",
    "DETERMINER_THE",
    "KNOWN_DETERMINERS",
    "Locale",
    "LOCALE_DE_DE",
    "LOCALE_EN_GB",
    "LOCALE_EN_US",
    "LOCALE_ES_ES",
    "LOCALE_FR_FR",
    # Ports
    "OpenGraphRulesPort",
]
