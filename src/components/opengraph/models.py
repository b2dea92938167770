"""
Open Graph component input/output models.

Covers the page record, its structured image/audio/video entries, the open
determiner/locale enumerations and the component DTOs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

# --- Open Enumerations ---

# Thin wrappers over str: the constants are conveniences, not validators.
Determiner = NewType("Determiner", str)

DETERMINER_BLANK = Determiner("")
DETERMINER_AUTO = Determiner("auto")
DETERMINER_A = Determiner("a")
DETERMINER_AN = Determiner("an")
DETERMINER_THE = Determiner("the")

KNOWN_DETERMINERS: frozenset[str] = frozenset(
    {DETERMINER_BLANK, DETERMINER_AUTO, DETERMINER_A, DETERMINER_AN, DETERMINER_THE}
)

Locale = NewType("Locale", str)

LOCALE_EN_US = Locale("en_US")
LOCALE_EN_GB = Locale("en_GB")
LOCALE_FR_FR = Locale("fr_FR")
LOCALE_DE_DE = Locale("de_DE")
LOCALE_ES_ES = Locale("es_ES")


# --- Structured Entries ---


@dataclass(frozen=True)
class Image:
    """One og:image block. Skipped entirely unless url is http(s)."""

    url: str = ""
    secure_url: str = ""
    type: str = ""  # MIME type, e.g. "image/png"
    width: int = 0
    height: int = 0
    alt: str = ""


@dataclass(frozen=True)
class Audio:
    """One og:audio block."""

    url: str = ""
    secure_url: str = ""
    type: str = ""


@dataclass(frozen=True)
class Video:
    """One og:video block."""

    url: str = ""
    secure_url: str = ""
    type: str = ""
    width: int = 0
    height: int = 0


# --- Page Record ---


@dataclass(frozen=True)
class OpenGraph:
    """
    Open Graph metadata for a single page.

    Every field is optional; empty values are simply not emitted.
    """

    # Basic
    title: str = ""
    type: str = ""
    image: str = ""  # Ignored if images is set.
    images: tuple[Image, ...] = ()
    url: str = ""

    # Optional
    audio: str = ""
    audios: tuple[Audio, ...] = ()
    description: str = ""
    determiner: Determiner = DETERMINER_BLANK
    locale: Locale = Locale("")
    locale_alternates: tuple[Locale, ...] = ()
    site_name: str = ""
    video: str = ""
    videos: tuple[Video, ...] = ()


# --- Output Models ---


@dataclass(frozen=True)
class MetaTag:
    """A single property/content statement, before escaping."""

    property: str
    content: str


@dataclass(frozen=True)
class RenderWarning:
    """Diagnostic about a value that was omitted or looks wrong."""

    code: str
    message: str
    field_name: str | None = None


# --- Input/Output Models ---


@dataclass(frozen=True)
class RenderOpenGraphInput:
    """Input for rendering Open Graph meta tags."""

    og: OpenGraph


@dataclass(frozen=True)
class RenderOpenGraphOutput:
    """Output containing the rendered fragment and its statements."""

    html: str
    tags: tuple[MetaTag, ...] = ()
    warnings: list[RenderWarning] = field(default_factory=list)
    success: bool = True
