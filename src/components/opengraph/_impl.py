"""
Open Graph meta tag renderer.

Walks an OpenGraph record in the fixed Open Graph property order and emits
one escaped <meta property=... content=...> element per statement.

Key behaviors:
- Emission order is driven by ordered rule tables, never by ad hoc branches
- URL fields are gated on a literal http:// or https:// prefix
- Every tag goes through meta_tag_html, which escapes property and content
- Pure function: same record always produces the same fragment, never raises
"""

from __future__ import annotations

import html
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .models import (
    KNOWN_DETERMINERS,
    Audio,
    Image,
    Locale,
    MetaTag,
    OpenGraph,
    RenderWarning,
    Video,
)

T = TypeVar("T")

# Property used for the single-image fallback. Historical output used og:type;
# og:image is the corrected property and can be selected through rules.
LEGACY_IMAGE_FALLBACK_PROPERTY = "og:type"
IMAGE_FALLBACK_PROPERTIES = ("og:type", "og:image")


# --- URL Predicates ---


def is_valid_url(value: str) -> bool:
    """True iff value starts with http:// or https:// (case-sensitive)."""
    return value.startswith("http://") or value.startswith("https://")


def is_valid_secure_url(value: str) -> bool:
    """True iff value starts with https:// (case-sensitive)."""
    return value.startswith("https://")


# --- Escaping ---


def escape_attribute(value: str) -> str:
    """
    Escape a value for a double-quoted HTML attribute.

    Converts &, <, >, " and ' to entities. NUL is replaced with U+FFFD.
    """
    return html.escape(value, quote=True).replace("\x00", "\ufffd")


def meta_tag_html(property: str, content: str) -> str:
    """Build one <meta> element. The only place tag markup is produced."""
    return (
        f'<meta property="{escape_attribute(property)}" '
        f'content="{escape_attribute(content)}" />\n'
    )


def render_meta_tags_html(tags: Iterable[MetaTag]) -> str:
    """Render statements to an HTML fragment, one element per line."""
    return "".join(meta_tag_html(tag.property, tag.content) for tag in tags)


# --- Rule Tables ---


@dataclass(frozen=True)
class FieldRule(Generic[T]):
    """(property, presence predicate, content producer) for one statement."""

    property: str
    present: Callable[[T], bool]
    content: Callable[[T], str]

    def emit(self, source: T) -> Iterator[MetaTag]:
        if self.present(source):
            yield MetaTag(property=self.property, content=self.content(source))


@dataclass(frozen=True)
class GroupRule(Generic[T]):
    """
    Fan-out over a repeated field.

    Each item accepted by `accept` runs `item_rules` in order, so every item
    forms a contiguous block of statements.
    """

    items: Callable[[OpenGraph], Iterable[T]]
    accept: Callable[[T], bool]
    item_rules: tuple[FieldRule[T], ...]

    def emit(self, source: OpenGraph) -> Iterator[MetaTag]:
        for item in self.items(source):
            if not self.accept(item):
                continue
            for rule in self.item_rules:
                yield from rule.emit(item)


PageRule = FieldRule[OpenGraph] | GroupRule[Any]


IMAGE_RULES: tuple[FieldRule[Image], ...] = (
    # og:image:url is identical to og:image, so only og:image is written.
    FieldRule("og:image", lambda g: g.url != "", lambda g: g.url),
    FieldRule("og:image:secure_url", lambda g: g.secure_url != "", lambda g: g.secure_url),
    FieldRule("og:image:type", lambda g: g.type != "", lambda g: g.type),
    FieldRule("og:image:width", lambda g: g.width > 0, lambda g: str(g.width)),
    FieldRule("og:image:height", lambda g: g.height > 0, lambda g: str(g.height)),
    FieldRule("og:image:alt", lambda g: g.alt != "", lambda g: g.alt),
)

AUDIO_RULES: tuple[FieldRule[Audio], ...] = (
    FieldRule("og:audio", lambda a: a.url != "", lambda a: a.url),
    FieldRule("og:audio:secure_url", lambda a: a.secure_url != "", lambda a: a.secure_url),
    FieldRule("og:audio:type", lambda a: a.type != "", lambda a: a.type),
)

VIDEO_RULES: tuple[FieldRule[Video], ...] = (
    FieldRule("og:video", lambda v: v.url != "", lambda v: v.url),
    FieldRule("og:video:secure_url", lambda v: v.secure_url != "", lambda v: v.secure_url),
    FieldRule("og:video:type", lambda v: v.type != "", lambda v: v.type),
    FieldRule("og:video:width", lambda v: v.width > 0, lambda v: str(v.width)),
    FieldRule("og:video:height", lambda v: v.height > 0, lambda v: str(v.height)),
)

LOCALE_ALTERNATE_RULES: tuple[FieldRule[Locale], ...] = (
    FieldRule("og:locale:alternate", lambda _: True, lambda loc: str(loc)),
)


def page_rules(
    image_fallback_property: str = LEGACY_IMAGE_FALLBACK_PROPERTY,
) -> tuple[PageRule, ...]:
    """
    Ordered emission table for an OpenGraph record.

    Args:
        image_fallback_property: Property written for `image` when `images`
            is empty.

    Returns:
        Rules in Open Graph emission order.
    """
    return (
        FieldRule("og:title", lambda o: o.title != "", lambda o: o.title),
        FieldRule("og:type", lambda o: o.type != "", lambda o: o.type),
        FieldRule(
            image_fallback_property,
            lambda o: not o.images and is_valid_url(o.image),
            lambda o: o.image,
        ),
        GroupRule(lambda o: o.images, lambda g: is_valid_url(g.url), IMAGE_RULES),
        FieldRule("og:url", lambda o: is_valid_url(o.url), lambda o: o.url),
        FieldRule("og:audio", lambda o: o.audio != "", lambda o: o.audio),
        GroupRule(lambda o: o.audios, lambda a: is_valid_url(a.url), AUDIO_RULES),
        FieldRule("og:description", lambda o: o.description != "", lambda o: o.description),
        FieldRule("og:determiner", lambda o: o.determiner != "", lambda o: o.determiner),
        FieldRule("og:locale", lambda o: o.locale != "", lambda o: o.locale),
        GroupRule(lambda o: o.locale_alternates, lambda _: True, LOCALE_ALTERNATE_RULES),
        FieldRule("og:site_name", lambda o: o.site_name != "", lambda o: o.site_name),
        FieldRule("og:video", lambda o: is_valid_url(o.video), lambda o: o.video),
        GroupRule(lambda o: o.videos, lambda v: is_valid_url(v.url), VIDEO_RULES),
    )


OPENGRAPH_RULES = page_rules()


# --- Rendering ---


def build_meta_tags(
    og: OpenGraph,
    *,
    image_fallback_property: str = LEGACY_IMAGE_FALLBACK_PROPERTY,
) -> list[MetaTag]:
    """
    Build the ordered Open Graph statements for a record.

    Args:
        og: Page metadata record.
        image_fallback_property: Property for the single-image fallback.

    Returns:
        Statements in emission order (empty for an empty record).
    """
    if image_fallback_property == LEGACY_IMAGE_FALLBACK_PROPERTY:
        rules = OPENGRAPH_RULES
    else:
        rules = page_rules(image_fallback_property)

    tags: list[MetaTag] = []
    for rule in rules:
        tags.extend(rule.emit(og))
    return tags


def render_opengraph(
    og: OpenGraph,
    *,
    image_fallback_property: str = LEGACY_IMAGE_FALLBACK_PROPERTY,
) -> str:
    """
    Render an OpenGraph record to an HTML fragment of <meta> elements.

    Each element is terminated by a newline. An empty record yields "".
    """
    tags = build_meta_tags(og, image_fallback_property=image_fallback_property)
    return render_meta_tags_html(tags)


# --- Diagnostics ---


def _url_warnings(
    values: Sequence[tuple[str, str]],
    code: str,
    label: str,
) -> list[RenderWarning]:
    return [
        RenderWarning(
            code=code,
            message=f"{label} {value!r} is not an http(s) URL and was omitted",
            field_name=field_name,
        )
        for field_name, value in values
        if value and not is_valid_url(value)
    ]


def _secure_url_warnings(values: Sequence[tuple[str, str]]) -> list[RenderWarning]:
    return [
        RenderWarning(
            code="INSECURE_SECURE_URL",
            message=f"Secure URL {value!r} does not use https://",
            field_name=field_name,
        )
        for field_name, value in values
        if value and not is_valid_secure_url(value)
    ]


def collect_warnings(
    og: OpenGraph,
    *,
    image_fallback_property: str = LEGACY_IMAGE_FALLBACK_PROPERTY,
) -> list[RenderWarning]:
    """
    Describe values that the renderer omits or that look wrong.

    Warnings never change the rendered fragment.

    Args:
        og: Page metadata record.
        image_fallback_property: Property used for the single-image fallback.

    Returns:
        List of warnings (empty if nothing to report).
    """
    warnings: list[RenderWarning] = []

    if og.images:
        if og.image:
            warnings.append(
                RenderWarning(
                    code="IMAGE_IGNORED",
                    message="image is ignored because images is set",
                    field_name="image",
                )
            )
    elif is_valid_url(og.image) and image_fallback_property == LEGACY_IMAGE_FALLBACK_PROPERTY:
        warnings.append(
            RenderWarning(
                code="LEGACY_IMAGE_PROPERTY",
                message="image was written as og:type; set image_fallback_property to og:image",
                field_name="image",
            )
        )

    image_urls = [] if og.images else [("image", og.image)]
    image_urls += [(f"images[{i}].url", g.url) for i, g in enumerate(og.images)]
    warnings.extend(_url_warnings(image_urls, "INVALID_IMAGE_URL", "Image URL"))

    warnings.extend(_url_warnings([("url", og.url)], "INVALID_PAGE_URL", "Page URL"))

    audio_urls = [(f"audios[{i}].url", a.url) for i, a in enumerate(og.audios)]
    warnings.extend(_url_warnings(audio_urls, "INVALID_AUDIO_URL", "Audio URL"))

    video_urls = [("video", og.video)]
    video_urls += [(f"videos[{i}].url", v.url) for i, v in enumerate(og.videos)]
    warnings.extend(_url_warnings(video_urls, "INVALID_VIDEO_URL", "Video URL"))

    secure_urls = [
        (f"images[{i}].secure_url", g.secure_url)
        for i, g in enumerate(og.images)
        if is_valid_url(g.url)
    ]
    secure_urls += [
        (f"audios[{i}].secure_url", a.secure_url)
        for i, a in enumerate(og.audios)
        if is_valid_url(a.url)
    ]
    secure_urls += [
        (f"videos[{i}].secure_url", v.secure_url)
        for i, v in enumerate(og.videos)
        if is_valid_url(v.url)
    ]
    warnings.extend(_secure_url_warnings(secure_urls))

    if og.determiner not in KNOWN_DETERMINERS:
        warnings.append(
            RenderWarning(
                code="UNKNOWN_DETERMINER",
                message=f"Determiner {og.determiner!r} is not a known value; emitted as-is",
                field_name="determiner",
            )
        )

    return warnings
