"""
Unit tests for the Open Graph component entry point.

Tests:
- run() renders the fragment and statements
- Rules port selects the image fallback property
- Diagnostics for omitted and suspicious values
"""

from __future__ import annotations

import logging

import pytest

from ..component import run, run_render
from ..models import (
    DETERMINER_AN,
    Audio,
    Determiner,
    Image,
    MetaTag,
    OpenGraph,
    RenderOpenGraphInput,
    RenderOpenGraphOutput,
    Video,
)

# --- Test Fixtures ---


class MockOpenGraphRules:
    """Mock implementation of OpenGraphRulesPort."""

    def __init__(
        self,
        image_fallback_property: str = "og:type",
        collect_warnings: bool = True,
    ) -> None:
        self._image_fallback_property = image_fallback_property
        self._collect_warnings = collect_warnings

    def get_image_fallback_property(self) -> str:
        return self._image_fallback_property

    def collect_warnings(self) -> bool:
        return self._collect_warnings


def warning_codes(output: RenderOpenGraphOutput) -> list[str]:
    return [w.code for w in output.warnings]


# --- Entry Point ---


class TestRun:
    """Tests for the component entry point."""

    def test_empty_record(self) -> None:
        output = run(RenderOpenGraphInput(og=OpenGraph()))

        assert output.success is True
        assert output.html == ""
        assert output.tags == ()
        assert output.warnings == []

    def test_renders_fragment_and_tags(self) -> None:
        og = OpenGraph(title="Hello", url="https://example.com/hello")
        output = run(RenderOpenGraphInput(og=og))

        assert output.html == (
            '<meta property="og:title" content="Hello" />\n'
            '<meta property="og:url" content="https://example.com/hello" />\n'
        )
        assert output.tags == (
            MetaTag("og:title", "Hello"),
            MetaTag("og:url", "https://example.com/hello"),
        )

    def test_tags_hold_unescaped_content(self) -> None:
        output = run(RenderOpenGraphInput(og=OpenGraph(title="Tom & Jerry")))

        assert output.tags == (MetaTag("og:title", "Tom & Jerry"),)
        assert 'content="Tom &amp; Jerry"' in output.html

    def test_run_render_matches_run(self) -> None:
        inp = RenderOpenGraphInput(og=OpenGraph(title="T", site_name="S"))
        assert run_render(inp) == run(inp)

    def test_unknown_input_type_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run(OpenGraph(title="T"))  # type: ignore[arg-type]

    def test_logs_render_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG):
            run(RenderOpenGraphInput(og=OpenGraph(title="T", url="ftp://x")))

        assert "Rendered 1 Open Graph tags (1 warnings)" in caplog.text
        assert "INVALID_PAGE_URL" in caplog.text


# --- Rules Port ---


class TestRulesPort:
    """Tests for rules-driven behavior."""

    def test_default_fallback_is_og_type(self) -> None:
        og = OpenGraph(image="https://example.com/a.png")
        output = run(RenderOpenGraphInput(og=og))

        assert output.tags == (MetaTag("og:type", "https://example.com/a.png"),)

    def test_fallback_property_from_rules(self) -> None:
        og = OpenGraph(image="https://example.com/a.png")
        output = run(
            RenderOpenGraphInput(og=og),
            rules=MockOpenGraphRules(image_fallback_property="og:image"),
        )

        assert output.tags == (MetaTag("og:image", "https://example.com/a.png"),)
        assert "LEGACY_IMAGE_PROPERTY" not in warning_codes(output)

    def test_warnings_disabled(self) -> None:
        og = OpenGraph(url="ftp://example.com")
        output = run(
            RenderOpenGraphInput(og=og),
            rules=MockOpenGraphRules(collect_warnings=False),
        )

        assert output.warnings == []
        assert output.html == ""


# --- Diagnostics ---


class TestWarnings:
    """Tests for diagnostics."""

    def test_clean_record_has_no_warnings(self) -> None:
        og = OpenGraph(
            title="T",
            images=(
                Image(url="https://example.com/a.png", secure_url="https://example.com/a.png"),
            ),
            url="https://example.com",
            determiner=DETERMINER_AN,
        )
        assert run(RenderOpenGraphInput(og=og)).warnings == []

    def test_legacy_image_property(self) -> None:
        og = OpenGraph(image="https://example.com/a.png")
        output = run(RenderOpenGraphInput(og=og))

        assert warning_codes(output) == ["LEGACY_IMAGE_PROPERTY"]
        assert output.warnings[0].field_name == "image"

    def test_image_ignored(self) -> None:
        og = OpenGraph(
            image="https://example.com/ignored.png",
            images=(Image(url="https://example.com/a.png"),),
        )
        assert warning_codes(run(RenderOpenGraphInput(og=og))) == ["IMAGE_IGNORED"]

    def test_invalid_image_urls(self) -> None:
        og = OpenGraph(
            images=(
                Image(url="https://example.com/a.png"),
                Image(url="not-a-url", secure_url="http://insecure"),
            )
        )
        output = run(RenderOpenGraphInput(og=og))

        assert warning_codes(output) == ["INVALID_IMAGE_URL"]
        assert output.warnings[0].field_name == "images[1].url"

    def test_invalid_single_image(self) -> None:
        output = run(RenderOpenGraphInput(og=OpenGraph(image="a.png")))

        assert warning_codes(output) == ["INVALID_IMAGE_URL"]
        assert output.warnings[0].field_name == "image"

    def test_invalid_page_and_video_urls(self) -> None:
        og = OpenGraph(
            url="ftp://example.com",
            video="trailer.mp4",
            videos=(Video(url="w.mp4"),),
        )
        output = run(RenderOpenGraphInput(og=og))

        assert warning_codes(output) == [
            "INVALID_PAGE_URL",
            "INVALID_VIDEO_URL",
            "INVALID_VIDEO_URL",
        ]
        assert [w.field_name for w in output.warnings] == ["url", "video", "videos[0].url"]

    def test_invalid_audio_url(self) -> None:
        og = OpenGraph(audios=(Audio(url="b.mp3"),))
        output = run(RenderOpenGraphInput(og=og))

        assert warning_codes(output) == ["INVALID_AUDIO_URL"]

    def test_insecure_secure_urls(self) -> None:
        og = OpenGraph(
            images=(Image(url="https://example.com/a.png", secure_url="http://example.com/a"),),
            audios=(Audio(url="https://example.com/a.mp3", secure_url="ftp://a"),),
            videos=(Video(url="https://example.com/a.mp4", secure_url="http://v"),),
        )
        output = run(RenderOpenGraphInput(og=og))

        assert warning_codes(output) == ["INSECURE_SECURE_URL"] * 3
        assert [w.field_name for w in output.warnings] == [
            "images[0].secure_url",
            "audios[0].secure_url",
            "videos[0].secure_url",
        ]

    def test_unknown_determiner(self) -> None:
        og = OpenGraph(determiner=Determiner("some"))
        output = run(RenderOpenGraphInput(og=og))

        assert warning_codes(output) == ["UNKNOWN_DETERMINER"]
        assert 'content="some"' in output.html

    def test_warnings_do_not_change_html(self) -> None:
        og = OpenGraph(title="T", url="ftp://example.com")
        with_warnings = run(RenderOpenGraphInput(og=og))
        without = run(RenderOpenGraphInput(og=og), rules=MockOpenGraphRules(collect_warnings=False))

        assert with_warnings.html == without.html
