"""
Open Graph component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class OpenGraphRulesPort(Protocol):
    """Port for Open Graph rendering rules configuration."""

    def get_image_fallback_property(self) -> str:
        """Get the property written for the single-image fallback (og:type or og:image)."""
        ...

    def collect_warnings(self) -> bool:
        """Whether to compute diagnostics for omitted values."""
        ...
