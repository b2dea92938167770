"""
Rules-backed Open Graph rules adapter.

Exposes the `opengraph` section of rules.yaml through OpenGraphRulesPort.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.rules.models import Rules


@dataclass(frozen=True)
class RulesOpenGraphAdapter:
    """Implements OpenGraphRulesPort on top of a validated Rules model."""

    rules: Rules

    def get_image_fallback_property(self) -> str:
        return self.rules.opengraph.image_fallback_property

    def collect_warnings(self) -> bool:
        return self.rules.opengraph.collect_warnings
