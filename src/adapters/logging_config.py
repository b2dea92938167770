"""
Logging configuration driven by the `observability` rules section.
"""

from __future__ import annotations

import logging

from src.rules.models import Rules


def configure_logging(rules: Rules) -> None:
    """Configure the root logger level and format from rules."""
    logging.basicConfig(
        level=rules.observability.log_level,
        format=rules.observability.log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger().setLevel(rules.observability.log_level)
