"""
OpenGraph component port definitions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class OpenGraphConfigPort(Protocol):
    """Port for the site-wide OpenGraph defaults."""

    def get_defaults(self) -> Mapping[str, Any]:
        """Get default attributes, e.g. ``{"site_name": "IMDb"}``."""
        ...
