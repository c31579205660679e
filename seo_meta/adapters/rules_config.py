"""
Rules-backed OpenGraph config adapter.

Implements OpenGraphConfigPort from a loaded rules file. The defaults are
snapshotted once at construction and exposed read-only.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from seo_meta.rules.loader import load_rules
from seo_meta.rules.models import Rules

logger = logging.getLogger(__name__)


class RulesConfigAdapter:
    """
    OpenGraph defaults from the ``opengraph`` section of rules.yaml.

    This adapter satisfies the OpenGraphConfigPort protocol.
    """

    def __init__(self, rules: Rules) -> None:
        self._defaults: Mapping[str, Any] = MappingProxyType(rules.opengraph.as_attributes())
        logger.debug("OpenGraph defaults: %s", sorted(self._defaults))

    @classmethod
    def from_path(cls, path: Path) -> RulesConfigAdapter:
        return cls(load_rules(path))

    def get_defaults(self) -> Mapping[str, Any]:
        return self._defaults
