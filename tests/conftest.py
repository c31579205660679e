from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest

from seo_meta.adapters.rules_config import RulesConfigAdapter
from seo_meta.rules.loader import load_rules

PROJECT_ROOT = Path(__file__).parent.parent


class StaticConfig:
    """In-memory OpenGraphConfigPort."""

    def __init__(self, defaults: Mapping[str, Any] | None = None) -> None:
        self._defaults = dict(defaults or {})

    def get_defaults(self) -> Mapping[str, Any]:
        return self._defaults


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules_config(rules_path):
    """
    Config adapter backed by the REAL rules.yaml from the project root.
    """
    return RulesConfigAdapter(load_rules(rules_path))


@pytest.fixture
def imdb_config() -> StaticConfig:
    return StaticConfig({"site_name": "IMDb"})
