from pathlib import Path

import pytest

from storefront_forms.adapters.rules import RulesAdapter
from storefront_forms.rules.loader import RULES_PATH_ENV, load_rules
from storefront_forms.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The rules.yaml shipped at the project root."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)


@pytest.fixture
def rules_adapter(rules: Rules) -> RulesAdapter:
    return RulesAdapter(rules)


@pytest.fixture(autouse=True)
def clear_rules_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(RULES_PATH_ENV, raising=False)
