"""Shared pytest fixtures for quote workflow tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from quoteflow.catalog import ProductRepository
from quoteflow.controllers import BudgetController
from quoteflow.model import Product
from quoteflow.rules import RuleContext
from quoteflow.rules.service import RulesService


@pytest.fixture()
def repository() -> ProductRepository:
    """Return a repository seeded with the default catalog."""
    return ProductRepository.with_defaults()


@pytest.fixture()
def rules_service() -> RulesService:
    """Return a rules service loaded from the bundled rule files."""
    return RulesService.from_directory()


@pytest.fixture()
def budget(repository: ProductRepository, rules_service: RulesService) -> BudgetController:
    return BudgetController(repository, rules_service)


@pytest.fixture()
def motor(repository: ProductRepository) -> Product:
    """Industrial three-phase motor, base price 2500."""
    return repository.get("ind_001")


@pytest.fixture()
def make_context() -> Callable[..., RuleContext]:
    """Return a factory for rule contexts with a seeded base price."""

    def _make(
        form_data: dict[str, Any] | None = None,
        *,
        base_price: float | None = None,
        **metadata: Any,
    ) -> RuleContext:
        calculated = {} if base_price is None else {"basePrice": base_price}
        return RuleContext(form_data=dict(form_data or {}), calculated_data=calculated, metadata=metadata)

    return _make


def minimal_rule(**overrides: Any) -> dict[str, Any]:
    """Return a minimal valid volume discount rule definition, merged with *overrides*."""
    base: dict[str, Any] = {
        "id": "volume_test",
        "kind": "volume_discount",
        "name": "Volume test",
        "priority": 10,
        "params": {"minimum_quantity": 10, "discount_percentage": 5.0},
    }
    base.update(overrides)
    return base


@pytest.fixture()
def rule_definition() -> Callable[..., dict[str, Any]]:
    return minimal_rule


@pytest.fixture()
def rules_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "rules"
    directory.mkdir()
    return directory


@pytest.fixture()
def write_rule(rules_dir: Path) -> Callable[[str, Any], Path]:
    """Return a helper writing one YAML rule file into ``rules_dir``."""

    def _write(filename: str, content: Any) -> Path:
        path = rules_dir / filename
        text = content if isinstance(content, str) else yaml.safe_dump(content, allow_unicode=True, sort_keys=False)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
