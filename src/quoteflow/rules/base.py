"""Rule interface shared by pricing, validation and visibility rules."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

from quoteflow.constants.products import META_PRODUCT_TYPE
from quoteflow.constants.rule_schema import VALID_RULE_TYPES
from quoteflow.rules.context import RuleContext, RuleResult


@dataclass(frozen=True, kw_only=True)
class Rule(ABC):
    """Named, prioritized, conditionally applicable unit of business logic.

    ``rule_type`` is the category discriminant; an engine only holds rules
    of one category. Higher ``priority`` runs first.
    """

    rule_type: ClassVar[str]

    id: str
    name: str
    priority: int
    description: str = ""
    is_enabled: bool = True
    applicable_product_types: frozenset[str] = frozenset()
    conditions: dict[str, Any] = field(default_factory=dict)

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate concrete rule classes declare a known ``rule_type``."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        rule_type = getattr(cls, "rule_type", None)
        if rule_type not in VALID_RULE_TYPES:
            raise TypeError(f"{cls.__name__}.rule_type must be one of {sorted(VALID_RULE_TYPES)} (got {rule_type!r})")

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError(f"{type(self).__name__} requires a non-empty id")
        object.__setattr__(self, "applicable_product_types", frozenset(self.applicable_product_types))

    def matches_product_type(self, context: RuleContext) -> bool:
        """Return False when the rule is restricted to other product types."""
        if not self.applicable_product_types:
            return True
        product_type = context.metadata.get(META_PRODUCT_TYPE)
        return product_type is not None and str(product_type) in self.applicable_product_types

    @abstractmethod
    def is_applicable(self, context: RuleContext) -> bool:
        """Return whether the rule should run against *context*."""

    @abstractmethod
    def execute(self, context: RuleContext) -> RuleResult:
        """Run the rule and describe its outcome."""

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-data description of the rule."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "priority": self.priority,
            "is_enabled": self.is_enabled,
            "applicable_product_types": sorted(self.applicable_product_types),
            "conditions": dict(self.conditions),
            "rule_type": self.rule_type,
        }
