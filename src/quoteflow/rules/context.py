"""Evaluation context and per-rule outcome passed through a rule chain."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RuleContext:
    """Data bag for one evaluation pass.

    ``form_data`` holds user input, ``calculated_data`` collects values
    computed during the pass (it only grows while rules run) and
    ``metadata`` carries read-only classification such as product type,
    product id and customer id.
    """

    form_data: dict[str, Any]
    calculated_data: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def copy_with(
        self,
        *,
        form_data: dict[str, Any] | None = None,
        calculated_data: dict[str, Any] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> RuleContext:
        """Return a new context; maps not overridden are shallow-copied."""
        return RuleContext(
            form_data=form_data if form_data is not None else dict(self.form_data),
            calculated_data=calculated_data if calculated_data is not None else dict(self.calculated_data),
            metadata=metadata if metadata is not None else dict(self.metadata),
        )


@dataclass(frozen=True)
class RuleResult:
    """Outcome of executing a single rule."""

    success: bool
    message: str | None = None
    changes: dict[str, Any] = field(default_factory=dict)
    errors: tuple[str, ...] = ()
    should_stop_execution: bool = False

    @classmethod
    def ok(cls, message: str | None = None, changes: dict[str, Any] | None = None) -> RuleResult:
        """Build a successful result whose ``changes`` feed ``calculated_data``."""
        return cls(success=True, message=message, changes=dict(changes or {}))

    @classmethod
    def failure(cls, errors: list[str] | tuple[str, ...], should_stop_execution: bool = False) -> RuleResult:
        """Build a failed result carrying one or more error strings."""
        return cls(success=False, errors=tuple(errors), should_stop_execution=should_stop_execution)
