"""Form field configurations produced by products and reshaped by visibility rules."""

from __future__ import annotations

import dataclasses
import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Self

from quoteflow.utils import parse_float


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


@dataclass(frozen=True, kw_only=True)
class FormFieldConfig(ABC):
    """Base configuration shared by every form field."""

    key: str
    label: str
    is_required: bool
    order: int
    is_visible: bool = True
    validation_rules: dict[str, Any] = field(default_factory=dict)

    @abstractmethod
    def validate(self, value: Any) -> str | None:
        """Return an error message for *value*, or None when it is acceptable."""

    def copy_with(self, **changes: Any) -> Self:
        """Return a copy with *changes* applied; type-specific constraints are kept."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-data description of the field."""
        return {
            "key": self.key,
            "label": self.label,
            "is_required": self.is_required,
            "is_visible": self.is_visible,
            "order": self.order,
            "validation_rules": dict(self.validation_rules),
            "type": type(self).__name__,
        }


@dataclass(frozen=True, kw_only=True)
class TextFieldConfig(FormFieldConfig):
    """Free text input with optional length and pattern constraints."""

    placeholder: str | None = None
    max_length: int | None = None
    pattern: str | None = None

    def validate(self, value: Any) -> str | None:
        if self.is_required and _is_blank(value):
            return f"{self.label} é obrigatório"
        if value is None:
            return None

        text = str(value)
        if self.max_length is not None and len(text) > self.max_length:
            return f"{self.label} deve ter no máximo {self.max_length} caracteres"
        if self.pattern is not None and not re.search(self.pattern, text):
            return f"{self.label} tem formato inválido"
        return None


@dataclass(frozen=True, kw_only=True)
class NumberFieldConfig(FormFieldConfig):
    """Numeric input with optional bounds."""

    min: float | None = None
    max: float | None = None
    decimals: int | None = None

    def validate(self, value: Any) -> str | None:
        if self.is_required and _is_blank(value):
            return f"{self.label} é obrigatório"
        if value is None:
            return None

        number = parse_float(value, math.nan)
        if math.isnan(number):
            return f"{self.label} deve ser um número válido"
        if self.min is not None and number < self.min:
            return f"{self.label} deve ser maior que {self.min:g}"
        if self.max is not None and number > self.max:
            return f"{self.label} deve ser menor que {self.max:g}"
        return None


@dataclass(frozen=True)
class SelectOption:
    """One choice of a select field."""

    value: str
    label: str
    is_enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "label": self.label, "is_enabled": self.is_enabled}


@dataclass(frozen=True, kw_only=True)
class SelectFieldConfig(FormFieldConfig):
    """Choice among fixed options."""

    options: tuple[SelectOption, ...] = ()
    allow_multiple: bool = False

    def validate(self, value: Any) -> str | None:
        missing = value is None or (isinstance(value, list | tuple) and not value) or _is_blank(value)
        if self.is_required and missing:
            return f"{self.label} é obrigatório"
        return None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["options"] = [option.to_dict() for option in self.options]
        data["allow_multiple"] = self.allow_multiple
        return data
