"""Product types: each knows its form fields, business checks and base price formula."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Self

from quoteflow.constants.products import (
    PRODUCT_TYPE_CORPORATE,
    PRODUCT_TYPE_INDUSTRIAL,
    PRODUCT_TYPE_RESIDENTIAL,
)
from quoteflow.model.fields import (
    FormFieldConfig,
    NumberFieldConfig,
    SelectFieldConfig,
    SelectOption,
    TextFieldConfig,
)
from quoteflow.utils import parse_float, parse_int


def _text(form_data: dict[str, Any], key: str, default: str = "") -> str:
    value = form_data.get(key)
    return default if value is None else str(value)


def _quantity_field() -> NumberFieldConfig:
    return NumberFieldConfig(key="quantity", label="Quantidade", is_required=True, order=1, min=1, decimals=0)


def _delivery_days_field(order: int) -> NumberFieldConfig:
    return NumberFieldConfig(
        key="delivery_days",
        label="Prazo de entrega (dias)",
        is_required=True,
        order=order,
        min=1,
        decimals=0,
    )


def _options(*pairs: tuple[str, str]) -> tuple[SelectOption, ...]:
    return tuple(SelectOption(value=value, label=label) for value, label in pairs)


@dataclass(frozen=True, eq=False, kw_only=True)
class Product(ABC):
    """Catalog entry; immutable once created. Products compare equal by id."""

    product_type: ClassVar[str]

    id: str
    name: str
    description: str
    base_price: float
    attributes: dict[str, Any] = field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        return isinstance(other, Product) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    @abstractmethod
    def get_form_fields(self) -> list[FormFieldConfig]:
        """Return the form fields for this product, ordered by ``order``."""

    @abstractmethod
    def validate(self, form_data: dict[str, Any]) -> list[str]:
        """Return cross-field business errors for *form_data*."""

    @abstractmethod
    def calculate_base_price(self, form_data: dict[str, Any]) -> float:
        """Return the unit price after product-specific multipliers."""

    def copy_with(self, **changes: Any) -> Self:
        """Return a new product with *changes* applied."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "base_price": self.base_price,
            "attributes": dict(self.attributes),
            "product_type": self.product_type,
        }


@dataclass(frozen=True, eq=False, kw_only=True)
class IndustrialProduct(Product):
    """Industrial equipment priced by voltage and protection grade."""

    product_type: ClassVar[str] = PRODUCT_TYPE_INDUSTRIAL

    def get_form_fields(self) -> list[FormFieldConfig]:
        return [
            _quantity_field(),
            SelectFieldConfig(
                key="voltage",
                label="Voltagem",
                is_required=True,
                order=2,
                options=_options(("110", "110V"), ("220", "220V"), ("380", "380V"), ("440", "440V")),
            ),
            TextFieldConfig(
                key="certification",
                label="Certificação",
                is_required=False,
                order=3,
                placeholder="Ex: ISO 9001, INMETRO",
            ),
            SelectFieldConfig(
                key="protection_grade",
                label="Grau de Proteção",
                is_required=True,
                order=4,
                options=_options(("IP54", "IP54"), ("IP65", "IP65"), ("IP67", "IP67")),
            ),
            NumberFieldConfig(
                key="power_consumption",
                label="Consumo (kW)",
                is_required=True,
                order=5,
                min=0.1,
                decimals=2,
            ),
            _delivery_days_field(6),
        ]

    def validate(self, form_data: dict[str, Any]) -> list[str]:
        errors: list[str] = []
        voltage = parse_float(form_data.get("voltage"), 0.0)
        certification = _text(form_data, "certification")

        if voltage > 220 and not certification.strip():
            errors.append("Produtos industriais com voltagem superior a 220V exigem certificação")

        power = parse_float(form_data.get("power_consumption"), 0.0)
        if voltage <= 220 and power > 10:
            errors.append(f"Consumo muito alto para voltagem de {voltage:g}V")
        return errors

    def calculate_base_price(self, form_data: dict[str, Any]) -> float:
        price = self.base_price

        if parse_float(form_data.get("voltage"), 220.0) > 220:
            price *= 1.2

        match _text(form_data, "protection_grade", "IP54"):
            case "IP65":
                price *= 1.1
            case "IP67":
                price *= 1.25
        return price


@dataclass(frozen=True, eq=False, kw_only=True)
class ResidentialProduct(Product):
    """Home appliance priced by color, warranty and energy efficiency."""

    product_type: ClassVar[str] = PRODUCT_TYPE_RESIDENTIAL

    def get_form_fields(self) -> list[FormFieldConfig]:
        return [
            _quantity_field(),
            SelectFieldConfig(
                key="color",
                label="Cor",
                is_required=True,
                order=2,
                options=_options(("white", "Branco"), ("black", "Preto"), ("silver", "Prata"), ("gold", "Dourado")),
            ),
            SelectFieldConfig(
                key="warranty_years",
                label="Garantia",
                is_required=True,
                order=3,
                options=_options(("1", "1 ano"), ("2", "2 anos"), ("3", "3 anos"), ("5", "5 anos")),
            ),
            SelectFieldConfig(
                key="installation_type",
                label="Tipo de Instalação",
                is_required=True,
                order=4,
                options=_options(("wall", "Parede"), ("ceiling", "Teto"), ("floor", "Piso"), ("countertop", "Bancada")),
            ),
            SelectFieldConfig(
                key="energy_efficiency",
                label="Eficiência Energética",
                is_required=True,
                order=5,
                options=_options(("A", "A (Mais Eficiente)"), ("B", "B"), ("C", "C"), ("D", "D")),
            ),
            _delivery_days_field(6),
        ]

    def validate(self, form_data: dict[str, Any]) -> list[str]:
        errors: list[str] = []
        warranty = parse_int(form_data.get("warranty_years"), 1)

        if _text(form_data, "installation_type") == "ceiling" and warranty > 3:
            errors.append("Instalação no teto suporta garantia máxima de 3 anos")
        if _text(form_data, "energy_efficiency", "D") == "D" and warranty > 2:
            errors.append("Produtos com eficiência D têm garantia máxima de 2 anos")
        return errors

    def calculate_base_price(self, form_data: dict[str, Any]) -> float:
        price = self.base_price

        match _text(form_data, "color", "white"):
            case "gold":
                price *= 1.3
            case "silver":
                price *= 1.15
            case "black":
                price *= 1.1

        # 10% per warranty year beyond the first
        warranty = parse_int(form_data.get("warranty_years"), 1)
        price *= 1 + (warranty - 1) * 0.1

        match _text(form_data, "energy_efficiency", "D"):
            case "A":
                price *= 1.2
            case "B":
                price *= 1.1
            case "C":
                price *= 1.05
        return price


@dataclass(frozen=True, eq=False, kw_only=True)
class CorporateProduct(Product):
    """Software or service contract priced by tier, support, SLA and compliance."""

    product_type: ClassVar[str] = PRODUCT_TYPE_CORPORATE

    def get_form_fields(self) -> list[FormFieldConfig]:
        return [
            _quantity_field(),
            SelectFieldConfig(
                key="contract_type",
                label="Tipo de contrato",
                is_required=True,
                order=2,
                options=_options(("standard", "Padrão"), ("premium", "Premium"), ("enterprise", "Enterprise")),
            ),
            SelectFieldConfig(
                key="support_level",
                label="Nível de suporte",
                is_required=True,
                order=3,
                options=_options(("basic", "Básico (8h/dia)"), ("extended", "Estendido (12h/dia)"), ("24x7", "24x7")),
            ),
            NumberFieldConfig(
                key="sla_hours",
                label="SLA (horas)",
                is_required=True,
                order=4,
                min=1,
                max=72,
                decimals=0,
            ),
            SelectFieldConfig(
                key="deployment_type",
                label="Tipo de implantação",
                is_required=True,
                order=5,
                options=_options(("cloud", "Cloud"), ("on_premise", "On-Premise"), ("hybrid", "Híbrido")),
            ),
            SelectFieldConfig(
                key="compliance_level",
                label="Nível de compliance",
                is_required=True,
                order=6,
                options=_options(("basic", "Básico"), ("gdpr", "GDPR"), ("sox", "SOX"), ("hipaa", "HIPAA")),
            ),
            _delivery_days_field(7),
        ]

    def validate(self, form_data: dict[str, Any]) -> list[str]:
        errors: list[str] = []
        contract_type = _text(form_data, "contract_type")
        support_level = _text(form_data, "support_level")

        if contract_type == "enterprise" and support_level != "24x7":
            errors.append("Contratos enterprise exigem suporte 24x7")

        sla_hours = parse_int(form_data.get("sla_hours"), 24)
        if support_level == "basic" and sla_hours < 8:
            errors.append("Suporte básico não suporta SLA menor que 8 horas")

        compliance = _text(form_data, "compliance_level")
        if compliance in ("sox", "hipaa") and _text(form_data, "deployment_type") == "cloud":
            errors.append("Compliance SOX/HIPAA requer implantação On-Premise ou Híbrida")
        return errors

    def calculate_base_price(self, form_data: dict[str, Any]) -> float:
        price = self.base_price

        match _text(form_data, "contract_type", "standard"):
            case "premium":
                price *= 1.5
            case "enterprise":
                price *= 2.5

        match _text(form_data, "support_level", "basic"):
            case "extended":
                price *= 1.3
            case "24x7":
                price *= 1.8

        sla_hours = parse_int(form_data.get("sla_hours"), 24)
        if sla_hours <= 4:
            price *= 2.0
        elif sla_hours <= 8:
            price *= 1.5

        match _text(form_data, "compliance_level", "basic"):
            case "gdpr":
                price *= 1.2
            case "sox":
                price *= 1.4
            case "hipaa":
                price *= 1.6
        return price
