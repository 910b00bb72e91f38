"""Quote workflow: product catalog, form, pricing and validation kept in step."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from quoteflow.catalog import ProductRepository
from quoteflow.constants.config import DEFAULT_CUSTOMER_ID
from quoteflow.constants.products import FIELD_QUANTITY
from quoteflow.controllers.form import FormController
from quoteflow.controllers.notifier import ChangeNotifier
from quoteflow.model import PricingResult, Product, ValidationResult
from quoteflow.rules.service import RulesService
from quoteflow.utils import parse_int

logger = logging.getLogger(__name__)

SUBMIT_REFUSED_ERROR = "Formulário inválido - não é possível submeter"


@dataclass(frozen=True)
class BudgetSummary:
    """Snapshot of a quote ready to be shown or submitted."""

    product: Product
    form_data: dict[str, Any]
    pricing: PricingResult
    is_valid: bool
    errors: tuple[str, ...] = ()
    quantity: int | None = field(default=None, kw_only=True)

    @property
    def quantity_value(self) -> int:
        if self.quantity is not None:
            return self.quantity
        return parse_int(self.form_data.get(FIELD_QUANTITY), 1)

    @property
    def total_price(self) -> float:
        return self.pricing.final_price * self.quantity_value

    @property
    def total_savings(self) -> float:
        return self.pricing.savings_amount * self.quantity_value

    @property
    def discount_percentage(self) -> float:
        if self.pricing.base_price <= 0:
            return 0.0
        return self.pricing.savings_amount / self.pricing.base_price * 100

    def to_dict(self) -> dict[str, Any]:
        return {
            "product": self.product.to_dict(),
            "form_data": dict(self.form_data),
            "pricing": self.pricing.to_dict(),
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "quantity": self.quantity_value,
            "total_price": self.total_price,
            "total_savings": self.total_savings,
            "discount_percentage": self.discount_percentage,
        }


class BudgetController(ChangeNotifier):
    """Coordinates the form controller with live pricing and validation.

    Every selection or field update is forwarded to the form controller and
    followed by a recalculation of ``current_pricing`` and
    ``current_validation`` before listeners are notified.
    """

    def __init__(
        self,
        repository: ProductRepository,
        rules_service: RulesService,
        customer_id: str = DEFAULT_CUSTOMER_ID,
    ) -> None:
        super().__init__()
        self._repository = repository
        self._rules_service = rules_service
        self.form_controller = FormController(
            pricing_engine=rules_service.pricing_engine,
            validation_engine=rules_service.validation_engine,
            visibility_engine=rules_service.visibility_engine,
            customer_id=customer_id,
        )
        self.current_pricing: PricingResult | None = None
        self.current_validation: ValidationResult | None = None
        self.error: str | None = None

    @property
    def available_products(self) -> tuple[Product, ...]:
        return tuple(self._repository.find_all())

    @property
    def can_submit(self) -> bool:
        return (
            self.form_controller.is_valid
            and self.current_validation is not None
            and self.current_validation.is_valid
        )

    def get_products_by_type(self, product_type: str | None) -> list[Product]:
        """Return products of *product_type*; every product when it is empty."""
        if not product_type:
            return self._repository.find_all()
        return self._repository.find_by_type(product_type)

    def select_product(self, product: Product) -> None:
        self.form_controller.select_product(product)
        self._recalculate_all()

    def select_product_by_id(self, product_id: str) -> Product:
        """Select the catalog product *product_id*; raises CatalogError when unknown."""
        product = self._repository.get(product_id)
        self.select_product(product)
        return product

    def update_form_field(self, key: str, value: Any) -> None:
        if self.form_controller.selected_product is None:
            return
        self.form_controller.update_field(key, value)
        self._recalculate_all()

    def update_form_fields(self, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            self.update_form_field(key, value)

    def _recalculate_all(self) -> None:
        if self.form_controller.selected_product is None:
            self.current_pricing = None
            self.current_validation = None
            self.notify_listeners()
            return

        self.current_pricing = self.form_controller.calculate_price()
        self.form_controller.validate_and_submit()
        self.current_validation = ValidationResult(
            is_valid=not self.form_controller.has_errors,
            errors=tuple(self.form_controller.errors.values()),
        )
        self.notify_listeners()

    def submit_budget(self) -> bool:
        """Submit the current quote; refuse and set ``error`` when it is not valid."""
        if not self.can_submit:
            self.error = SUBMIT_REFUSED_ERROR
            logger.info("Quote submission refused: %s", self.error)
            return False

        product = self.form_controller.selected_product
        assert product is not None and self.current_pricing is not None
        self.error = None
        logger.info(
            "Quote submitted: product=%s data=%s final_price=%.2f",
            product.id,
            dict(self.form_controller.form_data),
            self.current_pricing.final_price,
        )
        return True

    def clear_form(self) -> None:
        self.form_controller.clear()
        self.current_pricing = None
        self.current_validation = None
        self.error = None
        self.notify_listeners()

    def get_budget_summary(self) -> BudgetSummary | None:
        product = self.form_controller.selected_product
        if product is None or self.current_pricing is None:
            return None
        return BudgetSummary(
            product=product,
            form_data=dict(self.form_controller.form_data),
            pricing=self.current_pricing,
            is_valid=self.can_submit,
            errors=tuple(self.form_controller.errors.values()),
        )
