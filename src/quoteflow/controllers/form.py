"""Form state for one selected product, re-evaluated on every mutation."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from quoteflow.constants.config import DEFAULT_CUSTOMER_ID
from quoteflow.constants.products import (
    META_CUSTOMER_ID,
    META_PRODUCT_ID,
    META_PRODUCT_TYPE,
    NO_PRODUCT_SELECTED_ERROR,
    PRODUCT_ERROR_KEY_PREFIX,
    RULE_ERROR_KEY_PREFIX,
)
from quoteflow.controllers.notifier import ChangeNotifier
from quoteflow.model import FormFieldConfig, NumberFieldConfig, PricingResult, Product
from quoteflow.rules.context import RuleContext
from quoteflow.rules.engine import PricingEngine, ValidationEngine, VisibilityEngine
from quoteflow.utils import parse_float

logger = logging.getLogger(__name__)


class FormController(ChangeNotifier):
    """Dynamic form bound to a single product.

    Selecting a product rebuilds the field set through the visibility
    engine. Updating a field rebuilds the fields, revalidates the form and
    notifies listeners. Errors from field validators, the product's own
    checks and the validation rules are merged into one map under distinct
    key namespaces (field key, ``product_<i>``, ``rule_<i>``).
    """

    def __init__(
        self,
        *,
        pricing_engine: PricingEngine,
        validation_engine: ValidationEngine,
        visibility_engine: VisibilityEngine,
        customer_id: str = DEFAULT_CUSTOMER_ID,
    ) -> None:
        super().__init__()
        self._pricing_engine = pricing_engine
        self._validation_engine = validation_engine
        self._visibility_engine = visibility_engine
        self.customer_id = customer_id

        self._selected_product: Product | None = None
        self._form_data: dict[str, Any] = {}
        self._errors: dict[str, str] = {}
        self._fields: list[FormFieldConfig] = []

    @property
    def selected_product(self) -> Product | None:
        return self._selected_product

    @property
    def form_data(self) -> Mapping[str, Any]:
        return MappingProxyType(self._form_data)

    @property
    def errors(self) -> Mapping[str, str]:
        return MappingProxyType(self._errors)

    @property
    def fields(self) -> tuple[FormFieldConfig, ...]:
        return tuple(self._fields)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def is_valid(self) -> bool:
        return self._selected_product is not None and not self._errors

    def select_product(self, product: Product) -> None:
        """Make *product* the current product; reselecting the same id does nothing."""
        if self._selected_product is not None and self._selected_product.id == product.id:
            return

        logger.debug("Product selected: %s", product.id)
        self._selected_product = product
        self._clear_form_data()
        self._rebuild_form()
        self.notify_listeners()

    def update_field(self, key: str, value: Any) -> None:
        """Store *value* under *key* and re-evaluate the form."""
        if self._form_data.get(key) == value:
            return

        self._form_data[key] = value
        self._errors.pop(key, None)
        self._rebuild_form()
        self._validate_form()
        self.notify_listeners()

    def clear(self) -> None:
        """Drop the product, its data, errors and fields."""
        self._selected_product = None
        self._clear_form_data()
        self._fields = []
        self.notify_listeners()

    def validate_and_submit(self) -> bool:
        """Revalidate the whole form and return ``is_valid``.

        Listeners are notified only when the error map changed.
        """
        previous = dict(self._errors)
        self._validate_form()
        if self._errors != previous:
            self.notify_listeners()
        return self.is_valid

    def calculate_price(self) -> PricingResult:
        """Price the current form: product base price, then the pricing rules."""
        if self._selected_product is None:
            return PricingResult(base_price=0.0, final_price=0.0, errors=(NO_PRODUCT_SELECTED_ERROR,))

        base_price = self._selected_product.calculate_base_price(self._form_data)
        context = self._context(**{META_CUSTOMER_ID: self.customer_id})
        return self._pricing_engine.calculate_final_price(base_price, context)

    def get_formatted_value(self, key: str) -> str:
        """Return the value of *key* as display text; numbers use the field's decimals."""
        value = self._form_data.get(key)
        if value is None:
            return ""

        form_field = self._field(key)
        if isinstance(form_field, NumberFieldConfig):
            number = parse_float(value, math.nan)
            if not math.isnan(number):
                decimals = 2 if form_field.decimals is None else form_field.decimals
                return f"{number:.{decimals}f}"
        return str(value)

    def is_field_required(self, key: str) -> bool:
        return any(f.key == key and f.is_visible and f.is_required for f in self._fields)

    def is_field_visible(self, key: str) -> bool:
        return any(f.key == key and f.is_visible for f in self._fields)

    def _field(self, key: str) -> FormFieldConfig | None:
        return next((f for f in self._fields if f.key == key), None)

    def _context(self, **extra_metadata: Any) -> RuleContext:
        assert self._selected_product is not None
        return RuleContext(
            form_data=dict(self._form_data),
            metadata={
                META_PRODUCT_TYPE: self._selected_product.product_type,
                META_PRODUCT_ID: self._selected_product.id,
                **extra_metadata,
            },
        )

    def _clear_form_data(self) -> None:
        self._form_data.clear()
        self._errors.clear()

    def _rebuild_form(self) -> None:
        if self._selected_product is None:
            self._fields = []
            return

        base_fields = self._selected_product.get_form_fields()
        fields = self._visibility_engine.apply_visibility_rules(base_fields, self._context())
        self._fields = sorted(fields, key=lambda f: f.order)

    def _validate_form(self) -> None:
        self._errors.clear()
        if self._selected_product is None:
            return

        for form_field in self._fields:
            if not form_field.is_visible:
                continue
            error = form_field.validate(self._form_data.get(form_field.key))
            if error is not None:
                self._errors[form_field.key] = error

        for index, message in enumerate(self._selected_product.validate(self._form_data)):
            self._errors[f"{PRODUCT_ERROR_KEY_PREFIX}{index}"] = message

        validation = self._validation_engine.validate_all(self._context())
        for index, message in enumerate(validation.errors):
            self._errors[f"{RULE_ERROR_KEY_PREFIX}{index}"] = message
