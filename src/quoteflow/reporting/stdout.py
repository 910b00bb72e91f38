"""Human-readable quote summary for the terminal."""

from __future__ import annotations

from quoteflow.constants.branding import ASCII_LOGO_LINES, QUOTE_SUMMARY_TITLE
from quoteflow.constants.config import DEFAULT_CURRENCY_SYMBOL
from quoteflow.constants.reporting import ANSI_GREEN, ANSI_RED, ANSI_RESET, ANSI_YELLOW
from quoteflow.controllers import BudgetSummary
from quoteflow.model import FormFieldConfig, Product
from quoteflow.reporting.formatting import format_currency, format_percentage, format_signed_currency


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class QuoteReporter:
    """Formats a budget summary as stdout text."""

    def __init__(
        self,
        summary: BudgetSummary,
        fields: tuple[FormFieldConfig, ...] = (),
        *,
        color: bool = True,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    ) -> None:
        self._summary = summary
        self._fields = fields
        self._color = color
        self._symbol = currency_symbol

    def render(self) -> str:
        """Render the full quote as a single string."""
        sections = [self._render_header(), self._render_fields(), self._render_pricing(), self._render_status()]
        return "\n".join(section for section in sections if section)

    def _money(self, amount: float) -> str:
        return format_currency(amount, self._symbol)

    def _render_header(self) -> str:
        product = self._summary.product
        return "\n".join(
            [
                "",
                f"  {ASCII_LOGO_LINES[0]}",
                f"  {ASCII_LOGO_LINES[1]}",
                f"  {QUOTE_SUMMARY_TITLE}",
                "  " + "─" * 38,
                "",
                f"  Produto     {product.name} ({product.id})",
                f"  Tipo        {product.product_type}",
            ]
        )

    def _render_fields(self) -> str:
        visible = [form_field for form_field in self._fields if form_field.is_visible]
        if not visible:
            return ""
        lines = ["", "  Campos"]
        width = max(len(form_field.label) for form_field in visible)
        for form_field in visible:
            value = self._summary.form_data.get(form_field.key)
            marker = "*" if form_field.is_required else " "
            shown = "" if value is None else str(value)
            lines.append(f"  {marker} {form_field.label.ljust(width)}  {shown}")
        return "\n".join(lines)

    def _render_pricing(self) -> str:
        pricing = self._summary.pricing
        lines = ["", f"  Preço base          {self._money(pricing.base_price)}"]
        for adjustment in pricing.adjustments:
            amount = format_signed_currency(adjustment.amount, self._symbol)
            lines.append(f"  {adjustment.type:<18}  {amount} ({format_percentage(adjustment.percentage)})")
        lines.append(f"  Preço final         {self._money(pricing.final_price)}")
        lines.append(f"  Quantidade          {self._summary.quantity_value}")
        lines.append(f"  Total               {self._money(self._summary.total_price)}")
        if self._summary.total_savings > 0:
            savings = self._money(self._summary.total_savings)
            lines.append(f"  Economia            {savings} ({format_percentage(self._summary.discount_percentage)})")
        return "\n".join(lines)

    def _render_status(self) -> str:
        if self._summary.is_valid:
            status = _colorize("válido", ANSI_GREEN) if self._color else "válido"
            return f"\n  Situação    {status}"

        status = _colorize("inválido", ANSI_RED) if self._color else "inválido"
        lines = ["", f"  Situação    {status}"]
        for error in self._summary.errors:
            bullet = _colorize("!", ANSI_YELLOW) if self._color else "!"
            lines.append(f"  {bullet} {error}")
        return "\n".join(lines)


def render_product_table(products: list[Product], currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Render one catalog product per line."""
    if not products:
        return "  Nenhum produto encontrado"
    id_width = max(len(product.id) for product in products)
    name_width = max(len(product.name) for product in products)
    return "\n".join(
        f"  {product.id.ljust(id_width)}  {product.product_type:<11}  "
        f"{product.name.ljust(name_width)}  {format_currency(product.base_price, currency_symbol)}"
        for product in products
    )
