"""CLI entrypoint for Quoteflow."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

from quoteflow import __version__
from quoteflow.catalog import ProductRepository
from quoteflow.config import QuoteflowConfig, load_config
from quoteflow.constants.branding import CLI_DESCRIPTION
from quoteflow.constants.products import KNOWN_PRODUCT_TYPES
from quoteflow.constants.reporting import OUTPUT_FORMAT_JSON, OUTPUT_FORMAT_TEXT, VALID_OUTPUT_FORMATS
from quoteflow.controllers import BudgetController
from quoteflow.exceptions import ConfigError, QuoteflowError
from quoteflow.exceptions.validation import format_errors
from quoteflow.reporting import (
    QuoteReporter,
    build_products_payload,
    build_quote_payload,
    dumps,
    render_product_table,
)
from quoteflow.rules.checks import validate_rule_sources
from quoteflow.rules.service import RulesService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="quoteflow",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    products = subparsers.add_parser("products", help="List catalog products")
    products.add_argument("-t", "--type", choices=sorted(KNOWN_PRODUCT_TYPES), default=None, help="Product type")
    products.add_argument("--min-price", type=float, default=None, help="Minimum base price (inclusive)")
    products.add_argument("--max-price", type=float, default=None, help="Maximum base price (inclusive)")
    products.add_argument("--format", choices=sorted(VALID_OUTPUT_FORMATS), default=OUTPUT_FORMAT_TEXT)

    quote = subparsers.add_parser("quote", help="Price and validate a quote for one product")
    quote.add_argument("-p", "--product", required=True, help="Catalog product id")
    quote.add_argument(
        "-s",
        "--set",
        dest="values",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Form field value (repeat flag for multiple fields)",
    )
    quote.add_argument("--customer", default=None, help="Customer id used for customer-specific pricing")
    quote.add_argument("--format", choices=sorted(VALID_OUTPUT_FORMATS), default=OUTPUT_FORMAT_TEXT)
    quote.add_argument("-R", "--rules-dir", type=Path, default=None, help="Custom rules directory")
    quote.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    quote.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding quoteflow.yaml")
    quote.add_argument("--no-color", action="store_true", help="Disable colored output")
    quote.add_argument("-v", "--verbose", action="store_true", help="Log rule evaluation details")

    validate = subparsers.add_parser("validate-rules", help="Validate rule files without quoting")
    validate.add_argument("-R", "--rules-dir", type=Path, default=None, help="Custom rules directory")

    return parser


def parse_assignments(items: list[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` items into a mapping; later items win."""
    values: dict[str, str] = {}
    for item in items:
        key, separator, value = item.partition("=")
        if not separator or not key.strip():
            raise ConfigError(f"Invalid field assignment {item!r}, expected KEY=VALUE")
        values[key.strip()] = value
    return values


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "products":
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
        return _handle_products(args)
    if args.command == "validate-rules":
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
        return _handle_validate_rules(args)
    if args.command != "quote":
        parser.error(f"Unsupported command: {args.command}")

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")
    return _handle_quote(args, config)


def _handle_products(args: argparse.Namespace) -> int:
    repository = ProductRepository.with_defaults()
    products = repository.find_by_type(args.type) if args.type else repository.find_all()
    if args.min_price is not None or args.max_price is not None:
        in_range = repository.find_by_price_range(
            min_price=args.min_price if args.min_price is not None else -math.inf,
            max_price=args.max_price if args.max_price is not None else math.inf,
        )
        products = [product for product in products if product in in_range]

    if args.format == OUTPUT_FORMAT_JSON:
        print(dumps(build_products_payload(products)))
    else:
        print(render_product_table(products))
    return 0


def _handle_quote(args: argparse.Namespace, config: QuoteflowConfig) -> int:
    rules_dir = args.rules_dir if args.rules_dir is not None else config.rules_dir
    try:
        values = parse_assignments(args.values)
        rules_service = RulesService.from_directory(rules_dir, config.vip_customers)
        controller = BudgetController(
            ProductRepository.with_defaults(),
            rules_service,
            customer_id=args.customer or config.customer_id,
        )
        controller.select_product_by_id(args.product)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except QuoteflowError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    controller.update_form_fields(values)
    summary = controller.get_budget_summary()
    assert summary is not None
    fields = controller.form_controller.fields

    if args.format == OUTPUT_FORMAT_JSON:
        print(dumps(build_quote_payload(summary, fields)))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = QuoteReporter(summary, fields, color=use_color, currency_symbol=config.currency_symbol)
        print(reporter.render())

    return 0 if summary.is_valid else 1


def _handle_validate_rules(args: argparse.Namespace) -> int:
    """Validate every rule file and report all problems."""
    errors = validate_rule_sources(args.rules_dir)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Rules are valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
