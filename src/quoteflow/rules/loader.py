"""Loader for declarative rule files.

Reads one YAML mapping per ``*.yaml`` file, validates it strictly and builds
the concrete rule through the kind registry. Files are read in sorted path
order, which fixes the insertion order used to break priority ties.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from quoteflow.constants.rule_schema import RULE_FILE_SUFFIX
from quoteflow.exceptions import ConfigError, RuleDefinitionError
from quoteflow.rules.base import Rule
from quoteflow.rules.registry import build_rule
from quoteflow.rules.schema import validate_rule_definition

logger = logging.getLogger(__name__)

BUNDLED_RULES_DIR: Path = Path(__file__).parent / "bundled"


def collect_rule_paths(rules_dir: Path | None = None) -> tuple[Path, ...]:
    """Return the sorted rule file paths of *rules_dir* (bundled rules by default)."""
    directory = (rules_dir if rules_dir is not None else BUNDLED_RULES_DIR).resolve()
    if not directory.exists():
        raise ConfigError(f"Rules directory does not exist: {directory}")
    if not directory.is_dir():
        raise ConfigError(f"Rules directory is not a directory: {directory}")
    return tuple(sorted(directory.glob(f"*{RULE_FILE_SUFFIX}")))


def load_rule_file(path: Path) -> dict[str, Any]:
    """Parse and validate one rule file."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read rule file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise RuleDefinitionError(f"Invalid YAML in {path}: {exc}") from exc

    validate_rule_definition(raw, str(path))
    return raw


def load_rules(rules_dir: Path | None = None, vip_customers: tuple[str, ...] = ()) -> list[Rule]:
    """Load every rule of *rules_dir*, failing fast on the first bad file."""
    rules: list[Rule] = []
    sources: dict[str, Path] = {}

    for path in collect_rule_paths(rules_dir):
        definition = load_rule_file(path)
        rule_id = definition["id"]

        previous = sources.get(rule_id)
        if previous is not None:
            raise RuleDefinitionError(f"Duplicate rule id '{rule_id}' loaded from {previous} and {path}")
        sources[rule_id] = path

        rule = build_rule(definition, vip_customers)
        rules.append(rule)
        logger.debug("Loaded %s rule: %s (priority %d)", rule.rule_type, rule.id, rule.priority)

    return rules
