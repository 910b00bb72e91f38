"""Collect-all validation of a rule directory.

Returns a list of :class:`ValidationError` instances rather than raising,
so every problem is reported in one pass.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from quoteflow.constants.rule_schema import RULE_FILE_SUFFIX
from quoteflow.constants.validation import RULE001, RULE002, RULE003, RULE008
from quoteflow.exceptions.validation import ValidationError, sort_errors
from quoteflow.rules.loader import BUNDLED_RULES_DIR
from quoteflow.rules.schema import check_rule_definition


def validate_rule_sources(rules_dir: Path | None = None) -> list[ValidationError]:
    """Validate every rule file of *rules_dir* (bundled rules by default)."""
    directory = (rules_dir if rules_dir is not None else BUNDLED_RULES_DIR).resolve()
    if not directory.is_dir():
        return [
            ValidationError(
                code=RULE001,
                path=str(directory),
                field="",
                message=f"rules directory not found: {directory}",
            )
        ]

    errors: list[ValidationError] = []
    for path in sorted(directory.glob("*.yml")):
        errors.append(
            ValidationError(
                code=RULE002,
                path=str(path),
                field="",
                message=f"rule file must use {RULE_FILE_SUFFIX} extension: {path.name}",
                hint=f"rename the file to use a {RULE_FILE_SUFFIX} extension",
            )
        )

    seen_ids: dict[str, str] = {}
    for path in sorted(directory.glob(f"*{RULE_FILE_SUFFIX}")):
        _validate_single_rule(path, errors, seen_ids)
    return sort_errors(errors)


def _validate_single_rule(path: Path, errors: list[ValidationError], seen_ids: dict[str, str]) -> None:
    path_str = str(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        errors.append(
            ValidationError(code=RULE001, path=path_str, field="", message=f"failed to read rule file: {exc}")
        )
        return
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=RULE003, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return

    errors.extend(check_rule_definition(raw, path_str))

    rule_id = raw.get("id") if isinstance(raw, dict) else None
    if not isinstance(rule_id, str) or not rule_id.strip():
        return
    previous = seen_ids.get(rule_id)
    if previous is not None:
        errors.append(
            ValidationError(
                code=RULE008,
                path=path_str,
                field="id",
                message=f"duplicate rule id `{rule_id}` (first defined in {previous})",
                rule_id=rule_id,
            )
        )
        return
    seen_ids[rule_id] = path_str
