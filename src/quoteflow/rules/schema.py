"""Strict schema checks for declarative rule definitions.

``check_rule_definition`` collects every problem of one parsed mapping so
``quoteflow validate-rules`` can report them together;
``validate_rule_definition`` is the fail-fast variant used while loading.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from quoteflow.constants.rule_schema import (
    ALLOWED_TOP_KEYS,
    KIND_PARAMS,
    PARAM_SHAPES,
    REQUIRED_TOP_KEYS,
    VALID_KINDS,
)
from quoteflow.constants.validation import (
    RULE004,
    RULE005,
    RULE006,
    RULE007,
    RULE009,
    RULE010,
    RULE011,
    RULE012,
    RULE013,
)
from quoteflow.exceptions import RuleDefinitionError
from quoteflow.exceptions.validation import ValidationError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _matches_shape(value: Any, shape: str) -> bool:
    match shape:
        case "int":
            return _is_int(value)
        case "number":
            return _is_number(value)
        case "string":
            return isinstance(value, str) and bool(value.strip())
        case "string_list":
            return _is_string_list(value)
        case "scalar":
            return isinstance(value, str | int | float | bool)
        case "bool_map":
            return isinstance(value, dict) and all(
                isinstance(k, str) and isinstance(v, bool) for k, v in value.items()
            )
        case "string_list_map":
            return isinstance(value, dict) and all(
                isinstance(k, str) and _is_string_list(v) for k, v in value.items()
            )
    return False


def check_rule_definition(data: Any, path: str) -> list[ValidationError]:
    """Return every schema violation of one rule definition."""
    if not isinstance(data, dict):
        return [
            ValidationError(
                code=RULE004,
                path=path,
                field="",
                message=f"rule must be a mapping, got {type(data).__name__}",
            )
        ]

    errors: list[ValidationError] = []
    for key in sorted(set(data) - ALLOWED_TOP_KEYS):
        errors.append(ValidationError(code=RULE005, path=path, field=key, message=f"unknown top-level key `{key}`"))
    for key in sorted(REQUIRED_TOP_KEYS - set(data)):
        errors.append(ValidationError(code=RULE006, path=path, field=key, message=f"missing required field `{key}`"))

    if "id" in data and (not isinstance(data["id"], str) or not data["id"].strip()):
        errors.append(ValidationError(code=RULE007, path=path, field="id", message="`id` must be a non-empty string"))

    errors.extend(_check_top_level_types(data, path))

    kind = data.get("kind")
    if "kind" in data and kind not in VALID_KINDS:
        errors.append(
            ValidationError(
                code=RULE009,
                path=path,
                field="kind",
                message=f"unknown kind {kind!r}",
                hint=f"expected one of {', '.join(sorted(VALID_KINDS))}",
            )
        )
    elif kind in VALID_KINDS and isinstance(data.get("params"), dict):
        errors.extend(_check_params(kind, data["params"], path))

    rule_id = data.get("id")
    if isinstance(rule_id, str) and rule_id.strip():
        return [dataclasses.replace(error, rule_id=rule_id) for error in errors]
    return errors


def _check_top_level_types(data: dict[str, Any], path: str) -> list[ValidationError]:
    problems: list[tuple[str, str]] = []
    if "name" in data and (not isinstance(data["name"], str) or not data["name"].strip()):
        problems.append(("name", "`name` must be a non-empty string"))
    if "description" in data and not isinstance(data["description"], str):
        problems.append(("description", "`description` must be a string"))
    if "priority" in data and not _is_int(data["priority"]):
        problems.append(("priority", "`priority` must be an integer"))
    if "enabled" in data and not isinstance(data["enabled"], bool):
        problems.append(("enabled", "`enabled` must be a boolean"))
    if "product_types" in data and not _is_string_list(data["product_types"]):
        problems.append(("product_types", "`product_types` must be a list of strings"))
    if "conditions" in data and not isinstance(data["conditions"], dict):
        problems.append(("conditions", "`conditions` must be a mapping"))
    if "params" in data and not isinstance(data["params"], dict):
        problems.append(("params", "`params` must be a mapping"))
    return [ValidationError(code=RULE010, path=path, field=field, message=message) for field, message in problems]


def _check_params(kind: str, params: dict[str, Any], path: str) -> list[ValidationError]:
    required, optional = KIND_PARAMS[kind]
    errors: list[ValidationError] = []
    for name in sorted(set(params) - required - optional):
        errors.append(
            ValidationError(
                code=RULE011,
                path=path,
                field=f"params.{name}",
                message=f"unknown param `{name}` for kind `{kind}`",
            )
        )
    for name in sorted(required - set(params)):
        errors.append(
            ValidationError(
                code=RULE012,
                path=path,
                field=f"params.{name}",
                message=f"missing required param `{name}` for kind `{kind}`",
            )
        )
    for name in sorted(set(params) & (required | optional)):
        shape = PARAM_SHAPES[name]
        if not _matches_shape(params[name], shape):
            errors.append(
                ValidationError(
                    code=RULE013,
                    path=path,
                    field=f"params.{name}",
                    message=f"param `{name}` must be of shape {shape}, got {params[name]!r}",
                )
            )
    return errors


def validate_rule_definition(data: Any, path: str) -> None:
    """Raise RuleDefinitionError on the first schema violation of *data*."""
    errors = check_rule_definition(data, path)
    if errors:
        raise RuleDefinitionError(errors[0].format())
