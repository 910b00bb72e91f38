"""Problems found while checking rule files, with their location inside the file."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One problem in one rule file.

    ``field`` is a dotted key path inside the rule (``params.minimum_quantity``);
    ``rule_id`` is set once the rule's own id is known to be usable.
    """

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    rule_id: str | None = None

    @property
    def location(self) -> str:
        """``<file>[#<rule id>][:<field>]``."""
        location = self.path
        if self.rule_id:
            location = f"{location}#{self.rule_id}"
        if self.field:
            location = f"{location}:{self.field}"
        return location

    def format(self) -> str:
        """Format as a single line: code, location, message and optional hint."""
        line = f"[{self.code}] {self.location} {self.message}"
        if self.hint:
            line = f"{line} ({self.hint})"
        return line


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort by code, then file, then the key path inside the rule."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    """Format *errors* one per line in sorted order."""
    return "\n".join(e.format() for e in sort_errors(errors))
