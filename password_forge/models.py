"""Data models for password generation.

GenerationOptions is built fresh per request and never mutated; callers
derive variants with replace(). GenerationResult is a structured outcome:
failures are values, not exceptions.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Literal

from password_forge.errors import ConstraintsUnsatisfiable, EmptyAlphabet, OptionsError
from password_forge.security import RedactionLevel, redact_password

CharClassName = Literal["uppercase", "lowercase", "digit", "symbol"]

CHAR_CLASS_ORDER: tuple[str, ...] = ("uppercase", "lowercase", "digit", "symbol")

GenerationStatus = Literal["ok", "empty_alphabet", "constraints_unsatisfiable"]

GENERATION_STATUSES: frozenset[str] = frozenset(GenerationStatus.__args__)  # type: ignore[attr-defined]

MIN_LENGTH = 1
MAX_LENGTH = 256

# class name -> (enable flag attribute, minimum count attribute)
_CLASS_FIELDS: dict[str, tuple[str, str]] = {
    "uppercase": ("uppercase", "min_uppercase"),
    "lowercase": ("lowercase", "min_lowercase"),
    "digit": ("digits", "min_digits"),
    "symbol": ("symbols", "min_symbols"),
}


@dataclass(frozen=True)
class GenerationOptions:
    length: int = 16
    uppercase: bool = True
    lowercase: bool = True
    digits: bool = True
    symbols: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False
    custom_characters: str = ""
    use_custom_only: bool = False
    min_uppercase: int = 1
    min_lowercase: int = 1
    min_digits: int = 1
    min_symbols: int = 1
    no_repeating: bool = False
    no_sequential: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise OptionsError(f"length must be an integer, got {self.length!r}")
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise OptionsError(f"length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {self.length}")
        for _, min_attr in _CLASS_FIELDS.values():
            value = getattr(self, min_attr)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise OptionsError(f"{min_attr} must be a non-negative integer, got {value!r}")

    def is_enabled(self, class_name: str) -> bool:
        return bool(getattr(self, _CLASS_FIELDS[class_name][0]))

    def enabled_classes(self) -> list[str]:
        """Enabled class names in canonical order."""
        return [name for name in CHAR_CLASS_ORDER if self.is_enabled(name)]

    def minimum_counts(self) -> dict[str, int]:
        """Minimum occurrences per enabled class. Disabled classes are absent."""
        return {name: getattr(self, _CLASS_FIELDS[name][1]) for name in self.enabled_classes()}

    def replace(self, **changes: object) -> "GenerationOptions":
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        """Canonical field ordering for stable JSON."""
        return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generate() call.

    On "constraints_unsatisfiable" the password is the last (invalid) candidate,
    kept so callers can show it with a warning.
    """

    status: GenerationStatus
    password: str = field(default="", repr=False)
    violations: tuple[str, ...] = ()
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def raise_for_status(self) -> "GenerationResult":
        if self.status == "empty_alphabet":
            raise EmptyAlphabet(self.violations[0] if self.violations else "No character types selected")
        if self.status == "constraints_unsatisfiable":
            raise ConstraintsUnsatisfiable(list(self.violations), self.password, self.attempts)
        return self

    def to_dict(self, redaction_level: RedactionLevel | str = "partial") -> dict:
        return {
            "status": self.status,
            "password": redact_password(self.password, redaction_level) if self.password else "",
            "length": len(self.password),
            "violations": list(self.violations),
            "attempts": self.attempts,
        }
