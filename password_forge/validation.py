"""Constraint checks for a candidate password.

Minimum counts use canonical class membership, so a character removed from
the generation alphabet by an exclusion rule still counts toward its class
if it reappears (for example through custom characters).
"""

from __future__ import annotations

from password_forge.char_classes import get_char_class
from password_forge.models import GenerationOptions

REPEATING = "Contains repeating characters"
SEQUENTIAL = "Contains sequential characters"


def has_repeating(text: str) -> bool:
    """True if any two adjacent characters are identical."""
    return any(a == b for a, b in zip(text, text[1:]))


def has_sequential(text: str) -> bool:
    """True if any 3 adjacent characters step by exactly +1 or -1 code point."""
    codes = [ord(c) for c in text]
    for a, b, c in zip(codes, codes[1:], codes[2:]):
        if (b == a + 1 and c == b + 1) or (b == a - 1 and c == b - 1):
            return True
    return False


def validate(candidate: str, options: GenerationOptions) -> list[str]:
    """Return violation messages, one per failed constraint. Empty list means valid."""
    errors: list[str] = []

    if not options.use_custom_only:
        for class_name, minimum in options.minimum_counts().items():
            if minimum <= 0:
                continue
            char_class = get_char_class(class_name)
            if char_class.count(candidate) < minimum:
                errors.append(char_class.requirement_message(minimum))

    if options.no_repeating and has_repeating(candidate):
        errors.append(REPEATING)

    if options.no_sequential and has_sequential(candidate):
        errors.append(SEQUENTIAL)

    return errors
