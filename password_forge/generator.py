"""Constrained password generator: build alphabet, assemble, shuffle, validate, retry.

Alphabet composition and constraint checking are independent; a candidate
is drawn, checked, and redrawn up to MAX_ATTEMPTS times. Unsatisfiable
configurations end in a reportable failure instead of an endless loop.
"""

from __future__ import annotations

import logging
from typing import Optional

from password_forge.char_classes import get_char_class
from password_forge.generation_log import GenerationLog
from password_forge.models import GenerationOptions, GenerationResult
from password_forge.random_source import RandomSource, system
from password_forge.security import fingerprint
from password_forge.validation import validate

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100

NO_CHARACTERS = "No character types selected"


def build_alphabet(options: GenerationOptions) -> str:
    """Effective alphabet: enabled classes after exclusions, plus (or only) custom characters."""
    if options.use_custom_only:
        return options.custom_characters
    alphabet = "".join(
        get_char_class(name).effective_alphabet(options) for name in options.enabled_classes()
    )
    return alphabet + options.custom_characters


def _required_representatives(options: GenerationOptions, rng: RandomSource) -> list[str]:
    """One pre-selected character per enabled class with a positive minimum."""
    if options.use_custom_only:
        return []
    required = []
    for name, minimum in options.minimum_counts().items():
        if minimum <= 0:
            continue
        pool = get_char_class(name).effective_alphabet(options)
        # A class emptied by exclusions contributes no representative
        if pool:
            required.append(rng.choice(pool))
    return required


def generate(
    options: GenerationOptions,
    rng: Optional[RandomSource] = None,
    log: Optional[GenerationLog] = None,
) -> GenerationResult:
    """Generate one password. Never raises for empty alphabets or unmet constraints."""
    rng = rng or system()
    alphabet = build_alphabet(options)

    if not alphabet:
        logger.debug("empty effective alphabet, no attempts made")
        if log:
            log.log("empty_alphabet", length=options.length)
        return GenerationResult(status="empty_alphabet", violations=(NO_CHARACTERS,), attempts=0)

    if log:
        log.log("generate_start", length=options.length, alphabet_size=len(set(alphabet)),
                classes=tuple(options.enabled_classes()), custom_only=options.use_custom_only)

    required = _required_representatives(options, rng)
    candidate = ""
    errors: list[str] = []

    for attempt in range(1, MAX_ATTEMPTS + 1):
        chars = list(required)
        chars.extend(rng.choice(alphabet) for _ in range(options.length - len(chars)))
        rng.shuffle(chars)
        candidate = "".join(chars[:options.length])

        errors = validate(candidate, options)
        if not errors:
            logger.debug("valid candidate on attempt %d", attempt)
            if log:
                log.log("generate_end", status="ok", attempts=attempt, fingerprint=fingerprint(candidate))
            return GenerationResult(status="ok", password=candidate, attempts=attempt)

        logger.debug("attempt %d rejected: %s", attempt, "; ".join(errors))
        if log:
            log.log("attempt_rejected", attempt=attempt, violations=tuple(errors))

    logger.info("no valid candidate after %d attempts: %s", MAX_ATTEMPTS, "; ".join(errors))
    if log:
        log.log("generate_end", status="constraints_unsatisfiable", attempts=MAX_ATTEMPTS,
                violations=tuple(errors), fingerprint=fingerprint(candidate))
    return GenerationResult(
        status="constraints_unsatisfiable",
        password=candidate,
        violations=tuple(errors),
        attempts=MAX_ATTEMPTS,
    )


def generate_many(
    options: GenerationOptions,
    count: int,
    rng: Optional[RandomSource] = None,
    log: Optional[GenerationLog] = None,
) -> list[GenerationResult]:
    """Generate `count` independent passwords sharing one random source."""
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    rng = rng or system()
    return [generate(options, rng=rng, log=log) for _ in range(count)]
