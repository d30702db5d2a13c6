"""Rough password strength estimate for display next to a generated password."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_LEVELS = [
    # (score below, label, level)
    (3, "Weak", 1),
    (5, "Fair", 2),
    (7, "Good", 3),
    (8, "Strong", 4),
]


@dataclass(frozen=True)
class Strength:
    label: str
    level: int
    score: int

    def to_dict(self) -> dict:
        return {"label": self.label, "level": self.level, "score": self.score}


def score(password: str) -> int:
    """0..8: one point per length threshold and per character kind present."""
    points = sum(1 for threshold in (8, 12, 16, 20) if len(password) >= threshold)
    for pattern in (r"[a-z]", r"[A-Z]", r"[0-9]", r"[^A-Za-z0-9]"):
        if re.search(pattern, password):
            points += 1
    return points


def assess(password: str) -> Strength:
    s = score(password)
    for below, label, level in _LEVELS:
        if s < below:
            return Strength(label=label, level=level, score=s)
    return Strength(label="Very Strong", level=5, score=s)


def entropy_bits(length: int, alphabet_size: int) -> float:
    """Upper bound on entropy for uniform draws from an alphabet."""
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return round(length * math.log2(alphabet_size), 2)


@dataclass(frozen=True)
class Analysis:
    """Composition breakdown of a single password.

    `symbols` counts every non-alphanumeric character, including custom
    punctuation outside the symbol class.
    """

    length: int
    uppercase: int
    lowercase: int
    digits: int
    symbols: int
    unique: int
    entropy_bits: int
    crack_time: str

    def to_dict(self) -> dict:
        return {
            "length": self.length,
            "uppercase": self.uppercase,
            "lowercase": self.lowercase,
            "digits": self.digits,
            "symbols": self.symbols,
            "unique": self.unique,
            "entropy_bits": self.entropy_bits,
            "crack_time": self.crack_time,
        }


def crack_time(length: int) -> str:
    """Coarse label by length alone."""
    if length > 12:
        return "> 1000 years"
    if length > 8:
        return "> 100 years"
    return "< 1 year"


def analyze(password: str) -> Analysis:
    unique = len(set(password))
    return Analysis(
        length=len(password),
        uppercase=len(re.findall(r"[A-Z]", password)),
        lowercase=len(re.findall(r"[a-z]", password)),
        digits=len(re.findall(r"[0-9]", password)),
        symbols=len(re.findall(r"[^A-Za-z0-9]", password)),
        unique=unique,
        # log2 of the distinct characters actually present
        entropy_bits=round(len(password) * math.log2(unique)) if unique else 0,
        crack_time=crack_time(len(password)),
    )
