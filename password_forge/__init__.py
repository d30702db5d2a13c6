"""Constrained random password generator."""

from password_forge.generator import MAX_ATTEMPTS, build_alphabet, generate, generate_many
from password_forge.models import GenerationOptions, GenerationResult

__version__ = "1.0.0"

__all__ = [
    "MAX_ATTEMPTS",
    "GenerationOptions",
    "GenerationResult",
    "build_alphabet",
    "generate",
    "generate_many",
]
