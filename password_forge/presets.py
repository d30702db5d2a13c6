"""Quick presets for common password shapes."""

from __future__ import annotations

from password_forge.models import GenerationOptions

PRESETS: dict[str, GenerationOptions] = {
    "basic": GenerationOptions(
        length=12, symbols=False,
        min_uppercase=1, min_lowercase=1, min_digits=1, min_symbols=0,
    ),
    "secure": GenerationOptions(
        length=16, exclude_similar=True, exclude_ambiguous=True,
        min_uppercase=2, min_lowercase=2, min_digits=2, min_symbols=2,
        no_repeating=True, no_sequential=True,
    ),
    "pin": GenerationOptions(
        length=6, uppercase=False, lowercase=False, symbols=False,
        min_digits=6,
    ),
    "memorable": GenerationOptions(
        length=14, symbols=False, exclude_similar=True,
        min_uppercase=2, min_lowercase=4, min_digits=2, min_symbols=0,
        no_sequential=True,
    ),
}

DESCRIPTIONS: dict[str, str] = {
    "basic": "Basic (12 chars, letters and digits)",
    "secure": "Secure (16 chars, all classes, strict rules)",
    "pin": "PIN (6 digits)",
    "memorable": "Memorable (14 chars, no symbols)",
}


def get_preset(name: str) -> GenerationOptions:
    if name not in PRESETS:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS)}")
    return PRESETS[name]
