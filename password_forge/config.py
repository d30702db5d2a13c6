"""Load generation options from PASSWORD_FORGE_* variables.

Values come from an optional .env file (python-dotenv) overlaid by the
process environment. A PRESET key picks the starting options; the other
keys override individual fields.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from password_forge.errors import OptionsError
from password_forge.models import GenerationOptions
from password_forge.presets import get_preset

PREFIX = "PASSWORD_FORGE_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

# env suffix -> (field name, kind)
_FIELDS: dict[str, tuple[str, str]] = {
    "LENGTH": ("length", "int"),
    "UPPERCASE": ("uppercase", "bool"),
    "LOWERCASE": ("lowercase", "bool"),
    "DIGITS": ("digits", "bool"),
    "SYMBOLS": ("symbols", "bool"),
    "EXCLUDE_SIMILAR": ("exclude_similar", "bool"),
    "EXCLUDE_AMBIGUOUS": ("exclude_ambiguous", "bool"),
    "CUSTOM_CHARACTERS": ("custom_characters", "str"),
    "USE_CUSTOM_ONLY": ("use_custom_only", "bool"),
    "MIN_UPPERCASE": ("min_uppercase", "int"),
    "MIN_LOWERCASE": ("min_lowercase", "int"),
    "MIN_DIGITS": ("min_digits", "int"),
    "MIN_SYMBOLS": ("min_symbols", "int"),
    "NO_REPEATING": ("no_repeating", "bool"),
    "NO_SEQUENTIAL": ("no_sequential", "bool"),
}


def _parse(var: str, raw: str, kind: str) -> object:
    if kind == "str":
        return raw
    value = raw.strip()
    if kind == "bool":
        if value.lower() in _TRUE:
            return True
        if value.lower() in _FALSE:
            return False
        raise OptionsError(f"{var} must be a boolean (true/false), got {raw!r}")
    try:
        return int(value)
    except ValueError:
        raise OptionsError(f"{var} must be an integer, got {raw!r}") from None


def collect_settings(env_path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """PASSWORD_FORGE_* values with the prefix stripped. Process environment wins over the file."""
    settings: dict[str, str] = {}
    if env_path is not None:
        if not env_path.exists():
            raise FileNotFoundError(f"File not found: {env_path}")
        for var, value in dotenv_values(env_path).items():
            if var and var.startswith(PREFIX) and value is not None:
                settings[var[len(PREFIX):]] = value
    environ = os.environ if environ is None else environ
    for var, value in environ.items():
        if var.startswith(PREFIX):
            settings[var[len(PREFIX):]] = value
    return settings


def load_options(
    env_path: Optional[Path] = None,
    base: Optional[GenerationOptions] = None,
    environ: Optional[Mapping[str, str]] = None,
    preset: Optional[str] = None,
) -> GenerationOptions:
    """Options from settings. An explicit preset wins over a PRESET setting."""
    settings = collect_settings(env_path, environ)

    preset = preset or settings.pop("PRESET", "").strip()
    settings.pop("PRESET", None)
    if preset:
        try:
            options = get_preset(preset)
        except ValueError as exc:
            raise OptionsError(str(exc)) from None
    else:
        options = base or GenerationOptions()

    changes: dict[str, object] = {}
    for suffix, raw in settings.items():
        if suffix not in _FIELDS:
            continue
        field_name, kind = _FIELDS[suffix]
        changes[field_name] = _parse(PREFIX + suffix, raw, kind)
    return options.replace(**changes) if changes else options
