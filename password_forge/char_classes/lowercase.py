"""Lowercase ASCII letters."""

from __future__ import annotations

import re
import string
from typing import ClassVar

from password_forge.char_classes import CharClass


class Lowercase(CharClass):
    name: ClassVar[str] = "lowercase"
    alphabet: ClassVar[str] = string.ascii_lowercase
    membership: ClassVar[re.Pattern] = re.compile(r"[a-z]")
    similar: ClassVar[str] = "il"

    def requirement_message(self, minimum: int) -> str:
        return f"Needs at least {minimum} lowercase letter(s)"
