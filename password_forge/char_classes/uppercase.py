"""Uppercase ASCII letters."""

from __future__ import annotations

import re
import string
from typing import ClassVar

from password_forge.char_classes import CharClass


class Uppercase(CharClass):
    name: ClassVar[str] = "uppercase"
    alphabet: ClassVar[str] = string.ascii_uppercase
    membership: ClassVar[re.Pattern] = re.compile(r"[A-Z]")
    similar: ClassVar[str] = "IL"

    def requirement_message(self, minimum: int) -> str:
        return f"Needs at least {minimum} uppercase letter(s)"
