"""Decimal digits."""

from __future__ import annotations

import re
import string
from typing import ClassVar

from password_forge.char_classes import CharClass


class Digit(CharClass):
    name: ClassVar[str] = "digit"
    alphabet: ClassVar[str] = string.digits
    membership: ClassVar[re.Pattern] = re.compile(r"[0-9]")
    similar: ClassVar[str] = "10"

    def requirement_message(self, minimum: int) -> str:
        return f"Needs at least {minimum} number(s)"
