"""Punctuation symbols.

Only the fixed set below counts as a symbol; other punctuation supplied as
custom characters does not.
"""

from __future__ import annotations

import re
from typing import ClassVar

from password_forge.char_classes import CharClass

SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class Symbol(CharClass):
    name: ClassVar[str] = "symbol"
    alphabet: ClassVar[str] = SYMBOLS
    membership: ClassVar[re.Pattern] = re.compile(f"[{re.escape(SYMBOLS)}]")
    ambiguous: ClassVar[str] = "{}[]()/\\'\"`,;.<>"

    def requirement_message(self, minimum: int) -> str:
        return f"Needs at least {minimum} symbol(s)"
