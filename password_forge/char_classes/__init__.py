"""CharClass ABC with __init_subclass__ auto-registration.

Each character class lives in its own module and registers itself by
defining `name`. Adding a class requires no generator changes.
"""

from __future__ import annotations

import importlib
import pkgutil
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from password_forge.models import GenerationOptions


class CharClass(ABC):
    """Base class for all character classes.

    `alphabet` is the full canonical alphabet. `similar` and `ambiguous` are
    removed from it during alphabet construction only; `membership` always
    matches the canonical class, independent of exclusion settings.
    """

    _registry: ClassVar[dict[str, type["CharClass"]]] = {}

    # Subclasses MUST define these
    name: ClassVar[str]
    alphabet: ClassVar[str]
    membership: ClassVar[re.Pattern]
    similar: ClassVar[str] = ""
    ambiguous: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if hasattr(cls, "name") and cls.name:
            CharClass._registry[cls.name] = cls

    @classmethod
    def get_registry(cls) -> dict[str, type["CharClass"]]:
        return dict(cls._registry)

    @classmethod
    def get(cls, name: str) -> "CharClass":
        if name not in cls._registry:
            raise ValueError(f"Unknown character class: {name}. Available: {list(cls._registry)}")
        return cls._registry[name]()

    def effective_alphabet(self, options: "GenerationOptions") -> str:
        """Post-exclusion alphabet. May be empty."""
        denied = ""
        if options.exclude_similar:
            denied += self.similar
        if options.exclude_ambiguous:
            denied += self.ambiguous
        return "".join(c for c in self.alphabet if c not in denied)

    def contains(self, char: str) -> bool:
        return bool(self.membership.fullmatch(char))

    def count(self, text: str) -> int:
        """Occurrences of canonical class members in text."""
        return len(self.membership.findall(text))

    @abstractmethod
    def requirement_message(self, minimum: int) -> str:
        """Violation message for a missed minimum count."""
        ...


def get_registry() -> dict[str, type[CharClass]]:
    discover_char_classes()
    return CharClass.get_registry()


def get_char_class(name: str) -> CharClass:
    discover_char_classes()
    return CharClass.get(name)


_discovered = False


def discover_char_classes() -> None:
    """Import all class modules in this package to trigger __init_subclass__ registration."""
    global _discovered
    if _discovered:
        return
    package_dir = Path(__file__).parent
    for info in pkgutil.iter_modules([str(package_dir)]):
        if info.name.startswith("_"):
            continue
        importlib.import_module(f"password_forge.char_classes.{info.name}")
    _discovered = True
