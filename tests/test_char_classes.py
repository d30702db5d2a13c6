"""Tests for the character class registry, exclusions, and canonical membership."""

import re

import pytest

from password_forge.char_classes import CharClass, discover_char_classes, get_char_class, get_registry
from password_forge.models import GenerationOptions


@pytest.fixture(autouse=True)
def _load_classes():
    discover_char_classes()


class TestRegistry:
    def test_four_classes_registered(self):
        assert set(get_registry()) == {"uppercase", "lowercase", "digit", "symbol"}

    def test_get_returns_instance(self):
        assert get_char_class("digit").name == "digit"

    def test_get_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown character class"):
            get_char_class("emoji")

    def test_new_class_auto_registers(self):
        class _Hex(CharClass):
            name = "_test_hex"
            alphabet = "0123456789abcdef"
            membership = re.compile(r"[0-9a-f]")

            def requirement_message(self, minimum):
                return f"Needs at least {minimum} hex digit(s)"

        assert "_test_hex" in CharClass.get_registry()
        CharClass._registry.pop("_test_hex", None)


class TestEffectiveAlphabet:
    def test_no_exclusions(self):
        o = GenerationOptions()
        assert get_char_class("uppercase").effective_alphabet(o) == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        assert get_char_class("digit").effective_alphabet(o) == "0123456789"

    @pytest.mark.parametrize("name,removed", [
        ("uppercase", "IL"),
        ("lowercase", "il"),
        ("digit", "10"),
    ])
    def test_exclude_similar(self, name, removed):
        alphabet = get_char_class(name).effective_alphabet(GenerationOptions(exclude_similar=True))
        for c in removed:
            assert c not in alphabet
        assert len(alphabet) == len(get_char_class(name).alphabet) - len(removed)

    def test_exclude_similar_keeps_o(self):
        alphabet = get_char_class("uppercase").effective_alphabet(GenerationOptions(exclude_similar=True))
        assert "O" in alphabet

    def test_exclude_similar_leaves_symbols(self):
        sym = get_char_class("symbol")
        assert sym.effective_alphabet(GenerationOptions(exclude_similar=True)) == sym.alphabet

    def test_exclude_ambiguous_symbols(self):
        alphabet = get_char_class("symbol").effective_alphabet(GenerationOptions(exclude_ambiguous=True))
        assert alphabet == "!@#$%^&*_+-=|:?"

    def test_exclude_ambiguous_leaves_letters(self):
        lower = get_char_class("lowercase")
        assert lower.effective_alphabet(GenerationOptions(exclude_ambiguous=True)) == lower.alphabet


class TestCanonicalMembership:
    def test_counts(self):
        text = "AbC1!~ "
        assert get_char_class("uppercase").count(text) == 2
        assert get_char_class("lowercase").count(text) == 1
        assert get_char_class("digit").count(text) == 1
        assert get_char_class("symbol").count(text) == 1

    def test_excluded_chars_still_count(self):
        # I and L are dropped by exclude_similar, but remain uppercase members
        assert get_char_class("uppercase").count("IL") == 2

    @pytest.mark.parametrize("char", list("!@#$%^&*()_+-=[]{}|;:,.<>?"))
    def test_every_symbol_is_member(self, char):
        assert get_char_class("symbol").contains(char)

    @pytest.mark.parametrize("char", ["~", "/", "\\", "'", '"', "`", " "])
    def test_other_punctuation_not_member(self, char):
        assert not get_char_class("symbol").contains(char)

    def test_requirement_messages(self):
        assert get_char_class("uppercase").requirement_message(2) == "Needs at least 2 uppercase letter(s)"
        assert get_char_class("digit").requirement_message(6) == "Needs at least 6 number(s)"
        assert get_char_class("symbol").requirement_message(1) == "Needs at least 1 symbol(s)"
