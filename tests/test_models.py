"""Tests for password_forge.models."""

import json

import pytest

from password_forge.errors import ConstraintsUnsatisfiable, EmptyAlphabet, OptionsError
from password_forge.models import (
    CHAR_CLASS_ORDER,
    GENERATION_STATUSES,
    GenerationOptions,
    GenerationResult,
)


class TestGenerationOptions:
    def test_defaults(self):
        o = GenerationOptions()
        assert o.length == 16
        assert o.enabled_classes() == ["uppercase", "lowercase", "digit", "symbol"]

    def test_enabled_classes_canonical_order(self):
        o = GenerationOptions(uppercase=False, symbols=False)
        assert o.enabled_classes() == ["lowercase", "digit"]

    def test_minimum_counts_ignore_disabled(self):
        o = GenerationOptions(uppercase=False, min_uppercase=5, min_lowercase=3)
        counts = o.minimum_counts()
        assert "uppercase" not in counts
        assert counts["lowercase"] == 3

    @pytest.mark.parametrize("length", [0, -1, 257])
    def test_length_out_of_range(self, length):
        with pytest.raises(OptionsError, match="length"):
            GenerationOptions(length=length)

    @pytest.mark.parametrize("length", [1, 256])
    def test_length_bounds_accepted(self, length):
        assert GenerationOptions(length=length).length == length

    def test_negative_minimum_rejected(self):
        with pytest.raises(OptionsError, match="min_digits"):
            GenerationOptions(min_digits=-1)

    def test_options_error_is_value_error(self):
        with pytest.raises(ValueError):
            GenerationOptions(length="12")  # type: ignore[arg-type]

    def test_replace_returns_copy(self):
        o = GenerationOptions()
        o2 = o.replace(length=8)
        assert o.length == 16
        assert o2.length == 8

    def test_frozen(self):
        o = GenerationOptions()
        with pytest.raises(AttributeError):
            o.length = 3  # type: ignore[misc]

    def test_to_dict_field_order(self):
        keys = list(GenerationOptions().to_dict())
        assert keys[0] == "length"
        assert keys[-2:] == ["no_repeating", "no_sequential"]
        assert len(keys) == 15


class TestGenerationResult:
    def test_ok(self):
        r = GenerationResult(status="ok", password="abc", attempts=1)
        assert r.ok
        assert r.raise_for_status() is r

    def test_raise_empty_alphabet(self):
        r = GenerationResult(status="empty_alphabet", violations=("No character types selected",))
        with pytest.raises(EmptyAlphabet, match="No character types selected"):
            r.raise_for_status()

    def test_raise_unsatisfiable_carries_best_effort(self):
        r = GenerationResult(status="constraints_unsatisfiable", password="aB1",
                             violations=("Needs at least 2 uppercase letter(s)",), attempts=100)
        with pytest.raises(ConstraintsUnsatisfiable) as exc_info:
            r.raise_for_status()
        assert exc_info.value.best_effort == "aB1"
        assert exc_info.value.violations == ["Needs at least 2 uppercase letter(s)"]
        assert exc_info.value.attempts == 100

    def test_password_not_in_repr(self):
        r = GenerationResult(status="ok", password="S3cretValue!!", attempts=1)
        assert "S3cretValue!!" not in repr(r)

    def test_to_dict_redacts_by_default(self):
        r = GenerationResult(status="ok", password="S3cretValue!!", attempts=1)
        d = r.to_dict()
        assert "S3cretValue!!" not in json.dumps(d)
        assert d["length"] == 13

    def test_to_dict_none_keeps_password(self):
        r = GenerationResult(status="ok", password="S3cretValue!!", attempts=1)
        assert r.to_dict("none")["password"] == "S3cretValue!!"

    def test_to_dict_field_order(self):
        r = GenerationResult(status="ok", password="x", attempts=1)
        assert list(r.to_dict()) == ["status", "password", "length", "violations", "attempts"]


class TestConstants:
    def test_statuses(self):
        assert GENERATION_STATUSES == {"ok", "empty_alphabet", "constraints_unsatisfiable"}

    def test_class_order(self):
        assert CHAR_CLASS_ORDER == ("uppercase", "lowercase", "digit", "symbol")
