"""
Tests for the scalar constraints.
"""

import re
from decimal import Decimal

import pytest

from declare_constraints import (
    HasLength,
    IsDefined,
    IsInt,
    IsNumber,
    IsOneOf,
    IsRegex,
    IsTrue,
    Matches,
    Predicate,
)


@pytest.mark.parametrize(
    "constraint",
    [IsNumber(), IsInt(), Matches(re.compile("x")), HasLength(), IsRegex(), Predicate(bool)],
    ids=lambda c: c.name,
)
def test_undefined_value(constraint):
    result = constraint(None)
    assert not result.is_valid()
    assert result.message == "Undefined Value"
    assert result.path == constraint.name


class TestIsDefined:
    def test_defined(self):
        assert IsDefined()(0)
        assert IsDefined()("")

    def test_undefined(self):
        r = IsDefined()(None)
        assert not r
        assert r.message == "Undefined Value"
        assert r.path == "IsDefined"


class TestIsTrue:
    @pytest.mark.parametrize("value", [1, "a", [0], True])
    def test_truthy(self, value):
        assert IsTrue()(value).is_valid()

    @pytest.mark.parametrize("value", [0, "", [], None, False])
    def test_falsy(self, value):
        r = IsTrue()(value)
        assert not r.is_valid()
        assert r.message == "Value evaluates to False"


class TestIsNumber:
    @pytest.mark.parametrize("value", [23, -1.5, Decimal("2.5"), "23", "1e5", " 7 "])
    def test_numbers(self, value):
        assert IsNumber()(value).is_valid()

    @pytest.mark.parametrize("value", ["23a", "", True, [1], {}])
    def test_not_numbers(self, value):
        r = IsNumber()(value)
        assert not r.is_valid()
        assert r.message == "Does not look like Number"


class TestIsInt:
    @pytest.mark.parametrize("value", [0, 23, -5, "42", "-0012"])
    def test_integers(self, value):
        assert IsInt()(value).is_valid()

    @pytest.mark.parametrize("value", [1.5, 3.0, "4.2", "x", "", "- 1", True, "٣"])
    def test_not_integers(self, value):
        r = IsInt()(value)
        assert not r.is_valid()
        assert r.message == "Not an Integer"

    def test_huge_integer(self):
        assert IsInt()(10**5000).is_valid()
        assert IsInt()(-(10**5000)).is_valid()


class TestMatches:
    def test_any_pattern_matches(self):
        c = Matches(re.compile("foo"), re.compile("^bar"))
        assert c("a foo b").is_valid()
        assert c("barfly").is_valid()
        r = c("a bar")
        assert not r.is_valid()
        assert r.message == "Regex does not match"

    def test_non_string_values_are_stringified(self):
        assert Matches(re.compile(r"^\d+$"))(123).is_valid()

    def test_needs_a_pattern(self):
        with pytest.raises(ValueError):
            Matches()

    def test_rejects_plain_strings(self):
        with pytest.raises(TypeError):
            Matches("foo")


class TestHasLength:
    def test_default_minimum(self):
        assert HasLength()("a").is_valid()
        r = HasLength()("")
        assert not r.is_valid()
        assert r.message == "Value too short"

    def test_bounds(self):
        c = HasLength(2, 3)
        assert c("ab").is_valid()
        assert c("abc").is_valid()
        assert not c("a").is_valid()
        r = c("abcd")
        assert not r.is_valid()
        assert r.message == "Value too long"

    def test_sized_and_unsized(self):
        assert HasLength(3, 3)([1, 2, 3]).is_valid()
        assert HasLength(3, 3)(123).is_valid()

    def test_bad_bounds(self):
        with pytest.raises(ValueError):
            HasLength(5, 2)
        with pytest.raises(ValueError):
            HasLength(-1)


class TestIsOneOf:
    def test_matching(self):
        c = IsOneOf("a", "b", 3)
        assert c("a").is_valid()
        assert c(3).is_valid()
        r = c("c")
        assert not r.is_valid()
        assert r.message == "No Value matches"

    def test_undefined_candidate(self):
        c = IsOneOf(1, None)
        assert c(None).is_valid()
        assert c(1).is_valid()
        assert not c(2).is_valid()

    def test_candidate_list(self):
        c = IsOneOf(["a", "b", None])
        assert c("b").is_valid()
        assert c(None).is_valid()
        assert not c("c").is_valid()

    def test_undefined_without_candidate(self):
        r = IsOneOf(1, 2)(None)
        assert not r.is_valid()
        assert r.message == "No Value matches"


class TestIsRegex:
    def test_compiled_pattern(self):
        assert IsRegex()(re.compile("x")).is_valid()

    def test_plain_string(self):
        r = IsRegex()("x")
        assert not r.is_valid()
        assert r.message == "Not a Regular Expression"


class TestPredicate:
    def test_predicate(self):
        c = Predicate(lambda x: x > 0, "Must be positive")
        assert c(5).is_valid()
        r = c(-5)
        assert not r.is_valid()
        assert r.message == "Must be positive"
        assert r.path == "Predicate"

    def test_needs_callable(self):
        with pytest.raises(TypeError):
            Predicate("nope")
