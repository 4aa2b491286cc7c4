"""Tests for sqlchain.conditions: compare/eq/like/is_/in_ fragments and and_/or_ combinators."""

import pytest

from sqlchain.conditions import and_, compare, eq, in_, is_, like, or_
from sqlchain.exceptions import EmptyFieldError, UnsupportedValueError
from sqlchain.literals import Ref


class TestComparisons:
    """eq/like/is_ render ``field <op> <literal>``."""

    @pytest.mark.parametrize(
        "value, literal",
        [("John", "'John'"), (12, "12"), (12.5, "12.5"), (True, "true"), ("now()", "NOW()")],
    )
    def test_eq(self, value, literal):
        assert eq("name", value) == f"name = {literal}"

    def test_like_keeps_pattern(self):
        assert like("name", "%testname") == "name LIKE '%testname'"

    def test_is(self):
        assert is_("active", True) == "active IS true"

    def test_none_keeps_requested_operator(self):
        assert eq("name", None) == "name = NULL"
        assert is_("name", None) == "name IS NULL"
        assert like("name", None) == "name LIKE NULL"

    def test_null_ref_behaves_like_none(self):
        assert eq("name", Ref(None)) == "name = NULL"
        assert is_("name", Ref(None)) == "name IS NULL"

    def test_ref_is_dereferenced(self):
        assert eq("age", Ref(30)) == "age = 30"

    def test_null_string(self):
        assert eq("name", "null") == "name = NULL"

    def test_placeholder(self):
        assert eq("id", "?") == "id = ?"

    def test_compare_custom_operator(self):
        assert compare("age", 18, ">=") == "age >= 18"

    @pytest.mark.parametrize("builder", [eq, like, is_])
    def test_empty_field_raises(self, builder):
        with pytest.raises(EmptyFieldError, match="field name cannot be empty"):
            builder("", "x")

    def test_empty_field_error_is_value_error(self):
        with pytest.raises(ValueError):
            compare("", 1, "=")

    def test_unsupported_value_raises(self):
        with pytest.raises(UnsupportedValueError):
            eq("tags", ["a", "b"])


class TestIn:
    """in_ flattens its arguments and renders literals comma-separated."""

    def test_strings(self):
        assert in_("name", "a", "b", "c") == "name IN ('a','b','c')"

    def test_mixed_types(self):
        assert in_("id", 1, 2.5, True, None) == "id IN (1,2.5,true,NULL)"

    def test_sequences_are_flattened(self):
        assert in_("id", [1, 2], (3, [4]), 5) == "id IN (1,2,3,4,5)"

    def test_single_sequence(self):
        assert in_("name", ["x", "y"]) == "name IN ('x','y')"

    def test_keyword_strings_follow_literal_rules(self):
        assert in_("created", "now()", "?", "null") == "created IN (NOW(),?,NULL)"

    def test_no_values_gives_empty_string(self):
        assert in_("id") == ""
        assert in_("id", []) == ""
        assert in_("id", [], ()) == ""

    def test_empty_field_raises(self):
        with pytest.raises(EmptyFieldError):
            in_("", 1, 2)

    def test_unsupported_value_raises(self):
        with pytest.raises(UnsupportedValueError):
            in_("id", 1, {"a": 1})


class TestCombinators:
    """and_/or_ need two fragments or more and always parenthesize."""

    @pytest.mark.parametrize("combinator", [and_, or_])
    def test_fewer_than_two_fragments(self, combinator):
        assert combinator() == ""
        assert combinator("a = 1") == ""

    def test_and(self):
        assert and_("a", "b") == "(a AND b)"
        assert and_("a", "b", "c") == "(a AND b AND c)"

    def test_or(self):
        assert or_("a", "b") == "(a OR b)"
        assert or_("a", "b", "c") == "(a OR b OR c)"

    def test_nested_or_and(self):
        fragment = or_(eq("age", "10"), and_(eq("x", "1"), eq("y", "2")))
        assert fragment == "(age = '10' OR (x = '1' AND y = '2'))"

    def test_nested_and_or(self):
        fragment = and_(eq("name", "testname"), or_(eq("age", "10"), eq("city", "New York")))
        assert fragment == "(name = 'testname' AND (age = '10' OR city = 'New York'))"

    def test_deep_nesting(self):
        fragment = eq("a", 1)
        for i in range(4):
            fragment = or_(fragment, eq("b", i))
        assert fragment == "((((a = 1 OR b = 0) OR b = 1) OR b = 2) OR b = 3)"

    def test_with_in_and_is(self):
        fragment = or_(is_("deleted_at", None), in_("status", "draft", "archived"))
        assert fragment == "(deleted_at IS NULL OR status IN ('draft','archived'))"
