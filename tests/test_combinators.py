"""Tests for primitive matchers and combinators."""

import pytest

from tabletest.parser import (
    Parser, ScalarValue, any_whitespace, at_least, capture_unquoted, character,
    character_except, characters, either, failure, forward_ref, optional, sequence,
    string, success, whitespace, zero_or_more,
)

DIGITS = "0123456789"


class TestMatchers:
    def test_character(self) -> None:
        a = character("a")
        assert a("abc") == success("a", "bc")
        assert a("bc") == failure("bc")
        assert a("") == failure("")

    def test_character_rejects_multiple_chars(self) -> None:
        with pytest.raises(ValueError):
            character("ab")

    def test_characters(self) -> None:
        digit = characters(DIGITS)
        assert digit("5xyz") == success("5", "xyz")
        assert digit("xyz") == failure("xyz")

    def test_string(self) -> None:
        assert string("//")("// c") == success("//", " c")
        assert string("//")("/ c").is_failure
        assert string("")("abc") == success("", "abc")

    def test_character_except(self) -> None:
        not_pipe = character_except("|", ",")
        assert not_pipe("a|") == success("a", "|")
        assert not_pipe("|a") == failure("|a")
        assert not_pipe(",a") == failure(",a")
        assert not_pipe("") == failure("")

    def test_whitespace(self) -> None:
        assert whitespace()(" \t\r\n\fx") == success(" \t\r\n\f", "x")
        assert whitespace()("x") == failure("x")
        assert any_whitespace()("x") == success("", "x")
        assert any_whitespace()("  x") == success("  ", "x")


class TestEither:
    def test_either_or(self) -> None:
        a_or_b = either(character("a"), character("b"))
        assert a_or_b("abc") == success("a", "bc")
        assert a_or_b("bcd") == success("b", "cd")
        assert a_or_b("c") == failure("c")
        assert a_or_b("") == failure("")

    def test_first_match_wins(self) -> None:
        ordered = either(string("a"), string("ab"), string("abc"))
        assert ordered("abcdef") == success("a", "bcdef")
        ordered = either(string("abc"), string("ab"), string("a"))
        assert ordered("abcdef") == success("abc", "def")

    def test_failure_keeps_original_input(self) -> None:
        assert either(string("ab"), string("ac"))("ad") == failure("ad")


class TestSequence:
    def test_sequence(self) -> None:
        ab = sequence(character("a"), character("b"))
        assert ab("abcdef") == success("ab", "cdef")
        assert ab("bcdef") == failure("bcdef")
        assert ab("acdef") == failure("cdef")
        assert ab("") == failure("")

    def test_mixed_parsers(self) -> None:
        hello_world = sequence(string("hello"), whitespace(), string("world"))
        assert hello_world("hello world!") == success("hello world", "!")
        assert hello_world("helloworld") == failure("world")

    def test_empty_sequence_succeeds(self) -> None:
        assert sequence()("abc") == success("", "abc")

    def test_captures_are_concatenated_in_order(self) -> None:
        expr = sequence(
            capture_unquoted(at_least(1, characters(DIGITS))),
            character("+"),
            capture_unquoted(at_least(1, characters(DIGITS))),
        )
        result = expr("123+456")
        assert result.is_success
        assert result.captures == (ScalarValue.unquoted("123"), ScalarValue.unquoted("456"))

    def test_failure_drops_partial_captures(self) -> None:
        expr = sequence(capture_unquoted(character("a")), character("b"))
        assert expr("ac") == failure("c")
        assert expr("ac").captures == ()


class TestRepetition:
    def test_at_least(self) -> None:
        two_digits = at_least(2, characters(DIGITS))
        assert two_digits("12") == success("12", "")
        assert two_digits("12345") == success("12345", "")
        assert two_digits("123abc") == success("123", "abc")
        assert two_digits("") == failure("")
        assert two_digits("1") == failure("")
        assert two_digits("1abc") == failure("abc")

    def test_at_least_zero_always_succeeds(self) -> None:
        digits = at_least(0, characters(DIGITS))
        assert digits("abc") == success("", "abc")
        assert digits("123abc") == success("123", "abc")
        assert digits("") == success("", "")

    def test_at_least_with_compound_parser(self) -> None:
        words = at_least(2, sequence(at_least(1, character_except(" ")), optional(character(" "))))
        assert words("hello world") == success("hello world", "")
        assert words("a b") == success("a b", "")
        assert words("word") == failure("")

    def test_repetition_is_greedy_without_backtracking(self) -> None:
        greedy = sequence(zero_or_more(character("a")), character("a"))
        assert greedy("aaa") == failure("")

    def test_zero_width_repetition_terminates(self) -> None:
        assert zero_or_more(optional(character("x")))("abc") == success("", "abc")

    def test_zero_or_more(self) -> None:
        spaces = zero_or_more(character(" "))
        assert spaces("   abc") == success("   ", "abc")
        assert spaces("abc") == success("", "abc")

        items = sequence(
            optional(whitespace()),
            at_least(1, character_except(",")),
            zero_or_more(sequence(character(","), optional(whitespace()), at_least(1, character_except(",")))),
        )
        assert items("a,b,c").is_success
        assert items("a, b, c") == success("a, b, c", "")
        assert items(" item").is_success


class TestOptional:
    def test_optional(self) -> None:
        maybe_a = optional(character("a"))
        assert maybe_a("abc") == success("a", "bc")
        assert maybe_a("bc") == success("", "bc")
        assert maybe_a("") == success("", "")

    def test_optional_prefix(self) -> None:
        number = sequence(optional(string("0x")), at_least(1, characters("0123456789ABCDEF")))
        assert number("0x123ABC") == success("0x123ABC", "")
        assert number("123") == success("123", "")


class TestForwardRef:
    def test_self_recursive_rule(self) -> None:
        def parens() -> Parser:
            return either(
                sequence(character("("), forward_ref(parens), character(")")),
                string(""),
            )

        assert parens()("(())") == success("(())", "")
        assert parens()("(()") == success("", "(()")

    def test_supplier_is_resolved_at_parse_time(self) -> None:
        calls = []

        def rule() -> Parser:
            calls.append(1)
            return character("a")

        ref = forward_ref(rule)
        assert calls == []
        assert ref("ab") == success("a", "b")
        assert calls == [1]
