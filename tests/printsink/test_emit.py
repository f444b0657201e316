"""Tests for emit and PrintAction."""

import pytest

from printsink import BufferedOutput, PrintAction, emit
from printsink.modifiers import (
    LabelModifier,
    PrefixModifier,
    SuffixModifier,
    UppercaseModifier,
)


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __str__(self):
        return f"({self.x}, {self.y})"


@pytest.mark.unit
class TestEmit:
    """Test the print entry point."""

    def test_returns_value_unchanged(self, recorder):
        point = Point(1, 2)

        assert emit(point, recorder) is point

    def test_writes_string_form_once(self, recorder):
        emit(Point(1, 2), recorder)

        assert recorder.writes == ["(1, 2)"]

    def test_no_terminator_added(self, recorder):
        emit("a", recorder)
        emit("b", recorder)

        assert recorder.text == "ab"

    def test_modifier_applied(self, recorder):
        emit(42, recorder, LabelModifier("Answer"))

        assert recorder.writes == ["answer = 42"]

    def test_first_modifier_is_outermost(self, recorder):
        emit(
            "x", recorder, PrefixModifier("<"), SuffixModifier(">"), UppercaseModifier()
        )

        assert recorder.writes == ["<X>"]

    def test_modifier_order_matters(self, recorder):
        emit("v", recorder, UppercaseModifier(), LabelModifier("Key"))
        emit("v", recorder, LabelModifier("Key"), UppercaseModifier())

        assert recorder.writes == ["KEY = V", "key = V"]

    def test_callable_modifier(self, recorder):
        emit("abc", recorder, lambda s: s[::-1])

        assert recorder.writes == ["cba"]

    def test_without_output_prints_unmodified(self, capsys):
        result = emit("hello", None, UppercaseModifier())

        assert result == "hello"
        assert capsys.readouterr().out == "hello\n"

    def test_empty_string_still_written(self, recorder):
        emit("", recorder)

        assert recorder.writes == [""]

    def test_into_buffer(self):
        buffer = BufferedOutput()
        emit("one", buffer)
        emit("two", buffer)
        buffer.drain()

        assert buffer.buffer == "onetwo"
        buffer.close()

    def test_inline_in_expression(self, recorder):
        total = emit(2, recorder) + emit(3, recorder)

        assert total == 5
        assert recorder.writes == ["2", "3"]


@pytest.mark.unit
class TestPrintAction:
    """Test the deferred print object."""

    def test_properties(self, recorder):
        action = PrintAction(Point(0, 1), to=recorder, modifiers=[PrefixModifier("p")])

        assert action.description == "(0, 1)"
        assert action.printable == "p(0, 1)"
        assert action.output is recorder
        assert isinstance(action.modifiers, tuple)
        assert recorder.writes == []

    def test_call_writes_and_returns_subject(self, recorder):
        point = Point(0, 1)
        action = PrintAction(point, to=recorder)

        assert action() is point
        assert action() is point
        assert recorder.writes == ["(0, 1)", "(0, 1)"]

    def test_printable_without_modifiers(self):
        assert PrintAction(3.5).printable == "3.5"

    def test_rejects_bad_modifier(self, recorder):
        with pytest.raises(TypeError):
            PrintAction("x", to=recorder, modifiers=[123])
