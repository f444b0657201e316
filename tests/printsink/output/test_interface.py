"""Tests for the Output and Modifier base capabilities."""

import pytest

from printsink import (
    AnyOutput,
    BufferedOutput,
    ManyOutput,
    ModifiedOutput,
    Modifier,
    Output,
)
from printsink.modifiers import (
    FunctionModifier,
    LabelModifier,
    PrefixModifier,
    TraceModifier,
    UppercaseModifier,
)
from printsink.output.interface import as_modifier, close_output, drain_output


@pytest.mark.unit
class TestOutputContract:
    """Test the base Output class."""

    def test_write_not_overridden_fails_loudly(self):
        """Test base write raises naming the concrete class."""

        class Incomplete(Output):
            pass

        with pytest.raises(NotImplementedError, match="Incomplete must override"):
            Incomplete().write("x")

    def test_default_drain_and_close(self, recorder):
        """Test synchronous outputs drain immediately and close quietly."""
        assert Output.drain(recorder) is True
        assert recorder.drain(timeout=0) is True

    def test_usable_as_print_file(self, recorder):
        """Test builtin print writes value and terminator separately."""
        print("hello", file=recorder)

        assert recorder.writes == ["hello", "\n"]


@pytest.mark.unit
class TestModifierContract:
    """Test the base Modifier class."""

    def test_base_modifier_is_identity(self):
        assert Modifier().modify("abc") == "abc"
        assert Modifier().modify("") == ""

    def test_modifier_is_callable(self):
        assert UppercaseModifier()("abc") == "ABC"

    def test_as_modifier_keeps_modifiers(self):
        modifier = UppercaseModifier()
        assert as_modifier(modifier) is modifier

    def test_as_modifier_wraps_callables(self):
        modifier = as_modifier(str.title)
        assert isinstance(modifier, FunctionModifier)
        assert modifier.modify("hello world") == "Hello World"

    def test_as_modifier_rejects_non_callables(self):
        with pytest.raises(TypeError, match="Modifier must be"):
            as_modifier(42)


@pytest.mark.unit
class TestChainingHelpers:
    """Test helpers that wrap an output."""

    def test_modified_returns_wrapper(self, recorder):
        wrapped = recorder.modified(UppercaseModifier())

        assert isinstance(wrapped, ModifiedOutput)
        assert wrapped.root is recorder

    def test_helpers_apply_their_modifier(self, recorder):
        recorder.uppercased().write("a")
        recorder.prefixed("> ").write("b")
        recorder.suffixed("!").write("c")
        recorder.labeled("Total").write("3")
        recorder.replacing("x", "y").write("xox")

        assert recorder.writes == ["A", "> b", "c!", "total = 3", "yoy"]

    def test_filtered_blanks_rejected_writes(self, recorder):
        output = recorder.filtered(lambda s: s.startswith("keep"))
        output.write("keep me")
        output.write("drop me")

        assert recorder.writes == ["keep me", ""]

    def test_last_helper_is_outermost(self, recorder):
        """Test the helper applied last transforms the string first."""
        output = recorder.uppercased().prefixed("> ")
        output.write("hello")

        assert recorder.writes == ["> HELLO"]

        recorder.writes.clear()
        output = recorder.prefixed("> ").uppercased()
        output.write("hello")

        assert recorder.writes == ["> HELLO"]

    def test_prefix_then_label_order(self, recorder):
        output = recorder.prefixed("[a] ").labeled("K")
        output.write("v")

        assert recorder.writes == ["[a] k = v"]

    def test_timestamped_prepends_stamp(self, recorder):
        recorder.timestamped().write("event")

        assert recorder.writes[0].endswith("] event")
        assert recorder.writes[0].startswith("[")

    def test_traced_captures_caller(self, recorder):
        output = recorder.traced()

        assert isinstance(output.modifier, TraceModifier)
        assert output.modifier.function == "test_traced_captures_caller"
        output.write("here")
        assert recorder.writes[0].startswith("[test_interface.py -> ")
        assert recorder.writes[0].endswith(":test_traced_captures_caller] here")

    def test_pretty_printed(self, recorder):
        recorder.pretty_printed(indent=2).write('{"a":1}')

        assert recorder.writes == ['{\n  "a": 1\n}']

    def test_colored_forced(self, recorder):
        recorder.colored("red", force=True).write("x")

        assert recorder.writes == ["\x1b[31mx\x1b[0m"]

    def test_with_outputs_puts_self_first(self, make_recorder):
        first, second = make_recorder(), make_recorder()
        many = first.with_outputs(second)

        assert isinstance(many, ManyOutput)
        assert many.outputs == (first, second)

    def test_erase(self, recorder):
        erased = recorder.erase()

        assert isinstance(erased, AnyOutput)
        erased.write("x")
        assert recorder.writes == ["x"]

    def test_modified_accepts_callable(self):
        output = BufferedOutput().modified(lambda s: s[::-1])
        output.write("abc")
        output.drain()

        assert output.buffer == "cba"
        output.close()

    def test_modified_with_label_modifier_instance(self, recorder):
        recorder.modified(LabelModifier("X")).modified(PrefixModifier("p")).write("1")

        assert recorder.writes == ["x = p1"]


@pytest.mark.unit
class TestDuckTypedHelpers:
    """Test drain/close helpers on objects outside the Output hierarchy."""

    def test_drain_plain_writer(self):
        class Writer:
            def write(self, s):
                pass

        assert drain_output(Writer()) is True
        close_output(Writer())  # Should not raise

    def test_drain_delegates(self, recorder):
        assert drain_output(recorder, 1.0) is True
        close_output(recorder)
        assert recorder.closed is True
