"""Tests for PasteboardOutput and clipboards."""

import time

import pytest

from printsink import MemoryClipboard, PasteboardOutput, SystemClipboard
from printsink.output.pasteboard import Clipboard


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def pasteboard(clipboard):
    output = PasteboardOutput(clipboard, debounce_interval=0.05)
    yield output
    output.close()


@pytest.mark.unit
class TestMemoryClipboard:
    """Test the in-process clipboard."""

    def test_records_updates(self):
        clipboard = MemoryClipboard("initial")
        clipboard.set_text("a")
        clipboard.set_text("b")

        assert clipboard.get_text() == "b"
        assert clipboard.updates == ["a", "b"]
        assert clipboard.update_count == 2

    def test_updates_is_a_copy(self):
        clipboard = MemoryClipboard()
        clipboard.updates.append("x")

        assert clipboard.updates == []

    def test_base_clipboard_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Clipboard().set_text("x")
        with pytest.raises(NotImplementedError):
            Clipboard().get_text()


@pytest.mark.unit
class TestSystemClipboard:
    """Test the pyperclip-backed clipboard."""

    def test_delegates_to_pyperclip(self, monkeypatch):
        store = {}
        monkeypatch.setattr("pyperclip.copy", lambda text: store.update(text=text))
        monkeypatch.setattr("pyperclip.paste", lambda: store.get("text", ""))

        clipboard = SystemClipboard()
        clipboard.set_text("copied")

        assert clipboard.get_text() == "copied"


@pytest.mark.integration
class TestPasteboardOutput:
    """Test debounced clipboard updates."""

    def test_burst_collapses_into_one_update(self, pasteboard, clipboard):
        for part in ("a", "b", "c"):
            pasteboard.write(part)
        pasteboard.drain()

        assert clipboard.updates == ["abc"]
        assert pasteboard.buffer == "abc"

    def test_spaced_writes_update_each_time(self, pasteboard, clipboard):
        pasteboard.write("a")
        pasteboard.drain()
        pasteboard.write("b")
        pasteboard.drain()

        assert clipboard.updates == ["a", "ab"]

    def test_update_waits_for_debounce(self, clipboard):
        output = PasteboardOutput(clipboard, debounce_interval=0.5)
        output.write("x")
        time.sleep(0.05)

        assert clipboard.update_count == 0
        assert output.has_pending_update is True

        output.drain()
        assert clipboard.get_text() == "x"
        assert output.has_pending_update is False
        output.close()

    def test_clear_empties_clipboard(self, pasteboard, clipboard):
        pasteboard.write("secret")
        pasteboard.drain()

        assert pasteboard.clear() is pasteboard
        pasteboard.drain()

        assert pasteboard.buffer == ""
        assert clipboard.get_text() == ""

    def test_flush_applies_pending_update(self, clipboard):
        output = PasteboardOutput(clipboard, debounce_interval=10.0)
        output.write("now")

        assert output.flush() is True
        assert clipboard.updates == ["now"]
        assert output.has_pending_update is False
        assert output.flush() is False
        output.close()

    def test_close_applies_pending_update(self, clipboard):
        output = PasteboardOutput(clipboard, debounce_interval=10.0)
        output.write("last")
        output.close()

        assert clipboard.updates == ["last"]

    def test_zero_interval(self, clipboard):
        output = PasteboardOutput(clipboard, debounce_interval=0)
        output.write("fast")
        output.drain()

        assert clipboard.get_text() == "fast"
        output.close()

    def test_negative_interval_rejected(self, clipboard):
        with pytest.raises(ValueError, match="debounce_interval"):
            PasteboardOutput(clipboard, debounce_interval=-1)


@pytest.mark.integration
class TestPasteboardFailures:
    """Test clipboard failures are dropped."""

    class FailingClipboard(Clipboard):
        def set_text(self, text):
            raise RuntimeError("no clipboard")

        def get_text(self):
            return ""

    def test_failure_does_not_raise(self):
        output = PasteboardOutput(self.FailingClipboard(), debounce_interval=0.01)
        output.write("x")
        output.drain()

        assert output.buffer == "x"
        output.close()

    def test_failure_reported_to_callback(self):
        received = []
        output = PasteboardOutput(
            self.FailingClipboard(), debounce_interval=0.01, on_error=received.append
        )
        output.write("x")
        output.drain()
        output.close()

        assert len(received) == 1
        assert str(received[0]) == "no clipboard"


@pytest.mark.unit
class TestGeneralPasteboard:
    """Test the shared system-clipboard output."""

    def test_general_is_shared(self):
        general = PasteboardOutput.general()

        assert general is PasteboardOutput.shared()
        assert isinstance(general.clipboard, SystemClipboard)
