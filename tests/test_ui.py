import io

import pytest

from ravedude import ui


class _TtyBuffer(io.StringIO):
    def isatty(self):
        return True


def test_task_message_right_aligns_verb():
    buf = io.StringIO()
    ui.task_message("Board", "Arduino Uno", buf)
    assert buf.getvalue() == "       Board Arduino Uno\n"


def test_task_message_verb_column_is_fixed_width():
    short, long = io.StringIO(), io.StringIO()
    ui.task_message("", "x", short)
    ui.task_message("Programming", "x", long)
    assert short.getvalue().index("x") == long.getvalue().index("x")


def test_warning_plain_text():
    buf = io.StringIO()
    ui.warning("this board cannot reset itself.", buf)
    assert buf.getvalue() == "Warning: this board cannot reset itself.\n"


def test_print_error_lists_causes():
    def fail():
        try:
            raise ValueError("inner problem")
        except ValueError as exc:
            raise RuntimeError("outer problem") from exc

    with pytest.raises(RuntimeError) as info:
        fail()
    buf = io.StringIO()
    ui.print_error(info.value, buf)
    assert buf.getvalue() == (
        "Error: outer problem\n\nCaused by: inner problem\n"
    )


def test_print_error_without_cause():
    buf = io.StringIO()
    ui.print_error(RuntimeError("boom"), buf)
    assert buf.getvalue() == "Error: boom\n\n"


def test_colors_on_terminal(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    buf = _TtyBuffer()
    ui.warning("careful", buf)
    assert "\x1b[" in buf.getvalue()
    assert "careful" in buf.getvalue()


def test_no_color_env_disables_colors(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    buf = _TtyBuffer()
    ui.task_message("Board", "Nano", buf)
    assert "\x1b[" not in buf.getvalue()