import io

import pytest

from kubecf.style import is_color_supported, make_fg_style


class _Tty(io.StringIO):
    def isatty(self):
        return True


def test_disabled_style_is_identity():
    assert make_fg_style("1", enabled=False)("hello") == "hello"


def test_basic_red():
    assert make_fg_style("1", enabled=True)("x") == "\x1b[31mx\x1b[0m"


def test_256_color():
    assert make_fg_style("255", enabled=True)("x") == "\x1b[38;5;255mx\x1b[0m"


def test_true_color():
    assert make_fg_style("#ff0000", enabled=True)("x") == "\x1b[38;2;255;0;0mx\x1b[0m"


@pytest.mark.parametrize("color", ["1", "28", "255", "9"])
def test_styled_text_wraps_original(color):
    styled = make_fg_style(color, enabled=True)("kube")
    assert styled.startswith("\x1b[")
    assert styled.endswith("\x1b[0m")
    assert "kube" in styled


@pytest.mark.parametrize("color", ["red", "256", "-1", "#12"])
def test_invalid_color(color):
    with pytest.raises(ValueError):
        make_fg_style(color, enabled=True)


def test_no_color_env_disables():
    assert is_color_supported({"NO_COLOR": "1", "TERM": "xterm"}, _Tty()) is False


def test_clicolor_zero_disables():
    assert is_color_supported({"CLICOLOR": "0", "TERM": "xterm"}, _Tty()) is False


def test_non_tty_disables():
    assert is_color_supported({"TERM": "xterm"}, io.StringIO()) is False


def test_force_enables_on_non_tty():
    assert is_color_supported({"CLICOLOR_FORCE": "1"}, io.StringIO()) is True


def test_tty_enables():
    assert is_color_supported({"TERM": "xterm-256color"}, _Tty()) is True


def test_dumb_terminal_disables():
    assert is_color_supported({"TERM": "dumb"}, _Tty()) is False