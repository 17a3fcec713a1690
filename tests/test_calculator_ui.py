"""Pruebas del adaptador tkinter con widgets falsos.

No hace falta pantalla: la app se construye sin llamar a
``__init__`` y sus piezas de Tk se sustituyen por dobles sencillos.
"""

import pytest

pytest.importorskip("tkinter")

from calculator_engine import CalculatorEngine, ErrorKind, apply_token, INITIAL_STATE
from calculator_ui import CalculatorApp, ResultDisplay


class _FakeVar:
    def __init__(self):
        self.v = ""

    def set(self, x):
        self.v = x

    def get(self):
        return self.v


class _FakeEntry:
    def __init__(self):
        self.scrolled = []

    def after(self, _ms, fn=None):
        if fn:
            fn()

    def icursor(self, _):
        return None

    def xview_moveto(self, _):
        return None

    def xview_scroll(self, *args):
        self.scrolled.append(args)


class _FakeRoot:
    def __init__(self):
        self.clipboard = ""

    def clipboard_clear(self):
        self.clipboard = ""

    def clipboard_append(self, text):
        self.clipboard += text


class _DummyResultDisplay(ResultDisplay):
    def __init__(self):
        pass


class _FakeWheelEvent:
    def __init__(self, delta):
        self.delta = delta


def _make_display(value="0"):
    display = _DummyResultDisplay()
    display._entry = _FakeEntry()
    display._var = _FakeVar()
    display.set_text(value)
    return display


def _make_app(engine=None):
    app = CalculatorApp.__new__(CalculatorApp)
    app.root = _FakeRoot()
    app.engine = engine if engine is not None else CalculatorEngine()
    app.result_display = _make_display(app.engine.display)
    return app


def _click(app, sequence):
    for token in sequence.split():
        app._on_key(token)


def test_keypad_has_the_twenty_buttons_in_order():
    labels = [label for row in CalculatorApp.KEYPAD for label, _kind in row]
    assert labels == [
        "AC", "+/-", "%", "÷",
        "7", "8", "9", "×",
        "4", "5", "6", "-",
        "1", "2", "3", "+",
        "0", ".", "√", "=",
    ]


def test_every_keypad_label_is_accepted_by_the_engine():
    for row in CalculatorApp.KEYPAD:
        for label, kind in row:
            assert kind in ("special", "op", "num")
            apply_token(INITIAL_STATE, label)


def test_colour_groups():
    kinds = {label: kind for row in CalculatorApp.KEYPAD for label, kind in row}
    assert {label for label, k in kinds.items() if k == "special"} == {"AC", "+/-", "%"}
    assert {label for label, k in kinds.items() if k == "op"} == {"÷", "×", "-", "+", "="}
    assert kinds["√"] == "num"


def test_clicks_render_engine_display():
    app = _make_app()
    _click(app, "3 + 4 +")
    assert app.result_display.get_text() == "7"
    _click(app, "5 =")
    assert app.result_display.get_text() == "12"


def test_error_is_rendered_verbatim():
    app = _make_app()
    _click(app, "5 ÷ 0 =")
    assert app.result_display.get_text() == "Error"
    assert app.engine.state.error is ErrorKind.DIVISION_BY_ZERO
    _click(app, "7")
    assert app.result_display.get_text() == "7"


def test_copy_result_puts_display_on_clipboard():
    app = _make_app()
    _click(app, "7 ÷ 2 =")
    app._copy_result()
    assert app.root.clipboard == "3.5"


def test_mousewheel_scrolls_display():
    display = _make_display("123456789012345678901234567890")
    assert display._on_mousewheel(_FakeWheelEvent(120)) == "break"
    assert display._on_mousewheel(_FakeWheelEvent(-120)) == "break"
    assert display._entry.scrolled == [(-1, "units"), (1, "units")]
