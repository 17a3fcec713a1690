"""
Interfaz gráfica de la calculadora.

Usa tkinter. Cada botón reenvía su etiqueta al motor y la pantalla
muestra el texto que este devuelve; aquí no hay lógica de cálculo.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine

logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════
#  Widget: pantalla de resultado con scroll lateral
# ═════════════════════════════════════════════════════════════════

class ResultDisplay:
    """Entry de solo lectura alineado a la derecha."""

    SCROLL_STEPS = 1        # caracteres por evento de rueda
    VISIBLE_CHARS = 10

    def __init__(self, parent, **kw):
        self._var = tk.StringVar(value="0")
        kw.setdefault("width", self.VISIBLE_CHARS)
        self._entry = tk.Entry(parent, textvariable=self._var,
                               state="readonly", **kw)
        self._setup_bindings()

    @property
    def widget(self):
        return self._entry

    # ── Texto ────────────────────────────────────────────────────

    def set_text(self, text: str):
        self._var.set(text)
        # Los números largos se leen desde las unidades
        self._entry.after(10, self._scroll_to_end)

    def get_text(self) -> str:
        return self._var.get()

    def _scroll_to_end(self):
        self._entry.icursor(tk.END)
        self._entry.xview_moveto(1.0)

    # ── Bindings ─────────────────────────────────────────────────

    def _setup_bindings(self):
        e = self._entry
        e.bind("<MouseWheel>", self._on_mousewheel)
        e.bind("<Shift-MouseWheel>", self._on_mousewheel)

    def _on_mousewheel(self, event):
        direction = -1 if event.delta > 0 else 1
        self._entry.xview_scroll(direction * self.SCROLL_STEPS, "units")
        return "break"


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1C1C1C",
        "display_bg": "#1C1C1C",
        "display_fg": "#FFFFFF",
        "num":        "#505050",
        "num_fg":     "#FFFFFF",
        "op":         "#FF9500",
        "op_fg":      "#FFFFFF",
        "special":    "#D4D4D2",
        "special_fg": "#1C1C1C",
        "active":     "#737373",
    }

    # ── Definición del teclado ────────────────────────────────────
    #  Cada fila es una lista de (etiqueta, tipo_color)
    #  La etiqueta es exactamente el botón que recibe el motor.

    KEYPAD = [
        [("AC", "special"), ("+/-", "special"), ("%", "special"), ("÷", "op")],
        [("7", "num"), ("8", "num"), ("9", "num"), ("×", "op")],
        [("4", "num"), ("5", "num"), ("6", "num"), ("-", "op")],
        [("1", "num"), ("2", "num"), ("3", "num"), ("+", "op")],
        [("0", "num"), (".", "num"), ("√", "num"), ("=", "op")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()

        self._init_fonts()
        self._create_display()
        self._create_keypad()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_display = tkfont.Font(family="Arial", size=48)
        self._f_btn     = tkfont.Font(family="Arial", size=24)
        self._f_small   = tkfont.Font(family="Arial", size=11)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        self.result_display = ResultDisplay(
            frame,
            font=self._f_display, fg=self.C["display_fg"],
            readonlybackground=self.C["display_bg"],
            relief="flat", justify="right", bd=0,
        )
        self.result_display.set_text(self.engine.display)

        tk.Button(
            frame, text="Copiar", font=self._f_small,
            bg=self.C["num"], fg=self.C["num_fg"],
            activebackground=self.C["active"], relief="flat",
            cursor="hand2", command=self._copy_result, padx=8,
        ).pack(side="left", anchor="s")

        self.result_display.widget.pack(side="right", fill="x", expand=True)

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        cols = max(len(row) for row in self.KEYPAD)
        for c in range(cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            for c, (label, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=label, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["active"], relief="flat",
                    takefocus=False,
                    command=lambda t=label: self._on_key(t),
                )
                btn.grid(row=r, column=c, sticky="nsew", padx=1, pady=1,
                         ipady=8)

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, token: str):
        text, is_error = self.engine.apply_token(token)
        if is_error:
            logger.debug("Pantalla en error tras %r: %s", token,
                         self.engine.state.error.value)
        self.result_display.set_text(text)

    def _copy_result(self):
        text = self.result_display.get_text()
        self.root.clipboard_clear()
        self.root.clipboard_append(text)
