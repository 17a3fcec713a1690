"""
Motor de estados de la calculadora de cuatro operaciones.

Este módulo interpreta la secuencia de botones pulsados y produce el
texto de la pantalla tras cada uno. No depende de la interfaz gráfica:
la ventana solo reenvía la etiqueta del botón y pinta el resultado.

Contrato de interfaz:
    - apply_token(state, token) -> CalculatorState   (función pura)
    - CalculatorEngine.apply_token(token) -> (texto, es_error)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from arithmetic import (
    DomainError,
    FormatError,
    apply_binary,
    negate,
    parse_number,
    percent,
    remove_zero_decimal,
    square_root,
)

logger = logging.getLogger(__name__)

ERROR_TEXT = "Error"

EQUALS = "="
BINARY_TOKENS = frozenset({"+", "-", "×", "÷"})
FUNCTION_TOKENS = frozenset({"AC", "+/-", "%", "√"})
DIGIT_TOKENS = frozenset("0123456789")
DECIMAL_POINT = "."

_EXPONENT_MARK = re.compile(r"[eE]")

# Etiquetas alternativas aceptadas para el mismo botón
TOKEN_ALIASES = {"−": "-"}


class ErrorKind(Enum):
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"
    FORMAT = "format"
    DOMAIN = "domain"


class UnknownTokenError(ValueError):
    """La interfaz envió una etiqueta que no corresponde a ningún botón."""


@dataclass(frozen=True)
class CalculatorState:
    """Estado completo de la calculadora entre dos pulsaciones.

    - display: texto visible (literal numérico o "Error")
    - operand: primer operando pendiente (A)
    - operator: operador binario pendiente
    - fresh_entry: el siguiente dígito sustituye la pantalla
    - error: tipo del último error mostrado, si lo hay
    """

    display: str = "0"
    operand: Optional[float] = None
    operator: Optional[str] = None
    fresh_entry: bool = False
    error: Optional[ErrorKind] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


INITIAL_STATE = CalculatorState()


# ── Transición principal ─────────────────────────────────────────

def apply_token(state: CalculatorState, token: str) -> CalculatorState:
    """Devuelve el estado resultante de pulsar `token` sobre `state`.

    Los errores de cálculo nunca salen de aquí: se traducen en una
    pantalla "Error" con la política de reinicio de cada tipo.

    Raises:
        UnknownTokenError: `token` no es la etiqueta de ningún botón.
    """
    token = TOKEN_ALIASES.get(token, token)
    logger.debug("Botón %r sobre %r", token, state)

    if token == EQUALS or token in BINARY_TOKENS:
        return _apply_operator(state, token)
    if token in FUNCTION_TOKENS:
        return _apply_function(state, token)
    if token == DECIMAL_POINT or token in DIGIT_TOKENS:
        return _apply_entry(state, token)
    raise UnknownTokenError(f"Botón desconocido: {token!r}")


# ── Operadores binarios e igual ──────────────────────────────────

def _apply_operator(state: CalculatorState, token: str) -> CalculatorState:
    try:
        if token == EQUALS:
            if state.operator is None or state.operand is None:
                return state
            result = _resolve_pending(state)
            return replace(
                state,
                display=remove_zero_decimal(result),
                operand=result,
                operator=None,
                fresh_entry=True,
                error=None,
            )

        # Con un segundo operando ya escrito se resuelve la operación
        # anterior; si no, el nuevo operador sustituye al pendiente.
        if (state.operator is not None and state.operand is not None
                and not state.fresh_entry):
            operand = _resolve_pending(state)
            display = remove_zero_decimal(operand)
        else:
            operand = parse_number(state.display)
            display = state.display

        return replace(
            state,
            display=display,
            operand=operand,
            operator=token,
            fresh_entry=True,
            error=None,
        )
    except ZeroDivisionError:
        return _reset_with_error(ErrorKind.DIVISION_BY_ZERO)
    except OverflowError:
        return _reset_with_error(ErrorKind.OVERFLOW)
    except FormatError:
        return _reset_with_error(ErrorKind.FORMAT)


def _resolve_pending(state: CalculatorState) -> float:
    b = parse_number(state.display)
    return apply_binary(state.operator, state.operand, b)


def _reset_with_error(kind: ErrorKind) -> CalculatorState:
    logger.info("Error %s: se reinicia el cálculo", kind.value)
    return CalculatorState(display=ERROR_TEXT, error=kind)


# ── Funciones especiales ─────────────────────────────────────────

_UNARY_FUNCTIONS = {
    "+/-": negate,
    "%": percent,
    "√": square_root,
}


def _apply_function(state: CalculatorState, token: str) -> CalculatorState:
    if token == "AC":
        return INITIAL_STATE

    try:
        value = _UNARY_FUNCTIONS[token](parse_number(state.display))
    except DomainError:
        return _show_error(state, ErrorKind.DOMAIN)
    except FormatError:
        return _show_error(state, ErrorKind.FORMAT)

    # La raíz termina el número actual, como un resultado
    fresh_entry = True if token == "√" else state.fresh_entry
    return replace(
        state,
        display=remove_zero_decimal(value),
        fresh_entry=fresh_entry,
        error=None,
    )


def _show_error(state: CalculatorState, kind: ErrorKind) -> CalculatorState:
    logger.info("Error %s: se conserva la operación pendiente", kind.value)
    return replace(state, display=ERROR_TEXT, error=kind)


# ── Entrada de dígitos ───────────────────────────────────────────

def _apply_entry(state: CalculatorState, token: str) -> CalculatorState:
    # Ni "Error" ni un resultado con exponente ("1e-06") se prolongan
    starts_new = (state.fresh_entry or state.is_error
                  or _EXPONENT_MARK.search(state.display) is not None)

    if token == DECIMAL_POINT:
        if starts_new:
            display = "0."
        elif DECIMAL_POINT not in state.display:
            display = state.display + DECIMAL_POINT
        else:
            return state
    elif starts_new or state.display == "0":
        display = token
    else:
        display = state.display + token

    return replace(state, display=display, fresh_entry=False, error=None)


# ── Envoltorio con estado para la interfaz ───────────────────────

class CalculatorEngine:
    """Conserva el estado actual y lo avanza con cada botón."""

    def __init__(self, state: CalculatorState = INITIAL_STATE):
        self._state = state

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    def apply_token(self, token: str) -> tuple[str, bool]:
        """Procesa un botón y devuelve (texto de pantalla, es_error)."""
        self._state = apply_token(self._state, token)
        return self._state.display, self._state.is_error

    def reset(self):
        self._state = INITIAL_STATE
