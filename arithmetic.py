"""Operaciones numéricas y formato para el motor de la calculadora."""

import math
import operator
import re


class FormatError(ValueError):
    """El texto de la pantalla no es un literal numérico."""


class DomainError(ValueError):
    """Operación fuera de su dominio (raíz de un negativo)."""


_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

BINARY_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "×": operator.mul,
    "÷": operator.truediv,
}


def parse_number(text: str) -> float:
    """Convierte el texto de la pantalla en float.

    Raises:
        FormatError: el texto no es un literal decimal (p. ej. "Error")
            o no cabe en un float.
    """
    if not _NUMBER_RE.fullmatch(text):
        raise FormatError(f"No es un número: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise FormatError(f"Número fuera de rango: {text!r}")
    return value


def remove_zero_decimal(value: float) -> str:
    """Formatea un resultado quitando el ".0" de los valores enteros.

    - 5.0 -> "5"
    - 5.5 -> "5.5"
    """
    if value % 1 == 0:
        return str(int(value))
    return repr(value)


def apply_binary(symbol: str, a: float, b: float) -> float:
    """Aplica el operador binario `symbol` a `a` y `b`.

    Raises:
        ZeroDivisionError: división con divisor cero.
        OverflowError: el resultado no es finito.
    """
    if symbol == "÷" and b == 0:
        raise ZeroDivisionError("División por cero")
    result = BINARY_OPERATORS[symbol](a, b)
    if not math.isfinite(result):
        raise OverflowError("Resultado fuera de rango")
    return result


def negate(value: float) -> float:
    return -value


def percent(value: float) -> float:
    return value / 100


def square_root(value: float) -> float:
    if value < 0:
        raise DomainError("Raíz cuadrada de un número negativo")
    return math.sqrt(value)
