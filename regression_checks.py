from calculator_engine import INITIAL_STATE, CalculatorEngine, CalculatorState, ErrorKind
import sys


def _walk(sequence: str):
	"""Pulsa los botones separados por espacios y devuelve cada pantalla."""
	engine = CalculatorEngine()
	states = []

	for token in sequence.split():
		engine.apply_token(token)
		states.append(engine.state)

	return engine, states


def _display_after(sequence: str) -> str:
	engine, _ = _walk(sequence)
	return engine.display


def inspect_token_states(sequence: str) -> None:
	"""Imprime la pantalla y el estado pendiente tras cada botón."""
	_, states = _walk(sequence)

	print("Token inspection")
	print(f"sequence:       {sequence}")
	print(f"tokens walked:  {len(states)}")

	if not states:
		print("states:         (none)")
		return

	print("states:")
	for token, state in zip(sequence.split(), states):
		pending = "-" if state.operator is None else f"{state.operand!r} {state.operator}"
		flags = []
		if state.fresh_entry:
			flags.append("fresh")
		if state.error is not None:
			flags.append(state.error.value)
		print(f"  {token:>3} -> {state.display:<20} pending: {pending:<16} {' '.join(flags)}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	for sequence, expected in (
		("6 ÷ 3 =", "2"),
		("7 ÷ 2 =", "3.5"),
		("3 + 4 + 5 =", "12"),
		("3 + × 5 =", "15"),
		("5 + 3 = + 2 =", "10"),
		("5 0 %", "0.5"),
		("9 √", "3"),
		("1 2 . 5 +/- +/-", "12.5"),
		("3 . .", "3."),
		("1 % % % .", "0."),
		("2 + 1 % % % . 5 =", "2.5"),
	):
		expected_actual.append((sequence, expected, _display_after(sequence)))

	engine, _ = _walk("5 ÷ 0 =")
	checks.append((
		"division by zero shows Error",
		engine.display == "Error" and engine.state.error is ErrorKind.DIVISION_BY_ZERO,
	))
	engine.apply_token("7")
	checks.append((
		"digit after division by zero starts fresh",
		engine.display == "7" and engine.state.operator is None and engine.state.operand is None,
	))

	engine, _ = _walk("8 + 4 +/- √")
	checks.append((
		"negative square root keeps pending operation",
		engine.display == "Error" and engine.state.operator == "+" and engine.state.operand == 8,
	))

	engine, _ = _walk("5 =")
	checks.append(("equals without operator is a no-op", engine.state == CalculatorState(display="5")))

	engine, _ = _walk("7 + AC AC")
	checks.append(("AC twice equals initial state", engine.state == INITIAL_STATE))

	failed = [name for name, ok in checks if not ok]
	failed += [label for label, expected, actual in expected_actual if expected != actual]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "3 + 4 + 5 ="
	if "--inspect" in sys.argv:
		try:
			sequence = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing token sequence after --inspect")

		inspect_token_states(sequence)
	else:
		run_regressions()
