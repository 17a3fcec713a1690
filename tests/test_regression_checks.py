"""Pruebas rápidas del script de regresión."""

from regression_checks import inspect_token_states, run_regressions


def test_run_regressions_passes(capsys):
    run_regressions()
    out = capsys.readouterr().out
    assert "FAIL" not in out
    assert "All regression checks passed." in out


def test_inspect_prints_one_line_per_token(capsys):
    inspect_token_states("8 + 4 +/- √")
    out = capsys.readouterr().out
    assert "tokens walked:  4" in out
    assert "domain" in out
    assert "8.0 +" in out


def test_inspect_empty_sequence(capsys):
    inspect_token_states("")
    assert "(none)" in capsys.readouterr().out
