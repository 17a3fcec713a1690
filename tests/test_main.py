"""Pruebas de la configuración de logging del punto de entrada."""

import logging

import pytest

pytest.importorskip("tkinter")

import main


@pytest.fixture
def root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_log_level_from_environment(monkeypatch, root_level):
    monkeypatch.setenv(main.LOG_LEVEL_ENV, "debug")
    assert main.setup_logging() is root_level
    assert root_level.level == logging.DEBUG


def test_unknown_log_level_falls_back_to_warning(monkeypatch, root_level):
    monkeypatch.setenv(main.LOG_LEVEL_ENV, "chatty")
    main.setup_logging()
    assert root_level.level == logging.WARNING
