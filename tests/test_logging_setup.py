import logging

from miniakinator.presentation.cli import logging_setup


def test_configure_logging_installs_single_handler_once(monkeypatch) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    monkeypatch.setenv(logging_setup.LOG_LEVEL_ENV_VAR, "debug")
    try:
        logging_setup.configure_logging("WARNING")
        logging_setup.configure_logging("ERROR")

        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_configure_logging_falls_back_to_default_level(monkeypatch) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    monkeypatch.delenv(logging_setup.LOG_LEVEL_ENV_VAR, raising=False)
    try:
        logging_setup.configure_logging("ERROR")

        assert root.level == logging.ERROR
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
