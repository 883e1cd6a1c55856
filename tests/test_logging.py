"""Tests for logging utilities."""

import logging
from io import StringIO

from flashfd.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)
from flashfd.schemes import ImplicitScheme, SchemeConfig


def test_get_logger_prefixes_package_namespace():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "flashfd.test_module"


def test_get_logger_keeps_package_names():
    logger = get_logger("flashfd.schemes.adi")
    assert logger.name == "flashfd.schemes.adi"
    assert get_logger(None).name == "flashfd"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level_accepts_strings_and_ints():
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level(logging.ERROR)
        assert logger.level == logging.ERROR
        assert all(handler.level == logging.ERROR for handler in logger.handlers)
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_redirects_stream():
    stream = StringIO()
    logger = get_logger("test_module")
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger.debug("Debug message")
        assert "[DEBUG] flashfd.test_module: Debug message" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_configure_logging_custom_format():
    stream = StringIO()
    logger = get_logger("test_module")
    try:
        configure_logging(level="INFO", format_string="%(levelname)s|%(message)s", stream=stream)
        logger.info("hello")
        assert "INFO|hello" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_solver_reports_solve_summary(make_problem):
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=stream)
        scheme = ImplicitScheme(SchemeConfig(grid_density=10, time_limit=0.3))
        scheme.solve(make_problem(num_points=30))
        output = stream.getvalue()
        assert "flashfd.schemes.base" in output
        assert "ImplicitScheme: solving LINEAR_1D problem" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_solver_is_silent_by_default(make_problem, capsys):
    scheme = ImplicitScheme(SchemeConfig(grid_density=10, time_limit=0.3))
    scheme.solve(make_problem(num_points=30))
    assert capsys.readouterr().err == ""
