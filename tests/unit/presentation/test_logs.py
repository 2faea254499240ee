"""Tests for presentation/logs.py."""

import logging
from collections.abc import Iterator
from io import StringIO

import pytest

from gearcheck.presentation.logs import setup_logging, verbosity_level


@pytest.fixture
def restore_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("gearcheck")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


class TestVerbosityLevel:
    """Tests for verbosity_level."""

    @pytest.mark.parametrize(
        ("verbose", "level"),
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_mapping(self, verbose: int, level: int) -> None:
        """-v count to level."""
        assert verbosity_level(verbose) == level


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_single_handler(self, restore_logger: logging.Logger) -> None:
        """Repeated setup never stacks handlers."""
        setup_logging(logging.INFO)
        logger = setup_logging(logging.INFO)

        assert logger is restore_logger
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_writes_to_stream(self, restore_logger: logging.Logger) -> None:
        """Child loggers go through the package handler."""
        stream = StringIO()
        setup_logging("debug", stream=stream, format_string="%(levelname)s %(name)s %(message)s")

        logging.getLogger("gearcheck.infrastructure.adapters.tree_loader").debug("loaded")

        assert stream.getvalue() == "DEBUG gearcheck.infrastructure.adapters.tree_loader loaded\n"

    def test_level_filters(self, restore_logger: logging.Logger) -> None:
        """Messages below the level are dropped."""
        stream = StringIO()
        setup_logging(logging.WARNING, stream=stream)

        logging.getLogger("gearcheck.x").info("quiet")

        assert stream.getvalue() == ""
