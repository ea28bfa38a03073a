import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from schedsim.algorithms import schedule_rr
from schedsim.logging_setup import configure_logging
from schedsim.models import Process


@pytest.fixture
def schedsim_logger():
    logger = logging.getLogger("schedsim")
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_verbose_enables_debug(schedsim_logger):
    buf = io.StringIO()
    configure_logging(verbose=True, console=Console(file=buf, width=120))

    assert schedsim_logger.level == logging.DEBUG
    assert len(schedsim_logger.handlers) == 1
    assert isinstance(schedsim_logger.handlers[0], RichHandler)

    schedule_rr([Process("A", 0, 3), Process("B", 4, 1)], quantum=2)
    out = buf.getvalue()
    assert "A runs for 2" in out
    assert "CPU idle until t=4" in out


def test_default_is_quiet(schedsim_logger):
    buf = io.StringIO()
    configure_logging(console=Console(file=buf, width=120))

    assert schedsim_logger.level == logging.WARNING
    schedule_rr([Process("A", 0, 3)], quantum=2)
    assert buf.getvalue() == ""


def test_reconfiguring_replaces_handler(schedsim_logger):
    configure_logging(verbose=True, console=Console(file=io.StringIO()))
    configure_logging(verbose=False, console=Console(file=io.StringIO()))
    assert len(schedsim_logger.handlers) == 1
