import logging

import pytest


@pytest.fixture
def trace_log(caplog):
    """Fixture capturing fmhurl debug trace events."""
    caplog.set_level(logging.DEBUG, logger="fmhurl")
    return caplog
