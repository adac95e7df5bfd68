import logging

import pytest

from py_measure.dimensions import PreferredUnits
from py_measure.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def default_preferred_units():
    """Every test starts and ends with the default PreferredUnits."""
    PreferredUnits.restore_defaults()
    yield
    PreferredUnits.restore_defaults()
