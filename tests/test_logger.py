import importlib

from py_measure.converter import LinearConverter
from py_measure.logger import logger, enable_file_logging, disable_file_logging
from py_measure.unit import Dimension, base_unit

logger_module = importlib.import_module("py_measure.logger")


def test_file_logging(tmp_path):
    log_file = tmp_path / 'units.log'
    enable_file_logging(str(log_file))
    try:
        assert logger_module.file_handler in logger.handlers

        class Distance(Dimension):
            Meter = base_unit('m')

        Distance.define_unit('Smoot', 'smoot', LinearConverter(1.7018))
    finally:
        disable_file_logging()

    assert logger_module.file_handler is None
    assert "Registered unit Distance.Smoot (smoot)" in log_file.read_text()


def test_disable_without_enable():
    disable_file_logging()
    assert logger_module.file_handler is None
