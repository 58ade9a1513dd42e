from pathlib import Path

from loguru import logger

from roi_calculator.core.config import settings
from roi_calculator.core.logging import setup_logging


def test_setup_logging_adds_file_sink():
    setup_logging()
    logger.warning("logging smoke line")
    logger.complete()
    assert (Path(settings.LOG_DIR) / "app.log").exists()
