# roi_calculator/core/logging.py
# -----------------------------------------------------------------------------
# Loguru based logging setup
# - rotating file sink + stderr sink
# - called once from the FastAPI entrypoint
# -----------------------------------------------------------------------------
import sys
from pathlib import Path

from loguru import logger

from roi_calculator.core.config import settings


def setup_logging() -> None:
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(exist_ok=True, parents=True)

    logger.remove()  # drop the default handler
    logger.add(sys.stderr, level=settings.LOG_LEVEL)
    logger.add(
        log_dir / "app.log",
        rotation="10 MB",
        retention=10,  # keep 10 rotated files
        enqueue=True,  # safe across worker processes
        backtrace=True,
        diagnose=settings.ENV == "dev",
        level=settings.LOG_LEVEL,
    )
