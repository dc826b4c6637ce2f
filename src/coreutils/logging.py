import logging
from datetime import datetime
from pathlib import Path

from src.coreutils.env import env_get


def setup_logging(level=None, log_dir=None):
    """Setup basic logging configuration for the handbook runner"""
    if level is None:
        level = env_get("HANDBOOK_LOG_LEVEL", "INFO").upper()
    log_dir = Path(log_dir or env_get("HANDBOOK_LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # force replaces the handlers of any earlier call
    logging.basicConfig(
        force=True,
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(
                log_dir / f"handbook_{datetime.now().strftime('%Y-%m-%d')}.log"
            ),
            logging.StreamHandler(),
        ],
    )
    return logging.getLogger(__name__)


def log_function_call(func_name: str, **kwargs):
    """Log function calls with parameters"""
    logger = logging.getLogger(__name__)
    logger.debug(f"Calling {func_name} with params: {kwargs}")
