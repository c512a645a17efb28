"""
MTGMETA simple utilities
"""

import logging
import os
import time

from . import constants

LOGGER = logging.getLogger(__name__)


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    constants.LOG_PATH.mkdir(parents=True, exist_ok=True)

    start_time = time.strftime("%Y-%m-%d_%H.%M.%S")

    logging.basicConfig(
        level=(
            logging.DEBUG
            if os.environ.get("MTGMETA_DEBUG", "").lower() in ["true", "1"]
            else logging.INFO
        ),
        format="[%(levelname)s] %(asctime)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(
                str(constants.LOG_PATH.joinpath(f"mtgmeta_{start_time}.log"))
            ),
        ],
    )
    logging.getLogger("urllib3").setLevel(logging.ERROR)


def to_megabytes(byte_count: int) -> str:
    """
    Human readable size for download logging
    :param byte_count: Number of bytes
    :return: Size in MB, two decimals
    """
    return f"{byte_count / 1024 / 1024:.2f} mb"
