import logging
from typing import Optional

from config import DEFAULT_LOG_LEVEL, LOG_FILE_KEY, LOG_LEVEL_KEY, get_value


def setup_logger(name: str = __name__, log_file: Optional[str] = None,
                 level: Optional[int] = None) -> logging.Logger:
    if level is None:
        level = logging.getLevelName((get_value(LOG_LEVEL_KEY) or DEFAULT_LOG_LEVEL).upper())
        if not isinstance(level, int):
            level = logging.INFO
    if log_file is None:
        log_file = get_value(LOG_FILE_KEY)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
