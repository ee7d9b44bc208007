# Licensed under the Apache License, Version 2.0
import logging
from typing import Optional

from .config import AppConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level_name: Optional[str] = None) -> None:
    level_name = (level_name or AppConfig.from_env().log_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
