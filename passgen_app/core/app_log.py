# passgen_app/core/app_log.py
import logging
import os
from config import LOG_FILE, LOG_LEVEL

def resolve_level(name) -> int:
    # getattr peut renvoyer autre chose qu'un niveau (ex: logging.BASIC_FORMAT)
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else logging.INFO

logger = logging.getLogger('PassGenLogger')
logger.setLevel(resolve_level(LOG_LEVEL))

os.makedirs(os.path.dirname(LOG_FILE), exist_ok=True)

file_handler = logging.FileHandler(LOG_FILE)
file_handler.setLevel(logging.DEBUG)
formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
file_handler.setFormatter(formatter)
if not logger.handlers:
    logger.addHandler(file_handler)

def log_event(event_type: str, details: str = ""):
    logger.info(f"{event_type} {details}".strip())

def log_warning(event_type: str, details: str = ""):
    logger.warning(f"{event_type} {details}".strip())

def log_error(event_type: str, details: str = ""):
    logger.error(f"{event_type} {details}".strip())
