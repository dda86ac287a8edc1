import os
import logging
from dotenv import load_dotenv


load_dotenv()
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://agri-sakha-server.onrender.com"
DEFAULT_TIMEOUT = 60.0


def _read_timeout(raw_value):
    if raw_value is None or not str(raw_value).strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw_value)
    except (ValueError, TypeError):
        logger.warning(f"Invalid AGRI_SAKHA_TIMEOUT '{raw_value}'. Using default {DEFAULT_TIMEOUT}s.")
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning(f"Non-positive AGRI_SAKHA_TIMEOUT '{raw_value}'. Using default {DEFAULT_TIMEOUT}s.")
        return DEFAULT_TIMEOUT
    return timeout


def _read_flag(raw_value, default=True):
    if raw_value is None or not str(raw_value).strip():
        return default
    return str(raw_value).strip().lower() in ("1", "true", "yes", "on")


def get_settings():
    settings = {
        'api_url': os.environ.get("AGRI_SAKHA_API_URL", "").strip() or DEFAULT_API_URL,
        'timeout': _read_timeout(os.environ.get("AGRI_SAKHA_TIMEOUT")),
        'autoplay': _read_flag(os.environ.get("AGRI_SAKHA_AUTOPLAY")),
    }
    logger.debug(f"Loaded settings: {settings}")
    return settings
