import os

from dotenv import load_dotenv

from .errors import ConfigError


CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
ENV_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", ".env"))
load_dotenv(ENV_PATH)

DEFAULT_MENU_URL = "https://www.nooncph.dk/ugens-menuer"
MENU_URL = os.getenv("LUNCH_MENU_URL", DEFAULT_MENU_URL)

# The English translation of the menu is always on the second page.
ENGLISH_MENU_PAGE = 2
BANNER_WIDTH = 60
TEMP_FILE_PREFIX = "noon-menu-"


def _parse_timeout(raw):
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"LUNCH_MENU_TIMEOUT must be a number of seconds, got {raw!r}")
    return timeout if timeout > 0 else None


def request_timeout():
    # None keeps requests' default of waiting forever.
    return _parse_timeout(os.getenv("LUNCH_MENU_TIMEOUT"))
