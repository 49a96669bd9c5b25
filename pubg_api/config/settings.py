"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)
# then the working directory; neither overrides variables already set
load_dotenv(find_dotenv(usecwd=True))


def _optional_path(value: str) -> Optional[Path]:
    value = value.strip()
    return Path(value).expanduser() if value else None


def _float(name: str, default: float) -> float:
    try:
        value = float(os.getenv(name, str(default)))
    except ValueError:
        return default
    return value if value > 0 else default


class Settings:
    """
    Configuration of the ``pubg-api`` command.

    Only the command line front-end reads these; ``PUBGClient`` takes its
    key, platform, base URL and timeout as constructor arguments.
    """

    PUBG_API_KEY: str = os.getenv('PUBG_API_KEY', '')
    PLATFORM:     str = os.getenv('PUBG_PLATFORM', 'steam')

    # ── HTTP ───────────────────────────────────────────────────────────────
    API_BASE_URL:    str   = os.getenv('PUBG_API_BASE_URL', 'https://api.pubg.com').rstrip('/')
    REQUEST_TIMEOUT: float = _float('PUBG_REQUEST_TIMEOUT', 30.0)

    # ── Logging ────────────────────────────────────────────────────────────
    LOG_LEVEL: str            = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR:   Optional[Path] = _optional_path(os.getenv('PUBG_LOG_DIR', ''))

    @classmethod
    def validate(cls) -> None:
        if not cls.PUBG_API_KEY:
            raise ValueError("PUBG_API_KEY must be set (environment, .env file or --api-key)")


settings = Settings()
