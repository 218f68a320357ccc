import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from app.utils.logger import logger

# ----------------------------
# Load .env file (if exists)
# ----------------------------
load_dotenv()

# ----------------------------
# Base directories
# ----------------------------
BASE_DIR = Path(__file__).resolve().parent.parent

# Static chat page (index.html, css, js)
DEFAULT_PUBLIC_DIR = BASE_DIR / "public"

# ----------------------------
# Defaults
# ----------------------------
DEFAULT_TOPIC = "articles (a / an / the)"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# Upstream call parameters, fixed for every request
MAX_TOKENS = 700
TEMPERATURE = 0.2


class ConfigError(RuntimeError):
    """Raised when the process cannot start with the given environment."""


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _clean_key(value: Optional[str]) -> Optional[str]:
    # keys pasted into .env often carry quotes or trailing newlines
    value = _clean(value)
    if value is None:
        return None
    return value.strip('"').strip("'").strip() or None


def check_port(port: int) -> int:
    if not 0 < port < 65536:
        raise ConfigError(f"PORT out of range: {port}")
    return port


def _parse_port(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        port = int(value)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {value!r}")
    return check_port(port)


class Settings(BaseModel):
    """
    Process configuration, read once at startup and passed to whoever needs it.
    """

    model_config = {"frozen": True}

    api_key: str
    topic: str = DEFAULT_TOPIC
    model: str = DEFAULT_MODEL
    base_url: Optional[str] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    public_dir: Path = DEFAULT_PUBLIC_DIR
    max_tokens: int = MAX_TOKENS
    temperature: float = TEMPERATURE

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ

        api_key = _clean_key(env.get("OPENAI_API_KEY"))
        if not api_key:
            raise ConfigError("Missing OPENAI_API_KEY in environment or .env")

        return cls(
            api_key=api_key,
            topic=_clean(env.get("TOPIC")) or DEFAULT_TOPIC,
            model=_clean(env.get("OPENAI_MODEL")) or DEFAULT_MODEL,
            base_url=_clean(env.get("OPENAI_BASE_URL")),
            host=_clean(env.get("HOST")) or DEFAULT_HOST,
            port=_parse_port(_clean(env.get("PORT")), DEFAULT_PORT),
            public_dir=Path(_clean(env.get("PUBLIC_DIR")) or DEFAULT_PUBLIC_DIR),
        )


def load_settings() -> Settings:
    settings = Settings.from_env()
    logger.info(
        f"[CONFIG] topic='{settings.topic}' model='{settings.model}' port={settings.port}"
    )
    return settings
