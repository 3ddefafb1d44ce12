# config.py
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_TASKS_FILE = "tasks.json"
DEFAULT_FRONTEND_ORIGIN = "http://localhost:5173"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    tasks_file: Path
    frontend_origin: str
    host: str
    port: int
    log_level: str


def _read_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"API_PORT must be an integer, got {raw!r}")
    if not 0 < port < 65536:
        raise ValueError(f"API_PORT must be between 1 and 65535, got {port}")
    return port


def load_settings() -> Settings:
    """
    Builds the settings from the environment.
    Values from a local .env file are loaded first but never override
    variables that are already set.
    """
    load_dotenv()
    return Settings(
        tasks_file=Path(os.getenv("TASKS_FILE", DEFAULT_TASKS_FILE)),
        frontend_origin=os.getenv("FRONTEND_ORIGIN", DEFAULT_FRONTEND_ORIGIN),
        host=os.getenv("API_HOST", DEFAULT_HOST),
        port=_read_port(os.getenv("API_PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
