import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEFAULT_TICKET = "identifier-not-set"
DEFAULT_PATCHES_DIR = "patches"

BASE_PATH_ENV = "PATCHGEN_BASE_PATH"
DEFAULT_TICKET_ENV = "PATCHGEN_DEFAULT_TICKET"
LOG_LEVEL_ENV = "PATCHGEN_LOG_LEVEL"


class Settings(BaseModel):
    """Values resolved once at startup and passed down to commands."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    base_path: Path
    default_ticket: str = DEFAULT_TICKET
    patches_dir_name: str = DEFAULT_PATCHES_DIR
    log_level: int = logging.WARNING

    @property
    def default_output_dir(self) -> Path:
        return self.base_path / self.patches_dir_name


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _env_log_level(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def load_settings() -> Settings:
    return Settings(
        base_path=Path(_env_str(BASE_PATH_ENV, str(Path.cwd()))),
        default_ticket=_env_str(DEFAULT_TICKET_ENV, DEFAULT_TICKET),
        log_level=_env_log_level(LOG_LEVEL_ENV, logging.WARNING),
    )
