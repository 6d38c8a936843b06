"""Startup settings and the configuration derived from them.

Settings are the initial values (hardcoded defaults, a YAML file, CLI flags).
Configuration is built once from a Settings and handed to the app factory,
the dispatcher and every handler. Neither is ever mutated.
"""

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
import yaml

from flatwiki.data_models.page_store import PageStore
from flatwiki.routing.title import VALID_PATH, is_valid_title

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_TEMPLATES_PATH = PACKAGE_DIR / "server" / "templates"
DEFAULT_STYLES_PATH = PACKAGE_DIR / "server" / "styles" / "wiki.css"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    pages_path: Path = Path("data")
    templates_path: Path = DEFAULT_TEMPLATES_PATH
    styles_path: Path = DEFAULT_STYLES_PATH
    front_page: str = "FrontPage"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("front_page")
    @classmethod
    def _front_page_is_title(cls, v: str) -> str:
        if not is_valid_title(v):
            raise ValueError(f"Not a valid page title: {v!r}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


def load_settings(path: Path, **overrides: Any) -> Settings:
    """Read settings from a YAML mapping; non-None overrides win over the file."""
    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
    data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings.model_validate(data)


@dataclass(frozen=True)
class Configuration:
    settings: Settings
    store: PageStore
    valid_path: re.Pattern[str] = VALID_PATH

    @classmethod
    def from_settings(cls, settings: Settings) -> "Configuration":
        return cls(settings=settings, store=PageStore(settings.pages_path))
