# designquest/config.py — paths, base path and logging
# ----------------------------------------------------------------
# Defaults suit `streamlit run streamlit_repo/app.py` from the repo root;
# the hosting environment overrides them through DQ_* variables or a .env file.
# ----------------------------------------------------------------

from __future__ import annotations
import logging
from pathlib import Path
from typing import Mapping, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE = Path(__file__).resolve().parent.parent
DEFAULT_ASSETS = BASE / "assets"
ENV_PREFIX = "DQ_"

logger = logging.getLogger(__name__)


class SiteConfig(BaseSettings):
    """Site settings loaded from DQ_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    base_path: str = Field(default="/", description="URL path the site is served under.")
    asset_dir: Path = Field(default=DEFAULT_ASSETS)
    log_level: str = Field(default="INFO")
    # the contact section only shows an e-mail button when this is set
    contact_email: str = Field(default="")

    @field_validator("base_path")
    @classmethod
    def _normalize_base_path(cls, value: str) -> str:
        value = value or "/"
        if not value.startswith("/"):
            value = "/" + value
        return value if value.endswith("/") else value + "/"

    @field_validator("asset_dir")
    @classmethod
    def _expand_asset_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


def load_config(environ: Optional[Mapping[str, str]] = None) -> SiteConfig:
    """Build settings from the process environment, or only from `environ` when given."""
    if environ is None:
        return SiteConfig()
    values = {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in environ.items()
        if key.upper().startswith(ENV_PREFIX)
    }
    # init values outrank the environment; fill the rest with defaults, not os.environ
    for name, field in SiteConfig.model_fields.items():
        values.setdefault(name, field.default)
    return SiteConfig(_env_file=None, **values)

def configure_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op once the root logger has handlers, so reruns are safe
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

def check_assets(cfg: SiteConfig) -> bool:
    if cfg.asset_dir.is_dir():
        logger.debug("Serving images from %s under base path %s", cfg.asset_dir, cfg.base_path)
        return True
    logger.warning("Asset directory %s is missing; images will show placeholders", cfg.asset_dir)
    return False
