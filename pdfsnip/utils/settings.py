"""
Application settings loaded from ``PDFSNIP_*`` environment variables.
"""
import logging
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .resource_loader import get_default_output_dir

logger = logging.getLogger(__name__)

ENV_PREFIX = "PDFSNIP_"

TEXT_SERVICE_PATH = "path"
TEXT_SERVICE_IMAGE = "image"


class AppSettings(BaseSettings):
    """Injected configuration for the pipeline, exports and text service."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )

    output_dir: str = Field(default_factory=lambda: str(get_default_output_dir()))
    display_scale: float = Field(default=1.5, gt=0)
    raster_scale: float = Field(default=4.0, gt=0)
    min_selection_size: float = Field(default=10.0, ge=0)
    jpeg_quality: int = Field(default=100, ge=1, le=100)
    text_service_url: str = ""  # Empty disables the service call
    text_service_mode: Literal["path", "image"] = TEXT_SERVICE_PATH
    text_service_timeout: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"

    @property
    def text_service_enabled(self) -> bool:
        return bool(self.text_service_url)


def load_settings(**overrides) -> AppSettings:
    """
    Build settings from the environment, with keyword overrides on top.

    A field whose value fails validation falls back to its default and the
    problem is logged.
    """
    try:
        return AppSettings(**overrides)
    except ValidationError as e:
        invalid = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
        for err in e.errors():
            logger.warning("Ignoring invalid setting %s: %s", err["loc"], err["msg"])

    defaults = {
        name: AppSettings.model_fields[name].get_default(call_default_factory=True)
        for name in invalid
        if name in AppSettings.model_fields
    }
    kept = {k: v for k, v in overrides.items() if k not in invalid}
    return AppSettings(**{**kept, **defaults})
