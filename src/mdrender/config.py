"""Application configuration: settings schema, config.yaml loader, logging setup"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from mdrender.core.models import RenderOptions


CONFIG_FILE = "config.yaml"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    app_name:        str = "mdrender"
    parser_config:   str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    linkify:         bool = Field(default=False, description="Turn bare URLs into url nodes (needs linkify-it-py)")
    styles_file:     Optional[str] = Field(default=None, description="YAML style table overlaid on the defaults")
    output_dir:      str = Field(default="dist", description="Directory for rendered element JSON files")
    image_param:     str = Field(default="", description="Suffix appended to every image URI")
    enable_lightbox: bool = Field(default=False, description="Wrap images in a zoomable overlay")
    bg_images:       dict[str, str] = Field(default_factory=dict, description="Node type -> background image URI")
    log_level:       str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    def render_options(self, **callbacks) -> RenderOptions:
        """RenderOptions for these settings; callbacks (on_link, ...) pass through."""
        return RenderOptions(
            enable_lightbox=self.enable_lightbox,
            image_param=self.image_param,
            bg_image={k: {"uri": v} for k, v in self.bg_images.items()},
            **callbacks,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDRENDER_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDRENDER_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, level.upper(), logging.WARNING))
