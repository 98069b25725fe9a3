"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

DEFAULT_DATA_SOURCE = "./data/episodes.json"


class SiteConfig(BaseModel):
    """Site build configuration."""

    data_source: str = DEFAULT_DATA_SOURCE  # URL or path relative to site_root
    site_root: Path = Field(default=Path("."))
    output_dir: Path = Field(default=Path("site"))
    request_timeout: float = Field(default=10.0, gt=0)
    copyright_year: int = 2024
    stylesheet: str = "css/style.css"
    log_level: LogLevel = "INFO"
