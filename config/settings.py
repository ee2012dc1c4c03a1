#!/usr/bin/env python3
"""
deocr settings using pydantic-settings for environment management.
Every option can be set with a DEOCR_ prefixed environment variable or a .env file.
"""

from pathlib import Path
from typing import Optional, Dict, Any
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from deocr import __version__
from deocr.engines import default_executable
from deocr.transform import OUTPUT_DIR_NAME


class DeOCRSettings(BaseSettings):
    """Main deocr configuration settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="DEOCR_",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="deocr", description="Application name")
    version: str = Field(default=__version__, description="Application version")

    # Engine settings
    ghostscript_executable: str = Field(
        default_factory=default_executable,
        description="Ghostscript binary, resolved through PATH"
    )
    engine_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds before a Ghostscript run is killed (unset waits forever)"
    )
    require_engine: bool = Field(
        default=False,
        description="Refuse to start when the engine is not installed"
    )

    # Output settings
    output_dir_name: str = Field(
        default=OUTPUT_DIR_NAME,
        description="Directory created next to each processed file"
    )
    skip_output_dirs: bool = Field(
        default=True,
        description="Do not descend into output directories of earlier runs"
    )
    fail_on_error: bool = Field(
        default=False,
        description="Exit with status 1 when any file failed"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )
    log_dir: Optional[Path] = Field(
        default=None,
        description="Directory for the JSON log file (no file when unset)"
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept lowercase level names"""
        return v.upper() if isinstance(v, str) else v

    @field_validator('output_dir_name')
    @classmethod
    def validate_output_dir_name(cls, v: str) -> str:
        """Output directory must be a single path component"""
        v = v.strip()
        if not v or v in ('.', '..') or '/' in v or '\\' in v:
            raise ValueError(f"Invalid output directory name: {v!r}")
        return v

    def to_display_dict(self) -> Dict[str, Any]:
        """Get settings for display"""
        return self.model_dump()


# Singleton instance
settings = DeOCRSettings()
