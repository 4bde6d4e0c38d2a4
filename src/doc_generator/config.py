"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from doc_generator.core import ScanWindows


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "doc-generator"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    # Templates (None means the bundled snippet bodies)
    template_dir: Path | None = None

    # Scan windows, in lines
    comment_lookback_lines: int = 100
    annotation_run_lines: int = 10
    signature_window_lines: int = 50
    declaration_window_lines: int = 200
    enum_block_window_lines: int = 200
    enclosing_type_window_lines: int = 400

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return upper

    @field_validator(
        "comment_lookback_lines",
        "annotation_run_lines",
        "signature_window_lines",
        "declaration_window_lines",
        "enum_block_window_lines",
        "enclosing_type_window_lines",
    )
    @classmethod
    def validate_window(cls, v: int) -> int:
        if v < 1:
            raise ValueError("scan windows must be at least one line")
        return v

    @model_validator(mode="after")
    def validate_window_ordering(self) -> "Settings":
        # Annotation runs sit inside signatures, which sit inside the declaration search.
        if not (
            self.annotation_run_lines
            < self.signature_window_lines
            < self.declaration_window_lines
        ):
            raise ValueError(
                "scan windows must satisfy "
                "annotation_run_lines < signature_window_lines < declaration_window_lines"
            )
        return self

    @property
    def scan_windows(self) -> ScanWindows:
        """Scan bounds handed to grammars and scanners."""
        return ScanWindows(
            comment_lookback=self.comment_lookback_lines,
            annotation_run=self.annotation_run_lines,
            signature=self.signature_window_lines,
            declaration=self.declaration_window_lines,
            enum_block=self.enum_block_window_lines,
            enclosing_type=self.enclosing_type_window_lines,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
