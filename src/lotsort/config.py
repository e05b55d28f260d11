"""Application settings loaded from YAML; ``LOTSORT_PROFILE`` selects the settings file."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Settings sections
# ---------------------------------------------------------------------------


class IngestionSettings(BaseModel):
    supported_formats: list[str] = Field(default_factory=lambda: [".csv", ".txt"])
    encodings: list[str] = Field(
        default_factory=lambda: ["utf-8-sig", "cp1252", "latin-1"]
    )


class ExportSettings(BaseModel):
    all_filename: str = "sorted_transactions_all.csv"
    short_term_filename: str = "sorted_short_term.csv"
    long_term_filename: str = "sorted_long_term.csv"


class DisplaySettings(BaseModel):
    preview_rows: int = 20


class LoggingSettings(BaseModel):
    level: str = "WARNING"


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _find_settings_file() -> Path | None:
    """Walk up from cwd looking for settings.yaml."""
    profile = os.getenv("LOTSORT_PROFILE", "")
    names = [f"settings-{profile}.yaml", "settings.yaml"] if profile else ["settings.yaml"]

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        for name in names:
            candidate = parent / name
            if candidate.exists():
                return candidate
    return None


def load_settings() -> Settings:
    """Load settings from YAML file, falling back to defaults."""
    path = _find_settings_file()
    if path is None:
        return Settings()

    with open(path, encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}

    return Settings(**raw)
