"""Pydantic models for renderer settings.

These models validate and type the JSON settings file. Settings only
seed defaults; anything a form's front matter says still wins.
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


class ReportingSettings(BaseModel):
    """Where and how results are logged."""

    persist_log: bool = Field(True, description="Append results to the log file")
    log_file: Optional[Path] = Field(
        None, description="Log file path; defaults to the platform log directory"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


class RenderSettings(BaseModel):
    """Top-level settings for the renderer."""

    default_title: str = Field("Untitled Form", min_length=1)
    default_numbering: Literal["outline", "decimal"] = "outline"
    encoding: str = Field("utf-8", description="Encoding of source documents")
    reporting: ReportingSettings = Field(default_factory=ReportingSettings)

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding: {value}") from None
        return value
