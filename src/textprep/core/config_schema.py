"""Pydantic models for config validation.

Call ``Config.validated()`` to obtain a typed, validated ``TextprepConfig``
instance. Dict-based access through ``Config.get`` keeps working unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _expand(v: Any) -> Any:
    if isinstance(v, str):
        return Path(v).expanduser()
    if isinstance(v, Path):
        return v.expanduser()
    return v


class PathsConfig(BaseModel):
    """File-system paths used by the application."""

    data_dir: Path
    log_dir: Path | None = None

    @field_validator("data_dir", "log_dir", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        return _expand(v)


class TextConfig(BaseModel):
    """Settings for the normalization and tokenization pipeline."""

    purify_replacer: str = "-"
    language: str = "en"
    legacy_purify: bool = False
    stop_words_file: Path | None = None

    @field_validator("language", mode="before")
    @classmethod
    def _normalize_language(cls, v: Any) -> Any:
        if v is None or v == "":
            return "en"
        if isinstance(v, str):
            v = v.strip().lower()
            if len(v) != 2 or not v.isascii() or not v.isalpha():
                raise ValueError(f"language must be a two-letter ISO code, got {v!r}")
        return v

    @field_validator("stop_words_file", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if v == "":
            return None
        return _expand(v)


class TextprepConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig = PathsConfig(data_dir=Path("~/.textprep-data"))
    text: TextConfig = TextConfig()
