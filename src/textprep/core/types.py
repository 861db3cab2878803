"""Shared type aliases used across textprep."""

from collections.abc import Mapping
from pathlib import Path

# Path types
PathLike = str | Path

# Language code -> ordered stop words
StopWordTable = Mapping[str, tuple[str, ...]]
