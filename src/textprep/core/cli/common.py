"""Shared setup logic for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from textprep.core.exceptions import TextprepError

TEXTPREP_DIR = Path.home() / ".textprep"
CONFIG_PATH = TEXTPREP_DIR / "config.yaml"


def load_config(config_file: str | None = None):
    """Load config from *config_file*, falling back to ~/.textprep/config.yaml."""
    from textprep.core.config import Config

    path = config_file or str(CONFIG_PATH)
    return Config(config_file=path, data_dir=str(TEXTPREP_DIR))


def load_options(ctx: click.Context, **overrides):
    """Build TextOptions from the group's config, applying non-None overrides.

    Configuration problems become a usage error instead of a traceback.
    """
    from dataclasses import replace

    from textprep.text.options import options_from_config

    from textprep.core.reporting import report_error

    config_file = (ctx.obj or {}).get("config_file")
    try:
        options = options_from_config(load_config(config_file))
    except TextprepError as e:
        report_error(f"textprep {ctx.info_name}", e)
        raise click.ClickException(str(e)) from e

    overrides = {k: v for k, v in overrides.items() if v is not None}
    return replace(options, **overrides) if overrides else options


def resolve_log_file(config_file: str | None = None) -> Path:
    """Return ``textprep.log`` under the configured ``paths.log_dir``, creating the directory.

    An unset ``log_dir`` means ``<data_dir>/logs``.
    """
    from textprep.core.reporting import report_error

    try:
        paths = load_config(config_file).validated().paths
        log_dir = paths.log_dir or paths.data_dir / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
    except TextprepError as e:
        report_error("textprep", e)
        raise click.ClickException(str(e)) from e
    except OSError as e:
        report_error("textprep", e)
        raise click.ClickException(f"Cannot create log directory: {e}") from e
    return log_dir / "textprep.log"
