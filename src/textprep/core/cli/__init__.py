"""textprep CLI: entry point for the text pipeline commands."""

import click

from textprep import __version__

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, package_name="textprep")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Minimum level logged to stderr (and the log file).",
)
@click.option("--log-file", is_flag=True, help="Also write a rotating log to paths.log_dir/textprep.log.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str, log_file: bool) -> None:
    """textprep: normalize text for storage, display and search indexing."""
    from textprep.core.cli.common import resolve_log_file
    from textprep.core.utils.logging import setup_logging

    setup_logging(level=log_level)
    if log_file:
        setup_logging(level=log_level, log_file=str(resolve_log_file(config_file)))
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file


from .text_cmd import dedupe, purify, shorten, tokenize

main.add_command(tokenize)
main.add_command(purify)
main.add_command(shorten)
main.add_command(dedupe)
