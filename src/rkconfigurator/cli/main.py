"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from rkconfigurator import __version__
from rkconfigurator.exceptions import RkConfiguratorError, format_error_for_display
from rkconfigurator.models import AppConfig

from .commands import build, modes_group, validate

logger = logging.getLogger(__name__)

_HANDLER_NAME = "rkconfigurator-file"


def setup_logging(
    verbose: int, debug: bool, log_file: Optional[Path], log_level: str, log_dir: Path
) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
        log_dir: Directory for the default rotating log file

    Returns:
        Path of the log file in use
    """
    if debug:
        level = logging.DEBUG
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins for custom log files
    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "rkconfigurator-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "rkconfigurator.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.set_name(_HANDLER_NAME)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="rkconfigurator")
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Application settings file (default: ~/.rkconfigurator/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./rkconfigurator-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    RK keyboard configurator - encode lighting and key mapping for RK keyboards.

    Builds the 65-byte frames that apply a lighting mode, per-key colors and
    key remapping to an RK keyboard. Keyboards are described by JSON
    descriptor files; configurations are JSON files too.

    \b
    Examples:
      # List lighting modes of RGB keyboards
      rkconfigurator modes list --family rgb

      # Print the frames for a configuration as hex
      rkconfigurator build ./rk61.json ./config.json

      # Write raw frames to a file
      rkconfigurator build rk61 ./config.json --format raw --output frames.bin

      # Check a configuration file
      rkconfigurator validate ./config.json --kind config
    """
    try:
        app_config = AppConfig.load_or_default(config_file)
    except RkConfiguratorError as e:
        user_message, recovery_hint = format_error_for_display(e)

        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        sys.exit(1)

    log_path = setup_logging(verbose, debug, log_file, log_level, app_config.log_dir)

    ctx.ensure_object(dict)
    ctx.obj["app_config"] = app_config
    ctx.obj["log_path"] = log_path


cli.add_command(modes_group)
cli.add_command(build)
cli.add_command(validate)

if __name__ == "__main__":
    cli()
