"""Frame build command."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from rkconfigurator.exceptions import (
    ErrorContext,
    RkConfiguratorError,
    format_error_for_display,
)
from rkconfigurator.models import Keyboard, KeyboardConfig
from rkconfigurator.protocol import build_buffers
from rkconfigurator.utils import PydanticPersistence

logger = logging.getLogger(__name__)


def format_frames_hex(frames: list[bytes]) -> list[str]:
    """Render frames as numbered hex lines (``00: 0a 01 ...``)."""
    return [f"{index:02d}: {frame.hex(' ')}" for index, frame in enumerate(frames)]


@click.command(name="build")
@click.argument("keyboard", type=str)
@click.argument(
    "config_path",
    metavar="CONFIG",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["hex", "raw"], case_sensitive=False),
    default=None,
    help="Output format (default: from settings, usually hex)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write output to a file instead of stdout",
)
@click.pass_context
def build(
    ctx,
    keyboard: str,
    config_path: Path,
    output_format: Optional[str],
    output: Optional[Path],
):
    """
    Build the frames for CONFIG on KEYBOARD.

    KEYBOARD is a descriptor file or the name of a descriptor in the
    keyboards directory.
    """
    app_config = ctx.obj["app_config"]
    output_format = (output_format or app_config.output_format).lower()

    try:
        keyboard_path = app_config.resolve_keyboard(keyboard)
        with ErrorContext(f"build frames for {keyboard_path.name}", logger_instance=logger):
            keyboard_obj = PydanticPersistence.load_json(keyboard_path, Keyboard)
            config = PydanticPersistence.load_json(config_path, KeyboardConfig)
            frames = build_buffers(keyboard_obj, config)
    except (RkConfiguratorError, FileNotFoundError) as e:
        user_message, recovery_hint = format_error_for_display(e)

        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        click.echo(f"\nFor details, check the log file: {ctx.obj['log_path']}", err=True)
        sys.exit(1)

    logger.info(f"Built {len(frames)} frames from {config_path}")

    if config.is_empty:
        click.echo("Nothing to send: configuration is empty.")
        return
    if not frames:
        click.echo("Nothing to send: configuration has no applicable sections.")
        return

    try:
        if output_format == "raw":
            data = b"".join(frames)
            if output:
                output.write_bytes(data)
                click.echo(f"Wrote {len(frames)} frames ({len(data)} bytes) to {output}")
            else:
                click.get_binary_stream("stdout").write(data)
            return

        text = "\n".join(format_frames_hex(frames))
        if output:
            output.write_text(text + "\n", encoding="utf-8")
            click.echo(f"Wrote {len(frames)} frames to {output}")
        else:
            click.echo(text)
    except OSError as e:
        logger.error(f"Failed to write frames to {output}: {e}")
        click.echo(f"ERROR: Could not write {output}: {e.strerror or e}", err=True)
        click.echo("\nCheck that the directory exists and is writable", err=True)
        sys.exit(1)
