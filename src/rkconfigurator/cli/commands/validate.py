"""Validation command."""

import sys
from pathlib import Path

import click

from rkconfigurator.models import Keyboard, KeyboardConfig
from rkconfigurator.utils import PydanticPersistence

_MODEL_TYPES = {
    "keyboard": Keyboard,
    "config": KeyboardConfig,
}


@click.command(name="validate")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--kind",
    "-k",
    type=click.Choice(sorted(_MODEL_TYPES), case_sensitive=False),
    default="config",
    help="What the file describes (default: config)",
)
def validate(path: Path, kind: str):
    """Check that a keyboard descriptor or configuration file is valid."""
    is_valid, error = PydanticPersistence.validate_json(path, _MODEL_TYPES[kind.lower()])

    if is_valid:
        click.echo(f"{path}: OK")
        return

    click.echo(f"{path}: {error}", err=True)
    sys.exit(1)
