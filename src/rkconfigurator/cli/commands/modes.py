"""Mode catalog commands."""

import click

from rkconfigurator.models import KeyboardFamily
from rkconfigurator.modes import is_custom_mode, list_modes


@click.group(name="modes")
def modes_group():
    """Lighting mode catalog."""
    pass


@modes_group.command(name="list")
@click.option(
    "--family",
    "-f",
    type=click.Choice([family.value for family in KeyboardFamily], case_sensitive=False),
    default=KeyboardFamily.RGB.value,
    help="Keyboard family (default: rgb)",
)
def list_lighting_modes(family: str):
    """List the lighting modes of a keyboard family with their codes."""
    keyboard_family = KeyboardFamily(family.lower())

    click.echo(f"Lighting modes ({keyboard_family.value}):\n")
    for mode in list_modes(keyboard_family):
        suffix = "  (per-key colors)" if is_custom_mode(mode.mode_bit, keyboard_family) else ""
        click.echo(f"  [{mode.mode_bit:>2}] {mode.name}{suffix}")
