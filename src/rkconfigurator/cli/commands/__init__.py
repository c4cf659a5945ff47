"""CLI commands for rkconfigurator."""

from .build import build
from .modes import modes_group
from .validate import validate

__all__ = ["build", "modes_group", "validate"]
