"""Command line interface for rkconfigurator."""

from .main import cli

__all__ = ["cli"]
