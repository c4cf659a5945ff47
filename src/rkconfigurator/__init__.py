"""rkconfigurator: lighting and key mapping encoder for RK keyboards."""

__version__ = "0.1.0"

from .modes import is_custom_mode, list_modes
from .protocol import build_buffers

__all__ = [
    "build_buffers",
    "is_custom_mode",
    "list_modes",
]
