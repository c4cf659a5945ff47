"""Data models for keyboard descriptors and configurations."""

from .color import RgbColor
from .config import AppConfig
from .enums import KeyboardFamily
from .keyboard import KeyCode, KeyDescriptor, Keyboard, KeyboardId
from .keyboard_config import (
    KeyboardConfig,
    KeyMapping,
    KeyMappingConfig,
    LightModeConfig,
    PerKeyColor,
)
from .mode import Mode

__all__ = [
    "AppConfig",
    "KeyCode",
    "KeyDescriptor",
    "KeyMapping",
    "KeyMappingConfig",
    # Models
    "Keyboard",
    "KeyboardConfig",
    # Enums
    "KeyboardFamily",
    "KeyboardId",
    "LightModeConfig",
    "Mode",
    "PerKeyColor",
    "RgbColor",
]
