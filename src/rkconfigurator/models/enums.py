"""Enumerations for keyboard models."""

from enum import Enum


class KeyboardFamily(str, Enum):
    """Keyboard lighting families. Each family has its own mode code space."""

    RGB = "rgb"  # Multi-color backlight
    SINGLE_COLOR = "single_color"  # One backlight color

    @classmethod
    def from_rgb_flag(cls, rgb: bool) -> "KeyboardFamily":
        """Map a keyboard's ``rgb`` flag to its family."""
        return cls.RGB if rgb else cls.SINGLE_COLOR
