"""Frame encoding exceptions.

This module defines exceptions raised while building device frames:
- EncodingError: Base class for encoding errors
- MissingCustomColorsError: Custom light mode selected without per-key colors
- MissingColorError: A base color was required but not configured
"""

from .base import RkConfiguratorError


class EncodingError(RkConfiguratorError):
    """A keyboard configuration could not be encoded into frames."""
    pass


class MissingCustomColorsError(EncodingError):
    """Custom light mode selected but no per-key colors were supplied."""

    def __init__(self, mode_bit: int, family: str):
        """
        Initialize missing custom colors error.

        Args:
            mode_bit: The custom mode code that was selected
            family: Keyboard family the mode code was interpreted for
        """
        super().__init__(
            user_message="Custom lighting mode needs per-key colors",
            technical_message=(
                f"Mode {mode_bit} is the custom mode for the {family} family "
                "but light_mode.custom_colors is missing"
            ),
            recoverable=True,
            recovery_hint=(
                "Add a 'custom_colors' list to 'light_mode' "
                "(entries of {\"buffer_index\": ..., \"color\": {\"r\": ..., \"g\": ..., \"b\": ...}}) "
                "or pick a built-in mode. Run 'rkconfigurator modes list' to see them."
            ),
        )
        self.mode_bit = mode_bit
        self.family = family


class MissingColorError(EncodingError):
    """A base color was required for the light frame but none was configured."""

    def __init__(self, mode_bit: int):
        """
        Initialize missing color error.

        Args:
            mode_bit: The mode code that required a color
        """
        super().__init__(
            user_message="Lighting mode needs a base color",
            technical_message=f"Mode {mode_bit} requires light_mode.color but it is missing",
            recoverable=True,
            recovery_hint="Set 'color' in 'light_mode' to an {\"r\", \"g\", \"b\"} object",
        )
        self.mode_bit = mode_bit
