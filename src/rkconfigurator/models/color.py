"""Color model for keyboard lighting."""

from pydantic import BaseModel, ConfigDict, Field


class RgbColor(BaseModel):
    """Standard 8-bit RGB color.

    The firmware takes colors as raw 8-bit channels, so no device-specific
    conversion is needed. The model is frozen so colors can be shared between
    per-key entries and used as dict keys.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string.

        Example:
            >>> RgbColor(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
