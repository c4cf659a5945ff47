"""User-selected keyboard configuration models."""

from pydantic import BaseModel, Field

from .color import RgbColor
from .keyboard import KeyCode


class PerKeyColor(BaseModel):
    """Color for one key in custom lighting mode."""

    buffer_index: int = Field(ge=0, le=255, description="Position in the LED table")
    color: RgbColor


class LightModeConfig(BaseModel):
    """Lighting settings sent in the standard light frame."""

    mode_bit: int = Field(ge=0, le=255, description="Lighting mode code")
    animation: int = Field(default=0, ge=0, le=255, description="Animation speed")
    brightness: int = Field(default=0, ge=0, le=255, description="Brightness level")
    color: RgbColor | None = Field(default=None, description="Base color")
    random_colors: bool = Field(default=False, description="Let the firmware pick colors")
    sleep: int = Field(default=0, ge=0, le=255, description="Sleep timer value")
    custom_colors: list[PerKeyColor] | None = Field(
        default=None, description="Per-key colors for the custom mode"
    )


class KeyMapping(BaseModel):
    """Override of the key code at one position."""

    buffer_index: int = Field(ge=0, le=255, description="Position in the key map table")
    key_code: KeyCode


class KeyMappingConfig(BaseModel):
    """Sparse key code overrides keyed by position."""

    mappings: list[KeyMapping] = Field(default_factory=list)


class KeyboardConfig(BaseModel):
    """Complete user configuration. A missing section leaves that subsystem untouched."""

    light_mode: LightModeConfig | None = Field(default=None)
    key_mapping: KeyMappingConfig | None = Field(default=None)

    @property
    def is_empty(self) -> bool:
        """True when no subsystem is configured."""
        return self.light_mode is None and self.key_mapping is None
