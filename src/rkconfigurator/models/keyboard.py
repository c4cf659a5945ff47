"""Keyboard descriptor models.

A descriptor is static data about one physical keyboard model: which family
it belongs to, whether it accepts key remapping, and the factory key code at
every buffer position. The geometry fields only drive on-screen layouts and
never influence frame encoding.
"""

from typing import Annotated

from pydantic import BaseModel, Field

from .enums import KeyboardFamily

# Key codes are sent as 4-byte big-endian slots
KeyCode = Annotated[int, Field(ge=0, le=0xFFFFFFFF, description="Key code (u32)")]


class KeyboardId(BaseModel):
    """USB vendor/product identifier pair."""

    vid: int = Field(ge=0, le=0xFFFF, description="USB vendor ID")
    pid: int = Field(ge=0, le=0xFFFF, description="USB product ID")

    def __str__(self) -> str:
        return f"{self.vid:04x}:{self.pid:04x}"


class KeyDescriptor(BaseModel):
    """Factory key assignment for one physical position."""

    buffer_index: int = Field(ge=0, le=255, description="Position in the device tables")
    key_code: KeyCode
    top_x: int = Field(default=0, description="Left edge in the layout image")
    top_y: int = Field(default=0, description="Top edge in the layout image")
    bottom_x: int = Field(default=0, description="Right edge in the layout image")
    bottom_y: int = Field(default=0, description="Bottom edge in the layout image")


class Keyboard(BaseModel):
    """Static description of a physical keyboard."""

    rgb: bool = Field(description="True for multi-color keyboards")
    key_map_enabled: bool = Field(default=False, description="Keyboard accepts key remapping")
    keys: list[KeyDescriptor] = Field(
        default_factory=list, description="Factory key assignment, in layout order"
    )

    id: KeyboardId | None = Field(default=None, description="USB identifiers")
    name: str = Field(default="", description="Display name")
    path: str = Field(default="", description="Transport path of the connected device")
    image_path: str = Field(default="", description="Layout image used by front ends")
    light_enabled: bool = Field(default=True, description="Keyboard has a backlight")
    top_left_x: int = Field(default=0)
    top_left_y: int = Field(default=0)
    bottom_right_x: int = Field(default=0)
    bottom_right_y: int = Field(default=0)

    @property
    def family(self) -> KeyboardFamily:
        """Lighting family derived from the ``rgb`` flag."""
        return KeyboardFamily.from_rgb_flag(self.rgb)
