"""Lighting mode catalog for RGB and single-color keyboards.

The two keyboard families share most effect names but number them
independently, so the same display name maps to different codes:

    Effect      RGB   Single-color
    Custom        0              2
    Steady       16              1
    Breathing    17              3

Always resolve codes with the family of the keyboard they are sent to.
"""

from enum import IntEnum

from rkconfigurator.models import KeyboardFamily, Mode


class RgbMode(IntEnum):
    """Lighting modes of RGB keyboards."""

    CUSTOM = 0
    NEON_STREAM = 1
    RIPPLES_SHINING = 2
    ROTATING_WINDMILL = 3
    SINE_WAVE = 4
    RAINBOW_ROULETTE = 5
    STARS_TWINKLE = 6
    LAYER_UPON_LAYER = 7
    RICH_AND_HONORED = 8
    MARQUEE_EFFECT = 9
    ROTATING_STORM = 10
    SERPENTINE_HORSE_RACE = 11
    RETRO_SNAKE = 12
    DIAGONAL_TRANSFORMATION = 13
    AMBILIGHT = 14
    STREAMER = 15
    STEADY = 16
    BREATHING = 17
    NEON = 18
    SHADOW_DISAPPEAR = 19
    FLASH_AWAY = 20


class SingleColorMode(IntEnum):
    """Lighting modes of single-color keyboards."""

    STEADY = 1
    CUSTOM = 2
    BREATHING = 3
    PRESS_AND_DESTROY = 4
    NEON_STREAM = 5
    STREAMER = 6
    AMBILIGHT = 7
    DRIPPLING_RIPPLES = 8
    BRILLIANT_POINT = 9
    FLASH_AWAY = 10
    SHADOW_DISAPPEAR = 11
    RIPPLES_SHINING = 12
    RICH_AND_HONORED = 13
    MARQUEE_EFFECT = 14
    ROTATING_STORM = 15
    SERPENTINE_HORSE_RACE = 16
    STARS_TWINKLE = 17
    RETRO_SNAKE = 18
    DIAGONAL_TRANSFORMATION = 19
    SINE_WAVE = 20


# Display order: Custom first, then effects by name
_RGB_CATALOG: tuple[tuple[str, RgbMode], ...] = (
    ("Custom", RgbMode.CUSTOM),
    ("Ambilight", RgbMode.AMBILIGHT),
    ("Breathing", RgbMode.BREATHING),
    ("Diagonal Transformation", RgbMode.DIAGONAL_TRANSFORMATION),
    ("Flash Away", RgbMode.FLASH_AWAY),
    ("Layer Upon Layer", RgbMode.LAYER_UPON_LAYER),
    ("Marquee Effect", RgbMode.MARQUEE_EFFECT),
    ("Neon", RgbMode.NEON),
    ("Neon Stream", RgbMode.NEON_STREAM),
    ("Rainbow Roulette", RgbMode.RAINBOW_ROULETTE),
    ("Retro Snake", RgbMode.RETRO_SNAKE),
    ("Rich And Honored", RgbMode.RICH_AND_HONORED),
    ("Ripples Shining", RgbMode.RIPPLES_SHINING),
    ("Rotating Storm", RgbMode.ROTATING_STORM),
    ("Rotating Windmill", RgbMode.ROTATING_WINDMILL),
    ("Serpentine Horse Race", RgbMode.SERPENTINE_HORSE_RACE),
    ("Shadow Disappear", RgbMode.SHADOW_DISAPPEAR),
    ("Sine Wave", RgbMode.SINE_WAVE),
    ("Stars Twinkle", RgbMode.STARS_TWINKLE),
    ("Steady", RgbMode.STEADY),
    ("Streamer", RgbMode.STREAMER),
)

# Display order matches the firmware's own numbering
_SINGLE_COLOR_CATALOG: tuple[tuple[str, SingleColorMode], ...] = (
    ("Steady", SingleColorMode.STEADY),
    ("Custom", SingleColorMode.CUSTOM),
    ("Breathing", SingleColorMode.BREATHING),
    ("Press And Destroy", SingleColorMode.PRESS_AND_DESTROY),
    ("Neon Stream", SingleColorMode.NEON_STREAM),
    ("Streamer", SingleColorMode.STREAMER),
    ("Ambilight", SingleColorMode.AMBILIGHT),
    ("Drippling Ripples", SingleColorMode.DRIPPLING_RIPPLES),
    ("Brilliant Point", SingleColorMode.BRILLIANT_POINT),
    ("Flash Away", SingleColorMode.FLASH_AWAY),
    ("Shadow Disappear", SingleColorMode.SHADOW_DISAPPEAR),
    ("Ripples Shining", SingleColorMode.RIPPLES_SHINING),
    ("Rich And Honored", SingleColorMode.RICH_AND_HONORED),
    ("Marquee Effect", SingleColorMode.MARQUEE_EFFECT),
    ("Rotating Storm", SingleColorMode.ROTATING_STORM),
    ("Serpentine Horse Race", SingleColorMode.SERPENTINE_HORSE_RACE),
    ("Stars Twinkle", SingleColorMode.STARS_TWINKLE),
    ("Retro Snake", SingleColorMode.RETRO_SNAKE),
    ("Diagonal Transformation", SingleColorMode.DIAGONAL_TRANSFORMATION),
    ("Sine Wave", SingleColorMode.SINE_WAVE),
)


def list_modes(family: KeyboardFamily) -> list[Mode]:
    """
    Get the selectable lighting modes of a keyboard family, in display order.

    Args:
        family: Keyboard family

    Returns:
        Fresh list of Mode entries
    """
    family = KeyboardFamily(family)
    catalog = _RGB_CATALOG if family is KeyboardFamily.RGB else _SINGLE_COLOR_CATALOG
    return [Mode(name=name, mode_bit=int(code)) for name, code in catalog]


def is_custom_mode(mode_bit: int, family: KeyboardFamily) -> bool:
    """Check whether a mode code selects per-key colors for the given family."""
    family = KeyboardFamily(family)
    if family is KeyboardFamily.RGB:
        return mode_bit == RgbMode.CUSTOM
    return mode_bit == SingleColorMode.CUSTOM

