"""
Frame builders for keyboard lighting and key mapping.

A configuration becomes up to three transfers, always in this order::

    light_mode present            -> 1 standard light frame
    light_mode custom + colors    -> 7 custom light frames
    key_map_enabled + key_mapping -> 9 key mapping frames

so a full configuration is 1 + 7 + 9 = 17 frames.

Standard Light Frame
--------------------

::

    offset  0    1    2    3    4    5     6   7     8      9  10  11  12      13
           [0a] [01] [01] [02] [29] [mode] [0] [anim] [brig] [r] [g] [b] [rand] [sleep] 0...

Custom Light Frames
-------------------

Per-key colors go into a 455-byte table (7 x 65) of RGB triplets at
``buffer_index * 3``. Frame 0 leads with ``[03 7e 01]``.

Key Mapping Frames
------------------

Key codes go into a 585-byte table (9 x 65) of 4-byte big-endian slots at
``buffer_index * 4``. The keyboard's factory codes are written first and
the configured overrides second, so an override always wins at its
position. Frame 0 leads with ``[01 f8]``.

Entries whose slot would run past the end of a table are skipped.
"""

import logging

from rkconfigurator.exceptions import MissingColorError, MissingCustomColorsError
from rkconfigurator.models import (
    Keyboard,
    KeyboardConfig,
    KeyMappingConfig,
    LightModeConfig,
    PerKeyColor,
)
from rkconfigurator.modes import is_custom_mode

from .frames import FRAME_SIZE, empty_frame, encode_key_code, pack_frames

logger = logging.getLogger(__name__)

STANDARD_LIGHT_HEADER = bytes([0x0A, 0x01, 0x01, 0x02, 0x29])

CUSTOM_LIGHT_FRAME_COUNT = 7
CUSTOM_LIGHT_LEAD = bytes([0x03, 0x7E, 0x01])
CUSTOM_LIGHT_TABLE_SIZE = CUSTOM_LIGHT_FRAME_COUNT * FRAME_SIZE

KEY_MAP_FRAME_COUNT = 9
KEY_MAP_LEAD = bytes([0x01, 0xF8])
KEY_MAP_TABLE_SIZE = KEY_MAP_FRAME_COUNT * FRAME_SIZE
KEY_SLOT_SIZE = 4


def build_buffers(keyboard: Keyboard, config: KeyboardConfig) -> list[bytes]:
    """
    Build every frame needed to apply a configuration to a keyboard.

    Args:
        keyboard: Descriptor of the target keyboard
        config: Lighting and key mapping configuration

    Returns:
        Frames in transmission order

    Raises:
        MissingCustomColorsError: If the custom mode is selected without per-key colors
    """
    buffers: list[bytes] = []

    light_mode = config.light_mode
    if light_mode is not None:
        buffers.append(build_standard_light_frame(light_mode))

        if is_custom_mode(light_mode.mode_bit, keyboard.family):
            if light_mode.custom_colors is None:
                raise MissingCustomColorsError(light_mode.mode_bit, keyboard.family.value)
            buffers.extend(build_custom_light_frames(light_mode.custom_colors))

    if keyboard.key_map_enabled and config.key_mapping is not None:
        buffers.extend(build_key_mapping_frames(keyboard, config.key_mapping))
    elif config.key_mapping is not None:
        logger.debug("Keyboard does not accept key mapping, skipping key mapping frames")

    logger.debug(f"Built {len(buffers)} frames for {keyboard.name or 'keyboard'}")
    return buffers


def build_standard_light_frame(config: LightModeConfig, require_color: bool = False) -> bytes:
    """
    Build the frame carrying mode, speed, brightness, color and sleep settings.

    Args:
        config: Lighting configuration
        require_color: Fail instead of sending zeros when no color is set

    Raises:
        MissingColorError: If require_color is set and config has no color
    """
    if require_color and config.color is None:
        raise MissingColorError(config.mode_bit)

    frame = empty_frame()
    frame[0:5] = STANDARD_LIGHT_HEADER
    frame[5] = config.mode_bit
    frame[7] = config.animation
    frame[8] = config.brightness

    if config.color is not None:
        frame[9:12] = bytes(config.color.to_rgb_tuple())

    frame[12] = 0x01 if config.random_colors else 0x00
    frame[13] = config.sleep

    return bytes(frame)


def build_custom_light_frames(custom_colors: list[PerKeyColor]) -> list[bytes]:
    """Build the 7 frames carrying the per-key color table."""
    return pack_frames(build_color_table(custom_colors), CUSTOM_LIGHT_FRAME_COUNT, CUSTOM_LIGHT_LEAD)


def build_color_table(custom_colors: list[PerKeyColor]) -> bytes:
    """
    Lay out per-key colors as the 455-byte triplet table.

    Entries whose blue byte would fall past the end are skipped.
    """
    table = bytearray(CUSTOM_LIGHT_TABLE_SIZE)

    for per_key in custom_colors:
        rgb_index = per_key.buffer_index * 3
        if rgb_index + 2 >= len(table):
            logger.debug(f"Dropping color for buffer index {per_key.buffer_index}: outside LED table")
            continue
        table[rgb_index : rgb_index + 3] = bytes(per_key.color.to_rgb_tuple())

    return bytes(table)


def build_key_mapping_frames(keyboard: Keyboard, config: KeyMappingConfig) -> list[bytes]:
    """Build the 9 frames carrying the full key code table."""
    return pack_frames(build_key_map_table(keyboard, config), KEY_MAP_FRAME_COUNT, KEY_MAP_LEAD)


def build_key_map_table(keyboard: Keyboard, config: KeyMappingConfig) -> bytes:
    """Lay out factory key codes and overrides as the 585-byte slot table."""
    table = bytearray(KEY_MAP_TABLE_SIZE)

    # Factory defaults first, overrides last
    for entry in [*keyboard.keys, *config.mappings]:
        map_index = entry.buffer_index * KEY_SLOT_SIZE
        if map_index + KEY_SLOT_SIZE - 1 >= len(table):
            logger.debug(f"Dropping key code for buffer index {entry.buffer_index}: outside key map table")
            continue
        table[map_index : map_index + KEY_SLOT_SIZE] = encode_key_code(entry.key_code)

    return bytes(table)
