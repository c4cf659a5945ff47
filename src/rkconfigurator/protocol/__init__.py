"""
Binary protocol for RK keyboards.

This package turns a Keyboard descriptor plus a KeyboardConfig into the
ordered list of 65-byte frames the firmware expects. Writing the frames to
the device, one report per frame and in list order, is left to the caller.

Example::

    from rkconfigurator.protocol import build_buffers

    for frame in build_buffers(keyboard, config):
        device.write(frame)
"""

from .buffers import (
    build_buffers,
    build_color_table,
    build_custom_light_frames,
    build_key_map_table,
    build_key_mapping_frames,
    build_standard_light_frame,
)
from .frames import FRAME_SIZE, encode_key_code, pack_frames, payload_capacity

__all__ = [
    "FRAME_SIZE",
    "build_buffers",
    "build_color_table",
    "build_custom_light_frames",
    "build_key_map_table",
    "build_key_mapping_frames",
    "build_standard_light_frame",
    "encode_key_code",
    "pack_frames",
    "payload_capacity",
]
