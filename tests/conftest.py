"""Pytest fixtures for tests."""

import json
from pathlib import Path

import pytest

from rkconfigurator.models import (
    KeyboardConfig,
    KeyDescriptor,
    Keyboard,
    KeyMapping,
    KeyMappingConfig,
    LightModeConfig,
    PerKeyColor,
    RgbColor,
)


@pytest.fixture
def rgb_keyboard():
    """RGB keyboard that accepts key remapping, with a few factory keys."""
    return Keyboard(
        name="RK61",
        rgb=True,
        key_map_enabled=True,
        keys=[
            KeyDescriptor(buffer_index=0, key_code=0x29),  # Esc
            KeyDescriptor(buffer_index=1, key_code=0x1E),  # 1
            KeyDescriptor(buffer_index=2, key_code=0x1F),  # 2
            KeyDescriptor(buffer_index=20, key_code=0x0001F600),
        ],
    )


@pytest.fixture
def single_color_keyboard():
    """Single-color keyboard without key remapping."""
    return Keyboard(name="RK68 White", rgb=False, key_map_enabled=False)


@pytest.fixture
def steady_light():
    """Built-in steady red lighting on an RGB keyboard."""
    return LightModeConfig(
        mode_bit=16,
        animation=3,
        brightness=5,
        color=RgbColor(r=255, g=0, b=0),
        random_colors=False,
        sleep=2,
    )


@pytest.fixture
def custom_light():
    """Custom (per-key) lighting on an RGB keyboard."""
    return LightModeConfig(
        mode_bit=0,
        animation=1,
        brightness=4,
        custom_colors=[
            PerKeyColor(buffer_index=0, color=RgbColor(r=0x11, g=0x22, b=0x33)),
            PerKeyColor(buffer_index=1, color=RgbColor(r=0x44, g=0x55, b=0x66)),
            PerKeyColor(buffer_index=20, color=RgbColor(r=0xAA, g=0xBB, b=0xCC)),
        ],
    )


@pytest.fixture
def key_mapping():
    """Swap key 1 for 'A' (0x04)."""
    return KeyMappingConfig(mappings=[KeyMapping(buffer_index=1, key_code=0x04)])


@pytest.fixture
def full_config(custom_light, key_mapping):
    """Configuration touching every subsystem."""
    return KeyboardConfig(light_mode=custom_light, key_mapping=key_mapping)


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON document into tmp_path and return its path."""

    def _write(name: str, data) -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data)
        else:
            path.write_text(json.dumps(data))
        return path

    return _write
