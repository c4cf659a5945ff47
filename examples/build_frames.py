"""Example: build the frames for the bundled RK61 configuration and print them."""

from pathlib import Path

from rkconfigurator.models import Keyboard, KeyboardConfig
from rkconfigurator.protocol import build_buffers
from rkconfigurator.utils import PydanticPersistence

HERE = Path(__file__).parent


def main():
    """Load the example descriptor and config, then dump every frame."""
    keyboard = PydanticPersistence.load_json(HERE / "rk61.json", Keyboard)
    config = PydanticPersistence.load_json(HERE / "custom_lighting.json", KeyboardConfig)

    frames = build_buffers(keyboard, config)
    print(f"{keyboard.name}: {len(frames)} frames\n")
    for index, frame in enumerate(frames):
        print(f"{index:02d}: {frame.hex(' ')}")


if __name__ == "__main__":
    main()
