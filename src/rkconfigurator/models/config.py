"""Application configuration model."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_serializer

from rkconfigurator.utils.persistence import PydanticPersistence

DEFAULT_HOME = Path.home() / ".rkconfigurator"


class AppConfig(BaseModel):
    """Application settings for the command line tools."""

    keyboards_dir: Path = Field(
        default_factory=lambda: DEFAULT_HOME / "keyboards",
        description="Directory searched for keyboard descriptors given by name",
    )
    log_dir: Path = Field(
        default_factory=lambda: DEFAULT_HOME / "logs",
        description="Directory for rotating log files",
    )
    output_format: Literal["hex", "raw"] = Field(
        default="hex", description="Default frame output format for 'build'"
    )

    @field_serializer("keyboards_dir", "log_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    def resolve_keyboard(self, name_or_path: str) -> Path:
        """
        Resolve a keyboard descriptor argument to a file path.

        Existing paths are returned unchanged; anything else is looked up as
        ``<keyboards_dir>/<name>.json``.
        """
        candidate = Path(name_or_path)
        if candidate.exists():
            return candidate
        name = candidate.name if candidate.suffix == ".json" else f"{candidate.name}.json"
        return self.keyboards_dir / name

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return defaults.

        Args:
            path: Path to config file. If None, uses ~/.rkconfigurator/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_HOME / "config.json"

        return PydanticPersistence.load_json_or_default(path, cls)
