"""Generic utility modules for rkconfigurator.

- persistence: Loading and validating Pydantic models from JSON files
"""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
