"""Generic utility modules for controlshaper.

- observer: Observer list management for services
- persistence: JSON load/save of pydantic models
"""

from .observer import ObserverManager
from .persistence import PydanticPersistence

__all__ = ["ObserverManager", "PydanticPersistence"]
