"""Pydantic model persistence and observer plumbing.

- **PydanticPersistence**: load/save Pydantic models as JSON with backups
  and friendly errors
- **ObserverManager**: generic thread-safe observer list
"""

from colorstate.model_manager.observer import ObserverManager
from colorstate.model_manager.persistence import PydanticPersistence

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
]
