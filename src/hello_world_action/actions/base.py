"""
BaseAction - Abstract base class for step actions

Defines the interface every step action implements. Actions receive a config
dictionary at construction time and the invocation context when executed, then
return the name of the event describing how the step finished. Host-runner
collaborators (input reader, reporter, event context) travel in the context
dictionary so actions stay independent of the process environment.

KEY FUNCTIONS:
- execute(context) - Abstract method for action execution, returns event name
- get_description() - Get action description from config or generate default
- get_config_value(key, default) - Retrieve configuration values with fallbacks
- get_collaborator(context, key) - Fetch a required collaborator from the context
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Any

from ..errors import ActionError


class BaseAction(ABC):
    """Base class for all step actions."""

    def __init__(self, action_config: Dict[str, Any] = None):
        """
        Initialize action with configuration.

        Args:
            action_config: Configuration dictionary (may be empty)
        """
        self.config = action_config or {}
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    @abstractmethod
    async def execute(self, context: Dict[str, Any]) -> str:
        """
        Execute the action.

        Args:
            context: Invocation context holding the step collaborators

        Returns:
            Event name describing the outcome
        """
        pass

    def get_description(self) -> str:
        """Get action description from config or default."""
        return self.config.get('description', f"{self.__class__.__name__} action")

    def get_config_value(self, key: str, default: Any = None) -> Any:
        """Get configuration value with optional default."""
        return self.config.get(key, default)

    def get_collaborator(self, context: Dict[str, Any], key: str) -> Any:
        """Get a collaborator from the context, raising ActionError when it is missing."""
        try:
            return context[key]
        except KeyError:
            raise ActionError(f"{self.__class__.__name__} requires '{key}' in context") from None
