"""Hello World Action - Greeter step for CI workflows"""

__version__ = "1.0.0"

from .actions.base import BaseAction
from .actions.builtin import HelloWorldAction
from .core.context import ActionContext
from .core.runner import StepResult, run_step
from .core.toolkit import ActionInputs, ActionReporter

__all__ = [
    "BaseAction",
    "HelloWorldAction",
    "ActionContext",
    "ActionInputs",
    "ActionReporter",
    "StepResult",
    "run_step",
]
