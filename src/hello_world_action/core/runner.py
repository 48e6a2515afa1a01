"""
StepRunner - Single failure boundary around one step invocation

Awaits the action and converts any exception into a failed StepResult, after
reporting the exception's message to the runner through the reporter's
set_failed(). Nothing is retried.

KEY FUNCTIONS:
- run_step(action, context) - Execute the action and return a StepResult
- error_message(exc) - Text reported for an exception
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from ..actions.base import BaseAction

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Outcome of one step invocation."""

    success: bool
    event: Optional[str] = None
    message: Optional[str] = None
    outputs: Dict[str, str] = field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1


def error_message(exc: BaseException) -> str:
    """Message text of `exc`, falling back to the class name when empty."""
    return str(exc) or exc.__class__.__name__


async def run_step(action: BaseAction, context: Dict[str, Any]) -> StepResult:
    """
    Execute `action` once inside the failure boundary.

    Args:
        action: Action to execute
        context: Invocation context; must hold a 'reporter'

    Returns:
        StepResult carrying either the success event and published outputs,
        or the failure message
    """
    reporter = context['reporter']
    logger.debug(f"Running step: {action.get_description()}")

    try:
        event = await action.execute(context)
    except Exception as e:
        message = error_message(e)
        logger.debug(f"Step failed: {e.__class__.__name__}: {message}", exc_info=True)
        reporter.set_failed(message)
        return StepResult(success=False, message=message)

    logger.debug(f"Step finished with event '{event}'")
    return StepResult(success=True, event=event, outputs=dict(reporter.outputs))
