"""
HelloWorldAction - Greet someone and publish the current time

Reads the `who-to-greet` input, logs a greeting, publishes the current
time-of-day as the `time` output, and logs the JSON payload of the event that
triggered the workflow.

Config:
    input: Name of the input to read (default: "who-to-greet")
    output: Name of the output to publish (default: "time")
    success: Event to return on success (default: "success")

Context:
    inputs: ActionInputs reading the runner inputs (required)
    reporter: ActionReporter writing logs and outputs (required)
    github: ActionContext with the event payload (required)
    clock: Callable returning an aware datetime (optional)
"""
import json
from datetime import datetime
from typing import Dict, Any

from ..base import BaseAction

DEFAULT_INPUT = 'who-to-greet'
DEFAULT_OUTPUT = 'time'


def local_now() -> datetime:
    return datetime.now().astimezone()


def format_time_string(moment: datetime) -> str:
    """
    Render the time portion of `moment` like JavaScript's Date.toTimeString().

    Example: 14:03:07 GMT+0200 (CEST)
    """
    offset = moment.strftime('%z') or '+0000'
    zone = moment.tzname() or 'UTC'
    return f"{moment:%H:%M:%S} GMT{offset} ({zone})"


def format_payload(payload: Dict[str, Any]) -> str:
    """Serialize the event payload as 2-space indented JSON."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


class HelloWorldAction(BaseAction):
    """
    Greeter step.

    Errors are not handled here; the caller's failure boundary turns them
    into a failed step.
    """

    async def execute(self, context: Dict[str, Any]) -> str:
        inputs = self.get_collaborator(context, 'inputs')
        reporter = self.get_collaborator(context, 'reporter')
        github = self.get_collaborator(context, 'github')
        clock = context.get('clock') or local_now

        name_to_greet = inputs.get_input(self.get_config_value('input', DEFAULT_INPUT))
        reporter.info(f"Hello {name_to_greet}!")

        time = format_time_string(clock())
        reporter.set_output(self.get_config_value('output', DEFAULT_OUTPUT), time)

        # JSON webhook payload of the event that triggered the workflow
        payload = format_payload(github.payload)
        reporter.info(f"The event payload: {payload}")

        self.logger.debug(f"Greeted {name_to_greet!r} at {time}")
        return self.get_config_value('success', 'success')
