"""
Toolkit - Host runner collaborators for step actions

Provides the two collaborators a step talks to: ActionInputs reads named inputs
the runner exposes as INPUT_<NAME> environment variables, and ActionReporter
writes log lines and workflow commands (::set-output, ::error, ...) to the
runner's stdout or to the file commands the runner provides via GITHUB_OUTPUT.

Both take an explicit environment mapping and output stream so tests can run
them without touching the real process environment.

KEY FUNCTIONS:
- ActionInputs.get_input(name, required, trim_whitespace) - Read a named input
- ActionReporter.info(message) - Write a plain log line
- ActionReporter.set_output(name, value) - Publish a named output
- ActionReporter.set_failed(message) - Mark the step as failed
- format_command(command, properties, message) - Encode a workflow command
"""

import json
import logging
import os
import sys
import uuid
from typing import Dict, Any, List, Mapping, Optional, TextIO

from ..errors import InputError, CommandError

logger = logging.getLogger(__name__)

COMMAND_PREFIX = '::'

TRUE_VALUES = ('true', 'True', 'TRUE')
FALSE_VALUES = ('false', 'False', 'FALSE')


def to_command_value(value: Any) -> str:
    """Convert an arbitrary value to the string form used in commands."""
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return json.dumps(value)


def escape_data(value: Any) -> str:
    return (to_command_value(value)
            .replace('%', '%25')
            .replace('\r', '%0D')
            .replace('\n', '%0A'))


def escape_property(value: Any) -> str:
    return (escape_data(value)
            .replace(':', '%3A')
            .replace(',', '%2C'))


def format_command(command: str, properties: Optional[Dict[str, Any]] = None, message: Any = '') -> str:
    """
    Encode a workflow command line.

    Example: format_command('set-output', {'name': 'time'}, '12:00')
    -> '::set-output name=time::12:00'
    """
    line = COMMAND_PREFIX + (command or 'missing.command')
    if properties:
        props = [f"{key}={escape_property(val)}" for key, val in properties.items() if val]
        if props:
            line += ' ' + ','.join(props)
    return f"{line}{COMMAND_PREFIX}{escape_data(message)}"


def input_env_name(name: str) -> str:
    """Environment variable the runner uses for input `name` (hyphens kept)."""
    return 'INPUT_' + name.replace(' ', '_').upper()


class ActionInputs:
    """Reads the named inputs supplied by the runner."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def get_input(self, name: str, required: bool = False, trim_whitespace: bool = True) -> str:
        """
        Get the value of an input.

        Missing inputs read as an empty string unless `required` is set, in
        which case InputError is raised.
        """
        value = self.environ.get(input_env_name(name)) or ''
        if required and not value:
            raise InputError(f"Input required and not supplied: {name}")
        if not trim_whitespace:
            return value
        return value.strip()

    def get_boolean_input(self, name: str, required: bool = False) -> bool:
        """Get an input parsed as a YAML 1.2 core schema boolean."""
        value = self.get_input(name, required=required)
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        raise InputError(
            f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
            f"Support boolean input list: `true | True | TRUE | false | False | FALSE`"
        )

    def get_multiline_input(self, name: str, required: bool = False, trim_whitespace: bool = True) -> List[str]:
        """Get an input split into its non-empty lines."""
        lines = [line for line in self.get_input(name, required=required, trim_whitespace=trim_whitespace).split('\n')
                 if line != '']
        if not trim_whitespace:
            return lines
        return [line.strip() for line in lines]


class ActionReporter:
    """
    Writes log lines and workflow commands for the runner.

    Published outputs are kept in `outputs` and a failure sets `exit_code`
    to 1, so the caller can map the step outcome to a process exit status.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, stream: Optional[TextIO] = None):
        self.environ = os.environ if environ is None else environ
        self.stream = stream
        self.outputs: Dict[str, str] = {}
        self.exit_code = 0

    def _write(self, text: str) -> None:
        # Resolved late so pytest's capsys sees the writes
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def issue_command(self, command: str, properties: Optional[Dict[str, Any]] = None, message: Any = '') -> None:
        self._write(format_command(command, properties, message) + '\n')

    def info(self, message: str) -> None:
        """Write a plain log line."""
        self._write(message + '\n')

    def is_debug(self) -> bool:
        return self.environ.get('RUNNER_DEBUG') == '1'

    def debug(self, message: str) -> None:
        self.issue_command('debug', None, message)

    def warning(self, message: Any) -> None:
        self.issue_command('warning', None, str(message) if isinstance(message, Exception) else message)

    def error(self, message: Any) -> None:
        self.issue_command('error', None, str(message) if isinstance(message, Exception) else message)

    def set_output(self, name: str, value: Any) -> None:
        """
        Publish a named output for later steps.

        Appends to the GITHUB_OUTPUT file when the runner provides one,
        otherwise falls back to the legacy ::set-output command.
        """
        text = to_command_value(value)
        file_path = self.environ.get('GITHUB_OUTPUT') or ''
        if file_path:
            self._issue_file_command(file_path, self._key_value_message(name, text))
        else:
            self._write('\n')
            self.issue_command('set-output', {'name': name}, text)
        self.outputs[name] = text
        logger.debug(f"Set output '{name}'")

    def set_failed(self, message: Any) -> None:
        """Mark the step as failed with `message` as the reason."""
        self.exit_code = 1
        self.error(message)

    def _issue_file_command(self, file_path: str, message: str) -> None:
        if not os.path.exists(file_path):
            raise CommandError(f"Missing file at path: {file_path}")
        with open(file_path, 'a', encoding='utf-8') as f:
            f.write(message + '\n')

    @staticmethod
    def _key_value_message(key: str, value: str) -> str:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in key:
            raise CommandError(f"Unexpected input: name should not contain the delimiter \"{delimiter}\"")
        if delimiter in value:
            raise CommandError(f"Unexpected input: value should not contain the delimiter \"{delimiter}\"")
        return f"{key}<<{delimiter}\n{value}\n{delimiter}"
