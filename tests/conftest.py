"""
Generic fixtures for step tests.

These fixtures provide common test infrastructure:
- A clean runner environment with a GITHUB_OUTPUT file
- Event payload files
- A fixed clock
"""

import json
import pytest
from datetime import datetime, timedelta, timezone

from hello_world_action.core.context import ActionContext
from hello_world_action.core.toolkit import ActionInputs, ActionReporter


@pytest.fixture
def output_file(tmp_path):
    """Empty GITHUB_OUTPUT file."""
    path = tmp_path / 'github_output'
    path.write_text('')
    return path


@pytest.fixture
def runner_env(output_file):
    """Runner environment with a GITHUB_OUTPUT file and no inputs."""
    return {
        'GITHUB_OUTPUT': str(output_file),
        'GITHUB_EVENT_NAME': 'push',
        'GITHUB_REPOSITORY': 'octo-org/hello-world',
    }


@pytest.fixture
def event_file(tmp_path):
    """Write a payload to a temporary event file and return its path."""
    def _write(payload):
        path = tmp_path / 'event.json'
        path.write_text(json.dumps(payload), encoding='utf-8')
        return str(path)
    return _write


@pytest.fixture
def fixed_clock():
    """Clock pinned to 14:03:07 at UTC+02:00."""
    moment = datetime(2024, 5, 17, 14, 3, 7, tzinfo=timezone(timedelta(hours=2), 'CEST'))
    return lambda: moment


@pytest.fixture
def step_context(runner_env, fixed_clock):
    """Build a step context dict from an environment and payload."""
    def _build(env=None, payload=None):
        environ = dict(runner_env, **(env or {}))
        return {
            'inputs': ActionInputs(environ),
            'reporter': ActionReporter(environ),
            'github': ActionContext(payload={} if payload is None else payload),
            'clock': fixed_clock,
        }
    return _build
