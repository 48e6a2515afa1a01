"""
ActionContext - Invocation context of the current workflow run

Reads the event payload and run metadata the runner exposes through GITHUB_*
environment variables. The payload is the parsed JSON document found at
GITHUB_EVENT_PATH; it is treated as read-only.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Mapping, Optional, TextIO

from ..errors import ContextError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'https://api.github.com'
DEFAULT_SERVER_URL = 'https://github.com'
DEFAULT_GRAPHQL_URL = 'https://api.github.com/graphql'


def _int_env(environ: Mapping[str, str], key: str) -> int:
    value = environ.get(key)
    if not value:
        return 0
    try:
        return int(value, 10)
    except ValueError:
        logger.warning(f"{key} is not an integer: {value!r}, using 0")
        return 0


def load_event_payload(event_path: Optional[str], stream: Optional[TextIO] = None) -> Dict[str, Any]:
    """
    Load the webhook payload from `event_path`.

    Returns {} when no path is given. A path that does not exist is reported
    on `stream` and also yields {}.
    """
    if not event_path:
        return {}

    path = Path(event_path)
    if not path.exists():
        stream = stream if stream is not None else sys.stdout
        stream.write(f"GITHUB_EVENT_PATH {event_path} does not exist\n")
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise ContextError(f"Invalid JSON in event payload {event_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ContextError(f"Cannot read event payload {event_path}: {e}") from e

    logger.debug(f"Loaded event payload from {event_path}")
    return payload


@dataclass
class ActionContext:
    """Event payload and run metadata for one step invocation."""

    payload: Dict[str, Any] = field(default_factory=dict)
    event_name: Optional[str] = None
    sha: Optional[str] = None
    ref: Optional[str] = None
    workflow: Optional[str] = None
    action: Optional[str] = None
    actor: Optional[str] = None
    job: Optional[str] = None
    run_number: int = 0
    run_id: int = 0
    repository: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    server_url: str = DEFAULT_SERVER_URL
    graphql_url: str = DEFAULT_GRAPHQL_URL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, stream: Optional[TextIO] = None) -> 'ActionContext':
        """Build the context from runner environment variables."""
        environ = os.environ if environ is None else environ
        return cls(
            payload=load_event_payload(environ.get('GITHUB_EVENT_PATH'), stream),
            event_name=environ.get('GITHUB_EVENT_NAME'),
            sha=environ.get('GITHUB_SHA'),
            ref=environ.get('GITHUB_REF'),
            workflow=environ.get('GITHUB_WORKFLOW'),
            action=environ.get('GITHUB_ACTION'),
            actor=environ.get('GITHUB_ACTOR'),
            job=environ.get('GITHUB_JOB'),
            run_number=_int_env(environ, 'GITHUB_RUN_NUMBER'),
            run_id=_int_env(environ, 'GITHUB_RUN_ID'),
            repository=environ.get('GITHUB_REPOSITORY'),
            api_url=environ.get('GITHUB_API_URL') or DEFAULT_API_URL,
            server_url=environ.get('GITHUB_SERVER_URL') or DEFAULT_SERVER_URL,
            graphql_url=environ.get('GITHUB_GRAPHQL_URL') or DEFAULT_GRAPHQL_URL,
        )

    @property
    def repo(self) -> Dict[str, str]:
        """Owner and name of the repository the run belongs to."""
        if self.repository:
            owner, _, repo = self.repository.partition('/')
            return {'owner': owner, 'repo': repo}

        repository = self.payload.get('repository')
        if repository:
            return {'owner': repository['owner']['login'], 'repo': repository['name']}

        raise ContextError("context.repo requires a GITHUB_REPOSITORY environment variable like 'owner/repo'")

    @property
    def issue(self) -> Dict[str, Any]:
        """Repository plus the issue or pull request number from the payload."""
        payload = self.payload
        number = (payload.get('issue') or payload.get('pull_request') or payload).get('number')
        return {**self.repo, 'number': number}
