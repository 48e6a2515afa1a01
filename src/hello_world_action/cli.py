#!/usr/bin/env python3
"""
Hello World Action CLI - Entry point the runner invokes for the step
"""

import asyncio
import argparse
import logging
import os
import sys
from typing import Dict, List, Optional

from hello_world_action.actions.builtin import HelloWorldAction
from hello_world_action.core.context import ActionContext
from hello_world_action.core.runner import run_step
from hello_world_action.core.toolkit import ActionInputs, ActionReporter, input_env_name
from hello_world_action.errors import ConfigError, ContextError
from hello_world_action.tools.config import load_action_metadata, apply_input_defaults


def parse_input_assignment(value: str) -> tuple:
    """argparse type for NAME=VALUE input assignments"""
    name, sep, text = value.partition('=')
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{value}'")
    return name, text


async def run_action(debug: bool = False, metadata_path: str = None, event_path: str = None,
                     inputs: Optional[List[tuple]] = None, environ: Optional[Dict[str, str]] = None) -> int:
    """Run the greeter step once and return the process exit code"""
    environ = dict(os.environ if environ is None else environ)

    # Set up logging
    level = logging.DEBUG if debug or environ.get('RUNNER_DEBUG') == '1' else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    logger = logging.getLogger(__name__)

    if metadata_path:
        try:
            metadata = load_action_metadata(metadata_path)
        except (ConfigError, FileNotFoundError) as e:
            logger.error(f"Cannot load action metadata: {e}")
            return 1
        apply_input_defaults(metadata, environ)
        logger.info(f"Running action: {metadata['name']}")

    for name, value in inputs or []:
        environ[input_env_name(name)] = value

    if event_path:
        environ['GITHUB_EVENT_PATH'] = event_path

    reporter = ActionReporter(environ)
    try:
        github = ActionContext.from_env(environ)
    except ContextError as e:
        reporter.set_failed(e)
        return reporter.exit_code

    context = {
        'inputs': ActionInputs(environ),
        'reporter': reporter,
        'github': github,
    }
    result = await run_step(HelloWorldAction({'description': 'Greet and publish the time'}), context)
    return result.exit_code


async def async_main(argv: Optional[List[str]] = None) -> int:
    """Async main CLI entry point"""
    parser = argparse.ArgumentParser(description="Hello World Action")
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--metadata', help='Path to action.yml used to resolve input defaults')
    parser.add_argument('--event-path', help='Event payload JSON file (default: $GITHUB_EVENT_PATH)')
    parser.add_argument('--input', dest='inputs', action='append', default=[],
                        type=parse_input_assignment, metavar='NAME=VALUE',
                        help='Set an input value (repeatable)')

    args = parser.parse_args(argv)

    return await run_action(
        args.debug,
        args.metadata,
        args.event_path,
        args.inputs
    )


def main():
    """Synchronous entry point for setuptools"""
    sys.exit(asyncio.run(async_main()))


if __name__ == "__main__":
    main()
