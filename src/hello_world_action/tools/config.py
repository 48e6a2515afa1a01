"""Action metadata loader

Loads the action.yml metadata file that declares the step's inputs and
outputs, and applies declared input defaults the way the runner does before
starting the step.

FUNCTIONS:
- load_action_metadata(path) -> Dict: Load and check action.yml
- input_defaults(metadata) -> Dict[str, str]: Declared defaults per input
- apply_input_defaults(metadata, environ) -> List[str]: Fill unset INPUT_* vars

EXAMPLE action.yml:
    name: Hello World
    inputs:
      who-to-greet:
        required: true
        default: World
    outputs:
      time:
        description: The time we greeted you
"""

import logging
from pathlib import Path
from typing import Dict, List, Any, MutableMapping

import yaml

from ..core.toolkit import input_env_name
from ..errors import ConfigError

logger = logging.getLogger(__name__)


def load_action_metadata(path: str) -> Dict[str, Any]:
    """Load action metadata from a YAML file."""
    metadata_path = Path(path)
    if not metadata_path.exists():
        raise FileNotFoundError(f"Action metadata file not found: {path}")

    try:
        with open(metadata_path, 'r', encoding='utf-8') as f:
            metadata = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(metadata, dict):
        raise ConfigError(f"Action metadata must be a mapping: {path}")
    if not metadata.get('name'):
        raise ConfigError(f"Action metadata is missing 'name': {path}")

    for section in ('inputs', 'outputs'):
        if metadata.get(section) is not None and not isinstance(metadata[section], dict):
            raise ConfigError(f"'{section}' must be a mapping: {path}")

    logger.debug(f"Loaded action metadata '{metadata['name']}' from {path}")
    return metadata


def input_defaults(metadata: Dict[str, Any]) -> Dict[str, str]:
    """Get the declared default of every input that has one."""
    defaults = {}
    for name, spec in (metadata.get('inputs') or {}).items():
        if isinstance(spec, dict) and spec.get('default') is not None:
            defaults[name] = str(spec['default'])
    return defaults


def apply_input_defaults(metadata: Dict[str, Any], environ: MutableMapping[str, str]) -> List[str]:
    """
    Set INPUT_<NAME> for each declared default not already present.

    Returns:
        Names of the inputs that received their default
    """
    applied = []
    for name, default in input_defaults(metadata).items():
        key = input_env_name(name)
        if key not in environ:
            environ[key] = default
            applied.append(name)
    if applied:
        logger.debug(f"Applied input defaults: {applied}")
    return applied
