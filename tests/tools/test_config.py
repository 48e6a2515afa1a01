"""
Tests for action metadata loading
"""
import pytest
from pathlib import Path

from hello_world_action.errors import ConfigError
from hello_world_action.tools.config import load_action_metadata, input_defaults, apply_input_defaults

REPO_ACTION_YML = Path(__file__).resolve().parents[2] / 'action.yml'


@pytest.fixture
def metadata_file(tmp_path):
    def _write(text):
        path = tmp_path / 'action.yml'
        path.write_text(text)
        return str(path)
    return _write


def test_repository_action_metadata():
    metadata = load_action_metadata(str(REPO_ACTION_YML))

    assert metadata['name'] == 'Hello World'
    assert metadata['inputs']['who-to-greet']['required'] is True
    assert metadata['outputs']['time']['value'] == '${{ steps.greet.outputs.time }}'
    greet_step = [step for step in metadata['runs']['steps'] if step.get('id') == 'greet']
    assert greet_step and greet_step[0]['run'] == 'hello-world-action'
    assert input_defaults(metadata) == {'who-to-greet': 'World'}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_action_metadata(str(tmp_path / 'action.yml'))


def test_invalid_yaml(metadata_file):
    with pytest.raises(ConfigError, match='Invalid YAML'):
        load_action_metadata(metadata_file('name: [unclosed'))


def test_not_a_mapping(metadata_file):
    with pytest.raises(ConfigError, match='must be a mapping'):
        load_action_metadata(metadata_file('- just\n- a list\n'))


def test_missing_name(metadata_file):
    with pytest.raises(ConfigError, match="missing 'name'"):
        load_action_metadata(metadata_file('description: nameless\n'))


def test_inputs_must_be_mapping(metadata_file):
    with pytest.raises(ConfigError, match="'inputs' must be a mapping"):
        load_action_metadata(metadata_file('name: x\ninputs: [a, b]\n'))


def test_input_defaults_skip_inputs_without_default(metadata_file):
    metadata = load_action_metadata(metadata_file(
        'name: x\n'
        'inputs:\n'
        '  greeting:\n'
        '    default: Hi\n'
        '  count:\n'
        '    default: 3\n'
        '  who-to-greet:\n'
        '    required: true\n'
    ))

    assert input_defaults(metadata) == {'greeting': 'Hi', 'count': '3'}


def test_apply_input_defaults_keeps_existing_values():
    metadata = {'name': 'x', 'inputs': {'who-to-greet': {'default': 'World'}, 'greeting': {'default': 'Hi'}}}
    environ = {'INPUT_WHO-TO-GREET': 'Mona'}

    applied = apply_input_defaults(metadata, environ)

    assert applied == ['greeting']
    assert environ == {'INPUT_WHO-TO-GREET': 'Mona', 'INPUT_GREETING': 'Hi'}
