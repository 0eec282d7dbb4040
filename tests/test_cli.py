"""
Tests for the command line interface
"""
import json

import pytest
from click.testing import CliRunner

from behavior_core.cli.main import cli

GRAPH = {
    'name': 'score doubler',
    'nodes': [
        {'type': 'world.get', 'parameters': {'path': '/score'}, 'flow': {'next': 1}},
        {'type': 'math.double', 'parameters': {'x': {'$node': 0, 'socket': 'out'}}, 'flow': {'next': 2}},
        {'type': 'world.set', 'parameters': {'path': '/score', 'value': {'$node': 1, 'socket': 'out'}}},
    ],
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / 'graph.json'
    path.write_text(json.dumps(GRAPH))
    return path


@pytest.fixture
def world_file(tmp_path):
    path = tmp_path / 'world.json'
    path.write_text(json.dumps({'score': 21}))
    return path


def test_run_prints_world(runner, graph_file, world_file):
    result = runner.invoke(cli, ['run', str(graph_file), '--world', str(world_file)])

    assert result.exit_code == 0, result.output
    assert '42' in result.output
    # Without --save the file is untouched
    assert json.loads(world_file.read_text()) == {'score': 21}


def test_run_save(runner, graph_file, world_file):
    result = runner.invoke(cli, ['run', str(graph_file), '--world', str(world_file), '--save'])

    assert result.exit_code == 0, result.output
    assert json.loads(world_file.read_text()) == {'score': 42}


def test_run_save_requires_world(runner, graph_file):
    result = runner.invoke(cli, ['run', str(graph_file), '--save'])

    assert result.exit_code == 2


def test_run_reports_behavior_error(runner, graph_file):
    # No world document: /score does not exist
    result = runner.invoke(cli, ['run', str(graph_file)])

    assert result.exit_code == 1
    assert 'ExternalPathError' in result.output


def test_run_entry_override(runner, tmp_path):
    path = tmp_path / 'graph.json'
    path.write_text(json.dumps({'nodes': [{'type': 'math.unknown'}, {'type': 'flow.noop'}]}))

    assert runner.invoke(cli, ['run', str(path)]).exit_code == 1
    assert runner.invoke(cli, ['run', str(path), '--entry', '1']).exit_code == 0


def test_run_step_limit(runner, tmp_path):
    path = tmp_path / 'graph.json'
    path.write_text(json.dumps({'nodes': [{'type': 'flow.noop', 'flow': {'next': 0}}]}))

    result = runner.invoke(cli, ['run', str(path), '--max-steps', '5'])

    assert result.exit_code == 1
    assert 'StepLimitExceeded' in result.output


def test_nodes_lists_types(runner):
    result = runner.invoke(cli, ['nodes', '--category', 'world'])

    assert result.exit_code == 0
    assert 'world.get' in result.output
    assert 'world.set' in result.output
    assert 'math.add' not in result.output
