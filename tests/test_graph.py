"""
Tests for graph document parsing
"""
import json

import pytest

from behavior_core.core.errors import GraphParseError
from behavior_core.core.graph import (
    Literal,
    Node,
    Reference,
    load_graph,
    parse_graph,
    parse_node,
    parse_parameter,
)


class TestParseParameter:

    def test_scalar_is_literal(self):
        assert parse_parameter(3) == Literal(3)

    def test_marker_is_reference(self):
        assert parse_parameter({'$node': 2, 'socket': 'out'}) == Reference(2, 'out')

    def test_plain_object_is_literal(self):
        value = {'node': 2, 'socket': 'out'}
        assert parse_parameter(value) == Literal(value)

    def test_tagged_values_kept(self):
        ref = Reference(0, 'out')
        assert parse_parameter(ref) is ref

    @pytest.mark.parametrize("value", [
        {'$node': '0', 'socket': 'out'},
        {'$node': True, 'socket': 'out'},
        {'$node': 0},
        {'$node': 0, 'socket': ''},
    ])
    def test_malformed_reference(self, value):
        with pytest.raises(GraphParseError):
            parse_parameter(value)


class TestParseNode:

    def test_defaults(self):
        node = parse_node({'type': 'flow.noop'})
        assert node == Node(type='flow.noop', parameters={}, flow={})
        assert node.category == 'flow'
        assert node.name == 'noop'

    def test_null_parameters_and_flow(self):
        node = parse_node({'type': 'flow.noop', 'parameters': None, 'flow': None})
        assert node.parameters == {}
        assert node.flow == {}

    def test_parameters_tagged(self):
        node = parse_node({
            'type': 'math.add',
            'parameters': {'a': {'$node': 0, 'socket': 'out'}, 'b': 4},
            'flow': {'next': 2},
        })
        assert node.parameters == {'a': Reference(0, 'out'), 'b': Literal(4)}
        assert node.flow == {'next': 2}

    def test_node_object_parameters_tagged(self):
        node = parse_node(Node(
            type='math.add',
            parameters={'a': {'$node': 0, 'socket': 'out'}, 'b': 4, 'c': Literal(1)},
            flow={'next': 2},
        ))
        assert node.parameters == {'a': Reference(0, 'out'), 'b': Literal(4), 'c': Literal(1)}
        assert node.flow == {'next': 2}

    def test_node_object_malformed_reference(self):
        with pytest.raises(GraphParseError):
            parse_node(Node(type='math.double', parameters={'x': {'$node': 0}}))

    def test_missing_type(self):
        with pytest.raises(GraphParseError):
            parse_node({'parameters': {}})


class TestParseGraph:

    def test_document(self):
        graph = parse_graph({
            'name': 'demo',
            'entry': 1,
            'nodes': [{'type': 'flow.noop'}, {'type': 'flow.noop', 'flow': {'next': 0}}],
        })
        assert graph.entry == 1
        assert graph.name == 'demo'
        assert len(graph.nodes) == 2

    def test_bare_list(self):
        graph = parse_graph([{'type': 'flow.noop'}])
        assert graph.entry == 0
        assert graph.nodes == (Node(type='flow.noop'),)

    def test_bad_node_reports_index(self):
        with pytest.raises(GraphParseError, match="Node 1"):
            parse_graph({'nodes': [{'type': 'flow.noop'}, {'type': 'math.add', 'parameters': {'a': {'$node': 'x'}}}]})

    def test_missing_nodes(self):
        with pytest.raises(GraphParseError):
            parse_graph({'entry': 0})

    def test_load_graph(self, tmp_path):
        path = tmp_path / 'graph.json'
        path.write_text(json.dumps({'nodes': [{'type': 'math.const', 'parameters': {'value': 1}}]}))

        graph = load_graph(path)

        assert graph.nodes[0].parameters == {'value': Literal(1)}

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / 'graph.json'
        path.write_text('{"nodes": [')

        with pytest.raises(GraphParseError):
            load_graph(path)
