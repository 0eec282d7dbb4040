"""
Tests for the node registry
"""
import pytest

from behavior_core.core.errors import UnknownNodeType
from behavior_core.core.execution import (
    FunctionNode,
    NodeBehavior,
    NodeOutput,
    NodeRegistry,
    NODE_REGISTRY,
    get_node_behavior,
    split_node_type,
)


class EchoNode(NodeBehavior):
    def evaluate(self, parameters, flow, context):
        return NodeOutput(result=dict(parameters))


def test_split_node_type():
    assert split_node_type('math.add') == ('math', 'add')
    assert split_node_type('world.pointer.get') == ('world', 'pointer.get')


@pytest.mark.parametrize("node_type", ['add', '.add', 'math.', ''])
def test_split_node_type_rejects_malformed(node_type):
    with pytest.raises(UnknownNodeType):
        split_node_type(node_type)


def test_register_and_lookup():
    registry = NodeRegistry()
    behavior = EchoNode()
    registry.register('test.echo', behavior)

    assert registry.lookup('test', 'echo') is behavior
    assert 'test.echo' in registry
    assert len(registry) == 1


def test_unregister():
    registry = NodeRegistry()
    behavior = registry.register('test.echo', EchoNode())

    assert registry.unregister('test.echo') is behavior
    assert 'test.echo' not in registry
    assert registry.unregister('test.echo') is None


def test_lookup_miss_raises():
    registry = NodeRegistry()
    with pytest.raises(UnknownNodeType) as exc_info:
        registry.lookup('test', 'echo')
    assert exc_info.value.node_type == 'test.echo'


def test_function_wrapped():
    registry = NodeRegistry()

    def echo(parameters, flow, context):
        """Echo parameters"""
        return NodeOutput(result=parameters)

    behavior = registry.register('test.echo', echo)

    assert isinstance(behavior, FunctionNode)
    assert behavior.evaluate({'a': 1}, {}, None).result == {'a': 1}
    assert behavior.__doc__ == "Echo parameters"


def test_duplicate_rejected_unless_replace():
    registry = NodeRegistry()
    registry.register('test.echo', EchoNode())

    with pytest.raises(ValueError):
        registry.register('test.echo', EchoNode())

    replacement = EchoNode()
    registry.register('test.echo', replacement, replace=True)
    assert registry.get('test.echo') is replacement


def test_register_rejects_non_callable():
    with pytest.raises(TypeError):
        NodeRegistry().register('test.bad', 42)


def test_decorator_registers_functions_and_classes():
    registry = NodeRegistry()

    @registry.node('test.fn')
    def fn(parameters, flow, context):
        return NodeOutput()

    @registry.node('test.cls')
    class Cls(EchoNode):
        pass

    assert fn.__name__ == 'fn'
    assert isinstance(registry.get('test.cls'), Cls)
    assert registry.node_types() == ['test.cls', 'test.fn']


def test_node_types_by_category():
    assert NODE_REGISTRY.node_types('flow') == ['flow.branch', 'flow.noop']


def test_builtin_nodes_registered():
    for node_type in ['math.const', 'math.add', 'math.double', 'logic.compare', 'world.get', 'world.set']:
        assert get_node_behavior(node_type) is not None
    assert get_node_behavior('math.unknown') is None
