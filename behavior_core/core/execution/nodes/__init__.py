"""
Built-in node library for the behavior interpreter
"""
from .math_nodes import ConstantNode, AddNode, SubtractNode, MultiplyNode, DoubleNode
from .logic import CompareNode
from .flow import BranchNode, NoopNode
from .world import WorldGetNode, WorldSetNode

# Node type -> behavior instance, registered by node_registry on import
BUILTIN_NODES = {
    'math.const': ConstantNode(),
    'math.add': AddNode(),
    'math.sub': SubtractNode(),
    'math.mul': MultiplyNode(),
    'math.double': DoubleNode(),
    'logic.compare': CompareNode(),
    'flow.branch': BranchNode(),
    'flow.noop': NoopNode(),
    'world.get': WorldGetNode(),
    'world.set': WorldSetNode(),
}

__all__ = [
    'ConstantNode',
    'AddNode',
    'SubtractNode',
    'MultiplyNode',
    'DoubleNode',
    'CompareNode',
    'BranchNode',
    'NoopNode',
    'WorldGetNode',
    'WorldSetNode',
    'BUILTIN_NODES',
]
