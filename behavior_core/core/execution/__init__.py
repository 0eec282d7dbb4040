"""
Execution Engine for Behavior Core
Interprets behavior graphs node by node, following each node's successor
"""
from .interpreter import Interpreter
from .node_base import NodeBehavior, FunctionNode, NodeOutput, BindingContext
from .node_registry import NodeRegistry, NODE_REGISTRY, register_node, get_node_behavior, split_node_type
from .resolver import resolve_parameters
from .state import ExecutionState, NODE_ENTITY

__all__ = [
    'Interpreter',
    'NodeBehavior',
    'FunctionNode',
    'NodeOutput',
    'BindingContext',
    'NodeRegistry',
    'NODE_REGISTRY',
    'register_node',
    'get_node_behavior',
    'split_node_type',
    'resolve_parameters',
    'ExecutionState',
    'NODE_ENTITY',
]
