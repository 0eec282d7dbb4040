"""
Shared fixtures for Behavior Core tests
"""
import os
import sys

import pytest

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from behavior_core.core.execution import Interpreter, NodeRegistry


def _const(parameters, flow, context):
    return {'result': {'out': parameters['value']}, 'nextFlow': flow.get('next')}


def _double(parameters, flow, context):
    return {'result': {'out': parameters['x'] * 2}}


@pytest.fixture
def registry():
    """Registry holding only math.const and math.double as plain functions"""
    reg = NodeRegistry()
    reg.register('math.const', _const)
    reg.register('math.double', _double)
    return reg


@pytest.fixture
def interpreter(registry):
    """Unbounded interpreter over the minimal registry"""
    return Interpreter(registry=registry, max_steps=0)


@pytest.fixture
def const_double_graph():
    """const(5) -> double(x = node 0 'out'), halting after node 1"""
    return [
        {'type': 'math.const', 'parameters': {'value': 5}, 'flow': {'next': 1}},
        {'type': 'math.double', 'parameters': {'x': {'$node': 0, 'socket': 'out'}}, 'flow': {}},
    ]
