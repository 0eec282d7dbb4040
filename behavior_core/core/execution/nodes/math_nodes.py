"""
Math Nodes
Arithmetic on resolved parameter values
"""
from typing import Dict, Any
from ..node_base import NodeBehavior, NodeOutput, BindingContext


class ConstantNode(NodeBehavior):
    """
    Emits a constant value

    Parameters:
        value: Any value

    Outputs:
        out: The value
    """

    def evaluate(self, parameters: Dict[str, Any], flow: Dict[str, Any], context: BindingContext) -> NodeOutput:
        return NodeOutput(result={'out': parameters.get('value')}, next_flow=self.successor(flow))


class AddNode(NodeBehavior):
    """out = a + b"""

    def evaluate(self, parameters, flow, context):
        return NodeOutput(result={'out': parameters['a'] + parameters['b']}, next_flow=self.successor(flow))


class SubtractNode(NodeBehavior):
    """out = a - b"""

    def evaluate(self, parameters, flow, context):
        return NodeOutput(result={'out': parameters['a'] - parameters['b']}, next_flow=self.successor(flow))


class MultiplyNode(NodeBehavior):
    """out = a * b"""

    def evaluate(self, parameters, flow, context):
        return NodeOutput(result={'out': parameters['a'] * parameters['b']}, next_flow=self.successor(flow))


class DoubleNode(NodeBehavior):
    """out = 2 * x"""

    def evaluate(self, parameters, flow, context):
        return NodeOutput(result={'out': parameters['x'] * 2}, next_flow=self.successor(flow))
