"""
Flow Nodes
Nodes whose only job is choosing the successor
"""
from typing import Dict, Any
from ..node_base import NodeBehavior, NodeOutput, BindingContext


class BranchNode(NodeBehavior):
    """
    Conditional branch

    Parameters:
        condition: Truthy or falsy value

    Flow:
        true: Successor when condition is truthy
        false: Successor when condition is falsy

    A missing target halts the run.
    """

    def evaluate(self, parameters: Dict[str, Any], flow: Dict[str, Any], context: BindingContext) -> NodeOutput:
        key = 'true' if parameters.get('condition') else 'false'
        return NodeOutput(result={}, next_flow=self.successor(flow, key))


class NoopNode(NodeBehavior):
    """Does nothing and continues with flow.next"""

    def evaluate(self, parameters, flow, context):
        return NodeOutput(next_flow=self.successor(flow))
