"""
World Nodes
Read and write host state through the external binding context
"""
from typing import Dict, Any
from ..node_base import NodeBehavior, NodeOutput, BindingContext


class WorldGetNode(NodeBehavior):
    """
    Reads a value from the host

    Parameters:
        path: Path of the value in the host document (e.g. "/nodes/0/translation")

    Outputs:
        out: The value read
    """

    def evaluate(self, parameters: Dict[str, Any], flow: Dict[str, Any], context: BindingContext) -> NodeOutput:
        value = context.get(parameters['path'])
        return NodeOutput(result={'out': value}, next_flow=self.successor(flow))


class WorldSetNode(NodeBehavior):
    """
    Writes a value to the host

    Parameters:
        path: Path of the value in the host document
        value: Value to write
    """

    def evaluate(self, parameters: Dict[str, Any], flow: Dict[str, Any], context: BindingContext) -> NodeOutput:
        context.set(parameters['path'], parameters.get('value'))
        return NodeOutput(next_flow=self.successor(flow))
