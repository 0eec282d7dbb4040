"""
Logic Nodes
"""
import operator
from typing import Dict, Any
from ..node_base import NodeBehavior, NodeOutput, BindingContext

COMPARISONS = {
    'eq': operator.eq,
    'ne': operator.ne,
    'lt': operator.lt,
    'le': operator.le,
    'gt': operator.gt,
    'ge': operator.ge,
}


class CompareNode(NodeBehavior):
    """
    Compares two values

    Parameters:
        a: Left operand
        b: Right operand
        op: One of eq, ne, lt, le, gt, ge (default: eq)

    Outputs:
        out: Comparison result (bool)
    """

    def evaluate(self, parameters: Dict[str, Any], flow: Dict[str, Any], context: BindingContext) -> NodeOutput:
        op = parameters.get('op', 'eq')
        if op not in COMPARISONS:
            raise ValueError(f"Unknown comparison '{op}', expected one of {sorted(COMPARISONS)}")
        result = COMPARISONS[op](parameters['a'], parameters['b'])
        return NodeOutput(result={'out': bool(result)}, next_flow=self.successor(flow))
