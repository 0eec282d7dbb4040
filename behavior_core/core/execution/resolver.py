"""
Parameter resolution for the behavior interpreter
"""
import copy
from typing import Dict, Any, Mapping

from ..graph import ParameterValue, Reference
from .state import ExecutionState, NODE_ENTITY
from ..errors import UnresolvedReference


def resolve_parameters(parameters: Mapping[str, ParameterValue], state: ExecutionState) -> Dict[str, Any]:
    """
    Produce concrete parameter values for a node

    References are replaced by the value the referenced node recorded earlier
    in the current run; literals are passed as copies, so node behaviors
    never need to tell the two apart.

    Args:
        parameters: Tagged parameter values of a node
        state: Execution state of the current run

    Returns:
        Dictionary of parameter name -> value

    Raises:
        UnresolvedReference: If a referenced socket has not been recorded
    """
    resolved: Dict[str, Any] = {}
    for name, param in parameters.items():
        if isinstance(param, Reference):
            if not state.has(NODE_ENTITY, param.node, param.socket):
                raise UnresolvedReference(param.node, param.socket, parameter=name)
            resolved[name] = state.read(NODE_ENTITY, param.node, param.socket)
        else:
            # Copied so a behavior cannot mutate the caller's graph
            resolved[name] = copy.deepcopy(param.value)
    return resolved
