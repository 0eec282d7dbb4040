"""
Errors raised by the behavior interpreter

Every error aborts the current run and propagates to the caller.
"""
from typing import Any, Optional


class BehaviorError(Exception):
    """Base class for all behavior graph errors"""
    pass


class UnknownNodeType(BehaviorError):
    """Raised when a node type has no registered behavior"""
    
    def __init__(self, node_type: str, index: Optional[int] = None):
        self.node_type = node_type
        self.index = index
        where = f" at node {index}" if index is not None else ""
        super().__init__(f"Unknown node {node_type}{where} encountered during evaluation of behavior")


class UnresolvedReference(BehaviorError):
    """Raised when a reference names an (index, socket) pair absent from state"""
    
    def __init__(self, node_index: int, socket: str, parameter: Optional[str] = None):
        self.node_index = node_index
        self.socket = socket
        self.parameter = parameter
        target = f"socket '{socket}' of node {node_index}"
        if parameter is not None:
            message = f"Parameter '{parameter}' references {target}, which has not been recorded in this run"
        else:
            message = f"No value recorded for {target}"
        super().__init__(message)


class InvalidGraphStructure(BehaviorError):
    """Raised when the entry index or a successor index is out of bounds"""
    
    def __init__(self, index: Any, node_count: int):
        self.index = index
        self.node_count = node_count
        super().__init__(f"Node index {index!r} is not valid for a graph of {node_count} node(s)")


class StepLimitExceeded(BehaviorError):
    """Raised when a run exceeds its configured step ceiling"""
    
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Run exceeded the step limit of {limit} node evaluation(s)")


class InvalidNodeOutput(BehaviorError):
    """Raised when a node behavior returns something other than a node output"""
    
    def __init__(self, node_type: str, value: Any):
        self.node_type = node_type
        self.value = value
        super().__init__(f"Node {node_type} returned an invalid output: {type(value).__name__}")


class BindingUnavailable(BehaviorError):
    """Raised when a node needs an external binding callback that was not provided"""
    
    def __init__(self, accessor: str):
        self.accessor = accessor
        super().__init__(f"No external '{accessor}' callback is bound to this interpreter")


class GraphParseError(BehaviorError):
    """Raised when a graph document cannot be parsed"""
    pass


class ExternalPathError(BehaviorError):
    """Raised when an external store path does not resolve"""
    
    def __init__(self, path: str, reason: str = "does not exist"):
        self.path = path
        self.reason = reason
        super().__init__(f"External path '{path}' {reason}")
