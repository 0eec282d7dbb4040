"""
Base node behavior for the behavior interpreter
"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Callable, Mapping
from dataclasses import dataclass, field

from ..types import NodeIndex, SocketName, ExternalPath, SetCallback, GetCallback
from ..errors import BindingUnavailable


@dataclass(frozen=True)
class BindingContext:
    """
    External binding context passed to every node invocation

    Holds the optional accessors that let a node read and write state outside
    the graph (e.g. a host document). It lives as long as the interpreter and
    is shared by all of its runs.
    """
    set_callback: Optional[SetCallback] = None
    get_callback: Optional[GetCallback] = None

    def get(self, path: ExternalPath) -> Any:
        """Read a value from the host through the get callback"""
        if self.get_callback is None:
            raise BindingUnavailable("get")
        return self.get_callback(path)

    def set(self, path: ExternalPath, value: Any) -> None:
        """Write a value to the host through the set callback"""
        if self.set_callback is None:
            raise BindingUnavailable("set")
        self.set_callback(path, value)


@dataclass
class NodeOutput:
    """
    Output of a single node evaluation

    result: values keyed by socket name, recorded into the execution state
    next_flow: index of the next node to evaluate, None halts the run
    """
    result: Dict[SocketName, Any] = field(default_factory=dict)
    next_flow: Optional[NodeIndex] = None

    @classmethod
    def coerce(cls, value: Any) -> Optional["NodeOutput"]:
        """
        Build a NodeOutput from a behavior's return value

        Accepts a NodeOutput or a mapping with a 'result' mapping and an
        optional 'nextFlow' (or 'next_flow') index.

        Returns:
            NodeOutput, or None if the value has neither shape
        """
        if isinstance(value, NodeOutput):
            return value if isinstance(value.result, Mapping) else None
        if isinstance(value, Mapping) and isinstance(value.get('result'), Mapping):
            next_flow = value.get('nextFlow')
            if next_flow is None:
                next_flow = value.get('next_flow')
            return cls(result=dict(value['result']), next_flow=next_flow)
        return None


class NodeBehavior(ABC):
    """
    Base class for all node behaviors

    A behavior is looked up by its "category.name" type, receives its
    parameters with references already resolved, and decides its successor
    from its own flow data. The interpreter never inspects flow.
    """

    @abstractmethod
    def evaluate(
        self,
        parameters: Dict[str, Any],
        flow: Dict[str, Any],
        context: BindingContext
    ) -> NodeOutput:
        """
        Evaluate the node

        Args:
            parameters: Resolved parameter values
            flow: Node-specific control data, passed through uninterpreted
            context: External binding context

        Returns:
            NodeOutput with socket values and the next node index
        """
        pass

    @staticmethod
    def successor(flow: Dict[str, Any], key: str = 'next') -> Optional[NodeIndex]:
        """Successor index stored under key in flow, None if absent"""
        return flow.get(key)


class FunctionNode(NodeBehavior):
    """Adapts a plain function `(parameters, flow, context) -> output` to NodeBehavior"""

    def __init__(self, func: Callable[[Dict[str, Any], Dict[str, Any], BindingContext], Any]):
        self.func = func
        self.__doc__ = func.__doc__

    def evaluate(self, parameters, flow, context):
        return self.func(parameters, flow, context)

    def __repr__(self) -> str:
        return f"FunctionNode({getattr(self.func, '__name__', self.func)!r})"
