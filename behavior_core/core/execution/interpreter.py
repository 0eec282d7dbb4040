"""
Behavior graph interpreter
Walks a behavior graph node by node, following each node's declared successor
"""
from typing import Any, Mapping, Optional, Sequence, Union
import copy
import time

from ..graph import Node, parse_nodes
from ..types import NodeIndex, SetCallback, GetCallback
from ..config import Config
from ..errors import (
    InvalidGraphStructure,
    InvalidNodeOutput,
    StepLimitExceeded,
    UnknownNodeType,
    UnresolvedReference,
)
from .node_base import BindingContext, NodeOutput
from .node_registry import NodeRegistry, NODE_REGISTRY, split_node_type
from .resolver import resolve_parameters
from .state import ExecutionState, NODE_ENTITY
from ...utils.logger import get_logger

logger = get_logger(__name__)


class Interpreter:
    """
    Executes behavior graphs

    A run starts at an entry index, evaluates the current node, records its
    outputs and moves to the index the node names as its successor. The run
    halts at the first node that names no successor.

    Execution state is cleared at the start of every run. The binding
    context is shared by all runs of the instance.

    An instance supports one run at a time; use separate instances to run
    graphs in parallel. There is no cycle detection: a cyclic graph runs
    until a node omits its successor, unless max_steps is set.
    """

    def __init__(
        self,
        set_external: Optional[SetCallback] = None,
        get_external: Optional[GetCallback] = None,
        registry: Optional[NodeRegistry] = None,
        max_steps: Optional[int] = None
    ):
        """
        Initialize interpreter

        Args:
            set_external: Optional callback writing a value to the host by path
            get_external: Optional callback reading a value from the host by path
            registry: Node registry (defaults to the built-in registry)
            max_steps: Optional ceiling on node evaluations per run
                (None = Config.MAX_STEPS, 0 = unbounded)
        """
        if max_steps is None:
            max_steps = Config.MAX_STEPS
        if max_steps < 0:
            raise ValueError(f"max_steps must be 0 (unbounded) or a positive integer, got {max_steps}")
        self.context = BindingContext(set_callback=set_external, get_callback=get_external)
        self.registry = registry if registry is not None else NODE_REGISTRY
        self.max_steps = max_steps or None
        self._state = ExecutionState()

    @property
    def state(self) -> ExecutionState:
        """Execution state of the current (or most recent) run"""
        return self._state

    def run(self, entry_index: NodeIndex, nodes: Sequence[Union[Node, Mapping[str, Any]]]) -> None:
        """
        Run a behavior graph

        Args:
            entry_index: Index of the first node to evaluate
            nodes: Ordered node records (Node objects or raw node mappings)

        Raises:
            BehaviorError: If the graph is malformed; the run is aborted
        """
        # Ensure no state can leak between individual runs
        self._state.reset()

        nodes = parse_nodes(nodes)
        start_time = time.time()
        steps = 0

        logger.info(f"Running behavior graph from node {entry_index} ({len(nodes)} nodes)")

        self._check_index(entry_index, len(nodes))
        current: Optional[NodeIndex] = entry_index
        while current is not None:
            if self.max_steps is not None and steps >= self.max_steps:
                logger.error(f"Behavior graph exceeded {self.max_steps} steps at node {current}")
                raise StepLimitExceeded(self.max_steps)
            self._check_index(current, len(nodes))
            current = self._eval_node(current, nodes[current])
            steps += 1

        logger.info(f"Behavior graph halted after {steps} steps in {time.time() - start_time:.3f}s")

    def _eval_node(self, index: NodeIndex, node: Node) -> Optional[NodeIndex]:
        """
        Evaluate a single node and record its outputs

        Returns:
            Index of the next node, or None to halt
        """
        try:
            category, name = split_node_type(node.type)
            behavior = self.registry.lookup(category, name)
        except UnknownNodeType:
            logger.error(f"Unknown node type {node.type} at node {index}")
            raise UnknownNodeType(node.type, index) from None

        try:
            parameters = resolve_parameters(node.parameters, self._state)
        except UnresolvedReference as e:
            logger.error(f"Node {index} ({node.type}): {e}")
            raise

        try:
            raw_output = behavior.evaluate(parameters, copy.deepcopy(dict(node.flow)), self.context)
        except Exception as e:
            logger.error(f"Node {index} ({node.type}) failed: {e}")
            raise

        output = NodeOutput.coerce(raw_output)
        if output is None:
            logger.error(f"Node {index} ({node.type}) returned {type(raw_output).__name__}")
            raise InvalidNodeOutput(node.type, raw_output)

        for socket, value in output.result.items():
            self._state.record(NODE_ENTITY, index, socket, value)

        logger.debug(f"Node {index} ({node.type}) -> {output.next_flow}")
        return output.next_flow

    @staticmethod
    def _check_index(index: Any, node_count: int) -> None:
        """Reject indices that do not address a node of the graph"""
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < node_count:
            raise InvalidGraphStructure(index, node_count)
