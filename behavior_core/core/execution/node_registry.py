"""
Node registry for the behavior interpreter
Maps "category.name" node types to node behaviors
"""
from typing import Dict, Iterator, List, Optional, Tuple, Union, Callable

from .node_base import NodeBehavior, FunctionNode
from ..errors import UnknownNodeType

TYPE_SEPARATOR = "."


def split_node_type(node_type: str) -> Tuple[str, str]:
    """
    Split a node type into (category, name)

    Args:
        node_type: Composite type such as "math.add"

    Returns:
        Tuple of category and name

    Raises:
        UnknownNodeType: If the type has no category separator
    """
    category, sep, name = node_type.partition(TYPE_SEPARATOR)
    if not sep or not category or not name:
        raise UnknownNodeType(node_type)
    return category, name


class NodeRegistry:
    """
    Lookup table of node behaviors keyed by "category.name"

    Populated at startup and read-only while graphs execute. Categories are
    only a namespacing convention in the key.
    """

    def __init__(self):
        self._behaviors: Dict[str, NodeBehavior] = {}

    def register(
        self,
        node_type: str,
        behavior: Union[NodeBehavior, Callable],
        replace: bool = False
    ) -> NodeBehavior:
        """
        Register a node behavior

        Args:
            node_type: Composite type (e.g., "math.add")
            behavior: NodeBehavior instance or plain function
            replace: Allow overriding an existing registration

        Returns:
            The registered NodeBehavior
        """
        split_node_type(node_type)
        if node_type in self._behaviors and not replace:
            raise ValueError(f"Node type already registered: {node_type}")
        if not isinstance(behavior, NodeBehavior):
            if not callable(behavior):
                raise TypeError(f"Behavior for {node_type} must be a NodeBehavior or a callable")
            behavior = FunctionNode(behavior)
        self._behaviors[node_type] = behavior
        return behavior

    def node(self, node_type: str, replace: bool = False):
        """Decorator registering a function or NodeBehavior class under node_type"""
        def decorator(target):
            if isinstance(target, type) and issubclass(target, NodeBehavior):
                self.register(node_type, target(), replace=replace)
            else:
                self.register(node_type, target, replace=replace)
            return target
        return decorator

    def unregister(self, node_type: str) -> Optional[NodeBehavior]:
        """Remove a registration, returning the removed behavior or None"""
        return self._behaviors.pop(node_type, None)

    def lookup(self, category: str, name: str) -> NodeBehavior:
        """
        Get the behavior for a (category, name) pair

        Raises:
            UnknownNodeType: If no behavior is registered
        """
        node_type = f"{category}{TYPE_SEPARATOR}{name}"
        behavior = self._behaviors.get(node_type)
        if behavior is None:
            raise UnknownNodeType(node_type)
        return behavior

    def get(self, node_type: str) -> Optional[NodeBehavior]:
        """Get behavior for a composite type, or None if not found"""
        return self._behaviors.get(node_type)

    def node_types(self, category: Optional[str] = None) -> List[str]:
        """Sorted list of registered node types, optionally for one category"""
        types = sorted(self._behaviors)
        if category is not None:
            types = [t for t in types if split_node_type(t)[0] == category]
        return types

    def __contains__(self, node_type: str) -> bool:
        return node_type in self._behaviors

    def __iter__(self) -> Iterator[str]:
        return iter(self.node_types())

    def __len__(self) -> int:
        return len(self._behaviors)


# Default registry, populated with the built-in node library on import
NODE_REGISTRY = NodeRegistry()


def register_node(node_type: str, behavior: Union[NodeBehavior, Callable], replace: bool = False) -> NodeBehavior:
    """
    Register a node type in the default registry

    Args:
        node_type: String identifier for the node type (e.g., "math.add")
        behavior: NodeBehavior instance or plain function
        replace: Allow overriding an existing registration
    """
    return NODE_REGISTRY.register(node_type, behavior, replace=replace)


def get_node_behavior(node_type: str) -> Optional[NodeBehavior]:
    """
    Get behavior for a given type from the default registry

    Returns:
        NodeBehavior or None if not found
    """
    return NODE_REGISTRY.get(node_type)


def _register_all_nodes():
    """Register the built-in node library"""
    from .nodes import BUILTIN_NODES

    for node_type, behavior in BUILTIN_NODES.items():
        register_node(node_type, behavior)


# Auto-register on import
_register_all_nodes()
