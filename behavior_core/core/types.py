"""
Type definitions for Behavior Core

This module provides:
- Type aliases for graph addressing (node indices, sockets, entity types)
- TypedDict shapes of the JSON graph document
- Callback signatures for the external binding context
"""
from typing import TypedDict, TypeAlias, Dict, Any, List, Callable, Tuple
from typing_extensions import NotRequired


# ============================================================================
# Type Aliases
# ============================================================================

NodeIndex: TypeAlias = int
NodeType: TypeAlias = str
SocketName: TypeAlias = str
EntityType: TypeAlias = str
ExternalPath: TypeAlias = str

# Composite key of the execution state store
StateKey: TypeAlias = Tuple[EntityType, NodeIndex, SocketName]

# External binding callbacks (JSON-pointer style paths)
SetCallback: TypeAlias = Callable[[ExternalPath, Any], None]
GetCallback: TypeAlias = Callable[[ExternalPath], Any]


# ============================================================================
# Graph Document Types
# ============================================================================

class NodeData(TypedDict):
    """A single node as stored in a graph document"""
    type: NodeType  # "category.name"
    parameters: NotRequired[Dict[str, Any]]  # literal values or {"$node": index, "socket": name}
    flow: NotRequired[Dict[str, Any]]  # opaque to the engine


class GraphData(TypedDict):
    """A behavior graph document"""
    entry: NotRequired[NodeIndex]
    nodes: List[NodeData]
    name: NotRequired[str]
