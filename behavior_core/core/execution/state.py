"""
Execution state store for the behavior interpreter

Values are stored in one flat mapping keyed by (entity_type, index, socket).
The store belongs to a single interpreter and is cleared at the start of
every run.
"""
from typing import Dict, Any

from ..types import EntityType, NodeIndex, SocketName, StateKey
from ..errors import UnresolvedReference

# Entity type under which the interpreter records node outputs
NODE_ENTITY: EntityType = "$node"


class ExecutionState:
    """Per-run store of recorded socket values"""

    def __init__(self):
        self._values: Dict[StateKey, Any] = {}

    def record(self, entity_type: EntityType, index: NodeIndex, socket: SocketName, value: Any) -> None:
        """Record a value, overwriting any earlier value for the same key"""
        self._values[(entity_type, index, socket)] = value

    def read(self, entity_type: EntityType, index: NodeIndex, socket: SocketName) -> Any:
        """
        Read a recorded value

        Raises:
            UnresolvedReference: If nothing was recorded for the key
        """
        try:
            return self._values[(entity_type, index, socket)]
        except KeyError:
            raise UnresolvedReference(index, socket) from None

    def has(self, entity_type: EntityType, index: NodeIndex, socket: SocketName) -> bool:
        return (entity_type, index, socket) in self._values

    def outputs(self, entity_type: EntityType, index: NodeIndex) -> Dict[SocketName, Any]:
        """Copy of all sockets recorded for one entity"""
        return {
            socket: value
            for (etype, idx, socket), value in self._values.items()
            if etype == entity_type and idx == index
        }

    def snapshot(self) -> Dict[EntityType, Dict[NodeIndex, Dict[SocketName, Any]]]:
        """Nested view of the store (entity type -> index -> socket -> value)"""
        nested: Dict[EntityType, Dict[NodeIndex, Dict[SocketName, Any]]] = {}
        for (entity_type, index, socket), value in self._values.items():
            nested.setdefault(entity_type, {}).setdefault(index, {})[socket] = value
        return nested

    def reset(self) -> None:
        """Discard every recorded value"""
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ExecutionState({self.snapshot()!r})"
