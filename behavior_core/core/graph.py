"""
Behavior graph documents

Parses JSON graph documents into immutable Node records. Every parameter is
tagged as a Literal or a Reference here, once, so the interpreter never has
to guess from a value's shape.
"""
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .types import GraphData, NodeData, NodeIndex, NodeType, SocketName
from .errors import GraphParseError

# Marker key identifying a reference parameter in a graph document
REFERENCE_MARKER = "$node"


@dataclass(frozen=True)
class Literal:
    """A parameter carrying its value directly"""
    value: Any


@dataclass(frozen=True)
class Reference:
    """A parameter naming an output socket of a previously evaluated node"""
    node: NodeIndex
    socket: SocketName


ParameterValue = Union[Literal, Reference]


@dataclass(frozen=True)
class Node:
    """A node of a behavior graph, immutable during a run"""
    type: NodeType
    parameters: Mapping[str, ParameterValue] = field(default_factory=dict)
    flow: Mapping[str, Any] = field(default_factory=dict)

    @property
    def category(self) -> str:
        return self.type.partition(".")[0]

    @property
    def name(self) -> str:
        return self.type.partition(".")[2]


@dataclass(frozen=True)
class BehaviorGraph:
    """A parsed graph document: its nodes and the entry index"""
    nodes: Tuple[Node, ...]
    entry: NodeIndex = 0
    name: Optional[str] = None


# ============================================================================
# Document models (pydantic)
# ============================================================================

class NodeDocument(BaseModel):
    """A node as it appears in a graph document"""
    type: str = Field(..., min_length=1, description="Node type as 'category.name'")
    parameters: Dict[str, Any] = Field(default_factory=dict, description="Literal values or references")
    flow: Dict[str, Any] = Field(default_factory=dict, description="Node-specific control data")

    @field_validator('parameters', 'flow', mode='before')
    @classmethod
    def _none_as_empty(cls, value):
        return {} if value is None else value


class GraphDocument(BaseModel):
    """A behavior graph document"""
    entry: int = Field(default=0, description="Index of the first node to evaluate")
    nodes: List[NodeDocument] = Field(..., description="Ordered node records")
    name: Optional[str] = None


# ============================================================================
# Parsing
# ============================================================================

def parse_parameter(value: Any) -> ParameterValue:
    """
    Tag a raw parameter value

    A mapping carrying the reference marker becomes a Reference; anything
    else, including mappings without the marker, is a Literal.

    Raises:
        GraphParseError: If a marked mapping is not a well-formed reference
    """
    if isinstance(value, (Literal, Reference)):
        return value
    if isinstance(value, Mapping) and REFERENCE_MARKER in value:
        index = value[REFERENCE_MARKER]
        socket = value.get('socket')
        if isinstance(index, bool) or not isinstance(index, int):
            raise GraphParseError(f"Reference node index must be an integer, got {index!r}")
        if not isinstance(socket, str) or not socket:
            raise GraphParseError(f"Reference to node {index} has no socket name")
        return Reference(node=index, socket=socket)
    return Literal(value)


def _node_from_document(doc: NodeDocument) -> Node:
    try:
        parameters = {name: parse_parameter(value) for name, value in doc.parameters.items()}
    except GraphParseError as e:
        raise GraphParseError(f"Node {doc.type}: {e}") from None
    return Node(type=doc.type, parameters=parameters, flow=dict(doc.flow))


def parse_node(data: Union[Node, NodeData, Mapping[str, Any]]) -> Node:
    """
    Parse a single node record

    A Node built by hand has its parameters tagged as well; already tagged
    values are kept.

    Raises:
        GraphParseError: If the record is malformed
    """
    if isinstance(data, Node):
        try:
            parameters = {name: parse_parameter(value) for name, value in data.parameters.items()}
        except GraphParseError as e:
            raise GraphParseError(f"Node {data.type}: {e}") from None
        return Node(type=data.type, parameters=parameters, flow=data.flow)
    try:
        doc = NodeDocument.model_validate(data)
    except ValidationError as e:
        raise GraphParseError(f"Invalid node: {e}") from e
    return _node_from_document(doc)


def parse_nodes(nodes: Sequence[Union[Node, Mapping[str, Any]]]) -> List[Node]:
    """Parse an ordered sequence of node records"""
    parsed = []
    for index, data in enumerate(nodes):
        try:
            parsed.append(parse_node(data))
        except GraphParseError as e:
            raise GraphParseError(f"Node {index}: {e}") from e
    return parsed


def parse_graph(document: Union[GraphData, Mapping[str, Any], Sequence[Any]]) -> BehaviorGraph:
    """
    Parse a graph document

    Accepts {"entry": 0, "nodes": [...]} or a bare list of nodes (entry 0).

    Raises:
        GraphParseError: If the document is malformed
    """
    if isinstance(document, Sequence) and not isinstance(document, (str, bytes)):
        document = {'nodes': list(document)}
    try:
        doc = GraphDocument.model_validate(document)
    except ValidationError as e:
        raise GraphParseError(f"Invalid graph document: {e}") from e
    nodes = []
    for index, node_doc in enumerate(doc.nodes):
        try:
            nodes.append(_node_from_document(node_doc))
        except GraphParseError as e:
            raise GraphParseError(f"Node {index}: {e}") from e
    return BehaviorGraph(nodes=tuple(nodes), entry=doc.entry, name=doc.name)


def load_graph(path: Union[str, Path]) -> BehaviorGraph:
    """
    Load and parse a graph document from a JSON file

    Raises:
        GraphParseError: If the file is not valid JSON or not a graph document
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise GraphParseError(f"{path}: invalid JSON: {e}") from e
    return parse_graph(document)
