"""
API routes for Behavior Core
"""
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List

from ..core.errors import BehaviorError
from ..core.execution import Interpreter, NODE_REGISTRY
from ..core.graph import NodeDocument, parse_graph
from ..storage import DocumentStore
from ..utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


# Request/Response models
class RunRequest(BaseModel):
    """Request model for running a behavior graph"""
    entry: int = Field(default=0, description="Index of the first node to evaluate")
    nodes: List[NodeDocument] = Field(..., description="Ordered node records")
    world: Dict[str, Any] = Field(
        default_factory=dict,
        description="Host document reachable by world.get / world.set nodes"
    )
    max_steps: Optional[int] = Field(
        default=None,
        ge=0,
        description="Step ceiling for this run (0 = unbounded, default from configuration)"
    )


class RunResponse(BaseModel):
    status: str
    world: Any


class NodeTypesResponse(BaseModel):
    node_types: List[str]


@router.post("/behavior/run", response_model=RunResponse)
def run_behavior(request: RunRequest):
    """Run a behavior graph against a world document"""
    store = DocumentStore(request.world)
    try:
        graph = parse_graph({
            'entry': request.entry,
            'nodes': [node.model_dump() for node in request.nodes],
        })
        interpreter = Interpreter(max_steps=request.max_steps, **store.binding_callbacks())
        interpreter.run(graph.entry, graph.nodes)
    except BehaviorError as e:
        logger.warning(f"Behavior run rejected: {e}")
        raise HTTPException(
            status_code=422,
            detail={"error": type(e).__name__, "message": str(e)}
        )
    except Exception as e:
        logger.error(f"Behavior run failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    
    return RunResponse(status="halted", world=store.to_dict())


@router.get("/nodes", response_model=NodeTypesResponse)
async def list_node_types(category: Optional[str] = None):
    """List registered node types"""
    return NodeTypesResponse(node_types=NODE_REGISTRY.node_types(category))
