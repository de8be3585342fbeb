"""Graph — task dependency graphs with cycle detection.

Builds either the full graph of tasks matching a status filter or the
neighborhood of one task up to a hop budget. Unresolved dependency ids
become placeholder nodes.

Usage:
    from TaskDock.graph import TaskGraphBuilder

    builder = TaskGraphBuilder(store)
    result = builder.build_neighbors("t3", depth=2)
    result.has_cycles
"""

from .models import GraphNode, GraphEdge, GraphResult
from .cycles import has_cycle
from .builder import TaskGraphBuilder

__all__ = [
    "GraphNode",
    "GraphEdge",
    "GraphResult",
    "has_cycle",
    "TaskGraphBuilder",
]
