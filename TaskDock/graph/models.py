"""Data models for dependency graph query results.

All three types are frozen: a result is built once per query and handed
to the caller as-is.
"""

from __future__ import annotations

from dataclasses import dataclass

from TaskDock.tasks.enums import TaskStatus
from TaskDock.tasks.models import Task

PLACEHOLDER_TITLE = "Unknown Task"
PLACEHOLDER_PRIORITY = "NONE"


@dataclass(frozen=True)
class GraphNode:
    """A task in a graph result, or a placeholder for an unresolved id."""
    id: str
    title: str
    status: TaskStatus = TaskStatus.PENDING
    project_name: str | None = None
    assignee: str | None = None
    priority: str = PLACEHOLDER_PRIORITY  # HIGH | MEDIUM | LOW | NONE
    urgency: float = 0.0
    placeholder: bool = False

    @classmethod
    def from_task(cls, task: Task) -> GraphNode:
        return cls(
            id=task.id,
            title=task.title,
            status=task.status,
            project_name=task.project,
            assignee=task.assignee,
            priority=task.priority.name,
            urgency=task.urgency if task.urgency is not None else 0.0,
            placeholder=False,
        )

    @classmethod
    def placeholder_for(cls, node_id: str) -> GraphNode:
        """Stand-in for a dependency id that matches no known task."""
        return cls(id=node_id, title=PLACEHOLDER_TITLE, placeholder=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "status": self.status.value,
            "project_name": self.project_name,
            "assignee": self.assignee,
            "priority": self.priority,
            "urgency": self.urgency,
            "placeholder": self.placeholder,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GraphNode:
        return cls(
            id=data["id"],
            title=data.get("title", PLACEHOLDER_TITLE),
            status=TaskStatus.parse(data.get("status", TaskStatus.PENDING)),
            project_name=data.get("project_name"),
            assignee=data.get("assignee"),
            priority=data.get("priority", PLACEHOLDER_PRIORITY),
            urgency=float(data.get("urgency") or 0.0),
            placeholder=data.get("placeholder", False),
        )


@dataclass(frozen=True)
class GraphEdge:
    """``source`` is a dependency of ``target``: target waits on source."""
    source: str
    target: str

    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target}

    @classmethod
    def from_dict(cls, data: dict) -> GraphEdge:
        return cls(source=data["from"], target=data["to"])


@dataclass(frozen=True)
class GraphResult:
    """Nodes and edges of one graph query, in insertion order.

    ``center_id`` is set only for neighbors queries.
    """
    center_id: str | None
    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()
    has_cycles: bool = False

    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]

    def get_node(self, node_id: str) -> GraphNode | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def is_empty(self) -> bool:
        return not self.nodes

    def to_dict(self) -> dict:
        return {
            "center_id": self.center_id,
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
            "has_cycles": self.has_cycles,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GraphResult:
        return cls(
            center_id=data.get("center_id"),
            nodes=tuple(GraphNode.from_dict(n) for n in data.get("nodes", [])),
            edges=tuple(GraphEdge.from_dict(e) for e in data.get("edges", [])),
            has_cycles=data.get("has_cycles", False),
        )
