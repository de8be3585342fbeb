"""Graph builder — turns task dependency lists into graph results."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from TaskDock.config import GraphConfig
from TaskDock.tasks.enums import TaskStatus
from TaskDock.tasks.models import Task, parse_statuses
from TaskDock.tasks.store import TaskStore
from .cycles import has_cycle
from .models import GraphEdge, GraphNode, GraphResult

logger = logging.getLogger("taskdock.builder")


class _GraphAccumulator:
    """Append-only node/edge collection owned by a single build call.

    Nodes are keyed by id and never replaced once inserted. Edges are kept
    in discovery order and deduplicated.
    """

    def __init__(self):
        self.nodes: dict[str, GraphNode] = {}
        self.edges: list[GraphEdge] = []
        self._edge_keys: set[tuple[str, str]] = set()

    def __contains__(self, node_id: str) -> bool:
        return node_id in self.nodes

    def add_node(self, node: GraphNode) -> bool:
        """Insert a node unless its id is already present. Returns True if added."""
        if node.id in self.nodes:
            return False
        self.nodes[node.id] = node
        return True

    def add_edge(self, source: str, target: str) -> None:
        key = (source, target)
        if key in self._edge_keys:
            return
        self._edge_keys.add(key)
        self.edges.append(GraphEdge(source=source, target=target))

    def finish(self, center_id: str | None) -> GraphResult:
        cyclic = has_cycle(self.nodes, [(e.source, e.target) for e in self.edges])
        return GraphResult(
            center_id=center_id,
            nodes=tuple(self.nodes.values()),
            edges=tuple(self.edges),
            has_cycles=cyclic,
        )


class TaskGraphBuilder:
    """Builds dependency graphs from a task store.

    Usage:
        builder = TaskGraphBuilder(store)
        full = builder.build_graph([TaskStatus.PENDING, TaskStatus.ACTIVE])
        local = builder.build_neighbors("t3", depth=2)

    Each call reads the store once (plus one lookup for the center task) and
    never mutates tasks.
    """

    def __init__(self, store: TaskStore, config: GraphConfig | None = None):
        self.store = store
        self.config = config or GraphConfig()

    def build_graph(self, statuses: Iterable[TaskStatus | str] | None = None) -> GraphResult:
        """Build the graph of all tasks whose status is in ``statuses``.

        An empty or missing filter includes every status. Dependencies that
        match no fetched task become placeholder nodes.
        """
        if statuses is None:
            statuses = self.config.statuses
        statuses = parse_statuses(statuses)
        logger.info(
            "Building task graph for statuses: %s",
            ", ".join(s.value for s in statuses) or "all",
        )

        tasks = self.store.fetch_by_statuses(statuses)
        by_id = {t.id: t for t in tasks}
        acc = _GraphAccumulator()

        for task in tasks:
            acc.add_node(GraphNode.from_task(task))
            for dep_id in task.depends:
                acc.add_edge(dep_id, task.id)
                if dep_id not in acc:
                    dep_task = by_id.get(dep_id)
                    if dep_task is not None:
                        acc.add_node(GraphNode.from_task(dep_task))
                    else:
                        acc.add_node(GraphNode.placeholder_for(dep_id))

        result = acc.finish(center_id=None)
        self._log_result("Task graph", result)
        return result

    def build_neighbors(
        self,
        center_id: str,
        depth: int | None = None,
        include_placeholders: bool | None = None,
    ) -> GraphResult:
        """Build the subgraph within ``depth`` hops of ``center_id``.

        Both directions are followed: the tasks the center depends on and the
        tasks that depend on it. An unknown center yields an empty result
        carrying ``center_id``. Negative depth is treated as 0.

        With ``include_placeholders`` off, edges to unresolved dependency
        ids are dropped rather than left dangling.
        """
        if depth is None:
            depth = self.config.default_depth
        if include_placeholders is None:
            include_placeholders = self.config.include_placeholders
        if depth < 0:
            logger.debug("Negative depth %d for %s treated as 0", depth, center_id)
            depth = 0
        logger.info("Building neighbors graph for task %s with depth %d", center_id, depth)

        center = self.store.fetch_by_id(center_id)
        if center is None:
            logger.warning("Task %s not found for neighbors graph", center_id)
            return GraphResult(center_id=center_id)

        snapshot = self.store.fetch_all()
        by_id = {t.id: t for t in snapshot}
        acc = _GraphAccumulator()
        acc.add_node(GraphNode.from_task(center))

        # Each frame yields the (task, depth) pairs to descend into next.
        stack = [self._expand(center, depth, snapshot, by_id, acc, include_placeholders)]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
            else:
                stack.append(
                    self._expand(child[0], child[1], snapshot, by_id, acc, include_placeholders)
                )

        result = acc.finish(center_id=center_id)
        self._log_result("Neighbors graph", result)
        return result

    @staticmethod
    def _expand(
        task: Task,
        depth: int,
        snapshot: list[Task],
        by_id: dict[str, Task],
        acc: _GraphAccumulator,
        include_placeholders: bool,
    ) -> Iterator[tuple[Task, int]]:
        if depth <= 0:
            return

        # Dependencies first, in the task's own order
        for dep_id in task.depends:
            if dep_id in acc:
                acc.add_edge(dep_id, task.id)
                continue
            dep_task = by_id.get(dep_id)
            if dep_task is not None:
                acc.add_edge(dep_id, task.id)
                acc.add_node(GraphNode.from_task(dep_task))
                yield dep_task, depth - 1
            elif include_placeholders:
                acc.add_edge(dep_id, task.id)
                acc.add_node(GraphNode.placeholder_for(dep_id))

        # Then dependents, in snapshot order
        for other in snapshot:
            if other.id not in acc and task.id in other.depends:
                acc.add_edge(task.id, other.id)
                acc.add_node(GraphNode.from_task(other))
                yield other, depth - 1

    @staticmethod
    def _log_result(label: str, result: GraphResult) -> None:
        logger.info(
            "%s built with %d nodes, %d edges, cycles detected: %s",
            label, len(result.nodes), len(result.edges), result.has_cycles,
        )
        if result.has_cycles:
            logger.warning("%s contains a dependency cycle", label)
