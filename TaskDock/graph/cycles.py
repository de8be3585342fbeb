"""Directed cycle detection."""

from __future__ import annotations

from typing import Iterable


def build_adjacency(
    node_ids: Iterable[str],
    edges: Iterable[tuple[str, str]],
) -> dict[str, list[str]]:
    """Map every node id to the ids its outgoing edges point at.

    Nodes without outgoing edges map to an empty list. Edge sources missing
    from ``node_ids`` are added as keys too.
    """
    graph: dict[str, list[str]] = {node_id: [] for node_id in node_ids}
    for source, target in edges:
        graph.setdefault(source, []).append(target)
    return graph


def has_cycle(node_ids: Iterable[str], edges: Iterable[tuple[str, str]]) -> bool:
    """Return True if the directed graph contains a cycle.

    Depth-first search tracking the nodes on the current path; reaching a
    node already on the path closes a cycle. Self-loops count. The walk
    uses an explicit stack so long chains don't hit the recursion limit.
    O(V + E).
    """
    graph = build_adjacency(node_ids, edges)
    visited: set[str] = set()
    on_stack: set[str] = set()

    for root in graph:
        if root in visited:
            continue
        visited.add(root)
        on_stack.add(root)
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor in on_stack:
                    return True
                if neighbor not in visited:
                    visited.add(neighbor)
                    on_stack.add(neighbor)
                    stack.append((neighbor, iter(graph.get(neighbor, ()))))
                    break
            else:
                on_stack.discard(node)
                stack.pop()

    return False
