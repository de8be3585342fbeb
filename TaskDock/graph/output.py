"""Output formatters for graph results."""

from __future__ import annotations

import json
from pathlib import Path

from .models import GraphNode, GraphResult


def sort_for_display(nodes) -> list[GraphNode]:
    """Most urgent first; placeholders last; ties keep insertion order."""
    return sorted(nodes, key=lambda n: (n.placeholder, -n.urgency))


def to_json(result: GraphResult, indent: int = 2) -> str:
    """Convert a GraphResult to formatted JSON string."""
    return json.dumps(result.to_dict(), indent=indent)


def to_markdown(result: GraphResult) -> str:
    """Convert a GraphResult to a human-readable Markdown document."""
    lines: list[str] = []

    lines.append("# Task Dependency Graph")
    lines.append("")
    if result.center_id is not None:
        lines.append(f"**Center:** {result.center_id}")
    lines.append(f"**Nodes:** {len(result.nodes)}")
    lines.append(f"**Edges:** {len(result.edges)}")
    lines.append(f"**Has Cycles:** {'Yes' if result.has_cycles else 'No'}")
    lines.append("")

    if result.nodes:
        lines.append("## Tasks")
        lines.append("")
        lines.append("| Urgency | Id | Title | Status | Priority | Project | Assignee |")
        lines.append("|---|---|---|---|---|---|---|")
        for node in sort_for_display(result.nodes):
            title = node.title
            if node.placeholder:
                title += " _(placeholder)_"
            if node.id == result.center_id:
                title = f"**{title}**"
            lines.append(
                f"| {node.urgency:.2f} | {node.id} | {title} | {node.status.value} "
                f"| {node.priority} | {node.project_name or ''} | {node.assignee or ''} |"
            )
        lines.append("")

    if result.edges:
        titles = {n.id: n.title for n in result.nodes}
        lines.append("## Dependencies")
        lines.append("")
        for edge in result.edges:
            lines.append(
                f"- {titles.get(edge.source, edge.source)} ({edge.source}) "
                f"-> {titles.get(edge.target, edge.target)} ({edge.target})"
            )
        lines.append("")

    return "\n".join(lines)


def save_graph(result: GraphResult, output_dir: str = "output/task_graph") -> tuple[str, str]:
    """Save a graph result as both JSON and Markdown files."""
    path = Path(output_dir)
    path.mkdir(parents=True, exist_ok=True)

    json_path = path / "task_graph.json"
    md_path = path / "task_graph.md"

    json_path.write_text(to_json(result))
    md_path.write_text(to_markdown(result))

    return str(json_path), str(md_path)
