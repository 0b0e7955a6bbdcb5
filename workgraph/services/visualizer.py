"""ASCII rendering of reference maps."""

from workgraph.models.reference_map import NodeType, ReferenceMap
from workgraph.models.references import RelationshipType

RELATIONSHIP_ICONS = {
    RelationshipType.CONTINUATION: "→",
    RelationshipType.CONFLICT: "⚠",
    RelationshipType.DEPENDENCY: "↗",
    RelationshipType.RELATED: "~",
}

BAR_SEGMENTS = 5


def relationship_icon(relationship_type: RelationshipType) -> str:
    return RELATIONSHIP_ICONS.get(relationship_type, "~")


def strength_bar(strength: float) -> str:
    """Five-segment bar, e.g. 0.8 -> [████░]. Halves round up."""
    filled = int(strength * BAR_SEGMENTS + 0.5)
    filled = max(0, min(filled, BAR_SEGMENTS))
    return f"[{'█' * filled}{'░' * (BAR_SEGMENTS - filled)}]"


def _single_line(text: str) -> str:
    # "●" marks active node lines only
    return " ".join(text.replace("●", "•").split())


def render_visualization(reference_map: ReferenceMap) -> str:
    """
    Render a deterministic text report of a reference map.

    One ``●`` line per active node, followed by one line per outgoing edge,
    then the clusters and the summary counts.
    """
    labels = {node.id: _single_line(node.label) for node in reference_map.nodes}
    lines = ["", "=== Work Item Reference Map ===", ""]

    active_nodes = [node for node in reference_map.nodes if node.type == NodeType.ACTIVE]
    if active_nodes:
        lines.append("📋 ACTIVE WORK:")
        for node in active_nodes:
            lines.append(f"  ● {labels[node.id]}")
            lines.append(f"    {_single_line(node.content_preview)}")

            outgoing = [edge for edge in reference_map.edges if edge.source == node.id]
            if outgoing:
                lines.append("    References:")
                for edge in outgoing:
                    target = labels.get(edge.target, edge.target)
                    lines.append(
                        f"      {relationship_icon(edge.relationship_type)} {target} "
                        f"{strength_bar(edge.strength)}"
                    )
            lines.append("")

    if reference_map.clusters:
        lines.append("🔗 REFERENCE CLUSTERS:")
        for cluster in reference_map.clusters:
            lines.append(f"  📁 {cluster.name} ({len(cluster.nodes)} items)")
            lines.append(f"     Themes: {', '.join(cluster.common_themes)}")
            lines.append(f"     Type: {cluster.cluster_type.value}")
            lines.append("")

    summary = reference_map.summary
    lines.extend(
        [
            "📊 SUMMARY:",
            f"  Items: {summary.total_items}",
            f"  References: {summary.total_references}",
            f"  Clusters: {summary.cluster_count}",
            f"  Orphaned: {summary.orphaned_items}",
        ]
    )
    return "\n".join(lines) + "\n"
