"""
Reference graph assembly and traversal.

Builds reference maps from the smart references persisted on work items:
- Full map: every active item plus the items they reference
- Focused map: depth-bounded expansion around one seed item
- Reference path: directed search from one item to another

Traversals use explicit stacks and visited sets, so cyclic or very deep
reference chains always terminate.
"""

from collections.abc import Iterator

from workgraph.config import Config
from workgraph.core.item_store.base import ItemStore
from workgraph.models.reference_map import (
    ClusterType,
    MapSummary,
    NodeMetadata,
    NodeType,
    ReferenceCluster,
    ReferenceEdge,
    ReferenceMap,
    ReferenceNode,
)
from workgraph.models.references import StoredReference
from workgraph.models.work_item import WorkItem
from workgraph.utils.logger import get_logger

logger = get_logger(__name__)

LABEL_LENGTH = 40
PREVIEW_LENGTH = 100


class ReferenceMapper:
    """Assembles nodes, edges and clusters from persisted references."""

    def __init__(self, item_store: ItemStore, config: Config | None = None):
        """
        Initialize reference mapper.

        Args:
            item_store: Store providing active and historical work items
            config: Configuration (defaults when omitted)
        """
        self.item_store = item_store
        self.config = config or Config()

    # ═══════════════════════════════════════════════════════════
    # MAPS
    # ═══════════════════════════════════════════════════════════

    def generate_reference_map(self) -> ReferenceMap:
        """
        Map of all active items and their outgoing references.

        Referenced historical items become nodes, but their own references are
        not expanded. References whose target no longer exists are skipped.
        """
        active_items = self.item_store.load_active_items()
        active_ids = {item.id for item in active_items}

        nodes: dict[str, ReferenceNode] = {}
        edges: list[ReferenceEdge] = []

        for item in active_items:
            nodes[item.id] = self.create_node(item, NodeType.ACTIVE)

        for item in active_items:
            for ref in item.metadata.smart_references:
                if ref.target_id not in active_ids and ref.target_id not in nodes:
                    target = self.item_store.get_historical_item(ref.target_id)
                    if target is None:
                        continue
                    nodes[target.id] = self.create_node(target, NodeType.HISTORICAL)
                edges.append(self.create_edge(item.id, ref))

        node_list = list(nodes.values())
        clusters = self.generate_clusters(node_list, edges)
        connected = {edge.source for edge in edges} | {edge.target for edge in edges}

        summary = MapSummary(
            total_items=len(node_list),
            total_references=len(edges),
            cluster_count=len(clusters),
            orphaned_items=sum(1 for node in node_list if node.id not in connected),
        )
        logger.info(
            f"Generated reference map with {summary.total_items} items "
            f"and {summary.total_references} references"
        )
        return ReferenceMap(nodes=node_list, edges=edges, clusters=clusters, summary=summary)

    def generate_focused_map(self, item_id: str, depth: int | None = None) -> ReferenceMap:
        """
        Depth-bounded map around one item.

        Args:
            item_id: Seed work item ID
            depth: Levels to expand (default from config, capped at max_focus_depth);
                0 or less yields an empty map

        Returns:
            Reference map; ``orphaned_items`` is always 0 for focused maps
        """
        settings = self.config.references
        if depth is None:
            depth = settings.default_focus_depth
        depth = min(depth, settings.max_focus_depth)

        active_by_id = {item.id: item for item in self.item_store.load_active_items()}
        visited: set[str] = set()
        nodes: dict[str, ReferenceNode] = {}
        edges: list[ReferenceEdge] = []
        edge_keys: set[tuple[str, str]] = set()

        def enter(node_id: str, remaining: int) -> Iterator[StoredReference] | None:
            if remaining <= 0 or node_id in visited:
                return None
            visited.add(node_id)

            item = active_by_id.get(node_id)
            node_type = NodeType.ACTIVE
            if item is None:
                item = self.item_store.get_historical_item(node_id)
                node_type = NodeType.HISTORICAL
            if item is None:
                return None

            nodes.setdefault(item.id, self.create_node(item, node_type))
            return iter(item.metadata.smart_references)

        stack: list[tuple[str, int, Iterator[StoredReference]]] = []
        refs = enter(item_id, depth)
        if refs is not None:
            stack.append((item_id, depth, refs))

        while stack:
            source_id, remaining, refs = stack[-1]
            ref = next(refs, None)
            if ref is None:
                stack.pop()
                continue

            if (source_id, ref.target_id) not in edge_keys:
                edge_keys.add((source_id, ref.target_id))
                edges.append(self.create_edge(source_id, ref))

            child_refs = enter(ref.target_id, remaining - 1)
            if child_refs is not None:
                stack.append((ref.target_id, remaining - 1, child_refs))

        node_list = list(nodes.values())
        clusters = self.generate_clusters(node_list, edges)

        # orphaned_items is not computed for focused maps
        summary = MapSummary(
            total_items=len(node_list),
            total_references=len(edges),
            cluster_count=len(clusters),
            orphaned_items=0,
        )
        return ReferenceMap(nodes=node_list, edges=edges, clusters=clusters, summary=summary)

    # ═══════════════════════════════════════════════════════════
    # PATHS
    # ═══════════════════════════════════════════════════════════

    def find_reference_path(self, source_id: str, target_id: str) -> list[str]:
        """
        Depth-first search along outgoing references only.

        Returns:
            IDs from source to target inclusive, ``[source]`` when they are equal,
            or ``[]`` when the target is unreachable
        """
        if source_id == target_id:
            return [source_id]

        active_by_id = {item.id: item for item in self.item_store.load_active_items()}

        def outgoing(node_id: str) -> Iterator[StoredReference]:
            item = active_by_id.get(node_id) or self.item_store.get_historical_item(node_id)
            return iter(item.metadata.smart_references if item else [])

        visited = {source_id}
        stack: list[tuple[str, Iterator[StoredReference]]] = [(source_id, outgoing(source_id))]

        while stack:
            ref = next(stack[-1][1], None)
            if ref is None:
                stack.pop()  # backtrack
                continue

            next_id = ref.target_id
            if next_id == target_id:
                return [node_id for node_id, _ in stack] + [target_id]
            if next_id in visited:
                continue
            visited.add(next_id)
            stack.append((next_id, outgoing(next_id)))

        return []

    # ═══════════════════════════════════════════════════════════
    # BUILDING BLOCKS
    # ═══════════════════════════════════════════════════════════

    @staticmethod
    def create_node(item: WorkItem, node_type: NodeType) -> ReferenceNode:
        metadata = item.similarity
        return ReferenceNode(
            id=item.id,
            label=f"{item.type.value}: {item.content[:LABEL_LENGTH]}...",
            type=node_type,
            content_preview=item.content[:PREVIEW_LENGTH],
            priority=item.metadata.priority,
            status=item.status.value,
            metadata=NodeMetadata(
                feature_domain=metadata.feature_domain,
                technical_domain=metadata.technical_domain,
                strategic_theme=metadata.strategic_theme,
                reference_count=len(item.metadata.smart_references),
            ),
        )

    @staticmethod
    def create_edge(source_id: str, ref: StoredReference) -> ReferenceEdge:
        return ReferenceEdge(
            source=source_id,
            target=ref.target_id,
            relationship_type=ref.relationship_type,
            strength=ref.similarity_score,
            confidence=ref.confidence,
            auto_generated=ref.auto_generated,
        )

    def generate_clusters(
        self, nodes: list[ReferenceNode], edges: list[ReferenceEdge]
    ) -> list[ReferenceCluster]:
        """Feature-domain clusters, then technical-domain clusters, of two or more nodes."""
        clusters = []
        groupings = (
            ("feature_domain", ClusterType.FEATURE, "feature", "Feature"),
            ("technical_domain", ClusterType.TECHNICAL, "tech", "Technical"),
        )

        for attribute, cluster_type, id_prefix, name_prefix in groupings:
            groups: dict[str, list[str]] = {}
            for node in nodes:
                value = getattr(node.metadata, attribute)
                if value:
                    groups.setdefault(value, []).append(node.id)

            for domain, node_ids in groups.items():
                if len(node_ids) < 2:
                    continue
                clusters.append(
                    ReferenceCluster(
                        id=f"{id_prefix}-{domain}",
                        name=f"{name_prefix}: {domain.replace('-', ' ', 1)}",
                        nodes=node_ids,
                        common_themes=[domain],
                        cluster_type=cluster_type,
                        centrality_score=self.calculate_centrality(node_ids, edges),
                    )
                )

        return clusters

    @staticmethod
    def calculate_centrality(node_ids: list[str], edges: list[ReferenceEdge]) -> float:
        """Edges touching any member, per member."""
        members = set(node_ids)
        edge_count = sum(1 for edge in edges if edge.source in members or edge.target in members)
        return edge_count / max(len(node_ids), 1)
