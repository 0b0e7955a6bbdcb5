"""Tests for reference maps, clusters and reference paths."""

import pytest

from workgraph.config import Config, ReferenceConfig
from workgraph.core.item_store import InMemoryItemStore
from workgraph.models import ClusterType, NodeType, RelationshipType
from workgraph.services import ReferenceMapper

USER_MANAGEMENT = {"feature_domain": "user-management"}


@pytest.fixture
def map_store(make_item, make_ref):
    """
    Three active user-management items and two historical items.

    login-page -> login-history, login-form (continuation), ghost (missing)
    login-form -> login-history (conflict)
    login-audit has no references
    login-history -> archive (historical, not expanded in the full map)
    """
    active = [
        make_item(
            "login-page",
            "Build the login page with remember-me support",
            similarity=USER_MANAGEMENT,
            references=[
                make_ref("login-history", 0.8),
                make_ref("login-form", 0.75, RelationshipType.CONTINUATION),
                make_ref("ghost", 0.9),
            ],
        ),
        make_item(
            "login-form",
            "Validate login form input",
            status="in_progress",
            similarity=USER_MANAGEMENT,
            references=[make_ref("login-history", 0.9, RelationshipType.CONFLICT)],
        ),
        make_item("login-audit", "Audit failed logins", similarity=USER_MANAGEMENT),
    ]
    history = [
        make_item(
            "login-history",
            "Original login design notes",
            item_type="plan",
            status="completed",
            references=[make_ref("archive")],
        ),
        make_item("archive", "Archived auth research", item_type="report", status="completed"),
    ]
    return InMemoryItemStore(active_items=active, historical_items=history)


@pytest.fixture
def mapper(map_store):
    return ReferenceMapper(map_store)


def chain_store(make_item, make_ref, length=8, cycle=False):
    """Active items c0 -> c1 -> ... -> c{length-1}, optionally closing the loop."""
    items = []
    for i in range(length):
        target = f"c{i + 1}" if i + 1 < length else ("c0" if cycle else None)
        refs = [make_ref(target)] if target else []
        items.append(make_item(f"c{i}", f"Chain step {i}", references=refs))
    return InMemoryItemStore(active_items=items)


class TestGenerateReferenceMap:
    """Test the full reference map."""

    def test_nodes(self, mapper):
        """Test active items come first, then referenced historical items."""
        reference_map = mapper.generate_reference_map()

        assert [node.id for node in reference_map.nodes] == [
            "login-page",
            "login-form",
            "login-audit",
            "login-history",
        ]
        types = {node.id: node.type for node in reference_map.nodes}
        assert types["login-page"] == NodeType.ACTIVE
        assert types["login-history"] == NodeType.HISTORICAL

    def test_edges_skip_missing_targets(self, mapper):
        """Test dangling references are dropped and history is not expanded."""
        reference_map = mapper.generate_reference_map()

        assert [(edge.source, edge.target) for edge in reference_map.edges] == [
            ("login-page", "login-history"),
            ("login-page", "login-form"),
            ("login-form", "login-history"),
        ]
        assert "archive" not in {node.id for node in reference_map.nodes}

    def test_summary_matches_contents(self, mapper):
        """Test summary counts agree with nodes, edges and clusters."""
        reference_map = mapper.generate_reference_map()
        summary = reference_map.summary

        assert summary.total_items == len(reference_map.nodes) == 4
        assert summary.total_references == len(reference_map.edges) == 3
        assert summary.cluster_count == len(reference_map.clusters) == 1
        assert summary.orphaned_items == 1

    def test_feature_cluster(self, mapper):
        """Test three items sharing a feature domain form one named cluster."""
        cluster = mapper.generate_reference_map().clusters[0]

        assert cluster.id == "feature-user-management"
        assert cluster.name == "Feature: user management"
        assert cluster.nodes == ["login-page", "login-form", "login-audit"]
        assert cluster.common_themes == ["user-management"]
        assert cluster.cluster_type == ClusterType.FEATURE
        assert cluster.centrality_score == pytest.approx(1.0)

    def test_node_fields(self, mapper):
        """Test node label, preview and metadata."""
        nodes = {node.id: node for node in mapper.generate_reference_map().nodes}
        page = nodes["login-page"]

        assert page.label == "todo: Build the login page with remember-me su..."
        assert page.content_preview == "Build the login page with remember-me support"
        assert page.status == "pending"
        assert page.metadata.reference_count == 3
        assert page.metadata.feature_domain == "user-management"
        assert nodes["login-history"].metadata.feature_domain == ""

    def test_edge_fields(self, mapper):
        """Test edges carry the stored reference values."""
        edge = mapper.generate_reference_map().edges[2]

        assert edge.relationship_type == RelationshipType.CONFLICT
        assert edge.strength == 0.9
        assert edge.confidence == 0.9
        assert edge.auto_generated is True

    def test_empty_store(self):
        """Test an empty store yields an empty map."""
        reference_map = ReferenceMapper(InMemoryItemStore()).generate_reference_map()

        assert reference_map.nodes == []
        assert reference_map.summary.total_items == 0


class TestClusters:
    """Test cluster grouping rules."""

    def test_technical_cluster(self, make_item):
        """Test technical-domain groups are labeled separately."""
        store = InMemoryItemStore(
            active_items=[
                make_item("a", "one", similarity={"technical_domain": "frontend"}),
                make_item("b", "two", similarity={"technical_domain": "frontend"}),
                make_item("c", "three", similarity={"technical_domain": "backend"}),
            ]
        )

        clusters = ReferenceMapper(store).generate_reference_map().clusters

        assert [(c.id, c.name, c.cluster_type) for c in clusters] == [
            ("tech-frontend", "Technical: frontend", ClusterType.TECHNICAL)
        ]
        assert clusters[0].centrality_score == 0.0

    def test_feature_clusters_before_technical(self, make_item):
        """Test feature clusters are listed before technical clusters."""
        tags = {"feature_domain": "payments", "technical_domain": "backend"}
        store = InMemoryItemStore(
            active_items=[make_item("a", "one", similarity=tags), make_item("b", "two", similarity=tags)]
        )

        clusters = ReferenceMapper(store).generate_reference_map().clusters

        assert [c.name for c in clusters] == ["Feature: payments", "Technical: backend"]


class TestGenerateFocusedMap:
    """Test depth-bounded maps."""

    def test_default_depth(self, make_item, make_ref):
        """Test the default depth expands two levels."""
        mapper = ReferenceMapper(chain_store(make_item, make_ref))

        reference_map = mapper.generate_focused_map("c0")

        assert [node.id for node in reference_map.nodes] == ["c0", "c1"]

    def test_depth_is_capped(self, make_item, make_ref):
        """Test depth above the maximum is capped at five levels."""
        mapper = ReferenceMapper(chain_store(make_item, make_ref))

        reference_map = mapper.generate_focused_map("c0", depth=10)

        assert [node.id for node in reference_map.nodes] == ["c0", "c1", "c2", "c3", "c4"]

    def test_configured_cap(self, make_item, make_ref):
        """Test the cap follows configuration."""
        config = Config(references=ReferenceConfig(max_focus_depth=3))
        mapper = ReferenceMapper(chain_store(make_item, make_ref), config)

        assert len(mapper.generate_focused_map("c0", depth=5).nodes) == 3

    def test_zero_depth(self, make_item, make_ref):
        """Test zero depth yields an empty map."""
        mapper = ReferenceMapper(chain_store(make_item, make_ref))

        reference_map = mapper.generate_focused_map("c0", depth=0)

        assert reference_map.nodes == []
        assert reference_map.edges == []

    def test_cycle_terminates(self, make_item, make_ref):
        """Test a reference cycle is visited once."""
        mapper = ReferenceMapper(chain_store(make_item, make_ref, length=3, cycle=True))

        reference_map = mapper.generate_focused_map("c0", depth=5)

        assert [node.id for node in reference_map.nodes] == ["c0", "c1", "c2"]
        assert [(e.source, e.target) for e in reference_map.edges] == [
            ("c0", "c1"),
            ("c1", "c2"),
            ("c2", "c0"),
        ]

    def test_expands_historical_items(self, mapper):
        """Test historical references are followed, unlike the full map."""
        reference_map = mapper.generate_focused_map("login-form", depth=3)

        assert [node.id for node in reference_map.nodes] == [
            "login-form",
            "login-history",
            "archive",
        ]
        assert {node.id: node.type for node in reference_map.nodes}["archive"] == NodeType.HISTORICAL

    def test_orphaned_items_always_zero(self, mapper):
        """Test focused maps report zero orphans even for an isolated seed."""
        reference_map = mapper.generate_focused_map("login-audit")

        assert [node.id for node in reference_map.nodes] == ["login-audit"]
        assert reference_map.summary.orphaned_items == 0

    def test_unknown_seed(self, mapper):
        """Test an unknown seed yields an empty map."""
        assert mapper.generate_focused_map("missing").summary.total_items == 0

    def test_deep_chain(self, make_item, make_ref):
        """Test long chains are traversed without recursion limits."""
        config = Config(references=ReferenceConfig(max_focus_depth=5000))
        mapper = ReferenceMapper(chain_store(make_item, make_ref, length=3000), config)

        reference_map = mapper.generate_focused_map("c0", depth=5000)

        assert reference_map.summary.total_items == 3000


class TestFindReferencePath:
    """Test directed path search."""

    @pytest.fixture
    def path_store(self, make_item, make_ref):
        """
        a -> e (dead end), a -> b -> c -> a (cycle), d -> a (reverse only)
        """
        return InMemoryItemStore(
            active_items=[
                make_item("a", "A", references=[make_ref("e"), make_ref("b")]),
                make_item("b", "B", references=[make_ref("c")]),
                make_item("d", "D", references=[make_ref("a")]),
            ],
            historical_items=[
                make_item("c", "C", status="completed", references=[make_ref("a")]),
                make_item("e", "E", status="completed"),
            ],
        )

    def test_same_item(self, path_store):
        """Test a path from an item to itself is just that item."""
        assert ReferenceMapper(path_store).find_reference_path("x", "x") == ["x"]

    def test_backtracks_past_dead_ends(self, path_store):
        """Test dead ends are not part of the returned path."""
        assert ReferenceMapper(path_store).find_reference_path("a", "c") == ["a", "b", "c"]

    def test_follows_historical_items(self, path_store):
        """Test paths continue through historical items."""
        assert ReferenceMapper(path_store).find_reference_path("b", "a") == ["b", "c", "a"]

    def test_reverse_path_is_not_followed(self, path_store):
        """Test only outgoing references count."""
        mapper = ReferenceMapper(path_store)

        assert mapper.find_reference_path("d", "c") == ["d", "a", "b", "c"]
        assert mapper.find_reference_path("a", "d") == []

    def test_unknown_source(self, path_store):
        """Test an unknown source has no path."""
        assert ReferenceMapper(path_store).find_reference_path("missing", "a") == []
