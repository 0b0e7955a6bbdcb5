"""Reference map models: nodes, edges, clusters and summary."""

from enum import Enum

from pydantic import BaseModel, Field

from workgraph.models.references import RelationshipType


class NodeType(str, Enum):
    """Where a node's item lives."""

    ACTIVE = "active"
    HISTORICAL = "historical"


class ClusterType(str, Enum):
    """Attribute a cluster groups on."""

    FEATURE = "feature"
    TECHNICAL = "technical"


class NodeMetadata(BaseModel):
    feature_domain: str = ""
    technical_domain: str = ""
    strategic_theme: str = ""
    reference_count: int = 0


class ReferenceNode(BaseModel):
    """One work item in a reference map."""

    id: str
    label: str
    type: NodeType
    content_preview: str
    priority: str | None = None
    status: str | None = None
    metadata: NodeMetadata = Field(default_factory=NodeMetadata)


class ReferenceEdge(BaseModel):
    """One persisted smart reference in a reference map."""

    source: str
    target: str
    relationship_type: RelationshipType
    strength: float
    confidence: float
    auto_generated: bool = True


class ReferenceCluster(BaseModel):
    """Nodes sharing a domain attribute."""

    id: str
    name: str
    nodes: list[str]
    common_themes: list[str] = Field(default_factory=list)
    cluster_type: ClusterType
    centrality_score: float = 0.0


class MapSummary(BaseModel):
    total_items: int = 0
    total_references: int = 0
    cluster_count: int = 0
    orphaned_items: int = 0


class ReferenceMap(BaseModel):
    """Graph of current relationships. Computed per query, never stored."""

    nodes: list[ReferenceNode] = Field(default_factory=list)
    edges: list[ReferenceEdge] = Field(default_factory=list)
    clusters: list[ReferenceCluster] = Field(default_factory=list)
    summary: MapSummary = Field(default_factory=MapSummary)
