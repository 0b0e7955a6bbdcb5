"""
Data models for WorkGraph.

Core models:
- WorkItem, WorkItemMetadata, SimilarityMetadata: items owned by the item store
- SimilarityScore: multi-dimension similarity between two items
- SmartReference, StoredReference: directed typed links (runtime / on-disk)
- ContextualSuggestion: recommendations derived from references
- ReferenceMap, ReferenceNode, ReferenceEdge, ReferenceCluster: graph views
"""

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
from workgraph.models.references import (
    ContextualSuggestion,
    RelationshipType,
    SimilarityScore,
    SmartReference,
    StoredReference,
    SuggestionPriority,
    SuggestionType,
)
from workgraph.models.work_item import (
    SimilarityMetadata,
    WorkItem,
    WorkItemMetadata,
    WorkItemStatus,
    WorkItemType,
)
from workgraph.models.work_state import EnhancedWorkState

__all__ = [
    # Work items
    "WorkItem",
    "WorkItemMetadata",
    "WorkItemStatus",
    "WorkItemType",
    "SimilarityMetadata",
    "EnhancedWorkState",
    # References
    "RelationshipType",
    "SimilarityScore",
    "SmartReference",
    "StoredReference",
    # Suggestions
    "ContextualSuggestion",
    "SuggestionType",
    "SuggestionPriority",
    # Reference maps
    "ReferenceMap",
    "ReferenceNode",
    "ReferenceEdge",
    "ReferenceCluster",
    "MapSummary",
    "NodeMetadata",
    "NodeType",
    "ClusterType",
]
