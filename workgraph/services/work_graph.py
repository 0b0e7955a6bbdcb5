"""
WorkGraph facade - one entry point for the reference engine.

Brings together:
- SmartReferenceEngine: reference generation, scoring and persistence
- SuggestionEngine: contextual suggestions
- ReferenceMapper: full/focused maps and reference paths
- Visualizer: ASCII reports

Every call re-reads the item store; nothing is cached between calls.
"""

from workgraph.config import Config
from workgraph.core.item_store.base import ItemStore
from workgraph.models.reference_map import ReferenceMap
from workgraph.models.references import ContextualSuggestion, SimilarityScore, SmartReference
from workgraph.models.work_item import WorkItem
from workgraph.models.work_state import EnhancedWorkState
from workgraph.services.reference_engine import SmartReferenceEngine
from workgraph.services.reference_mapper import ReferenceMapper
from workgraph.services.suggestion_engine import SuggestionEngine
from workgraph.services.visualizer import render_visualization


class WorkGraph:
    """Caller-facing operations of the reference and relationship graph engine."""

    def __init__(self, item_store: ItemStore, config: Config | None = None):
        """
        Initialize WorkGraph.

        Args:
            item_store: Store providing active and historical work items
            config: Configuration (defaults when omitted)
        """
        self.item_store = item_store
        self.config = config or Config()

        self.reference_engine = SmartReferenceEngine(item_store, self.config)
        self.suggestion_engine = SuggestionEngine(item_store, self.reference_engine, self.config)
        self.reference_mapper = ReferenceMapper(item_store, self.config)

    # References

    def generate_automatic_references(self, item: WorkItem) -> list[SmartReference]:
        return self.reference_engine.generate_automatic_references(item)

    def generate_smart_references(self, item_id: str) -> list[SmartReference]:
        return self.reference_engine.generate_smart_references(item_id)

    def calculate_semantic_similarity(self, item1: WorkItem, item2: WorkItem) -> SimilarityScore:
        return self.reference_engine.calculate_semantic_similarity(item1, item2)

    def calculate_similarity(self, item_id_1: str, item_id_2: str) -> SimilarityScore | None:
        return self.reference_engine.calculate_similarity(item_id_1, item_id_2)

    def update_references_on_change(self, item_id: str) -> None:
        self.reference_engine.update_references_on_change(item_id)

    # Suggestions

    def get_contextual_suggestions(
        self, active_items: list[WorkItem] | None = None
    ) -> list[ContextualSuggestion]:
        """Suggestions for the given items, or for the store's active items."""
        if active_items is None:
            active_items = self.item_store.load_active_items()
        return self.suggestion_engine.get_contextual_suggestions(active_items)

    def get_enhanced_work_state(self) -> EnhancedWorkState:
        return self.suggestion_engine.get_enhanced_work_state()

    # Graph

    def generate_reference_map(self) -> ReferenceMap:
        return self.reference_mapper.generate_reference_map()

    def generate_focused_map(self, item_id: str, depth: int | None = None) -> ReferenceMap:
        return self.reference_mapper.generate_focused_map(item_id, depth)

    def find_reference_path(self, source_id: str, target_id: str) -> list[str]:
        return self.reference_mapper.find_reference_path(source_id, target_id)

    # Visualization

    def render_visualization(self, reference_map: ReferenceMap) -> str:
        return render_visualization(reference_map)

    def visualize_references(self) -> str:
        """Render the full reference map."""
        return render_visualization(self.generate_reference_map())
