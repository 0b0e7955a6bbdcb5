"""
Smart reference generation.

For a work item this engine:
1. Collects candidate historical items by keyword and domain search
2. Scores each candidate across five similarity dimensions
3. Keeps candidates above the similarity threshold and rates confidence
4. Classifies the relationship and emits ranked SmartReferences

``update_references_on_change`` additionally persists the regenerated list and
runs the reciprocal scan, which appends one-directional references from other
active items to the changed item. Those reciprocal edges are directed on
purpose: A may reference B with a different type than B references A, or
not at all.
"""

from workgraph.config import Config
from workgraph.core.item_store.base import ItemStore
from workgraph.core.relationships.classifier import RelationshipClassifier
from workgraph.core.relationships.metadata import MetadataExtractor
from workgraph.core.relationships.similarity import SimilarityScorer
from workgraph.models.references import SimilarityScore, SmartReference
from workgraph.models.work_item import SimilarityMetadata, WorkItem
from workgraph.utils.id_generator import generate_reference_id
from workgraph.utils.logger import get_logger

logger = get_logger(__name__)


class SmartReferenceEngine:
    """Discovers, scores and persists references between work items."""

    def __init__(
        self,
        item_store: ItemStore,
        config: Config | None = None,
        extractor: MetadataExtractor | None = None,
        scorer: SimilarityScorer | None = None,
        classifier: RelationshipClassifier | None = None,
    ):
        """
        Initialize smart reference engine.

        Args:
            item_store: Store providing active and historical work items
            config: Configuration (defaults when omitted)
            extractor: Metadata extractor override
            scorer: Similarity scorer override
            classifier: Relationship classifier override
        """
        self.item_store = item_store
        self.config = config or Config()
        settings = self.config.references

        self.similarity_threshold = settings.similarity_threshold
        self.max_search_keywords = settings.max_search_keywords
        self.max_candidates = settings.max_candidates

        self.extractor = extractor or MetadataExtractor(
            max_keywords=settings.max_keywords,
            min_keyword_length=settings.min_keyword_length,
            default_domain=settings.default_domain,
        )
        self.scorer = scorer or SimilarityScorer(
            weights=settings.weights, max_content_words=settings.max_content_words
        )
        self.classifier = classifier or RelationshipClassifier()

    # ═══════════════════════════════════════════════════════════
    # SCORING
    # ═══════════════════════════════════════════════════════════

    def ensure_metadata(self, item: WorkItem) -> SimilarityMetadata:
        """Derive and cache similarity metadata on the item if it has none."""
        if item.metadata.similarity_metadata is None:
            item.metadata.similarity_metadata = self.extractor.extract(item.content)
        return item.metadata.similarity_metadata

    def calculate_semantic_similarity(self, item1: WorkItem, item2: WorkItem) -> SimilarityScore:
        """Score two items. Missing metadata counts as empty."""
        return self.scorer.score(item1, item2)

    @staticmethod
    def calculate_confidence(similarity: SimilarityScore) -> float:
        """Total score plus 0.1 per aligned dimension, capped at 1.0."""
        return min(similarity.total_score + 0.1 * similarity.aligned_dimensions(), 1.0)

    # ═══════════════════════════════════════════════════════════
    # GENERATION
    # ═══════════════════════════════════════════════════════════

    def generate_automatic_references(self, item: WorkItem) -> list[SmartReference]:
        """
        Generate ranked references from an item to related historical items.

        Does not write to the store.

        Args:
            item: Source work item

        Returns:
            References with similarity >= threshold, highest similarity first
        """
        self.ensure_metadata(item)

        references = []
        for candidate in self.get_relevant_historical_items(item):
            similarity = self.calculate_semantic_similarity(item, candidate)
            if similarity.total_score >= self.similarity_threshold:
                references.append(self.build_reference(item, candidate, similarity))

        references.sort(key=lambda ref: ref.similarity_score, reverse=True)
        logger.debug(f"Generated {len(references)} references for {item.id}")
        return references

    def get_relevant_historical_items(self, item: WorkItem) -> list[WorkItem]:
        """Historical candidates found by top keywords and domains, deduplicated and capped."""
        metadata = item.similarity

        search_terms = list(metadata.keywords[: self.max_search_keywords])
        if metadata.feature_domain:
            search_terms.append(metadata.feature_domain)
        if metadata.technical_domain:
            search_terms.append(metadata.technical_domain)

        candidates: dict[str, WorkItem] = {}
        for term in search_terms:
            for candidate in self.item_store.query_history(term):
                if candidate.id != item.id and candidate.id not in candidates:
                    candidates[candidate.id] = candidate

        logger.debug(f"Found {len(candidates)} candidate items for {item.id}")
        return list(candidates.values())[: self.max_candidates]

    def build_reference(
        self, source: WorkItem, target: WorkItem, similarity: SimilarityScore
    ) -> SmartReference:
        return SmartReference(
            id=generate_reference_id(),
            target_item_id=target.id,
            similarity_score=similarity.total_score,
            confidence=self.calculate_confidence(similarity),
            relationship_type=self.classifier.classify(source, target),
            auto_generated=True,
            metadata=similarity.overlap_details(),
        )

    def generate_smart_references(self, item_id: str) -> list[SmartReference]:
        """Generate references for an item looked up by ID; empty when not found."""
        item = self.item_store.find_item(item_id)
        if item is None:
            logger.debug(f"Work item {item_id} not found, no references generated")
            return []
        return self.generate_automatic_references(item)

    def calculate_similarity(self, item_id_1: str, item_id_2: str) -> SimilarityScore | None:
        """Score two items looked up by ID; None when either is missing."""
        item1 = self.item_store.find_item(item_id_1)
        item2 = self.item_store.find_item(item_id_2)
        if item1 is None or item2 is None:
            return None
        return self.calculate_semantic_similarity(item1, item2)

    # ═══════════════════════════════════════════════════════════
    # PERSISTENCE
    # ═══════════════════════════════════════════════════════════

    def update_references_on_change(self, item_id: str) -> None:
        """
        Regenerate and persist references for a changed active item, then
        cross-reference other active items that are similar to it.

        Args:
            item_id: ID of the active item that changed
        """
        active_items = self.item_store.load_active_items()
        changed = next((item for item in active_items if item.id == item_id), None)
        if changed is None:
            logger.debug(f"Active item {item_id} not found, skipping reference update")
            return

        references = self.generate_automatic_references(changed)
        changed.metadata.smart_references = [ref.to_stored() for ref in references]
        self.item_store.save_work_item(changed)
        logger.info(f"Stored {len(references)} smart references for {item_id}")

        cross_references = 0
        for other in active_items:
            if other.id == item_id:
                continue
            self.ensure_metadata(other)
            similarity = self.calculate_semantic_similarity(other, changed)
            if similarity.total_score >= self.similarity_threshold:
                reference = self.build_reference(other, changed, similarity)
                # one reference per target: replace any earlier one to the changed item
                kept = [ref for ref in other.metadata.smart_references if ref.target_id != item_id]
                other.metadata.smart_references = [*kept, reference.to_stored()]
                self.item_store.save_work_item(other)
                cross_references += 1

        if cross_references:
            logger.info(f"Added {cross_references} cross-references pointing at {item_id}")
