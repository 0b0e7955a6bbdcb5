"""Contextual suggestions derived from high-confidence smart references."""

from dataclasses import dataclass

from workgraph.config import Config
from workgraph.core.item_store.base import ItemStore
from workgraph.models.references import (
    ContextualSuggestion,
    RelationshipType,
    SmartReference,
    SuggestionPriority,
    SuggestionType,
)
from workgraph.models.work_item import WorkItem
from workgraph.models.work_state import EnhancedWorkState
from workgraph.services.reference_engine import SmartReferenceEngine
from workgraph.utils.logger import get_logger

logger = get_logger(__name__)

PREVIEW_LENGTH = 80


@dataclass(frozen=True)
class SuggestionTemplate:
    type: SuggestionType
    priority: SuggestionPriority
    message: str  # formatted with {preview}
    action_hint: str


SUGGESTION_TEMPLATES: dict[RelationshipType, SuggestionTemplate] = {
    RelationshipType.CONTINUATION: SuggestionTemplate(
        type=SuggestionType.CONTINUE_WORK,
        priority=SuggestionPriority.HIGH,
        message='Consider reviewing previous work: "{preview}..." before continuing',
        action_hint="Promote this item to active work to bring its context along",
    ),
    RelationshipType.CONFLICT: SuggestionTemplate(
        type=SuggestionType.REVIEW_CONFLICT,
        priority=SuggestionPriority.HIGH,
        message='Potential conflict with previous decision: "{preview}..."',
        action_hint="Review the historical item to ensure consistency",
    ),
    RelationshipType.DEPENDENCY: SuggestionTemplate(
        type=SuggestionType.PROMOTE_HISTORICAL,
        priority=SuggestionPriority.MEDIUM,
        message='Current work may depend on: "{preview}..."',
        action_hint="Consider if this dependency affects current implementation",
    ),
    RelationshipType.RELATED: SuggestionTemplate(
        type=SuggestionType.REFERENCE_DECISION,
        priority=SuggestionPriority.LOW,
        message='Related previous work: "{preview}..."',
        action_hint="May provide useful context or lessons learned",
    ),
}


class SuggestionEngine:
    """Turns generated references into prioritized, human-readable suggestions."""

    def __init__(
        self,
        item_store: ItemStore,
        reference_engine: SmartReferenceEngine,
        config: Config | None = None,
    ):
        """
        Initialize suggestion engine.

        Args:
            item_store: Store used to resolve reference targets
            reference_engine: Engine generating references per active item
            config: Configuration (defaults when omitted)
        """
        self.item_store = item_store
        self.reference_engine = reference_engine
        self.config = config or Config()
        self.confidence_threshold = self.config.references.confidence_threshold

    def get_contextual_suggestions(self, active_items: list[WorkItem]) -> list[ContextualSuggestion]:
        """
        Suggestions for every reference with confidence >= threshold.

        Ordered by priority (high first), then confidence descending.
        """
        suggestions = []
        for item in active_items:
            for reference in self.reference_engine.generate_automatic_references(item):
                if reference.confidence < self.confidence_threshold:
                    continue
                suggestion = self.create_suggestion(reference)
                if suggestion is not None:
                    suggestions.append(suggestion)

        suggestions.sort(key=lambda s: (-s.priority.rank, -s.confidence))
        logger.debug(f"Built {len(suggestions)} suggestions for {len(active_items)} active items")
        return suggestions

    def create_suggestion(self, reference: SmartReference) -> ContextualSuggestion | None:
        """Suggestion for one reference; None when its target left history."""
        target = self.item_store.get_historical_item(reference.target_item_id)
        if target is None:
            return None

        template = SUGGESTION_TEMPLATES.get(
            reference.relationship_type, SUGGESTION_TEMPLATES[RelationshipType.RELATED]
        )
        return ContextualSuggestion(
            type=template.type,
            priority=template.priority,
            message=template.message.format(preview=target.content[:PREVIEW_LENGTH]),
            target_item_id=reference.target_item_id,
            confidence=reference.confidence,
            action_hint=template.action_hint,
        )

    def get_enhanced_work_state(self) -> EnhancedWorkState:
        active_items = self.item_store.load_active_items()
        suggestions = self.get_contextual_suggestions(active_items)

        grouped: dict[str, list[ContextualSuggestion]] = {}
        for suggestion in suggestions:
            grouped.setdefault(suggestion.type.value, []).append(suggestion)

        return EnhancedWorkState(
            active_items=active_items,
            smart_suggestions=suggestions,
            suggestions_by_type=grouped,
        )
