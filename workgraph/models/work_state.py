"""Work state enriched with reference-derived suggestions."""

from pydantic import BaseModel, Field

from workgraph.models.references import ContextualSuggestion
from workgraph.models.work_item import WorkItem


class EnhancedWorkState(BaseModel):
    """Active items plus contextual suggestions, grouped by suggestion type."""

    active_items: list[WorkItem] = Field(default_factory=list)
    smart_suggestions: list[ContextualSuggestion] = Field(default_factory=list)
    suggestions_by_type: dict[str, list[ContextualSuggestion]] = Field(default_factory=dict)
