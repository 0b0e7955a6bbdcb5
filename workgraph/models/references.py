"""
Reference models: similarity scores, smart references and suggestions.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class RelationshipType(str, Enum):
    """Types of relationships between work items."""

    RELATED = "related"
    CONTINUATION = "continuation"
    CONFLICT = "conflict"
    DEPENDENCY = "dependency"


class SuggestionType(str, Enum):
    """Kinds of contextual suggestion."""

    CONTINUE_WORK = "continue_work"
    REVIEW_CONFLICT = "review_conflict"
    PROMOTE_HISTORICAL = "promote_historical"
    REFERENCE_DECISION = "reference_decision"


class SuggestionPriority(str, Enum):
    """Suggestion priority."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank, higher first."""
        return {"high": 3, "medium": 2, "low": 1}[self.value]


class SimilarityScore(BaseModel):
    """Multi-dimension similarity between two work items."""

    total_score: float = Field(..., ge=0.0, le=1.0)
    keyword_score: float = Field(..., ge=0.0, le=1.0)
    domain_score: float = Field(..., ge=0.0, le=1.0)
    location_score: float = Field(..., ge=0.0, le=1.0)
    strategic_score: float = Field(..., ge=0.0, le=1.0)
    content_score: float = Field(..., ge=0.0, le=1.0)

    common_keywords: list[str] = Field(default_factory=list)
    domain_overlap: list[str] = Field(default_factory=list)
    code_location_overlap: list[str] = Field(default_factory=list)
    strategic_alignment: str = ""

    def aligned_dimensions(self) -> int:
        """Count dimensions with a meaningful match; drives the confidence boost."""
        return sum(
            [
                self.keyword_score > 0.3,
                self.domain_score > 0,
                self.location_score > 0.3,
                self.strategic_score > 0,
            ]
        )

    def overlap_details(self) -> dict[str, Any]:
        """Overlap lists attached to a reference's metadata."""
        return {
            "common_keywords": list(self.common_keywords),
            "domain_overlap": list(self.domain_overlap),
            "code_location_overlap": list(self.code_location_overlap),
            "strategic_alignment": self.strategic_alignment,
        }


class StoredReference(BaseModel):
    """Persisted form of a smart reference, read directly by other tooling."""

    model_config = {"extra": "ignore"}

    target_id: str
    similarity_score: float = Field(..., ge=0.0, le=1.0)
    relationship_type: RelationshipType = RelationshipType.RELATED
    confidence: float = Field(..., ge=0.0, le=1.0)
    auto_generated: bool = True


class SmartReference(BaseModel):
    """Directed, scored, typed link from one work item to another."""

    id: str
    target_item_id: str
    similarity_score: float = Field(..., ge=0.0, le=1.0)
    confidence: float = Field(..., ge=0.0, le=1.0)
    relationship_type: RelationshipType
    auto_generated: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_stored(self) -> StoredReference:
        """Convert to the on-disk form."""
        return StoredReference(
            target_id=self.target_item_id,
            similarity_score=self.similarity_score,
            relationship_type=self.relationship_type,
            confidence=self.confidence,
            auto_generated=self.auto_generated,
        )


class ContextualSuggestion(BaseModel):
    """User-facing recommendation derived from a high-confidence reference."""

    type: SuggestionType
    priority: SuggestionPriority
    message: str
    target_item_id: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    action_hint: str | None = None
