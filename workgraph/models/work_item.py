"""
Work item model and its similarity metadata.

Work items are owned by the external item store. The reference engine reads
them and rewrites only ``metadata.smart_references`` (and caches
``metadata.similarity_metadata`` the first time it is derived).
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from workgraph.models.references import StoredReference
from workgraph.utils.id_generator import generate_item_id


class WorkItemType(str, Enum):
    """Kinds of captured work."""

    TODO = "todo"
    PLAN = "plan"
    PROPOSAL = "proposal"
    FINDING = "finding"
    REPORT = "report"
    SUMMARY = "summary"


class WorkItemStatus(str, Enum):
    """Work item lifecycle status."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


def _unique(values: list[str]) -> list[str]:
    """De-duplicate while keeping first-seen order."""
    return list(dict.fromkeys(values))


class SimilarityMetadata(BaseModel):
    """
    Derived keyword/domain tags used to compare work items.

    ``keywords`` and ``code_locations`` behave as sets for scoring but keep
    their extraction order, which decides the top keywords used for search.
    """

    keywords: list[str] = Field(default_factory=list)
    feature_domain: str = ""
    technical_domain: str = ""
    code_locations: list[str] = Field(default_factory=list)
    strategic_theme: str = ""

    @field_validator("keywords", "code_locations")
    @classmethod
    def _dedupe(cls, values: list[str]) -> list[str]:
        return _unique(values)


class WorkItemMetadata(BaseModel):
    """Work item metadata. Keys written by other tooling are kept as extras."""

    model_config = ConfigDict(extra="allow")

    similarity_metadata: SimilarityMetadata | None = None
    smart_references: list[StoredReference] = Field(default_factory=list)
    priority: str | None = None
    tags: list[str] = Field(default_factory=list)


class WorkItem(BaseModel):
    """An atomic captured unit of work (todo, plan, proposal, finding, ...)."""

    id: str = Field(default_factory=generate_item_id, description="Unique work item ID")
    type: WorkItemType = Field(default=WorkItemType.TODO, description="Work item kind")
    content: str = Field(default="", description="Free text content")
    status: WorkItemStatus = Field(default=WorkItemStatus.PENDING, description="Lifecycle status")
    timestamp: datetime = Field(default_factory=datetime.now, description="Capture timestamp")
    metadata: WorkItemMetadata = Field(default_factory=WorkItemMetadata)

    @property
    def similarity(self) -> SimilarityMetadata:
        """Similarity metadata, or an empty default when it was never derived."""
        return self.metadata.similarity_metadata or SimilarityMetadata()
