"""Shared fixtures for WorkGraph tests.

Work items are built with explicit similarity metadata wherever a test depends
on exact scores, so expectations do not hinge on the extraction vocabularies.
"""

from datetime import datetime

import pytest

from workgraph.config import Config
from workgraph.core.item_store import InMemoryItemStore
from workgraph.models import (
    RelationshipType,
    SimilarityMetadata,
    StoredReference,
    WorkItem,
    WorkItemMetadata,
    WorkItemStatus,
    WorkItemType,
)

# Metadata shared by the session-storage scenario
SESSION_TAGS = {
    "keywords": ["redis", "sessions", "storage"],
    "feature_domain": "user-management",
    "technical_domain": "database",
    "code_locations": ["services/session_store.py"],
    "strategic_theme": "performance",
}


def build_item(
    item_id: str,
    content: str,
    *,
    item_type: str = "todo",
    status: str = "pending",
    similarity: SimilarityMetadata | dict | None = None,
    references: list[StoredReference] | None = None,
    **extra,
) -> WorkItem:
    if isinstance(similarity, dict):
        similarity = SimilarityMetadata(**similarity)
    return WorkItem(
        id=item_id,
        type=WorkItemType(item_type),
        content=content,
        status=WorkItemStatus(status),
        timestamp=datetime(2024, 5, 1, 9, 30),
        metadata=WorkItemMetadata(
            similarity_metadata=similarity,
            smart_references=references or [],
            **extra,
        ),
    )


def build_ref(
    target_id: str,
    score: float = 0.8,
    relationship_type: RelationshipType = RelationshipType.RELATED,
    confidence: float = 0.9,
) -> StoredReference:
    return StoredReference(
        target_id=target_id,
        similarity_score=score,
        relationship_type=relationship_type,
        confidence=confidence,
    )


@pytest.fixture
def make_item():
    """Factory for work items with fixed timestamps."""
    return build_item


@pytest.fixture
def make_ref():
    """Factory for persisted references."""
    return build_ref


@pytest.fixture
def config():
    """Default configuration."""
    return Config()


@pytest.fixture
def session_store():
    """
    Store for the session-storage scenario.

    - active-sessions: switches to MongoDB "instead" of Redis
    - decision-redis: earlier decision to use Redis (conflict, ~0.79)
    - session-cleanup: "follow up" on Redis expiry (continuation, ~0.72)
    - redis-onboarding: mentions redis but shares nothing else (~0.002)
    - ci-runners: unrelated, never a candidate
    """
    active = [
        build_item(
            "active-sessions",
            "Move session storage: use MongoDB instead of Redis",
            similarity=SESSION_TAGS,
        ),
    ]
    history = [
        build_item(
            "decision-redis",
            "Decision: use Redis for sessions",
            item_type="finding",
            status="completed",
            similarity=SESSION_TAGS,
        ),
        build_item(
            "session-cleanup",
            "Follow up on redis session expiry",
            status="completed",
            similarity={
                "keywords": ["redis", "sessions", "expiry"],
                "feature_domain": "user-management",
                "technical_domain": "database",
                "code_locations": ["services/session_store.py"],
                "strategic_theme": "performance",
            },
        ),
        build_item(
            "redis-onboarding",
            "Write redis onboarding docs for new hires",
            item_type="plan",
            status="completed",
            similarity={
                "keywords": ["onboarding", "docs", "hires"],
                "code_locations": ["docs"],
                "strategic_theme": "user-experience",
            },
        ),
        build_item(
            "ci-runners",
            "Upgrade CI runners",
            status="completed",
            similarity={"keywords": ["upgrade", "runners"], "technical_domain": "infrastructure"},
        ),
    ]
    return InMemoryItemStore(active_items=active, historical_items=history)
