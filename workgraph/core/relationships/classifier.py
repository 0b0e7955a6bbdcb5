"""
Relationship classification from trigger phrases.

Rules are checked in order and the first match wins, so an item mentioning
both "continue" and "instead" is a continuation. A rule fires when either
item's content contains one of its phrases; the check is directionless.
"""

from dataclasses import dataclass

from workgraph.models.references import RelationshipType
from workgraph.models.work_item import WorkItem


@dataclass(frozen=True)
class ClassificationRule:
    """Trigger phrases mapped to a relationship type."""

    relationship_type: RelationshipType
    phrases: tuple[str, ...]

    def matches(self, *contents: str) -> bool:
        return any(phrase in content for content in contents for phrase in self.phrases)


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(RelationshipType.CONTINUATION, ("continue", "follow up")),
    ClassificationRule(RelationshipType.CONFLICT, ("instead", "alternative")),
    ClassificationRule(RelationshipType.DEPENDENCY, ("depends on", "requires")),
)


class RelationshipClassifier:
    """Labels a pair of work items with a relationship type."""

    def __init__(
        self,
        rules: tuple[ClassificationRule, ...] = DEFAULT_RULES,
        default: RelationshipType = RelationshipType.RELATED,
    ):
        self.rules = rules
        self.default = default

    def classify(self, item1: WorkItem, item2: WorkItem) -> RelationshipType:
        content1 = item1.content.lower()
        content2 = item2.content.lower()

        for rule in self.rules:
            if rule.matches(content1, content2):
                return rule.relationship_type
        return self.default
