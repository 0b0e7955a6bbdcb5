"""Relationship inference building blocks."""

from workgraph.core.relationships.classifier import (
    DEFAULT_RULES,
    ClassificationRule,
    RelationshipClassifier,
)
from workgraph.core.relationships.metadata import MetadataExtractor, tokenize
from workgraph.core.relationships.similarity import SimilarityScorer

__all__ = [
    "MetadataExtractor",
    "SimilarityScorer",
    "RelationshipClassifier",
    "ClassificationRule",
    "DEFAULT_RULES",
    "tokenize",
]
