"""
Services for WorkGraph.

High-level business logic services:
- WorkGraph: Unified interface for all reference operations
- SmartReferenceEngine: Reference generation and persistence
- SuggestionEngine: Contextual suggestions from references
- ReferenceMapper: Reference maps, clusters and paths
- render_visualization: ASCII report of a reference map
"""

from workgraph.services.reference_engine import SmartReferenceEngine
from workgraph.services.reference_mapper import ReferenceMapper
from workgraph.services.suggestion_engine import SuggestionEngine
from workgraph.services.visualizer import render_visualization
from workgraph.services.work_graph import WorkGraph

__all__ = [
    "WorkGraph",
    "SmartReferenceEngine",
    "SuggestionEngine",
    "ReferenceMapper",
    "render_visualization",
]
