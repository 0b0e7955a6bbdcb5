"""
WorkGraph - reference and relationship graph engine for work items.

Discovers, scores and classifies relationships between todos, plans,
proposals and findings, and exposes them as a queryable graph.
"""

from workgraph.config import Config
from workgraph.services.work_graph import WorkGraph

__version__ = "0.1.0"

__all__ = ["Config", "WorkGraph", "__version__"]
