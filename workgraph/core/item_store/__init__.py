"""
Item store implementations for WorkGraph.

Available backends:
- YamlItemStore: one YAML file per work item under active/ and history/
- InMemoryItemStore: dictionaries, for tests and embedding
"""

from workgraph.core.item_store.base import ItemStore
from workgraph.core.item_store.factory import ItemStoreFactory
from workgraph.core.item_store.memory_store import InMemoryItemStore
from workgraph.core.item_store.yaml_store import YamlItemStore

__all__ = [
    "ItemStore",
    "ItemStoreFactory",
    "InMemoryItemStore",
    "YamlItemStore",
]
