"""
Factory for creating item store backends.
"""

from workgraph.config import Config
from workgraph.core.item_store.base import ItemStore
from workgraph.core.item_store.memory_store import InMemoryItemStore
from workgraph.core.item_store.yaml_store import YamlItemStore
from workgraph.utils.exceptions import ConfigurationError


class ItemStoreFactory:
    """Factory for creating item store backends from configuration."""

    @staticmethod
    def create(config: Config) -> ItemStore:
        """
        Create item store from configuration.

        Args:
            config: Main configuration object

        Returns:
            Item store instance

        Raises:
            ConfigurationError: If backend is not supported
        """
        if config.store_backend == "yaml":
            return YamlItemStore(data_dir=config.store.data_dir)
        elif config.store_backend == "memory":
            return InMemoryItemStore()
        else:
            raise ConfigurationError(
                f"Unsupported item store backend: {config.store_backend}",
                {"store_backend": config.store_backend},
            )
