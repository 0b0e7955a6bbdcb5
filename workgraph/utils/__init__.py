"""Utility modules for WorkGraph."""

from workgraph.utils.exceptions import (
    ConfigurationError,
    InvalidItemIdError,
    ItemNotFoundError,
    ItemStoreError,
    WorkGraphError,
)
from workgraph.utils.id_generator import generate_item_id, generate_reference_id
from workgraph.utils.logger import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # ID Generators
    "generate_item_id",
    "generate_reference_id",
    # Exceptions
    "WorkGraphError",
    "ItemStoreError",
    "InvalidItemIdError",
    "ItemNotFoundError",
    "ConfigurationError",
]
