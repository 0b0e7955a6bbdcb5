"""Tests for the WorkGraph exception hierarchy."""

from workgraph.utils import (
    ConfigurationError,
    InvalidItemIdError,
    ItemNotFoundError,
    ItemStoreError,
    WorkGraphError,
)


class TestExceptions:
    """Tests for exception context and messages."""

    def test_context_in_str(self):
        """Test context details are appended to the message."""
        error = ConfigurationError("Unsupported item store backend", {"store_backend": "sqlite"})

        assert str(error) == "Unsupported item store backend (store_backend=sqlite)"
        assert error.message == "Unsupported item store backend"

    def test_plain_message(self):
        """Test errors without context print only the message."""
        assert str(WorkGraphError("boom")) == "boom"

    def test_item_store_error_context(self):
        """Test store errors record the item and path."""
        error = ItemStoreError("Failed to save work item", item_id="a", path="/data/active/a.yaml")

        assert error.context == {"item_id": "a", "path": "/data/active/a.yaml"}

    def test_invalid_item_id(self):
        """Test invalid IDs are store errors carrying the ID."""
        error = InvalidItemIdError("../escape")

        assert isinstance(error, ItemStoreError)
        assert error.message == "Invalid work item id: '../escape'"
        assert error.item_id == "../escape"

    def test_item_not_found(self):
        """Test not-found messages distinguish active lookups."""
        assert ItemNotFoundError("a").message == "Work item not found: a"
        assert ItemNotFoundError("a", active_only=True).message == "Active work item not found: a"
