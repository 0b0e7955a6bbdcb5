"""
Base interface for work item storage.

The reference engine reaches work items only through this interface, so
tests can inject fakes and the persistence format stays external.
"""

from abc import ABC, abstractmethod

from workgraph.models.work_item import WorkItem


class ItemStore(ABC):
    """Abstract base class for work item stores."""

    @abstractmethod
    def load_active_items(self) -> list[WorkItem]:
        """
        Load all active work items.

        Returns:
            Active items; fresh copies on every call
        """
        pass

    @abstractmethod
    def get_historical_item(self, item_id: str) -> WorkItem | None:
        """
        Retrieve a historical (archived) work item by ID.

        Args:
            item_id: Work item identifier

        Returns:
            WorkItem or None if not found
        """
        pass

    @abstractmethod
    def query_history(self, keyword: str) -> list[WorkItem]:
        """
        Search historical items whose content contains a keyword.

        Args:
            keyword: Case-insensitive substring to match against content

        Returns:
            Matching historical items
        """
        pass

    @abstractmethod
    def save_work_item(self, item: WorkItem) -> None:
        """
        Persist a work item, replacing any stored version with the same ID.

        Args:
            item: Work item to save
        """
        pass

    def find_item(self, item_id: str) -> WorkItem | None:
        """
        Resolve an item in the active set first, then in history.

        Args:
            item_id: Work item identifier

        Returns:
            WorkItem or None if not found anywhere
        """
        for item in self.load_active_items():
            if item.id == item_id:
                return item
        return self.get_historical_item(item_id)


def matches_keyword(item: WorkItem, keyword: str) -> bool:
    """Case-insensitive substring match of a keyword against item content."""
    if not keyword:
        return False
    return keyword.lower() in item.content.lower()
