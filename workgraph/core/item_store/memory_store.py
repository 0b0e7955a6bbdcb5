"""In-memory item store, used for tests and embedding the engine."""

from workgraph.core.item_store.base import ItemStore, matches_keyword
from workgraph.models.work_item import WorkItem


class InMemoryItemStore(ItemStore):
    """
    Item store holding active and historical items in dictionaries.

    Reads return deep copies so callers mutate their own snapshot, the same
    way a file-backed store hands out freshly parsed items.
    """

    def __init__(
        self,
        active_items: list[WorkItem] | None = None,
        historical_items: list[WorkItem] | None = None,
    ):
        self._active: dict[str, WorkItem] = {}
        self._history: dict[str, WorkItem] = {}
        self.save_count = 0

        for item in active_items or []:
            self.add_active(item)
        for item in historical_items or []:
            self.add_historical(item)

    def add_active(self, item: WorkItem) -> None:
        self._active[item.id] = item.model_copy(deep=True)

    def add_historical(self, item: WorkItem) -> None:
        self._history[item.id] = item.model_copy(deep=True)

    def load_active_items(self) -> list[WorkItem]:
        return [item.model_copy(deep=True) for item in self._active.values()]

    def get_historical_item(self, item_id: str) -> WorkItem | None:
        item = self._history.get(item_id)
        return item.model_copy(deep=True) if item else None

    def query_history(self, keyword: str) -> list[WorkItem]:
        return [
            item.model_copy(deep=True)
            for item in self._history.values()
            if matches_keyword(item, keyword)
        ]

    def save_work_item(self, item: WorkItem) -> None:
        self.save_count += 1
        if item.id in self._history and item.id not in self._active:
            self._history[item.id] = item.model_copy(deep=True)
        else:
            self._active[item.id] = item.model_copy(deep=True)
