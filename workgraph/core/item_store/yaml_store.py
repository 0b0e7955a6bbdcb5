"""
YAML file item store.

Layout under ``data_dir``::

    active/<item_id>.yaml
    history/<item_id>.yaml

One work item per file. Unreadable files are logged and skipped on load so a
single bad file never hides the rest of the work state.
"""

import re
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from workgraph.core.item_store.base import ItemStore, matches_keyword
from workgraph.models.work_item import WorkItem
from workgraph.utils.exceptions import InvalidItemIdError, ItemStoreError
from workgraph.utils.logger import get_logger

logger = get_logger(__name__)

_SAFE_ID = re.compile(r"^[A-Za-z0-9_.-]+$")


class YamlItemStore(ItemStore):
    """Item store persisting each work item as a YAML document."""

    def __init__(self, data_dir: str | Path):
        """
        Initialize the YAML store.

        Args:
            data_dir: Root directory holding ``active/`` and ``history/``
        """
        self.data_dir = Path(data_dir).expanduser()
        self.active_dir = self.data_dir / "active"
        self.history_dir = self.data_dir / "history"
        self.active_dir.mkdir(parents=True, exist_ok=True)
        self.history_dir.mkdir(parents=True, exist_ok=True)

    # ═══════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════

    def load_active_items(self) -> list[WorkItem]:
        return self._load_dir(self.active_dir)

    def get_historical_item(self, item_id: str) -> WorkItem | None:
        if not _SAFE_ID.match(item_id):
            return None
        path = self.history_dir / f"{item_id}.yaml"
        if not path.exists():
            return None
        return self._read_item(path)

    def query_history(self, keyword: str) -> list[WorkItem]:
        if not keyword:
            return []
        return [item for item in self._load_dir(self.history_dir) if matches_keyword(item, keyword)]

    def _load_dir(self, directory: Path) -> list[WorkItem]:
        items = []
        for path in sorted(directory.glob("*.yaml")):
            item = self._read_item(path)
            if item is not None:
                items.append(item)
        return items

    def _read_item(self, path: Path) -> WorkItem | None:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            return WorkItem.model_validate(data or {})
        except (OSError, UnicodeDecodeError, yaml.YAMLError, PydanticValidationError) as e:
            logger.warning(f"Skipping unreadable work item file {path}: {e}")
            return None

    # ═══════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════

    def save_work_item(self, item: WorkItem) -> None:
        """
        Write an item next to its existing file, or into ``active/`` when new.

        Raises:
            InvalidItemIdError: If the item ID cannot be used as a file name
            ItemStoreError: If the file cannot be written
        """
        if not _SAFE_ID.match(item.id):
            raise InvalidItemIdError(item.id)

        history_path = self.history_dir / f"{item.id}.yaml"
        active_path = self.active_dir / f"{item.id}.yaml"
        path = history_path if history_path.exists() and not active_path.exists() else active_path

        data = item.model_dump(mode="json")
        tmp_path = path.with_suffix(".yaml.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
            tmp_path.replace(path)
        except (OSError, yaml.YAMLError) as e:
            tmp_path.unlink(missing_ok=True)
            raise ItemStoreError(f"Failed to save work item: {e}", item_id=item.id, path=str(path)) from e

        logger.debug(f"Saved work item {item.id} to {path}")
