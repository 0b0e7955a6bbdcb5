"""
Exception hierarchy for WorkGraph.

Engine operations are soft and report "nothing found" with empty results;
these exceptions are raised only at the edges (stores, configuration, API).
"""


class WorkGraphError(Exception):
    """
    Base exception for all WorkGraph errors.

    ``context`` carries the identifiers involved (item ID, file path, backend
    name) so API handlers and logs can report them without parsing messages.
    """

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class ItemStoreError(WorkGraphError):
    """A work item file could not be written or parsed."""

    def __init__(self, message: str, item_id: str | None = None, path: str | None = None):
        context = {}
        if item_id is not None:
            context["item_id"] = item_id
        if path is not None:
            context["path"] = path
        super().__init__(message, context)
        self.item_id = item_id
        self.path = path


class InvalidItemIdError(ItemStoreError):
    """The item ID cannot be used as a file name."""

    def __init__(self, item_id: str):
        super().__init__(f"Invalid work item id: {item_id!r}", item_id=item_id)


class ItemNotFoundError(WorkGraphError):
    """No work item with the requested ID exists (in the active set when ``active_only``)."""

    def __init__(self, item_id: str, active_only: bool = False):
        kind = "Active work item" if active_only else "Work item"
        super().__init__(f"{kind} not found: {item_id}", {"item_id": item_id})
        self.item_id = item_id
        self.active_only = active_only


class ConfigurationError(WorkGraphError):
    """Configuration is invalid or names an unsupported backend."""
