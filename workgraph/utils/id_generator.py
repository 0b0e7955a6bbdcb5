"""
ID generation utilities for WorkGraph.

- Work items: item_xxx
- Smart references: ref_xxx
"""

from uuid import uuid4


def generate_item_id() -> str:
    """
    Generate unique work item ID.

    Returns:
        ID in format "item_xxx" where xxx is 12 hex characters
    """
    return f"item_{uuid4().hex[:12]}"


def generate_reference_id() -> str:
    """
    Generate unique smart reference ID.

    Returns:
        ID in format "ref_xxx" where xxx is 12 hex characters
    """
    return f"ref_{uuid4().hex[:12]}"
