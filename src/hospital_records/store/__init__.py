"""Store module.

Identifier allocation, cross-reference resolution and the JSON persistence
gateway for the hospital dataset.
"""

from hospital_records.store.identifiers import next_id
from hospital_records.store.json_store import JsonStore
from hospital_records.store.resolver import find_by_id, resolve_display_name

__all__ = [
    "JsonStore",
    "find_by_id",
    "next_id",
    "resolve_display_name",
]
