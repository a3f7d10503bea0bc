"""Cross-reference resolution for display joins.

References between records are plain integer ids. They are resolved here at
read time only and may dangle; callers treat ``None`` as "not found".
"""

from typing import Iterable, Optional, Protocol, TypeVar


class _Identified(Protocol):
    id: int


RecordT = TypeVar("RecordT", bound=_Identified)

NOT_FOUND_LABEL = "Unknown"


def find_by_id(collection: Iterable[RecordT], record_id: int) -> Optional[RecordT]:
    """Return the first record whose ``id`` equals ``record_id``, else None."""
    for record in collection:
        if record.id == record_id:
            return record
    return None


def resolve_display_name(collection: Iterable[RecordT], record_id: int) -> Optional[str]:
    """Resolve a reference to the referenced record's display name.

    Args:
        collection: Patients or staff
        record_id: Referenced id

    Returns:
        ``"Name Surname"`` of the referenced record, or None when it does not exist
    """
    record = find_by_id(collection, record_id)
    if record is None:
        return None
    return record.display_name
