"""Record identifier allocation.

Identifiers are allocated per collection as ``len(collection) + 1``. No
record is ever removed, so this numbering stays dense (1..N in insertion
order) and matches what the operator sees after editing the data file by
hand. If deletion is ever added, this must become ``max(id) + 1``.
"""

import logging
from typing import Sized

logger = logging.getLogger(__name__)


def next_id(collection: Sized) -> int:
    """Return the identifier for the next record appended to ``collection``.

    Args:
        collection: Existing records of one type

    Returns:
        ``len(collection) + 1``
    """
    new_id = len(collection) + 1
    logger.debug(f"Allocated identifier {new_id}")
    return new_id
