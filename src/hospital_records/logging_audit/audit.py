"""Audit trail functionality for Hospital Records.

Every mutating record operation leaves one structured audit line so the
operator can reconstruct what was changed and whether it reached disk.
"""

import time
import uuid
from typing import Any, Dict

from .logger import get_logger

logger = get_logger(__name__)


def log_audit_event(event_type: str, details: Dict[str, Any]) -> None:
    """Log an audit trail event.
    
    Audit events are logged at INFO level for successful operations and ERROR
    level for failures.
    
    Args:
        event_type: Type of operation (e.g., "PATIENT_ADDED", "INVOICE_STATUS_UPDATED",
                   "STORE_SAVED", "STORE_CORRUPT")
        details: Dictionary with event details. Common fields include:
                - status: "success" or "failure"
                - entity: Record type affected
                - record_id: Identifier of the affected record
                - data_file: Path of the persisted document
                - error_message: Error details (if status is failure)
                - correlation_id: Optional correlation ID for tracking related events
                
    Example:
        >>> log_audit_event("PATIENT_ADDED", {
        ...     "status": "success",
        ...     "entity": "patient",
        ...     "record_id": 1,
        ... })
    """
    details = dict(details)
    if "timestamp" not in details:
        details["timestamp"] = time.time()
    
    if "correlation_id" not in details:
        details["correlation_id"] = str(uuid.uuid4())
    
    message_parts = [f"AUDIT [{event_type}]"]
    
    field_order = [
        "status",
        "entity",
        "record_id",
        "data_file",
        "record_count",
        "error_message",
        "correlation_id",
    ]
    
    for field in field_order:
        if field in details:
            message_parts.append(f"{field}={details[field]}")
    
    for key, value in details.items():
        if key not in field_order and key != "timestamp":
            message_parts.append(f"{key}={value}")
    
    audit_message = " | ".join(message_parts)
    
    if details.get("status") == "failure":
        logger.error(audit_message)
    else:
        logger.info(audit_message)
