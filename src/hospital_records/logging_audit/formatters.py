"""Custom log formatters for Hospital Records.

This module provides specialized formatters for logging, including PII redaction.
"""

import logging
import re
from typing import List, Tuple


class PIIRedactingFormatter(logging.Formatter):
    """Formatter that redacts Personally Identifiable Information from log messages.
    
    Redacts national health numbers (13 to 15 digit runs, optionally spaced)
    and patient names written as ``name=...`` or ``Patient: Surname Name``.
    
    Attributes:
        redact_pii: Whether to enable PII redaction
        patterns: List of (regex_pattern, replacement_text) tuples for redaction
        
    Example:
        >>> formatter = PIIRedactingFormatter(redact_pii=True)
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """
    
    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_pii: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_pii = redact_pii
        
        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            # Health numbers: 1 84 12 75 123 456 78 or 184127512345678
            (re.compile(r'\b\d(?:[ ]?\d){12,14}\b'), '[HEALTH-NUMBER-REDACTED]'),
            
            # name="Jean", surname='Dupont', name=Jean
            (re.compile(r'\b(name|surname)=["\']?([^"\'|,]+?)["\']?(?=\s*(?:\||,|$))'),
             r'\1=[NAME-REDACTED]'),
            
            # "Patient: Dupont Jean"
            (re.compile(r'(Patient):\s+([A-Z][\w\'-]+(?:\s+[A-Z][\w\'-]+)+)'),
             r'\1: [NAME-REDACTED]'),
        ]
    
    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional PII redaction.
        
        Args:
            record: Log record to format
            
        Returns:
            Formatted log message with PII redacted if enabled
        """
        original = super().format(record)
        
        if self.redact_pii:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)
        
        return original
