"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# Policies for an unreadable data file
CORRUPT_STORE_POLICIES = ["prompt", "fail", "reset"]


class StoreConfig(BaseModel):
    """Configuration for the persisted JSON document.
    
    Attributes:
        data_file: Path of the JSON document holding every record
        on_corrupt: What to do when the document exists but cannot be parsed:
            prompt (ask the operator), fail (abort), reset (start empty)
        backup_corrupt: Rename an unreadable document aside before it is
            overwritten by the first save
    """
    
    data_file: Path = Field(
        default=Path("data.json"),
        description="Persisted document path"
    )
    on_corrupt: str = Field(
        default="prompt",
        description="Corrupt document policy: prompt, fail, or reset"
    )
    backup_corrupt: bool = Field(
        default=True,
        description="Keep a renamed copy of a discarded document"
    )
    
    @field_validator("on_corrupt")
    @classmethod
    def validate_on_corrupt(cls, v: str) -> str:
        """Validate corrupt document policy.
        
        Raises:
            ValueError: If policy is not one of: prompt, fail, reset
        """
        v_lower = v.lower()
        if v_lower not in CORRUPT_STORE_POLICIES:
            raise ValueError(
                f"Invalid on_corrupt: {v}. "
                f"Must be one of: {', '.join(CORRUPT_STORE_POLICIES)}"
            )
        return v_lower


class LoggingConfig(BaseModel):
    """Configuration for logging.
    
    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to redact PII from logs
    """
    
    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/hospital-records.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=False,
        description="Redact PII from logs"
    )
    
    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.
        
        Args:
            v: Log level string
            
        Returns:
            Validated log level (uppercase)
            
        Raises:
            ValueError: If log level is not valid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.
    
    Attributes:
        store: Persisted document configuration
        logging: Logging configuration
    """
    
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
