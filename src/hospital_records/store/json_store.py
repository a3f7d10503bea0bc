"""JSON persistence gateway.

The whole Application is written to one pretty-printed JSON document and read
back at startup. Writes go to a temporary file in the same directory that is
then renamed over the document, so a failed write never leaves a half-written
document behind.
"""

import json
import logging
import os
import stat
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Union

from hospital_records.logging_audit import log_audit_event
from hospital_records.models.application import Application
from hospital_records.store.schema import check_document
from hospital_records.utils.exceptions import CorruptStoreError, PersistenceWriteError

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path("data.json")

# Corrupt document policies understood by JsonStore.load
ON_CORRUPT_FAIL = "fail"
ON_CORRUPT_RESET = "reset"


class JsonStore:
    """Reads and writes the hospital dataset as a single JSON document.
    
    Attributes:
        path: Location of the persisted document
        
    Example:
        >>> store = JsonStore(Path("data.json"))
        >>> application = store.load(on_corrupt="reset")
        >>> store.save(application)
    """
    
    def __init__(self, path: Union[str, Path] = DEFAULT_DATA_FILE) -> None:
        self.path = Path(path)
    
    def exists(self) -> bool:
        return self.path.exists()
    
    def load(self, on_corrupt: str = ON_CORRUPT_FAIL) -> Application:
        """Load the dataset from disk.
        
        A missing document yields an empty Application. A document that cannot
        be parsed is handled according to ``on_corrupt``.
        
        Args:
            on_corrupt: "fail" to raise CorruptStoreError, "reset" to log a
                warning and return an empty Application
                
        Returns:
            Loaded (or empty) Application
            
        Raises:
            CorruptStoreError: If the document is malformed and on_corrupt is "fail"
            ValueError: If on_corrupt is not a known policy
        """
        if on_corrupt not in (ON_CORRUPT_FAIL, ON_CORRUPT_RESET):
            raise ValueError(
                f"Invalid on_corrupt policy: {on_corrupt}. "
                f"Must be one of: {ON_CORRUPT_FAIL}, {ON_CORRUPT_RESET}"
            )
        
        if not self.path.exists():
            logger.info(f"Data file not found: {self.path}. Starting with an empty dataset.")
            return Application()
        
        try:
            application = self._read()
        except CorruptStoreError as e:
            log_audit_event("STORE_CORRUPT", {
                "status": "failure",
                "data_file": self.path,
                "error_message": e.reason,
                "policy": on_corrupt,
            })
            if on_corrupt == ON_CORRUPT_FAIL:
                raise
            logger.warning(
                f"Discarding unreadable data file {self.path} ({e.reason}). "
                f"Starting with an empty dataset; previous records will be "
                f"overwritten on the next save."
            )
            return Application()
        
        logger.info(
            f"Loaded {len(application.patients)} patients, {len(application.staff)} staff, "
            f"{len(application.appointments)} appointments from {self.path}"
        )
        return application
    
    def _read(self) -> Application:
        """Parse the document.
        
        Raises:
            CorruptStoreError: If the document cannot be read or decoded
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(
                self.path, f"invalid JSON at line {e.lineno}, column {e.colno}"
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise CorruptStoreError(self.path, str(e)) from e
        
        try:
            check_document(data)
            return Application.from_dict(data)
        except KeyError as e:
            raise CorruptStoreError(self.path, f"missing field {e}") from e
        except (TypeError, ValueError, AttributeError) as e:
            raise CorruptStoreError(self.path, str(e)) from e
    
    def save(self, application: Application) -> None:
        """Write the whole dataset, replacing the previous document atomically.
        
        Raises:
            PersistenceWriteError: If the document cannot be written
        """
        content = json.dumps(application.to_dict(), indent=2, ensure_ascii=False)
        directory = self.path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            # keep the permissions of the document being replaced
            if self.path.exists():
                os.chmod(tmp_name, stat.S_IMODE(os.stat(self.path).st_mode))
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            log_audit_event("STORE_SAVED", {
                "status": "failure",
                "data_file": self.path,
                "error_message": e,
            })
            raise PersistenceWriteError(self.path, str(e)) from e
        
        logger.debug(f"Saved dataset to {self.path} ({len(content)} bytes)")
    
    def quarantine(self) -> Path:
        """Move the current document aside as ``<name>.corrupt-<timestamp>``.
        
        Returns:
            Path of the renamed document
            
        Raises:
            PersistenceWriteError: If the rename fails
        """
        stamp = datetime.now().strftime("%Y%m%d%H%M%S")
        target = self.path.with_name(f"{self.path.name}.corrupt-{stamp}")
        try:
            os.replace(self.path, target)
        except OSError as e:
            raise PersistenceWriteError(target, str(e)) from e
        logger.warning(f"Moved unreadable data file {self.path} to {target}")
        return target
