"""
File-based action log using a single JSON array.

The whole recording is rewritten on every write: serialized to a temporary
file beside the target, fsynced, then moved over the target with os.replace.
"""

import json
import logging
import os
import tempfile
from typing import Any, List, Optional, Sequence

from ..core.actions import StandardAction
from ..core.errors import ActionLogError, MalformedActionError
from .action_log import ActionLog
from .entry import ACTION_KEY, TIMESTAMP_KEY, RecordedEntry

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "recording.json"


class FileActionLog(ActionLog):
    """
    File-based whole-log action store.

    Storage format: pretty-printed JSON array
    Each element: {"timestamp": 12.5, "action": {"type": ..., "payload": ..., "isTypedAction": ...}}

    Guarantees:
    - Atomic replace (readers see the old log or the new one, never a mix)
    - Fsync before replace (durability)
    - Tolerant reads (malformed entries skipped, missing file is empty)
    """

    def __init__(self, directory: str, filename: str = DEFAULT_FILENAME) -> None:
        """
        Initialize file action log.

        Args:
            directory: Directory holding recordings (created on first write)
            filename: Name of the file this log writes
        """
        self.directory = directory
        self.filename = filename
        self.path = os.path.join(directory, filename)

    def write(self, entries: Sequence[RecordedEntry]) -> None:
        """
        Replace the recording file with entries.

        Raises:
            ActionLogError: If serialization or any filesystem step fails
        """
        tmp_path: Optional[str] = None
        try:
            data = json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False)

            os.makedirs(self.directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".recording-", suffix=".json", dir=self.directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())

            os.replace(tmp_path, self.path)
            tmp_path = None
        except (OSError, TypeError, ValueError) as ex:
            raise ActionLogError(f"failed to write {self.path}: {ex}") from ex
        finally:
            if tmp_path is not None:
                try:
                    os.remove(tmp_path)
                except OSError:
                    pass

    def resolve(self, identifier: Optional[str] = None) -> str:
        """Path of a recording: absolute identifiers as-is, others inside the directory."""
        if identifier is None:
            return self.path
        if os.path.isabs(identifier):
            return identifier
        return os.path.join(self.directory, identifier)

    def load(self, identifier: Optional[str] = None) -> List[RecordedEntry]:
        """
        Read a recording.

        Args:
            identifier: Recording file name or path (None = this log's file)

        Returns:
            Entries in file order; [] if the file is missing, unreadable or not
            a JSON array
        """
        path = self.resolve(identifier)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info("No recording at %s", path)
            return []
        except (OSError, ValueError) as ex:
            logger.warning("Unreadable recording %s: %s", path, ex)
            return []

        if not isinstance(data, list):
            logger.warning("Recording %s is not a JSON array", path)
            return []

        entries = []
        for idx, element in enumerate(data):
            entry = _entry_from_json(element)
            if entry is None:
                logger.warning("Skipping malformed entry %d in %s", idx, path)
                continue
            entries.append(entry)
        return entries


def _entry_from_json(element: Any) -> Optional[RecordedEntry]:
    if not isinstance(element, dict) or ACTION_KEY not in element:
        return None
    try:
        action = StandardAction.from_dict(element[ACTION_KEY])
    except MalformedActionError:
        return None

    timestamp = element.get(TIMESTAMP_KEY)
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        timestamp = 0.0
    return RecordedEntry(timestamp=float(timestamp), action=action)
