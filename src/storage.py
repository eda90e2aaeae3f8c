"""Persistence helpers (key-value store, load/save) for the to-do list.

The whole collection lives under one key ("todos") as a serialized JSON
array of {"text", "completed"} objects. The key-value store itself is a
single JSON object file; values other than strings are kept as they are
but never count as a valid collection.

Decisions:
- Anything under the key that is not the expected shape counts as absent
  data: load() logs it and returns an empty list.
- save() always writes the full collection; write errors propagate.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from models import Task

logger = logging.getLogger(__name__)

STORAGE_KEY = 'todos'


class DeserializationError(ValueError):
    """Persisted value under the storage key is malformed."""


class KeyValueStore:
    """Durable key-value map kept in one JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable store file %s (%s); treating as empty", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file %s is not a JSON object; treating as empty", self.path)
            return {}
        return {str(k): v for k, v in data.items()}

    def _write_all(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=self.path.name, suffix='.tmp', dir=str(self.path.parent))
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get_item(self, key: str) -> Optional[Any]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def decode_tasks(raw: Any) -> List[Task]:
    """Parse a serialized collection; raise DeserializationError on any mismatch."""
    if not isinstance(raw, str):
        raise DeserializationError(f"expected a serialized string, got {type(raw).__name__}")
    try:
        data: Any = json.loads(raw)
    except ValueError as exc:
        raise DeserializationError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise DeserializationError(f"expected a list, got {type(data).__name__}")
    tasks: List[Task] = []
    for pos, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise DeserializationError(f"entry {pos} is not an object")
        text = entry.get('text')
        completed = entry.get('completed')
        if not isinstance(text, str) or not isinstance(completed, bool):
            raise DeserializationError(f"entry {pos} lacks text/completed")
        tasks.append(Task(text=text, completed=completed))
    return tasks


class Storage:
    """Load/save the full task collection under STORAGE_KEY."""

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        self.store = store
        self.key = key

    def load(self) -> List[Task]:
        """Return the saved collection.

        Missing key -> empty list. Malformed value -> logged, empty list.
        Never raises for bad data.
        """
        raw = self.store.get_item(self.key)
        if raw is None:
            return []
        try:
            return decode_tasks(raw)
        except DeserializationError as exc:
            logger.warning("Discarding saved todos under %r: %s", self.key, exc)
            return []

    def save(self, tasks: Iterable[Task]) -> None:
        """Persist the full collection, replacing whatever was stored."""
        self.store.set_item(self.key, encode_tasks(tasks))

    def clear(self) -> None:
        self.store.remove_item(self.key)
