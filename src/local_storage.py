"""
Durable local key-value storage for reviews and calibration state.
"""

import os
import re
import logging
import tempfile

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r'^[A-Za-z0-9_.-]+$')

class JsonFileStorage:
    """
    Key-value store backed by one file per key inside a directory.

    Values are opaque strings (the callers store JSON text). Writes go
    through a temporary file and os.replace, so a reader sees either the
    old value or the new one.
    """

    def __init__(self, directory):
        self.directory = directory
        os.makedirs(self.directory, exist_ok=True)

    def _path(self, key):
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return os.path.join(self.directory, f"{key}.json")

    def get_item(self, key):
        """Return the stored string for key, or None if nothing is stored."""
        path = self._path(key)
        if not os.path.exists(path):
            return None
        with open(path, mode='r', encoding='utf-8') as file:
            return file.read()

    def set_item(self, key, value):
        path = self._path(key)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, mode='w', encoding='utf-8') as file:
                file.write(value)
            os.replace(tmp_path, path)
        except OSError:
            logger.error("Failed to write storage key %s in %s", key, self.directory)
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def remove_item(self, key):
        path = self._path(key)
        if os.path.exists(path):
            os.remove(path)

    def clear(self):
        for name in os.listdir(self.directory):
            if name.endswith(".json"):
                os.remove(os.path.join(self.directory, name))

class MemoryStorage:
    """In-process storage with the same surface as JsonFileStorage."""

    def __init__(self, initial=None):
        self._items = dict(initial or {})

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = value

    def remove_item(self, key):
        self._items.pop(key, None)

    def clear(self):
        self._items.clear()
