"""JSON document file storage

Each store is one JSON file holding a single top-level list, e.g.
{"users": [...]}. Writes go to a temporary file first and replace the
original, so a crash mid-write leaves the previous version intact.
"""

import asyncio
import json
import logging
import os
import tempfile
from typing import Any, Dict, List

from src.app.repositories.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class JsonDocumentStore:

    def __init__(self, path: str, collection: str):
        """
        Args:
            path: JSON file path (parent directories are created on save)
            collection: Top-level key holding the record list
        """
        self.path = path
        self.collection = collection
        self.lock = asyncio.Lock()

    def load(self) -> List[Dict[str, Any]]:
        """
        Read all records

        A missing file is an empty collection. An unreadable file is logged
        and treated as empty.
        """
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading data from {self.path}: {e}")
            return []
        return list(data.get(self.collection, []))

    def save(self, records: List[Dict[str, Any]]) -> None:
        """
        Replace all records

        Raises:
            PersistenceError: If the file cannot be written
        """
        directory = os.path.dirname(self.path) or "."
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({self.collection: records}, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error saving data to {self.path}: {e}")
            raise PersistenceError(f"Failed to write {self.path}: {e}", path=self.path) from e
