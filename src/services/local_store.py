"""
Local key/value store persisted as a JSON file
"""

import json
import os
from typing import Any, Dict, Optional
from pathlib import Path
from src.config.settings import settings
from src.utils.logger import logger


class LocalStore:
    """Key/value storage kept in a JSON file (falls back to memory on I/O errors)"""

    def __init__(self, store_file: Optional[str] = None):
        """
        Initialize local store

        Args:
            store_file: Path to store file (optional, uses settings default)
        """
        if store_file is None:
            store_file = os.getenv("STORAGE_FILE_PATH", settings.STORAGE_FILE_PATH)
        self.store_file = Path(store_file)
        self.logger = logger
        self._data: Dict[str, Any] = {}
        self._load()

    def _load(self):
        """Load store from file"""
        try:
            if self.store_file.exists():
                with open(self.store_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                self._data = data if isinstance(data, dict) else {}
                self.logger.debug(f"Loaded {len(self._data)} keys from local store")
            else:
                self._data = {}
        except (OSError, ValueError) as e:
            self.logger.warning(f"Failed to load local store: {e}")
            self._data = {}

    def _save(self):
        """Save store to file"""
        try:
            self.store_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.store_file, 'w', encoding='utf-8') as f:
                json.dump(self._data, f, ensure_ascii=False, indent=2, default=str)
        except OSError as e:
            self.logger.warning(f"Failed to save local store: {e}. Using in-memory store only.")

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any):
        self._data[key] = value
        self._save()

    def remove(self, key: str):
        if key in self._data:
            del self._data[key]
            self._save()

    def __contains__(self, key: str) -> bool:
        return key in self._data
